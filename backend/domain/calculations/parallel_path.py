"""
Parallel Path Wall R-Value Calculator
Cavity R from insulation type and depth, then whole-wall effective R from
the stud path and the cavity path combined by area-weighted conductance
"""

import logging

from domain.core.materials import (
    CAVITY_R_PER_INCH,
    InsulationKind,
    LAYER_R,
    R_PER_INCH,
    coerce_insulation,
    sheathing_r,
)
from domain.core.models import WallAssemblyConfig, WholeWallResult

logger = logging.getLogger(__name__)

# Depth of the closed-cell "flash" coat in a flash & batt cavity
FLASH_COAT_DEPTH_IN = 1.0


def calc_cavity_r(depth_in: float, insulation) -> float:
    """
    R-value of a filled stud cavity.

    Args:
        depth_in: Cavity depth in inches
        insulation: InsulationKind or its key; anything outside the
            catalog is treated as fiberglass

    Returns:
        Cavity R-value (ft²·°F·hr/BTU)
    """
    kind = coerce_insulation(insulation)

    if kind is InsulationKind.FLASH_BATT:
        # First inch is closed-cell foam, the rest fiberglass batt.
        # Shallow cavities still get the full inch of foam.
        foam_r = FLASH_COAT_DEPTH_IN * R_PER_INCH["ccspf"]
        batt_r = max(0.0, depth_in - FLASH_COAT_DEPTH_IN) * R_PER_INCH["fiberglass"]
        return foam_r + batt_r

    if kind is None:
        logger.debug(f"Unknown cavity insulation {insulation!r}, using fiberglass")

    per_inch = CAVITY_R_PER_INCH.get(kind, R_PER_INCH["fiberglass"])
    return depth_in * per_inch


def calc_common_layers_r() -> float:
    """Air films, drywall and siding; present in both paths. Sheathing is NOT included."""
    return (
        LAYER_R["interior_film"]
        + LAYER_R["exterior_film"]
        + LAYER_R["drywall_half"]
        + LAYER_R["siding"]
    )


def calc_whole_wall_r(wall: WallAssemblyConfig) -> WholeWallResult:
    """
    Effective whole-wall R using the parallel path method.

    U_eff = f / R_stud_path + (1 - f) / R_cavity_path, R_eff = 1 / U_eff

    Sheathing is a distinct layer, added exactly once to each path.
    """
    depth = wall.framing_depth_in
    r_cavity = calc_cavity_r(depth, wall.cavity_insulation)
    r_stud = depth * R_PER_INCH["wood"]

    r_sheathing = sheathing_r(wall.exterior_sheathing)
    r_thermal_break = LAYER_R["interior_polyiso_half"] if wall.interior_thermal_break else 0.0
    r_common = calc_common_layers_r()

    r_stud_path = r_common + r_thermal_break + r_sheathing + r_stud
    r_cavity_path = r_common + r_thermal_break + r_sheathing + r_cavity

    framing_fraction = wall.framing_fraction
    u_effective = framing_fraction / r_stud_path + (1.0 - framing_fraction) / r_cavity_path
    r_effective = 1.0 / u_effective

    logger.debug(f"  Stud path: R-{r_stud_path:.2f} ({framing_fraction:.1%} of area)")
    logger.debug(f"  Cavity path: R-{r_cavity_path:.2f} ({1.0 - framing_fraction:.1%} of area)")
    logger.debug(f"  Effective R-value: {r_effective:.2f} (U-{u_effective:.3f})")

    return WholeWallResult(
        effective_r=r_effective,
        stud_path_r=r_stud_path,
        cavity_path_r=r_cavity_path,
    )


def thermal_bridging_penalty(wall: WallAssemblyConfig) -> float:
    """
    Percent increase in U caused by framing, relative to a wall that is
    all cavity path.
    """
    result = calc_whole_wall_r(wall)
    clear_u = 1.0 / result.cavity_path_r
    return (result.effective_u - clear_u) / clear_u * 100
