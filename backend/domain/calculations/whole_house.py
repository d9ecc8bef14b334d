"""
Whole-House Envelope Energy
Walls, windows, ceiling and infiltration for the rated house and for the
HERS reference house. Both run the same algorithm on the same geometry;
only the envelope values differ.
"""

import logging
from dataclasses import dataclass

from domain.core.clamps import opaque_wall_fraction
from domain.core.materials import LAYER_R
from domain.core.models import (
    ClimateData,
    HERSParams,
    HouseGeometry,
    HVACParams,
    SeasonalLoad,
    WholeHouseEnergyResult,
)
from .annual_loads import conduction_load_btu, cooling_kwh, heating_kwh
from .infiltration import ach50_to_achnat, infiltration_load_btu

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DerivedGeometry:
    volume_ft3: float
    gross_wall_area_ft2: float
    window_area_ft2: float
    ceiling_area_ft2: float


@dataclass(frozen=True)
class EnvelopeSpec:
    """Envelope values that distinguish rated from reference"""
    wall_r: float
    window_u: float  # NFRC U, films included
    ceiling_r: float  # insulation only, films added here
    ach50: float


def derive_geometry(geometry: HouseGeometry) -> DerivedGeometry:
    """Volume, window and ceiling areas from the net opaque wall area"""
    ratio = geometry.window_to_wall_ratio
    gross = geometry.net_wall_area_ft2 / opaque_wall_fraction(ratio)
    return DerivedGeometry(
        volume_ft3=geometry.volume_ft3,
        gross_wall_area_ft2=gross,
        window_area_ft2=gross * ratio,
        ceiling_area_ft2=geometry.conditioned_floor_area_ft2 / max(1, geometry.story_count),
    )


def calc_envelope_energy(
    envelope: EnvelopeSpec,
    geometry: HouseGeometry,
    climate: ClimateData,
    hvac: HVACParams,
    ach50_to_nat_factor: float,
) -> WholeHouseEnergyResult:
    """
    Annual heating/cooling energy for a whole house envelope.

    Every surface term is computed before the totals are summed.
    """
    derived = derive_geometry(geometry)
    hdd, cdd = climate.hdd65, climate.cdd65

    u_wall = 1.0 / envelope.wall_r
    u_window = envelope.window_u
    # Wall R already embeds air films; give the ceiling the same treatment
    u_ceiling = 1.0 / (envelope.ceiling_r + LAYER_R["air_films"])

    wall = SeasonalLoad(
        heating_btu=conduction_load_btu(u_wall, geometry.net_wall_area_ft2, hdd),
        cooling_btu=conduction_load_btu(u_wall, geometry.net_wall_area_ft2, cdd),
    )
    window = SeasonalLoad(
        heating_btu=conduction_load_btu(u_window, derived.window_area_ft2, hdd),
        cooling_btu=conduction_load_btu(u_window, derived.window_area_ft2, cdd),
    )
    ceiling = SeasonalLoad(
        heating_btu=conduction_load_btu(u_ceiling, derived.ceiling_area_ft2, hdd),
        cooling_btu=conduction_load_btu(u_ceiling, derived.ceiling_area_ft2, cdd),
    )

    ach_nat = ach50_to_achnat(envelope.ach50, ach50_to_nat_factor)
    infiltration = SeasonalLoad(
        heating_btu=infiltration_load_btu(ach_nat, derived.volume_ft3, hdd),
        cooling_btu=infiltration_load_btu(ach_nat, derived.volume_ft3, cdd),
    )

    qh_total = wall.heating_btu + window.heating_btu + ceiling.heating_btu + infiltration.heating_btu
    qc_total = wall.cooling_btu + window.cooling_btu + ceiling.cooling_btu + infiltration.cooling_btu

    result = WholeHouseEnergyResult(
        wall=wall,
        window=window,
        ceiling=ceiling,
        infiltration=infiltration,
        heating_total_btu=qh_total,
        cooling_total_btu=qc_total,
        heating_kwh=heating_kwh(qh_total, hvac),
        cooling_kwh=cooling_kwh(qc_total, hvac),
        ach_nat=ach_nat,
        window_area_ft2=derived.window_area_ft2,
        ceiling_area_ft2=derived.ceiling_area_ft2,
        volume_ft3=derived.volume_ft3,
    )

    logger.debug(
        f"Envelope R-{envelope.wall_r:.1f} wall, U-{u_window:.2f} window, "
        f"R-{envelope.ceiling_r:.0f} ceiling, {envelope.ach50:g} ACH50: "
        f"{result.heating_kwh:,.0f} kWh heat, {result.cooling_kwh:,.0f} kWh cool"
    )
    return result


def calc_whole_house_kwh(
    wall_r: float,
    ach50: float,
    geometry: HouseGeometry,
    climate: ClimateData,
    hvac: HVACParams,
    hers: HERSParams,
) -> WholeHouseEnergyResult:
    """Rated house: scenario wall and ACH50 with the shared rated window/ceiling"""
    envelope = EnvelopeSpec(
        wall_r=wall_r,
        window_u=hers.rated.window_u,
        ceiling_r=hers.rated.ceiling_r,
        ach50=ach50,
    )
    return calc_envelope_energy(envelope, geometry, climate, hvac, hers.ach50_to_nat_factor)


def calc_reference_whole_house_kwh(
    reference_wall_r: float,
    geometry: HouseGeometry,
    climate: ClimateData,
    hvac: HVACParams,
    hers: HERSParams,
) -> WholeHouseEnergyResult:
    """Reference house: reference wall, ACH50, window U and ceiling R on the rated geometry"""
    reference = hers.reference
    envelope = EnvelopeSpec(
        wall_r=reference_wall_r,
        window_u=reference.window_u,
        ceiling_r=reference.ceiling_r,
        ach50=reference.ach50,
    )
    return calc_envelope_energy(envelope, geometry, climate, hvac, hers.ach50_to_nat_factor)
