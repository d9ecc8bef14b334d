"""
Envelope Material Library
Per-inch R-values, fixed layer R-values and the framing / insulation /
sheathing / air-tightness catalogs the calculators read from.

All tables are read-only. Changing a constant here changes every
downstream wall, load, energy and HERS figure.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class FramingKind(str, Enum):
    """Stud sizes offered for wall framing"""
    STUD_2X4 = "2x4"
    STUD_2X6 = "2x6"


class InsulationKind(str, Enum):
    """Cavity insulation options"""
    FIBERGLASS = "fiberglass"
    MINERAL_WOOL = "mineralwool"
    FLASH_BATT = "flashbatt"  # 1" closed-cell foam + fiberglass batt
    OPEN_CELL_FOAM = "ocspf"
    CLOSED_CELL_FOAM = "ccspf"


class SheathingKind(str, Enum):
    """Exterior sheathing options"""
    OSB_WRAP = "osbwrap"
    TAPED_OSB = "zip"
    INSULATED_R3 = "zipr3"
    INSULATED_R6 = "zipr6"


# Nominal R-value per inch of material (ft²·°F·hr/BTU per inch)
R_PER_INCH: Mapping[str, float] = MappingProxyType({
    "wood": 1.25,
    "fiberglass": 3.7,
    "mineralwool": 4.2,
    "ocspf": 3.6,
    "ccspf": 6.5,
    "polyiso": 6.0,
})

# Fixed layers (ft²·°F·hr/BTU)
LAYER_R: Mapping[str, float] = MappingProxyType({
    "interior_film": 0.68,
    "exterior_film": 0.17,
    "air_films": 0.85,  # interior + exterior, used for ceilings
    "drywall_half": 0.45,
    "osb_7_16": 0.62,  # reference structural sheathing
    "siding": 0.6,
    "interior_polyiso_half": 3.0,  # continuous interior thermal break
})

# Per-inch R for single-material cavity fills
CAVITY_R_PER_INCH: Mapping[InsulationKind, float] = MappingProxyType({
    InsulationKind.FIBERGLASS: R_PER_INCH["fiberglass"],
    InsulationKind.MINERAL_WOOL: R_PER_INCH["mineralwool"],
    InsulationKind.OPEN_CELL_FOAM: R_PER_INCH["ocspf"],
    InsulationKind.CLOSED_CELL_FOAM: R_PER_INCH["ccspf"],
})


@dataclass(frozen=True)
class FramingOption:
    key: FramingKind
    label: str
    depth_in: float


@dataclass(frozen=True)
class InsulationOption:
    key: InsulationKind
    label: str


@dataclass(frozen=True)
class SheathingOption:
    key: SheathingKind
    label: str
    r_continuous: float  # 0 for plain structural sheathing


@dataclass(frozen=True)
class AirtightnessPreset:
    key: str
    label: str
    ach50: float


FRAMING_OPTIONS: Mapping[FramingKind, FramingOption] = MappingProxyType({
    FramingKind.STUD_2X4: FramingOption(FramingKind.STUD_2X4, '2x4 (3.5" depth)', 3.5),
    FramingKind.STUD_2X6: FramingOption(FramingKind.STUD_2X6, '2x6 (5.5" depth)', 5.5),
})

CAVITY_INSULATION_TYPES: Mapping[InsulationKind, InsulationOption] = MappingProxyType({
    InsulationKind.FIBERGLASS: InsulationOption(InsulationKind.FIBERGLASS, "Fiberglass Batts"),
    InsulationKind.MINERAL_WOOL: InsulationOption(InsulationKind.MINERAL_WOOL, "Mineral Wool Batts"),
    InsulationKind.FLASH_BATT: InsulationOption(InsulationKind.FLASH_BATT, 'Flash & Batt (1" CC + FG)'),
    InsulationKind.OPEN_CELL_FOAM: InsulationOption(InsulationKind.OPEN_CELL_FOAM, "Open-Cell Spray Foam (full)"),
    InsulationKind.CLOSED_CELL_FOAM: InsulationOption(InsulationKind.CLOSED_CELL_FOAM, "Closed-Cell Spray Foam (full)"),
})

EXTERIOR_SHEATHING: Mapping[SheathingKind, SheathingOption] = MappingProxyType({
    SheathingKind.OSB_WRAP: SheathingOption(SheathingKind.OSB_WRAP, "OSB + Housewrap", 0.0),
    SheathingKind.TAPED_OSB: SheathingOption(SheathingKind.TAPED_OSB, "Taped OSB (ZIP System)", 0.0),
    SheathingKind.INSULATED_R3: SheathingOption(
        SheathingKind.INSULATED_R3, "Exterior Insulated Sheathing (ZIP-R, R-3)", 3.0
    ),
    SheathingKind.INSULATED_R6: SheathingOption(
        SheathingKind.INSULATED_R6, "Exterior Insulated Sheathing (ZIP-R, R-6)", 6.0
    ),
})

AIR_TIGHTNESS_PRESETS: Mapping[str, AirtightnessPreset] = MappingProxyType({
    "leaky": AirtightnessPreset("leaky", "Leaky (~7 ACH50)", 7.0),
    "builder": AirtightnessPreset("builder", "Builder Standard (~5 ACH50)", 5.0),
    "energystar": AirtightnessPreset("energystar", "Energy Star (~3 ACH50)", 3.0),
    "passive": AirtightnessPreset("passive", "Passive House (~0.6 ACH50)", 0.6),
})

DEFAULT_AIRTIGHTNESS_PRESET = "builder"
DEFAULT_FRAMING = FramingKind.STUD_2X4


def coerce_framing(kind) -> Optional[FramingKind]:
    """Map a key or enum to FramingKind, None when it is not in the catalog"""
    if isinstance(kind, FramingKind):
        return kind
    try:
        return FramingKind(kind)
    except ValueError:
        return None


def coerce_insulation(kind) -> Optional[InsulationKind]:
    """Map a key or enum to InsulationKind, None when it is not in the catalog"""
    if isinstance(kind, InsulationKind):
        return kind
    try:
        return InsulationKind(kind)
    except ValueError:
        return None


def coerce_sheathing(kind) -> Optional[SheathingKind]:
    """Map a key or enum to SheathingKind, None when it is not in the catalog"""
    if isinstance(kind, SheathingKind):
        return kind
    try:
        return SheathingKind(kind)
    except ValueError:
        return None


def framing_depth(framing) -> float:
    """Cavity depth in inches for a stud size; unknown sizes get the 2x4 depth"""
    option = FRAMING_OPTIONS.get(coerce_framing(framing))
    if option is None:
        return FRAMING_OPTIONS[DEFAULT_FRAMING].depth_in
    return option.depth_in


def catalog_key(kind) -> str:
    """Catalog key of an enum member, or the raw value for out-of-catalog input"""
    return kind.value if isinstance(kind, Enum) else str(kind)


def sheathing_r(kind) -> float:
    """
    R-value carried by the sheathing layer itself.

    Insulated sheathing carries its own continuous R; plain and unknown
    sheathing fall back to 7/16" OSB.
    """
    option = EXTERIOR_SHEATHING.get(coerce_sheathing(kind))
    if option is not None and option.r_continuous > 0:
        return option.r_continuous
    return LAYER_R["osb_7_16"]
