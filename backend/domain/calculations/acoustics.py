"""
Wall STC heuristic for side-by-side comparison only; not a lab rating
"""

from types import MappingProxyType
from typing import Mapping

from domain.core.materials import FramingKind, InsulationKind, coerce_insulation

BASE_STC = 33  # empty 2x4 wall
STC_2X6_BONUS = 2
STC_MIN = 28
STC_MAX = 55

INSULATION_STC_BONUS: Mapping[InsulationKind, int] = MappingProxyType({
    InsulationKind.FIBERGLASS: 3,
    InsulationKind.MINERAL_WOOL: 5,
    InsulationKind.OPEN_CELL_FOAM: 2,
    InsulationKind.CLOSED_CELL_FOAM: 1,
    InsulationKind.FLASH_BATT: 4,
})


def estimate_stc(framing, insulation) -> int:
    stc = BASE_STC
    if framing == FramingKind.STUD_2X6:
        stc += STC_2X6_BONUS
    stc += INSULATION_STC_BONUS.get(coerce_insulation(insulation), 0)
    return max(STC_MIN, min(STC_MAX, stc))
