"""
Sanity Clamps
Floors that keep energy conversions and geometry finite for edge inputs.
The calculators apply them silently; SanityClamps reports which ones fired.
"""

import logging
from typing import List
from dataclasses import dataclass

from .models import HVACParams, HouseGeometry

logger = logging.getLogger(__name__)


MIN_HEAT_PUMP_COP = 0.5
MIN_COOLING_SEER = 8.0
# 1 - window_to_wall_ratio never drops below this when recovering gross wall area
MIN_OPAQUE_WALL_FRACTION = 0.01


@dataclass(frozen=True)
class ClampResult:
    """Result of applying one clamp"""
    value: float
    original_value: float
    clamp_applied: bool
    clamp_type: str
    reason: str

    def to_json(self):
        return {
            "value": self.value,
            "original_value": self.original_value,
            "clamp_applied": self.clamp_applied,
            "clamp_type": self.clamp_type,
            "reason": self.reason,
        }


def clamp_heat_pump_cop(cop: float) -> float:
    return max(MIN_HEAT_PUMP_COP, cop)


def clamp_cooling_seer(seer: float) -> float:
    return max(MIN_COOLING_SEER, seer)


def opaque_wall_fraction(window_to_wall_ratio: float) -> float:
    return max(MIN_OPAQUE_WALL_FRACTION, 1.0 - window_to_wall_ratio)


class SanityClamps:
    """
    Reports which input floors are active for a given evaluation.
    Values are never rejected, only floored.
    """

    def check_hvac(self, hvac: HVACParams) -> List[ClampResult]:
        return [
            self._result(
                hvac.heat_pump_cop,
                clamp_heat_pump_cop(hvac.heat_pump_cop),
                "heat_pump_cop",
                f"COP floored at {MIN_HEAT_PUMP_COP}",
            ),
            self._result(
                hvac.cooling_seer,
                clamp_cooling_seer(hvac.cooling_seer),
                "cooling_seer",
                f"SEER floored at {MIN_COOLING_SEER:g}",
            ),
        ]

    def check_geometry(self, geometry: HouseGeometry) -> List[ClampResult]:
        ratio = geometry.window_to_wall_ratio
        return [
            self._result(
                1.0 - ratio,
                opaque_wall_fraction(ratio),
                "opaque_wall_fraction",
                f"Opaque wall fraction floored at {MIN_OPAQUE_WALL_FRACTION}",
            ),
        ]

    def applied(self, hvac: HVACParams, geometry: HouseGeometry) -> List[ClampResult]:
        """Only the clamps that changed a value"""
        fired = [c for c in self.check_hvac(hvac) + self.check_geometry(geometry) if c.clamp_applied]
        for clamp in fired:
            logger.warning(
                f"Clamp {clamp.clamp_type}: {clamp.original_value:g} -> {clamp.value:g} ({clamp.reason})"
            )
        return fired

    @staticmethod
    def _result(original: float, value: float, clamp_type: str, reason: str) -> ClampResult:
        return ClampResult(
            value=value,
            original_value=original,
            clamp_applied=value != original,
            clamp_type=clamp_type,
            reason=reason,
        )


# Global instance
_sanity_clamps = None


def get_sanity_clamps() -> SanityClamps:
    """Get global sanity clamps instance"""
    global _sanity_clamps
    if _sanity_clamps is None:
        _sanity_clamps = SanityClamps()
    return _sanity_clamps
