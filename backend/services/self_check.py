"""
Engine Self-Check
A fixed battery of invariant checks over the calculators. Runs once when
this module is first imported; SELF_CHECK_RESULTS is read-only afterwards
and is what the diagnostics endpoint displays.
"""

import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, List, Tuple

from domain.calculations.annual_loads import calc_loads_and_costs
from domain.calculations.hers import estimate_hers_index
from domain.calculations.parallel_path import calc_cavity_r, calc_whole_wall_r
from domain.calculations.whole_house import (
    calc_reference_whole_house_kwh,
    calc_whole_house_kwh,
)
from domain.core.materials import InsulationKind, R_PER_INCH, SheathingKind
from domain.core.models import (
    AirtightnessSpec,
    ClimateData,
    EconomicParams,
    HERSParams,
    HouseGeometry,
    HVACParams,
    WallAssemblyConfig,
)
from services.error_types import SelfCheckFailure
from utils.logging_utils import timed_operation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelfCheckResult:
    name: str
    passed: bool

    def to_json(self) -> Dict[str, object]:
        return {"name": self.name, "pass": self.passed}


# Common check inputs
CLIMATE = ClimateData(hdd65=3450, cdd65=1730)
GEOMETRY = HouseGeometry(
    net_wall_area_ft2=3000,
    conditioned_floor_area_ft2=3500,
    avg_ceiling_height_ft=9,
    story_count=2,
    window_to_wall_ratio=0.15,
)
ECONOMICS = EconomicParams(electricity_price_per_kwh=0.14)
HVAC = HVACParams(heat_pump_cop=3.0, cooling_seer=15.0)
HERS = HERSParams()


def _is_finite(*values: float) -> bool:
    return all(math.isfinite(v) for v in values)


def _wall(depth_in: float):
    return calc_whole_wall_r(WallAssemblyConfig(
        framing_depth_in=depth_in,
        cavity_insulation=InsulationKind.FIBERGLASS,
        exterior_sheathing=SheathingKind.OSB_WRAP,
        interior_thermal_break=False,
        framing_fraction=0.23,
    ))


def _rated(ach50: float):
    return calc_whole_house_kwh(_wall(3.5).effective_r, ach50, GEOMETRY, CLIMATE, HVAC, HERS)


def _reference():
    return calc_reference_whole_house_kwh(_wall(3.5).effective_r, GEOMETRY, CLIMATE, HVAC, HERS)


def check_2x6_beats_2x4() -> bool:
    return _wall(5.5).effective_r > _wall(3.5).effective_r


def check_rated_finite() -> bool:
    rated = _rated(5.0)
    return _is_finite(rated.heating_kwh, rated.cooling_kwh)


def check_reference_finite() -> bool:
    reference = _reference()
    return _is_finite(reference.heating_kwh, reference.cooling_kwh)


def check_tighter_house_heats_less() -> bool:
    return _rated(3.0).heating_kwh < _rated(7.0).heating_kwh


def check_hers_parity() -> bool:
    reference = _reference()
    index = estimate_hers_index(
        rated_kwh_heat=reference.heating_kwh,
        rated_kwh_cool=reference.cooling_kwh,
        ref_kwh_heat=reference.heating_kwh,
        ref_kwh_cool=reference.cooling_kwh,
        other_kwh=HERS.other_site_energy_kwh,
    )
    return abs(index - 100.0) <= 1e-6


def check_flash_batt_minimum() -> bool:
    return calc_cavity_r(1.0, InsulationKind.FLASH_BATT) == R_PER_INCH["ccspf"]


def check_hers_guard() -> bool:
    return estimate_hers_index(0.0, 0.0, 0.0, 0.0, 0.0) == 100.0


def check_cost_is_kwh_times_price() -> bool:
    loads = calc_loads_and_costs(
        wall_area_ft2=GEOMETRY.net_wall_area_ft2,
        volume_ft3=GEOMETRY.volume_ft3,
        climate=CLIMATE,
        effective_r=_wall(3.5).effective_r,
        airtightness=AirtightnessSpec(ach50=5.0, ach50_to_nat_factor=0.07),
        economics=ECONOMICS,
        hvac=HVAC,
    )
    return (
        loads.heating_cost == loads.heating_kwh * ECONOMICS.electricity_price_per_kwh
        and loads.cooling_cost == loads.cooling_kwh * ECONOMICS.electricity_price_per_kwh
    )


SELF_CHECKS: Tuple[Tuple[str, Callable[[], bool]], ...] = (
    ("R(2x6 FG) > R(2x4 FG)", check_2x6_beats_2x4),
    ("rated kWh finite", check_rated_finite),
    ("reference kWh finite", check_reference_finite),
    ("ACH50 3 < 7 reduces kWhHeat", check_tighter_house_heats_less),
    ("HERS 100 when rated==ref", check_hers_parity),
    ("Flash & batt at 1in equals CC foam R", check_flash_batt_minimum),
    ("HERS guard returns 100 for empty reference", check_hers_guard),
    ("Cost equals kWh x price", check_cost_is_kwh_times_price),
)


@timed_operation("self_check")
def run_self_checks(checks=SELF_CHECKS) -> Tuple[SelfCheckResult, ...]:
    """
    Run every check; a check that raises counts as failed.

    Returns:
        One SelfCheckResult per check, in battery order
    """
    results: List[SelfCheckResult] = []
    for name, check in checks:
        try:
            passed = bool(check())
        except Exception:
            logger.exception(f"Self-check '{name}' raised")
            passed = False
        results.append(SelfCheckResult(name=name, passed=passed))

    failed = [r.name for r in results if not r.passed]
    if failed:
        logger.warning(str(SelfCheckFailure(failed)))
    else:
        logger.info(f"All {len(results)} self-checks passed")
    return tuple(results)


def summarize(results: Tuple[SelfCheckResult, ...]) -> Dict[str, int]:
    passed = sum(1 for r in results if r.passed)
    return {"total": len(results), "passed": passed, "failed": len(results) - passed}


SELF_CHECK_RESULTS: Tuple[SelfCheckResult, ...] = run_self_checks()
