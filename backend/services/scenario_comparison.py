"""
Scenario Comparison Service
Evaluates two wall / air-sealing designs against the same shared inputs:
whole-wall R, wall + infiltration costs, whole-house energy and costs,
estimated HERS index against the reference house, and an STC estimate.

Inputs are frozen records, so evaluations are memoized on the input pair.
"""

import logging
from dataclasses import dataclass, replace
from functools import lru_cache
from typing import Dict, Any, Tuple

from domain.calculations.acoustics import estimate_stc
from domain.calculations.annual_loads import (
    BTU_PER_KWH,
    SEER_WH_PER_KWH,
    calc_loads_and_costs,
    energy_cost,
)
from domain.calculations.hers import estimate_hers_index
from domain.calculations.parallel_path import calc_whole_wall_r
from domain.calculations.whole_house import (
    calc_reference_whole_house_kwh,
    calc_whole_house_kwh,
)
from domain.core.clamps import ClampResult, clamp_cooling_seer, get_sanity_clamps
from domain.core.materials import (
    AIR_TIGHTNESS_PRESETS,
    AirtightnessPreset,
    FramingKind,
    InsulationKind,
    SheathingKind,
    catalog_key,
)
from domain.core.models import (
    AirtightnessSpec,
    LoadResult,
    ScenarioInputs,
    SharedInputs,
    WholeHouseEnergyResult,
    WholeWallResult,
)
from services.error_types import CatalogLookupError

logger = logging.getLogger(__name__)


DEFAULT_SCENARIO_A = ScenarioInputs(
    name="Scenario A",
    framing=FramingKind.STUD_2X4,
    cavity_insulation=InsulationKind.FIBERGLASS,
    exterior_sheathing=SheathingKind.OSB_WRAP,
    interior_thermal_break=False,
    ach50=5.0,
    airtightness_preset="builder",
)

DEFAULT_SCENARIO_B = ScenarioInputs(
    name="Scenario B",
    framing=FramingKind.STUD_2X6,
    cavity_insulation=InsulationKind.MINERAL_WOOL,
    exterior_sheathing=SheathingKind.INSULATED_R6,
    interior_thermal_break=True,
    ach50=3.0,
    airtightness_preset="energystar",
)


@dataclass(frozen=True)
class ScenarioResult:
    """Everything the presentation layer shows for one scenario"""
    scenario: ScenarioInputs
    whole_wall: WholeWallResult
    wall_loads: LoadResult
    rated: WholeHouseEnergyResult
    reference_wall: WholeWallResult
    reference: WholeHouseEnergyResult
    heating_cost: float
    cooling_cost: float
    hers_index: float
    stc: int
    heating_mmbtu: float
    cooling_mmbtu: float
    clamps_applied: Tuple[ClampResult, ...] = ()

    @property
    def annual_cost(self) -> float:
        """Whole-house heating + cooling cost"""
        return self.heating_cost + self.cooling_cost

    def to_json(self) -> Dict[str, Any]:
        return {
            "name": self.scenario.name,
            "framing": catalog_key(self.scenario.framing),
            "cavity_insulation": catalog_key(self.scenario.cavity_insulation),
            "exterior_sheathing": catalog_key(self.scenario.exterior_sheathing),
            "interior_thermal_break": self.scenario.interior_thermal_break,
            "ach50": self.scenario.ach50,
            "airtightness_preset": self.scenario.airtightness_preset,
            "framing_fraction": self.scenario.framing_fraction,
            "whole_wall": self.whole_wall.to_json(),
            "wall_loads": self.wall_loads.to_json(),
            "rated": self.rated.to_json(),
            "reference_wall": self.reference_wall.to_json(),
            "reference": self.reference.to_json(),
            "heating_cost": self.heating_cost,
            "cooling_cost": self.cooling_cost,
            "annual_cost": self.annual_cost,
            "hers_index": self.hers_index,
            "stc": self.stc,
            "heating_mmbtu": self.heating_mmbtu,
            "cooling_mmbtu": self.cooling_mmbtu,
            "clamps_applied": [c.to_json() for c in self.clamps_applied],
        }


@dataclass(frozen=True)
class ComparisonResult:
    a: ScenarioResult
    b: ScenarioResult
    annual_cost_difference: float  # B - A, wall + infiltration costs
    whole_house_cost_difference: float  # B - A, whole-house costs
    verdict: str

    def to_json(self) -> Dict[str, Any]:
        return {
            "a": self.a.to_json(),
            "b": self.b.to_json(),
            "annual_cost_difference": self.annual_cost_difference,
            "whole_house_cost_difference": self.whole_house_cost_difference,
            "verdict": self.verdict,
        }


def resolve_airtightness_preset(key: str) -> AirtightnessPreset:
    """Look up an air-tightness preset by key"""
    preset = AIR_TIGHTNESS_PRESETS.get(key)
    if preset is None:
        raise CatalogLookupError("airtightness preset", key, list(AIR_TIGHTNESS_PRESETS))
    return preset


def apply_airtightness_preset(scenario: ScenarioInputs, key: str) -> ScenarioInputs:
    """New scenario whose ACH50 comes from the named preset"""
    preset = resolve_airtightness_preset(key)
    return replace(scenario, airtightness_preset=preset.key, ach50=preset.ach50)


def cost_verdict(difference: float) -> str:
    if difference < 0:
        return "Scenario B saves"
    if difference > 0:
        return "Scenario A saves"
    return "No difference"


def reporting_mmbtu(rated: WholeHouseEnergyResult, cooling_seer: float) -> Tuple[float, float]:
    """
    Heating and cooling figures in MMBTU for display.

    Cooling multiplies kWh back by SEER × 1000; this is a reporting
    convenience, not a physical conversion.
    """
    heating = rated.heating_kwh * BTU_PER_KWH / 1e6
    cooling = rated.cooling_kwh * SEER_WH_PER_KWH * clamp_cooling_seer(cooling_seer) / 1e6
    return heating, cooling


@lru_cache(maxsize=256)
def evaluate_scenario(shared: SharedInputs, scenario: ScenarioInputs) -> ScenarioResult:
    """
    Evaluate one scenario.

    The reference wall reuses this scenario's framing fraction, so the
    reference house changes with it.
    """
    geometry, climate, hvac, hers = shared.geometry, shared.climate, shared.hvac, shared.hers

    whole_wall = calc_whole_wall_r(scenario.wall_config())

    wall_loads = calc_loads_and_costs(
        wall_area_ft2=geometry.net_wall_area_ft2,
        volume_ft3=geometry.volume_ft3,
        climate=climate,
        effective_r=whole_wall.effective_r,
        airtightness=AirtightnessSpec(scenario.ach50, hers.ach50_to_nat_factor),
        economics=shared.economics,
        hvac=hvac,
    )

    rated = calc_whole_house_kwh(
        wall_r=whole_wall.effective_r,
        ach50=scenario.ach50,
        geometry=geometry,
        climate=climate,
        hvac=hvac,
        hers=hers,
    )

    reference_wall = calc_whole_wall_r(hers.reference.wall_config(scenario.framing_fraction))
    reference = calc_reference_whole_house_kwh(
        reference_wall_r=reference_wall.effective_r,
        geometry=geometry,
        climate=climate,
        hvac=hvac,
        hers=hers,
    )

    hers_index = estimate_hers_index(
        rated_kwh_heat=rated.heating_kwh,
        rated_kwh_cool=rated.cooling_kwh,
        ref_kwh_heat=reference.heating_kwh,
        ref_kwh_cool=reference.cooling_kwh,
        other_kwh=hers.other_site_energy_kwh,
    )

    heating_mmbtu, cooling_mmbtu = reporting_mmbtu(rated, hvac.cooling_seer)

    result = ScenarioResult(
        scenario=scenario,
        whole_wall=whole_wall,
        wall_loads=wall_loads,
        rated=rated,
        reference_wall=reference_wall,
        reference=reference,
        heating_cost=energy_cost(rated.heating_kwh, shared.economics),
        cooling_cost=energy_cost(rated.cooling_kwh, shared.economics),
        hers_index=hers_index,
        stc=estimate_stc(scenario.framing, scenario.cavity_insulation),
        heating_mmbtu=heating_mmbtu,
        cooling_mmbtu=cooling_mmbtu,
        clamps_applied=tuple(get_sanity_clamps().applied(hvac, geometry)),
    )

    logger.info(
        f"{scenario.name}: whole-wall R-{whole_wall.effective_r:.1f}, "
        f"HERS {hers_index:.0f}, ${result.annual_cost:,.0f}/yr whole-house"
    )
    return result


def compare_scenarios(
    shared: SharedInputs,
    a: ScenarioInputs = DEFAULT_SCENARIO_A,
    b: ScenarioInputs = DEFAULT_SCENARIO_B,
) -> ComparisonResult:
    """Evaluate both scenarios and summarise which one costs less"""
    result_a = evaluate_scenario(shared, a)
    result_b = evaluate_scenario(shared, b)

    diff = result_b.wall_loads.annual_cost - result_a.wall_loads.annual_cost
    whole_house_diff = result_b.annual_cost - result_a.annual_cost

    return ComparisonResult(
        a=result_a,
        b=result_b,
        annual_cost_difference=diff,
        whole_house_cost_difference=whole_house_diff,
        verdict=cost_verdict(diff),
    )
