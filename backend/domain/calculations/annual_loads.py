"""
Annual Degree-Day Loads
Conduction and infiltration loads for a wall area, converted to heat pump /
air conditioner electricity and cost.

Key formulas:
- Conduction: Q = U · A · DD · 24   [BTU/yr]  (U in BTU/hr·ft²·°F, DD in °F·days)
- Heating kWh: (Q / 3412) / COP
- Cooling kWh: Q / (SEER · 1000)
"""

import logging

from domain.core.clamps import clamp_cooling_seer, clamp_heat_pump_cop
from domain.core.models import (
    AirtightnessSpec,
    ClimateData,
    EconomicParams,
    HVACParams,
    LoadResult,
)
from .infiltration import ach50_to_achnat, infiltration_load_btu

logger = logging.getLogger(__name__)

BTU_PER_KWH = 3412.0
HOURS_PER_DAY = 24.0
SEER_WH_PER_KWH = 1000.0


def conduction_load_btu(u_value: float, area_ft2: float, degree_days: float) -> float:
    """Annual conduction load through one surface"""
    return u_value * area_ft2 * degree_days * HOURS_PER_DAY


def heating_kwh(heating_btu: float, hvac: HVACParams) -> float:
    return heating_btu / BTU_PER_KWH / clamp_heat_pump_cop(hvac.heat_pump_cop)


def cooling_kwh(cooling_btu: float, hvac: HVACParams) -> float:
    return cooling_btu / (clamp_cooling_seer(hvac.cooling_seer) * SEER_WH_PER_KWH)


def energy_cost(kwh: float, economics: EconomicParams) -> float:
    return kwh * economics.electricity_price_per_kwh


def calc_loads_and_costs(
    wall_area_ft2: float,
    volume_ft3: float,
    climate: ClimateData,
    effective_r: float,
    airtightness: AirtightnessSpec,
    economics: EconomicParams,
    hvac: HVACParams,
) -> LoadResult:
    """
    Wall conduction plus whole-house infiltration for one wall assembly.

    Windows and ceilings are left out; see whole_house for the full
    envelope.
    """
    u_wall = 1.0 / effective_r

    qh_cond = conduction_load_btu(u_wall, wall_area_ft2, climate.hdd65)
    qc_cond = conduction_load_btu(u_wall, wall_area_ft2, climate.cdd65)

    ach_nat = ach50_to_achnat(airtightness.ach50, airtightness.ach50_to_nat_factor)
    qh_inf = infiltration_load_btu(ach_nat, volume_ft3, climate.hdd65)
    qc_inf = infiltration_load_btu(ach_nat, volume_ft3, climate.cdd65)

    qh_total = qh_cond + qh_inf
    qc_total = qc_cond + qc_inf

    kwh_heat = heating_kwh(qh_total, hvac)
    kwh_cool = cooling_kwh(qc_total, hvac)

    logger.debug(
        f"Wall loads R-{effective_r:.1f}, ACHnat {ach_nat:.2f}: "
        f"heating {qh_total:,.0f} BTU ({kwh_heat:,.0f} kWh), "
        f"cooling {qc_total:,.0f} BTU ({kwh_cool:,.0f} kWh)"
    )

    return LoadResult(
        heating_conduction_btu=qh_cond,
        cooling_conduction_btu=qc_cond,
        heating_infiltration_btu=qh_inf,
        cooling_infiltration_btu=qc_inf,
        heating_total_btu=qh_total,
        cooling_total_btu=qc_total,
        ach_nat=ach_nat,
        heating_kwh=kwh_heat,
        cooling_kwh=kwh_cool,
        heating_cost=energy_cost(kwh_heat, economics),
        cooling_cost=energy_cost(kwh_cool, economics),
    )
