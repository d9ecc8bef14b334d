"""
Value records for envelope energy calculations
Every record is frozen: calculators build new results, nothing is mutated
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Optional

from .materials import FramingKind, InsulationKind, SheathingKind, framing_depth


@dataclass(frozen=True)
class WallAssemblyConfig:
    """Wall build-up fed to the parallel-path calculator"""
    framing_depth_in: float
    cavity_insulation: InsulationKind = InsulationKind.FIBERGLASS
    exterior_sheathing: SheathingKind = SheathingKind.OSB_WRAP
    interior_thermal_break: bool = False
    framing_fraction: float = 0.23  # strictly between 0 and 1


@dataclass(frozen=True)
class WholeWallResult:
    """Parallel-path wall R-values"""
    effective_r: float
    stud_path_r: float
    cavity_path_r: float

    @property
    def effective_u(self) -> float:
        return 1.0 / self.effective_r

    def to_json(self) -> Dict[str, Any]:
        return {
            "effective_r": self.effective_r,
            "effective_u": self.effective_u,
            "stud_path_r": self.stud_path_r,
            "cavity_path_r": self.cavity_path_r,
        }


@dataclass(frozen=True)
class ClimateData:
    """Annual degree days, base 65°F"""
    hdd65: float
    cdd65: float
    location_name: str = ""


@dataclass(frozen=True)
class HouseGeometry:
    net_wall_area_ft2: float  # opaque wall, windows excluded
    conditioned_floor_area_ft2: float
    avg_ceiling_height_ft: float
    story_count: int = 1
    window_to_wall_ratio: float = 0.15  # fraction of GROSS wall area

    @property
    def volume_ft3(self) -> float:
        return self.conditioned_floor_area_ft2 * self.avg_ceiling_height_ft


@dataclass(frozen=True)
class EconomicParams:
    electricity_price_per_kwh: float = 0.14


@dataclass(frozen=True)
class HVACParams:
    """Heat pump heating, electric cooling"""
    heat_pump_cop: float = 3.0
    cooling_seer: float = 15.0


@dataclass(frozen=True)
class AirtightnessSpec:
    ach50: float
    ach50_to_nat_factor: float = 0.07


@dataclass(frozen=True)
class RatedEnvelopeSpec:
    """Window and ceiling values shared by every rated scenario"""
    window_u: float = 0.30
    ceiling_r: float = 38.0


@dataclass(frozen=True)
class HERSReferenceSpec:
    """Code-minimum comparison house, same geometry as the rated house"""
    framing: FramingKind = FramingKind.STUD_2X4
    cavity_insulation: InsulationKind = InsulationKind.FIBERGLASS
    exterior_sheathing: SheathingKind = SheathingKind.OSB_WRAP
    interior_thermal_break: bool = False
    ach50: float = 7.0
    window_u: float = 0.40
    ceiling_r: float = 38.0

    def wall_config(self, framing_fraction: float) -> WallAssemblyConfig:
        """Reference wall built with the rated scenario's framing fraction"""
        return WallAssemblyConfig(
            framing_depth_in=framing_depth(self.framing),
            cavity_insulation=self.cavity_insulation,
            exterior_sheathing=self.exterior_sheathing,
            interior_thermal_break=self.interior_thermal_break,
            framing_fraction=framing_fraction,
        )


@dataclass(frozen=True)
class HERSParams:
    ach50_to_nat_factor: float = 0.07
    rated: RatedEnvelopeSpec = field(default_factory=RatedEnvelopeSpec)
    reference: HERSReferenceSpec = field(default_factory=HERSReferenceSpec)
    # DHW, lighting, appliances; identical on both sides of the ratio
    other_site_energy_kwh: float = 6000.0


@dataclass(frozen=True)
class LoadResult:
    """Annual wall conduction + infiltration loads, energy and cost"""
    heating_conduction_btu: float
    cooling_conduction_btu: float
    heating_infiltration_btu: float
    cooling_infiltration_btu: float
    heating_total_btu: float
    cooling_total_btu: float
    ach_nat: float
    heating_kwh: float
    cooling_kwh: float
    heating_cost: float
    cooling_cost: float

    @property
    def annual_cost(self) -> float:
        return self.heating_cost + self.cooling_cost

    def to_json(self) -> Dict[str, Any]:
        return {
            "heating_conduction_btu": self.heating_conduction_btu,
            "cooling_conduction_btu": self.cooling_conduction_btu,
            "heating_infiltration_btu": self.heating_infiltration_btu,
            "cooling_infiltration_btu": self.cooling_infiltration_btu,
            "heating_total_btu": self.heating_total_btu,
            "cooling_total_btu": self.cooling_total_btu,
            "ach_nat": self.ach_nat,
            "heating_kwh": self.heating_kwh,
            "cooling_kwh": self.cooling_kwh,
            "heating_cost": self.heating_cost,
            "cooling_cost": self.cooling_cost,
            "annual_cost": self.annual_cost,
        }


@dataclass(frozen=True)
class SeasonalLoad:
    """Annual heating and cooling BTU for one load component"""
    heating_btu: float
    cooling_btu: float

    def to_json(self) -> Dict[str, float]:
        return {"heating_btu": self.heating_btu, "cooling_btu": self.cooling_btu}


@dataclass(frozen=True)
class WholeHouseEnergyResult:
    """Walls + windows + ceiling + infiltration for one house"""
    wall: SeasonalLoad
    window: SeasonalLoad
    ceiling: SeasonalLoad
    infiltration: SeasonalLoad
    heating_total_btu: float
    cooling_total_btu: float
    heating_kwh: float
    cooling_kwh: float
    ach_nat: float
    window_area_ft2: float
    ceiling_area_ft2: float
    volume_ft3: float

    @property
    def total_kwh(self) -> float:
        return self.heating_kwh + self.cooling_kwh

    def to_json(self) -> Dict[str, Any]:
        return {
            "wall": self.wall.to_json(),
            "window": self.window.to_json(),
            "ceiling": self.ceiling.to_json(),
            "infiltration": self.infiltration.to_json(),
            "heating_total_btu": self.heating_total_btu,
            "cooling_total_btu": self.cooling_total_btu,
            "heating_kwh": self.heating_kwh,
            "cooling_kwh": self.cooling_kwh,
            "ach_nat": self.ach_nat,
            "window_area_ft2": self.window_area_ft2,
            "ceiling_area_ft2": self.ceiling_area_ft2,
            "volume_ft3": self.volume_ft3,
        }


@dataclass(frozen=True)
class SharedInputs:
    """Inputs common to both design scenarios"""
    climate: ClimateData = field(
        default_factory=lambda: ClimateData(3450, 1730, "Fuquay-Varina, NC (CZ4)")
    )
    geometry: HouseGeometry = field(
        default_factory=lambda: HouseGeometry(3000, 3500, 9, 2, 0.15)
    )
    economics: EconomicParams = field(default_factory=EconomicParams)
    hvac: HVACParams = field(default_factory=HVACParams)
    hers: HERSParams = field(default_factory=HERSParams)


@dataclass(frozen=True)
class ScenarioInputs:
    """One user-defined wall / air-sealing design"""
    name: str
    framing: FramingKind = FramingKind.STUD_2X4
    cavity_insulation: InsulationKind = InsulationKind.FIBERGLASS
    exterior_sheathing: SheathingKind = SheathingKind.OSB_WRAP
    interior_thermal_break: bool = False
    ach50: float = 5.0
    airtightness_preset: Optional[str] = "builder"
    framing_fraction: float = 0.23

    def wall_config(self) -> WallAssemblyConfig:
        return WallAssemblyConfig(
            framing_depth_in=framing_depth(self.framing),
            cavity_insulation=self.cavity_insulation,
            exterior_sheathing=self.exterior_sheathing,
            interior_thermal_break=self.interior_thermal_break,
            framing_fraction=self.framing_fraction,
        )
