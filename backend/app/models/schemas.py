from pydantic import BaseModel, Field
from typing import Dict, List, Optional

from domain.core.materials import (
    DEFAULT_AIRTIGHTNESS_PRESET,
    FramingKind,
    InsulationKind,
    SheathingKind,
    framing_depth,
)
from domain.core.models import (
    ClimateData,
    EconomicParams,
    HERSParams,
    HERSReferenceSpec,
    HouseGeometry,
    HVACParams,
    RatedEnvelopeSpec,
    ScenarioInputs,
    SharedInputs,
    WallAssemblyConfig,
)


class WallAssemblyRequest(BaseModel):
    """Request model for a whole-wall R calculation"""
    framing: FramingKind = FramingKind.STUD_2X4
    framing_depth_in: Optional[float] = Field(None, gt=0, description="Overrides the stud depth")
    cavity_insulation: InsulationKind = InsulationKind.FIBERGLASS
    exterior_sheathing: SheathingKind = SheathingKind.OSB_WRAP
    interior_thermal_break: bool = False
    framing_fraction: float = Field(0.23, gt=0, lt=1)

    def to_domain(self) -> WallAssemblyConfig:
        depth = self.framing_depth_in if self.framing_depth_in is not None else framing_depth(self.framing)
        return WallAssemblyConfig(
            framing_depth_in=depth,
            cavity_insulation=self.cavity_insulation,
            exterior_sheathing=self.exterior_sheathing,
            interior_thermal_break=self.interior_thermal_break,
            framing_fraction=self.framing_fraction,
        )


class WholeWallResponse(BaseModel):
    """Response model for a whole-wall R calculation"""
    effective_r: float
    effective_u: float
    stud_path_r: float
    cavity_path_r: float
    thermal_bridging_penalty_pct: float


class ClimateSchema(BaseModel):
    hdd65: float = Field(3450, ge=0, description="Heating degree days, base 65°F")
    cdd65: float = Field(1730, ge=0, description="Cooling degree days, base 65°F")
    location_name: str = "Fuquay-Varina, NC (CZ4)"


class GeometrySchema(BaseModel):
    net_wall_area_ft2: float = Field(3000, gt=0)
    conditioned_floor_area_ft2: float = Field(3500, gt=0)
    avg_ceiling_height_ft: float = Field(9, gt=0)
    story_count: int = Field(2, ge=1)
    window_to_wall_ratio: float = Field(0.15, ge=0, lt=1)


class EconomicsSchema(BaseModel):
    electricity_price_per_kwh: Optional[float] = Field(None, ge=0)


class HVACSchema(BaseModel):
    heat_pump_cop: float = Field(3.0, gt=0)
    cooling_seer: float = Field(15.0, gt=0)


class ReferenceHouseSchema(BaseModel):
    framing: FramingKind = FramingKind.STUD_2X4
    cavity_insulation: InsulationKind = InsulationKind.FIBERGLASS
    exterior_sheathing: SheathingKind = SheathingKind.OSB_WRAP
    interior_thermal_break: bool = False
    ach50: float = Field(7.0, gt=0)
    window_u: float = Field(0.40, gt=0)
    ceiling_r: float = Field(38.0, ge=0)


class HERSInputsSchema(BaseModel):
    ach50_to_nat_factor: Optional[float] = Field(None, gt=0)
    rated_window_u: float = Field(0.30, gt=0)
    rated_ceiling_r: float = Field(38.0, ge=0)
    reference: ReferenceHouseSchema = Field(default_factory=ReferenceHouseSchema)
    other_site_energy_kwh: Optional[float] = Field(None, ge=0)


class SharedInputsSchema(BaseModel):
    climate: ClimateSchema = Field(default_factory=ClimateSchema)
    geometry: GeometrySchema = Field(default_factory=GeometrySchema)
    economics: EconomicsSchema = Field(default_factory=EconomicsSchema)
    hvac: HVACSchema = Field(default_factory=HVACSchema)
    hers: HERSInputsSchema = Field(default_factory=HERSInputsSchema)

    def to_domain(self, settings) -> SharedInputs:
        """Build SharedInputs, filling unset values from settings"""
        hers = self.hers
        reference = hers.reference
        price = self.economics.electricity_price_per_kwh
        factor = hers.ach50_to_nat_factor
        other = hers.other_site_energy_kwh
        return SharedInputs(
            climate=ClimateData(
                hdd65=self.climate.hdd65,
                cdd65=self.climate.cdd65,
                location_name=self.climate.location_name,
            ),
            geometry=HouseGeometry(
                net_wall_area_ft2=self.geometry.net_wall_area_ft2,
                conditioned_floor_area_ft2=self.geometry.conditioned_floor_area_ft2,
                avg_ceiling_height_ft=self.geometry.avg_ceiling_height_ft,
                story_count=self.geometry.story_count,
                window_to_wall_ratio=self.geometry.window_to_wall_ratio,
            ),
            economics=EconomicParams(
                electricity_price_per_kwh=settings.electricity_price_per_kwh if price is None else price,
            ),
            hvac=HVACParams(
                heat_pump_cop=self.hvac.heat_pump_cop,
                cooling_seer=self.hvac.cooling_seer,
            ),
            hers=HERSParams(
                ach50_to_nat_factor=settings.ach50_to_nat_factor if factor is None else factor,
                rated=RatedEnvelopeSpec(window_u=hers.rated_window_u, ceiling_r=hers.rated_ceiling_r),
                reference=HERSReferenceSpec(
                    framing=reference.framing,
                    cavity_insulation=reference.cavity_insulation,
                    exterior_sheathing=reference.exterior_sheathing,
                    interior_thermal_break=reference.interior_thermal_break,
                    ach50=reference.ach50,
                    window_u=reference.window_u,
                    ceiling_r=reference.ceiling_r,
                ),
                other_site_energy_kwh=settings.other_site_energy_kwh if other is None else other,
            ),
        )


class ScenarioSchema(BaseModel):
    """One design scenario; ACH50 comes from the preset when not given"""
    name: str
    framing: FramingKind = FramingKind.STUD_2X4
    cavity_insulation: InsulationKind = InsulationKind.FIBERGLASS
    exterior_sheathing: SheathingKind = SheathingKind.OSB_WRAP
    interior_thermal_break: bool = False
    airtightness_preset: Optional[str] = None
    ach50: Optional[float] = Field(None, gt=0)
    framing_fraction: float = Field(0.23, gt=0, lt=1)

    def to_domain(self, preset_ach50: Optional[float] = None) -> ScenarioInputs:
        ach50 = self.ach50 if self.ach50 is not None else preset_ach50
        return ScenarioInputs(
            name=self.name,
            framing=self.framing,
            cavity_insulation=self.cavity_insulation,
            exterior_sheathing=self.exterior_sheathing,
            interior_thermal_break=self.interior_thermal_break,
            ach50=ach50,
            airtightness_preset=self.airtightness_preset,
            framing_fraction=self.framing_fraction,
        )

    @property
    def preset_key(self) -> str:
        return self.airtightness_preset or DEFAULT_AIRTIGHTNESS_PRESET


def _default_scenario_a() -> ScenarioSchema:
    return ScenarioSchema(name="Scenario A", airtightness_preset="builder")


def _default_scenario_b() -> ScenarioSchema:
    return ScenarioSchema(
        name="Scenario B",
        framing=FramingKind.STUD_2X6,
        cavity_insulation=InsulationKind.MINERAL_WOOL,
        exterior_sheathing=SheathingKind.INSULATED_R6,
        interior_thermal_break=True,
        airtightness_preset="energystar",
    )


class CompareRequest(BaseModel):
    """Request model for a two-scenario comparison"""
    shared: SharedInputsSchema = Field(default_factory=SharedInputsSchema)
    scenario_a: ScenarioSchema = Field(default_factory=_default_scenario_a)
    scenario_b: ScenarioSchema = Field(default_factory=_default_scenario_b)


class HERSRequest(BaseModel):
    """Request model for a direct HERS index estimate"""
    rated_kwh_heat: float
    rated_kwh_cool: float
    ref_kwh_heat: float
    ref_kwh_cool: float
    other_kwh: Optional[float] = None


class HERSResponse(BaseModel):
    hers_index: float


class SelfCheckEntry(BaseModel):
    name: str
    passed: bool = Field(..., alias="pass")

    model_config = {"populate_by_name": True}


class DiagnosticsResponse(BaseModel):
    results: List[SelfCheckEntry]
    summary: Dict[str, int]
