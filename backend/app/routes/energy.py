from fastapi import APIRouter, Depends
import logging

from app.config import Settings, get_settings
from app.models.schemas import (
    CompareRequest,
    DiagnosticsResponse,
    HERSRequest,
    HERSResponse,
    WallAssemblyRequest,
    WholeWallResponse,
)
from domain.calculations.hers import estimate_hers_index
from domain.calculations.parallel_path import calc_whole_wall_r, thermal_bridging_penalty
from domain.core.materials import (
    AIR_TIGHTNESS_PRESETS,
    CAVITY_INSULATION_TYPES,
    EXTERIOR_SHEATHING,
    FRAMING_OPTIONS,
)
from services.error_types import CatalogLookupError, InputValidationError
from services.scenario_comparison import compare_scenarios, resolve_airtightness_preset
from services.self_check import SELF_CHECK_RESULTS, summarize
from utils.logging_utils import log_operation

logger = logging.getLogger(__name__)

router = APIRouter(tags=["energy"])


@router.get("/catalog")
async def get_catalog():
    """Framing, insulation, sheathing and air-tightness options"""
    return {
        "framing": [
            {"key": o.key.value, "label": o.label, "depth_in": o.depth_in}
            for o in FRAMING_OPTIONS.values()
        ],
        "cavity_insulation": [
            {"key": o.key.value, "label": o.label}
            for o in CAVITY_INSULATION_TYPES.values()
        ],
        "exterior_sheathing": [
            {"key": o.key.value, "label": o.label, "r_continuous": o.r_continuous}
            for o in EXTERIOR_SHEATHING.values()
        ],
        "airtightness_presets": [
            {"key": p.key, "label": p.label, "ach50": p.ach50}
            for p in AIR_TIGHTNESS_PRESETS.values()
        ],
    }


@router.get("/catalog/airtightness/{key}")
async def get_airtightness_preset(key: str):
    preset = resolve_airtightness_preset(key)
    return {"key": preset.key, "label": preset.label, "ach50": preset.ach50}


@router.get("/diagnostics", response_model=DiagnosticsResponse, response_model_by_alias=True)
async def get_diagnostics():
    """Startup self-check results"""
    return {
        "results": [r.to_json() for r in SELF_CHECK_RESULTS],
        "summary": summarize(SELF_CHECK_RESULTS),
    }


@router.post("/wall", response_model=WholeWallResponse)
async def calculate_wall(request: WallAssemblyRequest):
    wall = request.to_domain()
    result = calc_whole_wall_r(wall)
    return WholeWallResponse(
        effective_r=result.effective_r,
        effective_u=result.effective_u,
        stud_path_r=result.stud_path_r,
        cavity_path_r=result.cavity_path_r,
        thermal_bridging_penalty_pct=thermal_bridging_penalty(wall),
    )


@router.post("/hers", response_model=HERSResponse)
async def calculate_hers(request: HERSRequest, settings: Settings = Depends(get_settings)):
    other = settings.other_site_energy_kwh if request.other_kwh is None else request.other_kwh
    return HERSResponse(hers_index=estimate_hers_index(
        rated_kwh_heat=request.rated_kwh_heat,
        rated_kwh_cool=request.rated_kwh_cool,
        ref_kwh_heat=request.ref_kwh_heat,
        ref_kwh_cool=request.ref_kwh_cool,
        other_kwh=other,
    ))


@router.post("/compare")
async def compare(request: CompareRequest, settings: Settings = Depends(get_settings)):
    """Compare two scenarios on whole-wall R, costs and estimated HERS"""
    shared = request.shared.to_domain(settings)

    scenarios = []
    for schema in (request.scenario_a, request.scenario_b):
        # Preset key is checked even when an explicit ach50 overrides it
        try:
            preset = resolve_airtightness_preset(schema.preset_key)
        except CatalogLookupError as e:
            raise InputValidationError(
                f"{schema.name}: unknown airtightness preset '{e.key}'", e.details
            ) from e
        scenarios.append(schema.to_domain(preset.ach50))

    with log_operation("compare_scenarios", {"a": scenarios[0].name, "b": scenarios[1].name}, logger):
        comparison = compare_scenarios(shared, scenarios[0], scenarios[1])
    return comparison.to_json()
