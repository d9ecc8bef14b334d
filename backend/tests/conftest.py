"""
Pytest configuration and fixtures
"""
import pytest
from fastapi.testclient import TestClient

from domain.core.materials import InsulationKind, SheathingKind
from domain.core.models import (
    ClimateData,
    EconomicParams,
    HERSParams,
    HouseGeometry,
    HVACParams,
    SharedInputs,
    WallAssemblyConfig,
)


@pytest.fixture
def climate():
    """Fuquay-Varina, NC (CZ4)"""
    return ClimateData(hdd65=3450, cdd65=1730)


@pytest.fixture
def geometry():
    """Two-story 3500 ft² house with 3000 ft² of opaque wall"""
    return HouseGeometry(
        net_wall_area_ft2=3000,
        conditioned_floor_area_ft2=3500,
        avg_ceiling_height_ft=9,
        story_count=2,
        window_to_wall_ratio=0.15,
    )


@pytest.fixture
def hvac():
    return HVACParams(heat_pump_cop=3.0, cooling_seer=15.0)


@pytest.fixture
def economics():
    return EconomicParams(electricity_price_per_kwh=0.14)


@pytest.fixture
def hers_params():
    return HERSParams()


@pytest.fixture
def shared_inputs(climate, geometry, economics, hvac, hers_params):
    return SharedInputs(
        climate=climate,
        geometry=geometry,
        economics=economics,
        hvac=hvac,
        hers=hers_params,
    )


@pytest.fixture
def wall_2x4_fiberglass():
    """2x4 fiberglass, OSB + housewrap, no thermal break"""
    return WallAssemblyConfig(
        framing_depth_in=3.5,
        cavity_insulation=InsulationKind.FIBERGLASS,
        exterior_sheathing=SheathingKind.OSB_WRAP,
        interior_thermal_break=False,
        framing_fraction=0.23,
    )


@pytest.fixture
def client():
    from app.main import app
    return TestClient(app)
