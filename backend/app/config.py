import logging
import sys
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List

from core.environment import (
    get_env_bool,
    get_env_float,
    get_env_int,
    get_env_list,
    load_environment,
)
from services.error_types import ConfigurationError

DEFAULT_ALLOWED_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
]


@dataclass(frozen=True)
class Settings:
    """Service settings; they only fill request defaults, never engine constants"""
    debug: bool = False
    allowed_origins: List[str] = field(default_factory=lambda: list(DEFAULT_ALLOWED_ORIGINS))
    ach50_to_nat_factor: float = 0.07
    other_site_energy_kwh: float = 6000.0
    electricity_price_per_kwh: float = 0.14
    port: int = 8000

    def validate(self) -> "Settings":
        if self.ach50_to_nat_factor <= 0:
            raise ConfigurationError(
                "ACH50_TO_NAT_FACTOR must be positive",
                {"ach50_to_nat_factor": self.ach50_to_nat_factor},
            )
        if self.other_site_energy_kwh < 0:
            raise ConfigurationError(
                "OTHER_SITE_ENERGY_KWH must not be negative",
                {"other_site_energy_kwh": self.other_site_energy_kwh},
            )
        if self.electricity_price_per_kwh < 0:
            raise ConfigurationError(
                "ELECTRICITY_PRICE_PER_KWH must not be negative",
                {"electricity_price_per_kwh": self.electricity_price_per_kwh},
            )
        return self


def load_settings() -> Settings:
    """Read settings from the environment (after .env files)"""
    load_environment()
    return Settings(
        debug=get_env_bool("DEBUG", False),
        allowed_origins=get_env_list("ALLOWED_ORIGINS", default=list(DEFAULT_ALLOWED_ORIGINS)),
        ach50_to_nat_factor=get_env_float("ACH50_TO_NAT_FACTOR", 0.07),
        other_site_energy_kwh=get_env_float("OTHER_SITE_ENERGY_KWH", 6000.0),
        electricity_price_per_kwh=get_env_float("ELECTRICITY_PRICE_PER_KWH", 0.14),
        port=get_env_int("PORT", 8000),
    ).validate()


@lru_cache()
def get_settings() -> Settings:
    return load_settings()


# Logging configuration
def setup_logging(debug: bool = False):
    """Configure application logging"""
    log_level = logging.DEBUG if debug else logging.INFO

    # Configure root logger
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        # replaces handlers from any earlier basicConfig
        force=True,
    )

    # Suppress noisy third-party loggers
    logging.getLogger('uvicorn.access').setLevel(logging.WARNING)
    logging.getLogger('httpx').setLevel(logging.WARNING)

    return logging.getLogger('envelope_energy')
