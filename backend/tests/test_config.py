"""
Tests for environment helpers and service settings
"""

import logging
import os
import pytest

from app.config import DEFAULT_ALLOWED_ORIGINS, Settings, load_settings, setup_logging
from core.environment import (
    get_env_bool,
    get_env_float,
    get_env_int,
    get_env_list,
    load_environment,
)
from services.error_types import ConfigurationError, CriticalError


class TestEnvironmentHelpers:

    @pytest.mark.parametrize("raw,expected", [
        ("true", True), ("1", True), ("YES", True), ("on", True),
        ("false", False), ("0", False), ("no", False), ("off", False),
    ])
    def test_bool(self, monkeypatch, raw, expected):
        monkeypatch.setenv("ENVELOPE_FLAG", raw)
        assert get_env_bool("ENVELOPE_FLAG", not expected) is expected

    def test_bool_invalid_uses_default(self, monkeypatch):
        monkeypatch.setenv("ENVELOPE_FLAG", "maybe")
        assert get_env_bool("ENVELOPE_FLAG", True) is True

    def test_int_and_float(self, monkeypatch):
        monkeypatch.setenv("ENVELOPE_PORT", "9001")
        monkeypatch.setenv("ENVELOPE_PRICE", "0.21")
        assert get_env_int("ENVELOPE_PORT", 8000) == 9001
        assert get_env_float("ENVELOPE_PRICE", 0.14) == pytest.approx(0.21)

    def test_invalid_numbers_use_default(self, monkeypatch):
        monkeypatch.setenv("ENVELOPE_PORT", "eighty")
        monkeypatch.setenv("ENVELOPE_PRICE", "cheap")
        assert get_env_int("ENVELOPE_PORT", 8000) == 8000
        assert get_env_float("ENVELOPE_PRICE", 0.14) == 0.14

    def test_blank_numbers_use_default(self, monkeypatch):
        monkeypatch.setenv("ENVELOPE_PORT", "  ")
        assert get_env_int("ENVELOPE_PORT", 8000) == 8000
        assert get_env_float("ENVELOPE_PORT", 0.07) == 0.07

    def test_list(self, monkeypatch):
        monkeypatch.setenv("ENVELOPE_ORIGINS", "http://a.test, http://b.test,,")
        assert get_env_list("ENVELOPE_ORIGINS") == ["http://a.test", "http://b.test"]

    def test_list_unset_uses_default(self, monkeypatch):
        monkeypatch.delenv("ENVELOPE_ORIGINS", raising=False)
        assert get_env_list("ENVELOPE_ORIGINS", default=["x"]) == ["x"]

    def test_load_environment_prefers_local(self, tmp_path, monkeypatch):
        monkeypatch.setenv("ENVELOPE_TEST_VALUE", "process")
        (tmp_path / ".env").write_text("ENVELOPE_TEST_VALUE=base\n")
        (tmp_path / ".env.local").write_text("ENVELOPE_TEST_VALUE=local\n")

        loaded = load_environment(tmp_path)

        assert loaded == [".env", ".env.local"]
        assert os.environ["ENVELOPE_TEST_VALUE"] == "local"

    def test_load_environment_without_files(self, tmp_path):
        assert load_environment(tmp_path) == []


class TestSettings:

    def test_defaults(self):
        settings = Settings().validate()

        assert settings.ach50_to_nat_factor == 0.07
        assert settings.other_site_energy_kwh == 6000.0
        assert settings.electricity_price_per_kwh == 0.14
        assert settings.allowed_origins == DEFAULT_ALLOWED_ORIGINS

    @pytest.mark.parametrize("overrides", [
        {"ach50_to_nat_factor": 0.0},
        {"ach50_to_nat_factor": -0.05},
        {"other_site_energy_kwh": -1.0},
        {"electricity_price_per_kwh": -0.01},
    ])
    def test_invalid_values_raise(self, overrides):
        with pytest.raises(ConfigurationError) as exc_info:
            Settings(**overrides).validate()
        assert isinstance(exc_info.value, CriticalError)

    def test_load_settings_reads_environment(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("DEBUG", "true")
        monkeypatch.setenv("ACH50_TO_NAT_FACTOR", "0.05")
        monkeypatch.setenv("OTHER_SITE_ENERGY_KWH", "5000")
        monkeypatch.setenv("ELECTRICITY_PRICE_PER_KWH", "0.2")
        monkeypatch.setenv("ALLOWED_ORIGINS", "https://envelope.example")
        monkeypatch.setenv("PORT", "8123")

        settings = load_settings()

        assert settings.debug is True
        assert settings.ach50_to_nat_factor == 0.05
        assert settings.other_site_energy_kwh == 5000.0
        assert settings.electricity_price_per_kwh == 0.2
        assert settings.allowed_origins == ["https://envelope.example"]
        assert settings.port == 8123

    def test_load_settings_rejects_bad_factor(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("ACH50_TO_NAT_FACTOR", "0")
        with pytest.raises(ConfigurationError):
            load_settings()


class TestSetupLogging:

    @pytest.fixture
    def root_logger(self):
        root = logging.getLogger()
        saved_level, saved_handlers = root.level, list(root.handlers)
        yield root
        for handler in list(root.handlers):
            root.removeHandler(handler)
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)

    def test_debug_overrides_earlier_basic_config(self, root_logger):
        """Entry point configures INFO first; DEBUG settings must still win"""
        logging.basicConfig(level=logging.INFO)
        setup_logging(debug=True)

        assert root_logger.level == logging.DEBUG
        assert len(root_logger.handlers) == 1

    def test_info_by_default(self, root_logger):
        setup_logging()
        assert root_logger.level == logging.INFO

    def test_quiets_access_log(self, root_logger):
        setup_logging(debug=True)
        assert logging.getLogger("uvicorn.access").level == logging.WARNING
