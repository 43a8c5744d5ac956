"""Unit tests for projection_engine.core (settings, exceptions, logging)."""

import pytest
import structlog
from pydantic import ValidationError

from projection_engine.core.exceptions import (
    InvalidParameterError,
    NonConvergentSimulationError,
    ProjectionEngineError,
    SimulationError,
)
from projection_engine.core import logging as engine_logging
from projection_engine.core.logging import get_logger
from projection_engine.core.settings import EngineSettings, get_settings


class TestSettings:
    """Tests for EngineSettings."""

    def test_defaults(self):
        settings = EngineSettings()
        assert settings.max_simulation_months == 1200
        assert settings.reporting_decimals == 0
        assert settings.currency_symbol == "Rp"
        assert settings.log_json is False
        assert settings.default_extra_payment == 100_000

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("PROJECTION_MAX_SIMULATION_MONTHS", "600")
        assert get_settings().max_simulation_months == 600

    def test_cached(self):
        assert get_settings() is get_settings()

    def test_invalid_bound_rejected(self, monkeypatch):
        monkeypatch.setenv("PROJECTION_MAX_SIMULATION_MONTHS", "0")
        with pytest.raises(ValidationError):
            EngineSettings()


class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_invalid_parameter_message(self):
        err = InvalidParameterError("years", 0, "must be > 0")
        assert str(err) == "Invalid parameter 'years': 0 - must be > 0"
        assert isinstance(err, ProjectionEngineError)

    def test_invalid_parameter_without_reason(self):
        assert str(InvalidParameterError("debts", [])) == "Invalid parameter 'debts': []"

    def test_non_convergent_is_simulation_error(self):
        err = NonConvergentSimulationError("Snowball", 1200, 1_234_567.891)
        assert isinstance(err, SimulationError)
        assert "1200 months" in str(err)
        assert "1,234,567.89" in str(err)


class TestLogging:
    """Tests for structured logging setup."""

    def test_bound_logger(self):
        log = get_logger("tests")
        log.info("test_event", value=1)

    def test_unnamed_logger(self):
        assert get_logger() is not None

    @pytest.fixture
    def reconfigurable(self, monkeypatch):
        monkeypatch.setattr(engine_logging, "_configured", False)
        yield
        engine_logging._configured = False
        engine_logging.configure_logging(json_output=False)

    def test_json_renderer_from_settings(self, monkeypatch, reconfigurable):
        monkeypatch.setenv("PROJECTION_LOG_JSON", "true")
        engine_logging.configure_logging()
        renderer = structlog.get_config()["processors"][-1]
        assert isinstance(renderer, structlog.processors.JSONRenderer)

    def test_console_renderer_by_default(self, reconfigurable):
        engine_logging.configure_logging()
        renderer = structlog.get_config()["processors"][-1]
        assert isinstance(renderer, structlog.dev.ConsoleRenderer)

    def test_explicit_argument_overrides_setting(self, monkeypatch, reconfigurable):
        monkeypatch.setenv("PROJECTION_LOG_JSON", "true")
        engine_logging.configure_logging(json_output=False)
        renderer = structlog.get_config()["processors"][-1]
        assert isinstance(renderer, structlog.dev.ConsoleRenderer)
