import logging

import pytest
import structlog
from pydantic import ValidationError

from calendar_grid.settings import Settings
from calendar_grid.settings import get_settings


def test_defaults():
    """Test the defaults used when nothing is configured."""
    settings = Settings(_env_file=None)

    assert settings.first_day_of_week == 0
    assert settings.min_year == 1900
    assert settings.max_year == 9998
    assert settings.debug_mode is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CALENDAR_GRID_FIRST_DAY_OF_WEEK", "1")
    monkeypatch.setenv("CALENDAR_GRID_MAX_YEAR", "2037")
    monkeypatch.setenv("CALENDAR_GRID_LOG_LEVEL", "debug")

    settings = Settings(_env_file=None)
    assert settings.first_day_of_week == 1
    assert settings.max_year == 2037
    assert settings.log_level == "DEBUG"


def test_invalid_log_level():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, log_level="LOUD")


@pytest.mark.parametrize("value", [-1, 7])
def test_invalid_first_day_of_week(value):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, first_day_of_week=value)


@pytest.mark.parametrize("field, value", [("min_year", 1), ("max_year", 9999)])
def test_year_bounds_stay_inside_datetime_range(field, value):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **{field: value})


def test_min_year_must_not_exceed_max_year():
    with pytest.raises(ValidationError, match="must not exceed"):
        Settings(_env_file=None, min_year=2040, max_year=2030)


def test_logging_config():
    settings = Settings(_env_file=None, log_level="INFO", debug_mode=True)
    config = settings.logging_config

    assert config["loggers"]["calendar_grid"]["level"] == "INFO"
    assert config["handlers"]["console"]["formatter"] == "standard"
    assert Settings(_env_file=None).logging_config["handlers"]["console"]["formatter"] == "structured"


def test_get_settings_returns_global_instance():
    assert get_settings() is get_settings()


def test_structured_formatter_uses_json_module():
    formatter = Settings(_env_file=None).logging_config["formatters"]["structured"]
    assert formatter["()"] == "pythonjsonlogger.json.JsonFormatter"


@pytest.mark.parametrize("debug_mode", [True, False])
def test_setup_logging_configures_structlog(debug_mode):
    settings = Settings(_env_file=None, debug_mode=debug_mode)
    settings.setup_logging()

    assert structlog.is_configured()
    assert logging.getLogger("calendar_grid").level == logging.WARNING
