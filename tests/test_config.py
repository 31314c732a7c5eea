import logging

import pytest

from sandpad.core.config import ConfigurationService, SandpadSettings, load_settings
from sandpad.core.exceptions import ConfigurationError
from sandpad.core.interfaces.config_service import IConfigurationService
from sandpad.core.logging_setup import LOGGER_NAME, configure_logging


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path, monkeypatch):
    # Keep a developer's .env and shell variables out of the tests.
    monkeypatch.chdir(tmp_path)
    for name in ("DEBUG_MODE", "LOG_LEVEL", "EVENT_DEBUG", "NOTIFY_ERRORS", "DEFAULT_MATH_API"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = load_settings()

    assert settings.debug_mode is False
    assert settings.log_level == "INFO"
    assert settings.notify_errors is True
    assert settings.default_math_api == "desmos"


def test_env_loading(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "warning")
    monkeypatch.setenv("DEFAULT_MATH_API", " GeoGebra ")
    monkeypatch.setenv("EVENT_DEBUG", "true")

    settings = load_settings()

    assert settings.log_level == "WARNING"
    assert settings.default_math_api == "geogebra"
    assert settings.event_debug is True


def test_env_file_is_read(tmp_path):
    (tmp_path / ".env").write_text("DEFAULT_MATH_API=jsxgraph\n")

    assert load_settings().default_math_api == "jsxgraph"


def test_overrides_win_over_env(monkeypatch):
    monkeypatch.setenv("DEBUG_MODE", "false")

    assert load_settings(debug_mode=True).debug_mode is True


def test_invalid_log_level_raises_configuration_error(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(ConfigurationError, match="Invalid settings"):
        load_settings()


def test_configuration_service_dotted_get():
    cfg = ConfigurationService(settings=SandpadSettings(default_math_api="desmos"))

    assert cfg.get("default_math_api") == "desmos"
    assert cfg.get("missing.key", "fallback") == "fallback"
    assert cfg.validate_configuration() is True


def test_configuration_service_exposes_settings():
    settings = SandpadSettings(default_math_api="geogebra")
    cfg = ConfigurationService(settings=settings)

    assert isinstance(cfg, IConfigurationService)
    assert cfg.settings is settings
    assert cfg.get("default_math_api") == cfg.settings.default_math_api


def test_debug_mode_with_quiet_level_is_rejected():
    with pytest.raises(ConfigurationError):
        ConfigurationService(settings=SandpadSettings(debug_mode=True, log_level="ERROR"))


def test_configure_logging_levels():
    assert configure_logging(SandpadSettings(log_level="WARNING")).level == logging.WARNING
    assert configure_logging(SandpadSettings(debug_mode=True)).level == logging.DEBUG

    logger = configure_logging()
    assert logger.name == LOGGER_NAME
    assert logger.level == logging.INFO
