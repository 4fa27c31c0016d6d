import logging

import pytest

from dbdsn.config import Settings
from dbdsn.core import DSNConfigurationError


def test_defaults():
    settings = Settings.from_env({})
    assert settings.log_level == logging.INFO
    assert settings.slow_read_ms == 50
    assert settings.provider_version == "dev"


def test_values_from_environment(monkeypatch):
    monkeypatch.setenv("DBDSN_LOG_LEVEL", "debug")
    monkeypatch.setenv("DBDSN_SLOW_READ_MS", "5")
    monkeypatch.setenv("DBDSN_PROVIDER_VERSION", "0.3.0")
    settings = Settings.from_env()
    assert settings.log_level == logging.DEBUG
    assert settings.slow_read_ms == 5
    assert settings.provider_version == "0.3.0"


def test_numeric_log_level():
    assert Settings.from_env({"DBDSN_LOG_LEVEL": "30"}).log_level == 30


@pytest.mark.parametrize(
    "environ",
    [
        {"DBDSN_LOG_LEVEL": "verbose"},
        {"DBDSN_SLOW_READ_MS": "fast"},
        {"DBDSN_SLOW_READ_MS": "-1"},
    ],
)
def test_invalid_values_raise(environ):
    with pytest.raises(DSNConfigurationError):
        Settings.from_env(environ)
