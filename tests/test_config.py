import logging

import pytest

from core.config import DEFAULT_API_BASE_URL, get_settings
from core.logging_config import configure_logging


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("API_BASE_URL", "API_TIMEOUT", "API_TOKEN", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)


def test_defaults():
    settings = get_settings()
    assert settings.api_base_url == DEFAULT_API_BASE_URL
    assert settings.api_timeout == 30.0
    assert settings.api_token is None
    assert settings.log_level == "INFO"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("API_BASE_URL", "https://parcerias.exemplo.org/api/")
    monkeypatch.setenv("API_TIMEOUT", "12.5")
    monkeypatch.setenv("API_TOKEN", "segredo")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = get_settings()
    assert settings.api_base_url == "https://parcerias.exemplo.org/api"
    assert settings.api_timeout == 12.5
    assert settings.api_token == "segredo"
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("raw", ["abc", "0", "-5"])
def test_invalid_timeout(monkeypatch, raw):
    monkeypatch.setenv("API_TIMEOUT", raw)
    with pytest.raises(ValueError):
        get_settings()


class TestConfigureLogging:
    def test_sets_level_and_single_handler(self):
        configure_logging("debug")
        configure_logging("WARNING")
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1

    def test_invalid_level_raises(self):
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging("VERBOSE")
