import os
import sys

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import config
from config import DEFAULT_LOG_FILE, DEFAULT_TICK_MS, Settings, load_settings
from domain.errors import ConfigurationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep a developer's .env and shell variables out of these tests."""
    monkeypatch.setattr(config, "load_dotenv", lambda: None)
    for name in ("SNAKE_TICK_MS", "SNAKE_LOG_LEVEL", "SNAKE_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = load_settings()
    assert settings.tick_ms == DEFAULT_TICK_MS
    assert settings.log_level == "WARNING"
    assert settings.log_file == DEFAULT_LOG_FILE
    assert settings.seed is None
    assert settings.tick_seconds == pytest.approx(0.2)


def test_environment_values(monkeypatch):
    monkeypatch.setenv("SNAKE_TICK_MS", "50")
    monkeypatch.setenv("SNAKE_LOG_LEVEL", "debug")
    monkeypatch.setenv("SNAKE_LOG_FILE", "/tmp/snake-test.log")

    settings = load_settings()

    assert settings.tick_ms == 50
    assert settings.log_level == "DEBUG"
    assert settings.log_file == "/tmp/snake-test.log"


def test_explicit_values_override_environment(monkeypatch):
    monkeypatch.setenv("SNAKE_TICK_MS", "50")
    monkeypatch.setenv("SNAKE_LOG_LEVEL", "DEBUG")

    settings = load_settings(tick_ms=120, log_level="info", seed=7)

    assert settings.tick_ms == 120
    assert settings.log_level == "INFO"
    assert settings.seed == 7


def test_non_integer_tick_rejected(monkeypatch):
    monkeypatch.setenv("SNAKE_TICK_MS", "fast")
    with pytest.raises(ConfigurationError):
        load_settings()


@pytest.mark.parametrize("tick_ms", [0, -10])
def test_non_positive_tick_rejected(tick_ms):
    with pytest.raises(ConfigurationError):
        load_settings(tick_ms=tick_ms)


def test_unknown_log_level_rejected():
    with pytest.raises(ConfigurationError):
        load_settings(log_level="chatty")


def test_settings_tick_seconds():
    assert Settings(tick_ms=250).tick_seconds == pytest.approx(0.25)
