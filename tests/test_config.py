"""Tests for environment-driven settings."""

import logging
import os

import pytest

from circuitvision.config import DEFAULT_MAX_SOURCE_CHARS, Settings, get_settings


def test_defaults():
    settings = get_settings(load_env_file=False)
    assert settings == Settings()
    assert settings.target_platform == "ESP32"
    assert settings.max_source_chars == DEFAULT_MAX_SOURCE_CHARS
    assert settings.log_level_value == logging.WARNING


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CIRCUITVISION_TARGET_PLATFORM", "ESP8266")
    monkeypatch.setenv("CIRCUITVISION_LOG_LEVEL", "debug")
    monkeypatch.setenv("CIRCUITVISION_MAX_SOURCE_CHARS", "1000")
    settings = get_settings(load_env_file=False)
    assert settings.target_platform == "ESP8266"
    assert settings.log_level_value == logging.DEBUG
    assert settings.max_source_chars == 1000


@pytest.mark.parametrize("value", ["lots", "0", "-5"])
def test_invalid_source_limit(monkeypatch, value):
    monkeypatch.setenv("CIRCUITVISION_MAX_SOURCE_CHARS", value)
    with pytest.raises(ValueError, match="CIRCUITVISION_MAX_SOURCE_CHARS"):
        get_settings(load_env_file=False)


def test_unknown_log_level_falls_back_to_warning():
    assert Settings(log_level="chatty").log_level_value == logging.WARNING


def test_env_file_is_loaded(monkeypatch, tmp_path):
    (tmp_path / ".env").write_text("CIRCUITVISION_TARGET_PLATFORM=Arduino\n")
    monkeypatch.chdir(tmp_path)
    try:
        assert get_settings().target_platform == "Arduino"
    finally:
        os.environ.pop("CIRCUITVISION_TARGET_PLATFORM", None)
