"""Shared fixtures for CircuitVision tests."""

import pytest

from tests.samples import CLEAN_SKETCH, COMPONENT_SKETCH, ESP32_SKETCH


@pytest.fixture
def esp32_sketch() -> str:
    return ESP32_SKETCH


@pytest.fixture
def clean_sketch() -> str:
    return CLEAN_SKETCH


@pytest.fixture
def component_sketch() -> str:
    return COMPONENT_SKETCH


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Keep CIRCUITVISION_* settings from the developer's shell out of tests."""
    for name in ("CIRCUITVISION_TARGET_PLATFORM", "CIRCUITVISION_LOG_LEVEL", "CIRCUITVISION_MAX_SOURCE_CHARS"):
        monkeypatch.delenv(name, raising=False)
