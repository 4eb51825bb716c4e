"""Pytest configuration and fixtures."""

import os
from pathlib import Path

import pytest

from scriptlens.config import ScriptLensSettings, reset_settings, set_settings

# Import CLI fixtures to make them available globally
from tests.cli_fixtures import cli_runner  # noqa: F401

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Give every test its own storage directory and a clean environment.

    Global settings and the logger cache are reset afterwards so no test sees
    configuration left behind by another.
    """
    for var in [k for k in os.environ if k.startswith("SCRIPTLENS_")]:
        monkeypatch.delenv(var)

    reset_settings()
    set_settings(ScriptLensSettings(storage_path=tmp_path / "store"))

    yield

    reset_settings()


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding sample screenplays."""
    return FIXTURES_DIR


@pytest.fixture
def sample_screenplay() -> str:
    """A short screenplay exercising most element kinds."""
    return (FIXTURES_DIR / "coffee_shop.fountain").read_text(encoding="utf-8")


@pytest.fixture
def kitchen_yard_text() -> str:
    """Two scenes with one speaking character."""
    return (
        "INT. KITCHEN - NIGHT\n"
        "Tom paces.\n"
        "TOM\n"
        "I can't sleep.\n"
        "EXT. YARD - DAY\n"
        "Tom waters the plants.\n"
    )
