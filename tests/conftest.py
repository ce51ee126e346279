"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_fretboard.models.config import CatalogConfig, PlayabilityConfig


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def library_path() -> Path:
    """Path to the built-in tuning library."""
    return Path(__file__).parent.parent / "src" / "chuk_mcp_fretboard" / "tunings" / "library"


@pytest.fixture
def strict_config() -> CatalogConfig:
    """Standard tuning with no muting allowed."""
    return CatalogConfig(max_fret=5, playability=PlayabilityConfig(max_muted=0))
