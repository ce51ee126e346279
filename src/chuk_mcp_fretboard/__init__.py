"""
CHUK Fretboard - every playable chord fingering for a fretted instrument.

Give it a tuning; get back a catalog of chord names, each with its ranked,
physically playable fingerings.
"""

from chuk_mcp_fretboard.engine import CatalogBuilder, analyze_fingering, build_catalog
from chuk_mcp_fretboard.errors import ConfigurationError, InvalidBounds, InvalidTuning
from chuk_mcp_fretboard.models import (
    Catalog,
    CatalogConfig,
    FingeringRecord,
    PlayabilityConfig,
    TuningConfiguration,
)

__version__ = "0.1.0"

__all__ = [
    "Catalog",
    "CatalogBuilder",
    "CatalogConfig",
    "ConfigurationError",
    "FingeringRecord",
    "InvalidBounds",
    "InvalidTuning",
    "PlayabilityConfig",
    "TuningConfiguration",
    "analyze_fingering",
    "build_catalog",
]
