"""
Pydantic models for the fretboard catalog.

This module provides:
- CatalogConfig: Complete run configuration
- TuningConfiguration / StringDefinition: Caller-supplied tuning
- PlayabilityConfig: Ergonomic limits
- Catalog / FingeringRecord: Engine output
"""

from chuk_mcp_fretboard.models.catalog import Catalog, FingeringRecord
from chuk_mcp_fretboard.models.config import (
    CatalogConfig,
    PlayabilityConfig,
    StringDefinition,
    TuningConfiguration,
)

__all__ = [
    "Catalog",
    "CatalogConfig",
    "FingeringRecord",
    "PlayabilityConfig",
    "StringDefinition",
    "TuningConfiguration",
]
