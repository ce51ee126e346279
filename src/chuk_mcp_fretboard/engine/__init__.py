"""
Catalog engine - enumeration, classification, filtering and aggregation.
"""

from chuk_mcp_fretboard.engine.aggregator import ResultAggregator
from chuk_mcp_fretboard.engine.catalog import (
    CatalogBuilder,
    EngineContext,
    FingeringAnalysis,
    analyze_fingering,
    build_catalog,
    run_shard,
)
from chuk_mcp_fretboard.engine.classifier import ChordClassifier, classify
from chuk_mcp_fretboard.engine.enumerator import FretAssignment, FretboardEnumerator
from chuk_mcp_fretboard.engine.fingering import Fingering, format_shape, parse_shape
from chuk_mcp_fretboard.engine.playability import PlayabilityFilter, PlayabilityMetrics
from chuk_mcp_fretboard.engine.resolver import SoundedChord, resolve
from chuk_mcp_fretboard.engine.validator import (
    ConfigValidator,
    ValidationIssue,
    ValidationResult,
    ValidationSeverity,
    validate_config,
)

__all__ = [
    "CatalogBuilder",
    "ChordClassifier",
    "ConfigValidator",
    "EngineContext",
    "Fingering",
    "FingeringAnalysis",
    "FretAssignment",
    "FretboardEnumerator",
    "PlayabilityFilter",
    "PlayabilityMetrics",
    "ResultAggregator",
    "SoundedChord",
    "ValidationIssue",
    "ValidationResult",
    "ValidationSeverity",
    "analyze_fingering",
    "build_catalog",
    "classify",
    "format_shape",
    "parse_shape",
    "resolve",
    "run_shard",
]
