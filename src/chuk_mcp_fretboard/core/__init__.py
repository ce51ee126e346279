"""
Core fretboard primitives.

These are the invariants the catalog engine composes on:
- PitchClass: The 12 chromatic pitch classes (0-11)
- ChordQuality: Offset sets defining chord types, held in QUALITY_REGISTRY
- ChordIdentity: Root + quality + optional bass (inversions)
- OpenString / Tuning: Open pitches of each string
"""

from chuk_mcp_fretboard.core.chord import (
    QUALITY_REGISTRY,
    ChordIdentity,
    ChordQuality,
    get_quality,
    quality_index,
)
from chuk_mcp_fretboard.core.pitch import PitchClass
from chuk_mcp_fretboard.core.tuning import STANDARD_TUNING, OpenString, Tuning

__all__ = [
    # Pitch
    "PitchClass",
    # Chord
    "ChordQuality",
    "ChordIdentity",
    "QUALITY_REGISTRY",
    "get_quality",
    "quality_index",
    # Tuning
    "OpenString",
    "Tuning",
    "STANDARD_TUNING",
]
