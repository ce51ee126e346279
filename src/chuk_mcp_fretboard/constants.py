"""
Constants and enums for the fretboard catalog.

No magic strings - use enums and Literal types for constrained values.
"""

from enum import Enum
from typing import Final


class BarrePolicy(str, Enum):
    """How strings sharing a fret are counted against the finger budget."""

    ANY = "any"  # Any shared fret is one finger
    CONTIGUOUS = "contiguous"  # Only a flat, unbroken barre is one finger


# Muted-string sentinel inside a FretAssignment
MUTED: Final = None

# Size guard
MAX_FRET_LIMIT = 24
MAX_STRING_COUNT = 12

# Engine defaults
DEFAULT_MAX_FRET = 9
DEFAULT_MIN_STRINGS_SOUNDED = 3
DEFAULT_MAX_SPAN = 3
DEFAULT_MAX_FINGERS = 4
DEFAULT_MAX_MUTED = 2
DEFAULT_MAX_PER_CHORD = 10

# Tab notation for a muted string
MUTED_SYMBOL = "x"

# Environment variable naming the project tunings directory for the MCP server
TUNINGS_DIR_ENV = "CHUK_FRETBOARD_TUNINGS_DIR"


class ErrorMessages:
    """Standardized error messages."""

    NO_STRINGS = "Tuning has no strings."
    TOO_MANY_STRINGS = "Tuning has {count} strings; at most {limit} are supported."
    INVALID_PITCH_CLASS = "String {index} has pitch class {value}; expected 0-11."
    NEGATIVE_MAX_FRET = "max_fret must be >= 0, got {value}."
    MAX_FRET_TOO_LARGE = "max_fret must be <= {limit}, got {value}."
    INVALID_MIN_STRINGS = "min_strings_sounded must be between 0 and {count}, got {value}."
    NEGATIVE_PLAYABILITY = "playability.{field} must be >= 0, got {value}."
    INVALID_MAX_PER_CHORD = "max_per_chord must be >= 1, got {value}."
    TUNING_NOT_FOUND = "Tuning '{name}' not found."
    INVALID_FRETS = "Invalid fret shape: '{shape}'. Expected one entry per string, e.g. 'x32010'."
