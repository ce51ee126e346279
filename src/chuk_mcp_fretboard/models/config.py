"""
Configuration models - what the caller hands the engine.

Range checks are deliberately not pydantic constraints: the validator reports
them as InvalidTuning / InvalidBounds so callers get one error vocabulary.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from chuk_mcp_fretboard.constants import (
    DEFAULT_MAX_FINGERS,
    DEFAULT_MAX_FRET,
    DEFAULT_MAX_MUTED,
    DEFAULT_MAX_PER_CHORD,
    DEFAULT_MAX_SPAN,
    DEFAULT_MIN_STRINGS_SOUNDED,
    BarrePolicy,
)
from chuk_mcp_fretboard.core.pitch import PitchClass
from chuk_mcp_fretboard.core.tuning import OpenString, Tuning


class StringDefinition(BaseModel):
    """Open pitch of one string."""

    pitch_class: int = Field(..., description="Open pitch class (0=C ... 11=B)")
    octave: int = Field(..., description="Octave number (C4 = middle C)")

    model_config = {"frozen": True}

    @classmethod
    def from_note(cls, note: str) -> StringDefinition:
        """Build from scientific pitch notation like 'E2'."""
        open_string = OpenString.parse(note)
        return cls(pitch_class=open_string.pitch_class.value, octave=open_string.octave)

    def to_open_string(self) -> OpenString:
        """Convert to the core type. Only valid after validation."""
        return OpenString(PitchClass(self.pitch_class), self.octave)


def _standard_strings() -> list[StringDefinition]:
    return [StringDefinition.from_note(n) for n in ("E2", "A2", "D3", "G3", "B3", "E4")]


class TuningConfiguration(BaseModel):
    """
    Ordered string definitions, low to high.

    Defaults to a standard six-string guitar (E2-A2-D3-G3-B3-E4).
    """

    name: str = Field("standard", description="Tuning name")
    strings: list[StringDefinition] = Field(
        default_factory=_standard_strings, description="String definitions, low to high"
    )

    model_config = {"frozen": True}

    @classmethod
    def from_notes(cls, notes: list[str], name: str = "custom") -> TuningConfiguration:
        """Build from note names like ['D2', 'A2', 'D3', 'G3', 'A3', 'D4']."""
        return cls(name=name, strings=[StringDefinition.from_note(n) for n in notes])

    @classmethod
    def from_tuning(cls, tuning: Tuning) -> TuningConfiguration:
        """Build from a core Tuning."""
        return cls(
            name=tuning.name,
            strings=[
                StringDefinition(pitch_class=s.pitch_class.value, octave=s.octave)
                for s in tuning.strings
            ],
        )

    def to_tuning(self) -> Tuning:
        """Convert to the core type. Only valid after validation."""
        return Tuning(tuple(s.to_open_string() for s in self.strings), self.name)


class PlayabilityConfig(BaseModel):
    """Ergonomic limits a fingering must respect."""

    max_span: int = Field(DEFAULT_MAX_SPAN, description="Max distance between fretted notes")
    max_fingers: int = Field(DEFAULT_MAX_FINGERS, description="Fretting fingers available")
    max_muted: int = Field(DEFAULT_MAX_MUTED, description="Max muted strings")
    allow_interior_mutes: bool = Field(
        False, description="Allow a muted string between two sounded strings"
    )
    barre_policy: BarrePolicy = Field(
        BarrePolicy.ANY, description="When strings sharing a fret count as one finger"
    )

    model_config = {"frozen": True}


class CatalogConfig(BaseModel):
    """Everything a catalog run needs."""

    tuning: TuningConfiguration = Field(
        default_factory=TuningConfiguration, description="Instrument tuning"
    )
    max_fret: int = Field(DEFAULT_MAX_FRET, description="Highest fret to consider")
    min_strings_sounded: int = Field(
        DEFAULT_MIN_STRINGS_SOUNDED, description="Minimum non-muted strings"
    )
    playability: PlayabilityConfig = Field(
        default_factory=PlayabilityConfig, description="Ergonomic limits"
    )
    max_per_chord: int = Field(DEFAULT_MAX_PER_CHORD, description="Fingerings kept per chord")

    model_config = {"frozen": True}
