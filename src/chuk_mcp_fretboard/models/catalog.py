"""
Catalog models - the engine's output document.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class FingeringRecord(BaseModel):
    """
    One playable fingering of a chord.

    frets holds one entry per string, low to high; null marks a muted string.
    """

    frets: list[int | None] = Field(..., description="Fret per string, null = muted")
    shape: str = Field(..., description="Tab shape, e.g. 'x32010'")
    span: int = Field(..., description="Distance between lowest and highest fretted note")
    root: str = Field(..., description="Root note name")
    bass: str = Field(..., description="Lowest sounding note name")
    quality: str = Field(..., description="Chord quality name")
    fingers: int = Field(..., description="Fretting fingers required")
    muted: int = Field(..., description="Number of muted strings")

    model_config = {"frozen": True}


class Catalog(BaseModel):
    """
    All playable fingerings for a tuning, grouped by chord name.

    Chord groups and the fingerings inside them are in a deterministic order.
    """

    tuning: str = Field(..., description="Tuning name")
    strings: list[str] = Field(..., description="Open string notes, low to high")
    max_fret: int = Field(..., description="Highest fret considered")
    max_span: int = Field(..., description="Span limit applied")
    chords: dict[str, list[FingeringRecord]] = Field(
        default_factory=dict, description="Chord name -> ranked fingerings"
    )

    @property
    def chord_count(self) -> int:
        """Number of distinct chord names."""
        return len(self.chords)

    @property
    def fingering_count(self) -> int:
        """Total fingerings across all chords."""
        return sum(len(v) for v in self.chords.values())

    def get(self, chord_name: str) -> list[FingeringRecord]:
        """Fingerings for a chord name, empty if the chord is absent."""
        return self.chords.get(chord_name, [])

    def to_json(self, indent: int | None = 2) -> str:
        """Render the catalog as a JSON document."""
        return self.model_dump_json(indent=indent)
