"""
Pitch set resolver - what a fret assignment actually sounds.
"""

from __future__ import annotations

from dataclasses import dataclass

from chuk_mcp_fretboard.core.pitch import PitchClass
from chuk_mcp_fretboard.core.tuning import Tuning
from chuk_mcp_fretboard.engine.enumerator import FretAssignment


@dataclass(frozen=True)
class SoundedChord:
    """Pitch classes sounded by an assignment and its bass note."""

    pitch_classes: frozenset[PitchClass]
    bass: PitchClass | None
    lowest_midi: int | None = None

    @property
    def size(self) -> int:
        """Number of distinct pitch classes."""
        return len(self.pitch_classes)


def sounded_midi(tuning: Tuning, frets: FretAssignment) -> list[int]:
    """Absolute pitch of every sounded string, low string first."""
    return [
        string.sound(fret) for string, fret in zip(tuning.strings, frets) if fret is not None
    ]


def resolve(tuning: Tuning, frets: FretAssignment) -> SoundedChord:
    """
    Resolve a fret assignment to its sounded pitch classes and bass.

    The bass is the lowest absolute pitch, which is not always on the
    lowest sounded string.

    Args:
        tuning: The instrument tuning
        frets: One fret (or MUTED) per string

    Returns:
        SoundedChord for the assignment
    """
    pitches = sounded_midi(tuning, frets)
    if not pitches:
        return SoundedChord(frozenset(), None)

    lowest = min(pitches)
    return SoundedChord(
        pitch_classes=frozenset(PitchClass.from_midi(p) for p in pitches),
        bass=PitchClass.from_midi(lowest),
        lowest_midi=lowest,
    )
