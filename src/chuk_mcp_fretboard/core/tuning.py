"""
Tuning primitives - OpenString and Tuning.

String order is low to high: index 0 is the thickest string (low E in
standard guitar tuning).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar

from .pitch import PitchClass

_NOTE_RE = re.compile(r"^\s*([A-Ga-g][#b]?)\s*(-?\d+)\s*$")


@dataclass(frozen=True)
class OpenString:
    """The open pitch of a single string."""

    pitch_class: PitchClass
    octave: int

    @property
    def midi(self) -> int:
        """Absolute pitch of the open string as a MIDI note number."""
        return self.pitch_class.to_midi(self.octave)

    def sound(self, fret: int) -> int:
        """Absolute pitch when the string is stopped at a fret."""
        return self.midi + fret

    @classmethod
    def parse(cls, note: str) -> OpenString:
        """
        Parse scientific pitch notation.

        Args:
            note: Note like 'E2', 'F#3' or 'Bb1'

        Returns:
            The corresponding OpenString
        """
        match = _NOTE_RE.match(note)
        if match is None:
            raise ValueError(f"Invalid note: '{note}'. Expected format like 'E2' or 'F#3'.")
        name, octave = match.groups()
        return cls(PitchClass.parse(name[0].upper() + name[1:]), int(octave))

    def __str__(self) -> str:
        return f"{self.pitch_class.spell()}{self.octave}"


@dataclass(frozen=True)
class Tuning:
    """
    Immutable open-string pitches for an instrument.

    Built once per catalog run and shared read-only by every shard.
    """

    strings: tuple[OpenString, ...]
    name: str = "custom"

    STANDARD: ClassVar[Tuning]

    def __len__(self) -> int:
        return len(self.strings)

    @property
    def notes(self) -> list[str]:
        """Open string names, low to high."""
        return [str(s) for s in self.strings]

    @classmethod
    def from_notes(cls, notes: list[str], name: str = "custom") -> Tuning:
        """Build a tuning from note names like ['E2', 'A2', ...]."""
        return cls(tuple(OpenString.parse(n) for n in notes), name)

    def __str__(self) -> str:
        return f"{self.name} ({' '.join(self.notes)})"


Tuning.STANDARD = Tuning.from_notes(["E2", "A2", "D3", "G3", "B3", "E4"], "standard")

STANDARD_TUNING = Tuning.STANDARD
