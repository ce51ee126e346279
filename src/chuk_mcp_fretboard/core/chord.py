"""
Chord primitives - ChordQuality, the quality registry, ChordIdentity.

Chord qualities are sets of semitone offsets from the root. The registry is a
static table: classification is a set-equality lookup, never dispatch.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .pitch import PitchClass


@dataclass(frozen=True)
class ChordQuality:
    """
    A chord quality defined by its offsets from the root.

    Offsets are measured from the root and reduced mod 12, so an add9
    chord is {0, 2, 4, 7}. The root offset 0 is always present.

    Immutable and hashable.
    """

    name: str
    offsets: frozenset[int]
    suffix: str = ""

    MAJOR: ClassVar[ChordQuality]
    MINOR: ClassVar[ChordQuality]
    AUGMENTED: ClassVar[ChordQuality]
    DIMINISHED: ClassVar[ChordQuality]
    SUS2: ClassVar[ChordQuality]
    SUS4: ClassVar[ChordQuality]
    MAJOR_6: ClassVar[ChordQuality]
    MINOR_6: ClassVar[ChordQuality]
    DOMINANT_7: ClassVar[ChordQuality]
    MAJOR_7: ClassVar[ChordQuality]
    MINOR_7: ClassVar[ChordQuality]
    MINOR_MAJOR_7: ClassVar[ChordQuality]
    DIMINISHED_7: ClassVar[ChordQuality]
    HALF_DIMINISHED_7: ClassVar[ChordQuality]
    ADD_9: ClassVar[ChordQuality]
    ADD_11: ClassVar[ChordQuality]
    MAJOR_9: ClassVar[ChordQuality]
    MINOR_9: ClassVar[ChordQuality]

    @property
    def size(self) -> int:
        """Number of distinct pitch classes in the chord."""
        return len(self.offsets)

    def get_pitches(self, root: PitchClass) -> list[PitchClass]:
        """
        Get all pitch classes in this chord.

        Args:
            root: The root pitch class

        Returns:
            List of pitch classes, sorted by offset
        """
        return [root.transpose(offset) for offset in sorted(self.offsets)]

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"ChordQuality.{self.name.upper().replace(' ', '_').replace('-', '_')}"


ChordQuality.MAJOR = ChordQuality("major", frozenset({0, 4, 7}), "")
ChordQuality.MINOR = ChordQuality("minor", frozenset({0, 3, 7}), "m")
ChordQuality.AUGMENTED = ChordQuality("augmented", frozenset({0, 4, 8}), "aug")
ChordQuality.DIMINISHED = ChordQuality("diminished", frozenset({0, 3, 6}), "dim")
ChordQuality.SUS2 = ChordQuality("sus2", frozenset({0, 2, 7}), "sus2")
ChordQuality.SUS4 = ChordQuality("sus4", frozenset({0, 5, 7}), "sus4")
ChordQuality.MAJOR_6 = ChordQuality("major 6", frozenset({0, 4, 7, 9}), "6")
ChordQuality.MINOR_6 = ChordQuality("minor 6", frozenset({0, 3, 7, 9}), "m6")
ChordQuality.DOMINANT_7 = ChordQuality("dominant 7", frozenset({0, 4, 7, 10}), "7")
ChordQuality.MAJOR_7 = ChordQuality("major 7", frozenset({0, 4, 7, 11}), "maj7")
ChordQuality.MINOR_7 = ChordQuality("minor 7", frozenset({0, 3, 7, 10}), "m7")
ChordQuality.MINOR_MAJOR_7 = ChordQuality("minor major 7", frozenset({0, 3, 7, 11}), "mMaj7")
ChordQuality.DIMINISHED_7 = ChordQuality("diminished 7", frozenset({0, 3, 6, 9}), "dim7")
ChordQuality.HALF_DIMINISHED_7 = ChordQuality(
    "half-diminished 7", frozenset({0, 3, 6, 10}), "m7b5"
)
ChordQuality.ADD_9 = ChordQuality("add 9", frozenset({0, 2, 4, 7}), "add9")
ChordQuality.ADD_11 = ChordQuality("add 11", frozenset({0, 4, 5, 7}), "add11")
ChordQuality.MAJOR_9 = ChordQuality("major 9", frozenset({0, 2, 4, 7, 11}), "maj9")
ChordQuality.MINOR_9 = ChordQuality("minor 9", frozenset({0, 2, 3, 7, 10}), "m9")

# Registry order is also the catalog order for chords sharing a root.
QUALITY_REGISTRY: tuple[ChordQuality, ...] = (
    ChordQuality.MAJOR,
    ChordQuality.MINOR,
    ChordQuality.AUGMENTED,
    ChordQuality.DIMINISHED,
    ChordQuality.SUS2,
    ChordQuality.SUS4,
    ChordQuality.MAJOR_6,
    ChordQuality.MINOR_6,
    ChordQuality.DOMINANT_7,
    ChordQuality.MAJOR_7,
    ChordQuality.MINOR_7,
    ChordQuality.MINOR_MAJOR_7,
    ChordQuality.DIMINISHED_7,
    ChordQuality.HALF_DIMINISHED_7,
    ChordQuality.ADD_9,
    ChordQuality.ADD_11,
    ChordQuality.MAJOR_9,
    ChordQuality.MINOR_9,
)


def quality_index(quality: ChordQuality) -> int:
    """Position of a quality in the registry (unregistered qualities sort last)."""
    try:
        return QUALITY_REGISTRY.index(quality)
    except ValueError:
        return len(QUALITY_REGISTRY)


def get_quality(name: str) -> ChordQuality | None:
    """Look up a registered quality by name or suffix ('minor 7' or 'm7')."""
    for quality in QUALITY_REGISTRY:
        if name in (quality.name, quality.suffix):
            return quality
    return None


@dataclass(frozen=True)
class ChordIdentity:
    """
    A classified chord: root, quality and (for inversions) the bass note.

    bass is None for root-position voicings.
    """

    root: PitchClass
    quality: ChordQuality
    bass: PitchClass | None = None

    @property
    def is_inversion(self) -> bool:
        """True when a non-root note sounds lowest."""
        return self.bass is not None and self.bass != self.root

    @property
    def bass_note(self) -> PitchClass:
        """The sounding bass note (the root for root-position voicings)."""
        return self.bass if self.bass is not None else self.root

    @property
    def name(self) -> str:
        """Display name such as 'C', 'Am7' or 'D/F#'."""
        result = f"{self.root.spell()}{self.quality.suffix}"
        if self.is_inversion:
            result += f"/{self.bass_note.spell()}"
        return result

    def sort_key(self) -> tuple[int, int, int]:
        """Catalog ordering: root, then registry order, root position before inversions."""
        bass = self.bass.value if self.is_inversion and self.bass is not None else -1
        return (self.root.value, quality_index(self.quality), bass)

    def get_pitches(self) -> list[PitchClass]:
        """Get all pitch classes in this chord."""
        return self.quality.get_pitches(self.root)

    def __str__(self) -> str:
        return self.name
