"""
Chord classifier - names a set of pitch classes.

Every sounded pitch class is tried as the root. A root matches only when the
offsets of the whole set from it equal a registered quality exactly: extra or
missing notes never count as a match.

When several roots match (C6 and Am7 share their notes, as do Csus2 and
Gsus4), the choice is:
1. the root that is also the bass note
2. the quality with the fewest notes
3. the smallest root value
"""

from __future__ import annotations

from collections.abc import Iterable

from chuk_mcp_fretboard.core.chord import QUALITY_REGISTRY, ChordIdentity, ChordQuality
from chuk_mcp_fretboard.core.pitch import PitchClass


class ChordClassifier:
    """Matches pitch-class sets against a static quality registry."""

    def __init__(self, registry: Iterable[ChordQuality] = QUALITY_REGISTRY):
        """
        Initialize the classifier.

        Args:
            registry: Chord qualities to recognise; the first quality wins
                if two share an offset set
        """
        self._by_offsets: dict[frozenset[int], ChordQuality] = {}
        for quality in registry:
            self._by_offsets.setdefault(quality.offsets, quality)

    @property
    def qualities(self) -> list[ChordQuality]:
        """Registered qualities."""
        return list(self._by_offsets.values())

    def candidates(
        self,
        pitch_classes: Iterable[PitchClass],
        bass: PitchClass | None = None,
    ) -> list[ChordIdentity]:
        """
        Every exact (root, quality) match, best first.

        Args:
            pitch_classes: Sounded pitch classes
            bass: Lowest sounding pitch class, if known

        Returns:
            ChordIdentity list ordered by the tie-break rules
        """
        pcs = frozenset(pitch_classes)
        if len(pcs) < 2:
            return []

        matches: list[tuple[tuple[int, int, int], ChordIdentity]] = []
        for root in pcs:
            offsets = frozenset(pc.offset_from(root) for pc in pcs)
            quality = self._by_offsets.get(offsets)
            if quality is None:
                continue
            inverted_bass = bass if bass is not None and bass != root else None
            key = (0 if bass == root else 1, quality.size, root.value)
            matches.append((key, ChordIdentity(root, quality, inverted_bass)))

        matches.sort(key=lambda m: m[0])
        return [identity for _, identity in matches]

    def classify(
        self,
        pitch_classes: Iterable[PitchClass],
        bass: PitchClass | None = None,
    ) -> ChordIdentity | None:
        """Best match for a pitch-class set, or None when it is not a registered chord."""
        found = self.candidates(pitch_classes, bass)
        return found[0] if found else None


DEFAULT_CLASSIFIER = ChordClassifier()


def classify(
    pitch_classes: Iterable[PitchClass], bass: PitchClass | None = None
) -> ChordIdentity | None:
    """Classify against the built-in registry."""
    return DEFAULT_CLASSIFIER.classify(pitch_classes, bass)
