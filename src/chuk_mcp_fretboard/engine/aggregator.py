"""
Result aggregator - groups, deduplicates, ranks and caps fingerings.

Grouping and ranking depend only on the data, so aggregators built over any
partition of the search space merge into the same result.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from chuk_mcp_fretboard.constants import DEFAULT_MAX_PER_CHORD
from chuk_mcp_fretboard.core.chord import ChordIdentity
from chuk_mcp_fretboard.engine.enumerator import FretAssignment
from chuk_mcp_fretboard.engine.fingering import Fingering

logger = logging.getLogger(__name__)


class ResultAggregator:
    """Collects fingerings per chord identity."""

    def __init__(self, max_per_chord: int = DEFAULT_MAX_PER_CHORD):
        """
        Initialize the aggregator.

        Args:
            max_per_chord: Fingerings kept per chord after ranking
        """
        self.max_per_chord = max_per_chord
        self._groups: dict[ChordIdentity, dict[FretAssignment, Fingering]] = {}

    def add(self, fingering: Fingering) -> bool:
        """
        Add a fingering.

        Returns:
            False if the same assignment was already in its group
        """
        group = self._groups.setdefault(fingering.identity, {})
        if fingering.frets in group:
            return False
        group[fingering.frets] = fingering
        return True

    def extend(self, fingerings: Iterable[Fingering]) -> None:
        """Add many fingerings."""
        for fingering in fingerings:
            self.add(fingering)

    def merge(self, other: ResultAggregator) -> None:
        """Fold another aggregator (e.g. from a shard) into this one."""
        for group in other._groups.values():
            self.extend(group.values())
        logger.debug(f"Merged {len(other)} fingerings, {self.chord_count} chords so far")

    def compact(self) -> ResultAggregator:
        """
        Drop everything that can no longer make a group's top list.

        Ranking is a total order, so capping before a merge loses nothing.
        """
        for identity, group in self._groups.items():
            if len(group) > self.max_per_chord:
                kept = self._rank(group.values())
                self._groups[identity] = {f.frets: f for f in kept}
        return self

    def _rank(self, fingerings: Iterable[Fingering]) -> list[Fingering]:
        ranked = sorted(fingerings, key=lambda f: f.ranking_key())
        return ranked[: self.max_per_chord]

    def groups(self) -> list[tuple[ChordIdentity, list[Fingering]]]:
        """Ranked, capped groups in catalog order."""
        ordered = sorted(self._groups, key=lambda identity: identity.sort_key())
        return [(identity, self._rank(self._groups[identity].values())) for identity in ordered]

    def to_mapping(self) -> dict[str, list[Fingering]]:
        """Chord display name -> ranked fingerings."""
        return {identity.name: fingerings for identity, fingerings in self.groups()}

    @property
    def chord_count(self) -> int:
        """Number of distinct chord identities seen."""
        return len(self._groups)

    def __len__(self) -> int:
        return sum(len(group) for group in self._groups.values())
