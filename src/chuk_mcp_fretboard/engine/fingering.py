"""
Fingering - a classified, playable fret assignment.
"""

from __future__ import annotations

from dataclasses import dataclass

from chuk_mcp_fretboard.constants import MUTED_SYMBOL
from chuk_mcp_fretboard.core.chord import ChordIdentity
from chuk_mcp_fretboard.engine.enumerator import FretAssignment
from chuk_mcp_fretboard.engine.playability import PlayabilityMetrics
from chuk_mcp_fretboard.models.catalog import FingeringRecord


def format_shape(frets: FretAssignment) -> str:
    """
    Tab shape for an assignment, low string first.

    'x32010' while every fret is a single digit, 'x-10-12-12-10-x' otherwise.
    """
    symbols = [MUTED_SYMBOL if f is None else str(f) for f in frets]
    if all(len(s) == 1 for s in symbols):
        return "".join(symbols)
    return "-".join(symbols)


def parse_shape(shape: str) -> FretAssignment:
    """
    Parse a tab shape back into an assignment.

    Accepts 'x32010', 'x-3-2-0-1-0' or 'x 3 2 0 1 0'.
    """
    text = shape.strip()
    if "-" in text or " " in text or "," in text:
        parts = [p for p in text.replace(",", " ").replace("-", " ").split() if p]
    else:
        parts = list(text)
    return tuple(None if p.lower() == MUTED_SYMBOL else int(p) for p in parts)


@dataclass(frozen=True)
class Fingering:
    """
    A fret assignment with its chord identity and playability metrics.

    Only built after classification succeeds.
    """

    frets: FretAssignment
    identity: ChordIdentity
    metrics: PlayabilityMetrics

    @property
    def shape(self) -> str:
        """Tab shape, e.g. 'x32010'."""
        return format_shape(self.frets)

    def ranking_key(self) -> tuple[int, int, int, tuple[int, ...]]:
        """
        Sort key within a chord group.

        Span, then lowest sounded fret, then muted strings; the frets
        themselves (muted before open) break any remaining tie.
        """
        return (
            self.metrics.span,
            self.metrics.min_fret,
            self.metrics.muted,
            tuple(-1 if f is None else f for f in self.frets),
        )

    def to_record(self) -> FingeringRecord:
        """Convert to the catalog output model."""
        return FingeringRecord(
            frets=list(self.frets),
            shape=self.shape,
            span=self.metrics.span,
            root=self.identity.root.spell(),
            bass=self.identity.bass_note.spell(),
            quality=self.identity.quality.name,
            fingers=self.metrics.fingers,
            muted=self.metrics.muted,
        )
