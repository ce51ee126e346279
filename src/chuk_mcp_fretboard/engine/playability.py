"""
Playability filter - can a hand actually fret this?

Rules, each governed by PlayabilityConfig:
- span: fretted (non-open) notes fit within max_span frets
- fingers: fretting fingers needed, with barres counted once, <= max_fingers
- muting: at most max_muted muted strings, and optionally no muted string
  between two sounded ones
"""

from __future__ import annotations

from dataclasses import dataclass

from chuk_mcp_fretboard.constants import BarrePolicy
from chuk_mcp_fretboard.engine.enumerator import FretAssignment
from chuk_mcp_fretboard.models.config import PlayabilityConfig

RULE_SPAN = "span"
RULE_FINGERS = "fingers"
RULE_MUTED = "muted"
RULE_INTERIOR_MUTE = "interior_mute"


def fret_span(frets: FretAssignment) -> int:
    """Distance between the lowest and highest fretted note (0 for open shapes)."""
    fretted = [f for f in frets if f]
    if not fretted:
        return 0
    return max(fretted) - min(fretted)


def muted_count(frets: FretAssignment) -> int:
    """Number of muted strings."""
    return sum(1 for f in frets if f is None)


def min_sounded_fret(frets: FretAssignment) -> int:
    """Lowest fret among sounded strings, open strings included."""
    return min((f for f in frets if f is not None), default=0)


def _strings_by_fret(frets: FretAssignment) -> dict[int, list[int]]:
    by_fret: dict[int, list[int]] = {}
    for index, fret in enumerate(frets):
        if fret:
            by_fret.setdefault(fret, []).append(index)
    return by_fret


def _is_flat_barre(frets: FretAssignment, fret: int, strings: list[int]) -> bool:
    # A flat finger stops every string it crosses, so none may be open or muted.
    between = frets[strings[0] + 1 : strings[-1]]
    return all(f is not None and f >= fret for f in between)


def finger_count(frets: FretAssignment, barre_policy: BarrePolicy = BarrePolicy.ANY) -> int:
    """
    Fretting fingers needed for an assignment.

    Strings sharing a fret are one barre finger. Under the contiguous policy
    that only holds when the barre lies flat; otherwise each string at that
    fret needs its own finger.
    """
    fingers = 0
    for fret, strings in _strings_by_fret(frets).items():
        if len(strings) == 1 or barre_policy == BarrePolicy.ANY:
            fingers += 1
        elif _is_flat_barre(frets, fret, strings):
            fingers += 1
        else:
            fingers += len(strings)
    return fingers


def distinct_fret_count(frets: FretAssignment) -> int:
    """Number of distinct non-zero frets."""
    return len(_strings_by_fret(frets))


def has_interior_mute(frets: FretAssignment) -> bool:
    """True when a muted string lies between two sounded strings."""
    sounded = [i for i, f in enumerate(frets) if f is not None]
    if not sounded:
        return False
    return any(frets[i] is None for i in range(sounded[0], sounded[-1]))


@dataclass(frozen=True)
class PlayabilityMetrics:
    """Ergonomic measurements of one assignment."""

    span: int
    fingers: int
    muted: int
    distinct_frets: int
    min_fret: int

    @classmethod
    def measure(
        cls, frets: FretAssignment, barre_policy: BarrePolicy = BarrePolicy.ANY
    ) -> PlayabilityMetrics:
        """Measure an assignment."""
        return cls(
            span=fret_span(frets),
            fingers=finger_count(frets, barre_policy),
            muted=muted_count(frets),
            distinct_frets=distinct_fret_count(frets),
            min_fret=min_sounded_fret(frets),
        )


class PlayabilityFilter:
    """Pure predicate over fret assignments."""

    def __init__(self, config: PlayabilityConfig | None = None):
        self.config = config or PlayabilityConfig()

    def measure(self, frets: FretAssignment) -> PlayabilityMetrics:
        """Measure an assignment under this filter's barre policy."""
        return PlayabilityMetrics.measure(frets, self.config.barre_policy)

    def check(self, frets: FretAssignment) -> list[str]:
        """
        List the rules an assignment breaks.

        Args:
            frets: One fret (or MUTED) per string

        Returns:
            Rule names (span, fingers, muted, interior_mute); empty if playable
        """
        config = self.config
        metrics = self.measure(frets)
        violations: list[str] = []

        if metrics.span > config.max_span:
            violations.append(RULE_SPAN)
        if metrics.fingers > config.max_fingers:
            violations.append(RULE_FINGERS)
        if metrics.muted > config.max_muted:
            violations.append(RULE_MUTED)
        if not config.allow_interior_mutes and has_interior_mute(frets):
            violations.append(RULE_INTERIOR_MUTE)

        return violations

    def is_playable(self, frets: FretAssignment) -> bool:
        """True when no rule is broken."""
        return not self.check(frets)

    __call__ = is_playable
