"""
Fretboard enumerator - lazily generates candidate fret assignments.

The full space is {muted, 0..max_fret}^N, which reaches tens of millions of
assignments for a six-string neck. Assignments are built string by string and
a branch is abandoned as soon as the frets chosen so far already break the
span limit or mute too many strings.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from chuk_mcp_fretboard.constants import MUTED

# One entry per string, low to high: a fret number or MUTED (None)
FretAssignment = tuple[int | None, ...]


class FretboardEnumerator:
    """
    Generates fret assignments within configured bounds.

    Each call to enumerate() returns a fresh generator; nothing is shared
    between calls, so shards can run in separate processes.
    """

    def __init__(
        self,
        string_count: int,
        max_fret: int,
        min_strings_sounded: int = 0,
        max_span: int | None = None,
        max_muted: int | None = None,
    ):
        """
        Initialize the enumerator.

        Args:
            string_count: Number of strings (N)
            max_fret: Highest fret to try on any string
            min_strings_sounded: Minimum number of non-muted strings
            max_span: Prune branches whose fretted notes span more than this
            max_muted: Prune branches with more muted strings than this
        """
        self.string_count = string_count
        self.max_fret = max_fret
        self.min_strings_sounded = min_strings_sounded
        self.max_span = max_span
        self.max_muted = max_muted
        self._choices: tuple[int | None, ...] = (MUTED, *range(max_fret + 1))

    @property
    def choices(self) -> tuple[int | None, ...]:
        """Values tried on every string, in enumeration order."""
        return self._choices

    def shards(self) -> list[int | None]:
        """Shard keys: one per value of the first string."""
        return list(self._choices)

    def __iter__(self) -> Iterator[FretAssignment]:
        return self.enumerate()

    def enumerate(
        self, first_string: Sequence[int | None] | None = None
    ) -> Iterator[FretAssignment]:
        """
        Yield every assignment that survives the bounds.

        Args:
            first_string: Restrict the values tried on string 0 (a shard);
                None tries every value

        Yields:
            FretAssignment tuples of length string_count
        """
        if self.string_count <= 0:
            return
        first = self._choices if first_string is None else tuple(first_string)
        yield from self._extend([], first, None, None, 0)

    def _extend(
        self,
        prefix: list[int | None],
        choices: Sequence[int | None],
        lowest: int | None,
        highest: int | None,
        muted: int,
    ) -> Iterator[FretAssignment]:
        """Depth-first extension of a partial assignment."""
        index = len(prefix)
        if index == self.string_count:
            yield tuple(prefix)
            return

        # The all-muted assignment is never yielded
        needed = max(self.min_strings_sounded, 1)

        for fret in choices:
            new_lowest, new_highest, new_muted = lowest, highest, muted

            if fret is MUTED:
                new_muted += 1
                if self.string_count - new_muted < needed:
                    continue
                if self.max_muted is not None and new_muted > self.max_muted:
                    continue
            elif fret > 0:
                new_lowest = fret if lowest is None else min(lowest, fret)
                new_highest = fret if highest is None else max(highest, fret)
                if self.max_span is not None and new_highest - new_lowest > self.max_span:
                    continue

            prefix.append(fret)
            yield from self._extend(prefix, self._choices, new_lowest, new_highest, new_muted)
            prefix.pop()

    def search_space_size(self) -> int:
        """Size of the unpruned Cartesian product, (max_fret + 2) ** N."""
        return len(self._choices) ** self.string_count
