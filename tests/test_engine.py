"""
Tests for the catalog engine stages.

Tests cover:
- FretboardEnumerator (enumerator.py)
- resolve / SoundedChord (resolver.py)
- ChordClassifier (classifier.py)
- PlayabilityFilter and metrics (playability.py)
- Fingering shapes and records (fingering.py)
- ResultAggregator (aggregator.py)
"""

import pytest

from chuk_mcp_fretboard.constants import BarrePolicy
from chuk_mcp_fretboard.core import (
    STANDARD_TUNING,
    ChordIdentity,
    ChordQuality,
    PitchClass,
    Tuning,
)
from chuk_mcp_fretboard.engine import (
    ChordClassifier,
    Fingering,
    FretboardEnumerator,
    PlayabilityFilter,
    PlayabilityMetrics,
    ResultAggregator,
    classify,
    format_shape,
    parse_shape,
    resolve,
)
from chuk_mcp_fretboard.engine.playability import (
    finger_count,
    fret_span,
    has_interior_mute,
    min_sounded_fret,
    muted_count,
)
from chuk_mcp_fretboard.models.config import PlayabilityConfig

C, D, E, G, A = PitchClass.C, PitchClass.D, PitchClass.E, PitchClass.G, PitchClass.A


def make_fingering(frets, identity=None) -> Fingering:
    """Build a Fingering for a shape in standard tuning."""
    if identity is None:
        sounded = resolve(STANDARD_TUNING, frets)
        identity = classify(sounded.pitch_classes, sounded.bass)
    return Fingering(frets, identity, PlayabilityMetrics.measure(frets))


class TestFretboardEnumerator:
    """Tests for FretboardEnumerator."""

    def test_full_small_space(self) -> None:
        """Two strings, frets 0-1: everything but the all-muted assignment."""
        enumerator = FretboardEnumerator(string_count=2, max_fret=1)
        assert list(enumerator) == [
            (None, 0),
            (None, 1),
            (0, None),
            (0, 0),
            (0, 1),
            (1, None),
            (1, 0),
            (1, 1),
        ]

    def test_min_strings_sounded(self) -> None:
        """Assignments with too few sounded strings are skipped."""
        enumerator = FretboardEnumerator(string_count=2, max_fret=1, min_strings_sounded=2)
        assert list(enumerator) == [(0, 0), (0, 1), (1, 0), (1, 1)]

    def test_lengths(self) -> None:
        """Every assignment has one entry per string."""
        enumerator = FretboardEnumerator(string_count=4, max_fret=2)
        assert all(len(frets) == 4 for frets in enumerator)

    def test_no_repeats(self) -> None:
        """The sequence never repeats an assignment."""
        assignments = list(FretboardEnumerator(string_count=3, max_fret=3))
        assert len(assignments) == len(set(assignments))
        assert len(assignments) == 5**3 - 1

    def test_span_pruning(self) -> None:
        """Branches whose fretted notes already span too far are abandoned."""
        enumerator = FretboardEnumerator(string_count=3, max_fret=6, max_span=2)
        assignments = list(enumerator)
        assert (1, 3, 0) in assignments
        assert (1, 4, 0) not in assignments
        assert (0, 6, None) in assignments
        for frets in assignments:
            fretted = [f for f in frets if f]
            if fretted:
                assert max(fretted) - min(fretted) <= 2

    def test_muted_pruning(self) -> None:
        """max_muted prunes branches with too many muted strings."""
        enumerator = FretboardEnumerator(string_count=4, max_fret=1, max_muted=1)
        assert all(sum(1 for f in frets if f is None) <= 1 for frets in enumerator)

    def test_shards_partition_the_space(self) -> None:
        """Concatenating the shards reproduces the full sequence."""
        enumerator = FretboardEnumerator(string_count=3, max_fret=4, max_span=2)
        sharded = []
        for shard in enumerator.shards():
            sharded.extend(enumerator.enumerate(first_string=[shard]))
        assert sharded == list(enumerator.enumerate())

    def test_restartable(self) -> None:
        """Each iteration starts afresh."""
        enumerator = FretboardEnumerator(string_count=2, max_fret=2)
        assert list(enumerator) == list(enumerator)

    def test_search_space_size(self) -> None:
        """Unpruned size is (max_fret + 2) ** N."""
        assert FretboardEnumerator(string_count=6, max_fret=9).search_space_size() == 11**6

    def test_zero_strings(self) -> None:
        """No strings, no assignments."""
        assert list(FretboardEnumerator(string_count=0, max_fret=3)) == []


class TestResolver:
    """Tests for pitch set resolution."""

    def test_open_e_major(self) -> None:
        """The open E shape sounds E, G# and B over a low E."""
        sounded = resolve(STANDARD_TUNING, (0, 2, 2, 1, 0, 0))
        assert sounded.pitch_classes == frozenset({PitchClass.E, PitchClass.Gs, PitchClass.B})
        assert sounded.bass == PitchClass.E
        assert sounded.lowest_midi == 40

    def test_muted_strings_ignored(self) -> None:
        """Muted strings contribute nothing."""
        sounded = resolve(STANDARD_TUNING, (None, 3, 2, 0, 1, 0))
        assert sounded.pitch_classes == frozenset({C, E, G})
        assert sounded.bass == C
        assert sounded.size == 3

    def test_bass_is_lowest_pitch_not_lowest_string(self) -> None:
        """A stopped low string can sound above an open higher string."""
        tuning = Tuning.from_notes(["E2", "A2"])
        sounded = resolve(tuning, (7, 0))  # B2 over open A2
        assert sounded.bass == A

    def test_reentrant_tuning(self) -> None:
        """Ukulele's high G string is not the bass."""
        tuning = Tuning.from_notes(["G4", "C4", "E4", "A4"])
        sounded = resolve(tuning, (0, 0, 0, 3))
        assert sounded.bass == C

    def test_all_muted(self) -> None:
        """Nothing sounded, no bass."""
        sounded = resolve(STANDARD_TUNING, (None,) * 6)
        assert sounded.pitch_classes == frozenset()
        assert sounded.bass is None


class TestChordClassifier:
    """Tests for ChordClassifier."""

    def test_major_root_position(self) -> None:
        """E, G#, B over E is E major."""
        identity = classify({PitchClass.E, PitchClass.Gs, PitchClass.B}, PitchClass.E)
        assert identity == ChordIdentity(PitchClass.E, ChordQuality.MAJOR)
        assert identity.name == "E"

    def test_inversion(self) -> None:
        """C major over E is C/E."""
        identity = classify({C, E, G}, E)
        assert identity.root == C
        assert identity.bass == E
        assert identity.name == "C/E"

    def test_root_position_preferred(self) -> None:
        """C6 and Am7 share notes; the bass picks the root."""
        notes = {C, E, G, A}
        assert classify(notes, C).name == "C6"
        assert classify(notes, A).name == "Am7"

    def test_smallest_root_when_no_root_position(self) -> None:
        """Without a root-position reading the lowest root value wins."""
        assert classify({C, E, G, A}, E).name == "C6/E"
        assert classify({C, D, G}, D).name == "Csus2/D"

    def test_sus_chords(self) -> None:
        """Csus2 and Gsus4 are the same notes."""
        assert classify({C, D, G}, C).name == "Csus2"
        assert classify({C, D, G}, G).name == "Gsus4"

    def test_symmetric_chords(self) -> None:
        """Augmented and diminished 7 chords take their root from the bass."""
        aug = {C, E, PitchClass.Gs}
        assert classify(aug, E).name == "Eaug"
        dim7 = {C, PitchClass.Ds, PitchClass.Fs, A}
        assert classify(dim7, PitchClass.Ds).name == "D#dim7"

    def test_superset_rejected(self) -> None:
        """C9 is not registered, so C E G Bb D is not a chord."""
        assert classify({C, E, G, PitchClass.As, D}, C) is None

    def test_subset_rejected(self) -> None:
        """Two notes never match a triad."""
        assert classify({C, E}, C) is None
        assert classify({C}, C) is None

    def test_candidates_are_exact(self) -> None:
        """Every candidate's offsets equal its quality's offsets."""
        classifier = ChordClassifier()
        notes = {C, E, G, A}
        candidates = classifier.candidates(notes, E)
        assert [c.name for c in candidates] == ["C6/E", "Am7/E"]
        for identity in candidates:
            offsets = frozenset(pc.offset_from(identity.root) for pc in notes)
            assert offsets == identity.quality.offsets

    def test_custom_registry(self) -> None:
        """A classifier only knows the qualities it is given."""
        classifier = ChordClassifier([ChordQuality.MAJOR])
        assert classifier.classify({C, E, G, A}, C) is None
        assert classifier.classify({C, E, G}, C).name == "C"
        assert classifier.qualities == [ChordQuality.MAJOR]


class TestPlayability:
    """Tests for playability metrics and the filter."""

    def test_fret_span(self) -> None:
        """Span ignores open and muted strings."""
        assert fret_span((None, 3, 2, 0, 1, 0)) == 2
        assert fret_span((None, None, 0, 2, 3, 2)) == 1
        assert fret_span((0, 0, 0, 0, 0, 0)) == 0

    def test_muted_and_min_fret(self) -> None:
        """Muted count and lowest sounded fret."""
        assert muted_count((None, 3, 2, 0, 1, 0)) == 1
        assert min_sounded_fret((None, 3, 2, 0, 1, 0)) == 0
        assert min_sounded_fret((None, 3, 5, 5, 5, 3)) == 3

    def test_finger_count(self) -> None:
        """One finger per fretted note for an open C."""
        assert finger_count((None, 3, 2, 0, 1, 0)) == 3

    def test_barre_counts_once(self) -> None:
        """The F barre chord needs three fingers under either policy."""
        f_barre = (1, 3, 3, 2, 1, 1)
        assert finger_count(f_barre, BarrePolicy.ANY) == 3
        assert finger_count(f_barre, BarrePolicy.CONTIGUOUS) == 3

    def test_broken_barre(self) -> None:
        """An open string under the barre breaks it under the contiguous policy."""
        shape = (2, 0, 2, 2, 0, 0)
        assert finger_count(shape, BarrePolicy.ANY) == 1
        assert finger_count(shape, BarrePolicy.CONTIGUOUS) == 3

    def test_barre_over_lower_fret(self) -> None:
        """A lower fret between the barred strings also breaks the barre."""
        shape = (3, 2, 3)
        assert finger_count(shape, BarrePolicy.ANY) == 2
        assert finger_count(shape, BarrePolicy.CONTIGUOUS) == 3

    def test_interior_mute(self) -> None:
        """Only muted strings between sounded strings are interior."""
        assert has_interior_mute((0, None, 0))
        assert not has_interior_mute((None, 0, 0, None))
        assert not has_interior_mute((None, None))

    def test_playable_shape(self) -> None:
        """Open C passes the default filter."""
        assert PlayabilityFilter().check((None, 3, 2, 0, 1, 0)) == []
        assert PlayabilityFilter().is_playable((0, 0, 0, 0, 0, 0))

    def test_span_and_fingers(self) -> None:
        """A five-fret stretch breaks span and finger rules."""
        assert PlayabilityFilter().check((1, 2, 3, 4, 5, 0)) == ["span", "fingers"]

    def test_four_fingers_allowed(self) -> None:
        """Exactly max_fingers is fine."""
        assert PlayabilityFilter().check((1, 2, 3, 4, 0, 0)) == []

    def test_too_many_muted(self) -> None:
        """More than max_muted muted strings fails."""
        assert PlayabilityFilter().check((None, None, None, 0, 0, 0)) == ["muted"]

    def test_interior_mute_rule(self) -> None:
        """Interior mutes fail unless allowed."""
        shape = (0, None, 0, 0, 0, 0)
        assert PlayabilityFilter().check(shape) == ["interior_mute"]
        lenient = PlayabilityFilter(PlayabilityConfig(allow_interior_mutes=True))
        assert lenient.check(shape) == []

    def test_callable(self) -> None:
        """The filter is usable as a predicate."""
        playable = PlayabilityFilter(PlayabilityConfig(max_span=1))
        shapes = [(None, 3, 2, 0, 1, 0), (0, 2, 2, 1, 0, 0)]
        assert [s for s in shapes if playable(s)] == [(0, 2, 2, 1, 0, 0)]


class TestFingering:
    """Tests for Fingering shapes and records."""

    def test_format_shape(self) -> None:
        """Single-digit shapes are compact, others dashed."""
        assert format_shape((None, 3, 2, 0, 1, 0)) == "x32010"
        assert format_shape((None, 10, 12, 12, 11, None)) == "x-10-12-12-11-x"

    def test_parse_shape(self) -> None:
        """Shapes parse back to assignments."""
        assert parse_shape("x32010") == (None, 3, 2, 0, 1, 0)
        assert parse_shape("X-10-12-12-11-x") == (None, 10, 12, 12, 11, None)
        assert parse_shape("x 3 2 0 1 0") == (None, 3, 2, 0, 1, 0)

    def test_parse_shape_invalid(self) -> None:
        """Non-numeric entries raise ValueError."""
        with pytest.raises(ValueError):
            parse_shape("x3201a")

    def test_to_record(self) -> None:
        """Records carry names, metrics and explicit muted markers."""
        record = make_fingering((None, 3, 2, 0, 1, 0)).to_record()
        assert record.frets == [None, 3, 2, 0, 1, 0]
        assert record.shape == "x32010"
        assert record.root == "C"
        assert record.bass == "C"
        assert record.quality == "major"
        assert record.span == 2
        assert record.fingers == 3
        assert record.muted == 1

    def test_inversion_record_bass(self) -> None:
        """Inversions report the sounding bass."""
        record = make_fingering((0, 3, 2, 0, 1, 0)).to_record()
        assert record.root == "C"
        assert record.bass == "E"


class TestResultAggregator:
    """Tests for ResultAggregator."""

    C_MAJOR = ChordIdentity(C, ChordQuality.MAJOR)

    def test_deduplicates(self) -> None:
        """The same assignment is only kept once per group."""
        aggregator = ResultAggregator()
        assert aggregator.add(make_fingering((None, 3, 2, 0, 1, 0)))
        assert not aggregator.add(make_fingering((None, 3, 2, 0, 1, 0)))
        assert len(aggregator) == 1

    def test_ranking(self) -> None:
        """Span, then lowest fret, then muted strings."""
        a = make_fingering((None, 3, 2, 0, 1, 0), self.C_MAJOR)
        b = make_fingering((None, 3, 2, 0, 1, None), self.C_MAJOR)
        c = make_fingering((None, 3, 5, 5, 5, 3), self.C_MAJOR)
        aggregator = ResultAggregator()
        aggregator.extend([c, b, a])
        [(identity, ranked)] = aggregator.groups()
        assert identity == self.C_MAJOR
        assert ranked == [a, b, c]

    def test_cap(self) -> None:
        """Groups are truncated after ranking."""
        a = make_fingering((None, 3, 2, 0, 1, 0), self.C_MAJOR)
        b = make_fingering((None, 3, 2, 0, 1, None), self.C_MAJOR)
        c = make_fingering((None, 3, 5, 5, 5, 3), self.C_MAJOR)
        aggregator = ResultAggregator(max_per_chord=2)
        aggregator.extend([c, b, a])
        assert aggregator.to_mapping() == {"C": [a, b]}

    def test_merge_matches_single_pass(self) -> None:
        """Merging compacted partial aggregators gives the same groups."""
        shapes = [
            (None, 3, 2, 0, 1, 0),
            (None, 3, 2, 0, 1, 3),
            (None, 3, 5, 5, 5, 3),
            (0, 3, 2, 0, 1, 0),
            (3, 3, 2, 0, 1, 0),
        ]
        fingerings = [make_fingering(s) for s in shapes]

        single = ResultAggregator(max_per_chord=1)
        single.extend(fingerings)

        left = ResultAggregator(max_per_chord=1)
        left.extend(fingerings[:2])
        right = ResultAggregator(max_per_chord=1)
        right.extend(fingerings[2:])
        merged = ResultAggregator(max_per_chord=1)
        merged.merge(left.compact())
        merged.merge(right.compact())

        assert merged.to_mapping() == single.to_mapping()

    def test_group_order(self) -> None:
        """Groups come out in root, quality, bass order."""
        aggregator = ResultAggregator()
        aggregator.add(make_fingering((None, None, 0, 2, 3, 2)))  # D
        aggregator.add(make_fingering((0, 3, 2, 0, 1, 0)))  # C/E
        aggregator.add(make_fingering((None, 3, 2, 0, 1, 0)))  # C
        assert list(aggregator.to_mapping()) == ["C", "C/E", "D"]
        assert aggregator.chord_count == 3
