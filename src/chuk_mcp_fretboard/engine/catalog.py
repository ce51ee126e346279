"""
Catalog builder - runs the full pipeline.

TuningModel -> FretboardEnumerator -> PitchSetResolver -> ChordClassifier
-> PlayabilityFilter -> ResultAggregator -> Catalog

The search space is sharded by the first string's fret. Each shard runs the
whole pipeline against an immutable EngineContext and returns its own
aggregator; a single merge produces the catalog. The result does not depend
on how many workers ran the shards.
"""

from __future__ import annotations

import logging
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from typing import Any

from chuk_mcp_fretboard.core.chord import ChordIdentity
from chuk_mcp_fretboard.core.tuning import Tuning
from chuk_mcp_fretboard.engine.aggregator import ResultAggregator
from chuk_mcp_fretboard.engine.classifier import ChordClassifier
from chuk_mcp_fretboard.engine.enumerator import FretAssignment, FretboardEnumerator
from chuk_mcp_fretboard.engine.fingering import Fingering, format_shape
from chuk_mcp_fretboard.engine.playability import PlayabilityFilter, PlayabilityMetrics
from chuk_mcp_fretboard.engine.resolver import resolve
from chuk_mcp_fretboard.engine.validator import validate_config
from chuk_mcp_fretboard.errors import InvalidBounds
from chuk_mcp_fretboard.models.catalog import Catalog
from chuk_mcp_fretboard.models.config import CatalogConfig, PlayabilityConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineContext:
    """
    Validated, immutable state for one catalog run.

    Passed explicitly to every shard; workers share nothing else.
    """

    tuning: Tuning
    max_fret: int
    min_strings_sounded: int
    playability: PlayabilityConfig
    max_per_chord: int

    @classmethod
    def from_config(cls, config: CatalogConfig) -> EngineContext:
        """Validate a configuration and freeze it into a context."""
        validate_config(config)
        return cls(
            tuning=config.tuning.to_tuning(),
            max_fret=config.max_fret,
            min_strings_sounded=config.min_strings_sounded,
            playability=config.playability,
            max_per_chord=config.max_per_chord,
        )

    def enumerator(self) -> FretboardEnumerator:
        """Enumerator pruned by this context's span and muting limits."""
        return FretboardEnumerator(
            string_count=len(self.tuning),
            max_fret=self.max_fret,
            min_strings_sounded=self.min_strings_sounded,
            max_span=self.playability.max_span,
            max_muted=self.playability.max_muted,
        )


def run_shard(
    context: EngineContext,
    first_string: int | None,
    classifier: ChordClassifier | None = None,
) -> ResultAggregator:
    """
    Run the pipeline over the assignments whose first string is first_string.

    Args:
        context: The run's immutable state
        first_string: Fret (or MUTED) for string 0
        classifier: Classifier to use (built-in registry by default)

    Returns:
        A compacted aggregator for the shard
    """
    classifier = classifier or ChordClassifier()
    playability = PlayabilityFilter(context.playability)
    aggregator = ResultAggregator(context.max_per_chord)

    seen = 0
    for frets in context.enumerator().enumerate(first_string=[first_string]):
        seen += 1
        sounded = resolve(context.tuning, frets)
        identity = classifier.classify(sounded.pitch_classes, sounded.bass)
        if identity is None:
            continue
        if not playability.is_playable(frets):
            continue
        aggregator.add(Fingering(frets, identity, playability.measure(frets)))

    logger.debug(
        f"Shard {first_string!r}: {seen} candidates, {len(aggregator)} fingerings, "
        f"{aggregator.chord_count} chords"
    )
    return aggregator.compact()


def _run_shard_job(job: tuple[EngineContext, int | None]) -> ResultAggregator:
    context, first_string = job
    return run_shard(context, first_string)


class CatalogBuilder:
    """Builds a Catalog from a CatalogConfig."""

    def __init__(self, config: CatalogConfig | None = None, workers: int = 1):
        """
        Initialize the builder.

        Args:
            config: Run configuration (standard guitar defaults if omitted)
            workers: Worker processes; 1 runs every shard in this process
        """
        if workers < 1:
            raise InvalidBounds(f"workers must be >= 1, got {workers}.")
        self.config = config or CatalogConfig()
        self.workers = workers

    def aggregate(self) -> tuple[EngineContext, ResultAggregator]:
        """Validate, run every shard and merge the results."""
        context = EngineContext.from_config(self.config)
        shards = context.enumerator().shards()
        logger.info(
            f"Building catalog for {context.tuning} "
            f"(max_fret={context.max_fret}, {len(shards)} shards, {self.workers} workers)"
        )

        if self.workers == 1:
            results = [run_shard(context, shard) for shard in shards]
        else:
            jobs = [(context, shard) for shard in shards]
            with ProcessPoolExecutor(max_workers=self.workers) as pool:
                results = list(pool.map(_run_shard_job, jobs))

        merged = ResultAggregator(context.max_per_chord)
        for result in results:
            merged.merge(result)
        return context, merged

    def build(self) -> Catalog:
        """Build the catalog."""
        context, merged = self.aggregate()
        chords = {
            identity.name: [f.to_record() for f in fingerings]
            for identity, fingerings in merged.groups()
        }
        catalog = Catalog(
            tuning=context.tuning.name,
            strings=context.tuning.notes,
            max_fret=context.max_fret,
            max_span=context.playability.max_span,
            chords=chords,
        )
        logger.info(
            f"Catalog complete: {catalog.chord_count} chords, "
            f"{catalog.fingering_count} fingerings"
        )
        return catalog


def build_catalog(config: CatalogConfig | None = None, workers: int = 1) -> Catalog:
    """Build a catalog in one call."""
    return CatalogBuilder(config, workers).build()


@dataclass
class FingeringAnalysis:
    """Everything the engine knows about one assignment."""

    frets: FretAssignment
    identity: ChordIdentity | None
    alternatives: list[ChordIdentity]
    metrics: PlayabilityMetrics
    violations: list[str] = field(default_factory=list)

    @property
    def is_chord(self) -> bool:
        """True when the assignment classifies as a registered chord."""
        return self.identity is not None

    @property
    def is_playable(self) -> bool:
        """True when no playability rule is broken."""
        return not self.violations

    def to_fingering(self) -> Fingering | None:
        """The Fingering, if the assignment is a chord."""
        if self.identity is None:
            return None
        return Fingering(self.frets, self.identity, self.metrics)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready summary of the analysis."""
        identity = self.identity
        return {
            "frets": list(self.frets),
            "shape": format_shape(self.frets),
            "chord": identity.name if identity else None,
            "root": identity.root.spell() if identity else None,
            "quality": identity.quality.name if identity else None,
            "bass": identity.bass_note.spell() if identity else None,
            "alternatives": [alt.name for alt in self.alternatives],
            "span": self.metrics.span,
            "fingers": self.metrics.fingers,
            "muted": self.metrics.muted,
            "playable": self.is_playable,
            "violations": self.violations,
        }


def analyze_fingering(
    frets: FretAssignment,
    config: CatalogConfig | None = None,
    classifier: ChordClassifier | None = None,
) -> FingeringAnalysis:
    """
    Classify and score a single assignment.

    Args:
        frets: One fret (or MUTED) per string
        config: Configuration supplying the tuning and playability limits
        classifier: Classifier to use (built-in registry by default)

    Returns:
        FingeringAnalysis with the best identity, every alternative reading,
        metrics and broken playability rules
    """
    context = EngineContext.from_config(config or CatalogConfig())
    if len(frets) != len(context.tuning):
        raise InvalidBounds(f"Expected {len(context.tuning)} frets, got {len(frets)}.")
    for fret in frets:
        if fret is not None and not 0 <= fret <= context.max_fret:
            raise InvalidBounds(f"Fret {fret} is outside 0-{context.max_fret}.")

    classifier = classifier or ChordClassifier()
    playability = PlayabilityFilter(context.playability)
    sounded = resolve(context.tuning, frets)
    candidates = classifier.candidates(sounded.pitch_classes, sounded.bass)

    return FingeringAnalysis(
        frets=tuple(frets),
        identity=candidates[0] if candidates else None,
        alternatives=candidates[1:],
        metrics=playability.measure(frets),
        violations=playability.check(frets),
    )
