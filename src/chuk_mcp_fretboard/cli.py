#!/usr/bin/env python3
"""
Command-line catalog generator.

Builds a configuration from a library tuning (or explicit notes), runs the
engine once and writes the catalog as JSON to stdout. With --identify, names
a single shape instead. Logs go to stderr.

Exit codes: 0 on success, 2 on an invalid configuration, unknown tuning or
unreadable shape.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from chuk_mcp_fretboard.constants import (
    DEFAULT_MAX_FINGERS,
    DEFAULT_MAX_FRET,
    DEFAULT_MAX_MUTED,
    DEFAULT_MAX_PER_CHORD,
    DEFAULT_MAX_SPAN,
    DEFAULT_MIN_STRINGS_SOUNDED,
    MAX_FRET_LIMIT,
    BarrePolicy,
)
from chuk_mcp_fretboard.engine import CatalogBuilder, analyze_fingering, parse_shape
from chuk_mcp_fretboard.models.config import CatalogConfig, PlayabilityConfig
from chuk_mcp_fretboard.tools.catalog import resolve_tuning
from chuk_mcp_fretboard.tunings import TuningLoader

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    """Argument parser for the catalog command."""
    parser = argparse.ArgumentParser(
        description="Enumerate every playable chord fingering for a tuning"
    )
    parser.add_argument("--tuning", default="standard", help="Library tuning name")
    parser.add_argument(
        "--notes",
        help="Comma-separated open notes, low to high (e.g. D2,A2,D3,G3,A3,D4)",
    )
    parser.add_argument(
        "--tunings-dir",
        type=Path,
        default=None,
        help="Project directory with extra tuning YAML files",
    )
    parser.add_argument(
        "--identify",
        metavar="SHAPE",
        help="Name a single shape (e.g. x32010) instead of building a catalog",
    )
    parser.add_argument(
        "--max-fret",
        type=int,
        default=None,
        help=f"Highest fret (default {DEFAULT_MAX_FRET}, or {MAX_FRET_LIMIT} with --identify)",
    )
    parser.add_argument("--min-strings", type=int, default=DEFAULT_MIN_STRINGS_SOUNDED)
    parser.add_argument("--max-span", type=int, default=DEFAULT_MAX_SPAN)
    parser.add_argument("--max-fingers", type=int, default=DEFAULT_MAX_FINGERS)
    parser.add_argument("--max-muted", type=int, default=DEFAULT_MAX_MUTED)
    parser.add_argument("--allow-interior-mutes", action="store_true")
    parser.add_argument(
        "--barre-policy",
        choices=[p.value for p in BarrePolicy],
        default=BarrePolicy.ANY.value,
    )
    parser.add_argument("--max-per-chord", type=int, default=DEFAULT_MAX_PER_CHORD)
    parser.add_argument("--workers", type=int, default=1, help="Worker processes")
    parser.add_argument("--indent", type=int, default=2, help="JSON indent (0 for compact)")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def config_from_args(args: argparse.Namespace) -> CatalogConfig:
    """Build a CatalogConfig from parsed arguments."""
    loader = TuningLoader(project_path=args.tunings_dir)
    notes = [n.strip() for n in args.notes.split(",") if n.strip()] if args.notes else None

    max_fret = args.max_fret
    if max_fret is None:
        max_fret = MAX_FRET_LIMIT if args.identify else DEFAULT_MAX_FRET

    return CatalogConfig(
        tuning=resolve_tuning(loader, args.tuning, notes),
        max_fret=max_fret,
        min_strings_sounded=args.min_strings,
        playability=PlayabilityConfig(
            max_span=args.max_span,
            max_fingers=args.max_fingers,
            max_muted=args.max_muted,
            allow_interior_mutes=args.allow_interior_mutes,
            barre_policy=BarrePolicy(args.barre_policy),
        ),
        max_per_chord=args.max_per_chord,
    )


def main(argv: list[str] | None = None) -> int:
    """Run the catalog command."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.INFO, stream=sys.stderr)
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    indent = args.indent or None
    try:
        config = config_from_args(args)
        if args.identify:
            analysis = analyze_fingering(parse_shape(args.identify), config)
            output = json.dumps(analysis.to_dict(), indent=indent)
        else:
            catalog = CatalogBuilder(config, workers=args.workers).build()
            output = catalog.to_json(indent=indent)
    except ValueError as e:
        # ConfigurationError, unknown tuning name, unparseable note or shape
        print(f"error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    sys.stdout.write(output)
    sys.stdout.write("\n")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
