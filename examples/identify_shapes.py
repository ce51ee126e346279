#!/usr/bin/env python3
"""
Example: Name the chords behind familiar shapes.

Usage:
    python examples/identify_shapes.py
"""

from chuk_mcp_fretboard import CatalogConfig, analyze_fingering
from chuk_mcp_fretboard.engine import parse_shape

SHAPES = ["022100", "x32010", "xx0232", "320003", "x02013", "133211", "x-x-12-14-15-14"]
CONFIG = CatalogConfig(max_fret=24)


def main() -> None:
    """Print the chord name, alternatives and playability of each shape."""
    for shape in SHAPES:
        analysis = analyze_fingering(parse_shape(shape), CONFIG)
        name = analysis.identity.name if analysis.identity else "-"
        also = ", ".join(alt.name for alt in analysis.alternatives)
        status = "ok" if analysis.is_playable else ", ".join(analysis.violations)
        print(f"{shape:<18} {name:<8} fingers={analysis.metrics.fingers} [{status}]", end="")
        print(f"  (also {also})" if also else "")


if __name__ == "__main__":
    main()
