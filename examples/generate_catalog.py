#!/usr/bin/env python3
"""
Example: Build chord catalogs and write them to JSON.

This demonstrates the full pipeline - from a tuning to a ranked catalog
of playable fingerings.

Usage:
    python examples/generate_catalog.py
    # Creates: examples/output/standard.json, examples/output/dadgad.json
"""

from pathlib import Path

from chuk_mcp_fretboard import CatalogConfig, build_catalog
from chuk_mcp_fretboard.tunings import TuningLoader


def main() -> None:
    """Generate example catalogs."""
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)
    loader = TuningLoader()

    for name in ("standard", "dadgad"):
        print(f"Building {name} catalog...")
        config = CatalogConfig(tuning=loader.get_tuning(name), max_fret=5)
        catalog = build_catalog(config, workers=4)

        path = output_dir / f"{name}.json"
        path.write_text(catalog.to_json())
        print(f"  {catalog.chord_count} chords, {catalog.fingering_count} fingerings")
        print(f"  Created: {path}")

        # Show the best shape for a few familiar chords
        for chord in ("C", "D", "E", "G", "Am", "Em"):
            records = catalog.get(chord)
            if records:
                print(f"    {chord:<4} {records[0].shape}")

    print("\nDone!")


if __name__ == "__main__":
    main()
