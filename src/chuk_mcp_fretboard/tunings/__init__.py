"""
Tuning library - named open-string configurations.

Built-in tunings ship as YAML in tunings/library; a project directory can add
or override them.
"""

from chuk_mcp_fretboard.tunings.loader import TuningLoader, TuningMetadata

__all__ = [
    "TuningLoader",
    "TuningMetadata",
]
