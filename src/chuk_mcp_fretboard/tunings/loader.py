"""
Tuning loader - discovers and loads named tunings.

Tunings can come from:
1. Built-in library (shipped with package)
2. Project tunings (user's project/tunings directory)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from chuk_mcp_fretboard.models.config import TuningConfiguration

logger = logging.getLogger(__name__)


class TuningMetadata(BaseModel):
    """Summary of a tuning for listings."""

    name: str = Field(..., description="Tuning name")
    description: str = Field("", description="Human-readable description")
    strings: list[str] = Field(default_factory=list, description="Open notes, low to high")


class TuningLoader:
    """
    Discovers and loads tuning definitions.

    Tunings are loaded from YAML files in the library and project directories.
    A tuning is named by its file stem, for listing and lookup alike.
    Project tunings override library tunings with the same name.

    File format:
        name: drop_d
        description: ...
        strings: [D2, A2, D3, G3, B3, E4]
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the tuning loader.

        Args:
            library_path: Path to built-in tuning library
            project_path: Path to project tunings directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, TuningConfiguration] = {}

    def list_tunings(self) -> list[TuningMetadata]:
        """
        List all available tunings, sorted by name.

        Project tunings take precedence over library tunings.
        """
        tunings: dict[str, TuningMetadata] = {}

        for directory in (self.library_path, self.project_path):
            if directory is None or not directory.exists():
                continue
            for path in sorted(directory.glob("*.yaml")):
                loaded = self._load(path)
                if loaded is None:
                    continue
                data, tuning = loaded
                tunings[path.stem] = TuningMetadata(
                    name=path.stem,
                    description=data.get("description", ""),
                    strings=tuning.to_tuning().notes,
                )

        return [tunings[name] for name in sorted(tunings)]

    def get_tuning(self, name: str) -> TuningConfiguration | None:
        """
        Get a tuning by name.

        Project tunings take precedence over library tunings.

        Args:
            name: Tuning name (file stem)

        Returns:
            TuningConfiguration if found, None otherwise
        """
        if name in self._cache:
            return self._cache[name]

        for directory in (self.project_path, self.library_path):
            if directory is None:
                continue
            path = directory / f"{name}.yaml"
            if not path.exists():
                continue
            tuning = self._load_tuning_file(path)
            if tuning is not None:
                self._cache[name] = tuning
                return tuning

        return None

    def _read(self, path: Path) -> dict[str, Any] | None:
        """Read a YAML file, logging and skipping anything malformed."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError):
            logger.warning(f"Skipping unreadable tuning file: {path}", exc_info=True)
            return None
        if not isinstance(data, dict):
            logger.warning(f"Skipping tuning file without a mapping: {path}")
            return None
        return data

    def _load(self, path: Path) -> tuple[dict[str, Any], TuningConfiguration] | None:
        """Read and parse a tuning file; None if either step fails."""
        data = self._read(path)
        if data is None:
            return None
        try:
            tuning = self._parse_tuning(data, path.stem)
        except ValueError:
            logger.warning(f"Skipping tuning file with invalid notes: {path}", exc_info=True)
            return None
        return data, tuning

    def _load_tuning_file(self, path: Path) -> TuningConfiguration | None:
        """Load a tuning from a YAML file."""
        loaded = self._load(path)
        return loaded[1] if loaded else None

    def _parse_tuning(self, data: dict[str, Any], name: str) -> TuningConfiguration:
        """Parse a tuning from YAML data."""
        declared = data.get("name")
        if declared is not None and str(declared) != name:
            logger.warning(f"Tuning file {name}.yaml declares name '{declared}'; using '{name}'")
        notes = [str(note) for note in data.get("strings", [])]
        return TuningConfiguration.from_notes(notes, name=name)

    def clear_cache(self) -> None:
        """Clear the tuning cache."""
        self._cache.clear()
