"""
Catalog tools - MCP tools for building catalogs and naming fingerings.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_fretboard.constants import (
    DEFAULT_MAX_FINGERS,
    DEFAULT_MAX_FRET,
    DEFAULT_MAX_MUTED,
    DEFAULT_MAX_PER_CHORD,
    DEFAULT_MAX_SPAN,
    DEFAULT_MIN_STRINGS_SOUNDED,
    MAX_FRET_LIMIT,
    BarrePolicy,
    ErrorMessages,
)
from chuk_mcp_fretboard.core.chord import QUALITY_REGISTRY
from chuk_mcp_fretboard.engine import analyze_fingering, build_catalog, parse_shape
from chuk_mcp_fretboard.errors import ConfigurationError
from chuk_mcp_fretboard.models.config import (
    CatalogConfig,
    PlayabilityConfig,
    TuningConfiguration,
)
from chuk_mcp_fretboard.tunings import TuningLoader

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def resolve_tuning(
    loader: TuningLoader, tuning: str = "standard", notes: list[str] | None = None
) -> TuningConfiguration:
    """
    Resolve a tuning from explicit notes or a library name.

    Raises:
        ValueError: If the name is unknown or a note cannot be parsed
    """
    if notes:
        return TuningConfiguration.from_notes(notes)
    found = loader.get_tuning(tuning)
    if found is None:
        raise ValueError(ErrorMessages.TUNING_NOT_FOUND.format(name=tuning))
    return found


def register_catalog_tools(mcp: ChukMCPServer, loader: TuningLoader) -> dict[str, Any]:
    """
    Register catalog tools with the MCP server.

    Args:
        mcp: The MCP server instance
        loader: The tuning loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_build_catalog(
        tuning: str = "standard",
        notes: list[str] | None = None,
        max_fret: int = DEFAULT_MAX_FRET,
        min_strings_sounded: int = DEFAULT_MIN_STRINGS_SOUNDED,
        max_span: int = DEFAULT_MAX_SPAN,
        max_fingers: int = DEFAULT_MAX_FINGERS,
        max_muted: int = DEFAULT_MAX_MUTED,
        allow_interior_mutes: bool = False,
        barre_policy: str = "any",
        max_per_chord: int = DEFAULT_MAX_PER_CHORD,
        chord: str | None = None,
    ) -> str:
        """
        Build a chord catalog for a tuning.

        Enumerates every playable fingering of every recognised chord and
        groups them by chord name, best fingerings first.

        Args:
            tuning: Library tuning name ('standard', 'drop_d', 'dadgad', ...)
            notes: Explicit open notes, low to high (overrides tuning)
            max_fret: Highest fret to consider
            min_strings_sounded: Minimum non-muted strings
            max_span: Max fret distance between fretted notes
            max_fingers: Fretting fingers available
            max_muted: Max muted strings
            allow_interior_mutes: Allow muted strings between sounded ones
            barre_policy: 'any' or 'contiguous'
            max_per_chord: Fingerings kept per chord
            chord: Only return this chord name (e.g. 'C', 'Am7', 'D/F#')

        Returns:
            JSON string with the catalog

        Example:
            fretboard_build_catalog(tuning="drop_d", max_fret=5, chord="D")
        """
        try:
            config = CatalogConfig(
                tuning=resolve_tuning(loader, tuning, notes),
                max_fret=max_fret,
                min_strings_sounded=min_strings_sounded,
                playability=PlayabilityConfig(
                    max_span=max_span,
                    max_fingers=max_fingers,
                    max_muted=max_muted,
                    allow_interior_mutes=allow_interior_mutes,
                    barre_policy=BarrePolicy(barre_policy),
                ),
                max_per_chord=max_per_chord,
            )
            catalog = await asyncio.to_thread(build_catalog, config)
            data = catalog.model_dump(mode="json")
            if chord is not None:
                data["chords"] = {chord: data["chords"].get(chord, [])}

            return json.dumps(
                {
                    "status": "success",
                    "catalog": data,
                    "chord_count": catalog.chord_count,
                    "fingering_count": catalog.fingering_count,
                }
            )
        except ConfigurationError as e:
            return json.dumps({"status": "error", "code": e.code, "message": str(e)})
        except Exception as e:
            logger.exception("Failed to build catalog")
            return json.dumps({"status": "error", "message": str(e)})

    tools["fretboard_build_catalog"] = fretboard_build_catalog

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_identify_chord(
        frets: str,
        tuning: str = "standard",
        notes: list[str] | None = None,
        max_fret: int = MAX_FRET_LIMIT,
    ) -> str:
        """
        Name the chord a fingering plays and check whether it is playable.

        Args:
            frets: Tab shape, low string first ('x32010' or 'x-10-12-12-11-x')
            tuning: Library tuning name
            notes: Explicit open notes, low to high (overrides tuning)
            max_fret: Highest fret accepted in the shape

        Returns:
            JSON string with chord name, alternatives, metrics and violations

        Example:
            fretboard_identify_chord(frets="022100")
        """
        try:
            try:
                assignment = parse_shape(frets)
            except ValueError:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.INVALID_FRETS.format(shape=frets),
                    }
                )

            config = CatalogConfig(
                tuning=resolve_tuning(loader, tuning, notes),
                max_fret=max_fret,
            )
            analysis = analyze_fingering(assignment, config)
            return json.dumps({"status": "success", **analysis.to_dict()})
        except ConfigurationError as e:
            return json.dumps({"status": "error", "code": e.code, "message": str(e)})
        except Exception as e:
            logger.exception("Failed to identify chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["fretboard_identify_chord"] = fretboard_identify_chord

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_list_qualities() -> str:
        """
        List the chord qualities the catalog recognises.

        Returns:
            JSON string with quality names, suffixes and semitone offsets
        """
        return json.dumps(
            {
                "status": "success",
                "qualities": [
                    {
                        "name": q.name,
                        "suffix": q.suffix,
                        "offsets": sorted(q.offsets),
                    }
                    for q in QUALITY_REGISTRY
                ],
                "count": len(QUALITY_REGISTRY),
            }
        )

    tools["fretboard_list_qualities"] = fretboard_list_qualities

    return tools
