"""
Tuning tools - MCP tools for discovering tunings.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_fretboard.tunings import TuningLoader

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_tuning_tools(mcp: ChukMCPServer, loader: TuningLoader) -> dict[str, Any]:
    """
    Register tuning discovery tools with the MCP server.

    Args:
        mcp: The MCP server instance
        loader: The tuning loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_list_tunings() -> str:
        """
        List available tunings.

        Returns:
            JSON string with tuning names, descriptions and open notes
        """
        try:
            tunings = loader.list_tunings()
            return json.dumps(
                {
                    "status": "success",
                    "tunings": [t.model_dump() for t in tunings],
                    "count": len(tunings),
                }
            )
        except Exception as e:
            logger.exception("Failed to list tunings")
            return json.dumps({"status": "error", "message": str(e)})

    tools["fretboard_list_tunings"] = fretboard_list_tunings

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_describe_tuning(name: str) -> str:
        """
        Get the open strings of a tuning.

        Args:
            name: Tuning name (e.g., 'standard', 'dadgad')

        Returns:
            JSON string with the tuning's strings

        Example:
            fretboard_describe_tuning(name="open_g")
        """
        try:
            tuning = loader.get_tuning(name)
            if tuning is None:
                return json.dumps({"status": "error", "message": f"Tuning not found: {name}"})

            core = tuning.to_tuning()
            return json.dumps(
                {
                    "status": "success",
                    "tuning": {
                        "name": tuning.name,
                        "notes": core.notes,
                        "strings": [s.model_dump() for s in tuning.strings],
                        "string_count": len(tuning.strings),
                    },
                }
            )
        except Exception as e:
            logger.exception("Failed to describe tuning")
            return json.dumps({"status": "error", "message": str(e)})

    tools["fretboard_describe_tuning"] = fretboard_describe_tuning

    return tools
