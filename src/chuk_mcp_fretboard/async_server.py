#!/usr/bin/env python3
"""
Async Fretboard MCP Server using chuk-mcp-server

This server exposes the chord catalog engine as MCP tools:
- Building chord catalogs for any tuning
- Naming the chord a fingering plays
- Listing recognised chord qualities
- Discovering built-in and project tunings
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_fretboard.constants import TUNINGS_DIR_ENV
from chuk_mcp_fretboard.tools import register_catalog_tools, register_tuning_tools
from chuk_mcp_fretboard.tunings import TuningLoader

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-fretboard")

# Project tunings default to ./tunings
TUNINGS_DIR = Path(os.environ.get(TUNINGS_DIR_ENV, Path.cwd() / "tunings"))
TUNINGS_LIBRARY_PATH = Path(__file__).parent / "tunings" / "library"

tuning_loader = TuningLoader(
    library_path=TUNINGS_LIBRARY_PATH,
    project_path=TUNINGS_DIR,
)

# Register all tools
catalog_tools = register_catalog_tools(mcp, tuning_loader)
tuning_tools = register_tuning_tools(mcp, tuning_loader)

# Export tool functions for direct access
fretboard_build_catalog = catalog_tools["fretboard_build_catalog"]
fretboard_identify_chord = catalog_tools["fretboard_identify_chord"]
fretboard_list_qualities = catalog_tools["fretboard_list_qualities"]

fretboard_list_tunings = tuning_tools["fretboard_list_tunings"]
fretboard_describe_tuning = tuning_tools["fretboard_describe_tuning"]

logger.info("CHUK Fretboard MCP Server initialized")
logger.info(f"  Tuning library: {TUNINGS_LIBRARY_PATH}")
logger.info(f"  Project tunings: {TUNINGS_DIR}")
