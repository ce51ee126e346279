"""
MCP tool implementations.

Tools are organized by domain:
- catalog - Catalog building and chord identification
- tunings - Tuning discovery
"""

from chuk_mcp_fretboard.tools.catalog import register_catalog_tools, resolve_tuning
from chuk_mcp_fretboard.tools.tunings import register_tuning_tools

__all__ = [
    "register_catalog_tools",
    "register_tuning_tools",
    "resolve_tuning",
]
