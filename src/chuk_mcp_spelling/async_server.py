#!/usr/bin/env python3
"""
Async Spelling MCP Server using chuk-mcp-server

This server provides MCP tools for working with spelled notes. Spellings
are first-class: C# and Db are different notes, and intervals are counted
by letter name, so C to Fb is a diminished fourth.

The server provides tools for:
- Parsing note spellings (ASCII or Unicode accidentals)
- Measuring the diatonic interval between two spellings
- Spelling the note an interval above a root
- Canonical ordering and dedup of note sets
- Preparing selected notes for chord analysis
"""

import logging

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_spelling.tools import register_spelling_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-spelling")

# Register all tools
spelling_tools = register_spelling_tools(mcp)

# Export tool functions for direct access
spelling_parse = spelling_tools["spelling_parse"]
spelling_interval = spelling_tools["spelling_interval"]
spelling_transpose = spelling_tools["spelling_transpose"]
spelling_canonicalize = spelling_tools["spelling_canonicalize"]
spelling_note_set = spelling_tools["spelling_note_set"]

logger.info("CHUK Spelling MCP Server initialized")
logger.info(f"  Tools: {', '.join(sorted(spelling_tools))}")
