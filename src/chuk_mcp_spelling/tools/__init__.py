"""
MCP tool implementations.

Tools are organized by domain:
- spelling - Parsing, intervals, transposition and note sets
"""

from chuk_mcp_spelling.tools.spelling import register_spelling_tools

__all__ = [
    "register_spelling_tools",
]
