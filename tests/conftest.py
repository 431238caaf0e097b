"""
Pytest configuration and shared fixtures.
"""

from typing import Any

import pytest

from chuk_mcp_spelling.core import Accidental, Letter


class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


@pytest.fixture
def mcp() -> MockMCPServer:
    """A fresh mock server."""
    return MockMCPServer("test")


@pytest.fixture
def spelling_tools(mcp: MockMCPServer) -> dict[str, Any]:
    """Spelling tools registered on a mock server."""
    from chuk_mcp_spelling.tools import register_spelling_tools

    return register_spelling_tools(mcp)


@pytest.fixture
def all_spellings() -> list[str]:
    """Every representable spelling: 7 letters x 5 accidentals."""
    return [f"{letter.name}{acc.symbol}" for letter in Letter for acc in Accidental]
