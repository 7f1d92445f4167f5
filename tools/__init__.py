"""
Trello MCP Tools - Tool definitions and dispatcher.
"""

import logging

from mcp.types import CallToolResult, Tool

from tools import trello

logger = logging.getLogger(__name__)


class UnknownToolError(ValueError):
    """Raised when a caller asks for a tool that is not in the catalog."""


# Collect all tools
TOOLS: list[Tool] = [
    *trello.TOOLS,
]

# Map tool names to handlers
_HANDLERS = {
    **trello.HANDLERS,
}

if len(_HANDLERS) != len(TOOLS):
    raise RuntimeError("Duplicate tool names in the catalog")


def has_tool(name: str) -> bool:
    return name in _HANDLERS


def list_tools() -> list[Tool]:
    """Return the tool catalog in display order."""
    return list(TOOLS)


async def call_tool(name: str, arguments: dict | None) -> CallToolResult:
    """Dispatch a tool call to the appropriate handler."""
    handler = _HANDLERS.get(name)
    if handler is None:
        raise UnknownToolError(f"Unknown tool: {name}")
    logger.debug("Dispatching %s", name)
    return await handler(arguments)
