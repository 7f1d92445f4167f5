"""
Embeddable Trello MCP server.

For hosts that supply apiKey and token with every tool call; arguments reach
the tools unmodified.
"""

from mcp.server import Server

from shell import ToolShell


def create_shell() -> ToolShell:
    return ToolShell()


def create_mcp_server() -> Server:
    """Build an MCP server for a host that passes credentials per call."""
    return create_shell().create_server()
