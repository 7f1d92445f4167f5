"""
Tool shell - one tool catalog behind an argument-preparation policy.

The standalone server and the embeddable server are both ToolShells; they
differ only in how arguments are prepared before dispatch, so their catalogs
cannot drift apart.
"""

import logging
from typing import Callable

from mcp import types
from mcp.server import Server
from mcp.shared.exceptions import McpError

import tools

logger = logging.getLogger(__name__)

SERVER_NAME = "trello-mcp-server"
SERVER_VERSION = "1.0.0"
PROTOCOL_VERSION = "2024-11-05"

ArgumentPolicy = Callable[[dict], dict]


class ToolShell:
    """
    Hosts the Trello tool catalog.

    Args:
        prepare_arguments: Applied to every argument map before dispatch.
            None passes arguments through unmodified.
    """

    def __init__(self, prepare_arguments: ArgumentPolicy | None = None):
        self._prepare_arguments = prepare_arguments

    def initialize(self) -> types.InitializeResult:
        """Static server identity, version and capabilities."""
        return types.InitializeResult(
            protocolVersion=PROTOCOL_VERSION,
            capabilities=types.ServerCapabilities(
                tools=types.ToolsCapability(),
                resources=types.ResourcesCapability(),
                prompts=types.PromptsCapability(),
            ),
            serverInfo=types.Implementation(name=SERVER_NAME, version=SERVER_VERSION),
        )

    def list_tools(self) -> list[types.Tool]:
        return tools.list_tools()

    async def call_tool(self, name: str, arguments: dict | None) -> types.CallToolResult:
        """
        Prepare arguments and dispatch.

        Raises:
            tools.UnknownToolError: If no tool has this name.
        """
        arguments = dict(arguments or {})
        if self._prepare_arguments is not None:
            arguments = self._prepare_arguments(arguments)
        return await tools.call_tool(name, arguments)

    def list_resources(self) -> types.ListResourcesResult:
        return types.ListResourcesResult(resources=[])

    def list_prompts(self) -> types.ListPromptsResult:
        return types.ListPromptsResult(prompts=[])

    def create_server(self) -> Server:
        """Build an MCP server whose handlers delegate to this shell."""
        app = Server(SERVER_NAME, version=SERVER_VERSION)

        @app.list_tools()
        async def list_tools() -> list[types.Tool]:
            """List available Trello tools."""
            return self.list_tools()

        # Arguments are checked by the tools' own models after preparation
        @app.call_tool(validate_input=False)
        async def call_tool(name: str, arguments: dict) -> types.CallToolResult:
            """Handle tool calls."""
            return await self.call_tool(name, arguments)

        # The decorated handler reports every exception as an isError result;
        # unknown tools must surface as JSON-RPC errors instead
        dispatch = app.request_handlers[types.CallToolRequest]

        async def call_tool_request(req: types.CallToolRequest) -> types.ServerResult:
            if not tools.has_tool(req.params.name):
                raise McpError(types.ErrorData(
                    code=types.METHOD_NOT_FOUND,
                    message=f"Unknown tool: {req.params.name}",
                ))
            return await dispatch(req)

        app.request_handlers[types.CallToolRequest] = call_tool_request

        @app.list_resources()
        async def list_resources() -> list[types.Resource]:
            return self.list_resources().resources

        @app.list_prompts()
        async def list_prompts() -> list[types.Prompt]:
            return self.list_prompts().prompts

        return app
