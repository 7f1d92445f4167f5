"""
Generic Trello operation - one definition per tool, one shared execution path.

Each tool is data: its MCP Tool declaration, its argument model, a function
that turns validated arguments into a TrelloRequest, and a function that
projects the Trello payload into the result object. ``Operation.handle``
runs the steps for all of them and always returns a CallToolResult.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable

from mcp.types import CallToolResult, TextContent, Tool
from pydantic import ValidationError

from tools.trello.client import TrelloAPIError, TrelloClient, TrelloRequest, TrelloResponse
from tools.trello.validation import ToolArguments, format_validation_error

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Unexpected internal error"


def text_result(payload: dict) -> CallToolResult:
    """Successful result: the payload as pretty-printed JSON."""
    return CallToolResult(content=[
        TextContent(type="text", text=json.dumps(payload, indent=2, default=str))
    ])


def error_result(message: str) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=message)], isError=True)


@dataclass(frozen=True)
class Operation:
    """
    A Trello tool.

    Attributes:
        tool: MCP declaration (name, description, inputSchema).
        arguments: Pydantic model the raw arguments are parsed into.
        action: Gerund phrase for error text, e.g. "creating card".
        request: Builds the Trello call from validated arguments.
        present: Builds the result object (summary + projection) from the
            validated arguments and the Trello payload.
    """

    tool: Tool
    arguments: type[ToolArguments]
    action: str
    request: Callable[[Any], TrelloRequest]
    present: Callable[[Any, Any], dict]

    @property
    def name(self) -> str:
        return self.tool.name

    async def handle(self, arguments: dict | None) -> CallToolResult:
        """Validate, call Trello, project. Never raises."""
        try:
            args = self.arguments.model_validate(arguments or {})
            request = self.request(args)
            async with TrelloClient(args.apiKey, args.token) as client:
                response = await client.call(request)
            return text_result(self._result(args, response))
        except ValidationError as e:
            message = format_validation_error(e)
        except TrelloAPIError as e:
            message = str(e)
        except Exception:
            logger.exception("Unhandled error in %s", self.name)
            message = INTERNAL_ERROR_MESSAGE

        return error_result(f"Error {self.action}: {message}")

    def _result(self, args: ToolArguments, response: TrelloResponse) -> dict:
        result = self.present(args, response.data)
        result["rateLimit"] = response.rate_limit
        return result
