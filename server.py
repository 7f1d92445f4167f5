#!/usr/bin/env python3
"""
Trello MCP Server
A Model Context Protocol server exposing Trello boards, lists, cards and
checklists as tools. Standalone mode: credentials come from the environment
or the config file and are injected into every call.
"""

import asyncio
import logging
import sys

from mcp.server.stdio import stdio_server

import config
from shell import ToolShell

logger = logging.getLogger(__name__)


def credential_injector(api_key: str, token: str):
    """Return a policy that overrides apiKey/token and keeps every other field."""

    def inject(arguments: dict) -> dict:
        return {**arguments, "apiKey": api_key, "token": token}

    return inject


def create_shell(api_key: str, token: str) -> ToolShell:
    """Build the single-tenant shell for a fixed credential pair."""
    return ToolShell(prepare_arguments=credential_injector(api_key, token))


async def main():
    """Run the MCP server."""
    credentials = config.get_credentials()
    if credentials is None:
        logger.warning("Trello credentials are not configured")
        raise SystemExit(
            f"Trello not configured. Set {config.API_KEY_ENV} and {config.TOKEN_ENV}, "
            f"or add api_key/api_token under \"trello\" in {config.CONFIG_FILE}."
        )

    app = create_shell(*credentials).create_server()
    async with stdio_server() as (read_stream, write_stream):
        await app.run(
            read_stream,
            write_stream,
            app.create_initialization_options()
        )


def run():
    """Console script entry point."""
    # stdout carries the protocol; logs go to stderr
    logging.basicConfig(
        stream=sys.stderr,
        level=config.get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    asyncio.run(main())


if __name__ == "__main__":
    run()
