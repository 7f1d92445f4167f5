"""
Configuration management for the Trello MCP Server.
Credentials come from the environment, falling back to a JSON config file.
"""

import json
import os
from pathlib import Path


CONFIG_DIR = Path.home() / ".config" / "trello-mcp"
CONFIG_FILE = CONFIG_DIR / "config.json"

API_KEY_ENV = "TRELLO_API_KEY"
TOKEN_ENV = "TRELLO_TOKEN"
LOG_LEVEL_ENV = "TRELLO_MCP_LOG_LEVEL"

DEFAULT_LOG_LEVEL = "WARNING"


def _load_config() -> dict:
    """Load config from file, or return empty dict if not found."""
    if CONFIG_FILE.exists():
        try:
            with open(CONFIG_FILE, 'r') as f:
                config = json.load(f)
        except (json.JSONDecodeError, IOError):
            return {}
        return config if isinstance(config, dict) else {}
    return {}


def get_trello_config() -> dict:
    """Get the trello section from config, or empty dict."""
    section = _load_config().get("trello", {})
    return section if isinstance(section, dict) else {}


def get_credentials() -> tuple[str, str] | None:
    """
    Get the (api_key, token) pair for the standalone server.

    Environment variables win over the config file. Returns None when
    either value is missing.
    """
    tc = get_trello_config()
    api_key = os.environ.get(API_KEY_ENV) or tc.get("api_key")
    token = os.environ.get(TOKEN_ENV) or tc.get("api_token")
    if not api_key or not token:
        return None
    return api_key, token


def get_log_level() -> str:
    """Get the configured log level name."""
    return os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
