"""
Building blocks for the declared inputSchema of every Trello tool.
"""

from tools.trello.validation import (
    ISO_DATETIME_PATTERN, MAX_TEXT_LENGTH, MEMBER_REF_PATTERN, POSITION_TOKENS,
    TRELLO_ID_PATTERN,
)

CREDENTIAL_PROPERTIES = {
    "apiKey": {
        "type": "string",
        "description": "Trello API key (automatically provided by the host from your stored credentials)"
    },
    "token": {
        "type": "string",
        "description": "Trello API token (automatically provided by the host from your stored credentials)"
    },
}


def object_schema(properties: dict | None = None, required: list[str] | None = None) -> dict:
    """Wrap tool properties into an object schema that also demands credentials."""
    return {
        "type": "object",
        "properties": {**CREDENTIAL_PROPERTIES, **(properties or {})},
        "required": ["apiKey", "token", *(required or [])],
    }


def id_property(description: str, nullable: bool = False) -> dict:
    return {
        "type": ["string", "null"] if nullable else "string",
        "description": description,
        "pattern": TRELLO_ID_PATTERN,
    }


def id_list_property(description: str) -> dict:
    return {
        "type": "array",
        "items": {"type": "string", "pattern": TRELLO_ID_PATTERN},
        "description": description,
    }


def text_property(description: str, min_length: int = 1) -> dict:
    return {
        "type": "string",
        "description": description,
        "minLength": min_length,
        "maxLength": MAX_TEXT_LENGTH,
    }


def position_property(description: str) -> dict:
    return {
        "oneOf": [
            {"type": "number", "minimum": 0},
            {"type": "string", "enum": list(POSITION_TOKENS)},
        ],
        "description": description,
    }


def datetime_property(description: str, nullable: bool = False) -> dict:
    return {
        "type": ["string", "null"] if nullable else "string",
        "format": "date-time",
        "pattern": ISO_DATETIME_PATTERN,
        "description": description,
    }


def status_filter_property(noun: str) -> dict:
    return {
        "type": "string",
        "enum": ["all", "open", "closed"],
        "description": (
            f'Filter {noun} by status: "open" for active {noun}, '
            f'"closed" for archived {noun}, "all" for both'
        ),
        "default": "open",
    }


def member_ref_property(description: str) -> dict:
    return {
        "type": "string",
        "description": description,
        "pattern": MEMBER_REF_PATTERN,
    }


def limit_property(description: str) -> dict:
    return {
        "type": "integer",
        "minimum": 1,
        "maximum": 1000,
        "description": description,
    }


def flag_property(description: str, default: bool | None = None) -> dict:
    prop = {"type": "boolean", "description": description}
    if default is not None:
        prop["default"] = default
    return prop
