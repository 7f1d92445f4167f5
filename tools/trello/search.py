"""
Trello search - one query across boards, cards and members.
"""

from typing import Literal, Optional

from mcp.types import Tool

from tools.trello.client import TrelloRequest
from tools.trello.operation import Operation
from tools.trello.projections import project_member
from tools.trello.schema import (
    flag_property, limit_property, object_schema, text_property,
)
from tools.trello.validation import Flag, LongText, ResultLimit, ToolArguments

MODEL_TYPES = ["all", "boards", "cards", "members"]


class SearchArgs(ToolArguments):
    query: LongText
    modelTypes: Literal["all", "boards", "cards", "members"] = "all"
    boardsLimit: Optional[ResultLimit] = None
    cardsLimit: Optional[ResultLimit] = None
    membersLimit: Optional[ResultLimit] = None
    partial: Optional[Flag] = None


def _search_request(args: SearchArgs) -> TrelloRequest:
    model_types = "boards,cards,members" if args.modelTypes == "all" else args.modelTypes
    params = {"query": args.query, "modelTypes": model_types}
    limits = args.supplied("boardsLimit", "cardsLimit", "membersLimit")
    for key, value in limits.items():
        # boardsLimit -> boards_limit
        params[key.replace("Limit", "_limit")] = value
    if args.partial is not None:
        params["partial"] = "true" if args.partial else "false"
    return TrelloRequest("GET", "/search", "search Trello", params=params)


def _present_search(args: SearchArgs, found: dict) -> dict:
    boards = found.get("boards") or []
    cards = found.get("cards") or []
    members = found.get("members") or []
    return {
        "summary": (
            f"Found {len(boards)} board(s), {len(cards)} card(s), "
            f"{len(members)} member(s) matching '{args.query}'"
        ),
        "boards": [
            {"id": b.get("id"), "name": b.get("name"), "url": b.get("shortUrl"), "closed": b.get("closed")}
            for b in boards
        ],
        "cards": [
            {
                "id": c.get("id"),
                "name": c.get("name"),
                "url": c.get("shortUrl"),
                "boardId": c.get("idBoard"),
                "listId": c.get("idList"),
                "closed": c.get("closed"),
            }
            for c in cards
        ],
        "members": [project_member(m) for m in members],
    }


SEARCH = Operation(
    tool=Tool(
        name="trello_search",
        description=(
            "Search Trello for boards, cards, and members matching a free-text query. "
            "Results come back grouped by type."
        ),
        inputSchema=object_schema(
            {
                "query": text_property("Search text"),
                "modelTypes": {
                    "type": "string",
                    "enum": MODEL_TYPES,
                    "description": "Restrict results to one kind of entity, or \"all\"",
                    "default": "all",
                },
                "boardsLimit": limit_property("Maximum number of boards to return (1-1000)"),
                "cardsLimit": limit_property("Maximum number of cards to return (1-1000)"),
                "membersLimit": limit_property("Maximum number of members to return (1-1000)"),
                "partial": flag_property("Match words by prefix instead of whole words"),
            },
            required=["query"],
        ),
    ),
    arguments=SearchArgs,
    action="searching Trello",
    request=_search_request,
    present=_present_search,
)
