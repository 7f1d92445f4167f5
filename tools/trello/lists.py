"""
Trello lists - read the cards in a list, create a list on a board.
"""

from typing import Optional

from mcp.types import Tool

from tools.trello.client import TrelloRequest
from tools.trello.operation import Operation
from tools.trello.projections import project_card, project_list
from tools.trello.schema import (
    id_property, object_schema, position_property, status_filter_property,
    text_property,
)
from tools.trello.validation import (
    LongText, Position, StatusFilter, ToolArguments, TrelloId,
)


# ── Get List Cards ───────────────────────────────────────────────────────────

class GetListCardsArgs(ToolArguments):
    listId: TrelloId
    filter: StatusFilter = "open"


def _get_list_cards_request(args: GetListCardsArgs) -> TrelloRequest:
    return TrelloRequest("GET", f"/lists/{args.listId}/cards/{args.filter}", "get list cards")


def _present_list_cards(args: GetListCardsArgs, cards: list) -> dict:
    return {
        "summary": f"Found {len(cards)} {args.filter} card(s) in list {args.listId}",
        "listId": args.listId,
        "cards": [project_card(card) for card in cards],
    }


GET_LIST_CARDS = Operation(
    tool=Tool(
        name="trello_get_list_cards",
        description="Get the cards in a specific Trello list.",
        inputSchema=object_schema(
            {
                "listId": id_property("ID of the list to read cards from"),
                "filter": status_filter_property("cards"),
            },
            required=["listId"],
        ),
    ),
    arguments=GetListCardsArgs,
    action="getting list cards",
    request=_get_list_cards_request,
    present=_present_list_cards,
)


# ── Create List ──────────────────────────────────────────────────────────────

class CreateListArgs(ToolArguments):
    boardId: TrelloId
    name: LongText
    pos: Optional[Position] = None


def _create_list_request(args: CreateListArgs) -> TrelloRequest:
    body = {"name": args.name, "idBoard": args.boardId}
    body.update(args.supplied("pos"))
    return TrelloRequest("POST", "/lists", "create list", body=body)


def _present_created_list(args: CreateListArgs, lst: dict) -> dict:
    projected = project_list(lst)
    projected["boardId"] = lst.get("idBoard")
    return {
        "summary": f"Created list: {lst.get('name')} ({lst.get('id')})",
        "list": projected,
    }


CREATE_LIST = Operation(
    tool=Tool(
        name="trello_create_list",
        description="Create a new list (column) on a Trello board.",
        inputSchema=object_schema(
            {
                "boardId": id_property("ID of the board to add the list to"),
                "name": text_property("Name of the new list"),
                "pos": position_property('Position on the board: "top", "bottom", or a positive number'),
            },
            required=["boardId", "name"],
        ),
    ),
    arguments=CreateListArgs,
    action="creating list",
    request=_create_list_request,
    present=_present_created_list,
)
