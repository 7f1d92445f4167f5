"""
Trello boards - create a board, list boards, fetch a board, list its lists.
"""

from typing import Literal, Optional

from mcp.types import Tool

from tools.trello.client import TrelloRequest
from tools.trello.operation import Operation
from tools.trello.projections import project_card, project_list
from tools.trello.schema import (
    flag_property, id_property, object_schema, status_filter_property,
    text_property,
)
from tools.trello.validation import (
    Flag, LongText, OptionalText, StatusFilter, ToolArguments, TrelloId,
)

PERMISSION_LEVELS = ["org", "private", "public", "enterprise"]


def _project_board(board: dict) -> dict:
    return {
        "id": board.get("id"),
        "name": board.get("name"),
        "description": board.get("desc") or "No description",
        "url": board.get("shortUrl"),
        "closed": board.get("closed"),
    }


# ── Create Board ─────────────────────────────────────────────────────────────

class CreateBoardArgs(ToolArguments):
    name: LongText
    desc: Optional[OptionalText] = None
    idOrganization: Optional[TrelloId] = None
    defaultLabels: Optional[Flag] = None
    defaultLists: Optional[Flag] = None
    prefs_permissionLevel: Optional[Literal["org", "private", "public", "enterprise"]] = None
    prefs_background: Optional[OptionalText] = None


def _create_board_request(args: CreateBoardArgs) -> TrelloRequest:
    body = {"name": args.name}
    body.update(args.supplied(
        "desc", "idOrganization", "defaultLabels", "defaultLists",
        "prefs_permissionLevel", "prefs_background",
    ))
    return TrelloRequest("POST", "/boards", "create board", body=body)


def _present_created_board(args: CreateBoardArgs, board: dict) -> dict:
    projected = _project_board(board)
    projected["permissionLevel"] = (board.get("prefs") or {}).get("permissionLevel")
    return {
        "summary": f"Created board: {board.get('name')} ({board.get('id')})",
        "board": projected,
    }


CREATE_BOARD = Operation(
    tool=Tool(
        name="trello_create_board",
        description="Create a new Trello board. Optionally set its description, visibility, default lists, and workspace.",
        inputSchema=object_schema(
            {
                "name": text_property("Name of the new board"),
                "desc": text_property("Optional description for the board", min_length=0),
                "idOrganization": id_property("Optional workspace/organization ID to add the board to"),
                "defaultLabels": flag_property(
                    "Whether to create the default labels (red, orange, yellow, green, blue, purple). "
                    "Trello creates them when omitted."
                ),
                "defaultLists": flag_property(
                    "Whether to create the default lists (To Do, Doing, Done). "
                    "Trello creates them when omitted."
                ),
                "prefs_permissionLevel": {
                    "type": "string",
                    "enum": PERMISSION_LEVELS,
                    "description": 'Board visibility: "private" (only members), "org" (workspace members), '
                                   '"public" (anyone), "enterprise" (enterprise members)',
                },
                "prefs_background": {
                    "type": "string",
                    "description": 'Background color or image ID (e.g. "blue", "green", "red", "orange", '
                                   '"purple", "pink", "lime", "sky", "grey")',
                },
            },
            required=["name"],
        ),
    ),
    arguments=CreateBoardArgs,
    action="creating board",
    request=_create_board_request,
    present=_present_created_board,
)


# ── List Boards ──────────────────────────────────────────────────────────────

class ListBoardsArgs(ToolArguments):
    filter: StatusFilter = "open"


def _list_boards_request(args: ListBoardsArgs) -> TrelloRequest:
    return TrelloRequest(
        "GET", "/members/me/boards", "list boards",
        params={"filter": args.filter},
    )


def _present_boards(args: ListBoardsArgs, boards: list) -> dict:
    board_list = []
    for board in boards:
        projected = _project_board(board)
        projected["lastActivity"] = board.get("dateLastActivity")
        board_list.append(projected)
    return {
        "summary": f"Found {len(boards)} {args.filter} board(s)",
        "boards": board_list,
    }


LIST_BOARDS = Operation(
    tool=Tool(
        name="list_boards",
        description="List all Trello boards accessible to the user. Use this to see all boards you have access to, or filter by status.",
        inputSchema=object_schema({"filter": status_filter_property("boards")}),
    ),
    arguments=ListBoardsArgs,
    action="listing boards",
    request=_list_boards_request,
    present=_present_boards,
)


# ── Get Board Details ────────────────────────────────────────────────────────

class GetBoardArgs(ToolArguments):
    boardId: TrelloId
    includeDetails: Flag = False


def _get_board_request(args: GetBoardArgs) -> TrelloRequest:
    params = {}
    if args.includeDetails:
        params = {"lists": "open", "cards": "open"}
    return TrelloRequest("GET", f"/boards/{args.boardId}", "get board details", params=params)


def _present_board(args: GetBoardArgs, board: dict) -> dict:
    projected = _project_board(board)
    projected["lastActivity"] = board.get("dateLastActivity")
    projected["permissions"] = (board.get("prefs") or {}).get("permissionLevel") or "unknown"
    if args.includeDetails:
        projected["lists"] = [project_list(lst) for lst in board.get("lists") or []]
        projected["cards"] = [project_card(card) for card in board.get("cards") or []]
    return {
        "summary": f"Board: {board.get('name')}",
        "board": projected,
    }


GET_BOARD_DETAILS = Operation(
    tool=Tool(
        name="get_board_details",
        description="Get detailed information about a specific Trello board, including its lists and cards. Useful for understanding board structure and content.",
        inputSchema=object_schema(
            {
                "boardId": id_property("The ID of the board to retrieve (you can get this from list_boards)"),
                "includeDetails": flag_property(
                    "Include lists and cards in the response for complete board overview",
                    default=False,
                ),
            },
            required=["boardId"],
        ),
    ),
    arguments=GetBoardArgs,
    action="getting board details",
    request=_get_board_request,
    present=_present_board,
)


# ── Get Lists ────────────────────────────────────────────────────────────────

class GetListsArgs(ToolArguments):
    boardId: TrelloId
    filter: StatusFilter = "open"


def _get_lists_request(args: GetListsArgs) -> TrelloRequest:
    return TrelloRequest(
        "GET", f"/boards/{args.boardId}/lists", "get board lists",
        params={"filter": args.filter},
    )


def _present_lists(args: GetListsArgs, lists: list) -> dict:
    projected = []
    for lst in lists:
        item = project_list(lst)
        item["subscribed"] = lst.get("subscribed")
        projected.append(item)
    return {
        "summary": f"Found {len(lists)} {args.filter} list(s) in board",
        "boardId": args.boardId,
        "lists": projected,
    }


GET_LISTS = Operation(
    tool=Tool(
        name="get_lists",
        description='Get all lists in a specific Trello board. Use this to see the workflow columns (like "To Do", "In Progress", "Done") in a board.',
        inputSchema=object_schema(
            {
                "boardId": id_property("The ID of the board to get lists from (you can get this from list_boards)"),
                "filter": status_filter_property("lists"),
            },
            required=["boardId"],
        ),
    ),
    arguments=GetListsArgs,
    action="getting lists",
    request=_get_lists_request,
    present=_present_lists,
)
