"""
Trello bulk reads - board cards, card actions/attachments/checklists,
board members and labels.
"""

from typing import Literal, Optional

from mcp.types import Tool

from tools.trello.client import TrelloRequest
from tools.trello.operation import Operation
from tools.trello.projections import (
    project_card, project_checklist, project_label, project_member,
)
from tools.trello.schema import (
    id_property, limit_property, object_schema, status_filter_property,
)
from tools.trello.validation import (
    ResultLimit, StatusFilter, ToolArguments, TrelloId,
)

ACTION_FILTERS = [
    "all", "commentCard", "updateCard", "createCard", "addMemberToCard",
    "removeMemberFromCard", "addAttachmentToCard", "addChecklistToCard",
    "updateCheckItemStateOnCard",
]


class BoardArgs(ToolArguments):
    boardId: TrelloId


class CardArgs(ToolArguments):
    cardId: TrelloId


def _board_schema(purpose: str) -> dict:
    return object_schema({"boardId": id_property(f"ID of the board {purpose}")}, required=["boardId"])


def _card_schema(purpose: str) -> dict:
    return object_schema({"cardId": id_property(f"ID of the card {purpose}")}, required=["cardId"])


# ── Board Cards ──────────────────────────────────────────────────────────────

class GetBoardCardsArgs(BoardArgs):
    filter: StatusFilter = "open"


def _present_board_cards(args: GetBoardCardsArgs, cards: list) -> dict:
    return {
        "summary": f"Found {len(cards)} {args.filter} card(s) on board {args.boardId}",
        "boardId": args.boardId,
        "cards": [project_card(card) for card in cards],
    }


GET_BOARD_CARDS = Operation(
    tool=Tool(
        name="trello_get_board_cards",
        description="Get every card on a Trello board across all lists.",
        inputSchema=object_schema(
            {
                "boardId": id_property("ID of the board to read cards from"),
                "filter": status_filter_property("cards"),
            },
            required=["boardId"],
        ),
    ),
    arguments=GetBoardCardsArgs,
    action="getting board cards",
    request=lambda args: TrelloRequest(
        "GET", f"/boards/{args.boardId}/cards/{args.filter}", "get board cards"
    ),
    present=_present_board_cards,
)


# ── Card Actions ─────────────────────────────────────────────────────────────

class GetCardActionsArgs(CardArgs):
    filter: Optional[Literal[
        "all", "commentCard", "updateCard", "createCard", "addMemberToCard",
        "removeMemberFromCard", "addAttachmentToCard", "addChecklistToCard",
        "updateCheckItemStateOnCard",
    ]] = None
    limit: Optional[ResultLimit] = None


def _get_card_actions_request(args: GetCardActionsArgs) -> TrelloRequest:
    return TrelloRequest(
        "GET", f"/cards/{args.cardId}/actions", "get card actions",
        params=args.supplied("filter", "limit"),
    )


def _present_card_actions(args: GetCardActionsArgs, actions: list) -> dict:
    return {
        "summary": f"Found {len(actions)} action(s) on card {args.cardId}",
        "cardId": args.cardId,
        "actions": [
            {
                "id": action.get("id"),
                "type": action.get("type"),
                "date": action.get("date"),
                "text": (action.get("data") or {}).get("text"),
                "member": project_member(action.get("memberCreator") or {}),
            }
            for action in actions
        ],
    }


GET_CARD_ACTIONS = Operation(
    tool=Tool(
        name="trello_get_card_actions",
        description="Get the activity history of a Trello card (comments, moves, updates).",
        inputSchema=object_schema(
            {
                "cardId": id_property("ID of the card to read activity from"),
                "filter": {
                    "type": "string",
                    "enum": ACTION_FILTERS,
                    "description": "Only return actions of this type. Trello's own default applies when omitted.",
                },
                "limit": limit_property("Maximum number of actions to return (1-1000)"),
            },
            required=["cardId"],
        ),
    ),
    arguments=GetCardActionsArgs,
    action="getting card actions",
    request=_get_card_actions_request,
    present=_present_card_actions,
)


# ── Card Attachments ─────────────────────────────────────────────────────────

def _present_attachments(args: CardArgs, attachments: list) -> dict:
    return {
        "summary": f"Found {len(attachments)} attachment(s) on card {args.cardId}",
        "cardId": args.cardId,
        "attachments": [
            {
                "id": a.get("id"),
                "name": a.get("name"),
                "url": a.get("url"),
                "mimeType": a.get("mimeType"),
                "bytes": a.get("bytes"),
                "date": a.get("date"),
                "isUpload": a.get("isUpload"),
            }
            for a in attachments
        ],
    }


GET_CARD_ATTACHMENTS = Operation(
    tool=Tool(
        name="trello_get_card_attachments",
        description="Get the files and links attached to a Trello card.",
        inputSchema=_card_schema("to read attachments from"),
    ),
    arguments=CardArgs,
    action="getting card attachments",
    request=lambda args: TrelloRequest(
        "GET", f"/cards/{args.cardId}/attachments", "get card attachments"
    ),
    present=_present_attachments,
)


# ── Card Checklists ──────────────────────────────────────────────────────────

def _present_card_checklists(args: CardArgs, checklists: list) -> dict:
    return {
        "summary": f"Found {len(checklists)} checklist(s) on card {args.cardId}",
        "cardId": args.cardId,
        "checklists": [project_checklist(cl) for cl in checklists],
    }


GET_CARD_CHECKLISTS = Operation(
    tool=Tool(
        name="trello_get_card_checklists",
        description="Get every checklist on a Trello card, with their check items.",
        inputSchema=_card_schema("to read checklists from"),
    ),
    arguments=CardArgs,
    action="getting card checklists",
    request=lambda args: TrelloRequest(
        "GET", f"/cards/{args.cardId}/checklists", "get card checklists"
    ),
    present=_present_card_checklists,
)


# ── Board Members ────────────────────────────────────────────────────────────

def _present_board_members(args: BoardArgs, members: list) -> dict:
    return {
        "summary": f"Found {len(members)} member(s) on board {args.boardId}",
        "boardId": args.boardId,
        "members": [project_member(m) for m in members],
    }


GET_BOARD_MEMBERS = Operation(
    tool=Tool(
        name="trello_get_board_members",
        description="Get the members of a Trello board. Use their IDs to assign cards or check items.",
        inputSchema=_board_schema("to read members from"),
    ),
    arguments=BoardArgs,
    action="getting board members",
    request=lambda args: TrelloRequest(
        "GET", f"/boards/{args.boardId}/members", "get board members"
    ),
    present=_present_board_members,
)


# ── Board Labels ─────────────────────────────────────────────────────────────

def _present_board_labels(args: BoardArgs, labels: list) -> dict:
    return {
        "summary": f"Found {len(labels)} label(s) on board {args.boardId}",
        "boardId": args.boardId,
        "labels": [project_label(label) for label in labels],
    }


GET_BOARD_LABELS = Operation(
    tool=Tool(
        name="trello_get_board_labels",
        description="Get the labels defined on a Trello board. Use their IDs when creating or updating cards.",
        inputSchema=_board_schema("to read labels from"),
    ),
    arguments=BoardArgs,
    action="getting board labels",
    request=lambda args: TrelloRequest(
        "GET", f"/boards/{args.boardId}/labels", "get board labels"
    ),
    present=_present_board_labels,
)
