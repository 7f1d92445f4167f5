"""
Trello cards - fetch, create, update, move, and comment on cards.
"""

from typing import ClassVar, Optional

from mcp.types import Tool

from tools.trello.client import TrelloRequest
from tools.trello.operation import Operation
from tools.trello.projections import (
    project_card, project_checklist, project_member,
)
from tools.trello.schema import (
    datetime_property, flag_property, id_list_property, id_property,
    object_schema, position_property, text_property,
)
from tools.trello.validation import (
    Flag, IsoDateTime, LongText, OptionalText, Position, ToolArguments,
    TrelloId,
)


# ── Get Card ─────────────────────────────────────────────────────────────────

class GetCardArgs(ToolArguments):
    cardId: TrelloId
    includeDetails: Flag = False


def _get_card_request(args: GetCardArgs) -> TrelloRequest:
    params = {}
    if args.includeDetails:
        params = {"checklists": "all", "attachments": "true", "members": "true"}
    return TrelloRequest("GET", f"/cards/{args.cardId}", "get card", params=params)


def _present_card(args: GetCardArgs, card: dict) -> dict:
    projected = project_card(card)
    if args.includeDetails:
        projected["checklists"] = [project_checklist(cl) for cl in card.get("checklists") or []]
        projected["attachments"] = [
            {"id": a.get("id"), "name": a.get("name"), "url": a.get("url")}
            for a in card.get("attachments") or []
        ]
        projected["members"] = [project_member(m) for m in card.get("members") or []]
    return {
        "summary": f"Card: {card.get('name')}",
        "card": projected,
    }


GET_CARD = Operation(
    tool=Tool(
        name="get_card",
        description="Get a single Trello card by ID. Set includeDetails to also fetch its checklists, attachments, and members.",
        inputSchema=object_schema(
            {
                "cardId": id_property("ID of the card to retrieve"),
                "includeDetails": flag_property(
                    "Include checklists, attachments, and members in the response",
                    default=False,
                ),
            },
            required=["cardId"],
        ),
    ),
    arguments=GetCardArgs,
    action="getting card",
    request=_get_card_request,
    present=_present_card,
)


# ── Create Card ──────────────────────────────────────────────────────────────

class CreateCardArgs(ToolArguments):
    listId: TrelloId
    name: LongText
    desc: Optional[OptionalText] = None
    pos: Optional[Position] = None
    due: Optional[IsoDateTime] = None
    start: Optional[IsoDateTime] = None
    dueComplete: Optional[Flag] = None
    idMembers: Optional[list[TrelloId]] = None
    idLabels: Optional[list[TrelloId]] = None


def _create_card_request(args: CreateCardArgs) -> TrelloRequest:
    body = {"idList": args.listId, "name": args.name}
    body.update(args.supplied(
        "desc", "pos", "due", "start", "dueComplete", "idMembers", "idLabels",
    ))
    return TrelloRequest("POST", "/cards", "create card", body=body)


def _present_created_card(args: CreateCardArgs, card: dict) -> dict:
    return {
        "summary": f"Created card: {card.get('name')} ({card.get('id')})",
        "card": project_card(card),
    }


CREATE_CARD = Operation(
    tool=Tool(
        name="create_card",
        description="Create a new card in a Trello list, with optional description, position, dates, members, and labels.",
        inputSchema=object_schema(
            {
                "listId": id_property("ID of the list to create the card in"),
                "name": text_property("Card title"),
                "desc": text_property("Card description (Markdown supported)", min_length=0),
                "pos": position_property('Position in the list: "top", "bottom", or a positive number'),
                "due": datetime_property("Due date (ISO 8601)"),
                "start": datetime_property("Start date (ISO 8601)"),
                "dueComplete": flag_property("Whether the due date is already complete"),
                "idMembers": id_list_property("Member IDs to assign to the card"),
                "idLabels": id_list_property("Label IDs to apply to the card"),
            },
            required=["listId", "name"],
        ),
    ),
    arguments=CreateCardArgs,
    action="creating card",
    request=_create_card_request,
    present=_present_created_card,
)


# ── Update Card ──────────────────────────────────────────────────────────────

UPDATABLE_CARD_FIELDS = (
    "name", "desc", "pos", "due", "start", "dueComplete", "closed",
    "idMembers", "idLabels",
)


class UpdateCardArgs(ToolArguments):
    nullable_fields: ClassVar[frozenset[str]] = frozenset({"due", "start"})

    cardId: TrelloId
    name: Optional[LongText] = None
    desc: Optional[OptionalText] = None
    pos: Optional[Position] = None
    due: Optional[IsoDateTime] = None
    start: Optional[IsoDateTime] = None
    dueComplete: Optional[Flag] = None
    closed: Optional[Flag] = None
    idMembers: Optional[list[TrelloId]] = None
    idLabels: Optional[list[TrelloId]] = None


def _update_card_request(args: UpdateCardArgs) -> TrelloRequest:
    return TrelloRequest(
        "PUT", f"/cards/{args.cardId}", "update card",
        body=args.supplied(*UPDATABLE_CARD_FIELDS),
    )


def _present_updated_card(args: UpdateCardArgs, card: dict) -> dict:
    changed = sorted(args.supplied(*UPDATABLE_CARD_FIELDS))
    return {
        "summary": f"Updated card: {card.get('name')} ({card.get('id')})",
        "updatedFields": changed,
        "card": project_card(card),
    }


UPDATE_CARD = Operation(
    tool=Tool(
        name="update_card",
        description=(
            "Update fields of a Trello card. Only the fields you pass are changed. "
            "Pass null for due or start to clear that date. Set closed to archive or restore the card."
        ),
        inputSchema=object_schema(
            {
                "cardId": id_property("ID of the card to update"),
                "name": text_property("New card name"),
                "desc": text_property("New card description", min_length=0),
                "pos": position_property('New position: "top", "bottom", or a positive number'),
                "due": datetime_property("New due date (ISO 8601), or null to clear it", nullable=True),
                "start": datetime_property("New start date (ISO 8601), or null to clear it", nullable=True),
                "dueComplete": flag_property("Mark the due date complete or incomplete"),
                "closed": flag_property("Archive (true) or restore (false) the card"),
                "idMembers": id_list_property("Replace the card's members with these member IDs"),
                "idLabels": id_list_property("Replace the card's labels with these label IDs"),
            },
            required=["cardId"],
        ),
    ),
    arguments=UpdateCardArgs,
    action="updating card",
    request=_update_card_request,
    present=_present_updated_card,
)


# ── Move Card ────────────────────────────────────────────────────────────────

class MoveCardArgs(ToolArguments):
    cardId: TrelloId
    listId: TrelloId
    boardId: Optional[TrelloId] = None
    pos: Optional[Position] = None


def _move_card_request(args: MoveCardArgs) -> TrelloRequest:
    body = {"idList": args.listId}
    if args.boardId is not None:
        body["idBoard"] = args.boardId
    body.update(args.supplied("pos"))
    return TrelloRequest("PUT", f"/cards/{args.cardId}", "move card", body=body)


def _present_moved_card(args: MoveCardArgs, card: dict) -> dict:
    return {
        "summary": f"Moved card: {card.get('name')} to list {card.get('idList')}",
        "card": project_card(card),
    }


MOVE_CARD = Operation(
    tool=Tool(
        name="move_card",
        description="Move a Trello card to another list, optionally on another board.",
        inputSchema=object_schema(
            {
                "cardId": id_property("ID of the card to move"),
                "listId": id_property("ID of the target list"),
                "boardId": id_property("ID of the target board, when moving across boards"),
                "pos": position_property('Position in the target list: "top", "bottom", or a positive number'),
            },
            required=["cardId", "listId"],
        ),
    ),
    arguments=MoveCardArgs,
    action="moving card",
    request=_move_card_request,
    present=_present_moved_card,
)


# ── Add Comment ──────────────────────────────────────────────────────────────

class AddCommentArgs(ToolArguments):
    cardId: TrelloId
    text: LongText


def _add_comment_request(args: AddCommentArgs) -> TrelloRequest:
    return TrelloRequest(
        "POST", f"/cards/{args.cardId}/actions/comments", "add comment",
        body={"text": args.text},
    )


def _present_comment(args: AddCommentArgs, action: dict) -> dict:
    text = (action.get("data") or {}).get("text", args.text)
    preview = text[:100] + ("..." if len(text) > 100 else "")
    return {
        "summary": f"Comment added to card {args.cardId}: {preview}",
        "comment": {
            "id": action.get("id"),
            "text": text,
            "date": action.get("date"),
            "author": project_member(action.get("memberCreator") or {}),
            "cardId": args.cardId,
        },
    }


ADD_COMMENT = Operation(
    tool=Tool(
        name="trello_add_comment",
        description="Add a comment to a Trello card. Useful for logging progress, results, or notes.",
        inputSchema=object_schema(
            {
                "cardId": id_property("ID of the card to comment on"),
                "text": text_property("Comment text (Markdown supported)"),
            },
            required=["cardId", "text"],
        ),
    ),
    arguments=AddCommentArgs,
    action="adding comment",
    request=_add_comment_request,
    present=_present_comment,
)
