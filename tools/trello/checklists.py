"""
Trello checklists - checklist and check item CRUD.

Updating a check item goes through Trello's single card-scoped endpoint, so
renaming, re-stating, re-dating, re-assigning and moving to another checklist
all happen in one remote mutation.
"""

from typing import ClassVar, Literal, Optional

from mcp.types import Tool

from tools.trello.client import TrelloRequest
from tools.trello.operation import Operation
from tools.trello.projections import project_check_item, project_checklist
from tools.trello.schema import (
    datetime_property, flag_property, id_property, object_schema,
    position_property, text_property,
)
from tools.trello.validation import (
    Flag, IsoDateTime, LongText, Position, ToolArguments, TrelloId,
)


# ── Create Checklist ─────────────────────────────────────────────────────────

class CreateChecklistArgs(ToolArguments):
    idCard: TrelloId
    name: Optional[LongText] = None
    pos: Optional[Position] = None
    idChecklistSource: Optional[TrelloId] = None


def _create_checklist_request(args: CreateChecklistArgs) -> TrelloRequest:
    body = {"idCard": args.idCard}
    body.update(args.supplied("name", "pos", "idChecklistSource"))
    return TrelloRequest("POST", "/checklists", "create checklist", body=body)


def _present_created_checklist(args: CreateChecklistArgs, checklist: dict) -> dict:
    return {
        "summary": f'Created checklist "{checklist.get("name")}" ({checklist.get("id")}) on card {args.idCard}',
        "checklist": project_checklist(checklist),
    }


CREATE_CHECKLIST = Operation(
    tool=Tool(
        name="trello_create_checklist",
        description="Create a new checklist on a Trello card. Optionally copy items from an existing checklist.",
        inputSchema=object_schema(
            {
                "idCard": id_property("ID of the card to add the checklist to"),
                "name": text_property('Name of the checklist (Trello uses "Checklist" if omitted)'),
                "pos": position_property('Position of the checklist on the card: "top", "bottom", or a positive number'),
                "idChecklistSource": id_property("ID of an existing checklist to copy items from"),
            },
            required=["idCard"],
        ),
    ),
    arguments=CreateChecklistArgs,
    action="creating checklist",
    request=_create_checklist_request,
    present=_present_created_checklist,
)


# ── Get Checklist ────────────────────────────────────────────────────────────

class ChecklistArgs(ToolArguments):
    checklistId: TrelloId


def _present_checklist(args: ChecklistArgs, checklist: dict) -> dict:
    return {
        "summary": f"Checklist: {checklist.get('name')}",
        "checklist": project_checklist(checklist),
    }


GET_CHECKLIST = Operation(
    tool=Tool(
        name="trello_get_checklist",
        description="Get a specific Trello checklist by ID, including all of its check items.",
        inputSchema=object_schema(
            {"checklistId": id_property("ID of the checklist to retrieve")},
            required=["checklistId"],
        ),
    ),
    arguments=ChecklistArgs,
    action="getting checklist",
    request=lambda args: TrelloRequest(
        "GET", f"/checklists/{args.checklistId}", "get checklist",
        params={"checkItems": "all"},
    ),
    present=_present_checklist,
)


# ── Update Checklist ─────────────────────────────────────────────────────────

class UpdateChecklistArgs(ChecklistArgs):
    name: Optional[LongText] = None
    pos: Optional[Position] = None


def _update_checklist_request(args: UpdateChecklistArgs) -> TrelloRequest:
    return TrelloRequest(
        "PUT", f"/checklists/{args.checklistId}", "update checklist",
        body=args.supplied("name", "pos"),
    )


def _present_updated_checklist(args: UpdateChecklistArgs, checklist: dict) -> dict:
    return {
        "summary": f'Updated checklist "{checklist.get("name")}" ({checklist.get("id")})',
        "checklist": project_checklist(checklist, with_items=False),
    }


UPDATE_CHECKLIST = Operation(
    tool=Tool(
        name="trello_update_checklist",
        description="Update the name or position of a Trello checklist.",
        inputSchema=object_schema(
            {
                "checklistId": id_property("ID of the checklist to update"),
                "name": text_property("New name for the checklist"),
                "pos": position_property('New position: "top", "bottom", or a positive number'),
            },
            required=["checklistId"],
        ),
    ),
    arguments=UpdateChecklistArgs,
    action="updating checklist",
    request=_update_checklist_request,
    present=_present_updated_checklist,
)


# ── Delete Checklist ─────────────────────────────────────────────────────────

def _present_deleted_checklist(args: ChecklistArgs, _payload) -> dict:
    return {
        "summary": f"Deleted checklist {args.checklistId}",
        "checklistId": args.checklistId,
        "deleted": True,
    }


DELETE_CHECKLIST = Operation(
    tool=Tool(
        name="trello_delete_checklist",
        description="Permanently delete a checklist from a Trello card. This also removes all its check items.",
        inputSchema=object_schema(
            {"checklistId": id_property("ID of the checklist to delete")},
            required=["checklistId"],
        ),
    ),
    arguments=ChecklistArgs,
    action="deleting checklist",
    request=lambda args: TrelloRequest(
        "DELETE", f"/checklists/{args.checklistId}", "delete checklist"
    ),
    present=_present_deleted_checklist,
)


# ── Create Check Item ────────────────────────────────────────────────────────

class CreateCheckItemArgs(ChecklistArgs):
    name: LongText
    pos: Optional[Position] = None
    checked: Optional[Flag] = None
    due: Optional[IsoDateTime] = None
    idMember: Optional[TrelloId] = None


def _create_check_item_request(args: CreateCheckItemArgs) -> TrelloRequest:
    body = {"name": args.name}
    body.update(args.supplied("pos", "checked", "due", "idMember"))
    return TrelloRequest(
        "POST", f"/checklists/{args.checklistId}/checkItems", "create check item",
        body=body,
    )


def _present_created_check_item(args: CreateCheckItemArgs, item: dict) -> dict:
    projected = project_check_item(item)
    projected["checklistId"] = item.get("idChecklist")
    return {
        "summary": f'Created check item "{item.get("name")}" ({item.get("id")})',
        "checkItem": projected,
    }


CREATE_CHECK_ITEM = Operation(
    tool=Tool(
        name="trello_create_checklist_item",
        description="Add a new check item to an existing Trello checklist.",
        inputSchema=object_schema(
            {
                "checklistId": id_property("ID of the checklist to add the item to"),
                "name": text_property("Text/name of the check item"),
                "pos": position_property('Position in the checklist: "top", "bottom", or a positive number'),
                "checked": flag_property("Whether the item starts as checked (complete)", default=False),
                "due": datetime_property("Optional due date for the check item (ISO 8601 format)"),
                "idMember": id_property("Optional member ID to assign to this check item"),
            },
            required=["checklistId", "name"],
        ),
    ),
    arguments=CreateCheckItemArgs,
    action="creating check item",
    request=_create_check_item_request,
    present=_present_created_check_item,
)


# ── Update Check Item ────────────────────────────────────────────────────────

UPDATABLE_CHECK_ITEM_FIELDS = ("state", "name", "pos", "due", "idMember", "idChecklist")


class UpdateCheckItemArgs(ToolArguments):
    nullable_fields: ClassVar[frozenset[str]] = frozenset({"due", "idMember"})

    cardId: TrelloId
    checkItemId: TrelloId
    state: Optional[Literal["complete", "incomplete"]] = None
    name: Optional[LongText] = None
    pos: Optional[Position] = None
    due: Optional[IsoDateTime] = None
    idMember: Optional[TrelloId] = None
    idChecklist: Optional[TrelloId] = None


def _update_check_item_request(args: UpdateCheckItemArgs) -> TrelloRequest:
    return TrelloRequest(
        "PUT", f"/cards/{args.cardId}/checkItem/{args.checkItemId}", "update check item",
        body=args.supplied(*UPDATABLE_CHECK_ITEM_FIELDS),
    )


def _present_updated_check_item(args: UpdateCheckItemArgs, item: dict) -> dict:
    projected = project_check_item(item)
    projected["checklistId"] = item.get("idChecklist")
    projected["cardId"] = item.get("idCard", args.cardId)
    return {
        "summary": f'Updated check item "{item.get("name")}" ({item.get("id")})',
        "checkItem": projected,
    }


UPDATE_CHECK_ITEM = Operation(
    tool=Tool(
        name="trello_update_checklist_item",
        description=(
            "Update a check item on a Trello card. Use this to mark items complete/incomplete, rename them, "
            "change their position, set or clear the due date or assignee, or move them to a different checklist."
        ),
        inputSchema=object_schema(
            {
                "cardId": id_property("ID of the card that owns the check item"),
                "checkItemId": id_property("ID of the check item to update"),
                "state": {
                    "type": "string",
                    "enum": ["complete", "incomplete"],
                    "description": 'Mark the item as "complete" or "incomplete"',
                },
                "name": text_property("New text/name for the check item"),
                "pos": position_property('New position: "top", "bottom", or a positive number'),
                "due": datetime_property("Set a due date (ISO 8601) or null to remove it", nullable=True),
                "idMember": id_property("Assign a member by ID, or null to remove the assignment", nullable=True),
                "idChecklist": id_property(
                    "Move the check item to a different checklist by providing the target checklist ID"
                ),
            },
            required=["cardId", "checkItemId"],
        ),
    ),
    arguments=UpdateCheckItemArgs,
    action="updating check item",
    request=_update_check_item_request,
    present=_present_updated_check_item,
)


# ── Delete Check Item ────────────────────────────────────────────────────────

class DeleteCheckItemArgs(ChecklistArgs):
    checkItemId: TrelloId


def _present_deleted_check_item(args: DeleteCheckItemArgs, _payload) -> dict:
    return {
        "summary": f"Deleted check item {args.checkItemId} from checklist {args.checklistId}",
        "checklistId": args.checklistId,
        "checkItemId": args.checkItemId,
        "deleted": True,
    }


DELETE_CHECK_ITEM = Operation(
    tool=Tool(
        name="trello_delete_checklist_item",
        description="Permanently delete a check item from a Trello checklist.",
        inputSchema=object_schema(
            {
                "checklistId": id_property("ID of the checklist that contains the item"),
                "checkItemId": id_property("ID of the check item to delete"),
            },
            required=["checklistId", "checkItemId"],
        ),
    ),
    arguments=DeleteCheckItemArgs,
    action="deleting check item",
    request=lambda args: TrelloRequest(
        "DELETE", f"/checklists/{args.checklistId}/checkItems/{args.checkItemId}",
        "delete check item",
    ),
    present=_present_deleted_check_item,
)
