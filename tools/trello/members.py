"""
Trello members - the authenticated user's boards and member profiles.
"""

from mcp.types import Tool

from tools.trello.client import TrelloRequest
from tools.trello.operation import Operation
from tools.trello.schema import (
    member_ref_property, object_schema, status_filter_property,
)
from tools.trello.validation import MemberRef, StatusFilter, ToolArguments


# ── Get User Boards ──────────────────────────────────────────────────────────

class GetUserBoardsArgs(ToolArguments):
    filter: StatusFilter = "open"


def _get_user_boards_request(args: GetUserBoardsArgs) -> TrelloRequest:
    return TrelloRequest(
        "GET", "/members/me/boards", "get user boards",
        params={"filter": args.filter, "fields": "name,desc,closed,shortUrl,idOrganization,starred"},
    )


def _present_user_boards(args: GetUserBoardsArgs, boards: list) -> dict:
    return {
        "summary": f"You have {len(boards)} {args.filter} board(s)",
        "boards": [
            {
                "id": board.get("id"),
                "name": board.get("name"),
                "url": board.get("shortUrl"),
                "closed": board.get("closed"),
                "starred": board.get("starred"),
                "organizationId": board.get("idOrganization"),
            }
            for board in boards
        ],
    }


GET_USER_BOARDS = Operation(
    tool=Tool(
        name="trello_get_user_boards",
        description="Get all boards the authenticated user is a member of. Start here to find board IDs.",
        inputSchema=object_schema({"filter": status_filter_property("boards")}),
    ),
    arguments=GetUserBoardsArgs,
    action="getting user boards",
    request=_get_user_boards_request,
    present=_present_user_boards,
)


# ── Get Member ───────────────────────────────────────────────────────────────

class GetMemberArgs(ToolArguments):
    memberId: MemberRef


def _get_member_request(args: GetMemberArgs) -> TrelloRequest:
    return TrelloRequest(
        "GET", f"/members/{args.memberId}", "get member",
        params={"fields": "username,fullName,initials,bio,url,idBoards,idOrganizations"},
    )


def _present_member(args: GetMemberArgs, member: dict) -> dict:
    return {
        "summary": f"Member: {member.get('fullName')} (@{member.get('username')})",
        "member": {
            "id": member.get("id"),
            "username": member.get("username"),
            "fullName": member.get("fullName"),
            "initials": member.get("initials"),
            "bio": member.get("bio"),
            "url": member.get("url"),
            "boardIds": member.get("idBoards") or [],
            "organizationIds": member.get("idOrganizations") or [],
        },
    }


GET_MEMBER = Operation(
    tool=Tool(
        name="trello_get_member",
        description='Get a Trello member\'s profile by member ID or username. Use "me" for the authenticated user.',
        inputSchema=object_schema(
            {"memberId": member_ref_property('Member ID, username, or "me"')},
            required=["memberId"],
        ),
    ),
    arguments=GetMemberArgs,
    action="getting member",
    request=_get_member_request,
    present=_present_member,
)
