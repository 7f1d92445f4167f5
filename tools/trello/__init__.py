"""
Trello tools - boards, lists, cards, checklists, members and search.

All calls go through httpx against the Trello REST API.
"""

from tools.trello import (
    search, members, boards, cards, lists, advanced, checklists,
)


# Listing order, grouped by the phase each tool was introduced in
OPERATIONS = [
    # Essentials
    search.SEARCH,
    members.GET_USER_BOARDS,
    boards.GET_BOARD_DETAILS,
    cards.GET_CARD,
    cards.CREATE_CARD,
    # Core operations
    cards.UPDATE_CARD,
    cards.MOVE_CARD,
    cards.ADD_COMMENT,
    lists.GET_LIST_CARDS,
    lists.CREATE_LIST,
    boards.CREATE_BOARD,
    # Legacy names, kept for compatibility
    boards.LIST_BOARDS,
    boards.GET_LISTS,
    # Members
    members.GET_MEMBER,
    # Bulk reads
    advanced.GET_BOARD_CARDS,
    advanced.GET_CARD_ACTIONS,
    advanced.GET_CARD_ATTACHMENTS,
    advanced.GET_CARD_CHECKLISTS,
    advanced.GET_BOARD_MEMBERS,
    advanced.GET_BOARD_LABELS,
    # Checklists
    checklists.CREATE_CHECKLIST,
    checklists.GET_CHECKLIST,
    checklists.UPDATE_CHECKLIST,
    checklists.DELETE_CHECKLIST,
    checklists.CREATE_CHECK_ITEM,
    checklists.UPDATE_CHECK_ITEM,
    checklists.DELETE_CHECK_ITEM,
]

TOOLS = [op.tool for op in OPERATIONS]

HANDLERS = {op.name: op.handle for op in OPERATIONS}
