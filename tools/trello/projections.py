"""
Trimmed views of Trello entities returned to the caller.

Trello payloads are large; tools only hand back the fields that matter.
"""


def project_label(label: dict) -> dict:
    return {
        "id": label.get("id"),
        "name": label.get("name"),
        "color": label.get("color"),
    }


def project_list(lst: dict) -> dict:
    return {
        "id": lst.get("id"),
        "name": lst.get("name"),
        "position": lst.get("pos"),
        "closed": lst.get("closed"),
    }


def project_card(card: dict) -> dict:
    return {
        "id": card.get("id"),
        "name": card.get("name"),
        "description": card.get("desc"),
        "url": card.get("shortUrl"),
        "listId": card.get("idList"),
        "boardId": card.get("idBoard"),
        "position": card.get("pos"),
        "due": card.get("due"),
        "dueComplete": card.get("dueComplete"),
        "closed": card.get("closed"),
        "labels": [project_label(label) for label in card.get("labels") or []],
        "memberIds": card.get("idMembers") or [],
        "lastActivity": card.get("dateLastActivity"),
    }


def project_member(member: dict) -> dict:
    return {
        "id": member.get("id"),
        "username": member.get("username"),
        "fullName": member.get("fullName"),
    }


def project_check_item(item: dict) -> dict:
    return {
        "id": item.get("id"),
        "name": item.get("name"),
        "state": item.get("state"),
        "position": item.get("pos"),
        "due": item.get("due"),
        "idMember": item.get("idMember"),
    }


def project_checklist(checklist: dict, with_items: bool = True) -> dict:
    projected = {
        "id": checklist.get("id"),
        "name": checklist.get("name"),
        "position": checklist.get("pos"),
        "cardId": checklist.get("idCard"),
        "boardId": checklist.get("idBoard"),
    }
    if with_items:
        projected["checkItems"] = [
            project_check_item(item) for item in checklist.get("checkItems") or []
        ]
    return projected
