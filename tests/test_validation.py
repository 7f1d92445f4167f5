import pytest
from pydantic import ValidationError

from tools.trello import OPERATIONS
from tools.trello.boards import CreateBoardArgs, GetBoardArgs, ListBoardsArgs
from tools.trello.cards import CreateCardArgs, UpdateCardArgs
from tools.trello.checklists import UpdateCheckItemArgs
from tools.trello.members import GetMemberArgs
from tools.trello.validation import MAX_TEXT_LENGTH, TRELLO_ID_PATTERN, format_validation_error

from conftest import BOARD_ID, CARD_ID, CHECK_ITEM_ID, LIST_ID, MEMBER_ID


@pytest.mark.parametrize("board_id", [
    "5F1A2B3C4D5E6F7A8B9C0D1E",   # uppercase
    "5f1a2b3c4d5e6f7a8b9c0d1G",   # one uppercase non-hex
    "5f1a2b3c4d5e6f7a8b9c0d1z",   # non-hex letter
    "5f1a2b3c4d5e6f7a8b9c0d1-",   # punctuation
    "5f1a2b3c4d5e6f7a8b9c0d1",    # 23 chars
    "5f1a2b3c4d5e6f7a8b9c0d1e0",  # 25 chars
    "bad-id",
])
def test_malformed_ids_are_rejected(creds, board_id):
    with pytest.raises(ValidationError):
        GetBoardArgs.model_validate({**creds, "boardId": board_id})


@pytest.mark.parametrize("board_id", [BOARD_ID, "0" * 24, "abcdef0123456789abcdef01"])
def test_lowercase_hex_ids_are_accepted(creds, board_id):
    args = GetBoardArgs.model_validate({**creds, "boardId": board_id})
    assert args.boardId == board_id


def test_id_lists_validate_every_item(creds):
    with pytest.raises(ValidationError) as exc:
        CreateCardArgs.model_validate({
            **creds, "listId": LIST_ID, "name": "x", "idLabels": [BOARD_ID, "NOTANID"],
        })
    assert "idLabels.1" in format_validation_error(exc.value)


@pytest.mark.parametrize("pos", ["top", "bottom", 0, 1, 65536, 12.5])
def test_position_accepts_tokens_and_non_negative_numbers(creds, pos):
    args = CreateCardArgs.model_validate({**creds, "listId": LIST_ID, "name": "x", "pos": pos})
    assert args.pos == pos


@pytest.mark.parametrize("pos", [-1, -0.5, "middle", "Top", "5", True, float("inf"), float("nan"), [1]])
def test_position_rejects_everything_else(creds, pos):
    with pytest.raises(ValidationError) as exc:
        CreateCardArgs.model_validate({**creds, "listId": LIST_ID, "name": "x", "pos": pos})
    assert "pos" in format_validation_error(exc.value)


def test_credentials_are_required_and_non_empty():
    with pytest.raises(ValidationError) as exc:
        ListBoardsArgs.model_validate({"apiKey": "", "filter": "open"})
    message = format_validation_error(exc.value)
    assert "apiKey" in message
    assert "token" in message


def test_enum_fields_are_closed(creds):
    with pytest.raises(ValidationError):
        ListBoardsArgs.model_validate({**creds, "filter": "starred"})
    with pytest.raises(ValidationError):
        CreateBoardArgs.model_validate({**creds, "name": "b", "prefs_permissionLevel": "secret"})


def test_list_filter_defaults_to_open(creds):
    assert ListBoardsArgs.model_validate(creds).filter == "open"


def test_text_length_limit(creds):
    CreateBoardArgs.model_validate({**creds, "name": "n" * MAX_TEXT_LENGTH})
    with pytest.raises(ValidationError):
        CreateBoardArgs.model_validate({**creds, "name": "n" * (MAX_TEXT_LENGTH + 1)})


def test_booleans_are_strict(creds):
    with pytest.raises(ValidationError):
        GetBoardArgs.model_validate({**creds, "boardId": BOARD_ID, "includeDetails": "yes"})


@pytest.mark.parametrize("due", ["2025-03-01T12:00:00Z", "2025-03-01T12:00:00.000Z", "2025-03-01T12:00:00+02:00"])
def test_datetime_accepts_iso_timestamps(creds, due):
    args = UpdateCardArgs.model_validate({**creds, "cardId": CARD_ID, "due": due})
    assert args.due == due


@pytest.mark.parametrize("due", ["2025-03-01", "tomorrow", "2025-13-01T12:00:00Z", "2025-03-01 12:00:00Z"])
def test_datetime_rejects_other_strings(creds, due):
    with pytest.raises(ValidationError):
        UpdateCardArgs.model_validate({**creds, "cardId": CARD_ID, "due": due})


def test_null_only_allowed_on_clearable_fields(creds):
    base = {**creds, "cardId": CARD_ID, "checkItemId": CHECK_ITEM_ID}

    args = UpdateCheckItemArgs.model_validate({**base, "due": None, "idMember": None})
    assert args.supplied("due", "idMember") == {"due": None, "idMember": None}

    with pytest.raises(ValidationError) as exc:
        UpdateCheckItemArgs.model_validate({**base, "name": None})
    assert "must not be null" in format_validation_error(exc.value)


def test_omitted_fields_are_not_supplied(creds):
    args = UpdateCardArgs.model_validate({**creds, "cardId": CARD_ID, "name": "renamed"})
    assert args.supplied("name", "desc", "due", "closed") == {"name": "renamed"}


def test_error_message_lists_every_violation(creds):
    with pytest.raises(ValidationError) as exc:
        CreateCardArgs.model_validate({
            **creds, "listId": "nope", "name": "", "pos": -3,
        })
    message = format_validation_error(exc.value)
    assert message.startswith("Invalid arguments: ")
    for field in ("listId", "name", "pos"):
        assert field in message


@pytest.mark.parametrize("member", ["me", "jane_doe", MEMBER_ID])
def test_member_ref_accepts_ids_usernames_and_me(creds, member):
    assert GetMemberArgs.model_validate({**creds, "memberId": member}).memberId == member


@pytest.mark.parametrize("member", ["Jane", "a", "me!", ""])
def test_member_ref_rejects_invalid(creds, member):
    with pytest.raises(ValidationError):
        GetMemberArgs.model_validate({**creds, "memberId": member})


def test_unknown_fields_are_ignored(creds):
    args = GetBoardArgs.model_validate({**creds, "boardId": BOARD_ID, "extra": 1})
    assert not hasattr(args, "extra")


def _first_required_id(op):
    schema = op.tool.inputSchema
    for name in schema["required"]:
        if schema["properties"][name].get("pattern") == TRELLO_ID_PATTERN:
            return name
    return None


ID_OPERATIONS = [op for op in OPERATIONS if _first_required_id(op)]


def test_most_operations_take_an_id():
    assert len(ID_OPERATIONS) == 22


@pytest.mark.parametrize("op", ID_OPERATIONS, ids=lambda op: op.name)
def test_every_id_field_rejects_uppercase_hex(op, creds):
    field = _first_required_id(op)
    with pytest.raises(ValidationError) as exc:
        op.arguments.model_validate({**creds, field: "5F1A2B3C4D5E6F7A8B9C0D1E"})
    mismatches = [
        err for err in exc.value.errors()
        if err["loc"] == (field,) and err["type"] == "string_pattern_mismatch"
    ]
    assert mismatches
