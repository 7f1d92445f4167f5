import json

import httpx
import pytest

import tools

from conftest import BOARD_ID, CARD_ID, LIST_ID, MEMBER_ID


@pytest.mark.asyncio
async def test_search_defaults_to_all_model_types(creds, trello_api):
    route = trello_api.get("/search").mock(return_value=httpx.Response(200, json={
        "boards": [{"id": BOARD_ID, "name": "Roadmap"}],
        "cards": [{"id": CARD_ID, "name": "Roadmap review", "idBoard": BOARD_ID, "idList": LIST_ID}],
    }))

    result = await tools.call_tool("trello_search", {**creds, "query": "roadmap"})

    params = route.calls.last.request.url.params
    assert params["query"] == "roadmap"
    assert params["modelTypes"] == "boards,cards,members"
    assert "boards_limit" not in params
    assert "partial" not in params

    body = json.loads(result.content[0].text)
    assert body["summary"] == "Found 1 board(s), 1 card(s), 0 member(s) matching 'roadmap'"
    assert body["cards"][0]["listId"] == LIST_ID
    assert body["members"] == []


@pytest.mark.asyncio
async def test_search_forwards_limits_and_partial(creds, trello_api):
    route = trello_api.get("/search").mock(return_value=httpx.Response(200, json={}))

    await tools.call_tool("trello_search", {
        **creds, "query": "road", "modelTypes": "cards", "cardsLimit": 5, "partial": True,
    })

    params = route.calls.last.request.url.params
    assert params["modelTypes"] == "cards"
    assert params["cards_limit"] == "5"
    assert params["partial"] == "true"


@pytest.mark.asyncio
@pytest.mark.parametrize("limit", [0, 1001, "10", 2.5])
async def test_search_rejects_bad_limits(limit, creds, trello_api):
    result = await tools.call_tool("trello_search", {**creds, "query": "road", "boardsLimit": limit})

    assert result.isError is True
    assert result.content[0].text.startswith("Error searching Trello: Invalid arguments: boardsLimit")
    assert trello_api.calls.call_count == 0


@pytest.mark.asyncio
async def test_search_rejects_empty_query(creds, trello_api):
    result = await tools.call_tool("trello_search", {**creds, "query": ""})
    assert result.isError is True
    assert "query" in result.content[0].text


@pytest.mark.asyncio
@pytest.mark.parametrize("member_id", ["me", "jane_doe", MEMBER_ID])
async def test_get_member_accepts_id_username_or_me(member_id, creds, trello_api):
    route = trello_api.get(f"/members/{member_id}").mock(return_value=httpx.Response(200, json={
        "id": MEMBER_ID, "username": "jane_doe", "fullName": "Jane Doe", "idBoards": [BOARD_ID],
    }))

    result = await tools.call_tool("trello_get_member", {**creds, "memberId": member_id})

    assert route.called
    body = json.loads(result.content[0].text)
    assert body["summary"] == "Member: Jane Doe (@jane_doe)"
    assert body["member"]["boardIds"] == [BOARD_ID]
    assert body["member"]["organizationIds"] == []


@pytest.mark.asyncio
async def test_get_member_rejects_path_injection(creds, trello_api):
    result = await tools.call_tool("trello_get_member", {**creds, "memberId": "../boards"})
    assert result.isError is True
    assert trello_api.calls.call_count == 0


@pytest.mark.asyncio
async def test_user_boards_request_compact_fields(creds, trello_api):
    route = trello_api.get("/members/me/boards").mock(return_value=httpx.Response(200, json=[
        {"id": BOARD_ID, "name": "Roadmap", "starred": True, "idOrganization": None},
    ]))

    result = await tools.call_tool("trello_get_user_boards", {**creds, "filter": "all"})

    params = route.calls.last.request.url.params
    assert params["filter"] == "all"
    assert "starred" in params["fields"].split(",")
    body = json.loads(result.content[0].text)
    assert body["summary"] == "You have 1 all board(s)"
    assert body["boards"][0]["starred"] is True
