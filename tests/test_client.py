import json

import httpx
import pytest

from tools.trello.client import (
    TrelloAPIError, TrelloClient, TrelloRequest, parse_rate_limit,
)

LIST_BOARDS = TrelloRequest("GET", "/members/me/boards", "list boards", params={"filter": "open"})


def test_parse_rate_limit_reads_token_window():
    headers = httpx.Headers({
        "x-rate-limit-api-token-max": "300",
        "x-rate-limit-api-token-remaining": "12",
        "x-rate-limit-api-token-interval-ms": "10000",
    })
    assert parse_rate_limit(headers) == {"limit": 300, "remaining": 12, "intervalMs": 10000}


def test_parse_rate_limit_keeps_what_is_present():
    headers = httpx.Headers({"x-rate-limit-api-token-remaining": "7", "x-rate-limit-api-token-max": "lots"})
    assert parse_rate_limit(headers) == {"remaining": 7}


def test_parse_rate_limit_absent():
    assert parse_rate_limit(httpx.Headers({"content-type": "application/json"})) is None


@pytest.mark.asyncio
async def test_auth_goes_in_query_params(trello_api):
    route = trello_api.get("/members/me/boards").mock(return_value=httpx.Response(200, json=[]))

    async with TrelloClient("the-key", "the-token") as client:
        response = await client.call(LIST_BOARDS)

    params = route.calls.last.request.url.params
    assert params["key"] == "the-key"
    assert params["token"] == "the-token"
    assert params["filter"] == "open"
    assert response.data == []
    assert response.rate_limit is None


@pytest.mark.asyncio
async def test_body_is_sent_as_json_with_nulls(trello_api):
    route = trello_api.put("/cards/abc").mock(return_value=httpx.Response(200, json={"id": "abc"}))
    request = TrelloRequest("PUT", "/cards/abc", "update card", body={"due": None})

    async with TrelloClient("k", "t") as client:
        await client.call(request)

    sent = route.calls.last.request
    assert sent.headers["content-type"] == "application/json"
    assert json.loads(sent.content) == {"due": None}
    assert "due" not in sent.url.params


@pytest.mark.asyncio
@pytest.mark.parametrize("response", [httpx.Response(204), httpx.Response(200, content=b"")])
async def test_empty_body_decodes_to_empty_object(response, trello_api):
    trello_api.delete("/checklists/abc").mock(return_value=response)

    async with TrelloClient("k", "t") as client:
        result = await client.call(TrelloRequest("DELETE", "/checklists/abc", "delete checklist"))

    assert result.data == {}


@pytest.mark.asyncio
async def test_status_error_carries_code_and_text(trello_api):
    trello_api.get("/members/me/boards").mock(return_value=httpx.Response(429, text="API_TOKEN_LIMIT_EXCEEDED"))

    async with TrelloClient("k", "t") as client:
        with pytest.raises(TrelloAPIError) as excinfo:
            await client.call(LIST_BOARDS)

    assert excinfo.value.status_code == 429
    assert str(excinfo.value) == "Trello API returned 429 while trying to list boards: API_TOKEN_LIMIT_EXCEEDED"


@pytest.mark.asyncio
async def test_status_error_without_body_uses_reason(trello_api):
    trello_api.get("/members/me/boards").mock(return_value=httpx.Response(500))

    async with TrelloClient("k", "t") as client:
        with pytest.raises(TrelloAPIError, match="500 while trying to list boards: Internal Server Error"):
            await client.call(LIST_BOARDS)


@pytest.mark.asyncio
async def test_timeout(trello_api):
    trello_api.get("/members/me/boards").mock(side_effect=httpx.ReadTimeout("slow"))

    async with TrelloClient("k", "t") as client:
        with pytest.raises(TrelloAPIError, match="timed out while trying to list boards"):
            await client.call(LIST_BOARDS)


@pytest.mark.asyncio
async def test_malformed_body(trello_api):
    trello_api.get("/members/me/boards").mock(return_value=httpx.Response(200, text="<html>oops</html>"))

    async with TrelloClient("k", "t") as client:
        with pytest.raises(TrelloAPIError, match="malformed response"):
            await client.call(LIST_BOARDS)


@pytest.mark.asyncio
async def test_no_retry_after_failure(trello_api):
    route = trello_api.get("/members/me/boards").mock(return_value=httpx.Response(503))

    async with TrelloClient("k", "t") as client:
        with pytest.raises(TrelloAPIError):
            await client.call(LIST_BOARDS)

    assert route.call_count == 1


@pytest.mark.asyncio
async def test_call_outside_context_manager():
    client = TrelloClient("k", "t")
    with pytest.raises(RuntimeError):
        await client.call(LIST_BOARDS)
