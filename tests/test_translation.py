import asyncio

import httpx
import pytest

from floating_dictionary.core.translation import GoogleTranslateClient, parse_google_response
from floating_dictionary.errors import NetworkConnectionError, NetworkTimeout, ParseError


def _client(handler) -> GoogleTranslateClient:
    return GoogleTranslateClient(
        client_factory=lambda: httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


def test_parse_google_response_concatenates_chunks() -> None:
    payload = [
        [["สวัสดี ", "Hello. ", None, None], ["โลก", "World", None, None]],
        None,
        "en",
    ]

    assert parse_google_response(payload) == ("สวัสดี โลก", "en")


@pytest.mark.parametrize(
    "payload",
    [
        {},
        [],
        ["not a list"],
        [[["chunk"]], None],
        [[["chunk"]], None, 3],
    ],
)
def test_parse_google_response_rejects_malformed_payloads(payload) -> None:
    with pytest.raises(ParseError):
        parse_google_response(payload)


def test_translate_sends_expected_query() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[[["สวัสดีโลก", "hello world"]], None, "en"])

    result = asyncio.run(_client(handler).translate("hello world", "th"))

    assert result == ("สวัสดีโลก", "en")
    params = seen[0].url.params
    assert seen[0].url.path == "/translate_a/single"
    assert params["client"] == "gtx"
    assert params["sl"] == "auto"
    assert params["tl"] == "th"
    assert params["dt"] == "t"
    assert params["q"] == "hello world"


def test_translate_maps_timeouts() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("too slow", request=request)

    with pytest.raises(NetworkTimeout):
        asyncio.run(_client(handler).translate("hello", "th"))


def test_translate_maps_connection_failures() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(NetworkConnectionError):
        asyncio.run(_client(handler).translate("hello", "th"))


def test_translate_rejects_invalid_json() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>blocked</html>")

    with pytest.raises(ParseError):
        asyncio.run(_client(handler).translate("hello", "th"))
