import asyncio

import httpx
import pytest

from floating_dictionary.core.dictionary import (
    DICTIONARY_PRIORITY,
    LongdoClient,
    parse_definition,
    parse_longdo_html,
)
from floating_dictionary.core.models import ExampleItem
from floating_dictionary.errors import NetworkConnectionError

LONGDO_PAGE = """
<html><body>
<b>Hope Dictionary</b>
<span>sponsored</span>
<table class="result-table">
  <tr><td>hello</td><td>(อุทาน) adj. เฮลโล</td></tr>
  <tr><td></td><td>(n) no headword</td></tr>
  <tr><td>lonely cell</td></tr>
</table>
<b>NECTEC Lexitron Dictionary EN-TH</b>
<div>advert</div>
<table class="other-table"><tr><td>skip</td><td>(n) wrong table</td></tr></table>
<table class="result-table">
  <tr><td>hello</td><td>(int) สวัสดี</td></tr>
  <tr><td>hello</td><td>(n) การทักทาย</td></tr>
</table>
<div><b>Nontri Dictionary</b><p>no table follows inside this div</p></div>
<table class="result-table"><tr><td>stray</td><td>(n) not a sibling</td></tr></table>
<b>ตัวอย่างประโยค</b>
<table class="result-table">
  <tr><td><font color="black">She said hello.</font><br><font color="black">เธอกล่าวสวัสดี</font></td></tr>
  <tr><td><font color="black">Only one sentence.</font></td></tr>
  <tr><td><font color="black">a</font><font color="black">b</font><font color="black">c</font></td></tr>
  <tr><td><font color="red">Wrong</font><font color="red">colour</font></td></tr>
  <tr><td><font color="black">Hello again.</font><font color="black">สวัสดีอีกครั้ง</font></td></tr>
</table>
</body></html>
"""


def test_parse_definition_uses_leading_parenthetical() -> None:
    assert parse_definition("(n) your self") == ("n", "your self")


def test_parse_definition_keeps_parenthetical_when_inline_tag_absent() -> None:
    assert parse_definition("(pron) hello there") == ("pron", "hello there")


def test_parse_definition_without_parenthetical_is_verbatim() -> None:
    assert parse_definition("v. to run fast") == ("N/A", "v. to run fast")


def test_parse_definition_prefers_inline_tag() -> None:
    assert parse_definition("(คำนาม) adj. happy") == ("adj", "happy")
    assert parse_definition("(x)  V ไป") == ("V", "ไป")


def test_parse_definition_inline_tag_needs_word_boundary() -> None:
    assert parse_definition("(n) never again") == ("n", "never again")


def test_translations_follow_dictionary_priority() -> None:
    data = parse_longdo_html(LONGDO_PAGE)

    assert [item.dictionary for item in data.translations] == [
        DICTIONARY_PRIORITY[0],
        DICTIONARY_PRIORITY[0],
        DICTIONARY_PRIORITY[2],
    ]
    first, second, third = data.translations
    assert (first.word, first.pos, first.translation) == ("hello", "int", "สวัสดี")
    assert (second.pos, second.translation) == ("n", "การทักทาย")
    assert (third.pos, third.translation) == ("adj", "เฮลโล")


def test_examples_require_exactly_two_coloured_fonts() -> None:
    data = parse_longdo_html(LONGDO_PAGE)

    assert data.examples == (
        ExampleItem(source="She said hello.", target="เธอกล่าวสวัสดี"),
        ExampleItem(source="Hello again.", target="สวัสดีอีกครั้ง"),
    )


def test_first_priority_missing_falls_back_to_next() -> None:
    html = """
    <b>Nontri Dictionary</b>
    <table class="result-table"><tr><td>hello</td><td>(n) คำทักทาย</td></tr></table>
    """
    data = parse_longdo_html(html)

    assert [item.dictionary for item in data.translations] == ["Nontri Dictionary"]


@pytest.mark.parametrize(
    "html",
    [
        "",
        "<html><body><p>Nothing found</p></body></html>",
        "<b>NECTEC Lexitron Dictionary EN-TH</b><p>no table</p>",
        "<table class='result-table'><tr><td>a<td>b",
        "<<<not html>>>",
    ],
)
def test_parser_degrades_to_empty_results(html: str) -> None:
    data = parse_longdo_html(html)

    assert data.translations == ()
    assert data.examples == ()


def test_longdo_client_sends_browser_user_agent() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, text=LONGDO_PAGE)

    client = LongdoClient(
        user_agent="TestBrowser/1.0",
        client_factory=lambda: httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )

    data = asyncio.run(client.fetch("hello"))

    assert seen[0].url.path == "/mobile.php"
    assert seen[0].url.params["search"] == "hello"
    assert seen[0].headers["User-Agent"] == "TestBrowser/1.0"
    assert len(data.translations) == 3


def test_longdo_client_maps_http_errors() -> None:
    client = LongdoClient(
        client_factory=lambda: httpx.AsyncClient(
            transport=httpx.MockTransport(lambda request: httpx.Response(503))
        ),
    )

    with pytest.raises(NetworkConnectionError):
        asyncio.run(client.fetch("hello"))


def test_longdo_client_maps_invalid_urls() -> None:
    client = LongdoClient(
        client_factory=lambda: httpx.AsyncClient(
            transport=httpx.MockTransport(lambda request: httpx.Response(200))
        ),
    )

    with pytest.raises(NetworkConnectionError):
        asyncio.run(client.fetch("a\x7fb"))


def test_longdo_supports_only_english_to_thai() -> None:
    client = LongdoClient()

    assert client.supports("en", "th")
    assert not client.supports("fr", "th")
    assert not client.supports("en", "ja")
