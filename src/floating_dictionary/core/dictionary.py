"""Longdo dictionary lookups and the scraper for its mobile result page."""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Sequence, Tuple

from bs4 import BeautifulSoup, Tag

from ..utils.html import iter_anchored_siblings, table_with_class, tag_text, text_contains
from .http import ClientFactory, default_client_factory, get
from .models import NOT_AVAILABLE, ExampleItem, LongdoData, TranslationItem

logger = logging.getLogger(__name__)

LONGDO_URL = "https://dict.longdo.com/mobile.php"
BROWSER_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"

SOURCE_LANG = "en"
TARGET_LANG = "th"
"""The only language pair the scraped dictionaries cover."""

DICTIONARY_PRIORITY: Tuple[str, ...] = (
    "NECTEC Lexitron Dictionary EN-TH",
    "Nontri Dictionary",
    "Hope Dictionary",
)
RESULT_TABLE_CLASS = "result-table"
EXAMPLES_HEADING = "ตัวอย่างประโยค"
EXAMPLE_FONT_COLOR = "black"

_LEADING_PARENTHETICAL = re.compile(r"^\s*\((.*?)\)\s*(.*)", re.DOTALL)
_INLINE_POS = re.compile(r"^(pron|adj|det|n|v|adv|int|conj)\b\.?\s*(.*)", re.IGNORECASE | re.DOTALL)


def parse_definition(definition: str) -> Tuple[str, str]:
    """Split a definition cell into ``(part_of_speech, translation)``.

    The part of speech is either the leading parenthetical, e.g. ``(n)``, or an
    abbreviation at the start of the remaining text, which wins when present.
    Without a leading parenthetical the whole definition is the translation.
    """

    match = _LEADING_PARENTHETICAL.match(definition)
    if match is None:
        return NOT_AVAILABLE, definition
    pos = match.group(1).strip() or NOT_AVAILABLE
    rest = match.group(2).strip()
    inline = _INLINE_POS.match(rest)
    if inline is not None:
        return inline.group(1), inline.group(2).strip()
    return pos, rest


def parse_translation_table(table: Tag, dictionary: str) -> List[TranslationItem]:
    items: List[TranslationItem] = []
    for row in table.find_all("tr"):
        cells = row.find_all("td")
        if len(cells) != 2:
            continue
        word = tag_text(cells[0])
        definition = tag_text(cells[1])
        if not word or not definition:
            continue
        pos, translation = parse_definition(definition)
        items.append(TranslationItem(word=word, pos=pos, translation=translation, dictionary=dictionary))
    return items


def parse_example_table(table: Tag) -> List[ExampleItem]:
    items: List[ExampleItem] = []
    for row in table.find_all("tr"):
        fonts = row.find_all("font", attrs={"color": EXAMPLE_FONT_COLOR})
        if len(fonts) != 2:
            continue
        source, target = tag_text(fonts[0]), tag_text(fonts[1])
        if source and target:
            items.append(ExampleItem(source=source, target=target))
    return items


def parse_longdo_html(
    html: str,
    dictionaries: Sequence[str] = DICTIONARY_PRIORITY,
) -> LongdoData:
    """Extract dictionary senses and example sentences; never raises."""

    soup = BeautifulSoup(html, "html.parser")
    is_result_table = table_with_class(RESULT_TABLE_CLASS)

    translations: List[TranslationItem] = []
    for name in dictionaries:
        for table in iter_anchored_siblings(soup, "b", text_contains(name), is_result_table):
            translations.extend(parse_translation_table(table, name))

    examples: List[ExampleItem] = []
    example_table = next(
        iter_anchored_siblings(soup, "b", text_contains(EXAMPLES_HEADING), is_result_table),
        None,
    )
    if example_table is not None:
        examples = parse_example_table(example_table)

    return LongdoData(translations=tuple(translations), examples=tuple(examples))


class LongdoClient:
    """Fetch and parse ``dict.longdo.com`` results for a single English word."""

    def __init__(
        self,
        url: str = LONGDO_URL,
        timeout: float = 10.0,
        user_agent: str = BROWSER_USER_AGENT,
        client_factory: Optional[ClientFactory] = None,
    ) -> None:
        self.url = url
        self.user_agent = user_agent
        self._client_factory = client_factory or default_client_factory(timeout)

    def supports(self, source_lang: str, target_lang: str) -> bool:
        return source_lang == SOURCE_LANG and target_lang == TARGET_LANG

    async def fetch(self, word: str) -> LongdoData:
        # The endpoint expects the literal word rather than form encoding.
        response = await get(
            self._client_factory,
            f"{self.url}?search={word}",
            headers={"User-Agent": self.user_agent},
        )
        data = parse_longdo_html(response.text)
        logger.debug(
            "Parsed Longdo result",
            extra={"word": word, "translations": len(data.translations), "examples": len(data.examples)},
        )
        return data


__all__ = [
    "DICTIONARY_PRIORITY",
    "LONGDO_URL",
    "LongdoClient",
    "parse_definition",
    "parse_example_table",
    "parse_longdo_html",
    "parse_translation_table",
]
