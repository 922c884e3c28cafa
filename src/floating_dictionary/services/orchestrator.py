"""Decide which remote sources to query for a piece of text and merge their output."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional, Protocol, Tuple

from ..config import TranslationConfig
from ..core.dictionary import LongdoClient
from ..core.models import CombinedTranslationData, LongdoData, TextKind
from ..core.text import classify
from ..core.translation import GoogleTranslateClient
from ..errors import NetworkError

logger = logging.getLogger(__name__)

AUTO_DETECT = "auto"


class MachineTranslator(Protocol):
    async def translate(
        self, text: str, target_lang: str, source_lang: str = AUTO_DETECT
    ) -> Tuple[str, str]:
        ...


class DictionarySource(Protocol):
    def supports(self, source_lang: str, target_lang: str) -> bool:
        ...

    async def fetch(self, word: str) -> LongdoData:
        ...


def should_query_dictionary(
    kind: TextKind,
    detected_source: str,
    target_lang: str,
    dictionary: DictionarySource,
) -> bool:
    return kind is TextKind.WORD and dictionary.supports(detected_source, target_lang)


class TranslationOrchestrator:
    """Combine machine translation with dictionary data when it applies.

    The dictionary request depends on the language Google detects, so it is
    issued only after the translation call has completed.
    """

    def __init__(
        self,
        translator: Optional[MachineTranslator] = None,
        dictionary: Optional[DictionarySource] = None,
        config: Optional[TranslationConfig] = None,
    ) -> None:
        config = config or TranslationConfig()
        self.translator = translator or GoogleTranslateClient(
            url=config.google_url, timeout=config.timeout
        )
        self.dictionary = dictionary or LongdoClient(
            url=config.longdo_url, timeout=config.timeout, user_agent=config.user_agent
        )

    async def translate(self, text: str, target_lang: str) -> CombinedTranslationData:
        search_word = text.strip()
        kind = classify(search_word)

        try:
            google_translation, detected = await self.translator.translate(
                search_word, target_lang, AUTO_DETECT
            )
        except NetworkError as exc:
            logger.warning("Machine translation failed: %s", exc, extra={"text": search_word})
            google_translation, detected = f"Translation failed: {exc}", AUTO_DETECT

        longdo_data: Optional[LongdoData] = None
        if should_query_dictionary(kind, detected, target_lang, self.dictionary):
            try:
                longdo_data = await self.dictionary.fetch(search_word)
            except NetworkError as exc:
                logger.warning("Dictionary lookup failed: %s", exc, extra={"text": search_word})

        return CombinedTranslationData(
            search_word=search_word,
            source_lang=detected.upper(),
            target_lang=target_lang.upper(),
            google_translation=google_translation,
            longdo_data=longdo_data,
        )

    def translate_blocking(self, text: str, target_lang: str) -> CombinedTranslationData:
        """Run :meth:`translate` on a private event loop; for worker threads."""

        return asyncio.run(self.translate(text, target_lang))

    @staticmethod
    def failed_result(text: str, target_lang: str, reason: object) -> CombinedTranslationData:
        return CombinedTranslationData(
            search_word=text.strip(),
            source_lang=AUTO_DETECT.upper(),
            target_lang=target_lang.upper(),
            google_translation=f"Translation failed: {reason}",
        )


__all__ = ["DictionarySource", "MachineTranslator", "TranslationOrchestrator", "should_query_dictionary"]
