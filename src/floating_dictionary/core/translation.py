"""Client for the public Google Translate ``translate_a/single`` endpoint."""

from __future__ import annotations

import json
from typing import Any, Optional, Tuple

from ..errors import ParseError
from .http import ClientFactory, default_client_factory, get

GOOGLE_TRANSLATE_URL = "https://translate.googleapis.com/translate_a/single"


class GoogleTranslateClient:
    """Machine translation that also reports the detected source language."""

    def __init__(
        self,
        url: str = GOOGLE_TRANSLATE_URL,
        timeout: float = 10.0,
        client_factory: Optional[ClientFactory] = None,
    ) -> None:
        self.url = url
        self._client_factory = client_factory or default_client_factory(timeout)

    async def translate(
        self,
        text: str,
        target_lang: str,
        source_lang: str = "auto",
    ) -> Tuple[str, str]:
        params = {
            "client": "gtx",
            "sl": source_lang,
            "tl": target_lang,
            "dt": "t",
            "q": text,
        }
        response = await get(self._client_factory, self.url, params=params)
        try:
            payload = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise ParseError(f"Google Translate returned invalid JSON: {exc}") from exc
        return parse_google_response(payload)


def parse_google_response(payload: Any) -> Tuple[str, str]:
    """Return ``(translated_text, detected_source_lang)`` from the nested array reply."""

    if not isinstance(payload, list) or not payload or not isinstance(payload[0], list):
        raise ParseError("Failed to parse Google Translate translation.")
    parts = []
    for item in payload[0]:
        if isinstance(item, list) and item and isinstance(item[0], str):
            parts.append(item[0])
    if len(payload) < 3 or not isinstance(payload[2], str):
        raise ParseError("Failed to parse detected source language from Google.")
    return "".join(parts), payload[2]


__all__ = ["GOOGLE_TRANSLATE_URL", "GoogleTranslateClient", "parse_google_response"]
