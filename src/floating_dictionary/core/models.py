"""Data models shared across the application."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional, Tuple

NOT_AVAILABLE = "N/A"
"""Part-of-speech placeholder used when a definition carries no tag."""

WORD_LENGTH_LIMIT = 50


class TextKind(Enum):
    """Classification that drives every downstream lookup decision."""

    WORD = "word"
    PHRASE = "phrase"


@dataclass(frozen=True, slots=True)
class ExtractedText:
    """OCR output together with the language hint used to produce it."""

    text: str
    language_hint: str

    @property
    def kind(self) -> TextKind:
        trimmed = self.text.strip()
        if len(trimmed) < WORD_LENGTH_LIMIT and not any(ch.isspace() for ch in trimmed):
            return TextKind.WORD
        return TextKind.PHRASE


@dataclass(frozen=True, slots=True)
class TranslationItem:
    """A single dictionary sense."""

    word: str
    pos: str
    translation: str
    dictionary: str


@dataclass(frozen=True, slots=True)
class ExampleItem:
    """A parallel example sentence pair."""

    source: str
    target: str


@dataclass(frozen=True, slots=True)
class LongdoData:
    translations: Tuple[TranslationItem, ...] = field(default_factory=tuple)
    examples: Tuple[ExampleItem, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LongdoData":
        return cls(
            translations=tuple(TranslationItem(**item) for item in data.get("translations", ())),
            examples=tuple(ExampleItem(**item) for item in data.get("examples", ())),
        )


@dataclass(frozen=True, slots=True)
class CombinedTranslationData:
    """Everything the presentation layer needs to render a lookup."""

    search_word: str
    source_lang: str
    target_lang: str
    google_translation: str
    longdo_data: Optional[LongdoData] = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CombinedTranslationData":
        longdo = data.get("longdo_data")
        return cls(
            search_word=data["search_word"],
            source_lang=data["source_lang"],
            target_lang=data["target_lang"],
            google_translation=data["google_translation"],
            longdo_data=LongdoData.from_dict(longdo) if longdo is not None else None,
        )

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)

    @classmethod
    def from_json(cls, payload: str) -> "CombinedTranslationData":
        return cls.from_dict(json.loads(payload))


__all__ = [
    "CombinedTranslationData",
    "ExampleItem",
    "ExtractedText",
    "LongdoData",
    "NOT_AVAILABLE",
    "TextKind",
    "TranslationItem",
    "WORD_LENGTH_LIMIT",
]
