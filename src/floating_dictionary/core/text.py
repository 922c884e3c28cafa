"""Classification and clean-up of OCR output."""

from __future__ import annotations

import unicodedata

from .models import ExtractedText, TextKind


def classify(text: str) -> TextKind:
    """Return :attr:`TextKind.WORD` for short whitespace-free text."""

    return ExtractedText(text=text, language_hint="").kind


def is_single_word(text: str) -> bool:
    return classify(text) is TextKind.WORD


def _is_noise(char: str) -> bool:
    # Letters, numbers and combining marks (Thai vowels) are kept.
    return unicodedata.category(char)[0] not in "LNM"


def strip_edge_noise(text: str) -> str:
    start, end = 0, len(text)
    while start < end and _is_noise(text[start]):
        start += 1
    while end > start and _is_noise(text[end - 1]):
        end -= 1
    return text[start:end]


class TextNormalizer:
    """Trim OCR output and strip punctuation noise around single words."""

    def normalize(self, text: str) -> str:
        trimmed = text.strip()
        if classify(trimmed) is TextKind.WORD:
            return strip_edge_noise(trimmed)
        return trimmed

    def normalize_extracted(self, extracted: ExtractedText) -> ExtractedText:
        return ExtractedText(
            text=self.normalize(extracted.text),
            language_hint=extracted.language_hint,
        )


__all__ = ["TextNormalizer", "classify", "is_single_word", "strip_edge_noise"]
