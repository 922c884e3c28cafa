"""Mapping between public language codes and Tesseract language packs."""

from __future__ import annotations

from typing import Dict, List

AUTO = "auto"

OCR_LANGUAGE_CHOICES: Dict[str, str] = {
    "eng": "eng",
    "rus": "rus",
    "kor": "kor",
    "jpn": "jpn",
    "chi_sim": "chi_sim",
    "thai": "tha",
}
"""Command line choice -> Tesseract language pack."""

TARGET_TO_TESSERACT: Dict[str, str] = {
    "th": "tha",
    "en": "eng",
    "ru": "rus",
    "ko": "kor",
    "ja": "jpn",
    "zh-CN": "chi_sim",
}
"""Translation target code -> Tesseract language pack."""


def all_tesseract_languages() -> List[str]:
    return list(OCR_LANGUAGE_CHOICES.values())


def resolve_ocr_language(choice: str, target_lang: str) -> str:
    """Return the Tesseract language hint for ``choice``.

    ``auto`` means every bundled language except the one matching the
    translation target, joined with ``+`` so Tesseract tries all of them.
    """

    if choice != AUTO:
        try:
            return OCR_LANGUAGE_CHOICES[choice]
        except KeyError:
            raise ValueError(f"Unsupported OCR language: {choice!r}") from None
    excluded = TARGET_TO_TESSERACT.get(target_lang)
    return "+".join(lang for lang in all_tesseract_languages() if lang != excluded)


__all__ = [
    "AUTO",
    "OCR_LANGUAGE_CHOICES",
    "TARGET_TO_TESSERACT",
    "all_tesseract_languages",
    "resolve_ocr_language",
]
