"""Core domain services for capturing, recognising and translating text."""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "CombinedTranslationData",
    "ExampleItem",
    "ExtractedText",
    "GoogleTranslateClient",
    "LongdoClient",
    "LongdoData",
    "PortalCapture",
    "SpectacleCapture",
    "TesseractExtractor",
    "TextKind",
    "TextNormalizer",
    "TranslationItem",
    "parse_longdo_html",
    "select_capture_strategy",
]


def __getattr__(name: str) -> Any:  # pragma: no cover - thin lazy import layer
    if name in __all__:
        module_map = {
            "PortalCapture": "capture",
            "SpectacleCapture": "capture",
            "select_capture_strategy": "capture",
            "LongdoClient": "dictionary",
            "parse_longdo_html": "dictionary",
            "GoogleTranslateClient": "translation",
            "TesseractExtractor": "ocr",
            "TextNormalizer": "text",
            "CombinedTranslationData": "models",
            "ExampleItem": "models",
            "ExtractedText": "models",
            "LongdoData": "models",
            "TextKind": "models",
            "TranslationItem": "models",
        }
        module_name = module_map[name]
        module = import_module(f"{__name__}.{module_name}")
        return getattr(module, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


def __dir__() -> list[str]:  # pragma: no cover - aids interactive use
    return sorted(__all__ + list(globals().keys()))
