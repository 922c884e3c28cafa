"""Application level configuration objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass(slots=True)
class CaptureConfig:
    """Configuration that controls how screenshots are captured."""

    strategy: str = "auto"
    """Capture backend (``"auto"``, ``"portal"`` or ``"spectacle"``)."""

    response_timeout: Optional[float] = None
    """Seconds to wait for the portal ``Response`` signal; ``None`` waits forever."""

    spectacle_cmd: str = "spectacle"
    """Executable used by the KDE capture backend."""

    temp_dir: Optional[Path] = None
    """Directory for temporary screenshots; defaults to the system temp dir."""


@dataclass(slots=True)
class OcrConfig:
    """Tesseract settings."""

    language: str = "auto"
    """Public OCR language choice, see :mod:`floating_dictionary.core.languages`."""

    tessdata_dir: Optional[Path] = None
    """Directory holding ``*.traineddata`` files, passed explicitly to Tesseract."""

    tesseract_cmd: Optional[Path] = None
    """Optional path to the Tesseract executable."""


@dataclass(slots=True)
class TranslationConfig:
    """Remote translation and dictionary sources."""

    target_lang: str = "th"
    google_url: str = "https://translate.googleapis.com/translate_a/single"
    longdo_url: str = "https://dict.longdo.com/mobile.php"
    timeout: float = 10.0
    user_agent: str = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"


@dataclass(slots=True)
class DisplayConfig:
    """Visual configuration for the result window."""

    max_examples: int = 2
    width: int = 500
    max_height: int = 600
    font_family: str = "Noto Sans"
    font_size: int = 16


@dataclass(slots=True)
class AppConfig:
    """Top level configuration container."""

    capture: CaptureConfig = field(default_factory=CaptureConfig)
    ocr: OcrConfig = field(default_factory=OcrConfig)
    translation: TranslationConfig = field(default_factory=TranslationConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    log_level: str = "INFO"


__all__ = ["AppConfig", "CaptureConfig", "DisplayConfig", "OcrConfig", "TranslationConfig"]
