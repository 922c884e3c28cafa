"""OCR processing backends."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Protocol

import pytesseract
from PIL import Image, UnidentifiedImageError

from ..errors import OcrError

logger = logging.getLogger(__name__)


class TextExtractor(Protocol):
    """Common interface for OCR engines."""

    def extract(self, image_bytes: bytes, language_hint: str) -> str:
        """Return the text found in ``image_bytes``."""


class TesseractExtractor:
    """Wraps :func:`pytesseract.image_to_string` for in-memory images."""

    def __init__(
        self,
        tessdata_dir: Path | str | None = None,
        tesseract_cmd: Path | str | None = None,
    ) -> None:
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = str(tesseract_cmd)
        self.tessdata_dir = Path(tessdata_dir) if tessdata_dir else None

    def _build_config(self) -> str:
        if self.tessdata_dir is None:
            return ""
        return f'--tessdata-dir "{self.tessdata_dir}"'

    def extract(self, image_bytes: bytes, language_hint: str) -> str:
        try:
            image = Image.open(io.BytesIO(image_bytes))
            image.load()
        except (UnidentifiedImageError, OSError) as exc:
            raise OcrError(f"Unreadable screenshot: {exc}") from exc

        try:
            text = pytesseract.image_to_string(
                image,
                lang=language_hint,
                config=self._build_config(),
            )
        except pytesseract.TesseractNotFoundError as exc:
            raise OcrError("Tesseract is not installed or not on PATH.") from exc
        except pytesseract.TesseractError as exc:
            raise OcrError(f"Tesseract failed: {exc.message}") from exc

        if not text.strip():
            raise OcrError("No text was recognised in the selected region.")
        logger.debug("OCR finished", extra={"language_hint": language_hint, "chars": len(text)})
        return text


__all__ = ["TesseractExtractor", "TextExtractor"]
