"""High level orchestration of the capture -> OCR -> translation pipeline."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass

from ..config import AppConfig
from ..core.capture import CaptureTransport, select_capture_strategy
from ..core.image_loader import load_and_remove
from ..core.languages import resolve_ocr_language
from ..core.models import CombinedTranslationData, ExtractedText
from ..core.ocr import TesseractExtractor, TextExtractor
from ..core.text import TextNormalizer
from .channel import ResultChannel
from .orchestrator import TranslationOrchestrator

logger = logging.getLogger(__name__)


@dataclass
class PipelineDependencies:
    """Convenience container for the collaborating services."""

    capture: CaptureTransport
    ocr: TextExtractor
    normalizer: TextNormalizer
    orchestrator: TranslationOrchestrator


class ProcessingPipeline:
    """Coordinates the individual processing components."""

    def __init__(self, config: AppConfig, deps: PipelineDependencies | None = None) -> None:
        self.config = config
        self.capture = deps.capture if deps else select_capture_strategy(config.capture)
        self.ocr = deps.ocr if deps else TesseractExtractor(
            tessdata_dir=config.ocr.tessdata_dir,
            tesseract_cmd=config.ocr.tesseract_cmd,
        )
        self.normalizer = deps.normalizer if deps else TextNormalizer()
        self.orchestrator = deps.orchestrator if deps else TranslationOrchestrator(
            config=config.translation
        )

    @property
    def language_hint(self) -> str:
        return resolve_ocr_language(self.config.ocr.language, self.config.translation.target_lang)

    def acquire_text(self) -> ExtractedText:
        """Capture a region and OCR it.

        :class:`~floating_dictionary.errors.CaptureError` and
        :class:`~floating_dictionary.errors.OcrError` propagate unchanged; a
        cancelled capture therefore stops before OCR runs.
        """

        path = self.capture.capture_region()
        image_bytes = load_and_remove(path)
        hint = self.language_hint
        raw = self.ocr.extract(image_bytes, hint)
        extracted = self.normalizer.normalize_extracted(ExtractedText(text=raw, language_hint=hint))
        logger.info(
            "Extracted text",
            extra={"kind": extracted.kind.value, "language_hint": hint, "chars": len(extracted.text)},
        )
        return extracted

    def translate(self, text: str) -> CombinedTranslationData:
        return self.orchestrator.translate_blocking(text, self.config.translation.target_lang)

    def start_translation(
        self, text: str, channel: ResultChannel[CombinedTranslationData]
    ) -> threading.Thread:
        """Translate ``text`` on a daemon thread and send the result to ``channel``."""

        def worker() -> None:
            try:
                result = self.translate(text)
            except Exception as exc:
                logger.exception("Translation worker failed", extra={"text": text})
                result = self.orchestrator.failed_result(text, self.config.translation.target_lang, exc)
            channel.send(result)

        thread = threading.Thread(target=worker, name="translation-worker", daemon=True)
        thread.start()
        return thread

    def run(self, channel: ResultChannel[CombinedTranslationData]) -> None:
        extracted = self.acquire_text()
        channel.send(self.translate(extracted.text))


__all__ = ["PipelineDependencies", "ProcessingPipeline"]
