"""Application bootstrapper."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from PySide6.QtWidgets import QApplication

from .config import AppConfig
from .core.languages import AUTO, OCR_LANGUAGE_CHOICES
from .core.models import CombinedTranslationData
from .errors import CaptureCancelled, CaptureError, OcrError
from .logging_config import configure_logging
from .services.channel import ResultChannel
from .services.pipeline import ProcessingPipeline
from .ui.result_window import ResultWindow

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="floating-dictionary",
        description="Capture a screen region, OCR it and show translations.",
    )
    parser.add_argument(
        "--ocr-lang",
        choices=[AUTO, *OCR_LANGUAGE_CHOICES],
        default=AUTO,
        help="Language for OCR. 'auto' uses every language except the target.",
    )
    parser.add_argument("-t", "--target", default="th", help="Target language for translation.")
    parser.add_argument(
        "--capture",
        choices=["auto", "portal", "spectacle"],
        default="auto",
        help="Screen capture backend.",
    )
    parser.add_argument("--tessdata-dir", type=Path, help="Directory containing *.traineddata files.")
    parser.add_argument("--tesseract-cmd", type=Path, help="Path to the tesseract executable.")
    parser.add_argument("--timeout", type=float, default=10.0, help="Network timeout in seconds.")
    parser.add_argument(
        "--portal-timeout",
        type=float,
        default=None,
        help="Seconds to wait for the screenshot portal; waits forever by default.",
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level.")
    return parser


def config_from_args(args: argparse.Namespace) -> AppConfig:
    config = AppConfig(log_level=args.log_level)
    config.capture.strategy = args.capture
    config.capture.response_timeout = args.portal_timeout
    config.ocr.language = args.ocr_lang
    config.ocr.tessdata_dir = args.tessdata_dir
    config.ocr.tesseract_cmd = args.tesseract_cmd
    config.translation.target_lang = args.target
    config.translation.timeout = args.timeout
    return config


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point used by both console scripts and ``python -m``."""

    args = build_parser().parse_args(argv)
    config = config_from_args(args)
    configure_logging(config.log_level)

    pipeline = ProcessingPipeline(config)
    try:
        extracted = pipeline.acquire_text()
    except CaptureCancelled as exc:
        logger.info("Capture cancelled: %s", exc)
        return 1
    except (CaptureError, OcrError) as exc:
        logger.error("%s", exc)
        return 1

    app = QApplication(sys.argv[:1])
    channel: ResultChannel[CombinedTranslationData] = ResultChannel()
    pipeline.start_translation(extracted.text, channel)
    window = ResultWindow(channel, config.display)
    window.show()
    window.activateWindow()

    return app.exec()


if __name__ == "__main__":  # pragma: no cover - manual invocation only
    raise SystemExit(main())
