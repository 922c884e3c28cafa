"""Read captured screenshots and dispose of the temporary file."""

from __future__ import annotations

import logging
from pathlib import Path

from ..errors import CaptureProtocolError

logger = logging.getLogger(__name__)


def load_and_remove(path: Path) -> bytes:
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise CaptureProtocolError(f"Captured image {path} could not be read: {exc}") from exc
    try:
        path.unlink()
    except OSError as exc:
        logger.warning("Could not remove temporary screenshot %s: %s", path, exc)
    return data


__all__ = ["load_and_remove"]
