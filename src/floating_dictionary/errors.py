"""Exception hierarchy for the capture, OCR and translation stages."""

from __future__ import annotations


class FloatingDictionaryError(Exception):
    """Base exception for all custom errors."""


class CaptureError(FloatingDictionaryError):
    """Raised when a screen region could not be captured."""


class CaptureCancelled(CaptureError):
    """Raised when the user dismissed the selection or the portal reported failure."""


class CaptureProtocolError(CaptureError):
    """Raised when the capture backend answered with a malformed response."""


class CaptureTransportError(CaptureError):
    """Raised when the capture backend could not be reached."""


class OcrError(FloatingDictionaryError):
    """Raised when text could not be extracted from the captured image."""


class NetworkError(FloatingDictionaryError):
    """Raised when a remote translation source fails."""


class NetworkTimeout(NetworkError):
    """Raised when a remote source does not answer in time."""


class ParseError(NetworkError):
    """Raised when a remote source answers with an unexpected document."""


class NetworkConnectionError(NetworkError):
    """Raised when the request fails at the transport or HTTP level."""


__all__ = [
    "CaptureCancelled",
    "CaptureError",
    "CaptureProtocolError",
    "CaptureTransportError",
    "FloatingDictionaryError",
    "NetworkConnectionError",
    "NetworkError",
    "NetworkTimeout",
    "OcrError",
    "ParseError",
]
