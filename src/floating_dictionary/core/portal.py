"""Request bookkeeping for the XDG desktop portal Screenshot call.

The portal answers the ``Screenshot`` method call with nothing more than a
request handle.  The real outcome is emitted later as a ``Response`` signal on
that handle, whose object path is derived from the caller's unique bus name and
a token chosen by the caller.  :class:`PortalRequest` tracks that exchange as a
small state machine so the transport code only has to feed it messages.
"""

from __future__ import annotations

import secrets
import string
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Mapping, Optional
from urllib.parse import unquote

from ..errors import CaptureCancelled, CaptureProtocolError

PORTAL_BUS_NAME = "org.freedesktop.portal.Desktop"
PORTAL_OBJECT_PATH = "/org/freedesktop/portal/desktop"
SCREENSHOT_INTERFACE = "org.freedesktop.portal.Screenshot"
REQUEST_INTERFACE = "org.freedesktop.portal.Request"
REQUEST_PATH_PREFIX = "/org/freedesktop/portal/desktop/request"

TOKEN_ALPHABET = string.ascii_lowercase + string.digits
TOKEN_LENGTH = 10
FILE_SCHEME = "file://"


def make_handle_token(length: int = TOKEN_LENGTH) -> str:
    if length < 8:
        raise ValueError("handle tokens must be at least 8 characters long")
    return "".join(secrets.choice(TOKEN_ALPHABET) for _ in range(length))


def sanitize_sender(unique_name: str) -> str:
    """Turn ``:1.42`` into ``1_42`` as required for request object paths."""

    return unique_name.lstrip(":").replace(".", "_")


def request_handle_path(unique_name: str, token: str) -> str:
    return f"{REQUEST_PATH_PREFIX}/{sanitize_sender(unique_name)}/{token}"


def uri_to_path(uri: Any) -> Path:
    if not isinstance(uri, str):
        raise CaptureProtocolError(f"Portal returned a non-string uri: {uri!r}")
    if not uri.startswith(FILE_SCHEME):
        raise CaptureProtocolError(f"Portal returned a non-file uri: {uri}")
    return Path(unquote(uri[len(FILE_SCHEME):]))


class RequestState(Enum):
    AWAITING_ACK = "awaiting_ack"
    AWAITING_SIGNAL = "awaiting_signal"
    RESOLVED = "resolved"
    FAILED = "failed"


@dataclass
class PortalRequest:
    """One in-flight Screenshot request, joined to its response by ``token``."""

    sender: str
    token: str = field(default_factory=make_handle_token)
    state: RequestState = RequestState.AWAITING_ACK
    result: Optional[Path] = None

    @property
    def handle(self) -> str:
        return request_handle_path(self.sender, self.token)

    @property
    def options(self) -> dict[str, Any]:
        return {"handle_token": self.token, "interactive": True}

    def acknowledge(self, returned_handle: Optional[str]) -> str:
        """Record the method reply and return the handle to await.

        Older portal versions may hand back a handle that differs from the
        computed one; the returned value always wins.
        """

        self._expect(RequestState.AWAITING_ACK)
        self.state = RequestState.AWAITING_SIGNAL
        return returned_handle or self.handle

    def resolve(self, status: Any, results: Mapping[str, Any]) -> Path:
        """Decode the ``(status, results)`` payload of the ``Response`` signal."""

        self._expect(RequestState.AWAITING_SIGNAL)
        try:
            if not isinstance(status, int):
                raise CaptureProtocolError(f"Portal returned a non-integer status: {status!r}")
            if status != 0:
                raise CaptureCancelled(f"Portal request ended with status {status}.")
            if "uri" not in results:
                raise CaptureProtocolError("Portal response did not contain a uri.")
            path = uri_to_path(results["uri"])
        except Exception:
            self.state = RequestState.FAILED
            raise
        self.state = RequestState.RESOLVED
        self.result = path
        return path

    def fail(self) -> None:
        if self.state is not RequestState.RESOLVED:
            self.state = RequestState.FAILED

    def _expect(self, state: RequestState) -> None:
        if self.state is not state:
            raise CaptureProtocolError(
                f"Portal request {self.token} is {self.state.value}, expected {state.value}."
            )


__all__ = [
    "PORTAL_BUS_NAME",
    "PORTAL_OBJECT_PATH",
    "PortalRequest",
    "REQUEST_INTERFACE",
    "RequestState",
    "SCREENSHOT_INTERFACE",
    "make_handle_token",
    "request_handle_path",
    "sanitize_sender",
    "uri_to_path",
]
