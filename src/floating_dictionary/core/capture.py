"""Interactive screen region capture backends."""

from __future__ import annotations

import logging
import os
import secrets
import string
import subprocess
import tempfile
from contextlib import AbstractContextManager
from pathlib import Path
from typing import Any, Callable, Mapping, Optional, Protocol, Tuple

from jeepney import DBusAddress, MatchRule, message_bus, new_method_call
from jeepney.io.blocking import Proxy, open_dbus_connection
from jeepney.wrappers import DBusErrorResponse, unwrap_msg

from ..config import CaptureConfig
from ..errors import (
    CaptureCancelled,
    CaptureError,
    CaptureProtocolError,
    CaptureTransportError,
)
from .portal import (
    PORTAL_BUS_NAME,
    PORTAL_OBJECT_PATH,
    REQUEST_INTERFACE,
    SCREENSHOT_INTERFACE,
    PortalRequest,
)

logger = logging.getLogger(__name__)


class CaptureTransport(Protocol):
    """Common interface for capture backends."""

    def capture_region(self) -> Path:
        """Let the user select a region and return the screenshot path."""


class PortalSession(Protocol):
    """The handful of bus operations :class:`PortalCapture` needs."""

    unique_name: str

    def subscribe(self, handle: str) -> AbstractContextManager[Any]:
        """Start buffering ``Response`` signals emitted on ``handle``."""

    def request_screenshot(self, options: Mapping[str, Any]) -> Optional[str]:
        """Call ``Screenshot`` and return the request handle from the reply."""

    def wait_for_response(
        self, subscription: Any, timeout: Optional[float]
    ) -> Tuple[Any, Mapping[str, Any]]:
        """Block until one buffered ``Response`` arrives."""

    def close(self) -> None:
        ...


class JeepneyPortalSession:
    """:class:`PortalSession` on top of a blocking :mod:`jeepney` connection."""

    def __init__(self, connection: Any = None) -> None:
        self._connection = connection if connection is not None else open_dbus_connection(bus="SESSION")
        self._bus = Proxy(message_bus, self._connection)
        self._portal = DBusAddress(
            PORTAL_OBJECT_PATH,
            bus_name=PORTAL_BUS_NAME,
            interface=SCREENSHOT_INTERFACE,
        )
        self.unique_name = self._connection.unique_name

    def subscribe(self, handle: str) -> AbstractContextManager[Any]:
        rule = MatchRule(
            type="signal",
            interface=REQUEST_INTERFACE,
            member="Response",
            path=handle,
        )
        self._bus.AddMatch(rule)
        return self._connection.filter(rule)

    def request_screenshot(self, options: Mapping[str, Any]) -> Optional[str]:
        variants = {
            "handle_token": ("s", options["handle_token"]),
            "interactive": ("b", bool(options["interactive"])),
        }
        message = new_method_call(self._portal, "Screenshot", "sa{sv}", ("", variants))
        reply = unwrap_msg(self._connection.send_and_get_reply(message))
        return reply[0] if reply else None

    def wait_for_response(
        self, subscription: Any, timeout: Optional[float]
    ) -> Tuple[Any, Mapping[str, Any]]:
        signal = self._connection.recv_until_filtered(subscription, timeout=timeout)
        status, raw_results = signal.body
        # a{sv} values arrive as (signature, value) pairs
        results = {key: value[1] for key, value in raw_results.items()}
        return status, results

    def close(self) -> None:
        self._connection.close()


class PortalCapture:
    """Capture through ``org.freedesktop.portal.Screenshot`` (GNOME, wlroots...)."""

    def __init__(
        self,
        response_timeout: Optional[float] = None,
        session_factory: Callable[[], PortalSession] = JeepneyPortalSession,
    ) -> None:
        self.response_timeout = response_timeout
        self._session_factory = session_factory

    def capture_region(self) -> Path:
        try:
            session = self._session_factory()
        except (OSError, KeyError, ValueError) as exc:
            raise CaptureTransportError(f"Could not connect to the session bus: {exc}") from exc
        try:
            return self._run_request(session)
        finally:
            session.close()

    def _run_request(self, session: PortalSession) -> Path:
        request = PortalRequest(sender=session.unique_name)
        logger.debug("Requesting portal screenshot", extra={"handle": request.handle})
        try:
            with session.subscribe(request.handle) as subscription:
                returned = session.request_screenshot(request.options)
                handle = request.acknowledge(returned)
                if handle == request.handle:
                    status, results = session.wait_for_response(subscription, self.response_timeout)
                else:
                    logger.warning(
                        "Portal returned an unexpected request handle",
                        extra={"expected": request.handle, "returned": handle},
                    )
                    with session.subscribe(handle) as fallback:
                        status, results = session.wait_for_response(fallback, self.response_timeout)
            return request.resolve(status, results)
        except CaptureError:
            request.fail()
            raise
        except DBusErrorResponse as exc:
            request.fail()
            raise CaptureTransportError(f"Portal call failed: {exc}") from exc
        except TimeoutError as exc:
            request.fail()
            raise CaptureTransportError("Timed out waiting for the portal response.") from exc
        except OSError as exc:
            request.fail()
            raise CaptureTransportError(f"Session bus connection failed: {exc}") from exc
        except (TypeError, ValueError) as exc:
            request.fail()
            raise CaptureProtocolError(f"Malformed portal response: {exc}") from exc


def _temp_screenshot_path(directory: Optional[Path]) -> Path:
    alphabet = string.ascii_letters + string.digits
    name = "".join(secrets.choice(alphabet) for _ in range(12))
    base = directory if directory is not None else Path(tempfile.gettempdir())
    return base / f"capture_{name}.png"


class SpectacleCapture:
    """Capture by running KDE's ``spectacle`` in background region mode."""

    def __init__(self, command: str = "spectacle", temp_dir: Optional[Path] = None) -> None:
        self.command = command
        self.temp_dir = temp_dir

    def build_command(self, output: Path) -> list[str]:
        # -b background, -n no notification, -r region, -o output file
        return [self.command, "-b", "-n", "-r", "-o", str(output)]

    def capture_region(self) -> Path:
        output = _temp_screenshot_path(self.temp_dir)
        try:
            completed = subprocess.run(
                self.build_command(output),
                capture_output=True,
                check=False,
            )
        except OSError as exc:
            raise CaptureTransportError(f"Could not run {self.command}: {exc}") from exc
        if completed.returncode != 0:
            raise CaptureCancelled(f"{self.command} exited with status {completed.returncode}.")
        if not output.exists():
            raise CaptureProtocolError(f"{self.command} did not write {output}.")
        return output


def select_capture_strategy(
    config: CaptureConfig,
    environ: Optional[Mapping[str, str]] = None,
) -> CaptureTransport:
    """Pick a capture backend once at startup."""

    strategy = config.strategy.lower()
    if strategy == "auto":
        env = os.environ if environ is None else environ
        desktop = env.get("XDG_CURRENT_DESKTOP", "")
        strategy = "spectacle" if "KDE" in desktop.upper() else "portal"
        logger.debug("Selected capture strategy", extra={"strategy": strategy, "desktop": desktop})
    if strategy == "spectacle":
        return SpectacleCapture(command=config.spectacle_cmd, temp_dir=config.temp_dir)
    if strategy == "portal":
        return PortalCapture(response_timeout=config.response_timeout)
    raise ValueError(f"Unknown capture strategy: {config.strategy!r}")


__all__ = [
    "CaptureTransport",
    "JeepneyPortalSession",
    "PortalCapture",
    "PortalSession",
    "SpectacleCapture",
    "select_capture_strategy",
]
