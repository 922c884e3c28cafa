"""One-shot hand-off from the worker thread to the UI thread."""

from __future__ import annotations

import queue
import threading
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ResultChannel(Generic[T]):
    """Single producer, single consumer, exactly one value."""

    def __init__(self) -> None:
        self._queue: "queue.Queue[T]" = queue.Queue(maxsize=1)
        self._lock = threading.Lock()
        self._sent = False

    def send(self, value: T) -> None:
        with self._lock:
            if self._sent:
                raise RuntimeError("ResultChannel accepts a single value only.")
            self._sent = True
        self._queue.put_nowait(value)

    def try_receive(self) -> Optional[T]:
        """Return the value if it has arrived, otherwise ``None`` without blocking."""

        try:
            return self._queue.get_nowait()
        except queue.Empty:
            return None

    @property
    def sent(self) -> bool:
        return self._sent


__all__ = ["ResultChannel"]
