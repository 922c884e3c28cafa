"""Qt based user-interface components."""

from .result_window import ResultWindow

__all__ = ["ResultWindow"]
