"""Shared utility helpers."""

from .html import find_next_sibling_matching, iter_anchored_siblings, table_with_class, text_contains

__all__ = [
    "find_next_sibling_matching",
    "iter_anchored_siblings",
    "table_with_class",
    "text_contains",
]
