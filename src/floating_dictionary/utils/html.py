"""Helpers for scraping loosely structured HTML with BeautifulSoup."""

from __future__ import annotations

from typing import Callable, Iterator, Optional

from bs4 import BeautifulSoup, Tag

TagPredicate = Callable[[Tag], bool]


def tag_text(tag: Tag) -> str:
    return tag.get_text().strip()


def has_class_containing(tag: Tag, marker: str) -> bool:
    """Match ``marker`` against the raw ``class`` attribute as written in the markup."""

    classes = tag.get("class")
    if not classes:
        return False
    if isinstance(classes, str):
        return marker in classes
    return marker in " ".join(classes)


def table_with_class(marker: str) -> TagPredicate:
    def predicate(tag: Tag) -> bool:
        return tag.name == "table" and has_class_containing(tag, marker)

    return predicate


def text_contains(needle: str) -> TagPredicate:
    def predicate(tag: Tag) -> bool:
        return needle in tag.get_text()

    return predicate


def find_next_sibling_matching(anchor: Tag, matches: TagPredicate) -> Optional[Tag]:
    """Walk forward from ``anchor`` and return the first sibling element ``matches`` accepts."""

    for sibling in anchor.next_siblings:
        if isinstance(sibling, Tag) and matches(sibling):
            return sibling
    return None


def iter_anchored_siblings(
    root: BeautifulSoup | Tag,
    anchor_tag: str,
    anchor_matches: TagPredicate,
    target_matches: TagPredicate,
) -> Iterator[Tag]:
    """Yield one target per anchor, in document order.

    Every ``anchor_tag`` element accepted by ``anchor_matches`` starts a walk
    over its following siblings; the first one accepted by ``target_matches``
    is yielded.  Anchors whose sibling chain ends without a match contribute
    nothing.
    """

    for anchor in root.find_all(anchor_tag):
        if not anchor_matches(anchor):
            continue
        target = find_next_sibling_matching(anchor, target_matches)
        if target is not None:
            yield target


__all__ = [
    "TagPredicate",
    "find_next_sibling_matching",
    "has_class_containing",
    "iter_anchored_siblings",
    "table_with_class",
    "tag_text",
    "text_contains",
]
