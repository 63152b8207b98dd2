from __future__ import annotations

from enum import Enum

from lxml import etree

from .parser import iter_named


class FeedKind(str, Enum):
    RSS = "rss"
    ATOM = "atom"
    UNKNOWN = "unknown"


def _count(root: etree._Element, name: str, limit: int) -> int:
    count = 0
    for _ in iter_named(root, name):
        count += 1
        if count >= limit:
            break
    return count


def classify_document(root: etree._Element) -> FeedKind:
    """
    Tell RSS documents from Atom documents.

    RSS: the tree holds at least one ``rss`` element.
    Atom: the tree holds exactly one ``feed`` element.
    Anything else is UNKNOWN.
    """
    if _count(root, "rss", 1) > 0:
        return FeedKind.RSS
    if _count(root, "feed", 2) == 1:
        return FeedKind.ATOM
    return FeedKind.UNKNOWN
