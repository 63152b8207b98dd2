"""
Primitives shared by the RSS and Atom normalizers: node naming, node text and
date handling.
"""
from __future__ import annotations

import calendar
import logging
import time
from datetime import datetime, timezone
from typing import Iterator, Optional

from feedparser.datetimes import _parse_date
from lxml import etree

logger = logging.getLogger(__name__)


def is_element(node: object) -> bool:
    # Comments and processing instructions carry a non-string tag.
    return isinstance(node, etree._Element) and isinstance(node.tag, str)


def node_name(node: etree._Element) -> str:
    """
    Qualified tag name as written in the document, e.g. ``media:content``.
    """
    local = etree.QName(node).localname
    if node.prefix:
        return f"{node.prefix}:{local}"
    return local


def node_text(node: etree._Element) -> str:
    """Concatenated text of the node and all of its descendants."""
    return "".join(node.itertext())


def child_elements(node: etree._Element) -> Iterator[etree._Element]:
    for child in node:
        if is_element(child):
            yield child


def iter_named(root: etree._Element, name: str) -> Iterator[etree._Element]:
    """Yield every element (root included) whose qualified name is ``name``, in document order."""
    for node in root.iter():
        if is_element(node) and node_name(node) == name:
            yield node


def parse_timestamp(value: str) -> Optional[int]:
    """
    Convert a feed date string to a UTC epoch timestamp.

    Accepts everything feedparser understands (RFC 822, W3CDTF/ISO 8601, ...).
    Returns None when the string cannot be parsed.
    """
    if not value:
        return None
    try:
        parsed = _parse_date(value)
    except (ValueError, OverflowError):
        parsed = None
    if not isinstance(parsed, time.struct_time):
        logger.warning("Unable to parse date %r", value)
        return None
    return calendar.timegm(parsed)


def format_timestamp(timestamp: int, pattern: str) -> str:
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).strftime(pattern)
