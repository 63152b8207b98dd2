"""
Map RSS items and Atom entries onto CanonicalItem.

Both normalizers walk every entry node, copy each child tag onto the matching
canonical field (or into ``extra`` for tags outside the canonical set) and
then derive date, link, image, author and summary.
"""
from __future__ import annotations

import html
import logging
from typing import Any, Dict, List, Optional, Protocol

from lxml import etree

from .classifier import FeedKind
from .exceptions import UnrecognizedFormatError
from .media import IMAGE, TEXT, extract_media
from .models import CANONICAL_FIELDS, CanonicalItem
from .options import FeedOptions, ImageSource
from .parser import child_elements, format_timestamp, iter_named, node_name, node_text, parse_timestamp
from .summary import build_summary

logger = logging.getLogger(__name__)


class FeedNormalizer(Protocol):
    def normalize(self, root: etree._Element) -> List[CanonicalItem]:  # pragma: no cover - interface
        ...


class _Record:
    """Working copy of one item while its tags are being collected."""

    def __init__(self) -> None:
        self.fields: Dict[str, Any] = {name: "" for name in CANONICAL_FIELDS}
        self.extra: Dict[str, str] = {}
        self.seen: set = set()

    def assign(self, name: str, value: str) -> None:
        self.seen.add(name)
        if name in self.fields:
            self.fields[name] = value
        else:
            self.extra[name] = value

    def lookup(self, name: str) -> Optional[str]:
        if name not in self.seen:
            return None
        if name in self.fields:
            return self.fields[name]
        return self.extra[name]

    def freeze(self) -> CanonicalItem:
        return CanonicalItem(extra=self.extra, **self.fields)


def _derive_date(record: _Record, raw: Optional[str], options: FeedOptions) -> None:
    if raw is None:
        return
    timestamp = parse_timestamp(raw)
    if timestamp is None:
        record.fields["date"] = ""
        return
    if options.date_format:
        record.fields["date"] = format_timestamp(timestamp, options.date_format)
    else:
        record.fields["date"] = timestamp


class RssNormalizer:
    """RSS 0.9x/2.0 ``item`` nodes to CanonicalItem."""

    def __init__(self, options: Optional[FeedOptions] = None) -> None:
        self.options = options or FeedOptions()

    def normalize(self, root: etree._Element) -> List[CanonicalItem]:
        items: List[CanonicalItem] = []
        for node in iter_named(root, "item"):
            if len(node):
                items.append(self.normalize_item(node))
        return items

    def normalize_item(self, node: etree._Element) -> CanonicalItem:
        opts = self.options
        record = _Record()
        enclosures: List[etree._Element] = []
        media: List[etree._Element] = []

        for child in child_elements(node):
            name = node_name(child)
            if name == "enclosure":
                enclosures.append(child)
            elif name == "media:content":
                media.append(child)
            elif name == "description":
                record.seen.add("content")
                record.fields["content"] = html.unescape(node_text(child))
            else:
                record.assign(name, node_text(child).strip())

        _derive_date(record, record.lookup("pubDate"), opts)

        guid = record.lookup("guid")
        if guid is not None:
            record.fields["link"] = html.escape(guid)

        if not record.fields["image"]:
            preference = opts.image_source_preference
            if enclosures and preference != ImageSource.MEDIA:
                record.fields["image"] = extract_media(enclosures, "url", IMAGE)
            if media and preference != ImageSource.ENCLOSURE:
                record.fields["image"] = extract_media(media, "url", IMAGE)

        if not record.fields["author"]:
            creator = record.lookup("dc:creator")
            if creator is not None:
                record.fields["author"] = creator

        if opts.build_rss_summary:
            record.fields["summary"] = build_summary(record.fields["content"], opts.summary_max_length)

        return record.freeze()


class AtomNormalizer:
    """
    Atom ``entry`` nodes to CanonicalItem.

    Summaries are built from ``content``. Entries that carry no ``content`` at
    all (summary-only feeds) build it from their own ``summary`` element
    instead, so the summary is not blanked.
    """

    def __init__(self, options: Optional[FeedOptions] = None) -> None:
        self.options = options or FeedOptions()

    def normalize(self, root: etree._Element) -> List[CanonicalItem]:
        items: List[CanonicalItem] = []
        for node in iter_named(root, "entry"):
            if len(node):
                items.append(self.normalize_item(node))
        return items

    def normalize_item(self, node: etree._Element) -> CanonicalItem:
        opts = self.options
        record = _Record()
        links: List[etree._Element] = []

        for child in child_elements(node):
            name = node_name(child)
            if name == "link":
                links.append(child)
            else:
                record.assign(name, node_text(child).strip())

        raw_date = record.lookup("published")
        if raw_date is None:
            raw_date = record.lookup("updated")
        _derive_date(record, raw_date, opts)

        if not record.fields["image"] and links:
            record.fields["image"] = extract_media(links, "href", IMAGE)

        if links:
            record.fields["link"] = extract_media(links, "href", TEXT)

        if opts.build_rss_summary:
            source = record.fields["content"] or record.fields["summary"]
            record.fields["summary"] = build_summary(source, opts.summary_max_length)

        return record.freeze()


def normalizer_for(kind: FeedKind, options: Optional[FeedOptions] = None) -> FeedNormalizer:
    if kind is FeedKind.RSS:
        return RssNormalizer(options)
    if kind is FeedKind.ATOM:
        return AtomNormalizer(options)
    raise UnrecognizedFormatError(f"No normalizer for {kind.value} documents")
