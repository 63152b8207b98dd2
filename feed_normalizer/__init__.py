"""
feed_normalizer

A small library that reads RSS and Atom documents and maps their different tag
vocabularies onto one item record.

Core ideas:
- Input: RSS/Atom sources (URLs or local paths)
- Process: cache lookup → load → classify (RSS / Atom) → normalize → cache write
- Output: List[CanonicalItem] per source (title, summary, content, link, image,
  category, author, date, plus every other tag in ``extra``)

Example
-------
from feed_normalizer import FeedSession

session = FeedSession()
session.enable_cache("./cache", ttl_minutes=1440)
session.set("date_format", "%d-%m-%Y")

batch = session.parse([
    "https://www.reddit.com/.rss",
    "https://feeds.bbci.co.uk/news/rss.xml",
])

if batch is None:
    print(session.get_last_error() or "There aren't items")
else:
    for items in batch:
        for item in items:
            print(item.date, item.title, item.link)
"""
from .models import CanonicalItem
from .options import FeedOptions, ImageSource
from .core import ErrorLog, FeedSession
from .classifier import FeedKind, classify_document
from .normalizer import AtomNormalizer, RssNormalizer, normalizer_for
from .media import extract_media
from .summary import build_summary
from .cache import FeedCache
from .fetcher import load_document
from .exceptions import (
    CacheWriteError,
    FeedError,
    FeedLoadError,
    InvalidOptionError,
    UnknownOptionError,
    UnrecognizedFormatError,
)

__all__ = [
    "CanonicalItem",
    "FeedOptions",
    "ImageSource",
    "ErrorLog",
    "FeedSession",
    "FeedKind",
    "classify_document",
    "AtomNormalizer",
    "RssNormalizer",
    "normalizer_for",
    "extract_media",
    "build_summary",
    "FeedCache",
    "load_document",
    "CacheWriteError",
    "FeedError",
    "FeedLoadError",
    "InvalidOptionError",
    "UnknownOptionError",
    "UnrecognizedFormatError",
]
