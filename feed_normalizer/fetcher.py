from __future__ import annotations

import logging
from pathlib import Path
from urllib.parse import urlparse

import requests
from lxml import etree

from .exceptions import FeedLoadError

logger = logging.getLogger(__name__)

USER_AGENT = "feed-normalizer/1.0"

_XML_PARSER = etree.XMLParser(resolve_entities=False, no_network=True)


def _is_remote(source: str) -> bool:
    return urlparse(source).scheme in ("http", "https")


def fetch_bytes(source: str, timeout: float = 20.0) -> bytes:
    """
    Read the raw document for a source: a remote URL or a local path.

    Raises FeedLoadError on network errors, non-2xx responses or unreadable files.
    """
    if _is_remote(source):
        try:
            resp = requests.get(source, timeout=timeout, headers={"User-Agent": USER_AGENT})
            resp.raise_for_status()
        except requests.RequestException as e:
            raise FeedLoadError(f"Failed to fetch {source} ({e})") from e
        return resp.content

    try:
        return Path(source).read_bytes()
    except OSError as e:
        raise FeedLoadError(f"Failed to read {source} ({e})") from e


def load_document(source: str, timeout: float = 20.0) -> etree._Element:
    """
    Fetch a source and parse it into an lxml tree, returning the root element.

    Raises FeedLoadError when the source is unreachable or is not well-formed XML.
    """
    data = fetch_bytes(source, timeout=timeout)
    try:
        root = etree.fromstring(data, parser=_XML_PARSER)
    except etree.XMLSyntaxError as e:
        raise FeedLoadError(f"Invalid XML in {source} ({e})") from e
    if root is None:
        raise FeedLoadError(f"Empty document: {source}")
    logger.debug("Loaded %s (%d bytes)", source, len(data))
    return root
