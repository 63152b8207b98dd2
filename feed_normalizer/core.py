from __future__ import annotations

import logging
import os
from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple, Union

from lxml import etree

from .cache import FeedCache
from .classifier import FeedKind, classify_document
from .exceptions import FeedLoadError, InvalidOptionError, UnknownOptionError
from .fetcher import load_document
from .models import CanonicalItem
from .normalizer import normalizer_for
from .options import FeedOptions

logger = logging.getLogger(__name__)

Loader = Callable[[str], etree._Element]


class ErrorLog:
    """Append-only list of human readable error messages."""

    def __init__(self) -> None:
        self._entries: List[str] = []

    def append(self, message: str) -> None:
        self._entries.append(message)

    def last(self) -> Optional[str]:
        if self._entries:
            return self._entries[-1]
        return None

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))


class FeedSession:
    """
    High-level API: turn RSS/Atom sources into lists of CanonicalItem.

    Pipeline per source: cache read → load → classify → normalize → cache write.
    Errors never raise; they are recorded in ``errors`` and the batch moves on
    to the next source.
    """

    def __init__(
        self,
        options: Optional[FeedOptions] = None,
        *,
        loader: Loader = load_document,
        accumulate: bool = True,
    ) -> None:
        self.options = options or FeedOptions()
        self.loader = loader
        self.accumulate = accumulate
        self.errors = ErrorLog()
        self._items: List[CanonicalItem] = []

    # Options

    def get(self, option: str) -> Any:
        try:
            return self.options.get(option)
        except UnknownOptionError as e:
            self._error(str(e))
            return None

    def set(self, option: str, value: Any) -> None:
        try:
            self.options.set(option, value)
        except (UnknownOptionError, InvalidOptionError) as e:
            self._error(str(e))

    def enable_cache(self, directory: str = "", ttl_minutes: int = 350) -> bool:
        """
        Turn caching on when ``directory`` exists and is writable.

        The TTL is stored either way. Returns False, leaving caching off,
        when the directory is unusable.
        """
        self.options.cache_ttl_minutes = ttl_minutes
        if os.path.isdir(directory) and os.access(directory, os.W_OK):
            self.options.cache_enabled = True
            self.options.cache_directory = directory
            return True
        return False

    # Results

    @property
    def items(self) -> Tuple[CanonicalItem, ...]:
        return tuple(self._items)

    def count(self) -> int:
        return len(self._items)

    def reset(self) -> None:
        self._items.clear()

    def get_last_error(self) -> Optional[str]:
        return self.errors.last()

    # Parsing

    def parse(self, sources: Union[str, Iterable[str]]) -> Optional[List[List[CanonicalItem]]]:
        """
        Normalize one or more sources.

        Returns one item list per source that produced a result, in input
        order. Failed and skipped sources contribute no entry. Returns None
        when no source produced a result.
        """
        if isinstance(sources, str):
            sources = [sources]

        batch: List[List[CanonicalItem]] = []
        for source in sources:
            items = self.parse_one(source)
            if items is not None:
                batch.append(items)

        if batch:
            return batch
        return None

    def parse_one(self, source: str) -> Optional[List[CanonicalItem]]:
        opts = self.options
        cache = FeedCache.from_options(opts)

        cached = cache.read(source)
        if cached is not None:
            self._collect(cached)
            return cached

        try:
            root = self.loader(source)
        except FeedLoadError as e:
            self._error(f"{source} is not a valid document: {e}")
            return None

        kind = classify_document(root)
        if kind is FeedKind.UNKNOWN:
            self._error(f"{source}: this document is not a recognized feed")
            return None
        if (kind is FeedKind.RSS and not opts.parse_rss) or (kind is FeedKind.ATOM and not opts.parse_atom):
            logger.info("Skipping %s: %s parsing is disabled", source, kind.value)
            return None

        items = normalizer_for(kind, opts).normalize(root)
        logger.debug("Normalized %d %s items from %s", len(items), kind.value, source)

        if not cache.write(source, items) and cache.last_error is not None:
            # already logged by the cache
            self.errors.append(str(cache.last_error))

        self._collect(items)
        return items

    def _error(self, message: str) -> None:
        self.errors.append(message)
        logger.warning("%s", message)

    def _collect(self, items: List[CanonicalItem]) -> None:
        if self.accumulate:
            self._items.extend(items)
