from __future__ import annotations

import hashlib
import json
import logging
import os
import time
from pathlib import Path
from typing import List, Optional, Sequence

from .exceptions import CacheWriteError
from .models import CanonicalItem
from .options import FeedOptions

logger = logging.getLogger(__name__)


def cache_key(source: str) -> str:
    """Stable file name for a source: md5 of the source string."""
    return hashlib.md5(source.encode("utf-8")).hexdigest()


class FeedCache:
    """
    One JSON file per source under ``directory``.

    The file modification time is the entry timestamp; entries older than
    ``ttl_minutes`` are ignored. Reads never raise; writes report failure by
    returning False.
    """

    def __init__(self, directory: str, ttl_minutes: int = 350, enabled: bool = True) -> None:
        self.directory = directory
        self.ttl_minutes = ttl_minutes
        self.enabled = enabled
        self.last_error: Optional[CacheWriteError] = None

    @classmethod
    def from_options(cls, options: FeedOptions) -> "FeedCache":
        return cls(
            directory=options.cache_directory,
            ttl_minutes=options.cache_ttl_minutes,
            enabled=options.cache_enabled,
        )

    def path_for(self, source: str) -> Path:
        return Path(self.directory) / cache_key(source)

    def read(self, source: str) -> Optional[List[CanonicalItem]]:
        if not self.enabled:
            return None
        path = self.path_for(source)
        try:
            age = time.time() - path.stat().st_mtime
            if age >= int(self.ttl_minutes) * 60:
                logger.debug("Cache expired for %s", source)
                return None
            payload = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            logger.debug("Cache miss for %s", source)
            return None
        except (OSError, ValueError, TypeError) as e:
            logger.debug("Unreadable cache entry for %s: %s", source, e)
            return None

        if not isinstance(payload, list):
            return None
        try:
            items = [CanonicalItem.from_dict(row) for row in payload]
        except (TypeError, ValueError, AttributeError) as e:
            logger.debug("Malformed cache entry for %s: %s", source, e)
            return None
        logger.debug("Cache hit for %s (%d items)", source, len(items))
        return items

    def write(self, source: str, items: Sequence[CanonicalItem]) -> bool:
        self.last_error = None
        if not self.enabled:
            return False
        path = self.path_for(source)
        payload = json.dumps([item.to_dict() for item in items], ensure_ascii=False)
        tmp = path.with_name(path.name + ".tmp")
        try:
            tmp.write_text(payload, encoding="utf-8")
            os.replace(tmp, path)
        except OSError as e:
            try:
                tmp.unlink()
            except FileNotFoundError:
                pass
            except OSError as cleanup:
                logger.debug("Unable to remove %s: %s", tmp, cleanup)
            self.last_error = CacheWriteError(f"Unable to write cache for {source}: {e}")
            logger.warning("%s", self.last_error)
            return False
        return True
