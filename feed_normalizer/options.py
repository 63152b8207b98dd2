from __future__ import annotations

import os
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Mapping, Optional

from dotenv import load_dotenv

from .exceptions import InvalidOptionError, UnknownOptionError


class ImageSource(str, Enum):
    """Where RSS items look for their image."""

    ENCLOSURE = "enclosure"
    MEDIA = "media"
    SERIAL = "serial"  # enclosure first, media:content may overwrite

    @classmethod
    def coerce(cls, value: Any) -> "ImageSource":
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        aliases = {"either": cls.SERIAL, "media:content": cls.MEDIA}
        if key in aliases:
            return aliases[key]
        try:
            return cls(key)
        except ValueError:
            choices = ", ".join(s.value for s in cls)
            raise InvalidOptionError(f"Invalid image source {value!r}, expected one of: {choices}") from None


_TRUE = {"1", "true", "yes", "on"}


@dataclass
class FeedOptions:
    cache_enabled: bool = False
    cache_directory: str = ""
    cache_ttl_minutes: int = 350
    parse_rss: bool = True
    parse_atom: bool = True
    build_rss_summary: bool = True
    summary_max_length: int = 140
    image_source_preference: ImageSource = ImageSource.SERIAL
    # strftime pattern; None keeps the epoch timestamp
    date_format: Optional[str] = None

    def __post_init__(self) -> None:
        self.image_source_preference = ImageSource.coerce(self.image_source_preference)

    @classmethod
    def names(cls) -> tuple:
        return tuple(f.name for f in fields(cls))

    def get(self, name: str) -> Any:
        if name not in self.names():
            raise UnknownOptionError(f"Option {name} doesn't exist")
        return getattr(self, name)

    def set(self, name: str, value: Any) -> None:
        if name not in self.names():
            raise UnknownOptionError(f"Option {name} doesn't exist")
        if name == "image_source_preference":
            value = ImageSource.coerce(value)
        setattr(self, name, value)

    @classmethod
    def from_env(
        cls,
        prefix: str = "FEED_",
        environ: Optional[Mapping[str, str]] = None,
    ) -> "FeedOptions":
        """
        Build options from environment variables such as ``FEED_CACHE_ENABLED``.

        A ``.env`` file is loaded first when ``environ`` is not given.
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        options = cls()
        for f in fields(cls):
            raw = environ.get(prefix + f.name.upper())
            if raw is None:
                continue
            default = getattr(options, f.name)
            if isinstance(default, bool):
                value: Any = raw.strip().lower() in _TRUE
            elif isinstance(default, int):
                value = int(raw)
            elif f.name == "date_format":
                value = raw or None
            else:
                value = raw
            options.set(f.name, value)
        return options
