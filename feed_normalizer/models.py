from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Mapping, Union


CANONICAL_FIELDS = (
    "title",
    "summary",
    "content",
    "link",
    "image",
    "category",
    "author",
    "date",
)


@dataclass(frozen=True)
class CanonicalItem:
    """
    Normalized, format independent record built for every RSS item or Atom entry.

    Every canonical field defaults to an empty value. Tags outside the canonical
    set are kept verbatim in ``extra`` keyed by their qualified tag name
    (``guid``, ``pubDate``, ``dc:creator``...).
    """
    title: str = ""
    summary: str = ""
    content: str = ""
    link: str = ""
    image: str = ""
    category: str = ""
    author: str = ""
    date: Union[int, str] = ""
    extra: Dict[str, str] = field(default_factory=dict)

    def get(self, name: str, default: Any = "") -> Any:
        if name in CANONICAL_FIELDS:
            return getattr(self, name)
        return self.extra.get(name, default)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {name: getattr(self, name) for name in CANONICAL_FIELDS}
        data["extra"] = dict(self.extra)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CanonicalItem":
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        if not isinstance(data, Mapping):
            raise TypeError(f"Expected a mapping, got {type(data).__name__}")
        raw_extra = data.get("extra") or {}
        if not isinstance(raw_extra, Mapping):
            raise TypeError(f"extra must be a mapping, got {type(raw_extra).__name__}")
        extra: Dict[str, str] = dict(raw_extra)
        for key, value in data.items():
            if key == "extra":
                continue
            if key in known:
                kwargs[key] = value
            else:
                extra[key] = value
        return cls(extra=extra, **kwargs)
