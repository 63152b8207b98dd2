from __future__ import annotations

from typing import Iterable

from lxml import etree

IMAGE = "imag"
TEXT = "text"


def extract_media(
    candidates: Iterable[etree._Element],
    url_attribute: str = "url",
    media_type: str = IMAGE,
) -> str:
    """
    Pick an image URL or an item link out of typed candidate nodes.

    A candidate matches when the first four characters of its ``type``
    attribute equal ``media_type`` (``"imag"`` or ``"text"``). When looking for
    ``"text"``, a candidate without any ``type`` still matches if its ``rel`` is
    ``"alternate"``; its ``href`` is used then.

    Candidates are visited in document order and the last match wins. Returns
    an empty string when nothing matches.
    """
    found = ""
    for media in candidates:
        attrs = media.attrib
        if not attrs:
            continue

        media_kind = attrs.get("type")
        if media_kind is not None:
            if media_kind[:4] == media_type:
                value = attrs.get(url_attribute)
                if value is not None:
                    found = value
        elif media_type == TEXT and attrs.get("rel") == "alternate":
            # Some Atom feeds omit the type of their links
            value = attrs.get("href")
            if value is not None:
                found = value
    return found
