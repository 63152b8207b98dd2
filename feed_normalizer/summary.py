from __future__ import annotations

import re
import warnings

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning

_WHITESPACE_RUN = re.compile(r"[ \t\r\n]+")


def strip_tags(content: str) -> str:
    """Remove every markup tag, keeping only the text."""
    if not content:
        return ""
    with warnings.catch_warnings():
        # descriptions that are only a URL or a file name
        warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
        return BeautifulSoup(content, "html.parser").get_text()


def build_summary(content: str, max_length: int = 140) -> str:
    """
    Derive a plain text summary from raw, possibly HTML, content.

    Text longer than ``max_length`` is cut at the first space found at or after
    ``max_length`` so that no word is split; the word straddling the limit is
    kept and the following ones dropped. Line breaks, tabs and repeated spaces
    collapse into single spaces.
    """
    text = strip_tags(content)
    if len(text) > max_length and " " in text:
        cut = text.find(" ", max_length)
        if cut != -1:
            text = text[:cut]
    return _WHITESPACE_RUN.sub(" ", text.strip())
