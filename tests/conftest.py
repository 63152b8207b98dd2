from pathlib import Path
from typing import Callable

import pytest
from lxml import etree


RSS_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:media="http://search.yahoo.com/mrss/" xmlns:dc="http://purl.org/dc/elements/1.1/">
  <channel>
    <title>Example News</title>
    <link>https://example.com/</link>
    <item>
      <title> First story </title>
      <link>https://example.com/first</link>
      <guid>https://example.com/first?a=1&amp;b=2</guid>
      <description>&lt;p&gt;The quick brown fox jumps over the lazy dog&lt;/p&gt;</description>
      <pubDate>Mon, 01 Jan 2024 10:00:00 GMT</pubDate>
      <category>World</category>
      <dc:creator>Jane Doe</dc:creator>
      <enclosure url="https://example.com/a.jpg" type="image/jpeg" length="1"/>
      <media:content url="https://example.com/b.png" type="image/png"/>
    </item>
    <!-- sponsored -->
    <item>
      <title>Second story</title>
      <author>editor@example.com</author>
      <dc:creator>Someone Else</dc:creator>
      <enclosure url="https://example.com/podcast.mp3" type="audio/mpeg" length="1"/>
    </item>
    <item/>
  </channel>
</rss>
"""

ATOM_XML = b"""<?xml version="1.0" encoding="utf-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title>Example Atom</title>
  <updated>2024-02-01T12:00:00Z</updated>
  <entry>
    <title>Atom one</title>
    <id>urn:uuid:1</id>
    <published>2024-01-15T08:30:00Z</published>
    <updated>2024-01-20T08:30:00Z</updated>
    <link rel="alternate" type="text/html" href="https://example.com/atom-one"/>
    <link rel="enclosure" type="image/png" href="https://example.com/one.png"/>
    <author><name>Ann Author</name></author>
    <content type="html">&lt;p&gt;Hello &lt;b&gt;world&lt;/b&gt;&lt;/p&gt;</content>
  </entry>
  <entry>
    <title>Atom two</title>
    <updated>2024-01-20T08:30:00Z</updated>
    <link rel="alternate" href="https://example.com/atom-two"/>
    <summary>Plain summary text</summary>
  </entry>
  <entry>
    <title>Atom three</title>
    <link rel="self" href="https://example.com/atom-three.xml"/>
  </entry>
</feed>
"""

# 2024-01-01T10:00:00Z, 2024-01-15T08:30:00Z, 2024-01-20T08:30:00Z
FIRST_RSS_TS = 1704103200
ATOM_PUBLISHED_TS = 1705307400
ATOM_UPDATED_TS = 1705739400


@pytest.fixture
def rss_root() -> etree._Element:
    return etree.fromstring(RSS_XML)


@pytest.fixture
def atom_root() -> etree._Element:
    return etree.fromstring(ATOM_XML)


@pytest.fixture
def write_feed(tmp_path: Path) -> Callable[[str, bytes], str]:
    """Write a document under tmp_path and return its path as a source string."""

    def _write(name: str, content: bytes) -> str:
        path = tmp_path / name
        path.write_bytes(content)
        return str(path)

    return _write
