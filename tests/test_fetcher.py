from unittest.mock import MagicMock, patch

import pytest
import requests

from feed_normalizer.exceptions import FeedLoadError
from feed_normalizer.fetcher import load_document

from .conftest import RSS_XML


def test_loads_local_file(write_feed) -> None:
    root = load_document(write_feed("rss.xml", RSS_XML))
    assert root.tag == "rss"


def test_missing_file_raises(tmp_path) -> None:
    with pytest.raises(FeedLoadError):
        load_document(str(tmp_path / "missing.xml"))


def test_not_xml_raises(write_feed) -> None:
    with pytest.raises(FeedLoadError):
        load_document(write_feed("junk.xml", b"this is not xml"))


def test_remote_source_uses_requests() -> None:
    with patch("feed_normalizer.fetcher.requests.get") as mock_get:
        mock_response = MagicMock()
        mock_response.content = RSS_XML
        mock_response.status_code = 200
        mock_get.return_value = mock_response

        root = load_document("https://example.com/rss", timeout=5)

    assert root.tag == "rss"
    args, kwargs = mock_get.call_args
    assert args == ("https://example.com/rss",)
    assert kwargs["timeout"] == 5


def test_remote_http_error_raises() -> None:
    with patch("feed_normalizer.fetcher.requests.get") as mock_get:
        mock_response = MagicMock()
        mock_response.raise_for_status.side_effect = requests.HTTPError("404 Client Error")
        mock_get.return_value = mock_response

        with pytest.raises(FeedLoadError):
            load_document("https://example.com/gone")


def test_remote_network_error_raises() -> None:
    with patch("feed_normalizer.fetcher.requests.get", side_effect=requests.ConnectionError("refused")):
        with pytest.raises(FeedLoadError):
            load_document("http://example.invalid/rss")
