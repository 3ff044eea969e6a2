"""Tests for tagcloud.sources module."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import requests

from tagcloud.sources import (
    FetchedText,
    cached_copy_path,
    fetch_text,
    is_url,
    media_type_and_charset,
)

URL = "https://example.com/texts/book.txt"


def _response(chunks, content_type="text/plain; charset=utf-8") -> MagicMock:
    """Build a fake streamed response."""
    response = MagicMock()
    response.headers = {"Content-Type": content_type} if content_type is not None else {}
    response.iter_content.side_effect = lambda chunk_size: iter(chunks)
    return response


class TestIsUrl:
    """Tests for is_url function."""

    def test_web_addresses(self) -> None:
        """Test that HTTP(S) addresses are recognised."""
        assert is_url("http://example.com/a.txt") is True
        assert is_url(URL) is True

    def test_file_names(self) -> None:
        """Test that file names and other schemes are not URLs."""
        assert is_url("book.txt") is False
        assert is_url("/data/http.txt") is False
        assert is_url("ftp://example.com/a.txt") is False


class TestCachedCopyPath:
    """Tests for cached_copy_path function."""

    def test_keeps_document_name(self, tmp_path: Path) -> None:
        """Test that the cache name ends with the document name."""
        path = cached_copy_path(URL, tmp_path)
        assert path.parent == tmp_path
        assert path.name.endswith("_book.txt")

    def test_same_name_different_hosts(self, tmp_path: Path) -> None:
        """Test that equal document names on different hosts do not collide."""
        a = cached_copy_path("https://a.example.com/book.txt", tmp_path)
        b = cached_copy_path("https://b.example.com/book.txt", tmp_path)
        assert a != b

    def test_address_without_path(self, tmp_path: Path) -> None:
        """Test the name used for a bare host."""
        assert cached_copy_path("https://example.com/", tmp_path).name.endswith("_index")


class TestMediaTypeAndCharset:
    """Tests for media_type_and_charset function."""

    def test_with_charset(self) -> None:
        """Test splitting a header with a charset parameter."""
        assert media_type_and_charset("Text/Plain; charset=\"ISO-8859-1\"") == (
            "text/plain",
            "ISO-8859-1",
        )

    def test_without_charset(self) -> None:
        """Test a header with no parameters."""
        assert media_type_and_charset("text/html") == ("text/html", None)

    def test_empty(self) -> None:
        """Test a missing header."""
        assert media_type_and_charset("") == ("", None)


class TestFetchText:
    """Tests for fetch_text function."""

    def test_downloads_and_stores_utf8(self, tmp_path: Path) -> None:
        """Test that the body is decoded with the declared charset and stored as UTF-8."""
        response = _response([b"caf", b"\xe9 caf\xe9"], "text/plain; charset=ISO-8859-1")

        with patch("tagcloud.sources.requests.get", return_value=response):
            result = fetch_text(URL, tmp_path)

        assert result.ok
        assert result.from_cache is False
        assert result.encoding == "ISO-8859-1"
        assert result.local_path.read_text(encoding="utf-8") == "café café"
        response.close.assert_called_once()

    def test_utf8_without_charset(self, tmp_path: Path) -> None:
        """Test that UTF-8 is assumed when no charset is declared."""
        # "é" split across two chunks
        response = _response([b"caf\xc3", b"\xa9"], "text/plain")

        with patch("tagcloud.sources.requests.get", return_value=response):
            result = fetch_text(URL, tmp_path)

        assert result.encoding == "utf-8"
        assert result.local_path.read_text(encoding="utf-8") == "café"

    def test_missing_content_type_accepted(self, tmp_path: Path) -> None:
        """Test that a response without Content-Type is treated as text."""
        with patch("tagcloud.sources.requests.get", return_value=_response([b"words"], None)):
            result = fetch_text(URL, tmp_path)
        assert result.ok

    def test_rejects_non_text(self, tmp_path: Path) -> None:
        """Test that binary documents are refused and nothing is cached."""
        response = _response([b"%PDF-1.7"], "application/pdf")

        with patch("tagcloud.sources.requests.get", return_value=response):
            result = fetch_text(URL, tmp_path)

        assert not result.ok
        assert "not a text document (application/pdf)" in result.error
        assert not cached_copy_path(URL, tmp_path).exists()

    def test_unknown_charset(self, tmp_path: Path) -> None:
        """Test that an unsupported charset is reported."""
        response = _response([b"x"], "text/plain; charset=x-no-such-codec")
        with patch("tagcloud.sources.requests.get", return_value=response):
            result = fetch_text(URL, tmp_path)
        assert "unknown charset" in result.error

    def test_uses_cached_copy(self, tmp_path: Path) -> None:
        """Test that a cached copy is reused without a request."""
        cached = cached_copy_path(URL, tmp_path)
        cached.write_text("cached text", encoding="utf-8")

        with patch("tagcloud.sources.requests.get") as mock_get:
            result = fetch_text(URL, tmp_path)

        mock_get.assert_not_called()
        assert result == FetchedText(url=URL, local_path=cached, from_cache=True, encoding="utf-8")

    def test_refresh_replaces_cached_copy(self, tmp_path: Path) -> None:
        """Test that refresh downloads again over the cached copy."""
        cached = cached_copy_path(URL, tmp_path)
        cached.write_text("old", encoding="utf-8")

        with patch("tagcloud.sources.requests.get", return_value=_response([b"new"])):
            result = fetch_text(URL, tmp_path, refresh=True)

        assert result.from_cache is False
        assert cached.read_text(encoding="utf-8") == "new"

    def test_request_failure(self, tmp_path: Path) -> None:
        """Test that connection errors become a failed result."""
        with patch(
            "tagcloud.sources.requests.get",
            side_effect=requests.ConnectionError("unreachable"),
        ):
            result = fetch_text(URL, tmp_path)

        assert not result.ok
        assert "unreachable" in result.error

    def test_interrupted_download_leaves_no_cache(self, tmp_path: Path) -> None:
        """Test that a stream failing midway stores nothing, so the next run downloads again."""

        def broken_stream(chunk_size):
            yield b"the cat "
            raise requests.exceptions.ChunkedEncodingError("connection reset")

        response = _response([])
        response.iter_content.side_effect = broken_stream

        with patch("tagcloud.sources.requests.get", return_value=response):
            first = fetch_text(URL, tmp_path)

        assert not first.ok
        assert "connection reset" in first.error
        assert list(tmp_path.iterdir()) == []

        with patch(
            "tagcloud.sources.requests.get", return_value=_response([b"the cat sat"])
        ) as mock_get:
            second = fetch_text(URL, tmp_path)

        mock_get.assert_called_once()
        assert second.from_cache is False
        assert second.local_path.read_text(encoding="utf-8") == "the cat sat"

    def test_unwritable_cache_dir(self, tmp_path: Path) -> None:
        """Test that a cache directory that cannot be created is reported."""
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory")

        with patch("tagcloud.sources.requests.get", return_value=_response([b"text"])):
            result = fetch_text(URL, blocker / "cache")

        assert not result.ok
        assert "Could not cache" in result.error


@pytest.mark.parametrize("status", [404, 500])
def test_http_error_status(tmp_path: Path, status: int) -> None:
    """Test that error statuses are reported."""
    response = _response([b""])
    response.raise_for_status.side_effect = requests.HTTPError(f"{status} Error")

    with patch("tagcloud.sources.requests.get", return_value=response):
        result = fetch_text(URL, tmp_path)

    assert not result.ok
    assert str(status) in result.error
