"""Text sources given as web addresses.

A URL input is downloaded once, decoded with the charset the server
declares and stored as UTF-8 in a cache directory beside the output file.
Later runs reuse the cached copy unless asked to refresh it.
"""

import codecs
import hashlib
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlparse

import requests

# Cache directory created next to the output file
SOURCE_CACHE_DIR_NAME = ".tagcloud-sources"

DEFAULT_TIMEOUT = 30

DEFAULT_HEADERS = {
    "User-Agent": "tagcloud/0.1 (HTML tag cloud generator)",
    "Accept": "text/plain, text/*;q=0.9",
}


def is_url(name: str) -> bool:
    """Check if an input name is an HTTP/HTTPS address."""
    return name.startswith(("http://", "https://"))


def cached_copy_path(url: str, cache_dir: Path) -> Path:
    """Return where the decoded text of ``url`` is kept.

    The name combines a hash of the full URL with the last path segment,
    so ``https://host/a/book.txt`` maps to ``<hash>_book.txt``.
    """
    url_hash = hashlib.sha256(url.encode()).hexdigest()[:16]
    stem = Path(urlparse(url).path.rstrip("/")).name or "index"
    return cache_dir / f"{url_hash}_{stem}"


@dataclass
class FetchedText:
    """Outcome of resolving a URL to a local UTF-8 text file."""

    url: str
    local_path: Path | None
    from_cache: bool = False
    encoding: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.local_path is not None


def media_type_and_charset(content_type: str) -> tuple[str, str | None]:
    """Split a Content-Type header into its media type and charset."""
    media_type, _, params = content_type.partition(";")
    charset = None
    for param in params.split(";"):
        name, _, value = param.partition("=")
        if name.strip().lower() == "charset" and value.strip():
            charset = value.strip().strip('"')
    return media_type.strip().lower(), charset


def fetch_text(
    url: str,
    cache_dir: Path,
    timeout: int = DEFAULT_TIMEOUT,
    refresh: bool = False,
) -> FetchedText:
    """Download a text document into the cache.

    Only ``text/*`` responses (or responses without a Content-Type) are
    accepted. The body is decoded with the declared charset, UTF-8 when
    none is given, and written atomically so an interrupted download
    never leaves a cached copy behind.

    Args:
        url: Address of the document.
        cache_dir: Directory holding cached copies.
        timeout: Request timeout in seconds.
        refresh: Download again even if a cached copy exists.

    Returns:
        FetchedText; ``error`` is set when nothing usable was stored.
    """
    cache_path = cached_copy_path(url, cache_dir)
    if not refresh and cache_path.is_file():
        return FetchedText(url=url, local_path=cache_path, from_cache=True, encoding="utf-8")

    try:
        response = requests.get(url, timeout=timeout, stream=True, headers=DEFAULT_HEADERS)
    except requests.RequestException as e:
        return FetchedText(url=url, local_path=None, error=f"Could not download {url}: {e}")

    try:
        response.raise_for_status()
        media_type, charset = media_type_and_charset(response.headers.get("Content-Type", ""))
        if media_type and not media_type.startswith("text/"):
            return FetchedText(
                url=url, local_path=None, error=f"{url} is not a text document ({media_type})"
            )

        encoding = charset or "utf-8"
        try:
            decoder = codecs.getincrementaldecoder(encoding)(errors="replace")
        except LookupError:
            return FetchedText(
                url=url, local_path=None, error=f"{url} uses an unknown charset: {encoding}"
            )

        _store(response, decoder, cache_path)
    except requests.RequestException as e:
        return FetchedText(url=url, local_path=None, error=f"Could not download {url}: {e}")
    except OSError as e:
        return FetchedText(url=url, local_path=None, error=f"Could not cache {url}: {e}")
    finally:
        response.close()

    return FetchedText(url=url, local_path=cache_path, encoding=encoding)


def _store(response: requests.Response, decoder: codecs.IncrementalDecoder, path: Path) -> None:
    """Decode the response body into ``path`` through a temporary sibling."""
    path.parent.mkdir(parents=True, exist_ok=True)
    partial = path.with_name(path.name + ".part")
    try:
        with open(partial, "w", encoding="utf-8") as f:
            for chunk in response.iter_content(chunk_size=8192):
                f.write(decoder.decode(chunk))
            f.write(decoder.decode(b"", final=True))
        partial.replace(path)
    except Exception:
        partial.unlink(missing_ok=True)
        raise
