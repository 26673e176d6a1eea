# vidmeta/services/fetch/http_fetcher.py
from __future__ import annotations

import mimetypes
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Optional
from urllib.parse import urlparse

import requests

from vidmeta.common.logging import get_logger
from vidmeta.common.settings import get_settings
from vidmeta.domain.dataclasses.items import BinaryPayload
from vidmeta.domain.ports.fetch import RemoteSourcePort

logger = get_logger()


@dataclass(eq=False)
class FetchError(RuntimeError):
    """Download of a remote media file failed."""
    message: str
    url: Optional[str] = None
    status: Optional[int] = None

    def __str__(self) -> str:
        return self.message


def _guess_extension(url: str, content_type: Optional[str]) -> Optional[str]:
    suffix = PurePosixPath(urlparse(url).path).suffix
    if suffix:
        return suffix.lower()
    if content_type:
        return mimetypes.guess_extension(content_type.split(";", 1)[0].strip())
    return None


class HttpFetcher(RemoteSourcePort):
    """
    Streams a remote file into memory with requests, following redirects up to
    the configured limit. The extension is taken from the final URL's path and
    falls back to the response Content-Type.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        *,
        timeout_sec: Optional[float] = None,
        max_redirects: Optional[int] = None,
        chunk_size: Optional[int] = None,
    ):
        cfg = get_settings().fetch
        self.session = session or requests.Session()
        self.session.max_redirects = cfg.max_redirects if max_redirects is None else max_redirects
        self.session.headers.setdefault("User-Agent", cfg.user_agent)
        self.timeout_sec = timeout_sec or cfg.timeout_sec
        self.chunk_size = chunk_size or cfg.chunk_size

    def fetch(self, url: str) -> BinaryPayload:
        if not url:
            raise FetchError("No URL provided to fetch.")
        parsed = urlparse(url)
        if parsed.scheme not in ("http", "https"):
            raise FetchError(f"Unsupported URL scheme: {parsed.scheme or '(none)'}", url=url)

        try:
            with self.session.get(url, stream=True, allow_redirects=True, timeout=self.timeout_sec) as resp:
                resp.raise_for_status()
                data = b"".join(c for c in resp.iter_content(chunk_size=self.chunk_size) if c)
                final_url = resp.url or url
                content_type = resp.headers.get("Content-Type")
        except requests.TooManyRedirects as e:
            raise FetchError(f"Too many redirects fetching {url}", url=url) from e
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise FetchError(f"HTTP {status} fetching {url}", url=url, status=status) from e
        except requests.RequestException as e:
            raise FetchError(f"Failed to fetch {url}: {e}", url=url) from e

        if final_url != url:
            logger.debug("fetch %s redirected to %s", url, final_url)
        name = PurePosixPath(urlparse(final_url).path).name or None
        return BinaryPayload(
            data=data,
            file_name=name,
            file_extension=_guess_extension(final_url, content_type),
            mime_type=content_type,
        )
