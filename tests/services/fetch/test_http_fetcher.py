import pytest
import requests

from vidmeta.services.fetch.http_fetcher import FetchError, HttpFetcher


class _FakeResponse:
    def __init__(self, *, url, chunks=(b"",), status=200, headers=None):
        self.url = url
        self._chunks = list(chunks)
        self.status_code = status
        self.headers = headers or {}
        self.closed = False

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error", response=self)

    def iter_content(self, chunk_size=1):
        yield from self._chunks

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.closed = True
        return False


class _FakeSession:
    def __init__(self, response=None, exc=None):
        self.headers = {}
        self.max_redirects = 30
        self.response = response
        self.exc = exc
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.exc is not None:
            raise self.exc
        return self.response


def test_fetch_follows_redirects_and_reads_body():
    resp = _FakeResponse(
        url="https://cdn.example.com/media/clip.MOV",
        chunks=[b"abc", b"", b"def"],
        headers={"Content-Type": "video/quicktime"},
    )
    session = _FakeSession(response=resp)
    fetcher = HttpFetcher(session=session, max_redirects=5, timeout_sec=2)

    payload = fetcher.fetch("https://example.com/dl?id=1")

    assert payload.data == b"abcdef"
    assert payload.file_name == "clip.MOV"
    assert payload.file_extension == ".mov"
    assert payload.mime_type == "video/quicktime"
    url, kwargs = session.calls[0]
    assert url == "https://example.com/dl?id=1"
    assert kwargs["allow_redirects"] is True
    assert kwargs["stream"] is True
    assert kwargs["timeout"] == 2
    assert session.max_redirects == 5
    assert "User-Agent" in session.headers
    assert resp.closed


def test_fetch_extension_from_content_type_when_path_has_none():
    resp = _FakeResponse(url="https://example.com/download", chunks=[b"x"], headers={"Content-Type": "video/mp4; charset=binary"})
    payload = HttpFetcher(session=_FakeSession(response=resp)).fetch("https://example.com/download")
    assert payload.file_extension == ".mp4"


def test_fetch_http_error_carries_status():
    resp = _FakeResponse(url="https://example.com/missing.mp4", status=404)
    with pytest.raises(FetchError) as ei:
        HttpFetcher(session=_FakeSession(response=resp)).fetch("https://example.com/missing.mp4")
    assert ei.value.status == 404
    assert "404" in str(ei.value)


def test_fetch_too_many_redirects():
    session = _FakeSession(exc=requests.TooManyRedirects("loop"))
    with pytest.raises(FetchError, match="Too many redirects"):
        HttpFetcher(session=session).fetch("https://example.com/loop")


def test_fetch_transport_error():
    session = _FakeSession(exc=requests.ConnectionError("refused"))
    with pytest.raises(FetchError, match="Failed to fetch"):
        HttpFetcher(session=session).fetch("http://example.com/a.mp4")


def test_fetch_rejects_non_http_scheme():
    session = _FakeSession()
    with pytest.raises(FetchError, match="Unsupported URL scheme"):
        HttpFetcher(session=session).fetch("file:///etc/passwd")
    assert session.calls == []
