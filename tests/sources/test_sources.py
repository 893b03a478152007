"""Tests for input sources."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import MagicMock

import httpx
import pytest

from ghclone.errors import FetchError, FormatError
from ghclone.sources import FileSource, UrlSource, load_document, resolve_source

API_URL = "https://api.github.com/users/mooli/repos"


@pytest.fixture
def mock_client() -> MagicMock:
    """A mocked httpx client; set ``get.return_value`` per test."""
    return MagicMock(spec=httpx.Client)


class TestFileSource:
    """Tests for reading local JSON files."""

    def test_read(self, write_json, sample_repo: dict) -> None:
        path = write_json(sample_repo)
        source = FileSource(path)

        assert json.loads(source.read()) == sample_repo
        assert source.location == str(path)

    def test_missing_file(self, temp_dir: Path) -> None:
        source = FileSource(temp_dir / "missing.json")
        with pytest.raises(OSError):
            source.read()


class TestUrlSource:
    """Tests for fetching JSON over HTTP."""

    def test_success(self, mock_client: MagicMock, sample_repos: list) -> None:
        mock_client.get.return_value = httpx.Response(200, json=sample_repos)
        source = UrlSource(API_URL, client=mock_client)

        assert json.loads(source.read()) == sample_repos

    def test_accept_header(self, mock_client: MagicMock) -> None:
        mock_client.get.return_value = httpx.Response(200, json=[])
        UrlSource(API_URL, client=mock_client).read()

        args, kwargs = mock_client.get.call_args
        assert args == (API_URL,)
        assert kwargs["headers"]["Accept"] == "application/json"
        assert kwargs["headers"]["User-Agent"].startswith("ghclone/")

    def test_error_status(self, mock_client: MagicMock) -> None:
        mock_client.get.return_value = httpx.Response(404, json={"message": "Not Found"})
        source = UrlSource(API_URL, client=mock_client)

        with pytest.raises(FetchError) as exc_info:
            source.read()

        assert exc_info.value.status_code == 404
        assert exc_info.value.status_line == "404 Not Found"
        assert "404 Not Found" in str(exc_info.value)
        assert API_URL in str(exc_info.value)

    def test_rate_limited(self, mock_client: MagicMock) -> None:
        mock_client.get.return_value = httpx.Response(403)

        with pytest.raises(FetchError, match="403 Forbidden"):
            UrlSource(API_URL, client=mock_client).read()

    def test_transport_error(self, mock_client: MagicMock) -> None:
        mock_client.get.side_effect = httpx.ConnectError("Connection refused")

        with pytest.raises(FetchError, match="Connection refused") as exc_info:
            UrlSource(API_URL, client=mock_client).read()

        assert exc_info.value.status_code is None

    def test_injected_client_not_closed(self, mock_client: MagicMock) -> None:
        mock_client.get.return_value = httpx.Response(200, json=[])
        UrlSource(API_URL, client=mock_client).read()

        mock_client.close.assert_not_called()

    def test_own_client_closed(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json=[]))
        source = UrlSource(API_URL)
        source._client = httpx.Client(transport=transport)
        source._owns_client = True

        assert source.read() == "[]"
        assert source._client is None


class TestResolveSource:
    """Tests for choosing a source."""

    def test_file(self, temp_dir: Path) -> None:
        source = resolve_source(json_file=temp_dir / "repos.json")
        assert isinstance(source, FileSource)

    def test_url(self) -> None:
        source = resolve_source(url=API_URL)
        assert isinstance(source, UrlSource)
        assert source.location == API_URL

    def test_neither(self) -> None:
        with pytest.raises(ValueError):
            resolve_source()

    def test_both(self, temp_dir: Path) -> None:
        with pytest.raises(ValueError):
            resolve_source(json_file=temp_dir / "repos.json", url=API_URL)


class TestLoadDocument:
    """Tests for decoding documents."""

    def test_decodes(self, write_json, sample_search_result: dict) -> None:
        doc = load_document(FileSource(write_json(sample_search_result)))
        assert doc == sample_search_result

    def test_invalid_utf8(self, temp_dir: Path) -> None:
        path = temp_dir / "latin1.json"
        path.write_bytes(b'{"full_name": "a/b\xff", "clone_url": "u"}')

        with pytest.raises(FormatError, match="not valid UTF-8"):
            load_document(FileSource(path))

    def test_invalid_json(self, temp_dir: Path) -> None:
        path = temp_dir / "broken.json"
        path.write_text("{not json")

        with pytest.raises(FormatError, match="broken.json"):
            load_document(FileSource(path))
