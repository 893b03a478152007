"""Base input source interface."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from ghclone.errors import FormatError


class JsonSource(ABC):
    """Abstract base class for places a JSON document can come from."""

    @property
    @abstractmethod
    def location(self) -> str:
        """Human-readable description of where the document lives."""
        ...

    @abstractmethod
    def read(self) -> str:
        """Return the raw JSON document as text."""
        ...


def resolve_source(json_file: str | Path | None = None, url: str | None = None) -> JsonSource:
    """Pick the source for exactly one of a local file or a URL."""
    from ghclone.sources.file import FileSource
    from ghclone.sources.url import UrlSource

    if (json_file is None) == (url is None):
        raise ValueError("Exactly one of a JSON file or a URL must be given")
    if json_file is not None:
        return FileSource(json_file)
    return UrlSource(url)


def load_document(source: JsonSource) -> Any:
    """Read and decode the document from a source."""
    text = source.read()
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise FormatError(f"Invalid JSON from {source.location}: {e}") from e
