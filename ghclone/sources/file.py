"""Local file source."""

from __future__ import annotations

import logging
from pathlib import Path

from ghclone.errors import FormatError
from ghclone.sources.base import JsonSource

logger = logging.getLogger(__name__)


class FileSource(JsonSource):
    """Reads a JSON document from disk, e.g. a previously saved fragment."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    @property
    def location(self) -> str:
        return str(self.path)

    def read(self) -> str:
        logger.debug(f"Reading {self.path}")
        try:
            return self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise FormatError(f"{self.path} is not valid UTF-8: {e}") from e
