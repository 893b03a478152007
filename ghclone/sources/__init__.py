"""Input sources for fetching repository listings."""

from ghclone.sources.base import JsonSource, load_document, resolve_source
from ghclone.sources.file import FileSource
from ghclone.sources.url import UrlSource

__all__ = ["JsonSource", "FileSource", "UrlSource", "load_document", "resolve_source"]
