"""Exceptions raised by ghclone."""

from __future__ import annotations

import shlex


class GhCloneError(Exception):
    """Base class for all ghclone errors."""


class FetchError(GhCloneError):
    """An HTTP fetch did not return a success status."""

    def __init__(self, url: str, status_code: int | None, status_line: str) -> None:
        self.url = url
        self.status_code = status_code
        self.status_line = status_line
        super().__init__(f"Failed to fetch {url}: {status_line}")


class FormatError(GhCloneError):
    """The JSON document could not be understood."""


class InvalidNameError(GhCloneError):
    """A repository full_name is not a safe owner/repo pair."""

    def __init__(self, full_name: str, reason: str) -> None:
        self.full_name = full_name
        self.reason = reason
        super().__init__(f"Invalid repository name {full_name!r}: {reason}")


class CommandError(GhCloneError):
    """An external command exited with a failure status."""

    def __init__(self, cmd: list[str], returncode: int) -> None:
        self.cmd = list(cmd)
        self.returncode = returncode
        super().__init__(
            f"Command failed with exit status {returncode}: {shlex.join(self.cmd)}"
        )
