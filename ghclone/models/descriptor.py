"""Repository descriptor model."""

from __future__ import annotations

import json
import os
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ghclone.errors import FormatError, InvalidNameError

NAME_SEPARATORS = frozenset(sep for sep in ("/", os.sep, os.altsep) if sep)


class RepoDescriptor(BaseModel):
    """One remote repository to clone.

    The decoded JSON fragment is kept untouched in ``raw`` so it can be
    written back out next to the clone.
    """

    model_config = ConfigDict(frozen=True)

    full_name: str = Field(..., description="Repository name in format owner/repo")
    clone_url: str = Field(..., description="URL usable as a clone source")
    fork: bool = Field(default=False, description="Whether this is a fork")
    raw: dict[str, Any] = Field(default_factory=dict, exclude=True, repr=False)

    @field_validator("fork", mode="before")
    @classmethod
    def _null_fork(cls, value: Any) -> Any:
        return False if value is None else value

    @classmethod
    def from_fragment(cls, fragment: Any) -> "RepoDescriptor":
        """Build a descriptor from one decoded JSON object."""
        if not isinstance(fragment, dict):
            raise FormatError(
                f"Expected a JSON object for a repository, got {type(fragment).__name__}"
            )
        try:
            return cls(
                full_name=fragment.get("full_name"),
                clone_url=fragment.get("clone_url"),
                fork=fragment.get("fork", False),
                raw=fragment,
            )
        except ValidationError as e:
            name = fragment.get("full_name", "<unnamed>")
            raise FormatError(f"Malformed repository entry {name!r}: {e}") from e

    def split_name(self) -> tuple[str, str]:
        """Split ``full_name`` into a filesystem-safe (owner, repo) pair.

        Raises:
            InvalidNameError: unless the name is exactly two non-empty
                segments, neither starting with '.' nor holding a separator
                or control character.
        """
        parts = self.full_name.split("/")
        if len(parts) != 2:
            raise InvalidNameError(
                self.full_name, "expected exactly one '/' between owner and repo"
            )

        for part in parts:
            if not part:
                raise InvalidNameError(self.full_name, "empty path segment")
            if any(ord(char) < 0x20 or ord(char) == 0x7F for char in part):
                raise InvalidNameError(
                    self.full_name, f"segment {part!r} contains a control character"
                )
            if part.startswith("."):
                raise InvalidNameError(self.full_name, f"segment {part!r} starts with '.'")
            if any(sep in part for sep in NAME_SEPARATORS):
                raise InvalidNameError(
                    self.full_name, f"segment {part!r} contains a path separator"
                )

        owner, repo = parts
        return owner, repo

    def to_json(self) -> str:
        """Serialize the original fragment for the metadata file."""
        return json.dumps(self.raw, indent=2) + "\n"
