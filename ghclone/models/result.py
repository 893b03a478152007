"""Per-repository outcome models."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class CloneStatus(str, Enum):
    """What happened to a repository during a run."""

    CLONED = "cloned"  # Cloned in this run
    PLANNED = "planned"  # Dry-run, would have been cloned
    EXISTS = "exists"  # Git directory already present, left alone
    FORK = "fork"  # Skipped because forks are excluded


class CloneResult(BaseModel):
    """Outcome of processing one repository descriptor."""

    full_name: str = Field(..., description="Repository name in format owner/repo")
    status: CloneStatus = Field(..., description="What was done")
    path: Path | None = Field(default=None, description="Git directory, when computed")

    @property
    def is_skipped(self) -> bool:
        """Check if no work was needed for this repository."""
        return self.status in (CloneStatus.EXISTS, CloneStatus.FORK)
