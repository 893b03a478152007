"""Run configuration models."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field


class RepoPaths(BaseModel):
    """Filesystem locations for one repository."""

    owner_dir: Path
    metadata_file: Path
    git_dir: Path
    work_tree: Path | None = None


class CloneConfig(BaseModel):
    """Settings threaded through a clone run."""

    model_config = ConfigDict(frozen=True)

    output_dir: Path = Field(..., description="Root of the clone tree")
    bare: bool = Field(default=True, description="Bare mirror clones instead of working trees")
    include_forks: bool = Field(default=False, description="Also clone forked repositories")
    gc: bool = Field(default=True, description="Run git gc after each clone")
    dry_run: bool = Field(default=False, description="Print actions without running them")
    git: str = Field(default="git", description="Git executable")

    def repo_paths(self, owner: str, repo: str) -> RepoPaths:
        """Compute where a repository's metadata and git directory live."""
        owner_dir = self.output_dir / owner
        if self.bare:
            return RepoPaths(
                owner_dir=owner_dir,
                metadata_file=owner_dir / f"{repo}.json",
                git_dir=owner_dir / f"{repo}.git",
            )
        work_tree = owner_dir / repo
        return RepoPaths(
            owner_dir=owner_dir,
            metadata_file=owner_dir / f"{repo}.json",
            git_dir=work_tree / ".git",
            work_tree=work_tree,
        )


class ConfigDefaults(BaseModel):
    """Defaults loaded from a YAML config file.

    Keys match the command line option names, e.g.::

        output: ~/mirrors
        bare: false
        forks: true
        gc: false
    """

    model_config = ConfigDict(extra="forbid")

    output: Path | None = None
    bare: bool | None = None
    forks: bool | None = None
    gc: bool | None = None
    dry_run: bool | None = None
    verbose: bool | None = None
    git: str | None = None

    @classmethod
    def from_yaml(cls, path: Path) -> "ConfigDefaults":
        """Load defaults from a YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f)
        return cls.model_validate(data or {})

    def as_default_map(self) -> dict[str, Any]:
        """Return the values that were set, keyed by option name."""
        values = self.model_dump(exclude_none=True)
        if "output" in values:
            values["output"] = str(Path(values["output"]).expanduser())
        return values
