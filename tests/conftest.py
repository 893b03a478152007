"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import json
import tempfile
from pathlib import Path
from typing import Any, Generator

import pytest

from ghclone.models.config import CloneConfig
from ghclone.runner import SubprocessRunner


class FakeGitRunner(SubprocessRunner):
    """Does the real filesystem work but only pretends to run git.

    A ``clone`` command creates its target directory, so later existence
    checks behave as after a real clone. Commands in ``fail_on`` raise like
    a failing git would.
    """

    def __init__(self, fail_on: str | None = None) -> None:
        self.commands: list[list[str]] = []
        self.fail_on = fail_on

    def run(self, cmd: list[str]) -> None:
        from ghclone.errors import CommandError

        self.commands.append(list(cmd))
        if self.fail_on and self.fail_on in cmd:
            raise CommandError(cmd, 128)
        if "clone" in cmd:
            Path(cmd[-1]).mkdir(parents=True)

    @property
    def clone_commands(self) -> list[list[str]]:
        return [cmd for cmd in self.commands if "clone" in cmd]


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def fake_runner() -> FakeGitRunner:
    return FakeGitRunner()


@pytest.fixture
def clone_config(temp_dir: Path) -> CloneConfig:
    """Default configuration cloning into the temp directory."""
    return CloneConfig(output_dir=temp_dir / "out")


@pytest.fixture
def sample_repo() -> dict[str, Any]:
    """A single repository object as returned by the GitHub API."""
    return {
        "id": 1296269,
        "name": "git-clone-github",
        "full_name": "mooli/git-clone-github",
        "owner": {"login": "mooli", "id": 1, "type": "User"},
        "private": False,
        "html_url": "https://github.com/mooli/git-clone-github",
        "description": "Clone all of a user's repositories",
        "fork": False,
        "clone_url": "https://example.com/mooli/git-clone-github.git",
        "default_branch": "master",
        "stargazers_count": 12,
    }


@pytest.fixture
def sample_repos(sample_repo: dict[str, Any]) -> list[dict[str, Any]]:
    """A flat listing as returned by /users/{user}/repos."""
    return [
        sample_repo,
        {
            "id": 1296270,
            "name": "dotfiles",
            "full_name": "mooli/dotfiles",
            "fork": False,
            "clone_url": "https://example.com/mooli/dotfiles.git",
        },
        {
            "id": 1296271,
            "name": "linux",
            "full_name": "mooli/linux",
            "fork": True,
            "clone_url": "https://example.com/mooli/linux.git",
        },
    ]


@pytest.fixture
def sample_search_result(sample_repos: list[dict[str, Any]]) -> dict[str, Any]:
    """A search listing as returned by /search/repositories."""
    return {
        "total_count": len(sample_repos),
        "incomplete_results": False,
        "items": sample_repos,
    }


@pytest.fixture
def write_json(temp_dir: Path):
    """Write a JSON document to a file in the temp directory."""

    def _write(data: Any, name: str = "repos.json") -> Path:
        path = temp_dir / name
        path.write_text(json.dumps(data))
        return path

    return _write


# Markers for test categories
def pytest_configure(config):
    config.addinivalue_line("markers", "cli: tests driving the command line interface")
