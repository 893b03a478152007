"""Command runners: execute side effects, or just describe them."""

from __future__ import annotations

import logging
import shlex
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path

from rich.console import Console

from ghclone.errors import CommandError
from ghclone.models.config import CloneConfig

logger = logging.getLogger(__name__)


class CommandRunner(ABC):
    """Every filesystem and git side effect of a run goes through a runner."""

    dry_run: bool = False

    @abstractmethod
    def run(self, cmd: list[str]) -> None:
        """Run an external command, raising CommandError on failure."""
        ...

    @abstractmethod
    def make_dirs(self, path: Path) -> None:
        """Create a directory and its parents if missing."""
        ...

    @abstractmethod
    def write_text(self, path: Path, text: str) -> None:
        """Write a file, replacing any previous content."""
        ...


class SubprocessRunner(CommandRunner):
    """Runs commands for real."""

    def run(self, cmd: list[str]) -> None:
        logger.debug(f"Running: {shlex.join(cmd)}")
        try:
            result = subprocess.run(cmd)
        except FileNotFoundError as e:
            # Same status a shell reports for a missing executable
            raise CommandError(cmd, 127) from e
        if result.returncode != 0:
            raise CommandError(cmd, result.returncode)

    def make_dirs(self, path: Path) -> None:
        logger.debug(f"Creating directory {path}")
        path.mkdir(parents=True, exist_ok=True)

    def write_text(self, path: Path, text: str) -> None:
        logger.debug(f"Writing {path}")
        path.write_text(text, encoding="utf-8")


class DryRunRunner(CommandRunner):
    """Prints what would be done without touching anything.

    Each action is kept in ``actions`` as the line that was printed.
    """

    dry_run = True

    def __init__(self, console: Console | None = None) -> None:
        self.console = console
        self.actions: list[str] = []

    def _record(self, line: str) -> None:
        self.actions.append(line)
        if self.console is not None:
            self.console.print(line, markup=False, highlight=False, soft_wrap=True)

    def run(self, cmd: list[str]) -> None:
        self._record(shlex.join(cmd))

    def make_dirs(self, path: Path) -> None:
        self._record(shlex.join(["mkdir", "-p", str(path)]))

    def write_text(self, path: Path, text: str) -> None:
        self._record(f"write {shlex.quote(str(path))}")


def make_runner(config: CloneConfig, console: Console | None = None) -> CommandRunner:
    """Pick the runner matching the configuration's dry-run setting."""
    if config.dry_run:
        return DryRunRunner(console)
    return SubprocessRunner()
