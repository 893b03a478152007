"""Clone orchestration: turn descriptors into mirrored repositories on disk."""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from ghclone.models.config import CloneConfig, RepoPaths
from ghclone.models.descriptor import RepoDescriptor
from ghclone.models.result import CloneResult, CloneStatus
from ghclone.runner import CommandRunner, make_runner

logger = logging.getLogger(__name__)


class RepoCloner:
    """Mirrors repositories into ``<output>/<owner>/<repo>``.

    Repositories whose git directory already exists are left alone, so a
    run can be repeated to pick up only what is missing. The metadata file
    is written before cloning so an interrupted clone can be retried from
    that file alone.
    """

    def __init__(self, config: CloneConfig, runner: CommandRunner | None = None) -> None:
        self.config = config
        self.runner = runner if runner is not None else make_runner(config)

    def git(self, *args: str) -> list[str]:
        return [self.config.git, *args]

    def clone_commands(self, descriptor: RepoDescriptor, paths: RepoPaths) -> list[list[str]]:
        """Build the git command lines that create the repository."""
        git_dir = str(paths.git_dir)
        commands = [self.git("clone", "--mirror", descriptor.clone_url, git_dir)]

        if paths.work_tree is not None:
            # A mirror is bare; turn it into a checkout around the same .git
            commands.append(self.git(f"--git-dir={git_dir}", "config", "--bool", "core.bare", "false"))
            commands.append(
                self.git(f"--git-dir={git_dir}", f"--work-tree={paths.work_tree}", "reset", "--hard")
            )

        if self.config.gc:
            commands.append(self.git(f"--git-dir={git_dir}", "gc"))

        return commands

    def clone(self, descriptor: RepoDescriptor) -> CloneResult:
        """Process a single repository descriptor."""
        if descriptor.fork and not self.config.include_forks:
            logger.info(f"Skipping fork {descriptor.full_name}")
            return CloneResult(full_name=descriptor.full_name, status=CloneStatus.FORK)

        owner, repo = descriptor.split_name()
        paths = self.config.repo_paths(owner, repo)

        if paths.git_dir.exists():
            logger.info(f"Skipping {descriptor.full_name}: {paths.git_dir} already exists")
            return CloneResult(
                full_name=descriptor.full_name,
                status=CloneStatus.EXISTS,
                path=paths.git_dir,
            )

        logger.info(f"Cloning {descriptor.full_name} into {paths.git_dir}")
        self.runner.make_dirs(paths.owner_dir)
        self.runner.write_text(paths.metadata_file, descriptor.to_json())
        for cmd in self.clone_commands(descriptor, paths):
            self.runner.run(cmd)

        status = CloneStatus.PLANNED if self.runner.dry_run else CloneStatus.CLONED
        return CloneResult(full_name=descriptor.full_name, status=status, path=paths.git_dir)

    def clone_all(
        self,
        descriptors: Iterable[RepoDescriptor],
        progress_callback: Callable[[CloneResult], None] | None = None,
    ) -> list[CloneResult]:
        """Process descriptors in order, stopping at the first error.

        Args:
            descriptors: Repositories in document order
            progress_callback: Optional callback(result) after each repository

        Returns:
            One result per descriptor
        """
        results: list[CloneResult] = []
        for descriptor in descriptors:
            result = self.clone(descriptor)
            results.append(result)
            if progress_callback:
                progress_callback(result)
        return results
