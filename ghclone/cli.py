"""Command line interface for ghclone."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from ghclone.cloner import RepoCloner
from ghclone.errors import GhCloneError
from ghclone.extract import extract_descriptors
from ghclone.models.config import CloneConfig, ConfigDefaults
from ghclone.models.result import CloneResult, CloneStatus
from ghclone.runner import CommandRunner, make_runner
from ghclone.sources import load_document, resolve_source

console = Console()
err_console = Console(stderr=True)

STATUS_STYLES = {
    CloneStatus.CLONED: "green",
    CloneStatus.PLANNED: "cyan",
    CloneStatus.EXISTS: "dim",
    CloneStatus.FORK: "yellow",
}


def _load_config(ctx: click.Context, param: click.Parameter, value: Path | None) -> None:
    """Seed option defaults from a YAML config file."""
    if value is None:
        return
    try:
        defaults = ConfigDefaults.from_yaml(value)
    except (OSError, yaml.YAMLError, ValidationError) as e:
        raise click.BadParameter(str(e), ctx=ctx, param=param) from e
    ctx.default_map = {**(ctx.default_map or {}), **defaults.as_default_map()}


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )
    # Keep HTTP transport chatter out of --verbose
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def get_runner(config: CloneConfig) -> CommandRunner:
    return make_runner(config, console)


def _print_results(results: list[CloneResult]) -> None:
    if not results:
        return

    table = Table(title="Clone Results")
    table.add_column("Repository", style="cyan")
    table.add_column("Status", justify="center")
    table.add_column("Path", style="dim")

    for result in results:
        style = STATUS_STYLES[result.status]
        table.add_row(
            result.full_name,
            f"[{style}]{result.status.value}[/{style}]",
            str(result.path) if result.path else "-",
        )

    console.print(table)

    counts = {status: 0 for status in CloneStatus}
    for result in results:
        counts[result.status] += 1
    summary = ", ".join(f"{count} {status.value}" for status, count in counts.items() if count)
    skipped = sum(1 for result in results if result.is_skipped)
    console.print(
        f"[dim]{len(results)} repositories ({skipped} skipped): {summary}[/dim]"
    )


@click.command(context_settings={"auto_envvar_prefix": "GHCLONE", "help_option_names": ["-h", "--help"]})
@click.option("--config", type=click.Path(dir_okay=False, path_type=Path), callback=_load_config,
              is_eager=True, expose_value=False, help="YAML file with default option values")
@click.option("--json", "json_file", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Read the repository listing from a local JSON file")
@click.option("--url", default=None, help="Fetch the repository listing from a URL")
@click.option("--output", "-o", type=click.Path(file_okay=False, path_type=Path), required=True,
              help="Directory to clone into")
@click.option("--bare/--no-bare", default=True, help="Bare mirror clones (default) or working trees")
@click.option("--forks/--no-forks", default=False, help="Include forked repositories")
@click.option("--gc/--no-gc", default=True, help="Run git gc after each clone")
@click.option("--dry-run", "-n", is_flag=True, help="Print what would be done without doing it")
@click.option("--verbose", "-v", is_flag=True, help="Log every command that is run")
@click.option("--git", default="git", help="Git executable to use")
def main(
    json_file: Path | None,
    url: str | None,
    output: Path,
    bare: bool,
    forks: bool,
    gc: bool,
    dry_run: bool,
    verbose: bool,
    git: str,
) -> None:
    """Clone every repository in a GitHub-style JSON listing.

    The listing can be a single repository object, a list of them, or a
    search result with an "items" list. Each repository lands in
    OUTPUT/<owner>/<repo>.git (or OUTPUT/<owner>/<repo>/ with --no-bare)
    next to a <repo>.json copy of its metadata. Existing clones are skipped.
    """
    if (json_file is None) == (url is None):
        raise click.UsageError("Give exactly one of --json or --url")

    _configure_logging(verbose)

    config = CloneConfig(
        output_dir=output,
        bare=bare,
        include_forks=forks,
        gc=gc,
        dry_run=dry_run,
        git=git,
    )
    cloner = RepoCloner(config, get_runner(config))

    try:
        source = resolve_source(json_file=json_file, url=url)
        descriptors = extract_descriptors(load_document(source))
        results = cloner.clone_all(descriptors)
    except (GhCloneError, OSError) as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        sys.exit(1)

    _print_results(results)


if __name__ == "__main__":
    main()
