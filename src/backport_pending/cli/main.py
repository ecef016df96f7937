"""Command-line interface for backport-pending."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from backport_pending.config import load_settings
from backport_pending.core.reporter import report_branches
from backport_pending.cutoff import parse_cutoff
from backport_pending.errors import BackportPendingError

err_console = Console(stderr=True)


@click.command()
@click.version_option(package_name="backport-pending")
@click.argument("repo_path", type=click.Path(file_okay=False, path_type=Path))
@click.argument("cutoff")
@click.option(
    "--main-branch",
    envvar="BACKPORT_PENDING_MAIN_BRANCH",
    help="Mainline branch name (default: main)",
)
@click.option(
    "--backport-branch",
    envvar="BACKPORT_PENDING_BACKPORT_BRANCH",
    help="Maintenance branch name (default: backport)",
)
@click.option(
    "--timestamp-format",
    type=click.Choice(["datetime", "iso", "epoch"]),
    help=(
        "How commit timestamps are rendered (default: datetime; "
        "epoch prints Unix seconds, e.g. 'Add foo (#101) (100)')"
    ),
)
@click.option(
    "--collapse-unnumbered",
    is_flag=True,
    help="Treat all commits without a PR number as one commit",
)
@click.option("--count", is_flag=True, help="Print the number of pending commits to stderr")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(
    repo_path: Path,
    cutoff: str,
    main_branch: Optional[str],
    backport_branch: Optional[str],
    timestamp_format: Optional[str],
    collapse_unnumbered: bool,
    count: bool,
    verbose: bool,
):
    """List commits on the mainline branch that are missing from the backport branch.

    REPO_PATH is the repository to inspect. CUTOFF ("YYYY-MM-DD HH:MM:SS",
    UTC) excludes commits authored before it. Pending commits are printed
    oldest first, one per line.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s:%(name)s:%(message)s",
        stream=sys.stderr,
    )
    # GitPython logs every subprocess call at DEBUG.
    logging.getLogger("git").setLevel(logging.INFO)

    try:
        cutoff_time = parse_cutoff(cutoff)
        settings = load_settings(
            repo_path,
            {
                "main_branch": main_branch,
                "backport_branch": backport_branch,
                "timestamp_format": timestamp_format,
                "collapse_unnumbered": collapse_unnumbered or None,
            },
        )
        lines = report_branches(repo_path, cutoff_time, settings)
    except BackportPendingError as e:
        err_console.print(
            f"[red]Error: {escape(str(e))}[/red]", highlight=False, soft_wrap=True
        )
        sys.exit(1)

    for line in lines:
        click.echo(line)

    if count:
        err_console.print(
            f"[bold]{len(lines)}[/bold] commit(s) on {escape(settings.main_branch)} "
            f"pending backport to {escape(settings.backport_branch)}",
            highlight=False,
            soft_wrap=True,
        )


if __name__ == "__main__":
    main()
