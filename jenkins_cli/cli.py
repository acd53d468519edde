"""
Jenkins jobs CLI.

Fetches the jobs configured on a Jenkins instance, prints them as a table and
appends a timestamped snapshot of them to a local SQLite database.

Usage:
    jenkins-jobs get:jobs JENKINS_URL [SQLITE_NAME]
    python -m jenkins_cli get:jobs JENKINS_URL [SQLITE_NAME]
"""

import logging
import sys
from collections.abc import Sequence

import click

from jenkins_common.config import load_config
from jenkins_common.models import JobSnapshot

from .runner import fetch_jobs, store_jobs

logger = logging.getLogger(__name__)


def render_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    """Render a bordered, left-aligned text table."""
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    border = "+" + "+".join("-" * (w + 2) for w in widths) + "+"

    def line(cells: Sequence[str]) -> str:
        return "|" + "|".join(f" {c:<{w}} " for c, w in zip(cells, widths)) + "|"

    lines = [border, line(headers), border]
    lines.extend(line(row) for row in rows)
    lines.append(border)
    return "\n".join(lines)


def print_configured_jobs(jobs: list[JobSnapshot]) -> None:
    """Print the fetched jobs between blank lines."""
    click.echo()
    click.secho("List of currently configured jobs:", fg="green")
    click.echo(render_table(["Name", "Status"], [[j.name, j.status] for j in jobs]))
    click.echo()


def print_error(message: str, detail: str | None = None) -> None:
    click.secho(message, fg="white", bg="red", err=True)
    if detail:
        click.echo(detail, err=True)


@click.group()
@click.pass_context
def cli(ctx: click.Context):
    """Jenkins jobs - Snapshot the jobs configured on a Jenkins server."""
    if ctx.obj is None:
        ctx.obj = load_config()


@cli.command("get:jobs")
@click.argument("jenkins_url")
@click.argument("sqlite_name", required=False)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    default="WARNING",
    show_default=True,
    help="Logging level",
)
@click.pass_obj
def get_jobs_command(config, jenkins_url: str, sqlite_name: str | None, log_level: str):
    """
    Get the list of Jenkins jobs created.

    JENKINS_URL is the Jenkins instance you want to monitor. SQLITE_NAME is
    the database file the run is stored in (default: jobs.sqlite).
    """
    logging.basicConfig(
        level=getattr(logging, log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    sqlite_name = sqlite_name or config.default_db_name
    logger.debug(f"Snapshotting {jenkins_url} into {sqlite_name}")

    fetched = fetch_jobs(jenkins_url, config)
    if not fetched.ok:
        print_error(
            "It was not possible to access the given Jenkins instance.", fetched.error
        )
        sys.exit(1)

    if not fetched.jobs:
        print_error("There are no configured jobs for the given Jenkins instance")
        return

    print_configured_jobs(fetched.jobs)

    stored = store_jobs(fetched.jobs, sqlite_name, config)
    if not stored.ok:
        print_error("It was not possible to store this run.", stored.error)
        sys.exit(1)

    click.secho(
        f"Note: We stored on {stored.db_path} db the currently configured jobs",
        fg="green",
    )


def main():
    """Main entry point for the jenkins-jobs CLI."""
    cli()


if __name__ == "__main__":
    main()
