"""
Command-line front end: replay and validate mutation logs.
"""

from __future__ import annotations

import json
from pathlib import Path

import click

from hiring_ledger.config import configure_logging, settings
from hiring_ledger.registry import Registry, RegistryError
from hiring_ledger.utils.oplog import OperationLogError, load_operations


def _load(path: Path, admin: str | None):
    try:
        return load_operations(path, default_admin=admin or settings.admin_identity)
    except OperationLogError as exc:
        raise click.ClickException(str(exc)) from exc


@click.group()
@click.option("--log-level", type=str, default=None, help="Overrides LOG_LEVEL.")
@click.option(
    "--log-format",
    type=click.Choice(["console", "json"]),
    default=None,
    help="Overrides LOG_FORMAT.",
)
def cli(log_level: str | None, log_format: str | None) -> None:
    """Hiring ledger CLI."""
    configure_logging(level=log_level, fmt=log_format)


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--admin", type=str, default=None, help="Admin identity if the log names none.")
@click.option(
    "--continue-on-error",
    is_flag=True,
    default=False,
    help="Record rejected operations and keep going.",
)
@click.option("--json", "as_json", is_flag=True, default=False, help="Print a JSON document.")
def replay(path: Path, admin: str | None, continue_on_error: bool, as_json: bool) -> None:
    """Apply a mutation log to a fresh registry and print the result."""
    log = _load(path, admin)
    registry = Registry(admin=log.admin)
    if not as_json:
        registry.subscribe(lambda notification: click.echo(str(notification)))

    errors: list[dict] = []
    for operation in log.operations:
        try:
            operation.apply(registry)
        except (RegistryError, ValueError, TypeError) as exc:
            if not continue_on_error:
                raise click.ClickException(f"{operation} failed: {exc}") from exc
            errors.append({
                "index": operation.index,
                "op": operation.op,
                "error": type(exc).__name__,
                "message": str(exc),
            })
            if not as_json:
                click.echo(f"{operation} rejected: {type(exc).__name__}: {exc}")

    if as_json:
        document = {
            "applicants": [a.to_dict() for a in registry.list_applicants()],
            "jobs": [j.to_dict() for j in registry.list_jobs()],
            "events": [e.to_dict() for e in registry.events],
            "summary": registry.summary(),
            "errors": errors,
        }
        click.echo(json.dumps(document, indent=2))
        return

    applicants = registry.list_applicants()
    jobs = registry.list_jobs()
    click.echo("")
    if not applicants:
        click.echo("No applicants")
    for applicant in applicants:
        click.echo(
            f"{applicant.id}\t{applicant.name}\t{applicant.work_preference.label}\t"
            f"rating={applicant.rating}"
        )
    if not jobs:
        click.echo("No jobs")
    for job in jobs:
        status = f"filled by {job.applicant_id}" if job.filled else "open"
        click.echo(f"{job.id}\t{job.title}\t{job.salary_display}\t{status}")
    if errors:
        click.echo(f"{len(errors)} operation(s) rejected")


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--admin", type=str, default=None, help="Admin identity if the log names none.")
def validate(path: Path, admin: str | None) -> None:
    """Check that a mutation log parses."""
    log = _load(path, admin)
    click.echo(f"{len(log.operations)} operations, admin={log.admin}")


if __name__ == "__main__":
    cli()
