"""CLI tools for daily report tab snapshots."""

import json
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from app.core.enums import ReportStatus
from app.schemas.daily_report import DailyReportProgressRequest
from app.services import daily_report_service


class ReportSnapshot(DailyReportProgressRequest):
    """JSON snapshot file: tabs, templates, form data and the user's roles."""

    app_role: str | None = None


def _load_snapshot(path: str) -> ReportSnapshot:
    try:
        raw = json.loads(Path(path).read_text())
        return ReportSnapshot.model_validate(raw)
    except (json.JSONDecodeError, ValidationError) as e:
        raise click.ClickException(f"Invalid snapshot {path}: {e}")


def _context(snapshot: ReportSnapshot):
    app_roles = list(snapshot.app_roles)
    if snapshot.app_role:
        app_roles.append(snapshot.app_role)
    return daily_report_service.build_role_context(snapshot.scheduling_role_ids, app_roles)


@click.group()
def cli():
    """Facility ops CLI tools."""
    pass


@cli.command()
@click.argument("snapshot", type=click.Path(exists=True, dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Print the full progress as JSON")
def tab_progress(snapshot: str, as_json: bool):
    """
    Show tab completion for the tabs the snapshot's user can see.

    Example:
        python -m app.cli tab-progress report.json
    """
    data = _load_snapshot(snapshot)
    progress = daily_report_service.build_report_progress(
        data.tabs, _context(data), data.form_data, data.form_templates
    )

    if as_json:
        click.echo(progress.model_dump_json(indent=2))
        return

    for status in progress.summary.tab_statuses:
        mark = "✓" if status.is_complete else ("!" if status.is_required else " ")
        click.echo(
            f"[{mark}] {status.tab_name}: {status.completed_items}/{status.total_items}"
            f" ({status.percent_complete}%)"
        )
    overall = progress.summary.overall_progress
    click.echo(f"Tab progress: {overall.completed}/{overall.total} tabs ({overall.percent}%)")
    if not progress.summary.required_tabs_complete:
        click.echo("Required tabs incomplete")


@cli.command()
@click.argument("snapshot", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--status",
    type=click.Choice([s.value for s in ReportStatus]),
    default=ReportStatus.SUBMITTED.value,
    show_default=True,
    help="Status the report would be saved with",
)
def check_submission(snapshot: str, status: str):
    """Exit non-zero when the report cannot be saved with STATUS."""
    data = _load_snapshot(snapshot)
    result = daily_report_service.check_report_submission(
        data.tabs, _context(data), data.form_data, data.form_templates, ReportStatus(status)
    )
    if result.can_submit:
        click.echo(f"✓ Report can be saved as {status}")
        return

    click.echo(f"❌ {daily_report_service.RequiredTabsIncompleteError(result.missing_tabs)}")
    sys.exit(1)


if __name__ == "__main__":
    cli()
