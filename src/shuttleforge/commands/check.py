"""Command: evaluate a route snapshot."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from shuttleforge.commands._base import DATE, ShuttleCommand

if TYPE_CHECKING:
    import datetime

    from shuttleforge.commands._context import AppContext


@click.command(
    cls=ShuttleCommand,
    examples="""\
  shuttleforge check schedule.yaml
  shuttleforge check schedule.json --today 2025-10-26
  shuttleforge check schedule.yaml --errors-only
  shuttleforge --json check schedule.yaml""",
)
@click.argument("snapshot", type=click.Path(path_type=Path))
@click.option("--today", type=DATE, default=None, help="Reference date for urgency.")
@click.option(
    "--min-severity",
    type=click.Choice(["warning", "error"]),
    default="warning",
    help="Hide issues below this severity.",
)
@click.option("--errors-only", is_flag=True, help="Shortcut for --min-severity error.")
@click.pass_obj
def check(
    app: AppContext,
    snapshot: Path,
    today: datetime.date | None,
    min_severity: str,
    errors_only: bool,
) -> None:
    """Validate jobs, capacity and van coverage. Exits 1 when export is blocked."""
    threshold = "error" if errors_only else min_severity
    result = app.dispatch_service().evaluate_file(snapshot, today=today, min_severity=threshold)
    app.emit(result, blocked=bool(result.data.get("export_blocked")))
