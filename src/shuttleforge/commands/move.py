"""Command: validate a proposed leg reschedule."""

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
  shuttleforge move schedule.yaml J-1002 B --to 2025-10-28
  shuttleforge move schedule.yaml J-1002 A --to 2025-10-25
  shuttleforge move schedule.yaml MF-42 0 --to 2025-10-29""",
)
@click.argument("snapshot", type=click.Path(path_type=Path))
@click.argument("job_id")
@click.argument("leg")
@click.option("--to", "new_date", type=DATE, required=True, help="Proposed new date.")
@click.pass_obj
def move(
    app: AppContext,
    snapshot: Path,
    job_id: str,
    leg: str,
    new_date: datetime.date,
) -> None:
    """Check whether LEG (A, B, or an index) of JOB_ID may move to a new date.

    Nothing is written: apply the move in your schedule, then re-run check.
    """
    app.emit(app.dispatch_service().validate_move_file(snapshot, job_id, leg, new_date))
