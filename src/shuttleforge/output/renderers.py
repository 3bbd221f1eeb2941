"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). Renderers are
dispatched by ``result.op`` in :func:`render_result`; unknown ops fall
through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from shuttleforge.output.console import (
    create_console,
    get_output,
    style_for_severity,
    style_for_urgency,
)

if TYPE_CHECKING:
    from rich.console import Console

    from shuttleforge.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    show_legs: bool = True,
    width: int | None = None,
) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console(width=width)

    if result.op == "evaluate" and result.data:
        _render_evaluation(result, console, verbose=verbose, show_legs=show_legs)
    elif not result.ok:
        _render_error(result, console, verbose=verbose)
    elif result.op == "validate_move":
        _render_move(result, console, verbose=verbose)
    else:
        _render_generic(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render a one-line status for ``--quiet`` mode."""
    if result.op == "evaluate" and result.data:
        status = "BLOCKED" if result.data.get("export_blocked") else "OK"
        return (
            f"{status}: evaluate — {result.data.get('error_count', 0)} errors, "
            f"{result.data.get('warning_count', 0)} warnings"
        )
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if result.op == "validate_move":
        return f"OK: validate_move — {result.data.get('outcome', 'accepted')}"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, label: str, style: str, op: str) -> None:
    console.print(Text(label, style=style), Text(f"  {op}", style="sf.op"), end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="sf.key")
    if key in ("job_id", "job_number"):
        v = Text(str(value), style="sf.job")
    elif key in ("from", "to", "today"):
        v = Text(str(value), style="sf.date")
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(Text("ERROR", style="sf.error"), Text(f"  {result.op}"), Text(" — "), Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Evaluation renderer ───────────────────────────────────────────────


def _issue_table(issues: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Severity", no_wrap=True)
    table.add_column("Job", style="sf.job", no_wrap=True)
    table.add_column("Message")
    for issue in issues:
        severity = str(issue.get("severity", ""))
        table.add_row(
            Text(severity, style=style_for_severity(severity)),
            str(issue.get("job_id") or ""),
            str(issue.get("message", "")),
        )
    return table


def _capacity_table(rows: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Date", no_wrap=True)
    table.add_column("Cars", justify="right")
    table.add_column("Shuttle drivers", justify="right")
    table.add_column("")
    for row in rows:
        style = "sf.overbooked" if row.get("overbooked") else ""
        table.add_row(
            Text(str(row.get("date", "")), style=style),
            Text(str(row.get("cars", 0)), style=style),
            Text(str(row.get("shuttle_on_duty", 0)), style=style),
            Text("overbooked", style=style) if row.get("overbooked") else "",
        )
    return table


def _leg_table(rows: list[dict[str, Any]], *, verbose: bool = False) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Date", no_wrap=True)
    table.add_column("Job", style="sf.job", no_wrap=True)
    table.add_column("Leg")
    table.add_column("Due", justify="right")
    table.add_column("Driver")
    if verbose:
        table.add_column("From", style="dim")
        table.add_column("To", style="dim")
    for row in rows:
        urgency = str(row.get("urgency", ""))
        cells: list[Any] = [
            str(row.get("date", "")),
            str(row.get("job_number", "")),
            str(row.get("leg", "")),
            Text(str(row.get("label", "")), style=style_for_urgency(urgency)),
            str(row.get("driver_id") or "Unassigned"),
        ]
        if verbose:
            cells.append(str(row.get("start_location", "")))
            cells.append(str(row.get("end_location", "")))
        table.add_row(*cells)
    return table


def _render_evaluation(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    show_legs: bool = True,
) -> None:
    d = result.data
    if d.get("export_blocked"):
        _status_line(console, "BLOCKED", "sf.error", result.op)
    else:
        _status_line(console, "OK", "sf.ok", result.op)
    _field(console, "jobs", d.get("jobs", 0))
    _field(console, "errors", d.get("error_count", 0))
    _field(console, "warnings", d.get("warning_count", 0))

    issues = d.get("issues", [])
    if issues:
        console.print("\n[bold]Checks[/bold]")
        console.print(_issue_table(issues))

    capacity = d.get("capacity", [])
    if capacity:
        console.print("\n[bold]Capacity[/bold]")
        console.print(_capacity_table(capacity))

    overbooked = d.get("overbooked_days", [])
    if overbooked:
        console.print(f"\n[sf.overbooked]Overbooked: {', '.join(overbooked)}[/sf.overbooked]")

    legs = d.get("legs", [])
    if show_legs and legs:
        console.print("\n[bold]Legs[/bold]")
        console.print(_leg_table(legs, verbose=verbose))

    if verbose:
        _render_meta(console, result)


# ── Move renderer ─────────────────────────────────────────────────────


def _render_move(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    if d.get("outcome") == "accepted_with_warning":
        _status_line(console, "OK", "sf.warning", result.op)
    else:
        _status_line(console, "OK", "sf.ok", result.op)
    for key in ("job_number", "leg", "from", "to", "outcome"):
        if key in d:
            _field(console, key, d[key])
    if verbose:
        _render_meta(console, result)


# ── Fallback ──────────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, "OK", "sf.ok", result.op)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)
