"""Output mode dispatch for ServiceResult.

Humans get Rich-rendered text, machines get ``--json``, scripts get
``--quiet`` one-liners.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from shuttleforge.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from shuttleforge.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output flags resolved from the CLI."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    show_legs: bool = True
    width: int = 120


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
    json_output: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output flags. When given, *json_output* is ignored.
        json_output: Shortcut for ``OutputSettings(json_output=True)``.
    """
    if settings is None:
        settings = OutputSettings(json_output=json_output)
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(
        result,
        verbose=settings.verbose,
        show_legs=settings.show_legs,
        width=settings.width,
    )
