"""Rich Console factory and theme for shuttleforge output.

Consoles render to a StringIO buffer, preserving the
``format_result() -> str`` contract. In non-TTY environments (tests,
pipes) Rich drops color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

SF_THEME = Theme(
    {
        "sf.ok": "bold green",
        "sf.error": "bold red",
        "sf.warning": "bold yellow",
        "sf.op": "bold cyan",
        "sf.key": "dim",
        "sf.job": "bold blue",
        "sf.date": "bold",
        "sf.overbooked": "red",
        "sf.urgency.due": "bold red",
        "sf.urgency.soon": "yellow",
        "sf.urgency.clear": "green",
    }
)

_URGENCY_STYLES: dict[str, str] = {
    "due": "sf.urgency.due",
    "soon": "sf.urgency.soon",
    "clear": "sf.urgency.clear",
}

_SEVERITY_STYLES: dict[str, str] = {
    "error": "sf.error",
    "warning": "sf.warning",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (default 120).
    """
    return Console(
        file=StringIO(),
        theme=SF_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_urgency(urgency: str) -> str:
    return _URGENCY_STYLES.get(urgency, "")


def style_for_severity(severity: str) -> str:
    return _SEVERITY_STYLES.get(severity, "")
