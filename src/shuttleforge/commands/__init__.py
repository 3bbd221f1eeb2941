"""Subcommand modules for shuttleforge.

Provides register_commands() which uses deferred imports to keep
``shuttleforge --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from shuttleforge.commands.check import check
    from shuttleforge.commands.move import move

    cli.add_command(check)
    cli.add_command(move)
