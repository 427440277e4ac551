"""Subcommand modules for snn.

Provides register_commands() which uses deferred imports to keep
``snn --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from snn.commands.check import check
    from snn.commands.parse import parse

    cli.add_command(parse)
    cli.add_command(check)
