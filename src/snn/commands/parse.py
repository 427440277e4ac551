"""Command: strict parse of a single style name."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from snn.commands._base import SnnCommand

if TYPE_CHECKING:
    from snn.commands._context import AppContext


@click.command(
    cls=SnnCommand,
    examples="""\
  snn parse Chess
  snn parse Chess960
  snn --json parse Shogi
  snn -q parse Xiangqi""",
)
@click.argument("name")
@click.pass_obj
def parse(app: AppContext, name: str) -> None:
    """Validate NAME and show its parts; exit 1 if it is malformed."""
    app.emit(app.names.parse(name))
