"""Command: batch validation of style names."""

from __future__ import annotations

import itertools
from typing import TYPE_CHECKING, TextIO

import click

from snn.commands._base import SnnCommand

if TYPE_CHECKING:
    from snn.commands._context import AppContext


@click.command(
    cls=SnnCommand,
    examples="""\
  snn check Chess Shogi Xiangqi
  snn check --from-file styles.txt
  cat styles.txt | snn check -f -
  snn check --fail-fast Chess chess CHESS
  snn -q check -f styles.txt""",
)
@click.argument("names", nargs=-1)
@click.option(
    "-f",
    "--from-file",
    "source",
    type=click.File("r", encoding="utf-8", errors="surrogateescape"),
    default=None,
    help="Read names from FILE, one per line ('-' for stdin).",
)
@click.option(
    "--fail-fast/--no-fail-fast",
    default=None,
    help="Stop at the first invalid name.",
)
@click.pass_obj
def check(
    app: AppContext,
    names: tuple[str, ...],
    source: TextIO | None,
    fail_fast: bool | None,
) -> None:
    """Check every NAME (and each line of FILE); exit 1 if any is invalid."""
    candidates = itertools.chain(names, app.names.read_lines(source) if source else ())
    app.emit(app.names.check(candidates, fail_fast=fail_fast))
