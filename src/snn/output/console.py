"""Rich Console factory and theme for snn output.

Consoles render to a StringIO buffer so renderers return plain strings.
In non-TTY environments (tests, pipes) Rich disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

SNN_THEME = Theme(
    {
        "snn.ok": "bold green",
        "snn.error": "bold red",
        "snn.op": "bold cyan",
        "snn.key": "dim",
        "snn.name": "bold blue",
        "snn.suffix": "magenta",
        "snn.valid": "green",
        "snn.invalid": "red",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=SNN_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
