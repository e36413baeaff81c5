"""Rich Console factory and theme for resname output.

Consoles render into a StringIO buffer so formatters keep a
``-> str`` contract. In non-TTY environments (tests, pipes) Rich
drops color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

RESNAME_THEME = Theme(
    {
        "resname.ok": "bold green",
        "resname.error": "bold red",
        "resname.warning": "bold yellow",
        "resname.op": "bold cyan",
        "resname.key": "dim",
        "resname.name": "bold",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width.
    """
    return Console(
        file=StringIO(),
        theme=RESNAME_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console, minus the final newline."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue().rstrip("\n")
