"""Rich Console factory and theme for litcal output.

Consoles render into a StringIO buffer so renderers return plain strings.
Rich drops color codes by itself when output is not a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

LITCAL_THEME = Theme(
    {
        "litcal.ok": "bold green",
        "litcal.error": "bold red",
        "litcal.warning": "bold yellow",
        "litcal.op": "bold cyan",
        "litcal.key": "dim",
        "litcal.date": "bold blue",
        "litcal.season": "bold",
        "litcal.proper": "magenta",
        "litcal.color.purple": "magenta",
        "litcal.color.rose": "pink1",
        "litcal.color.blue": "blue",
        "litcal.color.white": "bright_white",
        "litcal.color.gold": "yellow",
        "litcal.color.red": "red",
        "litcal.color.green": "green",
        "litcal.color.black": "dim",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width for stable layout.
    """
    return Console(
        file=StringIO(),
        theme=LITCAL_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_color(color: str) -> str:
    """Rich style name for a liturgical color, or "" when unknown."""
    style = f"litcal.color.{color.lower()}"
    return style if style in LITCAL_THEME.styles else ""
