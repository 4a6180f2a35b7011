"""Rich utilities: shared console, themes, and helpers."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.theme import Theme
from rich.traceback import install as rich_traceback_install

_console: Console | None = None

THEME = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "red",
        "success": "green",
        "muted": "grey62",
    }
)


def get_console() -> Console:
    """Return a shared Rich Console instance for stdout."""
    global _console
    if _console is None:
        _console = Console(theme=THEME, highlight=False, soft_wrap=False)
    return _console


def summary_table(title: str, rows: dict[str, object]) -> Table:
    """Build a two-column key/value table."""
    table = Table(title=title, show_header=False, title_justify="left")
    table.add_column(style="muted")
    table.add_column()
    for key, value in rows.items():
        table.add_row(key, str(value))
    return table


def install_rich_tracebacks() -> None:
    """Enable rich tracebacks globally for nicer error output."""
    rich_traceback_install(show_locals=False, word_wrap=True, suppress=["click"])
