"""Rich Console factory and theme for annotations-policy output.

Consoles render to a StringIO buffer so formatters keep a plain
``-> str`` contract.  In non-TTY environments (tests, pipes) Rich
disables color codes automatically.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

POLICY_THEME = Theme(
    {
        "policy.ok": "bold green",
        "policy.error": "bold red",
        "policy.op": "bold cyan",
        "policy.key": "dim",
        "policy.criteria": "bold blue",
        "policy.invalid": "yellow",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=POLICY_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
