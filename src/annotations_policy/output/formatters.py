"""Human and JSON rendering of ServiceResult.

The CLI renders results for humans (Rich text) or machines (``--json``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text

from annotations_policy.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from annotations_policy.services.result import ServiceResult


def _field(console: Console, key: str, value: Any, *, style: str = "") -> None:
    """Print a single indented key-value field."""
    console.print(
        Text(f"  {key}: ", style="policy.key"),
        Text(str(value), style=style),
        sep="",
        soft_wrap=True,
    )


def _render_ok(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    console.print(Text("OK", style="policy.ok"), Text(f"  {result.op}", style="policy.op"), sep="")
    criteria = result.data.get("criteria")
    if criteria:
        _field(console, "criteria", criteria, style="policy.criteria")
    for value in result.data.get("values", []):
        console.print(Text(f"  - {value}"), soft_wrap=True)
    if verbose and result.meta:
        for key, value in result.meta.items():
            _field(console, key, value)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="policy.error"),
        Text(f"  {result.op}", style="policy.op"),
        Text(" — "),
        Text(msg),
        sep="",
        soft_wrap=True,
    )
    if err is None:
        return
    for name in err.detail.get("invalid", []):
        console.print(Text(f"  ✗ {name}", style="policy.invalid"), soft_wrap=True)
    if verbose:
        _field(console, "code", err.code)


def format_result(
    result: ServiceResult,
    *,
    json_output: bool = False,
    quiet: bool = False,
    verbose: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        json_output: Return the result as indented JSON.
        quiet: Return a single status line.
        verbose: Include error codes and metadata.
    """
    if json_output:
        return result.model_dump_json(indent=2)
    if quiet:
        if result.ok:
            return f"OK: {result.op}"
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    console = create_console()
    if result.ok:
        _render_ok(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")
