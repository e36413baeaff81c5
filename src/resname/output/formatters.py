"""Rich/JSON output helpers.

The CLI renders a ServiceResult for humans (Rich text) or machines
(``--json``). Names are rendered as plain :class:`rich.text.Text`, never
as markup, so brackets in a name print verbatim.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel
from rich.text import Text

from resname.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from resname.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output mode flags, frozen after construction."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def _print(console: Console, text: Text) -> None:
    console.print(text, soft_wrap=True)


def _format_value(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return _json.dumps(value, separators=(",", ":"))
    return str(value)


def _render_pairs(console: Console, pairs: dict[str, Any]) -> None:
    for key, value in pairs.items():
        line = Text("  ")
        line.append(f"{key}:", style="resname.key")
        line.append(f" {_format_value(value)}")
        _print(console, line)


def _render_quiet(console: Console, result: ServiceResult) -> None:
    if result.ok:
        for name in result.data.get("names", []):
            _print(console, Text(str(name)))
    elif result.error is not None:
        _print(console, Text(result.error.message))


def _render_human(console: Console, result: ServiceResult, *, verbose: bool) -> None:
    if result.ok:
        header = Text()
        header.append("OK", style="resname.ok")
        header.append(": ")
        header.append(result.op, style="resname.op")
        _print(console, header)
        if result.data:
            _render_pairs(console, result.data)
        return

    message = result.error.message if result.error else "Unknown error"
    header = Text()
    header.append("ERROR", style="resname.error")
    header.append(": ")
    header.append(result.op, style="resname.op")
    header.append(f" - {message}")
    _print(console, header)
    if verbose and result.error is not None and result.error.detail:
        _render_pairs(console, result.error.detail)


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
    json_output: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output mode. When given, *json_output* is ignored.
        json_output: Shortcut for ``OutputSettings(json_output=True)``.
    """
    if settings is None:
        settings = OutputSettings(json_output=json_output)
    if settings.json_output:
        return result.model_dump_json(indent=2)

    console = create_console()
    if settings.quiet:
        _render_quiet(console, result)
    else:
        _render_human(console, result, verbose=settings.verbose)
    return get_output(console)
