"""Command: validate resource names."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from resname.commands._base import ResnameCommand

if TYPE_CHECKING:
    from resname.commands._context import AppContext


def _read_stdin_names() -> list[bytes]:
    # Raw bytes: malformed UTF-8 must reach the ASCII check, not the decoder.
    stream = click.get_binary_stream("stdin")
    return [line.rstrip(b"\r\n") for line in stream if line.strip(b"\r\n")]


@click.command(
    cls=ResnameCommand,
    examples="""\
  resname check my-pod
  resname check web-0 web-1 web-2
  resname --max-length 63 check my-service
  kubectl get pods -o name | resname check --stdin
  resname --json check my-pod""",
)
@click.argument("names", nargs=-1)
@click.option("--stdin", "from_stdin", is_flag=True, help="Read names from stdin, one per line.")
@click.pass_obj
def check(app: AppContext, names: tuple[str, ...], from_stdin: bool) -> None:
    """Check that each NAME is ASCII-only and within the length limit.

    Stops at the first invalid name. Pass ``-`` to read names from stdin.
    """
    from resname.services.validate import ValidationService

    candidates: list[bytes] | list[str]
    if from_stdin or names == ("-",):
        candidates = _read_stdin_names()
    else:
        candidates = list(names)
    app.emit(ValidationService(app.settings).validate(candidates))
