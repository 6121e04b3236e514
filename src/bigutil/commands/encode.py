"""Command: show the storage bytes for an integer."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bigutil.commands._base import BigutilCommand

if TYPE_CHECKING:
    from bigutil.commands._context import AppContext


@click.command(
    cls=BigutilCommand,
    examples="""\
  bigutil encode 2083236893
  bigutil --json encode 0x4a5e1e4baab89f3a32518a88c31bc87f618f76673e2cc77ab2127b7afdeda33b""",
)
@click.argument("text")
@click.pass_obj
def encode(app: AppContext, text: str) -> None:
    """Encode TEXT (decimal or 0x-hex) to minimal big-endian bytes."""
    app.emit(app.codec.encode(text))
