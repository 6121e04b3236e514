"""Command: decode storage bytes back into text."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bigutil.commands._base import BigutilCommand, base_option

if TYPE_CHECKING:
    from bigutil.commands._context import AppContext
    from bigutil.domain.types import Base


@click.command(
    cls=BigutilCommand,
    examples="""\
  bigutil decode 7c2bac1d
  bigutil decode 0x7c2bac1d --to dec
  bigutil decode ''""",
)
@click.argument("data")
@base_option("Output base (default: [codec] default_base).")
@click.pass_obj
def decode(app: AppContext, data: str, to: Base | None) -> None:
    """Decode hex-encoded storage bytes DATA into an integer."""
    app.emit(app.codec.decode(data, base=to))
