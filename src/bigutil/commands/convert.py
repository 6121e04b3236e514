"""Command: re-render an integer in the other text base."""

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
  bigutil convert 2083236893
  bigutil convert 0x7c2bac1d
  bigutil convert 0x7c2bac1d --to hex
  bigutil --json convert 255""",
)
@click.argument("text")
@base_option("Target base (default: the base TEXT is not written in).")
@click.pass_obj
def convert(app: AppContext, text: str, to: Base | None) -> None:
    """Convert TEXT between decimal and 0x-hexadecimal."""
    app.emit(app.codec.convert(text, to=to))
