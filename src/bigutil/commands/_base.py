"""Custom Click base class with --examples support.

When ``--examples`` is passed, the command prints usage examples and exits.
This keeps ``--help`` concise while making examples available on demand.
"""

from __future__ import annotations

from typing import Any

import click

from bigutil.domain.types import Base

BASE_CHOICES: dict[str, Base] = {
    "dec": Base.DECIMAL,
    "decimal": Base.DECIMAL,
    "hex": Base.HEXADECIMAL,
    "hexadecimal": Base.HEXADECIMAL,
}


def base_option(help_text: str) -> Any:
    """``--to`` option resolving to a :class:`Base` (or None when omitted)."""
    return click.option(
        "--to",
        "to",
        type=click.Choice(sorted(BASE_CHOICES), case_sensitive=False),
        default=None,
        callback=lambda _ctx, _param, value: BASE_CHOICES[value.lower()] if value else None,
        help=help_text,
    )


class BigutilCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._show_examples,
                    help="Show usage examples.",
                )
            )

    def _show_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        ctx.exit(0)
