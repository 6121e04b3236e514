"""Subcommand modules for bigutil.

Provides register_commands() which uses deferred imports to keep
``bigutil --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from bigutil.commands.convert import convert
    from bigutil.commands.decode import decode
    from bigutil.commands.encode import encode

    cli.add_command(convert)
    cli.add_command(encode)
    cli.add_command(decode)
