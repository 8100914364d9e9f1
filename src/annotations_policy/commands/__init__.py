"""Subcommand modules for annotations-policy.

Provides register_commands() which uses deferred imports to keep
``annotations-policy --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from annotations_policy.commands.validate import defaults, validate

    cli.add_command(validate)
    cli.add_command(defaults)
