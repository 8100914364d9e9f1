"""Commands: settings validation and default settings."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from annotations_policy.commands._base import PolicyCommand

if TYPE_CHECKING:
    from annotations_policy.commands._context import AppContext


@click.command(
    cls=PolicyCommand,
    examples="""\
  annotations-policy validate settings.yaml
  annotations-policy --json validate settings.json
  annotations-policy -v validate settings.toml""",
)
@click.argument("path", type=click.Path(path_type=Path, dir_okay=False))
@click.pass_obj
def validate(app: AppContext, path: Path) -> None:
    """Validate a policy settings file (YAML, JSON, or TOML)."""
    from annotations_policy.services.validation import load_settings_file

    app.emit(load_settings_file(path))


@click.command()
def defaults() -> None:
    """Print the default settings document.

    The defaults carry no values, so they fail validation until at least
    one annotation key is configured.
    """
    from annotations_policy.domain.settings import Settings
    from annotations_policy.services.validation import dump_settings

    click.echo(dump_settings(Settings.default()))
