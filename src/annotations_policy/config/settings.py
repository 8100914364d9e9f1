"""CLI runtime settings — flags and environment variables in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``ANNOTATIONS_POLICY_*`` prefix
  3. Code defaults
"""

from __future__ import annotations

from typing import Any

from pydantic_settings import BaseSettings


class CliSettings(BaseSettings):
    """Output and logging switches for the ``annotations-policy`` CLI."""

    model_config = {
        "frozen": True,
        "env_prefix": "ANNOTATIONS_POLICY_",
    }

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> CliSettings:
        """Build settings, letting only flags that were actually set win.

        Click reports unset boolean flags as False, which would otherwise
        mask a True coming from the environment.
        """
        return cls(**{name: value for name, value in cli_flags.items() if value})
