"""Logging settings read from ``INVARIANT_*`` environment variables.

Priority chain (highest to lowest):
  1. Keyword overrides passed to :meth:`InvariantSettings.from_env`
  2. Env vars (``INVARIANT_VERBOSE``, ``INVARIANT_LOG_JSON``)
  3. Code defaults

These settings only shape log output; they never change what a check
accepts or rejects.
"""

from __future__ import annotations

from typing import Any

from pydantic_settings import BaseSettings

from invariant.config.logging import configure_logging


class InvariantSettings(BaseSettings):
    """Frozen logging settings for applications using invariant."""

    model_config = {
        "frozen": True,
        "env_prefix": "INVARIANT_",
    }

    verbose: bool = False
    log_json: bool = False

    @classmethod
    def from_env(cls, **overrides: Any) -> InvariantSettings:
        """Build settings from the environment; *overrides* win over env vars."""
        return cls(**overrides)


def configure_logging_from_settings(settings: InvariantSettings) -> None:
    """Apply *settings* via :func:`configure_logging`."""
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)
