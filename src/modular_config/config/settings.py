"""Builder settings — environment variables over code defaults.

Priority chain (highest to lowest):
  1. Init kwargs  — passed by the embedding application
  2. Env vars     — ``MODULAR_CONFIG_*`` prefix
  3. Code defaults

``ConfigurationBuilder.from_env`` is the entry point that reads these and
applies the logging flags.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings

from modular_config.domain.powers import PowerCheck


class BuilderSettings(BaseSettings):
    """Knobs that change how the builder validates and logs.

    Attributes:
        power_check: ``exact`` integer power-of-N test, or the legacy
            ``float`` logarithm test.
        verbose: Put the ``modular_config`` logger at DEBUG.
        log_json: Emit JSON log lines instead of console output.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "MODULAR_CONFIG_",
    }

    power_check: PowerCheck = PowerCheck.EXACT
    verbose: bool = False
    log_json: bool = False
