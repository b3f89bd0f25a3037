"""modular-config — validated, immutable network configuration.

Typical use::

    from modular_config import ConfigurationBuilder

    builder = ConfigurationBuilder(verifier=verify)
    config = await builder.build(options)
"""

from modular_config.config.models import NetworkConfiguration
from modular_config.domain.errors import (
    ConfigurationError,
    ConfigurationRangeError,
    ConfigurationTypeError,
    ConfigurationUsageError,
    ErrorKind,
    TrustRootVerificationError,
)
from modular_config.services.builder import ConfigurationBuilder
from modular_config.services.result import BuildError, BuildResult

__all__ = [
    "BuildError",
    "BuildResult",
    "ConfigurationBuilder",
    "ConfigurationError",
    "ConfigurationRangeError",
    "ConfigurationTypeError",
    "ConfigurationUsageError",
    "ErrorKind",
    "NetworkConfiguration",
    "TrustRootVerificationError",
]
