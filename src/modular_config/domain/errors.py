"""Error taxonomy for configuration building.

Four kinds of failure, each raised as a :class:`ConfigurationError` subclass:

- usage: wrong argument count, options not a mapping, no verifier
- type: wrong primitive type, or a string failing its format pattern
- range: right type, out-of-policy value
- delegated: the trust-root verifier rejected its input

The usage, type, and range classes also inherit from the matching builtin
so callers can catch ``TypeError`` / ``ValueError`` directly.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    """Classification of a configuration failure."""

    USAGE = "usage"
    TYPE = "type"
    RANGE = "range"
    DELEGATED = "delegated"


class ConfigurationError(Exception):
    """Base class for every failure raised while building a configuration.

    Attributes:
        kind: Which branch of the taxonomy this error belongs to.
        field: camelCase name of the offending field, or None for
            failures that are not tied to a single field.
    """

    kind: ErrorKind = ErrorKind.USAGE

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field


class ConfigurationUsageError(ConfigurationError, TypeError):
    """The builder was called incorrectly."""

    kind = ErrorKind.USAGE


class ConfigurationTypeError(ConfigurationError, TypeError):
    """A field has the wrong type or fails its format pattern."""

    kind = ErrorKind.TYPE


class ConfigurationRangeError(ConfigurationError, ValueError):
    """A field has the right type but an out-of-policy value."""

    kind = ErrorKind.RANGE


class TrustRootVerificationError(ConfigurationError):
    """The trust-root verifier rejected the fingerprint/key pair."""

    kind = ErrorKind.DELEGATED
