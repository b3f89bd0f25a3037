"""BuildResult and BuildError — the tagged outcome of a build.

INVARIANT: ``ok`` is True exactly when ``config`` is set and ``error`` is None.
"""

from __future__ import annotations

from pydantic import BaseModel

from modular_config.config.models import NetworkConfiguration
from modular_config.domain.errors import ConfigurationError, ErrorKind


class BuildError(BaseModel):
    """Structured error payload within a BuildResult."""

    model_config = {"frozen": True}

    kind: ErrorKind
    message: str
    field: str | None = None

    @classmethod
    def from_exception(cls, exc: ConfigurationError) -> BuildError:
        return cls(kind=exc.kind, message=exc.message, field=exc.field)


class BuildResult(BaseModel):
    """Return type of ``ConfigurationBuilder.try_build``.

    Attributes:
        ok: Whether the configuration was built.
        op: ``"build"`` or ``"build_from"``.
        config: The validated configuration on success.
        error: The first validation failure otherwise.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    config: NetworkConfiguration | None = None
    error: BuildError | None = None

    @classmethod
    def success(cls, op: str, config: NetworkConfiguration) -> BuildResult:
        return cls(ok=True, op=op, config=config)

    @classmethod
    def failure(cls, op: str, exc: ConfigurationError) -> BuildResult:
        return cls(ok=False, op=op, error=BuildError.from_exception(exc))
