"""ConfigurationBuilder — raw options in, NetworkConfiguration out.

Pipeline: ARGUMENTS → FIELDS (schema order, fail-fast) → ROOT (verifier) → ASSEMBLE

The verifier call is the only suspension point, which is why ``build`` is
a coroutine. Copying from an existing configuration skips the verifier and
reuses its root, so ``build_from`` stays synchronous.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from modular_config.config.logging import configure_from_settings
from modular_config.config.models import NetworkConfiguration, TrustRootOptions
from modular_config.config.settings import BuilderSettings
from modular_config.domain.errors import (
    ConfigurationError,
    ConfigurationTypeError,
    ConfigurationUsageError,
    TrustRootVerificationError,
)
from modular_config.domain.rules import validate_fields
from modular_config.services.result import BuildResult
from modular_config.services.verifier import TrustRootVerifier

if TYPE_CHECKING:
    from modular_config.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


def _single_argument(args: tuple[Any, ...], op: str) -> Any:
    if len(args) != 1:
        msg = f"{op}() expects exactly one argument, got {len(args)}"
        raise ConfigurationUsageError(msg)
    return args[0]


class ConfigurationBuilder:
    """Validates raw options and produces immutable configurations.

    Holds no per-build state: one builder can serve any number of
    concurrent ``build`` calls.

    Usage::

        builder = ConfigurationBuilder(verifier=my_verifier)
        config = await builder.build(options)
    """

    def __init__(
        self,
        verifier: TrustRootVerifier | None = None,
        *,
        settings: BuilderSettings | None = None,
    ) -> None:
        self._verifier = verifier
        self._settings = settings if settings is not None else BuilderSettings()

    @classmethod
    def from_env(
        cls,
        verifier: TrustRootVerifier | None = None,
        **overrides: Any,
    ) -> ConfigurationBuilder:
        """Create a builder from ``MODULAR_CONFIG_*`` settings and apply them.

        *overrides* take precedence over the environment. The logging flags
        (``verbose``, ``log_json``) are applied through structlog before the
        builder is returned, so ``MODULAR_CONFIG_VERBOSE=true`` turns on
        DEBUG output for every later build.
        """
        settings = BuilderSettings(**overrides)
        configure_from_settings(settings)
        return cls(verifier, settings=settings)

    @classmethod
    def from_plugins(
        cls,
        manager: PluginManager | None = None,
        *,
        settings: BuilderSettings | None = None,
    ) -> ConfigurationBuilder:
        """Create a builder whose verifier comes from the plugin system.

        When *manager* is None, a fresh one is created. Entry points are
        discovered on any manager that has not loaded them yet. A manager
        without a verifier plugin yields a builder that can only copy
        existing configurations.
        """
        if manager is None:
            from modular_config.plugins.manager import PluginManager

            manager = PluginManager()
        if not manager.is_loaded:
            manager.discover_and_load()
        return cls(manager.verifier(), settings=settings)

    @property
    def settings(self) -> BuilderSettings:
        return self._settings

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def build(self, *args: Any) -> NetworkConfiguration:
        """Validate one options mapping and return the configuration.

        Passing an existing :class:`NetworkConfiguration` copies it
        (see :meth:`build_from`).

        Raises:
            ConfigurationUsageError: Not exactly one argument, options not
                a mapping, or no verifier configured.
            ConfigurationTypeError: A field is missing, mistyped, or malformed.
            ConfigurationRangeError: A field is out of policy.
            TrustRootVerificationError: The verifier rejected the root.
        """
        options = _single_argument(args, "build")
        if isinstance(options, NetworkConfiguration):
            return self.build_from(options)
        if not isinstance(options, Mapping):
            msg = f"Options must be a mapping, got {type(options).__name__}"
            raise ConfigurationUsageError(msg)

        try:
            fields = validate_fields(options, power_check=self._settings.power_check)
            root = await self._verify_root(options)
        except ConfigurationError as exc:
            logger.warning("Configuration rejected (%s): %s", exc.field or "options", exc.message)
            raise

        config = NetworkConfiguration(**fields, root=root)
        logger.debug(
            "Built configuration for network %s (version %d)",
            config.network_identifier,
            config.version,
        )
        return config

    def build_from(self, existing: NetworkConfiguration) -> NetworkConfiguration:
        """Copy *existing*, revalidating its fields but reusing its root.

        The verifier is never called; the returned configuration's ``root``
        is the same object as ``existing.root``.
        """
        if not isinstance(existing, NetworkConfiguration):
            msg = f"build_from() expects a NetworkConfiguration, got {type(existing).__name__}"
            raise ConfigurationUsageError(msg)

        try:
            fields = validate_fields(existing.to_options(), power_check=self._settings.power_check)
            if existing.root is None:
                msg = "root of the source configuration is None"
                raise ConfigurationTypeError(msg, field="root")
        except ConfigurationError as exc:
            logger.warning("Configuration copy rejected (%s): %s", exc.field, exc.message)
            raise

        logger.debug("Copied configuration for network %s", existing.network_identifier)
        return NetworkConfiguration(**fields, root=existing.root)

    async def try_build(self, *args: Any) -> BuildResult:
        """Run :meth:`build` and return the outcome as a :class:`BuildResult`.

        Only configuration errors are captured; anything else propagates.
        """
        op = "build"
        if len(args) == 1 and isinstance(args[0], NetworkConfiguration):
            op = "build_from"
        try:
            config = await self.build(*args)
        except ConfigurationError as exc:
            return BuildResult.failure(op, exc)
        return BuildResult.success(op, config)

    # ------------------------------------------------------------------
    # Trust root
    # ------------------------------------------------------------------

    async def _verify_root(self, options: Mapping[str, Any]) -> Any:
        if "root" not in options:
            msg = "root is required"
            raise ConfigurationTypeError(msg, field="root")
        raw = options["root"]
        if not isinstance(raw, Mapping):
            msg = "root must be a mapping with fingerprint and publicKeyArmored"
            raise ConfigurationTypeError(msg, field="root")
        try:
            spec = TrustRootOptions.model_validate(dict(raw))
        except ValidationError as exc:
            msg = f"Invalid root: {exc.errors()[0]['msg']}"
            raise ConfigurationTypeError(msg, field="root") from exc

        if self._verifier is None:
            msg = "No trust-root verifier configured"
            raise ConfigurationUsageError(msg, field="root")

        try:
            trust_root = self._verifier(spec.fingerprint, spec.public_key_armored)
            if inspect.isawaitable(trust_root):
                trust_root = await trust_root
        except ConfigurationError:
            raise
        except Exception as exc:
            msg = f"Trust root verification failed: {exc}"
            raise TrustRootVerificationError(msg, field="root") from exc

        if trust_root is None:
            msg = "Trust root verifier returned no trust root"
            raise TrustRootVerificationError(msg, field="root")
        return trust_root
