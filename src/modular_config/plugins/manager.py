"""Plugin discovery and loading.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints
in the ``modular_config.plugins`` group, plus direct registration.
Capability: supplying the trust-root verifier used by the builder.
"""

from __future__ import annotations

import inspect
import logging
from typing import Any

import pluggy

from modular_config.plugins.hookspecs import PROJECT_NAME, ModularConfigHookSpec
from modular_config.services.verifier import TrustRootVerifier

ENTRY_POINT_GROUP = "modular_config.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery, loading, and verifier lookup."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(ModularConfigHookSpec)
        self._loaded: bool = False

    def discover_and_load(self) -> list[str]:
        """Load plugins registered under the ``modular_config.plugins`` entry point.

        Returns a list of loaded plugin names.
        """
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._normalize_plugin_instances()
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    @property
    def is_loaded(self) -> bool:
        """Whether discover_and_load() has been called."""
        return self._loaded

    def list_plugin_names(self) -> list[str]:
        """Return names of all registered plugins."""
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    def verifier(self) -> TrustRootVerifier | None:
        """Return a verifier that dispatches to ``verify_trust_root``.

        None when no registered plugin implements the hook.
        """
        if not self._pm.hook.verify_trust_root.get_hookimpls():
            return None

        def _verify(fingerprint: str, public_key_armored: str) -> Any:
            return self._pm.hook.verify_trust_root(
                fingerprint=fingerprint,
                public_key_armored=public_key_armored,
            )

        return _verify

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry-point loading may register a plugin class directly. Hook dispatch
        against class objects leaves ``self`` unbound and fails at runtime.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin):
                continue
            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)
            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue
            self._pm.register(instance, name=plugin_name)
            logger.debug("Instantiated entry-point plugin: %s", plugin_name)
