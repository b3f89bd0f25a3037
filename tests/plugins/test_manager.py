"""Tests for PluginManager — registration and verifier lookup."""

from __future__ import annotations

from typing import Any

import anyio
import pytest

from modular_config.config.settings import BuilderSettings
from modular_config.plugins import PluginManager, hookimpl
from modular_config.services.builder import ConfigurationBuilder
from tests.conftest import FINGERPRINT, PUBLIC_KEY, TrustRoot, make_options


class _VerifierPlugin:
    """Plugin that accepts every pair and records what it saw."""

    def __init__(self) -> None:
        self.seen: list[tuple[str, str]] = []

    @hookimpl
    def verify_trust_root(self, fingerprint: str, public_key_armored: str) -> TrustRoot:
        self.seen.append((fingerprint, public_key_armored))
        return TrustRoot(fingerprint)


class _AsyncVerifierPlugin:
    @hookimpl
    async def verify_trust_root(self, fingerprint: str, public_key_armored: str) -> TrustRoot:
        return TrustRoot(fingerprint)


class _DecliningPlugin:
    """Returns None so the next implementation gets a turn."""

    @hookimpl
    def verify_trust_root(self, fingerprint: str, public_key_armored: str) -> Any:
        return None


class TestPluginManager:
    def test_register_plugin(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_VerifierPlugin(), name="verifier")
        assert "verifier" in pm.list_plugin_names()

    def test_register_plugin_default_name(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_VerifierPlugin())
        assert "_VerifierPlugin" in pm.list_plugin_names()

    def test_is_loaded(self) -> None:
        pm = PluginManager()
        assert pm.is_loaded is False
        pm.discover_and_load()
        assert pm.is_loaded is True


class TestVerifierLookup:
    def test_none_without_plugins(self) -> None:
        assert PluginManager().verifier() is None

    def test_dispatches_to_plugin(self) -> None:
        pm = PluginManager()
        plugin = _VerifierPlugin()
        pm.register_plugin(plugin)
        verify = pm.verifier()
        assert verify is not None
        root = verify(FINGERPRINT, PUBLIC_KEY)
        assert root.fingerprint == FINGERPRINT
        assert plugin.seen == [(FINGERPRINT, PUBLIC_KEY)]

    def test_first_non_none_result_wins(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_VerifierPlugin(), name="accepting")
        pm.register_plugin(_DecliningPlugin(), name="declining")
        verify = pm.verifier()
        assert verify is not None
        assert verify(FINGERPRINT, PUBLIC_KEY).fingerprint == FINGERPRINT


class TestBuilderFromPlugins:
    @pytest.mark.parametrize("plugin_cls", [_VerifierPlugin, _AsyncVerifierPlugin])
    def test_builds_with_plugin_verifier(self, plugin_cls: type, settings: BuilderSettings) -> None:
        pm = PluginManager()
        pm.register_plugin(plugin_cls())
        builder = ConfigurationBuilder.from_plugins(pm, settings=settings)

        async def _run() -> Any:
            return await builder.build(make_options())

        cfg = anyio.run(_run)
        assert cfg.root.fingerprint == FINGERPRINT

    def test_discovers_when_no_manager(self, settings: BuilderSettings) -> None:
        builder = ConfigurationBuilder.from_plugins(settings=settings)
        assert isinstance(builder, ConfigurationBuilder)

    def test_discovers_on_unloaded_manager(self, settings: BuilderSettings) -> None:
        pm = PluginManager()
        ConfigurationBuilder.from_plugins(pm, settings=settings)
        assert pm.is_loaded is True

    def test_keeps_registered_plugins_after_discovery(self, settings: BuilderSettings) -> None:
        pm = PluginManager()
        pm.register_plugin(_VerifierPlugin(), name="verifier")
        builder = ConfigurationBuilder.from_plugins(pm, settings=settings)

        async def _run() -> Any:
            return await builder.build(make_options())

        assert anyio.run(_run).root.fingerprint == FINGERPRINT
        assert "verifier" in pm.list_plugin_names()
