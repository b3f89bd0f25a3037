"""Shared pytest fixtures and test helpers for modular-config tests."""

from __future__ import annotations

from typing import Any

import pytest

from modular_config.config.settings import BuilderSettings
from modular_config.services.builder import ConfigurationBuilder

FINGERPRINT = "3b1f9e2a7c4d5e6f8a9b0c1d2e3f4a5b6c7d8e9f"
PUBLIC_KEY = "-----BEGIN PGP PUBLIC KEY BLOCK-----\n\nmQENBF...\n-----END PGP PUBLIC KEY BLOCK-----\n"


class TrustRoot:
    """Stand-in for the opaque value a real verifier returns."""

    def __init__(self, fingerprint: str) -> None:
        self.fingerprint = fingerprint


class RecordingVerifier:
    """Verifier substitute that records calls and returns a fixed root."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []
        self.root = TrustRoot(FINGERPRINT)

    def __call__(self, fingerprint: str, public_key_armored: str) -> TrustRoot:
        self.calls.append((fingerprint, public_key_armored))
        return self.root


def make_options(**overrides: Any) -> dict[str, Any]:
    """Return a fully valid options mapping with *overrides* applied."""
    options: dict[str, Any] = {
        "dohEndpoints": [
            "https://cloudflare-dns.com/dns-query",
            "https://dns.google/resolve",
            "https://doh-jp.blahdns.com/dns-query",
        ],
        "dnsSeeds": ["seed.modular.social.", "modularseed.xyz."],
        "dnsServers": ["1.1.1.1", "8.8.8.8"],
        "httpsSeeds": [
            "https://modularseed.xyz/seed",
            "https://raw.githubusercontent.com/modular/seed/master/seed",
        ],
        "staticSeeds": ["https://static.modular.social", "https://seed2.modular.social:8443"],
        "networkModulus": 65536,
        "sectorMapSize": 64,
        "logoSectorMapSize": 16,
        "iconSectorMapSize": 4,
        "version": 1,
        "networkIdentifier": "modular-mainnet",
        "minSectorCoverage": 3,
        "minHomeModCoverage": 0,
        "maxConcurrentRequests": 8,
        "defaultNodePriority": 0,
        "pingPriorityThreshold": -5,
        "defaultRequestPriority": 10,
        "discoveryRequestPriority": 20,
        "bootstrapRequestPriority": 30,
        "recoveryDelay": 5000,
        "defaultIgnorePeriod": 0,
        "maxPeerShare": 16,
        "queueTimeout": 30000,
        "root": {"fingerprint": FINGERPRINT, "publicKeyArmored": PUBLIC_KEY},
    }
    options.update(overrides)
    return options


@pytest.fixture
def options() -> dict[str, Any]:
    """A fully valid options mapping."""
    return make_options()


@pytest.fixture
def verifier() -> RecordingVerifier:
    return RecordingVerifier()


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> BuilderSettings:
    """Default settings, isolated from ``MODULAR_CONFIG_*`` env vars."""
    for name in ("MODULAR_CONFIG_POWER_CHECK", "MODULAR_CONFIG_VERBOSE", "MODULAR_CONFIG_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
    return BuilderSettings()


@pytest.fixture
def builder(verifier: RecordingVerifier, settings: BuilderSettings) -> ConfigurationBuilder:
    """Builder wired to the recording verifier."""
    return ConfigurationBuilder(verifier, settings=settings)
