"""Pluggy hook specifications for modular-config.

One hook: trust-root verification. The first plugin that returns a
non-None result wins, so a host application registers exactly one
verifier and the builder never sees more than one answer.
"""

from __future__ import annotations

from typing import Any

import pluggy

PROJECT_NAME = "modular_config"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class ModularConfigHookSpec:
    """Hook specifications for the modular-config plugin system."""

    @hookspec(firstresult=True)
    def verify_trust_root(self, fingerprint: str, public_key_armored: str) -> Any:
        """Verify a fingerprint/public-key pair and return the trust root.

        May return the trust root itself or an awaitable resolving to it.
        Raise to reject the pair.
        """
