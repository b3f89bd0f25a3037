"""Trust-root verifier contract.

The builder never does cryptographic work itself. It calls an injected
verifier with the fingerprint and armored public key from the options and
stores whatever comes back as the opaque ``root`` of the configuration.
"""

from __future__ import annotations

from collections.abc import Awaitable
from typing import Any, Protocol


class TrustRootVerifier(Protocol):
    """Callable that turns a fingerprint/key pair into a trust root.

    Implementations may be plain functions or coroutine functions. They
    raise to reject the pair.
    """

    def __call__(self, fingerprint: str, public_key_armored: str) -> Any | Awaitable[Any]: ...
