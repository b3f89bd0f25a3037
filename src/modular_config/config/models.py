"""Pydantic models for the validated network configuration.

NetworkConfiguration is the only value the builder hands out. It is frozen
and stores sequences as tuples, so once constructed nothing about it can
change. Attribute names are snake_case; ``to_options()`` and the field
aliases use the camelCase keys of the raw options.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

PositiveInt = Annotated[int, Field(gt=0)]
NonNegativeInt = Annotated[int, Field(ge=0)]


class TrustRootOptions(BaseModel):
    """The raw ``root`` entry of the options, before verification."""

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    fingerprint: Annotated[str, Field(min_length=1)]
    public_key_armored: Annotated[str, Field(min_length=1)]


class NetworkConfiguration(BaseModel):
    """Validated, immutable network configuration.

    Build instances through :class:`~modular_config.services.builder.ConfigurationBuilder`;
    the field constraints here mirror the builder's checks but do not
    cover formats or power-of-N sizes.
    """

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    doh_endpoints: tuple[str, ...]
    dns_seeds: tuple[str, ...]
    dns_servers: tuple[str, ...]
    https_seeds: tuple[str, ...]
    static_seeds: tuple[str, ...]
    network_modulus: PositiveInt
    sector_map_size: PositiveInt
    logo_sector_map_size: PositiveInt
    icon_sector_map_size: PositiveInt
    version: PositiveInt
    network_identifier: Annotated[str, Field(min_length=1)]
    min_sector_coverage: NonNegativeInt
    min_home_mod_coverage: NonNegativeInt
    max_concurrent_requests: PositiveInt
    default_node_priority: int
    ping_priority_threshold: int
    default_request_priority: int
    discovery_request_priority: int
    bootstrap_request_priority: int
    recovery_delay: NonNegativeInt
    default_ignore_period: NonNegativeInt
    max_peer_share: PositiveInt
    queue_timeout: PositiveInt
    root: Any

    @field_validator("root")
    @classmethod
    def _root_present(cls, value: Any) -> Any:
        if value is None:
            msg = "root must not be None"
            raise ValueError(msg)
        return value

    def to_options(self) -> dict[str, Any]:
        """Return the camelCase options mapping for this configuration.

        Sequences come back as fresh lists, so the result can be edited
        and passed to the builder again. ``root`` is the verified trust
        root itself, not its fingerprint/key pair.
        """
        options: dict[str, Any] = {}
        for name, info in type(self).model_fields.items():
            value = getattr(self, name)
            options[info.alias or name] = list(value) if isinstance(value, tuple) else value
        return options
