"""Ordered field schema and the pure validation pass over it.

FIELD_RULES lists every non-root field in check order. validate_fields()
walks that list and raises on the first failure, so when several fields
are invalid only the earliest one is reported.

INVARIANT: No field is defaulted. A missing key is a type error.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from modular_config.domain.errors import ConfigurationRangeError, ConfigurationTypeError
from modular_config.domain.formats import FORMAT_LABELS, Format, matches_format
from modular_config.domain.powers import PowerCheck, check_power


@dataclass(frozen=True)
class FieldRule:
    """Validation rule for one configuration field.

    Attributes:
        name: snake_case attribute name on the validated model.
        key: camelCase key in the raw options.
        label: Human-readable name used in error messages.
        kind: ``"sequence"``, ``"integer"``, or ``"string"``.
        fmt: Element format for sequence fields.
        minimum: Inclusive lower bound for integer fields.
        power_of: Integer fields must be a power of this base.
    """

    name: str
    key: str
    label: str
    kind: str
    fmt: Format | None = None
    minimum: int | None = None
    power_of: int | None = None


def _seq(name: str, key: str, label: str, fmt: Format) -> FieldRule:
    return FieldRule(name, key, label, "sequence", fmt=fmt)


def _int(
    name: str, key: str, label: str, *, minimum: int | None = None, power_of: int | None = None
) -> FieldRule:
    return FieldRule(name, key, label, "integer", minimum=minimum, power_of=power_of)


FIELD_RULES: tuple[FieldRule, ...] = (
    _seq("doh_endpoints", "dohEndpoints", "DNS over HTTPS (DoH) endpoint", Format.HTTPS_URL),
    _seq("dns_seeds", "dnsSeeds", "DNS seed", Format.HOSTNAME),
    _seq("dns_servers", "dnsServers", "DNS server", Format.IPV4),
    _seq("https_seeds", "httpsSeeds", "HTTPS seed", Format.HTTPS_URL),
    _seq("static_seeds", "staticSeeds", "static seed", Format.HTTPS_HOST),
    _int("network_modulus", "networkModulus", "Network modulus", minimum=1, power_of=2),
    _int("sector_map_size", "sectorMapSize", "Sector map size", minimum=1, power_of=4),
    _int("logo_sector_map_size", "logoSectorMapSize", "Logo sector map size", minimum=1, power_of=4),
    _int("icon_sector_map_size", "iconSectorMapSize", "Icon sector map size", minimum=1, power_of=4),
    _int("version", "version", "Version", minimum=1),
    FieldRule("network_identifier", "networkIdentifier", "Network identifier", "string"),
    _int("min_sector_coverage", "minSectorCoverage", "Minimum sector coverage", minimum=0),
    _int("min_home_mod_coverage", "minHomeModCoverage", "Minimum home mod coverage", minimum=0),
    _int("max_concurrent_requests", "maxConcurrentRequests", "Max concurrent requests", minimum=1),
    _int("default_node_priority", "defaultNodePriority", "Default node priority"),
    _int("ping_priority_threshold", "pingPriorityThreshold", "Ping priority threshold"),
    _int("default_request_priority", "defaultRequestPriority", "Default request priority"),
    _int("discovery_request_priority", "discoveryRequestPriority", "Discovery request priority"),
    _int("bootstrap_request_priority", "bootstrapRequestPriority", "Bootstrap request priority"),
    _int("recovery_delay", "recoveryDelay", "Recovery delay", minimum=0),
    _int("default_ignore_period", "defaultIgnorePeriod", "Default ignore period", minimum=0),
    _int("max_peer_share", "maxPeerShare", "Max peer share", minimum=1),
    _int("queue_timeout", "queueTimeout", "Queue timeout", minimum=1),
)

_MISSING = object()


def read_option(options: Mapping[str, Any], key: str, name: str) -> Any:
    """Look up a raw option by camelCase *key*, falling back to snake_case *name*."""
    if key in options:
        return options[key]
    return options.get(name, _MISSING)


def _check_sequence(rule: FieldRule, value: Any) -> tuple[str, ...]:
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        msg = f"{rule.key} must be a list of strings"
        raise ConfigurationTypeError(msg, field=rule.key)
    if rule.fmt is None:
        msg = f"Sequence rule {rule.key} has no element format"
        raise ValueError(msg)
    for item in value:
        if not isinstance(item, str) or not matches_format(item, rule.fmt):
            msg = f"Invalid {rule.label}: {item!r} (expected {FORMAT_LABELS[rule.fmt]})"
            raise ConfigurationTypeError(msg, field=rule.key)
    return tuple(value)


def _check_integer(rule: FieldRule, value: Any, power_check: PowerCheck) -> int:
    # bool is an int subclass; floats (NaN included) are never accepted.
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{rule.label} must be an integer, got {type(value).__name__}"
        raise ConfigurationTypeError(msg, field=rule.key)
    if rule.minimum is not None and value < rule.minimum:
        bound = "positive" if rule.minimum == 1 else f">= {rule.minimum}"
        msg = f"{rule.label} must be {bound}, got {value}"
        raise ConfigurationRangeError(msg, field=rule.key)
    if rule.power_of is not None and not check_power(value, rule.power_of, power_check):
        msg = f"{rule.label} must be a power of {rule.power_of}, got {value}"
        raise ConfigurationRangeError(msg, field=rule.key)
    return value


def _check_string(rule: FieldRule, value: Any) -> str:
    if not isinstance(value, str):
        msg = f"{rule.label} must be a string, got {type(value).__name__}"
        raise ConfigurationTypeError(msg, field=rule.key)
    if not value:
        msg = f"{rule.label} must not be empty"
        raise ConfigurationRangeError(msg, field=rule.key)
    return value


def check_field(rule: FieldRule, value: Any, power_check: PowerCheck = PowerCheck.EXACT) -> Any:
    """Validate one raw value against *rule* and return its normalized form.

    Sequences come back as tuples; everything else is returned unchanged.

    Raises:
        ConfigurationTypeError: Missing value, wrong type, or bad format.
        ConfigurationRangeError: Out-of-policy value.
    """
    if value is _MISSING:
        msg = f"{rule.key} is required"
        raise ConfigurationTypeError(msg, field=rule.key)
    if rule.kind == "sequence":
        return _check_sequence(rule, value)
    if rule.kind == "integer":
        return _check_integer(rule, value, power_check)
    return _check_string(rule, value)


def validate_fields(
    options: Mapping[str, Any],
    *,
    power_check: PowerCheck = PowerCheck.EXACT,
) -> dict[str, Any]:
    """Validate every non-root field of *options* in schema order.

    Returns a dict keyed by snake_case field name, ready to feed into
    :class:`~modular_config.config.models.NetworkConfiguration`.
    The first failing field raises; nothing is accumulated.
    """
    validated: dict[str, Any] = {}
    for rule in FIELD_RULES:
        raw = read_option(options, rule.key, rule.name)
        validated[rule.name] = check_field(rule, raw, power_check)
    return validated
