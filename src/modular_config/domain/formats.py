"""Format patterns for the list-valued bootstrap fields.

Patterns are lowercase-only and are applied with ``fullmatch`` so a
trailing newline never sneaks past an end anchor. URL paths stop at line
terminators (CR, LF, U+2028, U+2029).

DNS server addresses are checked for dotted-quad *shape* only; octets are
not bounded to 0-255, so ``999.999.999.999`` passes.
"""

from __future__ import annotations

import re
from enum import StrEnum

_HOST = r"[a-z0-9]+(?:[-.][a-z0-9]+)*\.[a-z]{2,}"
_PORT = r"(?::[0-9]{1,5})?"
# Any path characters except line terminators.
_PATH = r"[^\r\n\u2028\u2029]*"


class Format(StrEnum):
    """String shapes accepted by the sequence fields."""

    HTTPS_URL = "https_url"
    HOSTNAME = "hostname"
    IPV4 = "ipv4"
    HTTPS_HOST = "https_host"


FORMAT_PATTERNS: dict[Format, re.Pattern[str]] = {
    Format.HTTPS_URL: re.compile(rf"https://{_HOST}{_PORT}(?:/{_PATH})?"),
    Format.HOSTNAME: re.compile(r"[a-z0-9]+(?:-[a-z0-9]+)*(?:\.[a-z0-9]+(?:-[a-z0-9]+)*)+\.?"),
    Format.IPV4: re.compile(r"[0-9]{1,3}(?:\.[0-9]{1,3}){3}"),
    Format.HTTPS_HOST: re.compile(rf"https://{_HOST}{_PORT}/?"),
}

FORMAT_LABELS: dict[Format, str] = {
    Format.HTTPS_URL: "HTTPS URL",
    Format.HOSTNAME: "hostname",
    Format.IPV4: "IPv4 address",
    Format.HTTPS_HOST: "HTTPS host",
}


def matches_format(value: str, fmt: Format) -> bool:
    """Check whether the whole of *value* has the shape named by *fmt*."""
    return FORMAT_PATTERNS[fmt].fullmatch(value) is not None
