"""Network model and iwd file naming."""

from __future__ import annotations

from dataclasses import dataclass

from netctl2iwd.constants import (
    HEX_NAME_PREFIX,
    OPEN_SUFFIX,
    PSK_SUFFIX,
    SAFE_SSID_CHARACTERS,
)


@dataclass(frozen=True)
class Password:
    """A human passphrase; the pre-shared key still has to be derived."""

    passphrase: str


@dataclass(frozen=True)
class RawKey:
    """An already derived, hex-encoded pre-shared key."""

    key: str


PSKSecurity = Password | RawKey


@dataclass(frozen=True)
class Open:
    pass


@dataclass(frozen=True)
class PreSharedKey:
    psk: PSKSecurity


Security = Open | PreSharedKey


@dataclass(frozen=True)
class Network:
    ssid: str
    security: Security


def is_safe_ssid(ssid: str) -> bool:
    """Return True when the SSID can be used as a file name unchanged."""
    return all(char in SAFE_SSID_CHARACTERS for char in ssid)


def security_suffix(security: Security) -> str:
    """Map a security variant to the iwd file extension."""
    if isinstance(security, PreSharedKey):
        return PSK_SUFFIX
    return OPEN_SUFFIX


def iwd_file_name(network: Network) -> str:
    """Build the iwd file name for a network.

    Readable SSIDs are used verbatim; anything else becomes ``=`` followed by
    the lowercase hex encoding of the UTF-8 SSID bytes.
    """
    if is_safe_ssid(network.ssid):
        base = network.ssid
    else:
        base = HEX_NAME_PREFIX + network.ssid.encode("utf-8").hex()
    return base + security_suffix(network.security)
