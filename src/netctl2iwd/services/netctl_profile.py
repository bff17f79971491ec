"""Netctl profile parsing."""

from __future__ import annotations

import configparser
import re
from collections.abc import Mapping
from typing import BinaryIO

from netctl2iwd.constants import (
    CONNECTION_VARIABLE,
    DEFAULT_SECURITY,
    ESSID_VARIABLE,
    KEY_VARIABLE,
    OPEN_SECURITY,
    PSK_SECURITY,
    RAW_VALUE_MARKER,
    SECURITY_VARIABLE,
    WIRELESS_CONNECTION,
)
from netctl2iwd.services.errors import (
    MissingKeysError,
    MissingSSIDError,
    NotWirelessError,
    ProfileParseError,
    UnsupportedSecurityError,
)
from netctl2iwd.services.network import (
    Network,
    Open,
    Password,
    PreSharedKey,
    RawKey,
    Security,
)

# Netctl profiles are flat shell assignments; configparser needs a section header.
_PROFILE_SECTION = "profile"
_ESCAPE_PATTERN = re.compile(r"\\(.)")
_DOUBLE_QUOTED_PATTERN = re.compile(r'"(?:[^"\\]|\\.)*"')


def _unquote(value: str) -> str:
    """Resolve shell-style quoting of a single assignment value."""
    if len(value) >= 2 and value[0] == value[-1] == "'":
        # Single quotes are literal, no escapes apply inside them.
        return value[1:-1]
    # Only an unescaped final quote closes a double-quoted value.
    if _DOUBLE_QUOTED_PATTERN.fullmatch(value):
        value = value[1:-1]
    return _ESCAPE_PATTERN.sub(lambda match: match.group(1), value)


def read_profile(stream: BinaryIO) -> dict[str, str]:
    """Read a netctl profile into a flat key/value mapping."""
    try:
        text = stream.read().decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ProfileParseError(str(exc)) from exc

    parser = configparser.ConfigParser(
        interpolation=None,
        delimiters=("=",),
        comment_prefixes=("#", ";"),
        empty_lines_in_values=False,
    )
    parser.optionxform = str  # type: ignore[assignment]
    try:
        parser.read_string(f"[{_PROFILE_SECTION}]\n{text}")
    except configparser.Error as exc:
        raise ProfileParseError(exc.message) from exc

    return {key: _unquote(value) for key, value in parser.items(_PROFILE_SECTION)}


def get_quoted_string(values: Mapping[str, str], key: str) -> tuple[str, bool]:
    """Get a value according to the netctl special quoting rules.

    A leading double quote marks the value as raw (for example a hex key): the
    marker is dropped and the value is reported as not quoted. Any other value
    is plain text typed by the user and is reported as quoted.
    """
    try:
        contents = values[key]
    except KeyError:
        raise MissingKeysError() from None

    if contents.startswith(RAW_VALUE_MARKER):
        return contents[1:], False
    return contents, True


def _parse_security(values: Mapping[str, str]) -> Security:
    security = values.get(SECURITY_VARIABLE, DEFAULT_SECURITY)
    if security == OPEN_SECURITY:
        return Open()
    if security == PSK_SECURITY:
        key, quoted = get_quoted_string(values, KEY_VARIABLE)
        return PreSharedKey(Password(key) if quoted else RawKey(key))
    raise UnsupportedSecurityError()


def network_from_profile(values: Mapping[str, str]) -> Network:
    """Build a network from parsed profile values.

    ``Connection`` is checked first so non-wireless profiles always report
    NotWireless, whatever else is wrong with them.
    """
    if values.get(CONNECTION_VARIABLE) != WIRELESS_CONNECTION:
        raise NotWirelessError()

    security = _parse_security(values)

    ssid = values.get(ESSID_VARIABLE)
    if not ssid:
        raise MissingSSIDError()
    return Network(ssid=ssid, security=security)


def parse_network(stream: BinaryIO) -> Network:
    """Parse a netctl profile stream into a network."""
    return network_from_profile(read_profile(stream))
