"""iwd network file generation."""

from __future__ import annotations

import configparser
import io

from netctl2iwd.constants import (
    PASSPHRASE_FIELD,
    PRESHARED_KEY_FIELD,
    SECURITY_SECTION,
)
from netctl2iwd.services.network import Network, Password, PreSharedKey
from netctl2iwd.services.psk import compute_psk


def _security_fields(network: Network) -> dict[str, str]:
    """Map a network's security to iwd ``[Security]`` fields."""
    security = network.security
    if not isinstance(security, PreSharedKey):
        return {}

    psk = security.psk
    if isinstance(psk, Password):
        derived = compute_psk(
            network.ssid.encode("utf-8"), psk.passphrase.encode("utf-8")
        )
        return {
            PASSPHRASE_FIELD: psk.passphrase,
            PRESHARED_KEY_FIELD: derived.hex(),
        }
    return {PRESHARED_KEY_FIELD: psk.key}


def build_iwd_config(network: Network) -> configparser.ConfigParser:
    """Build the iwd configuration for a network."""
    config = configparser.ConfigParser(interpolation=None)
    config.optionxform = str  # type: ignore[assignment]

    fields = _security_fields(network)
    if fields:
        config[SECURITY_SECTION] = fields
    return config


def render_iwd_config(network: Network) -> str:
    """Render iwd configuration content for a network."""
    buffer = io.StringIO()
    build_iwd_config(network).write(buffer, space_around_delimiters=False)
    return buffer.getvalue()
