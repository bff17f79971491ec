"""WPA pre-shared key derivation."""

from __future__ import annotations

import hashlib

from netctl2iwd.constants import PSK_HASH_NAME, PSK_ITERATIONS, PSK_LENGTH


def compute_psk(ssid: bytes, passphrase: bytes) -> bytes:
    """Derive the 32-byte WPA-PSK from an SSID and passphrase.

    PBKDF2-HMAC-SHA1 with the SSID as salt and 4096 iterations, as defined by
    IEEE 802.11i and implemented by ``wpa_passphrase``.
    """
    return hashlib.pbkdf2_hmac(
        PSK_HASH_NAME, passphrase, ssid, PSK_ITERATIONS, PSK_LENGTH
    )
