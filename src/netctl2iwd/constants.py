"""Application-wide constants."""

from __future__ import annotations

import string

# Default install location of iwd network files
DEFAULT_OUTPUT_DIR = "/var/lib/iwd"

# Netctl Profile Variables
CONNECTION_VARIABLE = "Connection"
ESSID_VARIABLE = "ESSID"
SECURITY_VARIABLE = "Security"
KEY_VARIABLE = "Key"

WIRELESS_CONNECTION = "wireless"
DEFAULT_SECURITY = "none"

# Netctl Security Values
OPEN_SECURITY = "none"
PSK_SECURITY = "wpa"

# Marks a raw (already encoded) value under netctl's special quoting rules
RAW_VALUE_MARKER = '"'

# iwd File Naming
# Matches iwd's storage naming: anything else is hex-encoded with a leading "=".
SAFE_SSID_CHARACTERS = frozenset(string.ascii_letters + string.digits + "-_ ")
HEX_NAME_PREFIX = "="
OPEN_SUFFIX = ".open"
PSK_SUFFIX = ".psk"

# iwd Config Layout
SECURITY_SECTION = "Security"
PASSPHRASE_FIELD = "Passphrase"
PRESHARED_KEY_FIELD = "PreSharedKey"

# WPA-PSK Key Derivation (IEEE 802.11i)
PSK_HASH_NAME = "sha1"
PSK_ITERATIONS = 4096
PSK_LENGTH = 32

# Output Files
OUTPUT_FILE_MODE = 0o600
