"""iwd configuration rendering tests."""

import configparser

from netctl2iwd.services.iwd_config import build_iwd_config, render_iwd_config
from netctl2iwd.services.network import Network, Open, Password, PreSharedKey, RawKey
from netctl2iwd.services.psk import compute_psk


def test_render_open_network_is_empty() -> None:
    """Ensure open networks emit no security section."""
    network = Network(ssid="Guest", security=Open())
    assert build_iwd_config(network).sections() == []
    assert render_iwd_config(network) == ""


def test_render_raw_key_verbatim() -> None:
    """Ensure raw keys are written unchanged as the pre-shared key."""
    network = Network(ssid="Office", security=PreSharedKey(RawKey("not-even-hex")))
    assert render_iwd_config(network) == "[Security]\nPreSharedKey=not-even-hex\n\n"


def test_render_passphrase_writes_both_fields() -> None:
    """Ensure passphrase networks carry the passphrase and its derived key."""
    network = Network(
        ssid="foo_network", security=PreSharedKey(Password("bar_password"))
    )
    content = render_iwd_config(network)

    parsed = configparser.ConfigParser(interpolation=None)
    parsed.optionxform = str  # type: ignore[assignment]
    parsed.read_string(content)
    assert list(parsed["Security"]) == ["Passphrase", "PreSharedKey"]
    assert parsed["Security"]["Passphrase"] == "bar_password"
    assert (
        parsed["Security"]["PreSharedKey"]
        == compute_psk(b"foo_network", b"bar_password").hex()
    )


def test_render_passphrase_is_reproducible() -> None:
    """Ensure rendering the same network twice yields identical content."""
    network = Network(ssid="Café", security=PreSharedKey(Password("100% secret")))
    content = render_iwd_config(network)
    assert content == render_iwd_config(network)
    assert content.startswith("[Security]\nPassphrase=100% secret\nPreSharedKey=")
