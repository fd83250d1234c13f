"""Payload construction tests."""

import pytest

from wifiqrcode.errors import InvalidEnumValueError, MissingRequiredFieldError
from wifiqrcode.services.wifi_payload import (
    AuthType,
    WifiConfig,
    encode_tag,
    encode_wifi_config,
    escape_tag_value,
    parse_auth_type,
)


def test_encode_various_tags() -> None:
    """Ensure type, SSID and password tags are encoded in order."""
    config = WifiConfig(ssid="test ssid", password="pass", auth_type="WPA", hidden=False)
    assert encode_wifi_config(config) == "WIFI:T:WPA;S:test ssid;P:pass;;"


def test_encode_hidden_network() -> None:
    """Ensure hidden networks include H:true."""
    config = WifiConfig(ssid="test ssid", password="pass", auth_type="WPA", hidden=True)
    assert encode_wifi_config(config) == "WIFI:T:WPA;S:test ssid;P:pass;H:true;;"


def test_encode_minimal_config() -> None:
    """Ensure an SSID-only config keeps the trailing double semicolon."""
    assert encode_wifi_config(WifiConfig(ssid="test ssid")) == "WIFI:S:test ssid;;"


def test_encode_omits_empty_optional_tags() -> None:
    """Ensure an empty password is omitted rather than rejected."""
    config = WifiConfig(ssid="test ssid", password="", auth_type="WPA")
    assert encode_wifi_config(config) == "WIFI:T:WPA;S:test ssid;;"


def test_encode_escapes_special_characters() -> None:
    """Ensure backslash, semicolon, colon and comma are escaped."""
    config = WifiConfig(
        ssid="test,ssid",
        password="weird;password\\with:special,characters",
        auth_type="WPA",
    )
    assert encode_wifi_config(config) == (
        "WIFI:T:WPA;S:test\\,ssid;P:weird\\;password\\\\with\\:special\\,characters;;"
    )


def test_encode_auth_type_enum() -> None:
    """Ensure enum auth types encode by value."""
    config = WifiConfig(ssid="Guest", auth_type=AuthType.NOPASS)
    assert encode_wifi_config(config) == "WIFI:T:nopass;S:Guest;;"


@pytest.mark.parametrize("ssid", ["", None])
def test_encode_requires_ssid(ssid: str | None) -> None:
    """Ensure a missing SSID raises and names the S tag."""
    with pytest.raises(MissingRequiredFieldError, match=r"Tag S requires a value") as excinfo:
        encode_wifi_config(WifiConfig(ssid=ssid))
    assert excinfo.value.tag == "S"


def test_encode_missing_auth_type_is_not_an_error() -> None:
    """Ensure a missing auth type silently omits the T tag."""
    config = WifiConfig(ssid="Office", password="secret", auth_type=None)
    assert encode_wifi_config(config) == "WIFI:S:Office;P:secret;;"


def test_hidden_false_never_emits_tag() -> None:
    """Ensure a visible network never produces an H fragment."""
    payload = encode_wifi_config(WifiConfig(ssid="Office", hidden=False))
    assert "H:" not in payload


def test_only_boolean_true_marks_hidden() -> None:
    """Ensure truthy non-boolean hidden values do not emit H:true."""
    config = WifiConfig(ssid="Office", hidden="yes")  # type: ignore[arg-type]
    assert encode_wifi_config(config) == "WIFI:S:Office;;"


def test_encode_is_deterministic() -> None:
    """Ensure encoding the same config twice gives the same payload."""
    config = WifiConfig(ssid="a;b", password="c:d", auth_type="WEP", hidden=True)
    assert encode_wifi_config(config) == encode_wifi_config(config)


@pytest.mark.parametrize(
    ("raw", "escaped"),
    [
        ("\\", "\\\\"),
        (";", "\\;"),
        (":", "\\:"),
        (",", "\\,"),
        ("\\;", "\\\\\\;"),
        ("plain text", "plain text"),
        ("", ""),
        (None, ""),
    ],
)
def test_escape_tag_value(raw: str | None, escaped: str) -> None:
    """Ensure each special character is prefixed exactly once."""
    assert escape_tag_value(raw) == escaped


def test_encode_tag() -> None:
    """Ensure optional tags are dropped and required tags enforced."""
    assert encode_tag("P", "pw") == "P:pw"
    assert encode_tag("P", "") is None
    assert encode_tag("P", None) is None
    with pytest.raises(MissingRequiredFieldError):
        encode_tag("S", "", required=True)


def test_parse_auth_type() -> None:
    """Ensure auth labels map to the closed set of types."""
    assert parse_auth_type("WPA") is AuthType.WPA
    assert parse_auth_type("nopass") is AuthType.NOPASS
    with pytest.raises(InvalidEnumValueError, match=r'"WPA3" is not a valid auth type'):
        parse_auth_type("WPA3")
