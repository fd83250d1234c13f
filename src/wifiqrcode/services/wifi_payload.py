"""Wi-Fi payload helpers and configuration model."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from wifiqrcode.constants import AUTH_TYPES
from wifiqrcode.errors import InvalidEnumValueError, MissingRequiredFieldError


class AuthType(str, Enum):
    WEP = "WEP"
    WPA = "WPA"
    NOPASS = "nopass"


@dataclass(frozen=True)
class WifiConfig:
    ssid: str | None
    password: str | None = None
    auth_type: AuthType | str | None = None
    hidden: bool = False


def escape_tag_value(value: str | None) -> str:
    """Escape payload delimiters (backslash, semicolon, colon, comma)."""
    # Backslash goes first so the escapes added below are never re-escaped.
    return (
        (value or "")
        .replace("\\", "\\\\")
        .replace(";", "\\;")
        .replace(":", "\\:")
        .replace(",", "\\,")
    )


def encode_tag(tag: str, value: str | None, required: bool = False) -> str | None:
    """Encode a single ``<tag>:<value>`` fragment.

    Returns ``None`` when the value is empty and the tag is optional.
    Raises ``MissingRequiredFieldError`` when it is empty and required.
    """
    if not value:
        if required:
            raise MissingRequiredFieldError(tag)
        return None
    return f"{tag}:{escape_tag_value(value)}"


def parse_auth_type(value: str) -> AuthType:
    """Validate an authentication label against the supported types."""
    try:
        return AuthType(value)
    except ValueError:
        raise InvalidEnumValueError("auth type", value, AUTH_TYPES) from None


def _auth_type_value(auth_type: AuthType | str | None) -> str | None:
    if isinstance(auth_type, AuthType):
        return auth_type.value
    return auth_type


def encode_wifi_config(config: WifiConfig) -> str:
    """Build the MeCard-like ``WIFI:`` payload accepted by iOS 11+ and Android 10+.

    Fields are emitted in the order T, S, P, H. Only the SSID is required;
    a missing auth type, password or a non-hidden network simply omits the tag.
    """
    fragments = [
        encode_tag("T", _auth_type_value(config.auth_type)),
        encode_tag("S", config.ssid, required=True),
        encode_tag("P", config.password),
        encode_tag("H", "true" if config.hidden is True else ""),
    ]
    payload = ";".join(fragment for fragment in fragments if fragment is not None)
    return f"WIFI:{payload};;"
