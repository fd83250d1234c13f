"""Error types raised while encoding and emitting Wi-Fi QR codes."""

from __future__ import annotations

from collections.abc import Iterable


class WifiQRCodeError(ValueError):
    """Base class for invalid Wi-Fi QR input."""


class MissingRequiredFieldError(WifiQRCodeError):
    """A required payload tag has no value."""

    def __init__(self, tag: str) -> None:
        super().__init__(f"Tag {tag} requires a value")
        self.tag = tag


class InvalidEnumValueError(WifiQRCodeError):
    """A value falls outside its closed set of allowed values."""

    def __init__(self, kind: str, value: str, allowed: Iterable[str]) -> None:
        self.kind = kind
        self.value = value
        self.allowed = tuple(allowed)
        super().__init__(
            f'"{value}" is not a valid {kind}; must be one of [{",".join(self.allowed)}]'
        )


class MissingPasswordError(WifiQRCodeError):
    """An authenticated network was requested without a password."""

    def __init__(self, auth_type: str) -> None:
        super().__init__(f'A password is required when auth type is "{auth_type}"')
        self.auth_type = auth_type
