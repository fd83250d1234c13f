"""Application-wide constants."""

from __future__ import annotations

# QR Code Generation Defaults
DEFAULT_QR_ERROR_CORRECTION = "M"
DEFAULT_QR_MARGIN = 4  # Quiet zone, in modules
DEFAULT_QR_SCALE = 4  # Pixels per module
DEFAULT_QR_DARK_COLOR = "#000000"
DEFAULT_QR_LIGHT_COLOR = "#ffffff"

# Authentication Types
NOPASS_AUTH_TYPE = "nopass"
AUTH_TYPES = ("WPA", "WEP", NOPASS_AUTH_TYPE)
DEFAULT_AUTH_TYPE = NOPASS_AUTH_TYPE

# Output Types
OUTPUT_TYPES = ("png", "svg", "utf8")
DEFAULT_OUTPUT_TYPE = "png"

# Output type guessed from a file extension
EXTENSION_OUTPUT_TYPES = {
    ".png": "png",
    ".svg": "svg",
    ".txt": "utf8",
}

# Data URL MIME types
DATA_URL_MIME_TYPES = {
    "png": "image/png",
    "svg": "image/svg+xml",
}

# Error Correction Levels
ERROR_CORRECTION_LEVELS = ("L", "M", "Q", "H")
