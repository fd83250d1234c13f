"""Wi-Fi QR code creation and output."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import IO, Any

from wifiqrcode.services.qr_renderer import QrcodeRenderer, QrOptions, QrRenderer, RenderOptions
from wifiqrcode.services.wifi_payload import WifiConfig, encode_wifi_config

logger = logging.getLogger(__name__)


class WifiQRCode:
    """An encoded Wi-Fi network QR code, ready to be written out.

    Every output method hands the wrapped code straight to the renderer.
    Renderer and file-system errors propagate unchanged. Writing to a
    destination that already has content overwrites or appends according
    to the destination, not to this class.
    """

    def __init__(self, code: Any, renderer: QrRenderer) -> None:
        self._code = code
        self._renderer = renderer

    @property
    def code(self) -> Any:
        """The renderer's in-memory QR code."""
        return self._code

    @property
    def segments(self) -> list[Any]:
        """Data segments encoded in the QR code."""
        return list(getattr(self._code, "data_list", []))

    async def to_file(self, path: str | Path, options: RenderOptions | None = None) -> None:
        """Write the QR code to ``path``; the type is guessed from the extension if unset."""
        await asyncio.to_thread(self._renderer.write_to_file, path, self._code, options)

    async def to_file_stream(self, stream: IO[bytes], options: RenderOptions | None = None) -> None:
        """Write the QR code to a binary stream (PNG unless another type is set)."""
        await asyncio.to_thread(self._renderer.write_to_stream, stream, self._code, options)

    async def to_data_url(self, options: RenderOptions | None = None) -> str:
        """Return the QR code as a base64 ``data:`` URL."""
        return await asyncio.to_thread(self._renderer.to_data_url, self._code, options)

    async def to_canvas(self, canvas: Any, options: RenderOptions | None = None) -> None:
        """Draw the QR code on a Qt canvas.

        Runs on the calling thread since Qt paint devices belong to the GUI thread.
        """
        self._renderer.write_to_canvas(canvas, self._code, options)


def create_qr_code(
    config: WifiConfig,
    qr_options: QrOptions | None = None,
    renderer: QrRenderer | None = None,
) -> WifiQRCode:
    """Encode ``config`` and build its QR code."""
    payload = encode_wifi_config(config)
    renderer = renderer or QrcodeRenderer()
    logger.debug("Creating QR code for SSID %r", config.ssid)
    return WifiQRCode(renderer.create(payload, qr_options), renderer)
