"""QR rendering backed by qrcode, Pillow and Qt."""

from __future__ import annotations

import base64
import copy
import io
import logging
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import IO, Any, Protocol

import qrcode
from PIL import Image
from PySide6.QtGui import QPaintDevice
from PySide6.QtWidgets import QLabel
from qrcode.constants import ERROR_CORRECT_H, ERROR_CORRECT_L, ERROR_CORRECT_M, ERROR_CORRECT_Q
from qrcode.image.pil import PilImage
from qrcode.image.svg import SvgPathImage

from wifiqrcode.constants import (
    DATA_URL_MIME_TYPES,
    DEFAULT_OUTPUT_TYPE,
    DEFAULT_QR_DARK_COLOR,
    DEFAULT_QR_ERROR_CORRECTION,
    DEFAULT_QR_LIGHT_COLOR,
    DEFAULT_QR_MARGIN,
    DEFAULT_QR_SCALE,
    ERROR_CORRECTION_LEVELS,
    EXTENSION_OUTPUT_TYPES,
    OUTPUT_TYPES,
)
from wifiqrcode.errors import InvalidEnumValueError
from wifiqrcode.services.export_service import paint_qr_image, show_qr_image

logger = logging.getLogger(__name__)

_ERROR_CORRECTION = {
    "L": ERROR_CORRECT_L,
    "M": ERROR_CORRECT_M,
    "Q": ERROR_CORRECT_Q,
    "H": ERROR_CORRECT_H,
}


class OutputType(str, Enum):
    PNG = "png"
    SVG = "svg"
    UTF8 = "utf8"


@dataclass(frozen=True)
class QrOptions:
    error_correction: str = DEFAULT_QR_ERROR_CORRECTION
    version: int | None = None  # None picks the smallest version that fits


@dataclass(frozen=True)
class RenderOptions:
    output_type: OutputType | None = None
    width: int | None = None
    margin: int = DEFAULT_QR_MARGIN
    scale: int = DEFAULT_QR_SCALE
    dark: str = DEFAULT_QR_DARK_COLOR
    light: str = DEFAULT_QR_LIGHT_COLOR


class QrRenderer(Protocol):
    """Interface for building QR codes and writing them to a destination."""

    def create(self, text: str, options: QrOptions | None = None) -> Any:
        """Build an in-memory QR code for ``text``."""
        ...

    def write_to_file(self, path: str | Path, code: Any, options: RenderOptions | None = None) -> None:
        """Render ``code`` into the file at ``path``."""
        ...

    def write_to_stream(self, stream: IO[bytes], code: Any, options: RenderOptions | None = None) -> None:
        """Render ``code`` into a binary stream."""
        ...

    def to_data_url(self, code: Any, options: RenderOptions | None = None) -> str:
        """Render ``code`` as a base64 data URL."""
        ...

    def write_to_canvas(self, canvas: Any, code: Any, options: RenderOptions | None = None) -> None:
        """Paint ``code`` onto a canvas."""
        ...


def parse_output_type(value: str) -> OutputType:
    """Validate an output label against the supported output types."""
    try:
        return OutputType(value)
    except ValueError:
        raise InvalidEnumValueError("output type", value, OUTPUT_TYPES) from None


def parse_error_correction(value: str) -> str:
    """Validate an error correction level (L, M, Q or H)."""
    if value not in ERROR_CORRECTION_LEVELS:
        raise InvalidEnumValueError("error correction level", value, ERROR_CORRECTION_LEVELS)
    return value


def _output_type(options: RenderOptions) -> OutputType:
    return OutputType(options.output_type or DEFAULT_OUTPUT_TYPE)


def guess_output_type(path: str | Path) -> OutputType:
    """Guess the output type from a file extension, defaulting to PNG."""
    suffix = Path(path).suffix.lower()
    return OutputType(EXTENSION_OUTPUT_TYPES.get(suffix, DEFAULT_OUTPUT_TYPE))


class QrcodeRenderer:
    """``QrRenderer`` built on the qrcode library."""

    def create(self, text: str, options: QrOptions | None = None) -> qrcode.QRCode:
        options = options or QrOptions()
        level = parse_error_correction(options.error_correction)
        code = qrcode.QRCode(
            version=options.version,
            error_correction=_ERROR_CORRECTION[level],
            box_size=DEFAULT_QR_SCALE,
            border=DEFAULT_QR_MARGIN,
        )
        code.add_data(text)
        code.make(fit=options.version is None)
        logger.debug(
            "Built QR code version %s with error correction %s", code.version, level
        )
        return code

    def _fitted_width(self, code: qrcode.QRCode, options: RenderOptions) -> int | None:
        """Return ``options.width`` if it leaves at least one pixel per module, else ``None``."""
        if options.width and options.width >= code.modules_count + 2 * options.margin:
            return options.width
        return None

    def _sized(self, code: qrcode.QRCode, options: RenderOptions) -> qrcode.QRCode:
        """Return a copy of ``code`` carrying the margin and module size to render at."""
        sized = copy.copy(code)
        sized.border = options.margin
        width = self._fitted_width(code, options)
        if width:
            sized.box_size = width // (code.modules_count + 2 * options.margin)
        else:
            sized.box_size = options.scale
        return sized

    def render_image(self, code: qrcode.QRCode, options: RenderOptions | None = None) -> Image.Image:
        """Render ``code`` as an RGB Pillow image.

        A ``width`` too small to hold the symbol is ignored in favour of ``scale``.
        """
        options = options or RenderOptions()
        image_factory = self._sized(code, options).make_image(
            image_factory=PilImage,
            fill_color=options.dark,
            back_color=options.light,
        )
        image: Image.Image = image_factory.get_image().convert("RGB")

        width = self._fitted_width(code, options)
        if width and image.size != (width, width):
            image = image.resize((width, width), Image.Resampling.NEAREST)

        return image

    def render_svg(self, code: qrcode.QRCode, options: RenderOptions | None = None) -> bytes:
        """Render ``code`` as an SVG document sized in pixels."""
        options = options or RenderOptions()
        sized = self._sized(code, options)
        image = sized.make_image(image_factory=SvgPathImage)
        pixels = self._fitted_width(code, options) or sized.box_size * (
            code.modules_count + 2 * options.margin
        )
        # The viewBox keeps the library's units, so only the outer size changes.
        root = image.get_image()
        root.set("width", str(pixels))
        root.set("height", str(pixels))
        buffer = io.BytesIO()
        image.save(buffer)
        return buffer.getvalue()

    def render_text(self, code: qrcode.QRCode, options: RenderOptions | None = None) -> str:
        """Render ``code`` as half-block text art."""
        options = options or RenderOptions()
        buffer = io.StringIO()
        self._sized(code, options).print_ascii(out=buffer)
        return buffer.getvalue()

    def render_bytes(self, code: qrcode.QRCode, options: RenderOptions | None = None) -> bytes:
        """Render ``code`` in ``options.output_type`` (PNG when unset)."""
        options = options or RenderOptions()
        output_type = _output_type(options)
        if output_type is OutputType.SVG:
            return self.render_svg(code, options)
        if output_type is OutputType.UTF8:
            return self.render_text(code, options).encode("utf-8")

        buffer = io.BytesIO()
        self.render_image(code, options).save(buffer, format="PNG")
        return buffer.getvalue()

    def write_to_file(
        self, path: str | Path, code: qrcode.QRCode, options: RenderOptions | None = None
    ) -> None:
        options = options or RenderOptions()
        if options.output_type is None:
            options = replace(options, output_type=guess_output_type(path))
        logger.debug("Writing %s QR code to %s", _output_type(options).value, path)
        Path(path).write_bytes(self.render_bytes(code, options))

    def write_to_stream(
        self, stream: IO[bytes], code: qrcode.QRCode, options: RenderOptions | None = None
    ) -> None:
        data = self.render_bytes(code, options)
        logger.debug("Writing %d bytes of QR code to stream", len(data))
        stream.write(data)

    def to_data_url(self, code: qrcode.QRCode, options: RenderOptions | None = None) -> str:
        options = options or RenderOptions()
        output_type = _output_type(options)
        if output_type.value not in DATA_URL_MIME_TYPES:
            raise ValueError(f"Data URLs cannot be rendered as {output_type.value}.")
        encoded = base64.b64encode(self.render_bytes(code, options)).decode("ascii")
        return f"data:{DATA_URL_MIME_TYPES[output_type.value]};base64,{encoded}"

    def write_to_canvas(
        self, canvas: QPaintDevice | QLabel, code: qrcode.QRCode, options: RenderOptions | None = None
    ) -> None:
        """Show ``code`` on a label, or paint it scaled to fill an image or pixmap.

        Widgets other than ``QLabel`` can only be painted from their own
        ``paintEvent``; render into a ``QImage`` there instead.
        """
        image = self.render_image(code, options)
        if isinstance(canvas, QLabel):
            logger.debug("Setting QR code pixmap on label")
            show_qr_image(canvas, image)
            return

        logger.debug("Painting QR code onto %dx%d canvas", canvas.width(), canvas.height())
        paint_qr_image(canvas, image)
