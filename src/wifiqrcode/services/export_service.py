"""Qt canvas targets for rendered QR images."""

from __future__ import annotations

from PIL import Image
from PySide6.QtCore import QRect
from PySide6.QtGui import QImage, QPainter, QPaintDevice, QPixmap
from PySide6.QtWidgets import QLabel


def qr_image_to_qimage(image: Image.Image) -> QImage:
    """Copy a rendered QR image into a QImage that owns its pixels."""
    rgb = image if image.mode == "RGB" else image.convert("RGB")
    width, height = rgb.size
    # Pillow packs RGB rows tightly; Qt assumes 32-bit aligned scanlines unless told otherwise.
    view = QImage(rgb.tobytes("raw", "RGB"), width, height, width * 3, QImage.Format.Format_RGB888)
    return view.copy()


def show_qr_image(label: QLabel, image: Image.Image) -> None:
    """Display a QR image on a label at its rendered size."""
    label.setPixmap(QPixmap.fromImage(qr_image_to_qimage(image)))


def paint_qr_image(device: QPaintDevice, image: Image.Image) -> None:
    """Paint a QR image stretched over the whole paint device without smoothing."""
    painter = QPainter(device)
    try:
        painter.drawImage(QRect(0, 0, device.width(), device.height()), qr_image_to_qimage(image))
    finally:
        painter.end()
