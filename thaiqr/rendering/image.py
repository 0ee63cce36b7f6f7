from __future__ import annotations

import base64
import functools
import io
from typing import Callable

import qrcode
from qrcode.image.pil import PilImage

ERROR_CORRECTION_LEVELS: dict[str, int] = {
    "L": qrcode.constants.ERROR_CORRECT_L,
    "M": qrcode.constants.ERROR_CORRECT_M,
    "Q": qrcode.constants.ERROR_CORRECT_Q,
    "H": qrcode.constants.ERROR_CORRECT_H,
}


def render_png(qr_string: str, box_size: int = 10, border: int = 2, error_correction: str = "M") -> bytes:
    """
    Render a payload as a black-on-white PNG QR symbol.

    Args:
        qr_string: The payload text to encode.
        box_size: Pixels per module.
        border: Quiet-zone width in modules.
        error_correction: One of ``L``, ``M``, ``Q``, ``H``.

    Returns:
        The PNG file bytes.
    """
    level = ERROR_CORRECTION_LEVELS.get(error_correction.upper())
    if level is None:
        raise ValueError(f"Unknown error correction level: {error_correction!r}")
    qr = qrcode.QRCode(
        version=None,
        error_correction=level,
        box_size=box_size,
        border=border,
        image_factory=PilImage,
    )
    qr.add_data(qr_string)
    qr.make(fit=True)
    img = qr.make_image(fill_color="black", back_color="white")
    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()


def render_data_url(qr_string: str, box_size: int = 10, border: int = 2, error_correction: str = "M") -> str:
    png = render_png(qr_string, box_size=box_size, border=border, error_correction=error_correction)
    return "data:image/png;base64," + base64.b64encode(png).decode("ascii")


def make_renderer(box_size: int = 10, border: int = 2, error_correction: str = "M") -> Callable[[str], str]:
    """Bind rendering options, returning a ``qr_string -> data URL`` callable."""
    return functools.partial(
        render_data_url,
        box_size=box_size,
        border=border,
        error_correction=error_correction,
    )
