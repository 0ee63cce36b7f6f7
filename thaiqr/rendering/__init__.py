"""
QR symbol rendering for generated payloads, backed by the ``qrcode`` library.
"""
from thaiqr.rendering.image import make_renderer, render_data_url, render_png, ERROR_CORRECTION_LEVELS

__all__ = ["make_renderer", "render_data_url", "render_png", "ERROR_CORRECTION_LEVELS"]
