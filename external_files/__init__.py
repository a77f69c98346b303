"""
External files module for writing decoded EGA images as PNG files.
"""

from .images import upscale_pixels, write_rgba_png, export_ega_images
from .constants import SCALE_FACTOR_WIDTH, SCALE_FACTOR_HEIGHT

__all__ = [
    "upscale_pixels",
    "write_rgba_png",
    "export_ega_images",
    "SCALE_FACTOR_WIDTH",
    "SCALE_FACTOR_HEIGHT",
]
