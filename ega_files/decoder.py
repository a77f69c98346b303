"""
Pixel decoders for the two EGA raster layouts.

Both functions are pure: they read from the given bytes and return a new
RGBA array of shape (height, width, 4). Size checks are the caller's job.
"""

import numpy as np

from .constants import EGAFormat
from .palette import indices_to_rgba


def decode_planar_ega(
    src: bytes,
    width: int = EGAFormat.FULLSCREEN_WIDTH,
    height: int = EGAFormat.FULLSCREEN_HEIGHT,
) -> np.ndarray:
    """Decode a 4-plane bitmap.

    Plane k starts at k * PLANE_SIZE and holds one bit per pixel, MSB first.
    Plane 0 is the least significant bit of the palette index, plane 3 the most.
    """
    pixel_count = width * height
    buf = np.frombuffer(src, dtype=np.uint8)

    indices = np.zeros(pixel_count, dtype=np.uint8)
    for plane in range(EGAFormat.PLANE_COUNT):
        start = plane * EGAFormat.PLANE_SIZE
        plane_bytes = buf[start : start + (pixel_count + 7) // 8]
        bits = np.unpackbits(plane_bytes)[:pixel_count]
        indices |= bits << plane

    return indices_to_rgba(indices.reshape(height, width))


def decode_interleaved_ega(src: bytes, span: int, height: int) -> np.ndarray:
    """Decode a nibble-packed frame, two pixels per byte.

    Each scan line is `span` bytes wide, so the frame is 2 * span pixels wide.
    The high nibble is the left (even) pixel.
    """
    width = 2 * span
    buf = np.frombuffer(src[: span * height], dtype=np.uint8)

    indices = np.empty(width * height, dtype=np.uint8)
    indices[0::2] = buf >> 4
    indices[1::2] = buf & 0x0F

    return indices_to_rgba(indices.reshape(height, width))
