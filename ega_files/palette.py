"""
Fixed 16-color EGA palette.

Colors follow the IBM 5153 "true CGA" table
(https://int10h.org/blog/2022/06/ibm-5153-color-true-cga-palette/)
with two game-specific changes: index 0 is fully transparent and
index 8 is black instead of dark gray.
"""

from typing import Tuple

import numpy as np

from .constants import PALETTE_COLOR_COUNT, PALETTE_CHANNEL_COUNT

EGA_PALETTE = np.array(
    [
        [0x00, 0x00, 0x00, 0x00],  # 0
        [0x00, 0x00, 0xC4, 0xFF],  # 1
        [0x00, 0xC4, 0x00, 0xFF],  # 2
        [0x00, 0xC4, 0xC4, 0xFF],  # 3
        [0xC4, 0x00, 0x00, 0xFF],  # 4
        [0xC4, 0x00, 0xC4, 0xFF],  # 5
        [0xC4, 0x7E, 0x00, 0xFF],  # 6
        [0xC4, 0xC4, 0xC4, 0xFF],  # 7
        [0x00, 0x00, 0x00, 0xFF],  # 8
        [0x4E, 0x4E, 0xDC, 0xFF],  # 9
        [0x4E, 0xDC, 0x4E, 0xFF],  # 10
        [0x4E, 0xF3, 0xF3, 0xFF],  # 11
        [0xDC, 0x4E, 0x4E, 0xFF],  # 12
        [0xF3, 0x4E, 0xF3, 0xFF],  # 13
        [0xF3, 0xF3, 0x4E, 0xFF],  # 14
        [0xFF, 0xFF, 0xFF, 0xFF],  # 15
    ],
    dtype=np.uint8,
)
EGA_PALETTE.flags.writeable = False

assert EGA_PALETTE.shape == (PALETTE_COLOR_COUNT, PALETTE_CHANNEL_COUNT)


def palette_color(index: int) -> Tuple[int, int, int, int]:
    """Return the (R, G, B, A) color for a 4-bit palette index.

    Raises:
        IndexError: If index is outside 0..15
    """
    if not 0 <= index < PALETTE_COLOR_COUNT:
        raise IndexError(f"Palette index out of range: {index}")
    r, g, b, a = EGA_PALETTE[index]
    return int(r), int(g), int(b), int(a)


def indices_to_rgba(indices: np.ndarray) -> np.ndarray:
    """Map an array of palette indices to RGBA, adding a trailing channel axis."""
    return EGA_PALETTE[indices]
