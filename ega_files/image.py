"""
Decoded EGA image container.
"""

import numpy as np


class EGAImage:
    """One decoded frame.

    Pixels are RGBA, shape (height, width, 4), at the source resolution.
    The name is the output file stem (e.g. "title" or "chars-03").
    """

    def __init__(self, name: str, pixels: np.ndarray):
        self.name = name
        self.pixels = pixels

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    def __repr__(self) -> str:
        return f"EGAImage(name={self.name!r}, width={self.width}, height={self.height})"
