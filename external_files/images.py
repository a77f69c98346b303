"""
Image export functions for decoded EGA frames.
"""

import numpy as np
from pathlib import Path
from typing import List
from PIL import Image

from .constants import SCALE_FACTOR_WIDTH, SCALE_FACTOR_HEIGHT, IMAGE_EXTENSION


def upscale_pixels(pixels: np.ndarray) -> np.ndarray:
    """Nearest-neighbour upscale of an RGBA array.

    Every source pixel becomes a SCALE_FACTOR_WIDTH x SCALE_FACTOR_HEIGHT block.

    Args:
        pixels: RGBA array of shape (height, width, 4)

    Returns:
        RGBA array of shape (height * SCALE_FACTOR_HEIGHT, width * SCALE_FACTOR_WIDTH, 4)
    """
    scaled = np.repeat(pixels, SCALE_FACTOR_HEIGHT, axis=0)
    return np.repeat(scaled, SCALE_FACTOR_WIDTH, axis=1)


def write_rgba_png(pixels: np.ndarray, output_path: Path) -> None:
    """Upscale an RGBA array and save it as an 8-bit RGBA PNG."""
    scaled = np.ascontiguousarray(upscale_pixels(pixels), dtype=np.uint8)
    img = Image.fromarray(scaled)
    img.save(output_path, "PNG")


def export_ega_images(images: list, output_dir: Path) -> List[Path]:
    """Export decoded images to a directory, one PNG per image.

    Args:
        images: Decoded EGAImage objects, each written as <name>.png
        output_dir: Existing output directory

    Returns:
        Paths of the written PNG files
    """
    written = []

    for image in images:
        if image.pixels.size == 0:
            print(f"[WARNING] Skipping empty image: {image.name}")
            continue

        img_path = output_dir / f"{image.name}{IMAGE_EXTENSION}"
        write_rgba_png(image.pixels, img_path)
        written.append(img_path)

    print(f"[OK] {len(written)} image(s) saved to: {output_dir}")

    return written
