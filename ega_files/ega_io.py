"""
EGA file I/O: format detection and extraction.
"""

from pathlib import Path
from typing import List, Optional, Union

from .constants import EGAFormat
from .decoder import decode_planar_ega
from .image import EGAImage
from .sprite_sheet import SpriteSheetParser
from data import read_file_to_bytes
from external_files import export_ega_images


def is_fullscreen_ega(rawdata: bytes) -> bool:
    """Full-screen bitmaps carry no signature; they are recognised by size alone."""
    return len(rawdata) == EGAFormat.FULLSCREEN_SIZE


def decode_ega(rawdata: bytes, name: str) -> List[EGAImage]:
    """Decode raw EGA bytes into one image (full-screen) or one per sprite frame.

    Raises:
        InvalidSpriteSheetError: If the data is not a full-screen bitmap and not a valid sprite sheet
    """
    if is_fullscreen_ega(rawdata):
        return [EGAImage(name, decode_planar_ega(rawdata))]

    return SpriteSheetParser(rawdata).parse(name)


def extract_ega(
    ega_input: Union[Path, bytes],
    output_dir: Optional[Path] = None,
    name: Optional[str] = None,
) -> List[EGAImage]:
    """
    Extract EGA image(s) from file path or raw bytes.

    Args:
        ega_input: Either Path to an EGA asset file or its raw bytes
        output_dir: Optional output directory. If provided, writes one PNG per image.
        name: Output name stem. Defaults to the input file stem.

    Returns:
        List of decoded EGAImage objects
    """
    if isinstance(ega_input, bytes):
        rawdata = ega_input
        if name is None:
            raise ValueError("A name is required when extracting from raw bytes")
    else:
        rawdata = read_file_to_bytes(ega_input)
        if name is None:
            name = Path(ega_input).stem

    images = decode_ega(rawdata, name)

    if output_dir is not None:
        export_ega_images(images, output_dir)

    return images
