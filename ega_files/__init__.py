"""
EGA files module for decoding full-screen and sprite sheet EGA assets.
"""

from .ega_io import extract_ega, decode_ega, is_fullscreen_ega
from .image import EGAImage
from .decoder import decode_planar_ega, decode_interleaved_ega
from .palette import EGA_PALETTE, palette_color
from .sprite_sheet import (
    SpriteSheetParser,
    SpriteFrameHeader,
    InvalidSpriteSheetError,
    frame_name,
)
from .constants import (
    EGAFormat,
    SpriteSheetFormat,
    PALETTE_COLOR_COUNT,
)

__all__ = [
    # IO functions
    "extract_ega",
    "decode_ega",
    "is_fullscreen_ega",
    # Decoders
    "decode_planar_ega",
    "decode_interleaved_ega",
    # Image and sprite sheet classes
    "EGAImage",
    "SpriteSheetParser",
    "SpriteFrameHeader",
    "InvalidSpriteSheetError",
    "frame_name",
    # Palette
    "EGA_PALETTE",
    "palette_color",
    # Constants
    "EGAFormat",
    "SpriteSheetFormat",
    "PALETTE_COLOR_COUNT",
]
