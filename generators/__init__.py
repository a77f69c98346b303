"""
EGA extraction generators module

This module provides functions for converting EGA asset files to PNG images
"""

from .ega_transform import (
    ega_transform_process_single,
    ega_transform_process_multiple,
    collect_ega_files,
)

from .constants import EGA_FILE_SUFFIX

__all__ = [
    "ega_transform_process_single",
    "ega_transform_process_multiple",
    "collect_ega_files",
    "EGA_FILE_SUFFIX",
]
