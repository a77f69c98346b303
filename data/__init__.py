"""
Core configuration, constants, and utils
"""

from .config import (
    DEBUG,
    CURRENT_VERSION,
    DEFAULT_OUTPUT_DIR,
)

from .utils import (
    read_uint32,
    read_uint16,
    read_uint8,
    write_uint32,
    write_uint16,
    write_uint8,
    read_file_to_bytes,
)

from .constants import (
    SEPARATOR_LINE_LENGTH,
)

__all__ = [
    # Config
    "DEBUG",
    "CURRENT_VERSION",
    "DEFAULT_OUTPUT_DIR",
    # Utils
    "read_uint32",
    "read_uint16",
    "read_uint8",
    "write_uint32",
    "write_uint16",
    "write_uint8",
    "read_file_to_bytes",
    # Constants
    "SEPARATOR_LINE_LENGTH",
]
