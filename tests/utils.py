"""Common builders for test data."""

from typing import List, Optional

from data import write_uint32, write_uint16, write_uint8
from ega_files import EGAFormat


def build_frame_record(
    half_byte_width: int,
    height: int,
    pixel_bytes: Optional[bytes] = None,
    record_size: Optional[int] = None,
) -> bytes:
    """Build one sprite frame record. Pixel bytes default to a counting pattern."""
    data_size = 2 * half_byte_width * height
    if pixel_bytes is None:
        pixel_bytes = bytes(i & 0xFF for i in range(data_size))
    if record_size is None:
        record_size = 4 + len(pixel_bytes)

    return (
        write_uint16(record_size)
        + write_uint8(half_byte_width)
        + write_uint8(height)
        + pixel_bytes
    )


def build_sprite_sheet(records: List[bytes]) -> bytes:
    """Prefix records with the big-endian payload size."""
    payload = b"".join(records)
    return write_uint32(len(payload), little_endian=False) + payload


def build_planar(plane_bytes: List[int]) -> bytes:
    """Build a full-screen bitmap where plane k is filled with plane_bytes[k]."""
    return b"".join(bytes([value]) * EGAFormat.PLANE_SIZE for value in plane_bytes)
