"""
Sprite sheet parser for multi-frame EGA asset files.

Layout:
    u32 BE   payload size (file length - 4)
    record*  u16 LE record size (includes this 4-byte header)
             u8     half byte width
             u8     height
             ...    nibble-packed pixel rows
"""

from typing import List

from .constants import SpriteSheetFormat
from .decoder import decode_interleaved_ega
from .image import EGAImage
from data import read_uint32, read_uint16, read_uint8, DEBUG


class InvalidSpriteSheetError(ValueError):
    """Raised when a file cannot be read as a sprite sheet."""


class SpriteFrameHeader:
    """Per-frame record header."""

    def __init__(self):
        self.record_size = 0
        self.half_byte_width = 0
        self.height = 0
        self.data_offset = 0

    @classmethod
    def read_from_bytes(cls, data: bytes, offset: int) -> "SpriteFrameHeader":
        """Read frame header from bytes."""
        header = cls()
        header.record_size = read_uint16(data, offset)
        header.half_byte_width = read_uint8(data, offset + 2)
        header.height = read_uint8(data, offset + 3)
        header.data_offset = offset + SpriteSheetFormat.FRAME_HEADER_LEN
        return header

    @property
    def byte_width(self) -> int:
        return 2 * self.half_byte_width

    @property
    def width(self) -> int:
        return 2 * self.byte_width

    @property
    def data_size(self) -> int:
        return self.byte_width * self.height


def frame_name(base_name: str, index: int) -> str:
    return f"{base_name}-{index:0{SpriteSheetFormat.FRAME_INDEX_DIGITS}d}"


class SpriteSheetParser:
    """Parser for sprite sheet containers."""

    def __init__(self, rawdata: bytes):
        self.rawdata = rawdata
        self.payload_size = 0

    def _read_header(self) -> None:
        if len(self.rawdata) < SpriteSheetFormat.SIZE_FIELD_LEN:
            raise InvalidSpriteSheetError("Not a valid sprite sheet, file too small.")

        self.payload_size = read_uint32(self.rawdata, 0, little_endian=False)

        if self.payload_size + SpriteSheetFormat.SIZE_FIELD_LEN != len(self.rawdata):
            raise InvalidSpriteSheetError(
                "Not a valid sprite sheet, size in header incorrect."
            )

    def read_frame_headers(self) -> List[SpriteFrameHeader]:
        """Walk the record chain and return every frame header.

        The record size field is trusted as the distance to the next record,
        even when it disagrees with the frame dimensions.
        """
        self._read_header()

        headers = []
        offset = SpriteSheetFormat.SIZE_FIELD_LEN
        total = len(self.rawdata)

        while offset < total:
            index = len(headers)

            if total - offset < SpriteSheetFormat.FRAME_HEADER_LEN:
                raise InvalidSpriteSheetError(
                    f"Not a valid sprite sheet, truncated frame header at offset {offset} (frame {index})."
                )

            header = SpriteFrameHeader.read_from_bytes(self.rawdata, offset)

            if total - header.data_offset < header.data_size:
                raise InvalidSpriteSheetError(
                    f"Not a valid sprite sheet, truncated frame data at offset {offset} (frame {index})."
                )

            if header.record_size == 0:
                raise InvalidSpriteSheetError(
                    f"Not a valid sprite sheet, zero record size at offset {offset} (frame {index})."
                )

            expected = SpriteSheetFormat.FRAME_HEADER_LEN + header.data_size
            if DEBUG and header.record_size != expected:
                print(
                    f"[DEBUG] Frame {index}: record size {header.record_size} "
                    f"differs from computed size {expected}"
                )

            headers.append(header)
            offset += header.record_size

        return headers

    def parse(self, base_name: str) -> List[EGAImage]:
        """Decode every frame, named <base_name>-NN.

        Raises:
            InvalidSpriteSheetError: If the container or any record is malformed
        """
        images = []
        for index, header in enumerate(self.read_frame_headers()):
            start = header.data_offset
            body = self.rawdata[start : start + header.data_size]
            pixels = decode_interleaved_ega(body, header.byte_width, header.height)
            images.append(EGAImage(frame_name(base_name, index), pixels))

        return images
