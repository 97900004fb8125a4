"""Reading uncompressed Windows bitmap (BMP) files into header and pixels."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from pathlib import Path

FILE_HEADER = struct.Struct("<2sIHHI")
INFO_HEADER = struct.Struct("<IiiHHIIiiII")
SIGNATURE = b"BM"


@dataclass(frozen=True)
class BitmapInfo:
    """Size, pixel format and raw pixel rows of a bitmap.

    ``info`` holds the bytes between the file header and the pixels:
    the info header and any colour table. A positive ``height`` means
    the rows are stored bottom-up.
    """

    width: int
    height: int
    bit_count: int
    pixel_offset: int
    info: bytes
    pixels: bytes


def parse_bitmap(data):
    """Split the bytes of a BMP file into its header fields and pixel data."""
    data = bytes(data)
    minimum = FILE_HEADER.size + INFO_HEADER.size
    if len(data) < minimum:
        raise ValueError(f"bitmap needs at least {minimum} bytes, got {len(data)}")
    signature, _size, _r1, _r2, offset = FILE_HEADER.unpack_from(data, 0)
    if signature != SIGNATURE:
        raise ValueError("not a bitmap: missing BM signature")
    (_header_size, width, height, _planes, bit_count,
     *_rest) = INFO_HEADER.unpack_from(data, FILE_HEADER.size)
    if not FILE_HEADER.size + INFO_HEADER.size <= offset <= len(data):
        raise ValueError(f"pixel offset {offset} lies outside the file")
    return BitmapInfo(
        width=width,
        height=height,
        bit_count=bit_count,
        pixel_offset=offset,
        info=data[FILE_HEADER.size:offset],
        pixels=data[offset:],
    )


def read_bitmap(path):
    """Read and parse the bitmap file at ``path``."""
    return parse_bitmap(Path(path).read_bytes())