"""
oggcrc — the CRC-32 used by Ogg page headers.

Features:

- Table-driven ``crc32`` over any bytes-like buffer (polynomial 0x04C11DB7,
  non-reflected, initial value 0, no final XOR).
- ``crc32_bitwise`` reference form for cross-checking the table.
- Optional explicit ``length`` mirroring the (pointer, length) call surface,
  validated so a checksum is never taken over the wrong number of bytes.

Page framing is left to the caller: zero the checksum field at offset 22,
checksum the whole page, and store the result little-endian.
"""

from .constants import POLYNOMIAL
from .crc32 import TABLE, crc32, crc32_bitwise, make_table, ogg_crc32
from .errors import BufferLengthError, InvalidBufferError, OggCrcError

__version__ = "0.1"

__all__ = [
    "crc32",
    "crc32_bitwise",
    "ogg_crc32",
    "make_table",
    "TABLE",
    "POLYNOMIAL",
    "OggCrcError",
    "InvalidBufferError",
    "BufferLengthError",
]
