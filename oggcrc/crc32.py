"""
Ogg page CRC-32 with a precomputed table.

Polynomial 0x04C11DB7, MSB-first (no input or output reflection), initial
value 0 and no final XOR. This is not the zlib/PNG CRC-32 and results differ
from :func:`zlib.crc32` for any non-trivial input.
"""

from __future__ import annotations

from typing import Optional, Tuple

from .constants import INITIAL_VALUE, MASK32, POLYNOMIAL, TABLE_SIZE, TOP_BIT
from .errors import BufferLengthError, InvalidBufferError


def make_table(poly: int = POLYNOMIAL) -> Tuple[int, ...]:
    """Build the 256-entry MSB-first lookup table for ``poly``."""
    tbl = []
    for n in range(TABLE_SIZE):
        c = n << 24
        for _ in range(8):
            if c & TOP_BIT:
                c = ((c << 1) ^ poly) & MASK32
            else:
                c = (c << 1) & MASK32
        tbl.append(c)
    return tuple(tbl)


# Built once under the import lock; never mutated afterwards.
TABLE = make_table()


def _check_length(length) -> None:
    if isinstance(length, bool) or not isinstance(length, int):
        raise BufferLengthError(f"length must be an int, got {type(length).__name__}")
    if length < 0:
        raise BufferLengthError(f"length must be non-negative, got {length}")


def _byte_view(buffer, length: Optional[int]) -> memoryview:
    """Return a flat unsigned-byte view of exactly the bytes to checksum.

    Args:
        buffer: Bytes-like object, sequence of ints in 0..255, or None.
        length: Number of leading bytes to use; None means all of them.

    Raises:
        InvalidBufferError: buffer is not byte data, or is None with a
            non-zero length.
        BufferLengthError: length is not a non-negative int no larger than
            the buffer.
    """
    if length is not None:
        _check_length(length)
    if buffer is None:
        if length:
            raise InvalidBufferError(f"buffer is None but length is {length}")
        return memoryview(b"")
    # bytes(n) would silently produce n zero bytes
    if isinstance(buffer, (int, str)):
        raise InvalidBufferError(f"expected byte data, got {type(buffer).__name__}")
    try:
        view = memoryview(buffer)
    except TypeError:
        try:
            view = memoryview(bytes(buffer))
        except (TypeError, ValueError) as exc:
            raise InvalidBufferError(
                f"expected bytes-like or a sequence of byte values, got {type(buffer).__name__}"
            ) from exc
    if not view.c_contiguous:
        view = memoryview(view.tobytes())
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    if length is None:
        return view
    if length > len(view):
        raise BufferLengthError(f"length {length} exceeds buffer size {len(view)}")
    return view[:length]


def crc32(buffer, length: Optional[int] = None) -> int:
    """Compute the Ogg CRC-32 of ``buffer``.

    Callers checking or sealing an Ogg page pass the header and body with the
    4-byte checksum field zeroed, then store or compare the result
    little-endian. An empty buffer (or ``None`` with no length) yields 0.

    Args:
        buffer: Bytes-like object or a sequence of ints in 0..255.
        length: Optional count of leading bytes to checksum.

    Returns:
        Unsigned 32-bit checksum.
    """
    c = INITIAL_VALUE
    tbl = TABLE
    for b in _byte_view(buffer, length):
        c = ((c << 8) & MASK32) ^ tbl[(c >> 24) ^ b]
    return c


def crc32_bitwise(buffer, length: Optional[int] = None) -> int:
    """Bit-at-a-time form of :func:`crc32`; same result, no table."""
    c = INITIAL_VALUE
    for b in _byte_view(buffer, length):
        c ^= b << 24
        for _ in range(8):
            if c & TOP_BIT:
                c = ((c << 1) ^ POLYNOMIAL) & MASK32
            else:
                c = (c << 1) & MASK32
    return c


# Name of the exported C symbol
ogg_crc32 = crc32
