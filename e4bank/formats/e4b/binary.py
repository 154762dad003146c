"""
Stream helpers shared by the E4B record codecs.
"""

import struct
from typing import BinaryIO, Tuple

from e4bank.utils.validation import E4BFormatError


def read_exact(stream: BinaryIO, size: int) -> bytes:
    """
    Read exactly ``size`` bytes.

    Raises:
        E4BFormatError: If the stream ends early
    """
    data = stream.read(size)
    if len(data) != size:
        raise E4BFormatError(f"Unexpected end of data: wanted {size} bytes, got {len(data)}")
    return data


def read_struct(stream: BinaryIO, fmt: str) -> Tuple:
    """Read and unpack a ``struct`` format from a stream."""
    return struct.unpack(fmt, read_exact(stream, struct.calcsize(fmt)))


def read_value(stream: BinaryIO, fmt: str):
    """Read a single ``struct`` value from a stream."""
    return read_struct(stream, fmt)[0]


def skip(stream: BinaryIO, size: int) -> None:
    """Skip reserved bytes without interpreting them."""
    read_exact(stream, size)
