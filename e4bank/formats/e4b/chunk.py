"""
Generic chunk tree for the E4B container.

A chunk is a 4-character tag, a big-endian 32-bit length and a payload,
optionally followed by nested chunks. On write a chunk serializes its own
header and payload and then each child, depth-first. On read only the
8-byte header is consumed; record codecs parse the payload themselves.
"""

import io
import logging
import struct
from typing import BinaryIO, List, Optional

from e4bank.formats.e4b.constants import CHUNK_HEADER_SIZE, TAG_LENGTH
from e4bank.utils.validation import E4BFormatError

log = logging.getLogger(__name__)


class Chunk:
    """
    A node in the chunk tree.

    Example:
        form = Chunk("FORM")
        form.append(b"E4B0")
        form.children.append(Chunk("TOC1"))
        data = form.to_bytes()

    Attributes:
        name: 4-character tag
        size_override: Length written instead of the computed one. Only
            TOC entries use this, to record their target's payload size.
        read_size: Length field read from a file header
        children: Nested chunks, written after the payload
    """

    def __init__(self, name: str = "", size_override: Optional[int] = None):
        self.name = name
        self.size_override = size_override
        self.read_size = 0
        self.children: List["Chunk"] = []
        self._data = bytearray()

    @property
    def data(self) -> bytes:
        """Accumulated payload."""
        return bytes(self._data)

    @property
    def payload_size(self) -> int:
        return len(self._data)

    def append(self, data: Optional[bytes], size: Optional[int] = None) -> None:
        """
        Append bytes to the payload.

        Args:
            data: Bytes to copy, or None to append ``size`` zero bytes
            size: Number of bytes (defaults to ``len(data)``)
        """
        if size is None:
            size = len(data) if data is not None else 0

        if size <= 0:
            log.warning(f"{self.name}: ignoring append of {size} bytes")
            return

        if data is None:
            self._data.extend(bytes(size))
            return

        if size > len(data):
            log.warning(f"{self.name}: ignoring append of {size} bytes from a {len(data)}-byte buffer")
            return

        self._data.extend(data[:size])

    def pad(self, size: int) -> None:
        """Append ``size`` zero bytes (reserved fields)."""
        self.append(None, size)

    def pack(self, fmt: str, *values) -> None:
        """Append values packed with ``struct``."""
        self.append(struct.pack(fmt, *values))

    def full_size(self, include_header: bool) -> int:
        """
        Compute the size of this chunk and all of its children.

        Args:
            include_header: Count the 8-byte header of this chunk and of
                every child

        Returns:
            Size in bytes
        """
        size = len(self._data)
        if include_header:
            size += CHUNK_HEADER_SIZE

        for child in self.children:
            size += child.full_size(include_header)

        return size

    def write(self, stream: BinaryIO) -> None:
        """Serialize this chunk and its children to a stream."""
        if len(self.name) != TAG_LENGTH:
            log.error(f"Skipping chunk with invalid tag {self.name!r}")
            return

        if self.size_override is not None:
            size = self.size_override
        else:
            size = self.full_size(True) - CHUNK_HEADER_SIZE

        stream.write(self.name.encode("ascii"))
        stream.write(struct.pack(">I", size & 0xFFFFFFFF))

        if self._data:
            stream.write(self._data)

        for child in self.children:
            child.write(stream)

    def to_bytes(self) -> bytes:
        """Serialize to bytes."""
        buffer = io.BytesIO()
        self.write(buffer)
        return buffer.getvalue()

    @classmethod
    def read(cls, stream: BinaryIO) -> "Chunk":
        """
        Read a chunk header (tag + length) from a stream.

        The payload is not consumed.

        Raises:
            E4BFormatError: If fewer than 8 bytes are available
        """
        header = stream.read(CHUNK_HEADER_SIZE)
        if len(header) != CHUNK_HEADER_SIZE:
            raise E4BFormatError(f"Truncated chunk header ({len(header)} bytes)")

        chunk = cls(header[:TAG_LENGTH].decode("ascii", errors="replace"))
        chunk.read_size = struct.unpack(">I", header[TAG_LENGTH:])[0]
        return chunk

    def __repr__(self) -> str:
        return f"Chunk({self.name!r}, payload={len(self._data)}, children={len(self.children)})"
