"""E4B container format handlers."""

from e4bank.formats.e4b.chunk import Chunk
from e4bank.formats.e4b.reader import E4BReader, E4BReadResult, TocEntry, read_e4b
from e4bank.formats.e4b.writer import E4BWriter, write_e4b

__all__ = [
    "Chunk",
    "E4BReader",
    "E4BReadResult",
    "TocEntry",
    "read_e4b",
    "E4BWriter",
    "write_e4b",
]
