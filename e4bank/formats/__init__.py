"""Format handlers for EOS bank files."""

from e4bank.formats.e4b import E4BReader, E4BReadResult, E4BWriter, read_e4b, write_e4b

__all__ = ["E4BReader", "E4BReadResult", "E4BWriter", "read_e4b", "write_e4b"]
