"""
Name and path validation for EOS bank data.
"""

from pathlib import Path
from typing import Union

EOS_NAME_LENGTH = 16
E4B_EXTENSIONS = (".e4b", ".E4B")


class E4BFormatError(ValueError):
    """Raised when bank data is structurally invalid."""

    pass


def normalize_name(name: str, length: int = EOS_NAME_LENGTH) -> str:
    """
    Apply the EOS naming standard to a display name.

    Names that are not exactly ``length`` characters are truncated or
    padded, and any NUL characters are replaced by spaces. A name that
    already has the right length is left untouched, and an empty name
    stays empty.

    Args:
        name: Display name
        length: Fixed name length (16 for every EOS entity)

    Returns:
        Normalized name
    """
    if not name or len(name) == length:
        return name

    return name[:length].ljust(length, "\0").replace("\0", " ")


def encode_name(name: str, length: int = EOS_NAME_LENGTH) -> bytes:
    """
    Encode a name into exactly ``length`` bytes, space padded.

    Names are Latin-1 so every byte read from a bank writes back
    unchanged; characters outside it become ``?``.
    """
    raw = name.encode("latin-1", errors="replace")[:length]
    return raw.ljust(length, b" ")


def decode_name(raw: bytes) -> str:
    """Decode a raw name field without any normalization."""
    return raw.decode("latin-1")


def is_e4b_path(filepath: Union[str, Path]) -> bool:
    """
    Check whether a path carries an E4B extension.

    Only the exact ``.e4b`` and ``.E4B`` spellings are accepted.
    """
    return Path(filepath).suffix in E4B_EXTENSIONS
