"""
E4B bank file reader.

Walks the table of contents of an E4B container and decodes every data
chunk it points at into a Bank.
"""

import io
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import BinaryIO, List, Optional, Tuple, Union

from e4bank.formats.e4b.binary import read_exact, read_struct
from e4bank.formats.e4b.chunk import Chunk
from e4bank.formats.e4b.constants import (
    BANK_FORMAT_TAG,
    CHUNK_HEADER_SIZE,
    FORM_TAG,
    NAME_LENGTH,
    PRESET_TAG,
    SAMPLE_TAG,
    SEQUENCE_TAG,
    SKIPPED_TAGS,
    STARTUP_TAG,
    TAG_LENGTH,
    TOC_ENTRY_SIZE,
    TOC_SIZE_ADJUSTMENT,
    TOC_TAG,
)
from e4bank.formats.e4b.preset_codec import read_preset
from e4bank.formats.e4b.sample_codec import read_sample
from e4bank.formats.e4b.sequence_codec import read_sequence
from e4bank.formats.e4b.startup_codec import read_startup
from e4bank.models.bank import Bank
from e4bank.utils.validation import E4BFormatError, decode_name, is_e4b_path

log = logging.getLogger(__name__)


class E4BReadResult(Enum):
    SUCCESS = "success"
    NOT_EXIST = "not_exist"
    INVALID = "invalid"


@dataclass
class TocEntry:
    """
    One table-of-contents entry.

    Attributes:
        tag: Tag of the data chunk the entry points at
        size: Declared size (target payload size minus 2)
        offset: Absolute file offset of the target chunk header
        index: Entity index
        name: Raw 16 character name
        position: File offset of this entry
    """

    tag: str
    size: int
    offset: int
    index: int
    name: str
    position: int = 0

    @property
    def payload_size(self) -> int:
        return self.size + TOC_SIZE_ADJUSTMENT

    @property
    def end(self) -> int:
        """File offset just past the target chunk."""
        return self.offset + CHUNK_HEADER_SIZE + self.payload_size


class E4BReader:
    """
    Reader for E4B bank files.

    Example:
        bank = E4BReader.read("strings.e4b")
        for preset in bank.presets:
            print(preset.index, preset.name)
    """

    def __init__(self):
        self._raw_data: bytes = b""

    @classmethod
    def read(cls, filepath: Union[str, Path]) -> Bank:
        """
        Read an E4B file and return a Bank.

        Args:
            filepath: Path to .e4b file

        Returns:
            Parsed Bank

        Raises:
            FileNotFoundError: If the file does not exist
            E4BFormatError: If the container is malformed
        """
        reader = cls()
        return reader.parse_file(filepath)

    def parse_file(self, filepath: Union[str, Path]) -> Bank:
        filepath = Path(filepath)

        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")

        with open(filepath, "rb") as f:
            self._raw_data = f.read()

        log.debug(f"Read {len(self._raw_data)} bytes from {filepath}")
        return self.parse_bytes(self._raw_data)

    def parse_bytes(self, data: bytes) -> Bank:
        """
        Parse E4B data from bytes.

        Args:
            data: Raw file contents

        Returns:
            Parsed Bank
        """
        self._raw_data = data
        stream = io.BytesIO(data)
        entries = self._read_toc(stream)

        bank = Bank()
        for entry in entries:
            self._read_entry(stream, entry, bank)

        # The startup block follows the last data chunk
        stream.seek(self._data_end(stream, entries))
        if stream.tell() < len(data):
            self._read_startup(stream, bank)

        log.debug(f"Parsed {bank!r}")
        return bank

    @staticmethod
    def _data_end(stream: BinaryIO, entries: List[TocEntry]) -> int:
        """Find where the furthest data chunk ends, trusting its own header."""
        last = max(entries, key=lambda e: e.offset)
        stream.seek(last.offset)
        try:
            chunk = Chunk.read(stream)
        except E4BFormatError:
            return last.end
        return last.offset + CHUNK_HEADER_SIZE + chunk.read_size

    @classmethod
    def read_toc(cls, data: bytes) -> List[TocEntry]:
        """
        Read only the table of contents.

        Raises:
            E4BFormatError: If the container header or TOC is malformed
        """
        return cls._read_toc(io.BytesIO(data))

    @staticmethod
    def _read_toc(stream: BinaryIO) -> List[TocEntry]:
        form = Chunk.read(stream)
        if form.name != FORM_TAG:
            raise E4BFormatError(f"Not a FORM container (tag {form.name!r})")

        format_tag = read_exact(stream, TAG_LENGTH)
        if format_tag != BANK_FORMAT_TAG.encode("ascii"):
            raise E4BFormatError(f"Unsupported FORM type {format_tag!r}")

        toc = Chunk.read(stream)
        if toc.name != TOC_TAG:
            raise E4BFormatError(f"Expected {TOC_TAG}, found {toc.name!r}")

        num_entries = toc.read_size // TOC_ENTRY_SIZE
        if num_entries == 0:
            raise E4BFormatError("Table of contents is empty")

        entries = []
        for _ in range(num_entries):
            position = stream.tell()
            header = Chunk.read(stream)
            offset, index = read_struct(stream, ">IH")
            name = decode_name(read_exact(stream, NAME_LENGTH))
            read_exact(stream, 2)

            entries.append(
                TocEntry(
                    tag=header.name,
                    size=header.read_size,
                    offset=offset,
                    index=index,
                    name=name,
                    position=position,
                )
            )

        return entries

    def _read_entry(self, stream: BinaryIO, entry: TocEntry, bank: Bank) -> None:
        stream.seek(entry.offset + CHUNK_HEADER_SIZE)

        if entry.tag == PRESET_TAG:
            bank.add_preset(read_preset(stream))
        elif entry.tag == SAMPLE_TAG:
            bank.add_sample(read_sample(stream, entry.payload_size))
        elif entry.tag == SEQUENCE_TAG:
            bank.add_sequence(read_sequence(stream, entry.payload_size))
        elif entry.tag in SKIPPED_TAGS:
            log.info(f"Skipping {entry.tag} chunk at 0x{entry.offset:X}")
        else:
            raise E4BFormatError(f"Unknown chunk {entry.tag!r} at 0x{entry.offset:X}")

    def _read_startup(self, stream: BinaryIO, bank: Bank) -> None:
        try:
            chunk = Chunk.read(stream)
            if chunk.name != STARTUP_TAG:
                log.debug(f"Ignoring trailing {chunk.name!r} chunk")
                return
            startup = read_startup(stream)
        except E4BFormatError as e:
            log.warning(f"Ignoring unreadable startup block: {e}")
            return

        bank.set_startup_preset(startup.current_preset)

    @classmethod
    def can_read(cls, filepath: Union[str, Path]) -> bool:
        """
        Check if a file looks like an E4B bank.

        Args:
            filepath: Path to check

        Returns:
            True if the file starts with a FORM/E4B0 header
        """
        filepath = Path(filepath)

        if not filepath.exists():
            return False

        try:
            with open(filepath, "rb") as f:
                header = f.read(12)
        except OSError:
            return False

        return header[:4] == FORM_TAG.encode("ascii") and header[8:12] == BANK_FORMAT_TAG.encode("ascii")

    @classmethod
    def get_file_info(cls, filepath: Union[str, Path]) -> dict:
        """
        Get basic information about an E4B file without decoding records.

        Args:
            filepath: Path to .e4b file

        Returns:
            Dictionary with file info
        """
        filepath = Path(filepath)

        with open(filepath, "rb") as f:
            data = f.read()

        return cls.inspect_bytes(data)

    @classmethod
    def inspect_bytes(cls, data: bytes) -> dict:
        """Summarize E4B data from its TOC alone."""
        info = {
            "valid": False,
            "size": len(data),
            "entries": 0,
            "presets": 0,
            "samples": 0,
            "sequences": 0,
            "skipped": 0,
            "has_startup": False,
        }

        try:
            entries = cls.read_toc(data)
        except E4BFormatError as e:
            info["error"] = str(e)
            return info

        info["valid"] = True
        info["entries"] = len(entries)
        info["presets"] = sum(1 for e in entries if e.tag == PRESET_TAG)
        info["samples"] = sum(1 for e in entries if e.tag == SAMPLE_TAG)
        info["sequences"] = sum(1 for e in entries if e.tag == SEQUENCE_TAG)
        info["skipped"] = sum(1 for e in entries if e.tag in SKIPPED_TAGS)

        end = cls._data_end(io.BytesIO(data), entries)
        info["has_startup"] = data[end : end + TAG_LENGTH] == STARTUP_TAG.encode("ascii")

        return info


def read_e4b(filepath: Union[str, Path]) -> Tuple[E4BReadResult, Optional[Bank]]:
    """
    Read a bank, reporting failures as a result code instead of raising.

    Returns:
        (result, bank) - bank is None unless result is SUCCESS
    """
    if not is_e4b_path(filepath):
        log.error(f"Not an E4B path: {filepath}")
        return E4BReadResult.INVALID, None

    try:
        bank = E4BReader.read(filepath)
    except FileNotFoundError:
        return E4BReadResult.NOT_EXIST, None
    except E4BFormatError as e:
        log.error(f"Invalid bank {filepath}: {e}")
        return E4BReadResult.INVALID, None
    except OSError as e:
        log.error(f"Cannot read {filepath}: {e}")
        return E4BReadResult.INVALID, None

    return E4BReadResult.SUCCESS, bank
