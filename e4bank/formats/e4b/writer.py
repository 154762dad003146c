"""
E4B bank file writer.

Builds the FORM/TOC1 chunk tree for a Bank and serializes it in one pass.
"""

import logging
from pathlib import Path
from typing import List, Tuple, Union

from e4bank.formats.e4b.chunk import Chunk
from e4bank.formats.e4b.constants import (
    BANK_FORMAT_TAG,
    CHUNK_HEADER_SIZE,
    DEFAULT_STARTUP_NAME,
    FORM_TAG,
    NAME_LENGTH,
    PRESET_TAG,
    SAMPLE_TAG,
    SEQUENCE_TAG,
    STARTUP_TAG,
    TAG_LENGTH,
    TOC_ENTRY_SIZE,
    TOC_SIZE_ADJUSTMENT,
    TOC_TAG,
)
from e4bank.formats.e4b.preset_codec import write_preset
from e4bank.formats.e4b.sample_codec import write_sample
from e4bank.formats.e4b.sequence_codec import write_sequence
from e4bank.formats.e4b.startup_codec import write_startup
from e4bank.models.bank import Bank
from e4bank.models.startup import StartupSetup
from e4bank.utils.validation import encode_name, is_e4b_path

log = logging.getLogger(__name__)


class E4BWriter:
    """
    Writer for E4B bank files.

    Records are written presets first, then samples, then sequences,
    each in bank order, followed by the startup block.

    Example:
        bank = Bank()
        bank.add_preset(Preset(name="Piano"))
        E4BWriter.write(bank, "piano.e4b")
    """

    @classmethod
    def write(cls, bank: Bank, filepath: Union[str, Path]) -> None:
        """
        Write a Bank to an E4B file.

        Args:
            bank: Bank to write
            filepath: Output file path
        """
        writer = cls()
        data = writer.to_bytes(bank)

        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        with open(filepath, "wb") as f:
            f.write(data)

        log.debug(f"Wrote {len(data)} bytes to {filepath}")

    def to_bytes(self, bank: Bank) -> bytes:
        """Serialize a Bank to E4B bytes."""
        return self.build(bank).to_bytes()

    def build(self, bank: Bank) -> Chunk:
        """
        Build the complete chunk tree for a Bank.

        Returns:
            The root FORM chunk
        """
        records = self._build_records(bank)

        form = Chunk(FORM_TAG)
        form.append(BANK_FORMAT_TAG.encode("ascii"))

        toc = Chunk(TOC_TAG)
        form.children.append(toc)

        # Every TOC entry is in place before the first data chunk, so
        # offsets follow from sizes alone.
        offset = CHUNK_HEADER_SIZE + TAG_LENGTH + CHUNK_HEADER_SIZE + TOC_ENTRY_SIZE * len(records)
        for chunk, index, name in records:
            toc.children.append(self._toc_entry(chunk, offset, index, name))
            offset += chunk.full_size(True)

        for chunk, _, _ in records:
            form.children.append(chunk)

        startup = Chunk(STARTUP_TAG)
        write_startup(startup, StartupSetup(DEFAULT_STARTUP_NAME, bank.startup_preset))
        form.children.append(startup)

        return form

    def _build_records(self, bank: Bank) -> List[Tuple[Chunk, int, str]]:
        records = []

        for preset in bank.presets:
            chunk = Chunk(PRESET_TAG)
            write_preset(chunk, preset)
            records.append((chunk, preset.index, preset.name))

        for sample in bank.samples:
            if not sample.data:
                log.warning(f"Skipping sample {sample.index} {sample.name!r}: no PCM data")
                continue
            chunk = Chunk(SAMPLE_TAG)
            write_sample(chunk, sample)
            records.append((chunk, sample.index, sample.name))

        for sequence in bank.sequences:
            chunk = Chunk(SEQUENCE_TAG)
            write_sequence(chunk, sequence)
            records.append((chunk, sequence.index, sequence.name))

        return records

    @staticmethod
    def _toc_entry(chunk: Chunk, offset: int, index: int, name: str) -> Chunk:
        entry = Chunk(chunk.name, chunk.full_size(False) - TOC_SIZE_ADJUSTMENT)
        entry.pack(">IH", offset, index & 0xFFFF)
        entry.append(encode_name(name, NAME_LENGTH))
        entry.pad(2)
        return entry


def write_e4b(filepath: Union[str, Path], bank: Bank) -> bool:
    """
    Write a bank to disk.

    Returns:
        False without touching the filesystem if the path does not carry
        an E4B extension
    """
    if not is_e4b_path(filepath):
        log.error(f"Not an E4B path: {filepath}")
        return False

    E4BWriter.write(bank, filepath)
    return True
