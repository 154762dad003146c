"""
E4Bank - Reader and writer for E-mu EOS sampler bank files (.e4b).

This library provides tools to:
- Read E4B banks into presets, samples, sequences and a startup setup
- Edit voices, zones, envelopes, LFOs and modulation cords in engineering units
- Write banks back to disk with a consistent table of contents

Example usage:
    from e4bank import Bank, E4BReader, E4BWriter

    bank = E4BReader.read("strings.e4b")
    bank.presets[0].voices[0].filter_frequency = 1200
    E4BWriter.write(bank, "strings-dark.e4b")
"""

__version__ = "0.1.0"
__author__ = "E4Bank Contributors"

from e4bank.formats.e4b.reader import E4BReader, E4BReadResult, read_e4b
from e4bank.formats.e4b.writer import E4BWriter, write_e4b
from e4bank.models.bank import Bank
from e4bank.models.preset import Preset, SampleZone, Voice
from e4bank.models.sample import Sample
from e4bank.models.sequence import Sequence
from e4bank.utils.validation import E4BFormatError

__all__ = [
    "E4BReader",
    "E4BReadResult",
    "read_e4b",
    "E4BWriter",
    "write_e4b",
    "Bank",
    "Preset",
    "SampleZone",
    "Voice",
    "Sample",
    "Sequence",
    "E4BFormatError",
]
