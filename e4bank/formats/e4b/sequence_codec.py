"""
Sequence record codec (``E4s1`` payload).

    0x00    2   sequence index (BE)
    0x02   16   name
    0x12  ...   Standard MIDI File bytes
"""

from typing import BinaryIO

from e4bank.formats.e4b.binary import read_exact, read_value
from e4bank.formats.e4b.chunk import Chunk
from e4bank.formats.e4b.constants import NAME_LENGTH, SEQUENCE_HEADER_SIZE
from e4bank.models.sequence import Sequence
from e4bank.utils.validation import E4BFormatError, decode_name, encode_name


def write_sequence(chunk: Chunk, sequence: Sequence) -> None:
    chunk.pack(">H", sequence.index & 0xFFFF)
    chunk.append(encode_name(sequence.name, NAME_LENGTH))
    if sequence.midi_data:
        chunk.append(sequence.midi_data)


def read_sequence(stream: BinaryIO, payload_size: int) -> Sequence:
    if payload_size < SEQUENCE_HEADER_SIZE:
        raise E4BFormatError(f"Sequence payload too small: {payload_size} bytes")

    index = read_value(stream, ">H")
    name = decode_name(read_exact(stream, NAME_LENGTH))
    midi_data = read_exact(stream, payload_size - SEQUENCE_HEADER_SIZE)
    return Sequence(name=name, midi_data=midi_data, index=index)
