"""
Startup multi-setup codec (``EMSt`` payload, 1366 bytes).

    0x000    2   reserved
    0x002   16   name
    0x012    4   reserved
    0x016    2   current preset (BE)
    0x018 1024   32 MIDI channel records, 32 bytes each
    0x418    5   reserved
    0x41D    1   tempo
    0x41E  312   reserved

MIDI channel record:
    volume(1) pan(1, signed) reserved(3) aux(1) controllers(16)
    reserved(8) preset(2, BE)
"""

from typing import BinaryIO

from e4bank.formats.e4b.binary import read_exact, read_struct, read_value, skip
from e4bank.formats.e4b.chunk import Chunk
from e4bank.formats.e4b.constants import NAME_LENGTH
from e4bank.models.startup import (
    NUM_CHANNEL_CONTROLLERS,
    NUM_MIDI_CHANNELS,
    MidiChannel,
    StartupSetup,
)
from e4bank.utils.units import to_int8, to_uint8
from e4bank.utils.validation import decode_name, encode_name


def write_midi_channel(chunk: Chunk, channel: MidiChannel) -> None:
    chunk.pack("Bb", to_uint8(channel.volume), to_int8(channel.pan))
    chunk.append(channel.reserved1)
    chunk.pack("B", to_uint8(channel.aux))
    chunk.append(bytes(to_uint8(c) for c in channel.controllers))
    chunk.append(channel.reserved2)
    chunk.pack(">H", channel.preset & 0xFFFF)


def write_startup(chunk: Chunk, setup: StartupSetup) -> None:
    """Append the startup record to a chunk."""
    chunk.pad(2)
    chunk.append(encode_name(setup.name, NAME_LENGTH))
    chunk.pad(4)
    chunk.pack(">H", setup.current_preset & 0xFFFF)

    for channel in setup.channels:
        write_midi_channel(chunk, channel)

    chunk.pad(5)
    chunk.pack("B", to_uint8(setup.tempo))
    chunk.pad(312)


def read_midi_channel(stream: BinaryIO) -> MidiChannel:
    volume, pan = read_struct(stream, "Bb")
    reserved1 = read_exact(stream, 3)
    aux = read_value(stream, "B")
    controllers = list(read_exact(stream, NUM_CHANNEL_CONTROLLERS))
    reserved2 = read_exact(stream, 8)
    preset = read_value(stream, ">H")
    return MidiChannel(
        volume=volume,
        pan=pan,
        reserved1=reserved1,
        aux=aux,
        controllers=controllers,
        reserved2=reserved2,
        preset=preset,
    )


def read_startup(stream: BinaryIO) -> StartupSetup:
    """Read the startup record from the start of an ``EMSt`` payload."""
    skip(stream, 2)
    name = decode_name(read_exact(stream, NAME_LENGTH))
    skip(stream, 4)
    current_preset = read_value(stream, ">H")
    channels = [read_midi_channel(stream) for _ in range(NUM_MIDI_CHANNELS)]
    skip(stream, 5)
    tempo = read_value(stream, "B")
    skip(stream, 312)
    return StartupSetup(name=name, current_preset=current_preset, channels=channels, tempo=tempo)
