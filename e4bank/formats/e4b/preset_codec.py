"""
Preset record codec (``E4P1`` payload).

Preset header (84 bytes, big-endian):
    0x00    2   preset index
    0x02   16   name
    0x12    2   header data size (always 82)
    0x14    2   voice count
    0x16    4   reserved
    0x1A    1   transpose (signed)
    0x1B    1   volume (signed)
    0x1C   24   reserved
    0x34    4   magic 'R#\\0~'
    0x38    4   initial controllers A-D
    0x3C   24   reserved

Each voice follows as a 284-byte block plus 22 bytes per zone. The voice
size field counts itself.
"""

import copy
import logging
from typing import BinaryIO, List, Tuple

from e4bank.formats.e4b.binary import read_exact, read_struct, read_value, skip
from e4bank.formats.e4b.chunk import Chunk
from e4bank.formats.e4b.constants import (
    NAME_LENGTH,
    PRESET_DATA_SIZE,
    PRESET_MAGIC,
    VOICE_BASE_SIZE,
    VOICE_SIZE_REMAINDER,
    ZONE_SIZE,
)
from e4bank.models.enums import (
    AssignGroup,
    CordDestination,
    CordSource,
    FilterType,
    GlideCurve,
    KeyMode,
    LFOShape,
)
from e4bank.models.preset import (
    LFO,
    MAX_ZONES,
    NUM_CORDS,
    Cord,
    Envelope,
    MidiNote,
    Preset,
    SampleZone,
    Voice,
    ZoneRange,
)
from e4bank.utils.units import (
    MAX_LFO_DELAY,
    MAX_LFO_RATE,
    MIN_LFO_DELAY,
    MIN_LFO_RATE,
    byte_to_chorus_width,
    byte_to_filter_freq,
    byte_to_fine_tune,
    byte_to_lfo_delay,
    byte_to_lfo_rate,
    byte_to_percent,
    ceil_places,
    chorus_width_to_byte,
    clamp,
    filter_freq_to_byte,
    fine_tune_to_byte,
    lfo_delay_to_byte,
    lfo_rate_to_byte,
    percent_to_byte,
    to_int8,
    to_uint8,
)
from e4bank.utils.validation import decode_name, encode_name

log = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Writing
# -----------------------------------------------------------------------------


def _percent(value: float) -> int:
    return to_uint8(percent_to_byte(value))


def write_range(chunk: Chunk, zone_range: ZoneRange) -> None:
    chunk.pack(
        "4B",
        zone_range.low & 0x7F,
        zone_range.low_fade & 0x7F,
        zone_range.high_fade & 0x7F,
        zone_range.high & 0x7F,
    )


def write_envelope(chunk: Chunk, envelope: Envelope) -> None:
    for rate, level in envelope.stages():
        chunk.pack("Bb", to_uint8(rate), to_int8(level))


def write_lfo(chunk: Chunk, lfo: LFO) -> None:
    chunk.pack(
        "5B",
        lfo_rate_to_byte(clamp(lfo.rate, MIN_LFO_RATE, MAX_LFO_RATE)),
        to_uint8(lfo.shape),
        lfo_delay_to_byte(clamp(lfo.delay, MIN_LFO_DELAY, MAX_LFO_DELAY)),
        _percent(lfo.variation),
        0 if lfo.key_sync else 1,  # stored inverted
    )
    chunk.pad(2)


def write_cord(chunk: Chunk, cord: Cord) -> None:
    chunk.pack("BBbB", to_uint8(cord.source), to_uint8(cord.destination), percent_to_byte(cord.amount), 0)


def write_zone(chunk: Chunk, zone: SampleZone) -> None:
    write_range(chunk, zone.key_range)
    write_range(chunk, zone.velocity_range)
    chunk.pack(">H", zone.sample_index & 0xFFFF)
    chunk.pad(1)
    chunk.pack(
        "bBbb",
        fine_tune_to_byte(zone.fine_tune),
        zone.original_key.to_byte(),
        to_int8(zone.volume),
        to_int8(zone.pan),
    )
    chunk.pad(7)


def write_voice(chunk: Chunk, voice: Voice) -> None:
    """
    Append one voice block.

    Values are clamped on a copy first, so a voice edited after
    construction still encodes in range.
    """
    voice = copy.deepcopy(voice)
    voice.clamp()
    zones = voice.zones[:MAX_ZONES]
    if len(voice.zones) > MAX_ZONES:
        log.warning(f"Voice has {len(voice.zones)} zones, writing the first {MAX_ZONES}")

    chunk.pack(">HBB", VOICE_BASE_SIZE + ZONE_SIZE * len(zones), len(zones), voice.group)
    chunk.pad(8)

    write_range(chunk, voice.key_range)
    write_range(chunk, voice.velocity_range)
    write_range(chunk, voice.realtime_range)
    chunk.pad(1)
    chunk.pack(">BH", to_uint8(voice.key_assign_group), voice.key_delay)
    chunk.pad(3)

    chunk.pack(
        "BbbbBBB",
        _percent(voice.sample_offset),
        voice.transpose,
        voice.coarse_tune,
        fine_tune_to_byte(voice.fine_tune),
        to_uint8(voice.glide_rate),
        1 if voice.fixed_pitch else 0,
        to_uint8(voice.key_mode),
    )
    chunk.pad(1)

    chunk.pack("BB", chorus_width_to_byte(voice.chorus_width), _percent(voice.chorus_amount))
    chunk.pad(1)
    chunk.pack("B", to_uint8(voice.chorus_init_itd))
    chunk.pad(5)

    chunk.pack("B", 1 if voice.key_latch else 0)
    chunk.pad(2)
    chunk.pack("Bbb", to_uint8(voice.glide_curve), voice.volume, voice.pan)
    chunk.pad(1)
    chunk.pack("bB", to_int8(voice.amp_env_dyn_range), to_uint8(voice.filter_type))
    chunk.pad(1)
    chunk.pack(
        "BB",
        filter_freq_to_byte(voice.filter_frequency),
        _percent(voice.filter_resonance),
    )
    chunk.pad(48)

    for envelope in (voice.amp_env, voice.filter_env, voice.aux_env):
        write_envelope(chunk, envelope)
        chunk.pad(2)

    write_lfo(chunk, voice.lfo1)
    chunk.pad(1)
    write_lfo(chunk, voice.lfo2)
    chunk.pack("B", voice.lfo_lag1)
    chunk.pad(1)
    chunk.pack("B", voice.lfo_lag2)
    chunk.pad(20)

    for cord in voice.cords:
        write_cord(chunk, cord)

    for zone in zones:
        write_zone(chunk, zone)


def write_preset(chunk: Chunk, preset: Preset) -> None:
    """Append a full preset record (header and voices) to a chunk."""
    preset = copy.copy(preset)
    preset.clamp()
    chunk.pack(">H", preset.index & 0xFFFF)
    chunk.append(encode_name(preset.name, NAME_LENGTH))
    chunk.pack(">HH", PRESET_DATA_SIZE, len(preset.voices))
    chunk.pad(4)
    chunk.pack("bb", to_int8(preset.transpose), to_int8(preset.volume))
    chunk.pad(24)
    chunk.append(PRESET_MAGIC)
    chunk.append(bytes(to_uint8(c) for c in preset.initial_controllers))
    chunk.pad(24)

    for voice in preset.voices:
        write_voice(chunk, voice)


# -----------------------------------------------------------------------------
# Reading
# -----------------------------------------------------------------------------


def read_range(stream: BinaryIO) -> ZoneRange:
    low, low_fade, high_fade, high = read_struct(stream, "4B")
    return ZoneRange(low, low_fade, high_fade, high)


def read_envelope(stream: BinaryIO) -> Envelope:
    values = read_struct(stream, "BbBbBbBbBbBb")
    return Envelope(*values)


def read_lfo(stream: BinaryIO) -> LFO:
    rate, shape, delay, variation, key_sync = read_struct(stream, "5B")
    skip(stream, 2)
    return LFO(
        rate=byte_to_lfo_rate(rate),
        shape=LFOShape(shape),
        delay=byte_to_lfo_delay(delay),
        variation=byte_to_percent(variation),
        key_sync=not key_sync,
    )


def read_cord(stream: BinaryIO) -> Cord:
    source, destination, amount, _reserved = read_struct(stream, "BBbB")
    return Cord(CordSource(source), CordDestination(destination), byte_to_percent(amount))


def read_zone(stream: BinaryIO) -> SampleZone:
    key_range = read_range(stream)
    velocity_range = read_range(stream)
    sample_index = read_value(stream, ">H")
    skip(stream, 1)
    fine_tune, original_key, volume, pan = read_struct(stream, "bBbb")
    skip(stream, 7)

    return SampleZone(
        sample_index=sample_index,
        original_key=MidiNote.from_byte(original_key),
        key_range=key_range,
        velocity_range=velocity_range,
        fine_tune=byte_to_fine_tune(fine_tune),
        volume=volume,
        pan=pan,
    )


def read_voice(stream: BinaryIO) -> Tuple[Voice, bool]:
    """
    Read one voice block.

    A voice whose size field is not 284 + 22n, or which has no zones, is
    abandoned and replaced by a default voice without zones.

    Returns:
        (voice, resumable) - resumable is False when the size field is
        unusable and the following voices cannot be located
    """
    start = stream.tell()
    size = read_value(stream, ">H")

    if size % ZONE_SIZE != VOICE_SIZE_REMAINDER:
        log.warning(f"Abandoning voice at 0x{start:X}: inconsistent size {size}")
        return Voice(), False

    num_zones, group = read_struct(stream, "BB")
    if num_zones == 0:
        log.warning(f"Abandoning voice at 0x{start:X}: no zones")
        stream.seek(start + size)
        return Voice(), True

    skip(stream, 8)
    key_range = read_range(stream)
    velocity_range = read_range(stream)
    realtime_range = read_range(stream)
    skip(stream, 1)
    assign_group, key_delay = read_struct(stream, ">BH")
    skip(stream, 3)

    (
        sample_offset,
        transpose,
        coarse_tune,
        fine_tune,
        glide_rate,
        fixed_pitch,
        key_mode,
    ) = read_struct(stream, "BbbbBBB")
    skip(stream, 1)

    chorus_width, chorus_amount = read_struct(stream, "BB")
    skip(stream, 1)
    chorus_init_itd = read_value(stream, "B")
    skip(stream, 5)

    key_latch = read_value(stream, "B")
    skip(stream, 2)
    glide_curve, volume, pan = read_struct(stream, "Bbb")
    skip(stream, 1)
    amp_env_dyn_range, filter_type = read_struct(stream, "bB")
    skip(stream, 1)
    filter_freq, filter_res = read_struct(stream, "BB")
    skip(stream, 48)

    envelopes = []
    for _ in range(3):
        envelopes.append(read_envelope(stream))
        skip(stream, 2)

    lfo1 = read_lfo(stream)
    skip(stream, 1)
    lfo2 = read_lfo(stream)
    lfo_lag1 = read_value(stream, "B")
    skip(stream, 1)
    lfo_lag2 = read_value(stream, "B")
    skip(stream, 20)

    cords = [read_cord(stream) for _ in range(NUM_CORDS)]
    zones = [read_zone(stream) for _ in range(num_zones)]

    voice = Voice(
        group=group,
        key_range=key_range,
        velocity_range=velocity_range,
        realtime_range=realtime_range,
        key_assign_group=AssignGroup(assign_group),
        key_delay=key_delay,
        sample_offset=byte_to_percent(sample_offset),
        transpose=transpose,
        coarse_tune=coarse_tune,
        fine_tune=byte_to_fine_tune(fine_tune),
        glide_rate=glide_rate,
        glide_curve=GlideCurve(glide_curve),
        fixed_pitch=bool(fixed_pitch),
        key_mode=KeyMode(key_mode),
        chorus_width=byte_to_chorus_width(chorus_width),
        chorus_amount=ceil_places(byte_to_percent(chorus_amount), 2),
        chorus_init_itd=chorus_init_itd,
        key_latch=bool(key_latch),
        volume=volume,
        pan=pan,
        amp_env_dyn_range=amp_env_dyn_range,
        filter_type=FilterType(filter_type),
        filter_frequency=byte_to_filter_freq(filter_freq),
        filter_resonance=ceil_places(byte_to_percent(filter_res), 1),
        amp_env=envelopes[0],
        filter_env=envelopes[1],
        aux_env=envelopes[2],
        lfo1=lfo1,
        lfo2=lfo2,
        lfo_lag1=lfo_lag1,
        lfo_lag2=lfo_lag2,
        cords=cords,
        zones=zones,
    )
    return voice, True


def read_preset(stream: BinaryIO) -> Preset:
    """
    Read a preset record from the start of an ``E4P1`` payload.

    A preset whose header data size is not 82 keeps its name and index
    but no voices.
    """
    index = read_value(stream, ">H")
    name = decode_name(read_exact(stream, NAME_LENGTH))
    data_size = read_value(stream, ">H")

    if data_size != PRESET_DATA_SIZE:
        log.warning(f"Preset {name!r}: unexpected header size {data_size}, skipping voices")
        return Preset(name=name, index=index)

    num_voices = read_value(stream, ">H")
    skip(stream, 4)
    transpose, volume = read_struct(stream, "bb")
    skip(stream, 28)  # reserved + magic
    initial_controllers = list(read_exact(stream, 4))
    skip(stream, 24)

    voices: List[Voice] = []
    for i in range(num_voices):
        voice, resumable = read_voice(stream)
        voices.append(voice)
        if not resumable:
            log.warning(f"Preset {name!r}: dropping voices {i + 1}-{num_voices - 1}")
            break

    return Preset(
        name=name,
        index=index,
        transpose=transpose,
        volume=volume,
        initial_controllers=initial_controllers,
        voices=voices,
    )
