"""
Sample record codec (``E3S1`` payload).

Only the index is big-endian. The rest of the header and the PCM body
are little-endian, as the E3 sample format was inherited from the
earlier EIII.

    0x00    2   sample index (BE)
    0x02   16   name
    0x12   36   9 x u32 byte offsets (see SampleParams)
    0x36    4   sample rate
    0x3A    4   format flags
    0x3E   32   8 x u32 extra parameters
    0x5E  ...   int16 PCM, left block then right block
"""

import logging
import struct
from typing import BinaryIO

from e4bank.formats.e4b.binary import read_exact, read_struct, read_value
from e4bank.formats.e4b.chunk import Chunk
from e4bank.formats.e4b.constants import NAME_LENGTH, SAMPLE_HEADER_SIZE
from e4bank.models.sample import (
    BYTES_PER_SAMPLE,
    LOOP_FLAG,
    LOOP_IN_RELEASE_FLAG,
    NUM_EXTRA_PARAMS,
    LoopInfo,
    Sample,
    SampleParams,
    channels_from_format,
)
from e4bank.utils.units import clamp
from e4bank.utils.validation import E4BFormatError, decode_name, encode_name

log = logging.getLogger(__name__)

PARAMS_FORMAT = "<9I"


def write_sample(chunk: Chunk, sample: Sample) -> None:
    """Append a sample record to a chunk."""
    chunk.pack(">H", sample.index & 0xFFFF)
    chunk.append(encode_name(sample.name, NAME_LENGTH))
    chunk.pack(PARAMS_FORMAT, *(v & 0xFFFFFFFF for v in sample.params.as_tuple()))
    chunk.pack("<II", sample.sample_rate, sample.format_flags)
    chunk.pack(f"<{NUM_EXTRA_PARAMS}I", *(v & 0xFFFFFFFF for v in sample.extra_params))

    pcm = [clamp(v, -32768, 32767) for v in sample.data]
    chunk.pack(f"<{len(pcm)}h", *pcm)


def read_sample(stream: BinaryIO, payload_size: int) -> Sample:
    """
    Read a sample record.

    Args:
        stream: Positioned at the start of the payload
        payload_size: Full payload size (header + PCM)

    Raises:
        E4BFormatError: If the payload is shorter than the header
    """
    if payload_size < SAMPLE_HEADER_SIZE:
        raise E4BFormatError(f"Sample payload too small: {payload_size} bytes")

    index = read_value(stream, ">H")
    name = decode_name(read_exact(stream, NAME_LENGTH))
    params = SampleParams(*read_struct(stream, PARAMS_FORMAT))
    sample_rate, fmt = read_struct(stream, "<II")
    extra_params = list(read_struct(stream, f"<{NUM_EXTRA_PARAMS}I"))

    num_samples = (payload_size - SAMPLE_HEADER_SIZE) // BYTES_PER_SAMPLE
    data = list(read_struct(stream, f"<{num_samples}h"))

    loop = LoopInfo(
        loop=bool(fmt & LOOP_FLAG),
        loop_in_release=bool(fmt & LOOP_IN_RELEASE_FLAG),
        start=params.loop_start_l_frame,
        end=params.loop_end_l_frame,
    )

    log.debug(f"Sample {index} {name!r}: {num_samples} values at {sample_rate} Hz")

    return Sample(
        name=name,
        data=data,
        sample_rate=sample_rate,
        channels=channels_from_format(fmt),
        loop=loop,
        index=index,
        extra_params=extra_params,
        params=params,
    )
