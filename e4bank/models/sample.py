"""
Sample data model.

E3 samples carry 16-bit PCM. A stereo sample is not interleaved: the
buffer holds the whole left channel followed by the whole right channel,
and the header points at each half with byte offsets.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from e4bank.models.enums import SampleChannel
from e4bank.models.preset import AUTO_INDEX, clamp_index
from e4bank.utils.units import clamp
from e4bank.utils.validation import normalize_name

MAX_SAMPLES = 1000
MIN_SAMPLE_RATE = 7000
MAX_SAMPLE_RATE = 192000
NUM_EXTRA_PARAMS = 8

# Byte offsets in the sample header are relative to the end of the
# 2-byte index field, so PCM data starts 92 bytes in.
SAMPLE_HEADER_ALLOWANCE = 92
BYTES_PER_SAMPLE = 2

MONO_LEFT_FLAG = 0x00200000
MONO_RIGHT_FLAG = 0x00400000
STEREO_FLAG = 0x00600000
LOOP_FLAG = 0x00010000
LOOP_IN_RELEASE_FLAG = 0x00080000


def channels_from_format(fmt: int) -> int:
    """Get the channel count encoded in a sample format word."""
    if fmt & STEREO_FLAG == STEREO_FLAG:
        return 2
    return 1


@dataclass
class LoopInfo:
    """Loop settings, with start/end in sample frames."""

    loop: bool = False
    loop_in_release: bool = False
    start: int = 0
    end: int = 0

    def to_format_flags(self) -> int:
        flags = 0
        if self.loop:
            flags |= LOOP_FLAG
        if self.loop_in_release:
            flags |= LOOP_IN_RELEASE_FLAG
        return flags


@dataclass
class SampleParams:
    """
    Byte offsets describing where each channel's data and loop live.

    All values are byte offsets into the on-disk sample body (header
    allowance included). The frame accessors convert them back.
    """

    reserved: int = 0
    start_l: int = SAMPLE_HEADER_ALLOWANCE
    start_r: int = SAMPLE_HEADER_ALLOWANCE
    end_l: int = 0
    end_r: int = 0
    loop_start_l: int = 0
    loop_start_r: int = 0
    loop_end_l: int = 0
    loop_end_r: int = 0

    @classmethod
    def compute(
        cls, num_samples: int, channels: int, loop_start: int = 0, loop_end: int = 0
    ) -> "SampleParams":
        """
        Compute offsets for a buffer of ``num_samples`` 16-bit values.

        Args:
            num_samples: Total sample count across both channels
            channels: 1 or 2
            loop_start: Loop start frame
            loop_end: Loop end frame
        """
        base = SAMPLE_HEADER_ALLOWANCE
        mono = channels == 1
        total_bytes = num_samples * BYTES_PER_SAMPLE

        params = cls(
            start_l=base,
            start_r=base if mono else num_samples + base,
            end_l=total_bytes + base - 2 if mono else num_samples + base - 2,
            end_r=total_bytes + base - 2,
        )
        params.set_loop_start(loop_start, num_samples, channels)
        params.set_loop_end(loop_end, num_samples, channels)
        return params

    def set_loop_start(self, loop_start: int, num_samples: int, channels: int) -> None:
        loop_start = clamp(loop_start, 0, max(num_samples - 1, 0))
        self.loop_start_l = loop_start * BYTES_PER_SAMPLE + self.start_l
        if channels == 1:
            self.loop_start_r = self.loop_start_l
        else:
            self.loop_start_r = loop_start * BYTES_PER_SAMPLE + self.start_r

    def set_loop_end(self, loop_end: int, num_samples: int, channels: int) -> None:
        loop_end = clamp(loop_end, 0, num_samples)
        self.loop_end_l = loop_end * BYTES_PER_SAMPLE + self.start_l - 2
        if channels == 1:
            self.loop_end_r = self.loop_end_l
        else:
            self.loop_end_r = loop_end * BYTES_PER_SAMPLE + self.start_r - 2

    def as_tuple(self) -> tuple:
        return (
            self.reserved,
            self.start_l,
            self.start_r,
            self.end_l,
            self.end_r,
            self.loop_start_l,
            self.loop_start_r,
            self.loop_end_l,
            self.loop_end_r,
        )

    @staticmethod
    def _frames(offset: int) -> int:
        return max(offset, 0) // BYTES_PER_SAMPLE

    @property
    def loop_start_l_frame(self) -> int:
        return self._frames(self.loop_start_l - SAMPLE_HEADER_ALLOWANCE)

    @property
    def loop_start_r_frame(self) -> int:
        return self._frames(self.loop_start_r - self.start_r)

    @property
    def loop_end_l_frame(self) -> int:
        return self._frames(self.loop_end_l - SAMPLE_HEADER_ALLOWANCE + 2)

    @property
    def loop_end_r_frame(self) -> int:
        return self._frames(self.loop_end_r - self.start_r + 2)

    @property
    def start_l_frame(self) -> int:
        return self._frames(self.start_l - SAMPLE_HEADER_ALLOWANCE)

    @property
    def start_r_frame(self) -> int:
        return self._frames(self.start_r - SAMPLE_HEADER_ALLOWANCE)

    @property
    def end_l_frame(self) -> int:
        return self._frames(self.end_l - SAMPLE_HEADER_ALLOWANCE + 2)

    @property
    def end_r_frame(self) -> int:
        return self._frames(self.end_r - SAMPLE_HEADER_ALLOWANCE + 2)


@dataclass
class Sample:
    """
    A PCM sample.

    Attributes:
        name: 16 character display name
        data: Signed 16-bit PCM values (left block then right block)
        sample_rate: Hz (7000-192000)
        channels: 1 or 2
        loop: Loop settings
        index: Sample slot; 0xFFFF asks the bank to assign the next one
        extra_params: Eight 32-bit words kept verbatim (always zero so far)
        params: On-disk byte offsets; computed from data and loop when
            not supplied
    """

    name: str = "Untitled"
    data: List[int] = field(default_factory=list)
    sample_rate: int = 44100
    channels: int = 1
    loop: LoopInfo = field(default_factory=LoopInfo)
    index: int = AUTO_INDEX
    extra_params: List[int] = field(default_factory=lambda: [0] * NUM_EXTRA_PARAMS)
    params: Optional[SampleParams] = None

    def __post_init__(self):
        self.name = normalize_name(self.name)
        self.index = clamp_index(self.index, MAX_SAMPLES)
        self.sample_rate = clamp(self.sample_rate, MIN_SAMPLE_RATE, MAX_SAMPLE_RATE)
        self.channels = clamp(self.channels, 1, 2)
        extra = list(self.extra_params)[:NUM_EXTRA_PARAMS]
        self.extra_params = extra + [0] * (NUM_EXTRA_PARAMS - len(extra))
        if self.params is None:
            self.update_params()

    def update_params(self) -> None:
        """Recompute byte offsets after changing data, channels or loop."""
        self.params = SampleParams.compute(
            len(self.data), self.channels, self.loop.start, self.loop.end
        )

    @property
    def is_stereo(self) -> bool:
        return self.channels == 2

    @property
    def frame_count(self) -> int:
        """Frames per channel."""
        return len(self.data) // self.channels

    @property
    def duration(self) -> float:
        """Length in seconds."""
        return self.frame_count / self.sample_rate

    @property
    def format_flags(self) -> int:
        flags = MONO_LEFT_FLAG if self.channels == 1 else STEREO_FLAG
        return flags | self.loop.to_format_flags()

    def channel_data(self, channel: SampleChannel = SampleChannel.MONO) -> List[int]:
        """
        Get the PCM values of one channel.

        Each slice ends at that channel's own sample-end boundary. Asking
        for the right channel of a mono sample returns the mono data.
        """
        if channel == SampleChannel.RIGHT and self.channels == 2:
            return self.data[self.params.start_r_frame : self.params.end_r_frame]
        return self.data[: self.params.end_l_frame]

    def __repr__(self) -> str:
        return (
            f"Sample(index={self.index}, name={self.name!r}, "
            f"channels={self.channels}, frames={self.frame_count}, rate={self.sample_rate})"
        )
