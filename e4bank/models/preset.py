"""
Preset data model - presets, voices and everything a voice owns.

A preset is an ordered stack of voices. Each voice binds one or more
sample zones to an amplifier, a filter, three envelopes, two LFOs and a
fixed bank of 24 modulation cords.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from e4bank.models.enums import (
    AssignGroup,
    CordDestination,
    CordSource,
    FilterType,
    GlideCurve,
    KeyMode,
    LFOShape,
)
from e4bank.utils.units import (
    MAX_FILTER_FREQUENCY,
    MAX_LFO_DELAY,
    MAX_LFO_RATE,
    MIN_FILTER_FREQUENCY,
    MIN_LFO_DELAY,
    MIN_LFO_RATE,
    clamp,
)
from e4bank.utils.validation import normalize_name

AUTO_INDEX = 0xFFFF

MAX_PRESETS = 1000
MAX_VOICES = 0xFFFF
MAX_ZONES = 255  # zone count is a single byte on disk
NUM_CORDS = 24

MIDI_NOTATION = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")
MIDI_OCTAVE_MIN = -2
MIDI_OCTAVE_MAX = 8

MIN_TRANSPOSE = -36
MAX_TRANSPOSE = 36
MIN_PRESET_TRANSPOSE = -12
MAX_PRESET_TRANSPOSE = 12
MIN_COARSE_TUNE = -72
MAX_COARSE_TUNE = 24
MIN_VOLUME = -96
MAX_VOLUME = 10
MIN_PAN = -64
MAX_PAN = 63
MAX_LFO_LAG = 10
MAX_ZONE_DATA = 127
MAX_KEY_DELAY = 10000
MAX_GROUP = 31

INITIAL_CONTROLLER_OFF = 0xFF


def clamp_index(index: int, maximum: int) -> int:
    """Clamp an entity index, leaving the auto-assign sentinel alone."""
    if index == AUTO_INDEX:
        return index
    return clamp(index, 0, maximum)


@dataclass
class ZoneRange:
    """
    Key, velocity or real-time range with fade-in/fade-out points.

    Stored on disk as four bytes in field order.
    """

    low: int = 0
    low_fade: int = 0
    high_fade: int = 0
    high: int = 127

    def __post_init__(self):
        self.clamp()

    def clamp(self) -> None:
        self.low = clamp(self.low, 0, MAX_ZONE_DATA)
        self.low_fade = clamp(self.low_fade, 0, MAX_ZONE_DATA)
        self.high_fade = clamp(self.high_fade, 0, MAX_ZONE_DATA)
        self.high = clamp(self.high, 0, MAX_ZONE_DATA)

    def contains(self, value: int) -> bool:
        return self.low <= value <= self.high


@dataclass
class MidiNote:
    """MIDI note as notation + octave (C3 = note 60)."""

    notation: str = "C"
    octave: int = 3

    def __post_init__(self):
        if self.notation not in MIDI_NOTATION:
            self.notation = "C"
        self.octave = clamp(self.octave, MIDI_OCTAVE_MIN, MIDI_OCTAVE_MAX)

    @classmethod
    def from_byte(cls, note: int) -> "MidiNote":
        return cls(notation=MIDI_NOTATION[note % 12], octave=note // 12 - 2)

    def to_byte(self) -> int:
        position = MIDI_NOTATION.index(self.notation)
        return clamp(12 + position + (self.octave + 1) * 12, 0, 127)

    def __str__(self) -> str:
        return f"{self.notation}{self.octave}"


@dataclass
class SampleZone:
    """
    A key/velocity range bound to one sample.

    The sample is referenced by its bank index, not by object; resolve it
    through ``Bank.sample_for_zone``.
    """

    sample_index: int = 0
    original_key: MidiNote = field(default_factory=MidiNote)
    key_range: ZoneRange = field(default_factory=ZoneRange)
    velocity_range: ZoneRange = field(default_factory=ZoneRange)
    fine_tune: float = 0.0  # cents, -100 to +100
    volume: int = 0  # dB, -96 to +10
    pan: int = 0  # -64 to +63

    def __post_init__(self):
        self.clamp()

    def clamp(self) -> None:
        self.key_range.clamp()
        self.velocity_range.clamp()
        self.sample_index = clamp(self.sample_index, 0, 0xFFFF)
        self.fine_tune = clamp(self.fine_tune, -100.0, 100.0)
        self.volume = clamp(self.volume, MIN_VOLUME, MAX_VOLUME)
        self.pan = clamp(self.pan, MIN_PAN, MAX_PAN)


@dataclass
class Envelope:
    """
    Six-stage EOS envelope as (rate byte, level byte) pairs.

    Either attack stage can act as "attack": with attack1 at level 0 the
    second stage does the work, with attack1 at full level the first one
    does. Both stages always exist on disk.
    """

    attack1_rate: int = 0
    attack1_level: int = 0
    attack2_rate: int = 0
    attack2_level: int = 127
    decay1_rate: int = 0  # hold
    decay1_level: int = 127
    decay2_rate: int = 0  # decay
    decay2_level: int = 127  # sustain
    release1_rate: int = 0
    release1_level: int = 0
    release2_rate: int = 0
    release2_level: int = 0

    def stages(self) -> List[tuple]:
        """Return the six stages as (rate, level) pairs in disk order."""
        return [
            (self.attack1_rate, self.attack1_level),
            (self.attack2_rate, self.attack2_level),
            (self.decay1_rate, self.decay1_level),
            (self.decay2_rate, self.decay2_level),
            (self.release1_rate, self.release1_level),
            (self.release2_rate, self.release2_level),
        ]

    @classmethod
    def from_stages(cls, stages: List[tuple]) -> "Envelope":
        values = [v for stage in stages for v in stage]
        return cls(*values)


@dataclass
class LFO:
    """Low frequency oscillator settings."""

    rate: float = MIN_LFO_RATE  # Hz
    shape: LFOShape = LFOShape.TRIANGLE
    delay: float = 0.0  # seconds
    variation: float = 0.0  # percent
    key_sync: bool = False

    def __post_init__(self):
        self.clamp()

    def clamp(self) -> None:
        self.rate = clamp(self.rate, MIN_LFO_RATE, MAX_LFO_RATE)
        self.delay = clamp(self.delay, MIN_LFO_DELAY, MAX_LFO_DELAY)
        self.variation = clamp(self.variation, 0.0, 100.0)
        self.shape = LFOShape(self.shape)


@dataclass
class Cord:
    """Modulation routing from a source to a destination."""

    source: CordSource = CordSource.OFF
    destination: CordDestination = CordDestination.OFF
    amount: float = 0.0  # percent, -100 to +100

    def __post_init__(self):
        self.clamp()

    def clamp(self) -> None:
        self.source = CordSource(self.source)
        self.destination = CordDestination(self.destination)
        self.amount = clamp(self.amount, -100.0, 100.0)

    @property
    def is_off(self) -> bool:
        return self.source == CordSource.OFF and self.destination == CordDestination.OFF


def create_default_cords() -> List[Cord]:
    """
    Create the factory cord bank for a new voice.

    The first eight slots carry the standard EOS routing; the rest are
    unused (OFF -> OFF).
    """
    cords = [
        Cord(CordSource.VEL_POLARITY_LESS, CordDestination.AMP_VOLUME, 0.0),
        Cord(CordSource.PITCH_WHEEL, CordDestination.PITCH, 0.0),
        Cord(CordSource.LFO1_POLARITY_CENTER, CordDestination.PITCH, 0.0),
        Cord(CordSource.MOD_WHEEL, CordDestination.CORD_3_AMT, 6.0),
        Cord(CordSource.VEL_POLARITY_LESS, CordDestination.FILTER_FREQ, 0.0),
        Cord(CordSource.FILTER_ENV_POLARITY_POS, CordDestination.FILTER_FREQ, 0.0),
        Cord(CordSource.KEY_POLARITY_CENTER, CordDestination.FILTER_FREQ, 0.0),
        Cord(CordSource.FOOTSWITCH_1, CordDestination.KEY_SUSTAIN, 100.0),
    ]
    cords.extend(Cord() for _ in range(NUM_CORDS - len(cords)))
    return cords


def _default_lfo() -> LFO:
    return LFO(rate=5.79, shape=LFOShape.SINE, delay=0.0, variation=0.0, key_sync=True)


@dataclass
class Voice:
    """
    One playable layer of a preset.

    Attributes:
        group: Voice group (0-31, shown as 1-32)
        key_range / velocity_range / realtime_range: Trigger windows
        key_delay: Milliseconds (0-10000)
        sample_offset: Percent of sample start offset
        fine_tune: Cents (-100 to +100)
        glide_rate: Raw byte (0 = 0 s, 127 = 32.737 s)
        chorus_width / chorus_amount: Percent
        chorus_init_itd: Raw inter-aural delay byte
        amp_env_dyn_range: Raw dynamic range byte
        filter_frequency: Hz (57-20000)
        filter_resonance: Percent
        cords: Exactly 24 modulation cords
        zones: Sample zones (max 255)
    """

    group: int = 0
    key_range: ZoneRange = field(default_factory=ZoneRange)
    velocity_range: ZoneRange = field(default_factory=ZoneRange)
    realtime_range: ZoneRange = field(default_factory=ZoneRange)
    key_assign_group: AssignGroup = AssignGroup.POLY_ALL
    key_delay: int = 0
    sample_offset: float = 0.0
    transpose: int = 0
    coarse_tune: int = 0
    fine_tune: float = 0.0
    glide_rate: int = 0
    glide_curve: GlideCurve = GlideCurve.LINEAR
    fixed_pitch: bool = False
    key_mode: KeyMode = KeyMode.POLY_NORMAL
    chorus_width: float = 100.0
    chorus_amount: float = 0.0
    chorus_init_itd: int = 0
    key_latch: bool = False
    volume: int = 0
    pan: int = 0
    amp_env_dyn_range: int = 0
    filter_type: FilterType = FilterType.NO_FILTER
    filter_frequency: int = MAX_FILTER_FREQUENCY
    filter_resonance: float = 0.0
    amp_env: Envelope = field(default_factory=Envelope)
    filter_env: Envelope = field(default_factory=Envelope)
    aux_env: Envelope = field(default_factory=Envelope)
    lfo1: LFO = field(default_factory=_default_lfo)
    lfo2: LFO = field(default_factory=_default_lfo)
    lfo_lag1: int = 0
    lfo_lag2: int = 0
    cords: List[Cord] = field(default_factory=create_default_cords)
    zones: List[SampleZone] = field(default_factory=list)

    def __post_init__(self):
        self.clamp()

    def clamp(self) -> None:
        """Clamp every ranged field into its documented range."""
        self.group = clamp(self.group, 0, MAX_GROUP)
        self.key_delay = clamp(self.key_delay, 0, MAX_KEY_DELAY)
        self.sample_offset = clamp(self.sample_offset, 0.0, 100.0)
        self.transpose = clamp(self.transpose, MIN_TRANSPOSE, MAX_TRANSPOSE)
        self.coarse_tune = clamp(self.coarse_tune, MIN_COARSE_TUNE, MAX_COARSE_TUNE)
        self.fine_tune = clamp(self.fine_tune, -100.0, 100.0)
        self.chorus_width = clamp(self.chorus_width, 0.0, 100.0)
        self.chorus_amount = clamp(self.chorus_amount, 0.0, 100.0)
        self.volume = clamp(self.volume, MIN_VOLUME, MAX_VOLUME)
        self.pan = clamp(self.pan, MIN_PAN, MAX_PAN)
        self.filter_frequency = clamp(
            self.filter_frequency, MIN_FILTER_FREQUENCY, MAX_FILTER_FREQUENCY
        )
        self.filter_resonance = clamp(self.filter_resonance, 0.0, 100.0)
        self.lfo_lag1 = clamp(self.lfo_lag1, 0, MAX_LFO_LAG)
        self.lfo_lag2 = clamp(self.lfo_lag2, 0, MAX_LFO_LAG)

        ranges = (self.key_range, self.velocity_range, self.realtime_range)
        for part in ranges + (self.lfo1, self.lfo2):
            part.clamp()
        for part in self.cords + self.zones:
            part.clamp()

        # The cord bank is a fixed-size array on disk
        if len(self.cords) > NUM_CORDS:
            del self.cords[NUM_CORDS:]
        while len(self.cords) < NUM_CORDS:
            self.cords.append(Cord())

    def get_cord_amount(self, source: CordSource, destination: CordDestination) -> Optional[float]:
        """
        Get the amount of the cord routing source to destination.

        Returns:
            Amount in percent, or None if no such cord exists
        """
        for cord in self.cords:
            if cord.source == source and cord.destination == destination:
                return cord.amount
        return None

    def has_cord(self, source: CordSource) -> bool:
        """Check if any cord reads from the given source."""
        return any(cord.source == source for cord in self.cords)

    def replace_or_add_cord(self, cord: Cord) -> bool:
        """
        Update a matching cord's amount, or fill the first unused slot.

        Returns:
            False when the cord bank is full and nothing changed
        """
        for existing in self.cords:
            if existing.source == cord.source and existing.destination == cord.destination:
                existing.amount = clamp(cord.amount, -100.0, 100.0)
                return True

        for i, existing in enumerate(self.cords):
            if existing.is_off:
                self.cords[i] = cord
                return True

        return False

    def add_zone(self, zone: SampleZone) -> None:
        if len(self.zones) < MAX_ZONES:
            self.zones.append(zone)


@dataclass
class Preset:
    """
    A playable preset.

    Attributes:
        index: Preset slot; 0xFFFF asks the bank to assign the next one
        name: 16 character display name
        transpose: Semitones (-12 to +12)
        volume: dB (-96 to +10)
        initial_controllers: Initial values for MIDI controllers A-D
            (255 = off)
        voices: Voices in layering order
    """

    name: str = "Untitled"
    index: int = AUTO_INDEX
    transpose: int = 0
    volume: int = 0
    initial_controllers: List[int] = field(
        default_factory=lambda: [INITIAL_CONTROLLER_OFF] * 4
    )
    voices: List[Voice] = field(default_factory=list)

    def __post_init__(self):
        self.name = normalize_name(self.name)
        self.index = clamp_index(self.index, MAX_PRESETS)
        self.clamp()

    def clamp(self) -> None:
        """Clamp the header fields; voices clamp themselves on encode."""
        self.transpose = clamp(self.transpose, MIN_PRESET_TRANSPOSE, MAX_PRESET_TRANSPOSE)
        self.volume = clamp(self.volume, MIN_VOLUME, MAX_VOLUME)
        controllers = list(self.initial_controllers)[:4]
        controllers += [INITIAL_CONTROLLER_OFF] * (4 - len(controllers))
        self.initial_controllers = [clamp(c, 0, 0xFF) for c in controllers]

    def add_voice(self, voice: Voice) -> None:
        if len(self.voices) < MAX_VOICES:
            self.voices.append(voice)

    @property
    def zone_count(self) -> int:
        return sum(len(v.zones) for v in self.voices)

    def __repr__(self) -> str:
        return f"Preset(index={self.index}, name={self.name!r}, voices={len(self.voices)})"
