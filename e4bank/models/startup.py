"""
Startup multi-setup model (the ``EMSt`` chunk).

Holds the preset selected at power-up, the global tempo, and the state of
all 32 MIDI channels.
"""

from dataclasses import dataclass, field
from typing import List

from e4bank.models.preset import AUTO_INDEX, MAX_PAN, MIN_PAN
from e4bank.utils.units import clamp
from e4bank.utils.validation import normalize_name

NUM_MIDI_CHANNELS = 32
NUM_CHANNEL_CONTROLLERS = 16
MIN_TEMPO = 20
MAX_TEMPO = 240

AUX_OFF = 0
AUX_ON = 255


@dataclass
class MidiChannel:
    """
    Per-channel mixer state.

    The reserved byte groups are kept so a read/write cycle reproduces
    them; their meaning is unknown.
    """

    volume: int = 127
    pan: int = 0
    reserved1: bytes = bytes(3)
    aux: int = AUX_ON
    controllers: List[int] = field(default_factory=lambda: [0] * NUM_CHANNEL_CONTROLLERS)
    reserved2: bytes = bytes([0, 0, 0, 0, 127, 0, 0, 0])
    preset: int = AUTO_INDEX  # 0xFFFF = none

    def __post_init__(self):
        self.volume = clamp(self.volume, 0, 127)
        self.pan = clamp(self.pan, MIN_PAN, MAX_PAN)
        self.aux = clamp(self.aux, 0, 255)
        controllers = [clamp(c, 0, 0xFF) for c in self.controllers][:NUM_CHANNEL_CONTROLLERS]
        self.controllers = controllers + [0] * (NUM_CHANNEL_CONTROLLERS - len(controllers))
        self.reserved1 = bytes(self.reserved1)[:3].ljust(3, b"\0")
        self.reserved2 = bytes(self.reserved2)[:8].ljust(8, b"\0")

    @property
    def aux_enabled(self) -> bool:
        return self.aux != AUX_OFF


@dataclass
class StartupSetup:
    """
    The startup multi-setup record.

    Attributes:
        name: 16 character name
        current_preset: Preset index selected at startup
        channels: 32 MIDI channel records
        tempo: Global tempo (20-240)
    """

    name: str = "Untitled MSetup "
    current_preset: int = 0
    channels: List[MidiChannel] = field(
        default_factory=lambda: [MidiChannel() for _ in range(NUM_MIDI_CHANNELS)]
    )
    tempo: int = MIN_TEMPO

    def __post_init__(self):
        self.name = normalize_name(self.name)
        self.current_preset = clamp(self.current_preset, 0, 0xFFFF)
        self.tempo = clamp(self.tempo, MIN_TEMPO, MAX_TEMPO)
        channels = list(self.channels)[:NUM_MIDI_CHANNELS]
        channels += [MidiChannel() for _ in range(NUM_MIDI_CHANNELS - len(channels))]
        self.channels = channels
