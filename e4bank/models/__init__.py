"""Data models for E4 bank representation."""

from e4bank.models.bank import Bank
from e4bank.models.enums import (
    AssignGroup,
    CordDestination,
    CordSource,
    FilterType,
    GlideCurve,
    KeyMode,
    LFOShape,
    SampleChannel,
)
from e4bank.models.preset import (
    AUTO_INDEX,
    LFO,
    Cord,
    Envelope,
    MidiNote,
    Preset,
    SampleZone,
    Voice,
    ZoneRange,
)
from e4bank.models.sample import LoopInfo, Sample, SampleParams
from e4bank.models.sequence import Sequence
from e4bank.models.startup import MidiChannel, StartupSetup

__all__ = [
    "Bank",
    "AssignGroup",
    "CordDestination",
    "CordSource",
    "FilterType",
    "GlideCurve",
    "KeyMode",
    "LFOShape",
    "SampleChannel",
    "AUTO_INDEX",
    "LFO",
    "Cord",
    "Envelope",
    "MidiNote",
    "Preset",
    "SampleZone",
    "Voice",
    "ZoneRange",
    "LoopInfo",
    "Sample",
    "SampleParams",
    "Sequence",
    "MidiChannel",
    "StartupSetup",
]
