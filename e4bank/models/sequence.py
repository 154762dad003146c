"""
Sequence data model.

A bank sequence is a Standard MIDI File stored verbatim after a short
index/name header.
"""

import io
from dataclasses import dataclass

import mido

from e4bank.models.preset import AUTO_INDEX, clamp_index
from e4bank.utils.validation import normalize_name

MAX_SEQUENCES = 1000


@dataclass
class Sequence:
    """
    A MIDI sequence.

    Attributes:
        name: 16 character display name
        midi_data: Raw MIDI file bytes
        index: Sequence slot; 0xFFFF asks the bank to assign the next one
    """

    name: str = "Untitled"
    midi_data: bytes = b""
    index: int = AUTO_INDEX

    def __post_init__(self):
        self.name = normalize_name(self.name)
        self.index = clamp_index(self.index, MAX_SEQUENCES)
        self.midi_data = bytes(self.midi_data)

    @classmethod
    def from_midi_file(
        cls, midi: mido.MidiFile, name: str = "Untitled", index: int = AUTO_INDEX
    ) -> "Sequence":
        """Create a sequence from a mido MidiFile."""
        buffer = io.BytesIO()
        midi.save(file=buffer)
        return cls(name=name, midi_data=buffer.getvalue(), index=index)

    def to_midi_file(self) -> mido.MidiFile:
        """
        Parse the payload as a Standard MIDI File.

        Raises:
            OSError/EOFError/ValueError: If the payload is not a valid SMF
        """
        return mido.MidiFile(file=io.BytesIO(self.midi_data))

    def __repr__(self) -> str:
        return f"Sequence(index={self.index}, name={self.name!r}, size={len(self.midi_data)})"
