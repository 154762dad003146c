"""
Bank data model - the top-level container for E4 bank contents.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, TypeVar

from e4bank.models.preset import AUTO_INDEX, MAX_PRESETS, Preset, SampleZone
from e4bank.models.sample import MAX_SAMPLES, Sample
from e4bank.models.sequence import MAX_SEQUENCES, Sequence

log = logging.getLogger(__name__)

T = TypeVar("T", Preset, Sample, Sequence)


def _add_entity(collection: List[T], entity: T, limit: int, kind: str) -> bool:
    if len(collection) >= limit:
        log.debug(f"Dropping {kind} {entity.name!r}: collection is full ({limit})")
        return False

    used = {existing.index for existing in collection}
    if entity.index == AUTO_INDEX:
        index = next(i for i in range(limit) if i not in used)
    else:
        index = entity.index
    if index in used:
        log.debug(f"Dropping {kind} {entity.name!r}: index {index} already used")
        return False

    entity.index = index

    collection.append(entity)
    return True


def _find_entity(collection: List[T], index: int) -> Optional[T]:
    for entity in collection:
        if entity.index == index:
            return entity
    return None


def _remove_entity(collection: List[T], index: int) -> bool:
    entity = _find_entity(collection, index)
    if entity is None:
        return False
    collection.remove(entity)
    return True


@dataclass
class Bank:
    """
    Complete E4 bank.

    Entities are kept in insertion order, which is also the order they are
    written in. Indices are unique within each collection; zones refer to
    samples by index only.

    Attributes:
        presets: Presets (max 1000)
        samples: Samples (max 1000)
        sequences: Sequences (max 1000)
        startup_preset: Preset selected at power-up (0xFFFF = none)
    """

    presets: List[Preset] = field(default_factory=list)
    samples: List[Sample] = field(default_factory=list)
    sequences: List[Sequence] = field(default_factory=list)
    startup_preset: int = 0

    def add_preset(self, preset: Preset) -> bool:
        """
        Add a preset.

        A preset with index 0xFFFF gets the lowest free slot. Adding to a full
        bank or reusing an index is silently ignored.

        Returns:
            True if the preset was added
        """
        return _add_entity(self.presets, preset, MAX_PRESETS, "preset")

    def add_sample(self, sample: Sample) -> bool:
        return _add_entity(self.samples, sample, MAX_SAMPLES, "sample")

    def add_sequence(self, sequence: Sequence) -> bool:
        return _add_entity(self.sequences, sequence, MAX_SEQUENCES, "sequence")

    def remove_preset(self, index: int) -> bool:
        return _remove_entity(self.presets, index)

    def remove_sample(self, index: int) -> bool:
        return _remove_entity(self.samples, index)

    def remove_sequence(self, index: int) -> bool:
        return _remove_entity(self.sequences, index)

    def get_preset(self, index: int) -> Optional[Preset]:
        return _find_entity(self.presets, index)

    def get_sample(self, index: int) -> Optional[Sample]:
        return _find_entity(self.samples, index)

    def get_sequence(self, index: int) -> Optional[Sequence]:
        return _find_entity(self.sequences, index)

    def has_sample(self, index: int) -> bool:
        return self.get_sample(index) is not None

    def sample_for_zone(self, zone: SampleZone) -> Optional[Sample]:
        """Resolve the sample a zone points at, or None if it is gone."""
        if not self.has_sample(zone.sample_index):
            return None
        return self.get_sample(zone.sample_index)

    def set_startup_preset(self, index: int) -> None:
        """
        Select the startup preset.

        0xFFFF means "none" and is always accepted. An index with no
        matching preset falls back to the first preset. Does nothing
        while the bank has no presets.
        """
        if not self.presets:
            return

        if index == AUTO_INDEX or self.get_preset(index) is not None:
            self.startup_preset = index
        else:
            self.startup_preset = self.presets[0].index

    def missing_sample_refs(self) -> List[tuple]:
        """
        Find zones whose sample index has no sample in this bank.

        Returns:
            List of (preset index, voice number, zone number, sample index)
        """
        missing = []
        for preset in self.presets:
            for v, voice in enumerate(preset.voices):
                for z, zone in enumerate(voice.zones):
                    if not self.has_sample(zone.sample_index):
                        missing.append((preset.index, v, z, zone.sample_index))
        return missing

    def __repr__(self) -> str:
        return (
            f"Bank(presets={len(self.presets)}, samples={len(self.samples)}, "
            f"sequences={len(self.sequences)}, startup={self.startup_preset})"
        )
