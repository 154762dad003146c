"""Tests for the bank container model."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from e4bank.models import AUTO_INDEX, Bank, Preset, Sample, SampleZone, Sequence, Voice
from e4bank.models.preset import MAX_PRESETS, MAX_ZONES


class TestAddEntities:
    """Index assignment and duplicate handling."""

    def test_auto_index_uses_next_slot(self):
        bank = Bank()
        assert bank.add_preset(Preset(name="A"))
        assert bank.add_preset(Preset(name="B"))

        assert [p.index for p in bank.presets] == [0, 1]

    def test_explicit_index_kept(self):
        bank = Bank()
        assert bank.add_sample(Sample(name="Snare", index=42))
        assert bank.get_sample(42).name == "Snare           "

    def test_duplicate_index_rejected(self):
        bank = Bank()
        assert bank.add_sequence(Sequence(name="One", index=3))
        assert not bank.add_sequence(Sequence(name="Two", index=3))

        assert len(bank.sequences) == 1
        assert bank.get_sequence(3).name.strip() == "One"

    def test_auto_index_skips_taken_slots(self):
        bank = Bank()
        assert bank.add_preset(Preset(name="Slot1", index=1))
        assert bank.add_preset(Preset(name="Slot0"))
        assert bank.add_preset(Preset(name="Slot2"))

        assert [p.index for p in bank.presets] == [1, 0, 2]

    def test_auto_index_fills_lowest_gap(self):
        bank = Bank()
        for index in (0, 1, 3):
            bank.add_sample(Sample(index=index))

        assert bank.add_sample(Sample(name="Gap"))
        assert bank.get_sample(2).name.strip() == "Gap"

    def test_rejected_entity_keeps_auto_index(self):
        bank = Bank()
        for i in range(MAX_PRESETS):
            bank.presets.append(Preset(index=i))
        extra = Preset(name="Extra")

        assert not bank.add_preset(extra)
        assert extra.index == AUTO_INDEX

    def test_full_collection_rejects(self):
        bank = Bank()
        for i in range(MAX_PRESETS):
            bank.presets.append(Preset(index=i))

        assert not bank.add_preset(Preset(name="Extra"))
        assert len(bank.presets) == MAX_PRESETS

    def test_insertion_order_preserved(self):
        bank = Bank()
        for index in (7, 2, 5):
            bank.add_sample(Sample(index=index))

        assert [s.index for s in bank.samples] == [7, 2, 5]


class TestRemoveAndLookup:
    """Lookup by index and removal."""

    def test_remove_found_entity(self):
        bank = Bank()
        for index in (4, 8):
            bank.add_preset(Preset(index=index))

        assert bank.remove_preset(8)
        assert [p.index for p in bank.presets] == [4]

    def test_remove_missing_returns_false(self):
        bank = Bank()
        bank.add_sample(Sample(index=1))

        assert not bank.remove_sample(2)
        assert not bank.remove_sequence(0)
        assert len(bank.samples) == 1

    def test_get_missing_returns_none(self):
        bank = Bank()
        assert bank.get_preset(0) is None
        assert bank.get_sample(0) is None
        assert bank.get_sequence(0) is None


class TestStartupPreset:
    """Startup preset selection."""

    def test_existing_preset(self):
        bank = Bank()
        bank.add_preset(Preset(index=3))
        bank.add_preset(Preset(index=9))

        bank.set_startup_preset(9)
        assert bank.startup_preset == 9

    def test_unknown_falls_back_to_first(self):
        bank = Bank()
        bank.add_preset(Preset(index=3))
        bank.add_preset(Preset(index=9))

        bank.set_startup_preset(500)
        assert bank.startup_preset == 3

    def test_none_sentinel_accepted(self):
        bank = Bank()
        bank.add_preset(Preset())

        bank.set_startup_preset(AUTO_INDEX)
        assert bank.startup_preset == AUTO_INDEX

    def test_empty_bank_ignores(self):
        bank = Bank(startup_preset=5)
        bank.set_startup_preset(1)
        assert bank.startup_preset == 5


class TestSampleReferences:
    """Zones refer to samples by index only."""

    def _bank_with_zone(self, sample_index: int) -> Bank:
        bank = Bank()
        bank.add_sample(Sample(name="Only", index=0))
        voice = Voice()
        voice.add_zone(SampleZone(sample_index=sample_index))
        preset = Preset()
        preset.add_voice(voice)
        bank.add_preset(preset)
        return bank

    def test_resolves_sample(self):
        bank = self._bank_with_zone(0)
        zone = bank.presets[0].voices[0].zones[0]

        assert bank.sample_for_zone(zone).name.strip() == "Only"
        assert bank.missing_sample_refs() == []

    def test_missing_sample(self):
        bank = self._bank_with_zone(12)
        zone = bank.presets[0].voices[0].zones[0]

        assert bank.sample_for_zone(zone) is None
        assert bank.missing_sample_refs() == [(0, 0, 0, 12)]

    def test_removed_sample_leaves_dangling_zone(self):
        bank = self._bank_with_zone(0)
        bank.remove_sample(0)

        assert bank.missing_sample_refs() == [(0, 0, 0, 0)]

    def test_fixture_bank(self, bank):
        assert repr(bank) == "Bank(presets=2, samples=2, sequences=1, startup=1)"
        assert bank.missing_sample_refs() == []
        assert bank.presets[0].zone_count == 3


class TestVoiceLimits:
    """Per-voice collection limits."""

    def test_zone_count_capped(self):
        voice = Voice()
        for _ in range(MAX_ZONES + 10):
            voice.add_zone(SampleZone())

        assert len(voice.zones) == MAX_ZONES == 255
