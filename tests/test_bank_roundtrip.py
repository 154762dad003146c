"""Tests for the E4B container reader and writer."""

import struct
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from e4bank.formats.e4b.chunk import Chunk
from e4bank.formats.e4b.constants import STARTUP_SIZE
from e4bank.formats.e4b.preset_codec import write_preset
from e4bank.formats.e4b.reader import E4BReader, E4BReadResult, read_e4b
from e4bank.formats.e4b.writer import E4BWriter, write_e4b
from e4bank.models import Bank, Preset, Sample
from e4bank.utils.validation import E4BFormatError

FIRST_DATA_OFFSET = 8 + 4 + 8  # FORM header, E4B0, TOC1 header


def build_container(records) -> bytes:
    """Assemble a FORM/E4B0 file from (chunk, index, name) records."""
    form = Chunk("FORM")
    form.append(b"E4B0")
    toc = Chunk("TOC1")
    form.children.append(toc)

    offset = FIRST_DATA_OFFSET + 32 * len(records)
    for chunk, index, name in records:
        toc.children.append(E4BWriter._toc_entry(chunk, offset, index, name))
        offset += chunk.full_size(True)
    for chunk, _, _ in records:
        form.children.append(chunk)

    return form.to_bytes()


def opaque_chunk(tag: str, size: int = 10) -> Chunk:
    chunk = Chunk(tag)
    chunk.pad(size)
    return chunk


class TestContainerLayout:
    """Byte layout of a written bank."""

    def test_header(self, bank_bytes):
        assert bank_bytes[0:4] == b"FORM"
        assert struct.unpack(">I", bank_bytes[4:8])[0] == len(bank_bytes) - 8
        assert bank_bytes[8:12] == b"E4B0"
        assert bank_bytes[12:16] == b"TOC1"
        assert struct.unpack(">I", bank_bytes[16:20])[0] == 5 * 32

    def test_toc_entries(self, bank_bytes):
        entries = E4BReader.read_toc(bank_bytes)

        assert [e.tag for e in entries] == ["E4P1", "E4P1", "E3S1", "E3S1", "E4s1"]
        assert [e.index for e in entries] == [0, 1, 0, 1, 0]
        assert entries[0].offset == FIRST_DATA_OFFSET + 5 * 32
        assert entries[0].name == "Piano           "
        assert entries[1].name == "Untitled        "
        assert entries[4].name == "Groove          "
        assert [e.position for e in entries] == [20 + 32 * i for i in range(5)]

    def test_every_offset_points_at_its_chunk(self, bank_bytes):
        for entry in E4BReader.read_toc(bank_bytes):
            header = bank_bytes[entry.offset : entry.offset + 8]
            assert header[:4] == entry.tag.encode("ascii")
            assert struct.unpack(">I", header[4:])[0] == entry.payload_size
            index = struct.unpack(">H", bank_bytes[entry.offset + 8 : entry.offset + 10])[0]
            assert index == entry.index

    def test_chunks_are_contiguous(self, bank_bytes):
        entries = E4BReader.read_toc(bank_bytes)
        for current, following in zip(entries, entries[1:]):
            assert current.end == following.offset

    def test_startup_block_follows_data(self, bank_bytes):
        last = E4BReader.read_toc(bank_bytes)[-1]

        assert bank_bytes[last.end : last.end + 4] == b"EMSt"
        assert struct.unpack(">I", bank_bytes[last.end + 4 : last.end + 8])[0] == STARTUP_SIZE
        assert len(bank_bytes) == last.end + 8 + STARTUP_SIZE
        startup = bank_bytes[last.end + 8 :]
        assert startup[2:18] == b"Untitled MSetup "
        assert startup[22:24] == b"\x00\x01"

    def test_empty_sample_skipped(self, bank):
        bank.add_sample(Sample(name="Silence"))
        data = E4BWriter().to_bytes(bank)

        tags = [e.tag for e in E4BReader.read_toc(data)]
        assert tags.count("E3S1") == 2

    def test_empty_bank_has_no_toc_entries(self):
        data = E4BWriter().to_bytes(Bank())

        assert struct.unpack(">I", data[16:20])[0] == 0
        assert data[20:24] == b"EMSt"


class TestRoundTrip:
    """Reading back a written bank."""

    def test_counts_and_startup(self, bank_bytes):
        bank = E4BReader().parse_bytes(bank_bytes)

        assert repr(bank) == "Bank(presets=2, samples=2, sequences=1, startup=1)"

    def test_presets(self, bank_bytes):
        bank = E4BReader().parse_bytes(bank_bytes)
        piano = bank.get_preset(0)

        assert piano.name == "Piano           "
        assert piano.transpose == 2
        assert piano.volume == -3
        assert piano.initial_controllers == [0, 64, 127, 255]
        assert [len(v.zones) for v in piano.voices] == [2, 1]
        assert piano.voices[1].zones[0].sample_index == 1

    def test_samples(self, bank_bytes, mono_sample, stereo_sample):
        bank = E4BReader().parse_bytes(bank_bytes)

        kick = bank.get_sample(0)
        assert kick.data == mono_sample.data
        assert kick.loop.loop
        assert (kick.loop.start, kick.loop.end) == (10, 90)

        pad = bank.get_sample(1)
        assert pad.is_stereo
        assert pad.sample_rate == 48000
        assert pad.data == stereo_sample.data

    def test_sequence(self, bank_bytes, midi_bytes):
        bank = E4BReader().parse_bytes(bank_bytes)

        groove = bank.get_sequence(0)
        assert groove.midi_data == midi_bytes
        assert groove.to_midi_file().ticks_per_beat == 96

    def test_every_zone_resolves(self, bank_bytes):
        bank = E4BReader().parse_bytes(bank_bytes)
        assert bank.missing_sample_refs() == []

    def test_second_pass_has_same_layout(self, bank_bytes):
        bank = E4BReader().parse_bytes(bank_bytes)
        rewritten = E4BWriter().to_bytes(bank)

        first = [(e.tag, e.size, e.offset, e.index, e.name) for e in E4BReader.read_toc(bank_bytes)]
        second = [(e.tag, e.size, e.offset, e.index, e.name) for e in E4BReader.read_toc(rewritten)]
        assert first == second
        assert len(rewritten) == len(bank_bytes)

    def test_single_untitled_preset(self):
        bank = Bank()
        bank.add_preset(Preset())

        parsed = E4BReader().parse_bytes(E4BWriter().to_bytes(bank))
        assert [(p.index, p.name, len(p.voices)) for p in parsed.presets] == [
            (0, "Untitled        ", 0)
        ]
        assert parsed.startup_preset == 0

    def test_missing_startup_preset_falls_back(self, bank):
        bank.startup_preset = 99
        parsed = E4BReader().parse_bytes(E4BWriter().to_bytes(bank))
        assert parsed.startup_preset == 0


class TestReaderErrors:
    """Malformed containers."""

    def test_not_form(self):
        with pytest.raises(E4BFormatError, match="FORM"):
            E4BReader().parse_bytes(b"RIFF\x00\x00\x00\x04WAVE")

    def test_wrong_form_type(self):
        with pytest.raises(E4BFormatError, match="FORM type"):
            E4BReader().parse_bytes(b"FORM\x00\x00\x00\x0cE4B1TOC1\x00\x00\x00\x00")

    def test_missing_toc(self):
        with pytest.raises(E4BFormatError, match="TOC1"):
            E4BReader().parse_bytes(b"FORM\x00\x00\x00\x0cE4B0XXXX\x00\x00\x00\x00")

    def test_empty_toc(self):
        data = E4BWriter().to_bytes(Bank())
        with pytest.raises(E4BFormatError, match="empty"):
            E4BReader().parse_bytes(data)

    def test_truncated_header(self):
        with pytest.raises(E4BFormatError, match="Truncated"):
            E4BReader().parse_bytes(b"FORM")

    def test_unknown_tag(self):
        data = build_container([(opaque_chunk("ZZZZ"), 0, "Mystery")])
        with pytest.raises(E4BFormatError, match="Unknown chunk"):
            E4BReader().parse_bytes(data)

    def test_skipped_tags(self):
        preset = Chunk("E4P1")
        write_preset(preset, Preset(name="Kept", index=4))
        data = build_container(
            [
                (opaque_chunk("E4Ma"), 0, "Master"),
                (preset, 4, "Kept"),
                (opaque_chunk("EMS0", 20), 0, "Setup"),
            ]
        )

        bank = E4BReader().parse_bytes(data)
        assert [p.index for p in bank.presets] == [4]
        assert bank.samples == []

    def test_no_startup_block(self):
        bank = Bank()
        bank.add_preset(Preset(name="Solo", index=2))
        data = E4BWriter().to_bytes(bank)
        last = E4BReader.read_toc(data)[-1]

        parsed = E4BReader().parse_bytes(data[: last.end])
        assert parsed.startup_preset == 0
        assert parsed.get_preset(2) is not None

    def test_truncated_startup_ignored(self, bank_bytes):
        parsed = E4BReader().parse_bytes(bank_bytes[:-100])

        assert len(parsed.presets) == 2
        assert parsed.startup_preset == 0

    def test_record_past_end(self, bank_bytes):
        first_sample = E4BReader.read_toc(bank_bytes)[2]
        with pytest.raises(E4BFormatError):
            E4BReader().parse_bytes(bank_bytes[: first_sample.offset + 50])


class TestFileHelpers:
    """Path based read/write entry points."""

    def test_write_creates_directories(self, tmp_path, bank):
        path = tmp_path / "nested" / "dir" / "out.e4b"
        E4BWriter.write(bank, path)

        assert path.exists()
        assert E4BReader.can_read(path)

    def test_read(self, bank_file):
        bank = E4BReader.read(bank_file)
        assert len(bank.samples) == 2

    def test_read_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            E4BReader.read(tmp_path / "missing.e4b")

    def test_read_e4b_success(self, bank_file):
        result, bank = read_e4b(bank_file)

        assert result == E4BReadResult.SUCCESS
        assert bank.get_preset(1) is not None

    def test_read_e4b_missing(self, tmp_path):
        assert read_e4b(tmp_path / "missing.e4b") == (E4BReadResult.NOT_EXIST, None)

    def test_read_e4b_bad_extension(self, tmp_path):
        assert read_e4b(tmp_path / "bank.wav") == (E4BReadResult.INVALID, None)

    def test_read_e4b_invalid(self, tmp_path):
        path = tmp_path / "broken.E4B"
        path.write_bytes(b"FORM\x00\x00\x00\x04E4B0")

        assert read_e4b(path) == (E4BReadResult.INVALID, None)

    def test_read_e4b_directory(self, tmp_path):
        path = tmp_path / "folder.e4b"
        path.mkdir()

        assert read_e4b(path) == (E4BReadResult.INVALID, None)

    def test_write_e4b(self, tmp_path, bank):
        assert write_e4b(tmp_path / "out.E4B", bank)
        assert not write_e4b(tmp_path / "out.bin", bank)
        assert not (tmp_path / "out.bin").exists()

    def test_can_read(self, tmp_path, bank_file):
        other = tmp_path / "other.e4b"
        other.write_bytes(b"RIFF....WAVE")

        assert E4BReader.can_read(bank_file)
        assert not E4BReader.can_read(other)
        assert not E4BReader.can_read(tmp_path / "missing.e4b")

    def test_get_file_info(self, bank_file):
        info = E4BReader.get_file_info(bank_file)

        assert info["valid"]
        assert info["entries"] == 5
        assert info["presets"] == 2
        assert info["samples"] == 2
        assert info["sequences"] == 1
        assert info["skipped"] == 0
        assert info["has_startup"]
        assert info["size"] == bank_file.stat().st_size

    def test_get_file_info_invalid(self, tmp_path):
        path = tmp_path / "bad.e4b"
        path.write_bytes(b"junk")

        info = E4BReader.get_file_info(path)
        assert not info["valid"]
        assert "error" in info
