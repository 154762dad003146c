"""Test configuration and fixtures."""

import sys
from pathlib import Path

import mido
import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from e4bank.formats.e4b.writer import E4BWriter
from e4bank.models import (
    Bank,
    Cord,
    CordDestination,
    CordSource,
    Envelope,
    FilterType,
    LFO,
    LFOShape,
    LoopInfo,
    MidiNote,
    Preset,
    Sample,
    SampleZone,
    Sequence,
    Voice,
    ZoneRange,
)


def make_voice(sample_index: int = 0, zones: int = 1) -> Voice:
    """Build a voice with non-default values in most fields."""
    voice = Voice(
        group=3,
        key_range=ZoneRange(36, 0, 0, 60),
        velocity_range=ZoneRange(10, 20, 100, 127),
        key_delay=250,
        transpose=-5,
        coarse_tune=12,
        fine_tune=0.0,
        glide_rate=40,
        fixed_pitch=True,
        chorus_width=50.0,
        chorus_amount=50.0,
        chorus_init_itd=7,
        key_latch=True,
        volume=-6,
        pan=-20,
        amp_env_dyn_range=-12,
        filter_type=FilterType.FOUR_POLE_LOWPASS,
        filter_frequency=1000,
        filter_resonance=25.0,
        amp_env=Envelope(10, 127, 0, 127, 5, 100, 20, 90, 30, 0, 0, 0),
        lfo1=LFO(rate=5.79, shape=LFOShape.SQUARE, delay=0.0, variation=0.0, key_sync=True),
        lfo2=LFO(rate=1.0, shape=LFOShape.TRIANGLE, delay=0.0, variation=0.0, key_sync=False),
        lfo_lag1=2,
        lfo_lag2=4,
    )
    voice.replace_or_add_cord(Cord(CordSource.MOD_WHEEL, CordDestination.FILTER_FREQ, 100.0))

    for i in range(zones):
        voice.add_zone(
            SampleZone(
                sample_index=sample_index,
                original_key=MidiNote("A", 3),
                key_range=ZoneRange(36 + i, 0, 0, 60),
                velocity_range=ZoneRange(0, 0, 0, 127),
                fine_tune=-100.0,
                volume=-3,
                pan=10,
            )
        )
    return voice


def make_midi_bytes() -> bytes:
    midi = mido.MidiFile(type=0, ticks_per_beat=96)
    track = mido.MidiTrack()
    track.append(mido.Message("note_on", note=60, velocity=100, time=0))
    track.append(mido.Message("note_off", note=60, velocity=0, time=96))
    track.append(mido.MetaMessage("end_of_track", time=0))
    midi.tracks.append(track)
    return Sequence.from_midi_file(midi).midi_data


@pytest.fixture
def voice():
    """Return a fully populated voice with one zone."""
    return make_voice()


@pytest.fixture
def mono_sample():
    """Return a looped mono sample."""
    return Sample(
        name="Kick",
        data=list(range(-50, 50)),
        sample_rate=44100,
        loop=LoopInfo(loop=True, loop_in_release=True, start=10, end=90),
    )


@pytest.fixture
def stereo_sample():
    """Return a stereo sample, left block then right block."""
    return Sample(
        name="Pad",
        data=[1, 2, 3, 4, 10, 20, 30, 40],
        sample_rate=48000,
        channels=2,
    )


@pytest.fixture
def midi_bytes():
    """Return a one-note Standard MIDI File."""
    return make_midi_bytes()


@pytest.fixture
def bank(mono_sample, stereo_sample, midi_bytes):
    """Return a bank with two presets, two samples and one sequence."""
    bank = Bank()

    bank.add_sample(mono_sample)
    bank.add_sample(stereo_sample)

    piano = Preset(name="Piano", transpose=2, volume=-3, initial_controllers=[0, 64, 127, 255])
    piano.add_voice(make_voice(sample_index=0, zones=2))
    piano.add_voice(make_voice(sample_index=1))
    bank.add_preset(piano)

    untitled = Preset()
    untitled.add_voice(make_voice(sample_index=1))
    bank.add_preset(untitled)

    bank.add_sequence(Sequence(name="Groove", midi_data=midi_bytes))
    bank.startup_preset = 1
    return bank


@pytest.fixture
def bank_bytes(bank):
    """Return the serialized fixture bank."""
    return E4BWriter().to_bytes(bank)


@pytest.fixture
def bank_file(tmp_path, bank):
    """Write the fixture bank to a temporary .e4b file."""
    path = tmp_path / "bank.e4b"
    E4BWriter.write(bank, path)
    return path
