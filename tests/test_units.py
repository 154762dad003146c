"""Tests for byte <-> engineering unit conversions."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from e4bank.utils.units import (
    byte_to_chorus_width,
    byte_to_filter_freq,
    byte_to_fine_tune,
    byte_to_lfo_delay,
    byte_to_lfo_rate,
    byte_to_percent,
    ceil_places,
    chorus_width_to_byte,
    filter_freq_to_byte,
    fine_tune_to_byte,
    lfo_delay_to_byte,
    lfo_rate_to_byte,
    percent_to_byte,
    round_half_away,
    to_int8,
)
from e4bank.utils.validation import decode_name, encode_name, is_e4b_path, normalize_name


class TestRounding:
    """Rounding helpers."""

    def test_round_half_away_from_zero(self):
        assert round_half_away(2.5) == 3
        assert round_half_away(-2.5) == -3
        assert round_half_away(2.4) == 2
        assert round_half_away(-2.4) == -2

    def test_ceil_places(self):
        assert ceil_places(50.3937, 2) == 50.4
        assert ceil_places(25.19685, 1) == 25.2
        assert ceil_places(-100.0, 2) == -100.0

    def test_to_int8_wraps(self):
        assert to_int8(127) == 127
        assert to_int8(128) == -128
        assert to_int8(255) == -1


class TestPercent:
    """Percent <-> signed byte."""

    def test_endpoints(self):
        assert percent_to_byte(100) == 127
        assert percent_to_byte(-100) == -127
        assert percent_to_byte(0) == 0
        assert byte_to_percent(127) == 100.0
        assert byte_to_percent(-127) == -100.0

    def test_round_trip_within_one_percent(self):
        for percent in range(-100, 101):
            assert abs(byte_to_percent(percent_to_byte(percent)) - percent) < 1.0


class TestFineTune:
    """Fine tune cents <-> byte."""

    def test_endpoints(self):
        assert fine_tune_to_byte(100.0) == 64
        assert fine_tune_to_byte(0.0) == 0
        assert fine_tune_to_byte(-100.0) == -64

    def test_bytes_to_cents(self):
        assert byte_to_fine_tune(64) == 100.0
        assert byte_to_fine_tune(0) == 0.0
        assert byte_to_fine_tune(-64) == -100.0

    def test_lowest_byte_is_bottom_of_range(self):
        assert -100.0 <= byte_to_fine_tune(fine_tune_to_byte(-100.0)) <= -99.9


class TestFilterFrequency:
    """Filter cutoff Hz <-> byte on a log curve."""

    def test_endpoints(self):
        assert filter_freq_to_byte(57) == 0
        assert filter_freq_to_byte(20000) == 255
        assert byte_to_filter_freq(0) == 57
        assert byte_to_filter_freq(255) == 20000

    def test_round_trip_within_one_hertz(self):
        for b in range(256):
            hz = byte_to_filter_freq(b)
            assert abs(byte_to_filter_freq(filter_freq_to_byte(hz)) - hz) <= 1

    def test_monotonic(self):
        values = [byte_to_filter_freq(b) for b in range(256)]
        assert values == sorted(values)


class TestLFO:
    """LFO rate and delay curves."""

    @pytest.mark.parametrize("b", [0, 1, 30, 77, 127])
    def test_rate_inverse(self, b):
        assert lfo_rate_to_byte(byte_to_lfo_rate(b)) == b

    @pytest.mark.parametrize("b", [1, 30, 64, 127])
    def test_delay_inverse(self, b):
        assert lfo_delay_to_byte(byte_to_lfo_delay(b)) == b

    def test_rate_range(self):
        assert byte_to_lfo_rate(0) < 0.08
        assert abs(byte_to_lfo_rate(127) - 18.01) < 0.1

    def test_zero_delay(self):
        assert lfo_delay_to_byte(0.0) == 0


class TestChorusWidth:
    """Chorus width percent <-> unsigned byte centred on 128."""

    def test_endpoints(self):
        assert chorus_width_to_byte(0.0) == 128
        assert chorus_width_to_byte(100.0) == 0
        assert byte_to_chorus_width(128) == 0.0
        assert byte_to_chorus_width(0) == 100.0

    def test_midpoint(self):
        assert chorus_width_to_byte(50.0) == 192
        assert byte_to_chorus_width(192) == 50.0


class TestNames:
    """EOS name rules."""

    def test_short_name_padded(self):
        assert normalize_name("Untitled") == "Untitled        "

    def test_long_name_truncated(self):
        assert normalize_name("A very long preset name") == "A very long pres"

    def test_exact_length_untouched(self):
        name = "Sixteen\x00chars!!!"
        assert normalize_name(name) == name

    def test_nul_replaced_when_normalizing(self):
        assert normalize_name("a\x00b") == "a b" + " " * 13

    def test_empty_name_stays_empty(self):
        assert normalize_name("") == ""

    def test_encode_name(self):
        assert encode_name("Piano") == b"Piano           "
        assert encode_name("Piäno") == b"Pi\xe4no           "
        assert encode_name("Pi\u266bno") == b"Pi?no           "
        assert len(encode_name("x" * 40)) == 16

    def test_latin1_round_trip(self):
        raw = encode_name("Caf\u00e9")
        assert decode_name(raw) == "Caf\u00e9            "
        assert decode_name(bytes(range(0xF0, 0x100))).encode("latin-1") == bytes(range(0xF0, 0x100))

    def test_e4b_extension(self):
        assert is_e4b_path("bank.e4b")
        assert is_e4b_path(Path("dir/BANK.E4B"))
        assert not is_e4b_path("bank.E4b")
        assert not is_e4b_path("bank.wav")
