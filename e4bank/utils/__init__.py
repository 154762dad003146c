"""Utility functions for e4bank."""

from e4bank.utils.units import (
    percent_to_byte,
    byte_to_percent,
    fine_tune_to_byte,
    byte_to_fine_tune,
    filter_freq_to_byte,
    byte_to_filter_freq,
    lfo_rate_to_byte,
    byte_to_lfo_rate,
    lfo_delay_to_byte,
    byte_to_lfo_delay,
    chorus_width_to_byte,
    byte_to_chorus_width,
)
from e4bank.utils.validation import E4BFormatError, normalize_name, is_e4b_path

__all__ = [
    "percent_to_byte",
    "byte_to_percent",
    "fine_tune_to_byte",
    "byte_to_fine_tune",
    "filter_freq_to_byte",
    "byte_to_filter_freq",
    "lfo_rate_to_byte",
    "byte_to_lfo_rate",
    "lfo_delay_to_byte",
    "byte_to_lfo_delay",
    "chorus_width_to_byte",
    "byte_to_chorus_width",
    "E4BFormatError",
    "normalize_name",
    "is_e4b_path",
]
