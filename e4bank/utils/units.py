"""
Unit conversions between E4 parameter bytes and engineering units.

The EOS firmware stores most voice parameters as single bytes. The
mapping from byte to hertz/percent/seconds is non-linear for several
fields; the curves below were fitted against the values shown on the
hardware's display.

    Field               Byte range      Unit range
    percent             [-127, 127]     [-100, 100] %
    fine tune           [-64, 64]       [-100, 100] cents
    filter frequency    [0, 255]        [57, 20000] Hz
    LFO rate            [0, 127]        [0.08, 18.01] Hz
    LFO delay           [0, 127]        [0, 21.694] s
    chorus width        [-128, 0]       [0, 100] %

Encoders assume the caller already clamped the value into the unit range.
Out-of-range input is not rejected: the result wraps into the byte range
the same way the firmware's own editor does.
"""

import math

# ln(20000) and ln(57)
MAX_FREQUENCY_LOG = 9.90348755253612804
MIN_FREQUENCY_LOG = 4.04305126783455015
MAX_FREQUENCY_BYTE = 255.0

MIN_FILTER_FREQUENCY = 57
MAX_FILTER_FREQUENCY = 20000

FINE_TUNE_CENTER = 64.0
FINE_TUNE_STEP = 1.5625
CHORUS_WIDTH_STEP = 0.78125

LFO_RATE_CURVE = (1.64054, 1.01973, -1.57702)
LFO_DELAY_CURVE = (0.149998, 1.04, -0.150012)

MIN_LFO_RATE = 0.08
MAX_LFO_RATE = 18.01
MIN_LFO_DELAY = 0.0
MAX_LFO_DELAY = 21.694


def round_half_away(value: float) -> int:
    """Round to nearest integer, halves away from zero (C ``round``)."""
    if value < 0:
        return -int(math.floor(-value + 0.5))
    return int(math.floor(value + 0.5))


def ceil_places(value: float, places: int) -> float:
    """Round *up* to the given number of decimal places."""
    scale = 10.0**places
    return math.ceil(value * scale) / scale


def clamp(value, low, high):
    """Clamp value into [low, high]."""
    return max(low, min(high, value))


def to_int8(value: int) -> int:
    """Wrap an integer into the signed byte range."""
    value &= 0xFF
    return value - 0x100 if value >= 0x80 else value


def to_uint8(value: int) -> int:
    """Wrap an integer into the unsigned byte range."""
    return value & 0xFF


def percent_to_byte(percent: float) -> int:
    """[-100, 100] % to [-127, 127]."""
    return to_int8(round_half_away(percent * 127.0 / 100.0))


def byte_to_percent(b: int) -> float:
    """[-127, 127] to [-100, 100] %."""
    return b / 127.0 * 100.0


def fine_tune_to_byte(cents: float) -> int:
    """[-100, 100] cents to [-64, 64]."""
    return to_int8(round_half_away((cents - 100.0) / FINE_TUNE_STEP + FINE_TUNE_CENTER))


def byte_to_fine_tune(b: int) -> float:
    """
    [-64, 64] to [-100, 100] cents.

    The result is rounded *up* to two decimal places. Reference banks
    were produced with this rounding, so nearest-rounding would change
    the bytes written back.
    """
    return ceil_places((b - FINE_TUNE_CENTER) * FINE_TUNE_STEP + 100.0, 2)


def filter_freq_to_byte(hertz: float) -> int:
    """[57, 20000] Hz to [0, 255]."""
    t = (math.log(hertz) - MIN_FREQUENCY_LOG) / (MAX_FREQUENCY_LOG - MIN_FREQUENCY_LOG)
    return to_uint8(round_half_away(t * MAX_FREQUENCY_BYTE))


def byte_to_filter_freq(b: int) -> int:
    """[0, 255] to [57, 20000] Hz."""
    t = b / MAX_FREQUENCY_BYTE
    return round_half_away(
        math.exp(t * (MAX_FREQUENCY_LOG - MIN_FREQUENCY_LOG) + MIN_FREQUENCY_LOG)
    )


def byte_to_lfo_rate(b: int) -> float:
    """[0, 127] to [0.08, 18.01] Hz."""
    a, base, c = LFO_RATE_CURVE
    return a * math.pow(base, b) + c


def lfo_rate_to_byte(rate: float) -> int:
    """[0.08, 18.01] Hz to [0, 127]."""
    a, base, c = LFO_RATE_CURVE
    return to_uint8(round_half_away(math.log((rate - c) / a) / math.log(base)))


def byte_to_lfo_delay(b: int) -> float:
    """[0, 127] to [0, 21.694] seconds."""
    a, base, c = LFO_DELAY_CURVE
    return a * math.pow(base, b) + c


def lfo_delay_to_byte(delay: float) -> int:
    """[0, 21.694] seconds to [0, 127]."""
    a, base, c = LFO_DELAY_CURVE
    return to_uint8(round_half_away(math.log((delay - c) / a) / math.log(base)))


def byte_to_chorus_width(b: int) -> float:
    """Unsigned byte (128 = 0 %, 0 = 100 %) to [0, 100] %."""
    return clamp(ceil_places(abs((b - 128) * CHORUS_WIDTH_STEP), 2), 0.0, 100.0)


def chorus_width_to_byte(width: float) -> int:
    """[0, 100] % to an unsigned byte; 100 % wraps round to 0."""
    return to_uint8(round_half_away(width / CHORUS_WIDTH_STEP + 128.0))
