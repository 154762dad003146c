"""
Display formatting utilities for CLI output.

Provides bar graphics and unit formatting for E4 parameters.
"""

from e4bank.models.preset import MAX_PAN, MIN_PAN, MidiNote, ZoneRange
from e4bank.models.sample import LoopInfo


def value_bar(
    value: float,
    max_value: float = 127,
    width: int = 10,
    filled_char: str = "█",
    empty_char: str = "░",
    show_value: bool = True,
    show_percent: bool = True,
) -> str:
    """
    Create a text-based bar graphic with value and percentage.

    Args:
        value: Current value
        max_value: Maximum value (default 127 for MIDI)
        width: Bar width in characters
        filled_char: Character for filled portion
        empty_char: Character for empty portion
        show_value: Show numeric value
        show_percent: Show percentage

    Returns:
        Formatted string like "91 [████████░░] 71%"
    """
    if max_value <= 0:
        max_value = 1

    clamped = max(0, min(value, max_value))

    fill_count = int((clamped / max_value) * width)
    bar = filled_char * fill_count + empty_char * (width - fill_count)
    percent = int((clamped / max_value) * 100)

    parts = []
    if show_value:
        parts.append(f"{value:3g}")
    parts.append(f"[{bar}]")
    if show_percent:
        parts.append(f"{percent:3d}%")

    return " ".join(parts)


def pan_bar(
    pan: int,
    width: int = 11,
    left_char: str = "◀",
    right_char: str = "▶",
    center_char: str = "●",
    empty_char: str = "─",
) -> str:
    """
    Create a centered pan bar graphic.

    Pan runs from -64 (hard left) through 0 (center) to +63 (hard right).

    Returns:
        Formatted string like "L32 [──◀──●─────]"
    """
    center = width // 2
    bar = list(empty_char * width)
    bar[center] = center_char

    if pan == 0:
        position_str = "  C"
    elif pan < 0:
        pos = center - round((pan / MIN_PAN) * center)
        bar[max(pos, 0)] = left_char
        position_str = f"L{-pan:2d}"
    else:
        pos = center + round((pan / MAX_PAN) * (width - center - 1))
        bar[min(pos, width - 1)] = right_char
        position_str = f"R{pan:2d}"

    return f"{position_str} [{''.join(bar)}]"


def format_percent(value: float) -> str:
    return f"{value:.1f}%"


def format_frequency(hertz: float) -> str:
    """
    Format a frequency.

    Returns:
        "440 Hz", "5.79 Hz" or "12.3 kHz"
    """
    if hertz >= 1000:
        return f"{hertz / 1000:.1f} kHz"
    if hertz < 100 and hertz != int(hertz):
        return f"{hertz:.2f} Hz"
    return f"{hertz:.0f} Hz"


def format_db(value: int) -> str:
    return f"{value:+d} dB" if value else "0 dB"


def format_cents(value: float) -> str:
    return f"{value:+.2f} ct" if value else "0 ct"


def format_range(zone_range: ZoneRange, notes: bool = False) -> str:
    """
    Format a key/velocity range with its fades.

    Returns:
        "36-60" or "36-60 (fade 40/56)"
    """
    if notes:
        low = str(MidiNote.from_byte(zone_range.low))
        high = str(MidiNote.from_byte(zone_range.high))
    else:
        low, high = str(zone_range.low), str(zone_range.high)

    result = f"{low}-{high}"
    if zone_range.low_fade or zone_range.high_fade:
        result += f" (fade {zone_range.low_fade}/{zone_range.high_fade})"
    return result


def format_duration(seconds: float) -> str:
    """
    Format a duration.

    Returns:
        "0.512 s" or "1:05.3"
    """
    if seconds < 60:
        return f"{seconds:.3f} s"
    minutes, rest = divmod(seconds, 60)
    return f"{int(minutes)}:{rest:04.1f}"


def format_loop(loop: LoopInfo) -> str:
    """
    Format loop settings.

    Returns:
        "[dim]Off[/dim]" or "1200-4800 (release)"
    """
    if not loop.loop:
        return "[dim]Off[/dim]"
    result = f"{loop.start}-{loop.end}"
    if loop.loop_in_release:
        result += " (release)"
    return result


def format_size(size: int) -> str:
    """
    Format a byte count.

    Returns:
        "512 B", "4.0 KB" or "1.25 MB"
    """
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.2f} MB"


def index_str(index: int) -> str:
    """Format an entity index, showing the unassigned sentinel as a dash."""
    return "-" if index == 0xFFFF else f"{index:03d}"
