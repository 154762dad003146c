"""
Hex dump display utilities.
"""

from typing import Iterable, Tuple

from rich.console import Console
from rich.panel import Panel

console = Console()

# (start, end, style) byte spans to colour inside a dump
Highlight = Tuple[int, int, str]


def _style_for(offset: int, highlights: Iterable[Highlight]) -> str:
    for start, end, style in highlights:
        if start <= offset < end:
            return style
    return ""


def format_hex_lines(
    data: bytes,
    start_offset: int = 0,
    bytes_per_line: int = 16,
    max_lines: int = 32,
    highlights: Iterable[Highlight] = (),
) -> list:
    """
    Format bytes as rich-markup hex dump lines.

    Args:
        data: Bytes to dump
        start_offset: File offset of ``data[0]``
        bytes_per_line: Bytes per row
        max_lines: Rows shown before the dump is cut short
        highlights: Spans (file offsets) to colour

    Returns:
        List of lines like "00000010  54 4F 43 31 ...  TOC1..."
    """
    highlights = list(highlights)
    lines = []
    end = min(len(data), max_lines * bytes_per_line)

    for offset in range(0, end, bytes_per_line):
        row = data[offset : offset + bytes_per_line]

        hex_parts = []
        for i, b in enumerate(row):
            if i == 8:
                hex_parts.append("")
            style = _style_for(start_offset + offset + i, highlights)
            hex_parts.append(f"[{style}]{b:02X}[/{style}]" if style else f"{b:02X}")

        # Markup does not count towards the padding width
        pad = (bytes_per_line - len(row)) * 3
        hex_str = " ".join(hex_parts) + " " * pad

        ascii_str = "".join(chr(b) if 32 <= b < 127 else "." for b in row)
        ascii_str = ascii_str.replace("[", "\\[")

        lines.append(f"[dim]{start_offset + offset:08X}[/dim]  {hex_str}  [cyan]{ascii_str}[/cyan]")

    if len(data) > end:
        lines.append(f"[dim]... {len(data) - end} more bytes ...[/dim]")

    return lines


def display_hex_dump(
    data: bytes,
    title: str = "Hex Dump",
    start_offset: int = 0,
    bytes_per_line: int = 16,
    max_lines: int = 32,
    highlights: Iterable[Highlight] = (),
) -> None:
    """Display formatted hex dump with Rich."""
    lines = format_hex_lines(data, start_offset, bytes_per_line, max_lines, highlights)
    console.print(Panel("\n".join(lines), title=title, border_style="blue", expand=False))
