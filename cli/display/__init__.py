"""
CLI display modules.
"""

from cli.display.tables import (
    display_bank_info,
    display_presets_table,
    display_samples_table,
    display_toc,
    display_voice_detail,
    display_voices_summary,
)
from cli.display.hex_view import display_hex_dump

__all__ = [
    "display_bank_info",
    "display_presets_table",
    "display_samples_table",
    "display_toc",
    "display_voice_detail",
    "display_voices_summary",
    "display_hex_dump",
]
