"""
TOC command - list the table of contents of a bank.
"""

from pathlib import Path

import typer
from rich.console import Console

from cli.commands.loader import check_bank_path
from cli.display.hex_view import display_hex_dump
from cli.display.tables import TAG_STYLES, display_toc
from e4bank.formats.e4b.constants import CHUNK_HEADER_SIZE, TAG_LENGTH, TOC_ENTRY_SIZE
from e4bank.formats.e4b.reader import E4BReader
from e4bank.utils.validation import E4BFormatError

console = Console()
app = typer.Typer()

TOC_START = CHUNK_HEADER_SIZE + TAG_LENGTH


@app.command()
def toc(
    file: Path = typer.Argument(..., help="E4B bank file"),
    show_hex: bool = typer.Option(False, "--hex", "-x", help="Show a hex dump of the TOC"),
) -> None:
    """
    List every TOC entry with its absolute offset and payload size.

    Entries whose chunk would run past the end of the file are flagged.

    Examples:

        e4b toc strings.e4b

        e4b toc strings.e4b --hex
    """
    check_bank_path(file)

    data = file.read_bytes()

    try:
        entries = E4BReader.read_toc(data)
    except E4BFormatError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    display_toc(entries, len(data))

    if show_hex:
        end = TOC_START + CHUNK_HEADER_SIZE + TOC_ENTRY_SIZE * len(entries)
        highlights = [
            (entry.position, entry.position + TAG_LENGTH, TAG_STYLES.get(entry.tag, "red"))
            for entry in entries
        ]
        display_hex_dump(
            data[TOC_START:end],
            title="TOC1",
            start_offset=TOC_START,
            max_lines=64,
            highlights=highlights,
        )


if __name__ == "__main__":
    app()
