"""
Sequences command - list the MIDI sequences of a bank and export them.
"""

from pathlib import Path
from typing import Optional

import typer
from rich import box
from rich.console import Console
from rich.table import Table

from cli.commands.loader import load_bank
from cli.display.formatters import format_duration, format_size, index_str

console = Console()
app = typer.Typer()


@app.command()
def sequences(
    file: Path = typer.Argument(..., help="E4B bank file"),
    export: Optional[Path] = typer.Option(
        None, "--export", "-e", help="Write every sequence as a .mid file into this directory"
    ),
) -> None:
    """
    List the MIDI sequences stored in a bank.

    Each payload is parsed as a Standard MIDI File; payloads that do not
    parse are listed as invalid.

    Examples:

        e4b sequences demo.e4b

        e4b sequences demo.e4b --export midi/
    """
    bank = load_bank(file)

    if not bank.sequences:
        console.print("[dim]No sequences[/dim]")
        return

    table = Table(title="Sequences", box=box.ROUNDED, show_header=True, header_style="bold magenta")
    table.add_column("#", style="dim", width=4)
    table.add_column("Name", style="cyan", width=18)
    table.add_column("Size", width=9)
    table.add_column("Type", width=5)
    table.add_column("Tracks", width=7)
    table.add_column("PPQN", width=6)
    table.add_column("Events", width=8)
    table.add_column("Length", width=10)

    for sequence in bank.sequences:
        try:
            midi = sequence.to_midi_file()
        except (OSError, EOFError, ValueError, KeyError) as e:
            table.add_row(
                index_str(sequence.index),
                sequence.name,
                format_size(len(sequence.midi_data)),
                "[red]invalid[/red]",
                "",
                "",
                "",
                str(e)[:10],
            )
            continue

        events = sum(len(track) for track in midi.tracks)
        table.add_row(
            index_str(sequence.index),
            sequence.name,
            format_size(len(sequence.midi_data)),
            str(midi.type),
            str(len(midi.tracks)),
            str(midi.ticks_per_beat),
            str(events),
            format_duration(midi.length) if midi.type != 2 else "-",
        )

    console.print(table)

    if export is not None:
        export.mkdir(parents=True, exist_ok=True)
        for sequence in bank.sequences:
            name = "".join(c if c.isalnum() or c in "-_ " else "_" for c in sequence.name.strip())
            name = name or "sequence"
            path = export / f"{sequence.index:03d}_{name}.mid"
            path.write_bytes(sequence.midi_data)
            console.print(f"[green]Exported:[/green] {path}")


if __name__ == "__main__":
    app()
