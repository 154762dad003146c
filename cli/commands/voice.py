"""
Voice command - show one voice in full detail.
"""

from pathlib import Path

import typer
from rich.console import Console

from cli.commands.loader import load_bank
from cli.display.tables import display_voice_detail

console = Console()
app = typer.Typer()


@app.command()
def voice(
    file: Path = typer.Argument(..., help="E4B bank file"),
    preset: int = typer.Argument(..., help="Preset index"),
    number: int = typer.Argument(0, help="Voice number within the preset"),
) -> None:
    """
    Show a voice: tuning, filter, envelopes, LFOs, cords and zones.

    Examples:

        e4b voice strings.e4b 0

        e4b voice strings.e4b 0 2
    """
    bank = load_bank(file)

    selected = bank.get_preset(preset)
    if selected is None:
        console.print(f"[red]Error: No preset with index {preset}[/red]")
        raise typer.Exit(1)

    if not 0 <= number < len(selected.voices):
        console.print(
            f"[red]Error: Preset {preset} has {len(selected.voices)} voices, no voice {number}[/red]"
        )
        raise typer.Exit(1)

    display_voice_detail(selected, number, selected.voices[number], bank)


if __name__ == "__main__":
    app()
