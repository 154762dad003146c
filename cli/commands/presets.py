"""
Presets command - list presets and their voices.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from cli.commands.loader import load_bank
from cli.display.tables import display_presets_table, display_voices_summary

console = Console()
app = typer.Typer()


@app.command()
def presets(
    file: Path = typer.Argument(..., help="E4B bank file"),
    preset: Optional[int] = typer.Option(
        None, "--preset", "-p", help="Only show the preset with this index"
    ),
    voices: bool = typer.Option(False, "--voices", "-V", help="Show a voice summary per preset"),
) -> None:
    """
    List the presets of a bank.

    Examples:

        e4b presets strings.e4b

        e4b presets strings.e4b --voices

        e4b presets strings.e4b -p 3
    """
    bank = load_bank(file)

    if preset is not None:
        selected = bank.get_preset(preset)
        if selected is None:
            console.print(f"[red]Error: No preset with index {preset}[/red]")
            raise typer.Exit(1)
        bank.presets = [selected]
        voices = True

    if not bank.presets:
        console.print("[dim]No presets[/dim]")
        return

    display_presets_table(bank)

    if voices:
        for item in bank.presets:
            display_voices_summary(item)


if __name__ == "__main__":
    app()
