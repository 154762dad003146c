"""
Samples command - list the samples of a bank.
"""

from pathlib import Path

import typer
from rich.console import Console

from cli.commands.loader import load_bank
from cli.display.tables import display_samples_table

console = Console()
app = typer.Typer()


@app.command()
def samples(
    file: Path = typer.Argument(..., help="E4B bank file"),
    unused: bool = typer.Option(
        False, "--unused", "-u", help="Only list samples no zone refers to"
    ),
) -> None:
    """
    List the samples of a bank.

    Examples:

        e4b samples strings.e4b

        e4b samples strings.e4b --unused
    """
    bank = load_bank(file)

    if unused:
        used = {
            zone.sample_index
            for preset in bank.presets
            for voice in preset.voices
            for zone in voice.zones
        }
        bank.samples = [s for s in bank.samples if s.index not in used]

    if not bank.samples:
        console.print("[dim]No samples[/dim]")
        return

    display_samples_table(bank)

    total = sum(len(s.data) for s in bank.samples) * 2
    console.print(f"[dim]{len(bank.samples)} samples, {total} bytes of PCM[/dim]")


if __name__ == "__main__":
    app()
