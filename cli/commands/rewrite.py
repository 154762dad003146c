"""
Rewrite command - read a bank and write it back out.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from cli.commands.loader import load_bank
from cli.display.formatters import format_size
from e4bank.formats.e4b.writer import write_e4b

console = Console()
app = typer.Typer()


@app.command()
def rewrite(
    source: Path = typer.Argument(..., help="Source E4B bank"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output .e4b path"),
    drop_empty: bool = typer.Option(
        False, "--drop-empty-voices", help="Remove voices that have no zones"
    ),
) -> None:
    """
    Read a bank and write it back with a freshly built table of contents.

    Unknown chunks (E4Ma, EMS0) are not carried over. The startup block is
    rebuilt from the bank's startup preset.

    Examples:

        e4b rewrite strings.e4b -o strings-clean.e4b

        e4b rewrite strings.e4b --drop-empty-voices
    """
    output_path = output or source.with_name(f"{source.stem}-rewritten{source.suffix}")

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task(f"Reading {source.name}...", total=None)
        bank = load_bank(source)

        if drop_empty:
            dropped = 0
            for preset in bank.presets:
                kept = [v for v in preset.voices if v.zones]
                dropped += len(preset.voices) - len(kept)
                preset.voices = kept
            console.print(f"[dim]Dropped {dropped} empty voices[/dim]")

        progress.update(task, description=f"Writing {output_path.name}...")
        if not write_e4b(output_path, bank):
            console.print(f"[red]Error: Output must be an .e4b file: {output_path}[/red]")
            raise typer.Exit(1)

    console.print(f"[green]Rewrote:[/green] {source} -> {output_path}")
    console.print(f"[dim]Output size: {format_size(output_path.stat().st_size)}[/dim]")


if __name__ == "__main__":
    app()
