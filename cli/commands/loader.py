"""
Shared file checks for bank commands.
"""

from pathlib import Path

import typer
from rich.console import Console

from e4bank.formats.e4b.reader import E4BReader
from e4bank.models.bank import Bank
from e4bank.utils.validation import E4BFormatError, is_e4b_path

console = Console()


def check_bank_path(file: Path) -> None:
    """Exit with an error unless ``file`` is an existing .e4b file."""
    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    if not is_e4b_path(file):
        console.print(f"[red]Error: Only E4B files supported: {file}[/red]")
        raise typer.Exit(1)


def load_bank(file: Path) -> Bank:
    """Check and read a bank, exiting with an error if it is malformed."""
    check_bank_path(file)

    try:
        return E4BReader.read(file)
    except E4BFormatError as e:
        console.print(f"[red]Error: Invalid bank {file}: {e}[/red]")
        raise typer.Exit(1)
