"""
Info command - display a bank overview.
"""

from pathlib import Path

import typer
from rich.console import Console

from cli.commands.loader import check_bank_path
from cli.display.tables import display_bank_info
from e4bank.formats.e4b.reader import E4BReader
from e4bank.utils.validation import E4BFormatError

console = Console()
app = typer.Typer()


@app.command()
def info(
    file: Path = typer.Argument(..., help="E4B bank file"),
) -> None:
    """
    Display bank information.

    Shows file size, TOC entry counts per record type, whether a startup
    block is present and which preset it selects.

    Examples:

        e4b info strings.e4b
    """
    check_bank_path(file)

    file_info = E4BReader.get_file_info(file)
    bank = None

    if file_info["valid"]:
        try:
            bank = E4BReader.read(file)
        except E4BFormatError as e:
            file_info["valid"] = False
            file_info["error"] = str(e)

    display_bank_info(file, file_info, bank)

    if not file_info["valid"]:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
