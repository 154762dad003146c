"""
E4B - Inspect and rewrite E-mu EOS sampler bank files.

A CLI tool for looking inside .e4b banks: presets, voices, samples,
sequences and the container structure that holds them.
"""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from cli.commands.info import info
from cli.commands.presets import presets
from cli.commands.rewrite import rewrite
from cli.commands.samples import samples
from cli.commands.sequences import sequences
from cli.commands.toc import toc
from cli.commands.validate import validate
from cli.commands.voice import voice
from e4bank import __version__

console = Console()

# Main app
app = typer.Typer(
    name="e4b",
    help="Inspect and rewrite E-mu EOS sampler bank files.",
    add_completion=False,
    rich_markup_mode="rich",
)

app.command(name="info")(info)
app.command(name="toc")(toc)
app.command(name="presets")(presets)
app.command(name="voice")(voice)
app.command(name="samples")(samples)
app.command(name="sequences")(sequences)
app.command(name="validate")(validate)
app.command(name="rewrite")(rewrite)


def setup_logging(verbose: bool) -> None:
    """Route library logging through Rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]e4b[/bold] version {__version__}")
    console.print("[dim]Reader and writer for E-mu EOS bank files[/dim]")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool = typer.Option(False, "--version", "-V", help="Show version"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """
    E4B - Inspect E-mu EOS sampler banks.

    [bold]Quick Start:[/bold]

        e4b info bank.e4b             # Bank overview
        e4b toc bank.e4b --hex        # Table of contents

    [bold]Content Commands:[/bold]

        e4b presets bank.e4b          # Preset list
        e4b voice bank.e4b 0 1        # One voice in detail
        e4b samples bank.e4b          # Sample list
        e4b sequences bank.e4b        # MIDI sequences

    [bold]Utility Commands:[/bold]

        e4b validate bank.e4b         # Structure and reference checks
        e4b rewrite bank.e4b -o out.e4b

    Use --help with any command for more details.
    """
    setup_logging(verbose)

    if version_flag:
        version()
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
