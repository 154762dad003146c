"""
Validate command - check E4B bank integrity and structure.
"""

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import typer
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from cli.commands.loader import check_bank_path
from e4bank.formats.e4b.constants import PRESET_TAG, SAMPLE_TAG, SEQUENCE_TAG, SKIPPED_TAGS
from e4bank.formats.e4b.reader import E4BReader, TocEntry
from e4bank.models.bank import Bank
from e4bank.utils.validation import E4BFormatError

console = Console()
app = typer.Typer()

KNOWN_TAGS = (PRESET_TAG, SAMPLE_TAG, SEQUENCE_TAG) + SKIPPED_TAGS


@dataclass
class ValidationIssue:
    """A single validation issue."""

    severity: str  # "error", "warning", "info"
    area: str
    offset: int
    message: str


@dataclass
class ValidationResult:
    """Result of validating an E4B file."""

    filepath: str
    valid: bool
    errors: List[ValidationIssue] = field(default_factory=list)
    warnings: List[ValidationIssue] = field(default_factory=list)
    info: List[ValidationIssue] = field(default_factory=list)

    @property
    def total_issues(self) -> int:
        return len(self.errors) + len(self.warnings) + len(self.info)


class E4BValidator:
    """Validate E4B container structure and bank consistency."""

    def __init__(self, data: bytes, filepath: str):
        self.data = data
        self.filepath = filepath
        self.issues: List[ValidationIssue] = []
        self.entries: List[TocEntry] = []
        self.bank: Optional[Bank] = None

    def validate(self) -> ValidationResult:
        """Perform full validation and return result."""
        self.issues = []

        if self._validate_container():
            self._validate_entries()
            self._validate_duplicates()
            if self._validate_records():
                self._validate_voices()
                self._validate_sample_refs()
                self._validate_samples()
                self._validate_startup()

        result = ValidationResult(filepath=self.filepath, valid=True)
        for issue in self.issues:
            if issue.severity == "error":
                result.errors.append(issue)
                result.valid = False
            elif issue.severity == "warning":
                result.warnings.append(issue)
            else:
                result.info.append(issue)

        return result

    def _add_issue(self, severity: str, area: str, offset: int, message: str) -> None:
        self.issues.append(ValidationIssue(severity, area, offset, message))

    def _validate_container(self) -> bool:
        try:
            self.entries = E4BReader.read_toc(self.data)
        except E4BFormatError as e:
            self._add_issue("error", "Container", 0, str(e))
            return False

        self._add_issue("info", "Container", 0, f"FORM/E4B0 header, {len(self.entries)} TOC entries")
        return True

    def _validate_entries(self) -> None:
        bad = 0
        for entry in self.entries:
            if entry.tag not in KNOWN_TAGS:
                self._add_issue("error", "TOC", entry.position, f"Unknown tag {entry.tag!r}")
                bad += 1
            elif entry.end > len(self.data):
                self._add_issue(
                    "error",
                    "TOC",
                    entry.position,
                    f"{entry.tag} {entry.name.strip()!r} runs past end of file",
                )
                bad += 1
            elif self.data[entry.offset : entry.offset + 4] != entry.tag.encode("ascii"):
                self._add_issue(
                    "error",
                    "TOC",
                    entry.position,
                    f"Offset 0x{entry.offset:X} does not point at a {entry.tag} chunk",
                )
                bad += 1

        if not bad:
            self._add_issue("info", "TOC", 0, "All offsets point at matching chunks")

    def _validate_duplicates(self) -> None:
        counts = Counter((e.tag, e.index) for e in self.entries if e.tag not in SKIPPED_TAGS)
        for (tag, index), count in sorted(counts.items()):
            if count > 1:
                self._add_issue(
                    "warning",
                    "TOC",
                    0,
                    f"{tag} index {index} used {count} times (only the first is loaded)",
                )

    def _validate_records(self) -> bool:
        try:
            self.bank = E4BReader().parse_bytes(self.data)
        except E4BFormatError as e:
            self._add_issue("error", "Records", 0, str(e))
            return False

        self._add_issue("info", "Records", 0, repr(self.bank))
        return True

    def _validate_voices(self) -> None:
        for preset in self.bank.presets:
            for i, voice in enumerate(preset.voices):
                if not voice.zones:
                    self._add_issue(
                        "warning",
                        "Voices",
                        0,
                        f"Preset {preset.index} voice {i} has no zones",
                    )

    def _validate_sample_refs(self) -> None:
        missing = self.bank.missing_sample_refs()
        for preset_index, voice, zone, sample_index in missing:
            self._add_issue(
                "warning",
                "Zones",
                0,
                f"Preset {preset_index} voice {voice} zone {zone}: sample {sample_index} missing",
            )
        if not missing:
            self._add_issue("info", "Zones", 0, "Every zone refers to a sample in the bank")

    def _validate_samples(self) -> None:
        for sample in self.bank.samples:
            if not sample.data:
                self._add_issue("warning", "Samples", 0, f"Sample {sample.index} has no PCM data")
            elif sample.loop.loop and sample.loop.end <= sample.loop.start:
                self._add_issue(
                    "warning",
                    "Samples",
                    0,
                    f"Sample {sample.index} loop end {sample.loop.end} <= start {sample.loop.start}",
                )

    def _validate_startup(self) -> None:
        if not E4BReader.inspect_bytes(self.data)["has_startup"]:
            self._add_issue("info", "Startup", 0, "No EMSt startup block")
            return

        startup = self.bank.startup_preset
        if startup != 0xFFFF and self.bank.get_preset(startup) is None:
            self._add_issue("warning", "Startup", 0, f"Startup preset {startup} not in bank")
        else:
            self._add_issue("info", "Startup", 0, f"Startup preset {startup}")


def display_validation(result: ValidationResult, show_all: bool = False) -> None:
    """Display validation result with Rich formatting."""
    if result.valid:
        status = "[bold green]VALID[/bold green]"
        border = "green"
    else:
        status = "[bold red]INVALID[/bold red]"
        border = "red"

    console.print(
        Panel(
            f"[bold]File:[/bold] {result.filepath}\n"
            f"[bold]Status:[/bold] {status}\n\n"
            f"Errors: [red]{len(result.errors)}[/red]  "
            f"Warnings: [yellow]{len(result.warnings)}[/yellow]  "
            f"Info: [blue]{len(result.info)}[/blue]",
            title="[bold]Validation Result[/bold]",
            border_style=border,
        )
    )

    if result.errors or result.warnings:
        table = Table(title="Issues", box=box.ROUNDED, show_header=True, header_style="bold cyan")
        table.add_column("Severity", width=10)
        table.add_column("Area", style="cyan", width=12)
        table.add_column("Offset", style="dim", width=8)
        table.add_column("Message", width=60)

        for issue in result.errors:
            table.add_row("[red]ERROR[/red]", issue.area, f"0x{issue.offset:04X}", issue.message)

        for issue in result.warnings:
            table.add_row(
                "[yellow]WARN[/yellow]", issue.area, f"0x{issue.offset:04X}", issue.message
            )

        console.print(table)

    if result.info and (show_all or (not result.errors and not result.warnings)):
        info_table = Table(title="Validation Checks", box=box.SIMPLE, show_header=False)
        info_table.add_column("", width=70)

        for issue in result.info:
            info_table.add_row(f"[green]OK[/green] {issue.area}: {issue.message}")

        console.print(info_table)


@app.command()
def validate(
    file: Path = typer.Argument(..., help="E4B file to validate"),
    show_all: bool = typer.Option(False, "--all", "-a", help="Show passed checks too"),
    strict: bool = typer.Option(False, "--strict", "-s", help="Treat warnings as errors"),
) -> None:
    """
    Validate an E4B bank structure and content.

    Checks for:

    - FORM/E4B0 header and a non-empty TOC
    - TOC offsets pointing at chunks with the matching tag
    - Duplicate indices
    - Voices without zones and zones referring to missing samples
    - Startup preset presence

    Examples:

        e4b validate strings.e4b

        e4b validate strings.e4b --strict
    """
    check_bank_path(file)

    data = file.read_bytes()

    validator = E4BValidator(data, str(file))
    result = validator.validate()

    if strict and result.warnings:
        result.valid = False

    display_validation(result, show_all)

    if not result.valid:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
