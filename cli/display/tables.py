"""
Rich table displays for bank contents.

Provides formatted output for E4B banks, their table of contents and the
records inside them.
"""

from pathlib import Path
from typing import List, Optional

from rich import box
from rich.columns import Columns
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from cli.display.formatters import (
    format_cents,
    format_db,
    format_duration,
    format_frequency,
    format_loop,
    format_percent,
    format_range,
    format_size,
    index_str,
    pan_bar,
    value_bar,
)
from e4bank.formats.e4b.reader import TocEntry
from e4bank.models.bank import Bank
from e4bank.models.preset import LFO, Envelope, Preset, Voice

console = Console()

TAG_STYLES = {
    "E4P1": "green",
    "E3S1": "cyan",
    "E4s1": "magenta",
    "E4Ma": "dim",
    "EMS0": "dim",
}


def display_bank_info(filepath: Path, info: dict, bank: Optional[Bank] = None) -> None:
    """Display the bank overview panel."""
    status = "[green]Valid[/green]" if info["valid"] else "[red]Invalid[/red]"

    content = f"""[bold]File:[/bold] {filepath}
[bold]Size:[/bold] {format_size(info["size"])} ({info["size"]} bytes)
[bold]Status:[/bold] {status}
[bold]TOC Entries:[/bold] {info["entries"]}
[bold]Presets:[/bold] {info["presets"]}
[bold]Samples:[/bold] {info["samples"]}
[bold]Sequences:[/bold] {info["sequences"]}
[bold]Skipped Chunks:[/bold] {info["skipped"]}
[bold]Startup Block:[/bold] {"yes" if info["has_startup"] else "no"}"""

    if "error" in info:
        content += f"\n[bold]Error:[/bold] [red]{info['error']}[/red]"

    if bank is not None:
        startup = bank.get_preset(bank.startup_preset)
        startup_name = startup.name.strip() if startup else "none"
        content += f"\n[bold]Startup Preset:[/bold] {index_str(bank.startup_preset)} ({startup_name})"
        total_frames = sum(s.frame_count for s in bank.samples)
        content += f"\n[bold]Sample Frames:[/bold] {total_frames}"

    console.print(
        Panel(
            content,
            title="[bold blue]E4B Bank Info[/bold blue]",
            border_style="blue",
            expand=False,
        )
    )


def display_toc(entries: List[TocEntry], file_size: int) -> None:
    """Display the table of contents."""
    table = Table(
        title="Table of Contents", box=box.ROUNDED, show_header=True, header_style="bold magenta"
    )
    table.add_column("#", style="dim", width=4)
    table.add_column("Tag", width=6)
    table.add_column("Index", width=6)
    table.add_column("Name", style="cyan", width=18)
    table.add_column("Offset", style="dim", width=10)
    table.add_column("Payload", width=10)
    table.add_column("Status", width=10)

    for i, entry in enumerate(entries):
        style = TAG_STYLES.get(entry.tag, "red")
        status = "[green]OK[/green]" if entry.end <= file_size else "[red]Past EOF[/red]"
        table.add_row(
            str(i),
            f"[{style}]{entry.tag}[/{style}]",
            index_str(entry.index),
            entry.name,
            f"0x{entry.offset:06X}",
            str(entry.payload_size),
            status,
        )

    console.print(table)


def display_presets_table(bank: Bank) -> None:
    table = Table(title="Presets", box=box.ROUNDED, show_header=True, header_style="bold green")
    table.add_column("#", style="dim", width=4)
    table.add_column("Name", style="cyan", width=18)
    table.add_column("Voices", width=7)
    table.add_column("Zones", width=6)
    table.add_column("Transpose", width=10)
    table.add_column("Volume", width=8)
    table.add_column("Controllers", width=16)

    for preset in bank.presets:
        controllers = " ".join("--" if c == 0xFF else f"{c:02X}" for c in preset.initial_controllers)
        marker = " [yellow]*[/yellow]" if preset.index == bank.startup_preset else ""
        table.add_row(
            index_str(preset.index),
            preset.name + marker,
            str(len(preset.voices)),
            str(preset.zone_count),
            f"{preset.transpose:+d}",
            format_db(preset.volume),
            controllers,
        )

    console.print(table)
    if bank.presets:
        console.print("[dim]* startup preset[/dim]")


def display_voices_summary(preset: Preset) -> None:
    """Display one row per voice of a preset."""
    table = Table(
        title=f"Voices of {preset.name.strip()}",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold",
    )
    table.add_column("#", style="dim", width=3)
    table.add_column("Keys", width=18)
    table.add_column("Vel", width=10)
    table.add_column("Zones", width=6)
    table.add_column("Filter", width=22)
    table.add_column("Volume", width=8)
    table.add_column("Pan", width=20)

    for i, voice in enumerate(preset.voices):
        filter_str = f"{voice.filter_type.label} {format_frequency(voice.filter_frequency)}"
        table.add_row(
            str(i),
            format_range(voice.key_range, notes=True),
            format_range(voice.velocity_range),
            str(len(voice.zones)) if voice.zones else "[red]0[/red]",
            filter_str,
            format_db(voice.volume),
            pan_bar(voice.pan),
        )

    console.print(table)


def _envelope_table(title: str, envelope: Envelope) -> Table:
    table = Table(title=title, box=box.SIMPLE, show_header=True, header_style="dim")
    table.add_column("Stage", width=10)
    table.add_column("Rate", width=5)
    table.add_column("Level", width=6)

    names = ("Attack 1", "Attack 2", "Decay 1", "Decay 2", "Release 1", "Release 2")
    for name, (rate, level) in zip(names, envelope.stages()):
        table.add_row(name, str(rate), str(level))

    return table


def _lfo_lines(name: str, lfo: LFO, lag: int) -> str:
    return (
        f"[bold]{name}:[/bold] {lfo.shape.label}, {format_frequency(lfo.rate)}, "
        f"delay {lfo.delay:.3f} s, variation {format_percent(lfo.variation)}, "
        f"key sync {'on' if lfo.key_sync else 'off'}, lag {lag}"
    )


def display_voice_detail(preset: Preset, number: int, voice: Voice, bank: Bank) -> None:
    """Display everything known about one voice."""
    header = f"""[bold]Preset:[/bold] {index_str(preset.index)} {preset.name}
[bold]Voice:[/bold] {number} of {len(preset.voices)}
[bold]Group:[/bold] {voice.group + 1}  [bold]Assign:[/bold] {voice.key_assign_group.label}  [bold]Key Mode:[/bold] {voice.key_mode.label}
[bold]Keys:[/bold] {format_range(voice.key_range, notes=True)}  [bold]Velocity:[/bold] {format_range(voice.velocity_range)}  [bold]Realtime:[/bold] {format_range(voice.realtime_range)}
[bold]Key Delay:[/bold] {voice.key_delay} ms  [bold]Sample Offset:[/bold] {format_percent(voice.sample_offset)}  [bold]Latch:[/bold] {"on" if voice.key_latch else "off"}"""

    console.print(Panel(header, title="[bold blue]Voice[/bold blue]", border_style="blue", expand=False))

    tuning = Table(box=box.SIMPLE, show_header=False)
    tuning.add_column("Property", style="cyan", width=18)
    tuning.add_column("Value", width=40)
    tuning.add_row("Transpose", f"{voice.transpose:+d} st")
    tuning.add_row("Coarse Tune", f"{voice.coarse_tune:+d} st")
    tuning.add_row("Fine Tune", format_cents(voice.fine_tune))
    tuning.add_row("Fixed Pitch", "on" if voice.fixed_pitch else "off")
    tuning.add_row("Glide", f"rate {voice.glide_rate}, {voice.glide_curve.label}")
    tuning.add_row("Chorus", f"width {format_percent(voice.chorus_width)}, amount {format_percent(voice.chorus_amount)}")
    tuning.add_row("Volume", format_db(voice.volume))
    tuning.add_row("Pan", pan_bar(voice.pan))
    tuning.add_row("Amp Dyn Range", str(voice.amp_env_dyn_range))
    tuning.add_row("Filter", f"{voice.filter_type.label} ({int(voice.filter_type)})")
    tuning.add_row("Cutoff", format_frequency(voice.filter_frequency))
    tuning.add_row("Resonance", value_bar(voice.filter_resonance, max_value=100, show_value=False))
    console.print(tuning)

    console.print(
        Columns(
            [
                _envelope_table("Amp Envelope", voice.amp_env),
                _envelope_table("Filter Envelope", voice.filter_env),
                _envelope_table("Aux Envelope", voice.aux_env),
            ]
        )
    )

    console.print(_lfo_lines("LFO 1", voice.lfo1, voice.lfo_lag1))
    console.print(_lfo_lines("LFO 2", voice.lfo2, voice.lfo_lag2))
    console.print()

    cords = Table(title="Cords", box=box.ROUNDED, show_header=True, header_style="bold yellow")
    cords.add_column("#", style="dim", width=3)
    cords.add_column("Source", width=24)
    cords.add_column("Destination", width=24)
    cords.add_column("Amount", width=9)

    for i, cord in enumerate(voice.cords):
        if cord.is_off:
            continue
        cords.add_row(str(i), cord.source.label, cord.destination.label, f"{cord.amount:+.1f}%")

    console.print(cords)

    zones = Table(title="Zones", box=box.ROUNDED, show_header=True, header_style="bold cyan")
    zones.add_column("#", style="dim", width=3)
    zones.add_column("Sample", width=22)
    zones.add_column("Root", width=5)
    zones.add_column("Keys", width=18)
    zones.add_column("Vel", width=10)
    zones.add_column("Fine", width=10)
    zones.add_column("Vol", width=7)
    zones.add_column("Pan", width=5)

    for i, zone in enumerate(voice.zones):
        sample = bank.sample_for_zone(zone)
        if sample is None:
            sample_str = f"[red]{index_str(zone.sample_index)} missing[/red]"
        else:
            sample_str = f"{index_str(sample.index)} {sample.name.strip()}"
        zones.add_row(
            str(i),
            sample_str,
            str(zone.original_key),
            format_range(zone.key_range, notes=True),
            format_range(zone.velocity_range),
            format_cents(zone.fine_tune),
            format_db(zone.volume),
            str(zone.pan),
        )

    console.print(zones)


def display_samples_table(bank: Bank) -> None:
    table = Table(title="Samples", box=box.ROUNDED, show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=4)
    table.add_column("Name", style="cyan", width=18)
    table.add_column("Ch", width=3)
    table.add_column("Rate", width=10)
    table.add_column("Frames", width=9)
    table.add_column("Length", width=10)
    table.add_column("Loop", width=20)

    for sample in bank.samples:
        table.add_row(
            index_str(sample.index),
            sample.name,
            "St" if sample.is_stereo else "M",
            f"{sample.sample_rate} Hz",
            str(sample.frame_count),
            format_duration(sample.duration),
            format_loop(sample.loop),
        )

    console.print(table)
