"""Command-line interface for the Conference Program Extractor."""

import json
import logging
import sys
from pathlib import Path

import structlog
import typer
from pydantic import TypeAdapter, ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from program_extractor.config.settings import get_settings
from program_extractor.models import (
    AgendaExtractionReport,
    ExtractionTrace,
    KnownSpeaker,
    SpeakerExtractionReport,
)
from program_extractor.pipeline import run_agenda_extraction, run_speaker_extraction

# Configure structlog for CLI
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

app = typer.Typer(
    name="program-extractor",
    help="Conference Program Extractor - Recover agenda items and speakers from program text",
    add_completion=False,
)
console = Console()

_CATALOG_ADAPTER = TypeAdapter(list[KnownSpeaker])


class CatalogError(Exception):
    """Speaker catalog file could not be loaded."""

    pass


def load_catalog(path: Path) -> list[KnownSpeaker]:
    """Load a JSON array of {"id", "name"} objects, preserving file order.

    Raises:
        CatalogError: If the file is not valid JSON of that shape.
    """
    try:
        return _CATALOG_ADAPTER.validate_json(path.read_bytes())
    except ValidationError as e:
        raise CatalogError(f"Invalid speaker catalog {path}: {e}") from e


def _configure_logging(verbose: bool) -> None:
    if verbose:
        level = logging.DEBUG
    else:
        level = logging.getLevelName(get_settings().log_level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(level=level, stream=sys.stderr, format="%(message)s")


def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _write_json(payload: object, output: Path, pretty: bool) -> None:
    with open(output, "w", encoding="utf-8") as f:
        if pretty:
            json.dump(payload, f, indent=2, ensure_ascii=False, default=str)
        else:
            json.dump(payload, f, ensure_ascii=False, default=str)


@app.command()
def agenda(
    text_path: Path = typer.Argument(
        ...,
        help="Path to the plain-text program (already extracted from the document)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    speakers: Path = typer.Option(
        None,
        "--speakers",
        "-s",
        help="JSON file with known speakers: [{\"id\": ..., \"name\": ...}, ...]",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    fallback_date: str = typer.Option(
        None,
        "--fallback-date",
        help="ISO date used when the program never states one (default: today)",
    ),
    output: Path = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file path for the JSON records (default: <text_name>_agenda.json)",
    ),
    pretty: bool = typer.Option(
        True,
        "--pretty/--compact",
        help="Pretty-print JSON output",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging",
    ),
) -> None:
    """Extract agenda items from a program text file."""
    _configure_logging(verbose)

    console.print(
        Panel.fit(
            "[bold blue]Conference Program Extractor[/bold blue]\n"
            "Extracting agenda items...",
            border_style="blue",
        )
    )
    console.print(f"\n[dim]Input:[/dim] {text_path}")

    if output is None:
        output = text_path.with_name(f"{text_path.stem}_agenda.json")

    try:
        catalog = load_catalog(speakers) if speakers else []
        report = run_agenda_extraction(_read_text(text_path), catalog, fallback_date)
    except Exception as e:
        console.print(f"\n[red]Error:[/red] {e}")
        if verbose:
            console.print_exception()
        sys.exit(1)

    _display_agenda_summary(report)

    if not report.items:
        _display_empty(report.trace)
        sys.exit(1)

    _write_json([item.model_dump(mode="json") for item in report.items], output, pretty)
    console.print(f"\n[green]Agenda saved to:[/green] {output}")


@app.command(name="speakers")
def speakers_command(
    text_path: Path = typer.Argument(
        ...,
        help="Path to the plain-text program (already extracted from the document)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    output: Path = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file path for the JSON records (default: <text_name>_speakers.json)",
    ),
    pretty: bool = typer.Option(
        True,
        "--pretty/--compact",
        help="Pretty-print JSON output",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging",
    ),
) -> None:
    """Extract speaker profiles from a program text file."""
    _configure_logging(verbose)

    console.print(
        Panel.fit(
            "[bold blue]Conference Program Extractor[/bold blue]\n"
            "Extracting speaker profiles...",
            border_style="blue",
        )
    )
    console.print(f"\n[dim]Input:[/dim] {text_path}")

    if output is None:
        output = text_path.with_name(f"{text_path.stem}_speakers.json")

    try:
        report = run_speaker_extraction(_read_text(text_path))
    except Exception as e:
        console.print(f"\n[red]Error:[/red] {e}")
        if verbose:
            console.print_exception()
        sys.exit(1)

    _display_speaker_summary(report)

    if not report.speakers:
        _display_empty(report.trace)
        sys.exit(1)

    _write_json([s.model_dump(mode="json") for s in report.speakers], output, pretty)
    console.print(f"\n[green]Speakers saved to:[/green] {output}")


@app.command()
def info() -> None:
    """Display system information and configuration."""
    from program_extractor import __version__

    settings = get_settings()

    console.print(
        Panel.fit(
            "[bold blue]Conference Program Extractor[/bold blue]",
            border_style="blue",
        )
    )

    table = Table(show_header=False, box=None)
    table.add_column("Setting", style="dim")
    table.add_column("Value")

    table.add_row("Version", __version__)
    table.add_row("Default Specialty", settings.default_specialty)
    table.add_row("Fallback Bio", settings.fallback_speaker_bio)
    table.add_row("Excerpt Length", f"{settings.diagnostic_excerpt_chars} chars")
    table.add_row("Log Level", settings.log_level)

    console.print(table)


def _display_trace(trace: ExtractionTrace) -> None:
    table = Table(show_header=False, box=None)
    table.add_column("Metric", style="dim")
    table.add_column("Value", justify="right")

    table.add_row("Strategy", trace.strategy.value)
    table.add_row("Lines", str(trace.lines_total))
    table.add_row("Drafts Sealed", str(trace.drafts_sealed))
    table.add_row("Drafts Dropped", str(trace.drafts_dropped))

    console.print(table)


def _display_agenda_summary(report: AgendaExtractionReport) -> None:
    """Display a summary of extracted agenda items.

    Args:
        report: The agenda extraction report.
    """
    console.print("\n[bold]Agenda Summary[/bold]")
    console.print("-" * 40)
    _display_trace(report.trace)

    if not report.items:
        return

    table = Table(show_header=True)
    table.add_column("Date")
    table.add_column("Time")
    table.add_column("Type")
    table.add_column("Title")
    table.add_column("Speakers", justify="right")

    for item in report.items:
        table.add_row(
            item.date,
            f"{item.start_time}-{item.end_time}",
            item.type.value,
            item.title,
            str(len(item.speaker_ids)),
        )

    console.print(table)


def _display_speaker_summary(report: SpeakerExtractionReport) -> None:
    """Display a summary of extracted speaker profiles.

    Args:
        report: The speaker extraction report.
    """
    console.print("\n[bold]Speaker Summary[/bold]")
    console.print("-" * 40)
    _display_trace(report.trace)

    if not report.speakers:
        return

    table = Table(show_header=True)
    table.add_column("Name")
    table.add_column("Specialty")
    table.add_column("Bio", overflow="ellipsis", max_width=50)

    for speaker in report.speakers:
        table.add_row(speaker.name, speaker.specialty, speaker.bio)

    console.print(table)


def _display_empty(trace: ExtractionTrace) -> None:
    console.print(
        "\n[yellow]No records could be extracted. Check the document format.[/yellow]"
    )
    if trace.excerpt:
        console.print("[dim]Text excerpt:[/dim]")
        console.print(trace.excerpt, markup=False, highlight=False)


if __name__ == "__main__":
    app()
