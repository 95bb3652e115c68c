#!/usr/bin/env python3
"""
🎛️ djuced-sync - Mixed In Key analysis into DJUCED
CLI interface with Typer and Rich
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from djuced_sync.core.bookmark import BookmarkDecoder
from djuced_sync.core.config import ConfigurationManager, get_config
from djuced_sync.core.database import (
    DjucedLibrary,
    MikLibrary,
    djuced_db_path,
    mik_db_path,
)
from djuced_sync.core.exceptions import SyncError
from djuced_sync.core.key_codec import CAMELOT_TO_DJUCED
from djuced_sync.core.models import SyncSummary
from djuced_sync.core.sync import SyncOrchestrator
from djuced_sync.utils.loader import ProgressBar
from djuced_sync.utils.logging_setup import configure_logging

# Configure Rich console
console = Console()

# Create Typer app
app = typer.Typer(
    name="djuced-sync",
    help="🎛️ Copy Mixed In Key analysis (tempo, key, energy, cues) into DJUCED",
    add_completion=False,
    rich_markup_mode="rich",
)


def show_banner() -> None:
    """Display the app banner"""
    banner = Text()
    banner.append("🎛️ ", style="bold magenta")
    banner.append("djuced-sync", style="bold cyan")
    banner.append(" - Mixed In Key to DJUCED", style="italic")

    console.print(Panel(banner, style="cyan", padding=(1, 2)))


def print_error(error: BaseException) -> None:
    """Print an error and every cause underneath it."""
    console.print(f"[red]❌ Error: {escape(str(error))}[/red]")
    cause = error.__cause__
    while cause is not None:
        console.print(f"[red]   caused by: {escape(str(cause))}[/red]")
        cause = cause.__cause__


def load_config(config_path: Optional[str]) -> ConfigurationManager:
    if config_path:
        return ConfigurationManager(config_path)
    return get_config()


def show_summary(summary: SyncSummary) -> None:
    """Show counts and skip reasons for a finished run"""
    counts = summary.to_dict()
    title = "📊 Sync Summary (dry run)" if summary.dry_run else "📊 Sync Summary"

    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Songs Read", str(counts["total"]))
    table.add_row("Synced", str(counts["synced"]))
    table.add_row("Skipped", str(counts["skipped"]))
    table.add_row("Not in DJUCED", str(counts["unmatched"]))
    table.add_row("Cues Written", str(counts["cues_written"]))
    console.print(table)

    if summary.skipped:
        skipped = Table(
            title="⏭️  Skipped Songs", show_header=True, header_style="bold yellow"
        )
        skipped.add_column("MIK ID", style="cyan")
        skipped.add_column("Path", style="white")
        skipped.add_column("Reason", style="yellow")
        for result in summary.skipped:
            skipped.add_row(
                str(result.source_id),
                escape(result.path or "-"),
                escape(result.reason or "-"),
            )
        console.print(skipped)


def run_sync(
    config: ConfigurationManager,
    source: Optional[str] = None,
    dest: Optional[str] = None,
    dry_run: bool = False,
    show_progress: bool = True,
) -> SyncSummary:
    """
    Open both databases and sync every analysed song.

    Raises:
        SyncError: on connection failures or failed writes
    """
    source_path = mik_db_path(source or config.source_path, config.source_filename)
    dest_path = djuced_db_path(dest or config.destination_path)
    settings = config.sync_settings

    with MikLibrary(source_path) as mik, DjucedLibrary(
        dest_path,
        dry_run=dry_run,
        system_cue_threshold=settings["system_cue_threshold"],
    ) as djuced:
        orchestrator = SyncOrchestrator(
            mik,
            djuced,
            tempo_threshold=settings["tempo_round_threshold"],
            comment_format=settings["comment_format"],
            cue_name_format=settings["cue_name_format"],
        )

        if not show_progress:
            return orchestrator.run(dry_run=dry_run)

        with ProgressBar(mik.count_songs(), "Syncing songs", console) as progress:
            return orchestrator.run(
                on_result=lambda _: progress.update(), dry_run=dry_run
            )


@app.command()
def sync(
    source: Optional[str] = typer.Option(
        None, "--source", "-s", help="Mixed In Key database path"
    ),
    dest: Optional[str] = typer.Option(
        None, "--dest", "-d", help="DJUCED database path"
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", "-n", help="Run every statement, then roll back"
    ),
    config_path: Optional[str] = typer.Option(
        None, "--config", "-c", help="Path to config.yml"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """🔄 Sync Mixed In Key analysis into DJUCED"""
    config = load_config(config_path)
    log_settings = config.logging_settings
    configure_logging(
        "DEBUG" if verbose else log_settings["level"], log_settings["file"]
    )
    show_banner()

    try:
        summary = run_sync(config, source, dest, dry_run=dry_run)
    except SyncError as e:
        print_error(e)
        raise typer.Exit(1)

    show_summary(summary)
    if dry_run:
        console.print("[yellow]ℹ️  Dry run: no changes were written[/yellow]")
    else:
        console.print("[bold green]🎉 Sync complete![/bold green]")


@app.command()
def paths(
    config_path: Optional[str] = typer.Option(
        None, "--config", "-c", help="Path to config.yml"
    ),
) -> None:
    """📂 Show where the Mixed In Key and DJUCED databases are expected"""
    config = load_config(config_path)

    table = Table(title="📂 Databases", show_header=True, header_style="bold magenta")
    table.add_column("Library", style="cyan")
    table.add_column("Path", style="white")
    table.add_column("Exists", style="green")

    try:
        source = mik_db_path(config.source_path, config.source_filename)
        table.add_row("Mixed In Key", str(source), "✅" if source.exists() else "❌")
    except SyncError as e:
        table.add_row("Mixed In Key", f"[red]{e}[/red]", "❌")

    dest = djuced_db_path(config.destination_path)
    table.add_row("DJUCED", str(dest), "✅" if dest.exists() else "❌")

    console.print(table)


@app.command()
def inspect(
    blob: str = typer.Argument(
        ..., help="File containing bookmark data, or the data as hex"
    ),
) -> None:
    """🔍 Decode a bookmark blob and list its records"""
    blob_path = Path(blob)
    if blob_path.is_file():
        data = blob_path.read_bytes()
    else:
        try:
            data = bytes.fromhex(blob.replace(" ", ""))
        except ValueError:
            console.print(f"[red]❌ Not a file or hex string: {blob}[/red]")
            raise typer.Exit(1)

    records = list(BookmarkDecoder().iter_records(data))
    if not records:
        console.print("[red]❌ No records found in bookmark data[/red]")
        raise typer.Exit(1)

    table = Table(
        title=f"🔍 Bookmark Records ({len(data)} bytes)",
        show_header=True,
        header_style="bold magenta",
    )
    table.add_column("Offset", style="cyan", justify="right")
    table.add_column("Length", style="cyan", justify="right")
    table.add_column("Text", style="white")
    for i, record in enumerate(records):
        text = escape(record.text)
        if i == len(records) - 1:
            text = f"[bold green]{text}[/bold green] ← path"
        table.add_row(str(record.offset), str(record.length), text)

    console.print(table)


@app.command()
def keys() -> None:
    """🎹 Show the Camelot to DJUCED key code table"""
    table = Table(
        title="🎹 Key Codes", show_header=True, header_style="bold magenta"
    )
    table.add_column("Camelot", style="cyan")
    table.add_column("DJUCED", style="green", justify="right")
    for label, code in CAMELOT_TO_DJUCED.items():
        table.add_row(label, str(code))
    console.print(table)


def main() -> None:
    """Main entry point"""
    app()


if __name__ == "__main__":
    main()
