#!/usr/bin/env python3
"""
Loader utilities for visual feedback during a sync run.
"""

from typing import Any, Optional

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
)


class ProgressBar:
    """Rich-based progress bar for terminal output."""

    def __init__(
        self,
        total: Optional[int],
        description: str = "Syncing",
        console: Optional[Console] = None,
    ):
        self.total = total
        self.description = description
        self.current = 0
        self.console = console or Console()

        self.progress = Progress(
            SpinnerColumn(spinner_name="dots", style="bold magenta"),
            TextColumn("[bold cyan]{task.description}"),
            BarColumn(complete_style="bold green", finished_style="bold bright_green"),
            TextColumn("({task.completed}/{task.total})"),
            TimeElapsedColumn(),
            console=self.console,
            transient=True,
        )
        self.task_id: Optional[Any] = None

    def start(self) -> None:
        """Start the progress bar."""
        self.progress.start()
        self.task_id = self.progress.add_task(self.description, total=self.total)

    def update(self, increment: int = 1, description: Optional[str] = None) -> None:
        """Advance the progress bar."""
        if self.task_id is None:
            return
        self.current += increment
        if description is not None:
            self.progress.update(
                self.task_id, completed=self.current, description=description
            )
        else:
            self.progress.update(self.task_id, completed=self.current)

    def finish(self) -> None:
        """Stop the progress bar."""
        self.progress.stop()
        self.task_id = None

    def __enter__(self) -> "ProgressBar":
        self.start()
        return self

    def __exit__(self, *exc: object) -> None:
        self.finish()
