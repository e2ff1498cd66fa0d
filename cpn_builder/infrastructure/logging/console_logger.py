from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, override

from rich.console import Console

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from pathlib import Path

    from ...application.models import DocumentSummary
    from ...domain.entities import Diagnostic


class LogLevel(IntEnum):
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2


def _new_stats() -> dict[str, int]:
    return {
        "pages_built": 0,
        "elements_built": 0,
        "files_written": 0,
        "warnings": 0,
        "errors": 0,
    }


class ConsoleLogger(LoggerPort):
    pass

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        super().__init__()
        self.console = console or Console()
        self.verbosity = verbosity
        self._stats = _new_stats()

    @override
    def info(self, message: str, *, level: int = LogLevel.NORMAL) -> None:
        if self.verbosity >= level:
            self.console.print(message)

    @override
    def verbose(self, message: str) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            self.console.print(f"[dim]{message}[/dim]")

    @override
    def debug(self, message: str) -> None:
        if self.verbosity >= LogLevel.DEBUG:
            self.console.print(f"[dim cyan]{message}[/dim cyan]")

    @override
    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    @override
    def warning(self, message: str) -> None:
        self._stats["warnings"] += 1
        self.console.print(f"[yellow]⚠[/yellow] {message}")

    @override
    def error(self, message: str) -> None:
        self._stats["errors"] += 1
        self.console.print(f"[red]✗[/red] {message}")

    @override
    def log_diagnostic(self, diagnostic: Diagnostic) -> None:
        self.warning(diagnostic.message)
        if diagnostic.element_id is not None:
            self.debug(f"  {diagnostic.kind} at {diagnostic.element_id}")

    @override
    def log_page_built(self, page_name: str, element_count: int) -> None:
        self._stats["pages_built"] += 1
        self._stats["elements_built"] += element_count
        self.verbose(f"  Laid out page {page_name} ({element_count} elements)")

    @override
    def log_document_summary(self, summary: DocumentSummary) -> None:
        self.console.print()
        self.console.print(
            f"[bold]Built {summary.page_count} pages[/bold] "
            f"({summary.place_count} places, {summary.transition_count} transitions, "
            f"{summary.arc_count} arcs)"
        )
        self.verbose(
            f"Declarations: {summary.declaration_count}, "
            f"fusion sets: {summary.fusion_count}, instances: {summary.instance_count}"
        )
        self.debug(f"Identifiers issued: {summary.ids_issued}")
        if summary.diagnostic_count:
            self.console.print(
                f"[yellow]{summary.diagnostic_count} construction warnings[/yellow]"
            )

    @override
    def log_file_written(self, path: Path, summary: DocumentSummary) -> None:
        self._stats["files_written"] += 1
        self.success(f"Wrote {path} ({summary.page_count} pages)")

    @override
    def log_final_stats(self) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            self.console.print()
            self.console.print("[dim]Build Statistics:[/dim]")
            self.console.print(f"[dim]  Pages laid out: {self._stats['pages_built']}[/dim]")
            self.console.print(
                f"[dim]  Elements laid out: {self._stats['elements_built']:,}[/dim]"
            )
            self.console.print(f"[dim]  Files written: {self._stats['files_written']}[/dim]")
            if self._stats["warnings"] > 0:
                self.console.print(
                    f"[dim yellow]  Warnings: {self._stats['warnings']}[/dim yellow]"
                )
            if self._stats["errors"] > 0:
                self.console.print(
                    f"[dim red]  Errors: {self._stats['errors']}[/dim red]"
                )

    def get_stats(self) -> dict[str, int]:
        return self._stats.copy()

    def reset_stats(self) -> None:
        self._stats = _new_stats()
