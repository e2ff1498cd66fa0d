from __future__ import annotations

from typing import TYPE_CHECKING

from rich.table import Table

if TYPE_CHECKING:
    from collections.abc import Sequence

    from rich.console import Console

    from ...application.models import BuildExampleResponse, DocumentSummary
    from ...domain.entities import Diagnostic


class SummaryPresenter:
    pass

    def __init__(self, console: Console) -> None:
        super().__init__()
        self.console = console

    def present(self, response: BuildExampleResponse) -> None:
        if response.summary is not None:
            self.console.print()
            self.console.print(self._build_summary_table(response.summary))
        if response.diagnostics:
            self.console.print()
            self.console.print(self._build_diagnostics_table(response.diagnostics))
        self.console.print()
        if response.success:
            self.console.print(
                f"[bold green]Model written to {response.output_path}[/bold green]"
            )
        else:
            self.console.print(f"[bold red]Build failed:[/bold red] {response.error}")

    def _build_summary_table(self, summary: DocumentSummary) -> Table:
        table = Table(title="CPN Model Summary")
        table.add_column("Element", style="cyan")
        table.add_column("Count", justify="right")
        table.add_row("Pages", str(summary.page_count))
        table.add_row("Places", str(summary.place_count))
        table.add_row("Transitions", str(summary.transition_count))
        table.add_row("Arcs", str(summary.arc_count))
        table.add_row("Declarations", str(summary.declaration_count))
        table.add_row("Fusion sets", str(summary.fusion_count))
        table.add_row("Instances", str(summary.instance_count))
        return table

    def _build_diagnostics_table(self, diagnostics: Sequence[Diagnostic]) -> Table:
        table = Table(title="Construction Warnings")
        table.add_column("Kind", style="yellow")
        table.add_column("Element")
        table.add_column("Message")
        for diagnostic in diagnostics:
            table.add_row(
                str(diagnostic.kind), diagnostic.element_id or "-", diagnostic.message
            )
        return table
