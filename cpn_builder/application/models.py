from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from ..config import BuilderConfig
    from ..domain.entities import CpnDocument, Diagnostic


def _empty_diagnostics() -> list[Diagnostic]:
    return []


@dataclass(frozen=True, slots=True)
class DocumentSummary:
    page_count: int = 0
    place_count: int = 0
    transition_count: int = 0
    arc_count: int = 0
    declaration_count: int = 0
    fusion_count: int = 0
    instance_count: int = 0
    diagnostic_count: int = 0
    ids_issued: int = 0

    @classmethod
    def from_document(cls, document: CpnDocument) -> DocumentSummary:
        return cls(
            page_count=len(document.pages),
            place_count=sum(len(page.places) for page in document.pages),
            transition_count=sum(len(page.transitions) for page in document.pages),
            arc_count=sum(len(page.arcs) for page in document.pages),
            declaration_count=len(document.declarations),
            fusion_count=len(document.fusions),
            instance_count=sum(1 for _ in document.instances.walk()),
            diagnostic_count=len(document.diagnostics),
            ids_issued=document.ids.issued,
        )


@dataclass(slots=True)
class BuildExampleRequest:
    output_path: Path
    config: BuilderConfig | None = None
    verbose: int = 0


@dataclass(slots=True)
class BuildExampleResponse:
    success: bool = True
    output_path: Path | None = None
    summary: DocumentSummary | None = None
    diagnostics: list[Diagnostic] = field(default_factory=_empty_diagnostics)
    error: str | None = None

    @property
    def has_warnings(self) -> bool:
        return len(self.diagnostics) > 0
