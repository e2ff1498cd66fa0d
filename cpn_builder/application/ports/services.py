from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    from ...domain.entities import CpnDocument, Diagnostic
    from ..models import DocumentSummary


@runtime_checkable
class LoggerPort(Protocol):
    pass

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def verbose(self, message: str) -> None: ...

    def log_diagnostic(self, diagnostic: Diagnostic) -> None: ...

    def log_page_built(self, page_name: str, element_count: int) -> None: ...

    def log_document_summary(self, summary: DocumentSummary) -> None: ...

    def log_file_written(self, path: Path, summary: DocumentSummary) -> None: ...

    def log_final_stats(self) -> None: ...


@runtime_checkable
class CpnWriterPort(Protocol):
    pass

    def render(self, document: CpnDocument) -> str: ...

    def write(self, document: CpnDocument, output_path: Path) -> Path: ...
