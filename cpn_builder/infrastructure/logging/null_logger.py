from __future__ import annotations

from typing import TYPE_CHECKING, override

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from pathlib import Path

    from ...application.models import DocumentSummary
    from ...domain.entities import Diagnostic


class NullLogger(LoggerPort):
    pass

    @override
    def info(self, message: str) -> None:
        return

    @override
    def success(self, message: str) -> None:
        return

    @override
    def warning(self, message: str) -> None:
        return

    @override
    def error(self, message: str) -> None:
        return

    @override
    def debug(self, message: str) -> None:
        return

    @override
    def verbose(self, message: str) -> None:
        return

    @override
    def log_diagnostic(self, diagnostic: Diagnostic) -> None:
        return None

    @override
    def log_page_built(self, page_name: str, element_count: int) -> None:
        return None

    @override
    def log_document_summary(self, summary: DocumentSummary) -> None:
        return None

    @override
    def log_file_written(self, path: Path, summary: DocumentSummary) -> None:
        return None

    @override
    def log_final_stats(self) -> None:
        return None
