from __future__ import annotations

from dataclasses import dataclass
import traceback
from typing import TYPE_CHECKING

from ..domain.exceptions import CpnBuilderError
from .example_model import build_example_model
from .models import BuildExampleResponse, DocumentSummary

if TYPE_CHECKING:
    from .models import BuildExampleRequest
    from .ports.services import CpnWriterPort, LoggerPort

VERBOSE_TRACEBACK_LEVEL = 2


@dataclass(slots=True)
class BuildExampleDependencies:
    logger: LoggerPort
    writer: CpnWriterPort


class BuildExampleUseCase:
    """Build the demo net and write it as a ``.cpn`` file."""

    def __init__(self, dependencies: BuildExampleDependencies) -> None:
        super().__init__()
        self.logger = dependencies.logger
        self._writer = dependencies.writer

    def execute(self, request: BuildExampleRequest) -> BuildExampleResponse:
        response = BuildExampleResponse()
        try:
            model = build_example_model(request.config, self.logger)
            document = model.document
            summary = DocumentSummary.from_document(document)
            response.summary = summary
            response.diagnostics = list(document.diagnostics)
            self.logger.log_document_summary(summary)
            response.output_path = self._writer.write(document, request.output_path)
            self.logger.log_file_written(response.output_path, summary)
        except (CpnBuilderError, OSError) as exc:
            response.success = False
            response.error = str(exc)
            self.logger.error(f"{request.output_path}: {exc}")
            if request.verbose >= VERBOSE_TRACEBACK_LEVEL:
                self.logger.error(traceback.format_exc())
        return response
