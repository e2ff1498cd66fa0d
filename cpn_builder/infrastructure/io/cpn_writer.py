from __future__ import annotations

from typing import TYPE_CHECKING, override

from cpn_builder.application.ports.services import CpnWriterPort

from .cpn_xml import render_cpn_xml, write_cpn_file

if TYPE_CHECKING:
    from pathlib import Path

    from cpn_builder.config import BuilderConfig
    from cpn_builder.domain.entities import CpnDocument


class CpnFileWriter(CpnWriterPort):
    """Writes documents as ``.cpn`` files using one fixed configuration."""

    def __init__(self, config: BuilderConfig | None = None) -> None:
        super().__init__()
        self.config = config

    @override
    def render(self, document: CpnDocument) -> str:
        return render_cpn_xml(document, self.config)

    @override
    def write(self, document: CpnDocument, output_path: Path) -> Path:
        return write_cpn_file(document, output_path, self.config)
