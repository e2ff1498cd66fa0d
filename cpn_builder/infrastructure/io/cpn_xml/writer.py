"""Writer for CPN XML files.

This module handles indentation, the XML declaration and the DOCTYPE that
ElementTree cannot emit on its own, and file I/O.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from xml.etree import ElementTree as ET

from .builder import build_cpn_tree
from .constants import (
    DOCTYPE_PUBLIC_ID,
    DOCTYPE_TEMPLATE,
    ROOT_TAG,
    XML_DECLARATION,
)

if TYPE_CHECKING:
    from pathlib import Path

    from cpn_builder.config import BuilderConfig
    from cpn_builder.domain.entities import CpnDocument


def render_cpn_xml(document: CpnDocument, config: BuilderConfig | None = None) -> str:
    """Serialize ``document`` to the text of a ``.cpn`` file."""
    config = config or document.config
    root = build_cpn_tree(document, config)
    ET.indent(root, space=" " * config.indent)
    doctype = DOCTYPE_TEMPLATE.format(
        root=ROOT_TAG, public_id=DOCTYPE_PUBLIC_ID, system_id=config.dtd_system
    )
    body = ET.tostring(root, encoding="unicode")
    return f"{XML_DECLARATION}\n{doctype}\n{body}\n"


def write_cpn_file(
    document: CpnDocument, output: Path, config: BuilderConfig | None = None
) -> Path:
    """Write ``document`` to ``output``, creating parent directories.

    OS errors are not caught here.
    """
    text = render_cpn_xml(document, config)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    return output
