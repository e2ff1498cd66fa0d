"""CPN XML generation module.

The module is organized into focused components:
- constants: Root tag, DOCTYPE identifiers and fixed placeholders
- builder: Document tree construction
- writer: XML serialization and file I/O
"""

from .builder import build_cpn_tree
from .writer import render_cpn_xml, write_cpn_file

__all__ = [
    "build_cpn_tree",
    "render_cpn_xml",
    "write_cpn_file",
]
