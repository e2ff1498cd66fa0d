"""CPN builder package.

This package builds Coloured Petri Net models in memory and writes them as
CPN Tools XML files.

Features:
- Color-set and variable declarations
- Places, transitions and arcs wired together by generated ids
- Substitution pages with a scoped instance hierarchy
- Fusion sets
- Default graphics and symmetric layout
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("cpn-builder")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

# Core exports
from cpn_builder.application.example_model import ExampleModel, build_example_model
from cpn_builder.application.net_factory import CpnNetFactory, PageBuilder
from cpn_builder.config import BuilderConfig
from cpn_builder.domain.entities import CpnDocument
from cpn_builder.infrastructure.io.cpn_xml import (
    build_cpn_tree,
    render_cpn_xml,
    write_cpn_file,
)

__all__ = [
    "__version__",
    # Model building
    "BuilderConfig",
    "CpnDocument",
    "CpnNetFactory",
    "PageBuilder",
    # Demo
    "ExampleModel",
    "build_example_model",
    # Output
    "build_cpn_tree",
    "render_cpn_xml",
    "write_cpn_file",
]
