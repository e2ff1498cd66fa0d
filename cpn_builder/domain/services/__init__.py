"""Domain services.

Builders and calculators that grow a ``CpnDocument``.
"""

from .colorset_builder import ColorSetBuilder
from .fusion_registry import FusionRegistry
from .hierarchy_tracker import InstanceHierarchy
from .layout import (
    ARC_LAYOUTS,
    NODE_LAYOUTS,
    LayoutReport,
    Spacer,
    arc_annotation_position,
    distribute_horizontally,
    position_all_arcs,
    set_arc_layout_and_position,
    set_default_layout,
    set_layout_and_position,
    set_position,
    spacer,
)
from .marking import create_marking_text
from .net_builder import NetElementBuilder

__all__ = [
    # Declarations
    "ColorSetBuilder",
    # Net elements
    "FusionRegistry",
    "NetElementBuilder",
    # Hierarchy
    "InstanceHierarchy",
    # Layout
    "ARC_LAYOUTS",
    "NODE_LAYOUTS",
    "LayoutReport",
    "Spacer",
    "arc_annotation_position",
    "distribute_horizontally",
    "position_all_arcs",
    "set_arc_layout_and_position",
    "set_default_layout",
    "set_layout_and_position",
    "set_position",
    "spacer",
    # Markings
    "create_marking_text",
]
