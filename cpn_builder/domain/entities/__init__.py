from .colorset import ColorSet, ColorSetKind, Declaration, VariableDeclaration
from .diagnostics import Diagnostic, DiagnosticKind
from .document import CpnDocument
from .graphics import Arrow, Position, Shape, Style
from .hierarchy import FusionSet, Instance, InstancesSection
from .identifiers import IdGenerator
from .net import (
    Arc,
    ArcOrientation,
    ElementKind,
    FusionTag,
    Label,
    Page,
    Place,
    PortRole,
    PortTag,
    Substitution,
    Transition,
)

__all__ = [
    "Arc",
    "ArcOrientation",
    "Arrow",
    "ColorSet",
    "ColorSetKind",
    "CpnDocument",
    "Declaration",
    "Diagnostic",
    "DiagnosticKind",
    "ElementKind",
    "FusionSet",
    "FusionTag",
    "IdGenerator",
    "Instance",
    "InstancesSection",
    "Label",
    "Page",
    "Place",
    "PortRole",
    "PortTag",
    "Position",
    "Shape",
    "Style",
    "Substitution",
    "Transition",
    "VariableDeclaration",
]
