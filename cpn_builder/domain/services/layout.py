"""Coordinates and default graphics for net elements.

Every element kind maps to a pair of functions in a strategy table: one that
fills in the default graphics (style, shape, label styles) and one that places
the element and the labels hanging off it. Arcs are positioned from the two
nodes they connect, so they are laid out after those nodes have settled.

All functions work on the typed model; nothing here touches XML.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from ...constants import Offsets, Shapes
from ..entities.diagnostics import DiagnosticKind
from ..entities.graphics import (
    LABEL_STYLE,
    NODE_STYLE,
    TRANSITION_LABEL_STYLE,
    Arrow,
    Position,
    Shape,
)
from ..entities.net import Arc, ElementKind, Place, Transition

if TYPE_CHECKING:
    from ..entities.document import CpnDocument
    from ..entities.net import Page

Node = Place | Transition
NodeT = TypeVar("NodeT", Place, Transition)


class Spacer:
    """1-D coordinates that spread elements evenly on both sides of an axis.

    From ``start`` the values alternate around zero: ``c -> -(c - step)`` when
    ``c <= 0`` and ``c -> -c`` otherwise, giving 0, step, -step, 2*step, ...
    """

    def __init__(self, step: int, start: int = 0, translation: int = 0) -> None:
        super().__init__()
        self.step = step
        self.translation = translation
        self._current = start

    def next(self) -> int:
        value = self._current
        if self._current <= 0:
            self._current = -(self._current - self.step) + self.translation
        else:
            self._current = -self._current + self.translation
        return value

    def __iter__(self) -> Iterator[int]:
        while True:
            yield self.next()


def spacer(step: int, start: int = 0) -> Iterator[int]:
    return iter(Spacer(step, start))


@dataclass(frozen=True, slots=True)
class NodeLayout(Generic[NodeT]):
    set_default_layout: Callable[[NodeT], None]
    set_position: Callable[[NodeT, int, int], None]


@dataclass(frozen=True, slots=True)
class ArcLayout:
    set_default_layout: Callable[[Arc], None]
    set_position: Callable[[Arc, CpnDocument], Position | None]


@dataclass(slots=True)
class LayoutReport:
    positioned: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


# places


def _place_default_layout(place: Place) -> None:
    place.style = NODE_STYLE
    place.shape = Shape("ellipse", Shapes.PLACE_WIDTH, Shapes.PLACE_HEIGHT)
    place.token_offset = Shapes.TOKEN_OFFSET
    place.marking_offset = Shapes.MARKING_OFFSET
    place.type_label.style = LABEL_STYLE
    place.initmark.style = LABEL_STYLE


def _place_position(place: Place, x: int, y: int) -> None:
    place.position = Position(x, y)
    place.type_label.position = place.position.offset(*Offsets.TYPE_LABEL)
    place.initmark.position = place.position.offset(*Offsets.INITMARK_LABEL)


def _port_place_default_layout(place: Place) -> None:
    _place_default_layout(place)
    if place.port is not None:
        place.port.style = LABEL_STYLE


def _port_place_position(place: Place, x: int, y: int) -> None:
    _place_position(place, x, y)
    if place.port is not None:
        place.port.position = Position(x, y).offset(*Offsets.PORT_TAG)


def _fusion_place_default_layout(place: Place) -> None:
    _port_place_default_layout(place)
    if place.fusion is not None:
        place.fusion.style = LABEL_STYLE


def _fusion_place_position(place: Place, x: int, y: int) -> None:
    _port_place_position(place, x, y)
    if place.fusion is not None:
        place.fusion.position = Position(x, y).offset(*Offsets.FUSION_TAG)


# transitions


def _transition_default_layout(transition: Transition) -> None:
    transition.style = NODE_STYLE
    transition.shape = Shape("box", Shapes.TRANSITION_WIDTH, Shapes.TRANSITION_HEIGHT)


def _transition_position(transition: Transition, x: int, y: int) -> None:
    transition.position = Position(x, y)


def _condition_default_layout(transition: Transition) -> None:
    _transition_default_layout(transition)
    if transition.guard is not None:
        transition.guard.style = TRANSITION_LABEL_STYLE


def _condition_position(transition: Transition, x: int, y: int) -> None:
    _transition_position(transition, x, y)
    if transition.guard is not None:
        transition.guard.position = Position(x, y).offset(*Offsets.CONDITION_LABEL)


def _substitution_default_layout(transition: Transition) -> None:
    _transition_default_layout(transition)
    if transition.substitution is not None:
        transition.substitution.info.style = TRANSITION_LABEL_STYLE


def _substitution_position(transition: Transition, x: int, y: int) -> None:
    _transition_position(transition, x, y)
    if transition.substitution is not None:
        transition.substitution.info.position = Position(x, y).offset(
            *Offsets.SUBPAGE_INFO
        )


# arcs


def _arc_default_layout(arc: Arc) -> None:
    arc.style = NODE_STYLE
    # The arc itself always sits at the origin; only its annotation moves.
    arc.position = Position(0, 0)
    arc.arrow = Arrow(Shapes.ARROW_HEADSIZE, Shapes.ARROW_CURRENTCYCKLE)


def arc_annotation_position(arc: Arc, document: CpnDocument) -> Position | None:
    """Put the arc's inscription halfway between its place and transition.

    Returns ``None`` and records a diagnostic when an endpoint is unknown or
    not positioned yet.
    """
    place = document.find_element_by_id(arc.place_id)
    transition = document.find_element_by_id(arc.transition_id)
    if not isinstance(place, Place) or not isinstance(transition, Transition):
        document.report(
            DiagnosticKind.UNPOSITIONED_ARC,
            f"Arc {arc.id} has an endpoint that is not in the document",
            element_id=arc.id,
        )
        return None
    if place.position is None or transition.position is None:
        document.report(
            DiagnosticKind.UNPOSITIONED_ARC,
            f"Arc {arc.id} connects {place.name!r} and {transition.name!r} "
            "before both have a position",
            element_id=arc.id,
        )
        return None
    arc.annotation.position = place.position.midpoint(transition.position)
    return arc.annotation.position


NODE_LAYOUTS: dict[ElementKind, NodeLayout[Any]] = {
    ElementKind.PLACE: NodeLayout(_place_default_layout, _place_position),
    ElementKind.PORT_PLACE: NodeLayout(
        _port_place_default_layout, _port_place_position
    ),
    ElementKind.FUSION_PLACE: NodeLayout(
        _fusion_place_default_layout, _fusion_place_position
    ),
    ElementKind.TRANSITION: NodeLayout(
        _transition_default_layout, _transition_position
    ),
    ElementKind.CONDITION_TRANSITION: NodeLayout(
        _condition_default_layout, _condition_position
    ),
    ElementKind.SUBSTITUTION_TRANSITION: NodeLayout(
        _substitution_default_layout, _substitution_position
    ),
}

ARC_LAYOUTS: dict[ElementKind, ArcLayout] = {
    ElementKind.ARC: ArcLayout(_arc_default_layout, arc_annotation_position),
    ElementKind.INHIBITOR_ARC: ArcLayout(_arc_default_layout, arc_annotation_position),
}


def set_default_layout(element: Node | Arc) -> None:
    if isinstance(element, Arc):
        ARC_LAYOUTS[element.kind].set_default_layout(element)
    else:
        NODE_LAYOUTS[element.kind].set_default_layout(element)


def set_position(node: Node, x: int, y: int) -> None:
    NODE_LAYOUTS[node.kind].set_position(node, x, y)


def set_layout_and_position(node: Node, x: int, y: int) -> None:
    strategy = NODE_LAYOUTS[node.kind]
    strategy.set_default_layout(node)
    strategy.set_position(node, x, y)


def set_arc_layout_and_position(arc: Arc, document: CpnDocument) -> Position | None:
    strategy = ARC_LAYOUTS[arc.kind]
    strategy.set_default_layout(arc)
    return strategy.set_position(arc, document)


def distribute_horizontally(
    nodes: Sequence[Node], y: int, spacing: int
) -> list[Position]:
    """Spread ``nodes`` along ``y`` symmetrically around x = 0.

    An odd count puts the first node on the axis; an even count starts half a
    step off it so the nodes come in mirrored pairs.
    """
    start = spacing // 2 if len(nodes) % 2 == 0 else 0
    xs = spacer(spacing, start)
    positions: list[Position] = []
    for node in nodes:
        x = next(xs)
        set_position(node, x, y)
        positions.append(Position(x, y))
    return positions


def position_all_arcs(page: Page, document: CpnDocument) -> LayoutReport:
    report = LayoutReport()
    for arc in page.arcs:
        if ARC_LAYOUTS[arc.kind].set_position(arc, document) is None:
            report.skipped.append(arc.id)
        else:
            report.positioned.append(arc.id)
    return report
