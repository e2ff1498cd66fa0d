from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .graphics import Arrow, Position, Shape, Style


class PortRole(StrEnum):
    IN = "In"
    OUT = "Out"


class ArcOrientation(StrEnum):
    PLACE_TO_TRANSITION = "PtoT"
    TRANSITION_TO_PLACE = "TtoP"
    INHIBITOR = "Inhibitor"


class ElementKind(StrEnum):
    PLACE = "place"
    PORT_PLACE = "port-place"
    FUSION_PLACE = "fusion-place"
    TRANSITION = "transition"
    CONDITION_TRANSITION = "condition-transition"
    SUBSTITUTION_TRANSITION = "substitution-transition"
    ARC = "arc"
    INHIBITOR_ARC = "inhibitor-arc"


@dataclass(slots=True)
class Label:
    id: str
    text: str = ""
    position: Position | None = None
    style: Style | None = None


@dataclass(slots=True)
class PortTag(Label):
    role: PortRole = PortRole.IN


@dataclass(slots=True)
class FusionTag(Label):
    pass


@dataclass(slots=True)
class Place:
    id: str
    name: str
    type_name: str
    type_label: Label
    initmark: Label
    port: PortTag | None = None
    fusion: FusionTag | None = None
    position: Position | None = None
    style: Style | None = None
    shape: Shape | None = None
    token_offset: tuple[str, str] | None = None
    marking_offset: tuple[str, str] | None = None

    @property
    def kind(self) -> ElementKind:
        if self.fusion is not None:
            return ElementKind.FUSION_PLACE
        if self.port is not None:
            return ElementKind.PORT_PLACE
        return ElementKind.PLACE

    @property
    def initial_marking(self) -> str:
        return self.initmark.text

    def has_port(self, role: PortRole) -> bool:
        return self.port is not None and self.port.role == role


@dataclass(slots=True)
class Substitution:
    info: Label
    subpage_id: str | None = None
    in_pair: tuple[str, str] | None = None
    out_pair: tuple[str, str] | None = None

    @property
    def is_wired(self) -> bool:
        return self.subpage_id is not None

    @property
    def portsock(self) -> str | None:
        if self.in_pair is None or self.out_pair is None:
            return None
        in_port, in_socket = self.in_pair
        out_port, out_socket = self.out_pair
        return f"({in_port},{in_socket})({out_port},{out_socket})"


@dataclass(slots=True)
class Transition:
    id: str
    name: str
    guard: Label | None = None
    substitution: Substitution | None = None
    position: Position | None = None
    style: Style | None = None
    shape: Shape | None = None

    @property
    def kind(self) -> ElementKind:
        if self.substitution is not None:
            return ElementKind.SUBSTITUTION_TRANSITION
        if self.guard is not None:
            return ElementKind.CONDITION_TRANSITION
        return ElementKind.TRANSITION


@dataclass(slots=True)
class Arc:
    id: str
    place_id: str
    transition_id: str
    orientation: ArcOrientation
    annotation: Label
    order: int = 1
    position: Position | None = None
    style: Style | None = None
    arrow: Arrow | None = None

    @property
    def kind(self) -> ElementKind:
        if self.orientation == ArcOrientation.INHIBITOR:
            return ElementKind.INHIBITOR_ARC
        return ElementKind.ARC

    @property
    def inscription(self) -> str:
        return self.annotation.text


@dataclass(slots=True)
class Page:
    id: str
    name: str
    places: list[Place] = field(default_factory=list)
    transitions: list[Transition] = field(default_factory=list)
    arcs: list[Arc] = field(default_factory=list)

    def add_place(self, place: Place) -> Place:
        self.places.append(place)
        return place

    def add_transition(self, transition: Transition) -> Transition:
        self.transitions.append(transition)
        return transition

    def add_arc(self, arc: Arc) -> Arc:
        self.arcs.append(arc)
        return arc

    def elements(self) -> Iterator[Place | Transition | Arc]:
        yield from self.places
        yield from self.transitions
        yield from self.arcs

    def port_place(self, role: PortRole) -> Place | None:
        for place in self.places:
            if place.has_port(role):
                return place
        return None
