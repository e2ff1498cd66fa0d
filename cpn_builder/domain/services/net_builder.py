from __future__ import annotations

from typing import TYPE_CHECKING

from ..entities.diagnostics import DiagnosticKind
from ..entities.net import (
    Arc,
    ArcOrientation,
    FusionTag,
    Label,
    Place,
    PortRole,
    PortTag,
    Substitution,
    Transition,
)
from ..exceptions import DefinitionError
from .fusion_registry import FusionRegistry

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ..entities.document import CpnDocument
    from ..entities.net import Page


class NetElementBuilder:
    """Creates places, transitions and arcs wired together by id.

    Created elements are registered with the document for id lookup but are
    not attached to any page.
    """

    def __init__(
        self, document: CpnDocument, fusions: FusionRegistry | None = None
    ) -> None:
        super().__init__()
        self.document = document
        self.fusions = fusions or FusionRegistry(document)

    # places

    def place(self, name: str, type_name: str, init_text: str = "") -> Place:
        next_id = self.document.next_id
        place = Place(
            id=next_id(),
            name=name,
            type_name=type_name,
            type_label=Label(id=next_id(), text=type_name),
            initmark=Label(id=next_id(), text=init_text),
        )
        self.document.register(place)
        return place

    def in_port_place(self, name: str, type_name: str, init_text: str = "") -> Place:
        return self._port_place(name, type_name, init_text, PortRole.IN)

    def out_port_place(self, name: str, type_name: str, init_text: str = "") -> Place:
        return self._port_place(name, type_name, init_text, PortRole.OUT)

    def fusion_place(
        self, fusion_name: str, name: str, type_name: str, init_text: str = ""
    ) -> Place:
        place = self.place(name, type_name, init_text)
        place.fusion = FusionTag(id=self.document.next_id(), text=fusion_name)
        self.fusions.register_member(fusion_name, place.id)
        return place

    def _port_place(
        self, name: str, type_name: str, init_text: str, role: PortRole
    ) -> Place:
        place = self.place(name, type_name, init_text)
        place.port = PortTag(id=self.document.next_id(), role=role)
        return place

    # transitions

    def basic_transition(self, name: str) -> Transition:
        transition = Transition(id=self.document.next_id(), name=name)
        self.document.register(transition)
        return transition

    def condition_transition(self, name: str, guard_text: str) -> Transition:
        transition = self.basic_transition(name)
        transition.guard = Label(id=self.document.next_id(), text=guard_text)
        return transition

    def substitution_transition(self, name: str) -> Transition:
        transition = self.basic_transition(name)
        transition.substitution = Substitution(
            info=Label(id=self.document.next_id(), text=name)
        )
        return transition

    def wire_substitution(
        self,
        transition: Transition,
        in_socket: Place,
        out_socket: Place,
        subpage: Page,
        sub_in_port: Place,
        sub_out_port: Place,
    ) -> Transition:
        """Bind ``transition`` to ``subpage`` through its socket/port pairs."""
        referenced = {
            "in-socket": in_socket,
            "out-socket": out_socket,
            "subpage": subpage,
            "subpage in-port": sub_in_port,
            "subpage out-port": sub_out_port,
        }
        for role, element in referenced.items():
            if not self.document.contains(element):
                raise DefinitionError(
                    f"Cannot wire substitution transition {transition.name!r}: "
                    f"{role} has no id assigned by this document"
                )
        substitution = transition.substitution
        if substitution is None:
            self.document.report(
                DiagnosticKind.NOT_A_SUBSTITUTION,
                f"Transition {transition.name!r} is not a substitution transition; wiring skipped",
                element_id=transition.id,
            )
            return transition
        substitution.in_pair = (sub_in_port.id, in_socket.id)
        substitution.out_pair = (sub_out_port.id, out_socket.id)
        substitution.subpage_id = subpage.id
        return transition

    # arcs

    def arc_place_to_transition(
        self, place: Place, transition: Transition, expr: str
    ) -> Arc:
        return self._arc(place, transition, expr, ArcOrientation.PLACE_TO_TRANSITION)

    def arc_transition_to_place(
        self, transition: Transition, place: Place, expr: str
    ) -> Arc:
        return self._arc(place, transition, expr, ArcOrientation.TRANSITION_TO_PLACE)

    def inhibitor_arc(self, place: Place, transition: Transition) -> Arc:
        return self._arc(place, transition, "", ArcOrientation.INHIBITOR)

    def reflexive_arcs(
        self, transition: Transition, places: Iterable[Place]
    ) -> list[Arc]:
        """Read ``places`` without consuming: one arc each way, same inscription."""
        arcs: list[Arc] = []
        for place in places:
            arcs.append(self.arc_transition_to_place(transition, place, place.name))
            arcs.append(self.arc_place_to_transition(place, transition, place.name))
        return arcs

    def _arc(
        self,
        place: Place,
        transition: Transition,
        expr: str,
        orientation: ArcOrientation,
    ) -> Arc:
        arc_id = self.document.next_id()
        arc = Arc(
            id=arc_id,
            place_id=place.id,
            transition_id=transition.id,
            orientation=orientation,
            annotation=Label(id=self.document.next_id(), text=expr),
        )
        self.document.register(arc)
        return arc
