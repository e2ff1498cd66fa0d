"""Page-oriented facade over the domain builders.

``CpnNetFactory`` owns one document together with the builders that grow it
and forwards every diagnostic the document records to the logger.
``PageBuilder`` adds elements to a single page and lays each node out as it
is created, the way a model author thinks about a page.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING

from ..config import BuilderConfig
from ..domain.entities import CpnDocument, PortRole
from ..domain.exceptions import DefinitionError
from ..domain.services import (
    ColorSetBuilder,
    FusionRegistry,
    InstanceHierarchy,
    NetElementBuilder,
    position_all_arcs,
    set_default_layout,
    set_layout_and_position,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from ..domain.entities import (
        Arc,
        Diagnostic,
        Instance,
        Page,
        Place,
        Transition,
    )
    from ..domain.services import LayoutReport
    from .ports.services import LoggerPort


class CpnNetFactory:
    pass

    def __init__(
        self,
        config: BuilderConfig | None = None,
        logger: LoggerPort | None = None,
    ) -> None:
        super().__init__()
        self.config = config or BuilderConfig()
        self.logger = logger
        self.document = CpnDocument(self.config, listener=self._on_diagnostic)
        self.colorsets = ColorSetBuilder(self.document)
        self.fusions = FusionRegistry(self.document)
        self.elements = NetElementBuilder(self.document, self.fusions)
        self.hierarchy = InstanceHierarchy(self.document)

    def _on_diagnostic(self, diagnostic: Diagnostic) -> None:
        if self.logger is not None:
            self.logger.log_diagnostic(diagnostic)

    # declarations

    def add_unit_colset(self, name: str) -> None:
        self.document.append_to_globbox(self.colorsets.unit_colset(name))

    def add_bool_colset(self, name: str = "BOOL") -> None:
        self.document.append_to_globbox(self.colorsets.bool_colset(name))

    def add_int_colset(self, name: str, lower: str, upper: str) -> None:
        self.document.append_to_globbox(self.colorsets.int_colset(name, lower, upper))

    def make_or_get_bounded_int_type(self, lower: int, upper: int) -> str:
        return self.colorsets.bounded_int_type(lower, upper)

    # pages

    def create_page(self, name: str) -> Page:
        """Create a page named ``name`` plus a unique serial and add it to the net."""
        page = self.document.create_page(f"{name}{self.document.next_page_serial()}")
        self.document.append_to_cpnet(page)
        if self.logger is not None:
            self.logger.debug(f"Created page {page.name} ({page.id})")
        return page

    def new_page(self, name: str) -> PageBuilder:
        return PageBuilder(self, self.create_page(name))

    # instances

    @contextmanager
    def page_scope(self, page: Page) -> Iterator[Instance]:
        instance = self.document.create_instance_for_page(page)
        with self.hierarchy.scope(instance) as current:
            yield current

    @contextmanager
    def subpage_scope(self, transition: Transition) -> Iterator[Instance]:
        """Instantiate ``transition`` under the current instance for the block."""
        instance = self.document.create_instance_for_transition(transition)
        with self.hierarchy.scope(instance) as current:
            yield current


class PageBuilder:
    """Adds elements to one page; nodes get their default layout on creation.

    Arcs only receive their default graphics when added. Their annotations
    are placed by ``position_arcs`` once the nodes on the page have settled;
    ``conclude`` does the same and reports the finished page to the logger once.
    """

    def __init__(self, factory: CpnNetFactory, page: Page) -> None:
        super().__init__()
        self.factory = factory
        self.page = page
        self._concluded = False

    @property
    def document(self) -> CpnDocument:
        return self.factory.document

    @property
    def in_port(self) -> Place | None:
        return self.page.port_place(PortRole.IN)

    @property
    def out_port(self) -> Place | None:
        return self.page.port_place(PortRole.OUT)

    # places

    def add_place(
        self, name: str, type_name: str, init_text: str = "", x: int = 0, y: int = 0
    ) -> Place:
        place = self.factory.elements.place(name, type_name, init_text)
        return self._add_node_place(place, x, y)

    def add_in_port_place(
        self, name: str, type_name: str, init_text: str = "", x: int = 0, y: int = 0
    ) -> Place:
        place = self.factory.elements.in_port_place(name, type_name, init_text)
        return self._add_node_place(place, x, y)

    def add_out_port_place(
        self, name: str, type_name: str, init_text: str = "", x: int = 0, y: int = 0
    ) -> Place:
        place = self.factory.elements.out_port_place(name, type_name, init_text)
        return self._add_node_place(place, x, y)

    def add_fusion_place(
        self,
        fusion_name: str,
        name: str,
        type_name: str,
        init_text: str = "",
        x: int = 0,
        y: int = 0,
    ) -> Place:
        place = self.factory.elements.fusion_place(
            fusion_name, name, type_name, init_text
        )
        return self._add_node_place(place, x, y)

    def add_fusion_and_fusion_place(
        self, name: str, type_name: str, init_text: str = "", x: int = 0, y: int = 0
    ) -> Place:
        """Declare a fusion set called ``name`` and add its first member place."""
        self.factory.fusions.declare_fusion(name)
        return self.add_fusion_place(name, name, type_name, init_text, x, y)

    def _add_node_place(self, place: Place, x: int, y: int) -> Place:
        set_layout_and_position(place, x, y)
        return self.page.add_place(place)

    # transitions

    def add_transition(self, name: str, x: int = 0, y: int = 0) -> Transition:
        transition = self.factory.elements.basic_transition(name)
        return self._add_node_transition(transition, x, y)

    def add_condition_transition(
        self, name: str, guard_text: str, x: int = 0, y: int = 0
    ) -> Transition:
        transition = self.factory.elements.condition_transition(name, guard_text)
        return self._add_node_transition(transition, x, y)

    def add_substitution_transition(
        self, name: str, x: int = 0, y: int = 0
    ) -> Transition:
        transition = self.factory.elements.substitution_transition(name)
        return self._add_node_transition(transition, x, y)

    def _add_node_transition(
        self, transition: Transition, x: int, y: int
    ) -> Transition:
        set_layout_and_position(transition, x, y)
        return self.page.add_transition(transition)

    def link_substitution_transition(
        self,
        transition: Transition,
        in_socket: Place,
        out_socket: Place,
        subpage: PageBuilder,
    ) -> Transition:
        sub_in_port, sub_out_port = subpage.in_port, subpage.out_port
        if sub_in_port is None or sub_out_port is None:
            raise DefinitionError(
                f"Page {subpage.page.name!r} needs an in-port and an out-port place "
                f"to be substituted for {transition.name!r}"
            )
        return self.factory.elements.wire_substitution(
            transition, in_socket, out_socket, subpage.page, sub_in_port, sub_out_port
        )

    # arcs

    def add_arc_place_to_transition(
        self, place: Place, transition: Transition, expr: str
    ) -> Arc:
        return self._add_arc(
            self.factory.elements.arc_place_to_transition(place, transition, expr)
        )

    def add_arc_transition_to_place(
        self, transition: Transition, place: Place, expr: str
    ) -> Arc:
        return self._add_arc(
            self.factory.elements.arc_transition_to_place(transition, place, expr)
        )

    def add_inhibitor_arc(self, place: Place, transition: Transition) -> Arc:
        return self._add_arc(self.factory.elements.inhibitor_arc(place, transition))

    def add_reflexive_arcs(
        self, transition: Transition, places: Iterable[Place]
    ) -> list[Arc]:
        arcs = self.factory.elements.reflexive_arcs(transition, places)
        for arc in arcs:
            self._add_arc(arc)
        return arcs

    def _add_arc(self, arc: Arc) -> Arc:
        set_default_layout(arc)
        return self.page.add_arc(arc)

    def position_arcs(self) -> LayoutReport:
        return position_all_arcs(self.page, self.document)

    def conclude(self) -> LayoutReport:
        report = self.position_arcs()
        if not self._concluded and self.factory.logger is not None:
            self.factory.logger.log_page_built(
                self.page.name, sum(1 for _ in self.page.elements())
            )
        self._concluded = True
        return report
