"""Demo model: a top page whose sub-processes are Skip and Composition pages.

The top page holds ``startPlace`` and ``endPlace``. Every sub-process becomes
a substitution transition between them and is refined by its own subpage:

* ``Skip``: ``(inport) -> [Skip] -> (outport)``
* ``Composition``: ``(inport) -> [[s1]] -> (s1s2) -> [[s2]] -> (outport)``,
  where ``s1`` and ``s2`` are again refined by subpages.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..constants import Defaults
from ..domain.services import distribute_horizontally, set_default_layout
from .net_factory import CpnNetFactory, PageBuilder

if TYPE_CHECKING:
    from contextlib import AbstractContextManager

    from ..config import BuilderConfig
    from ..domain.entities import CpnDocument, Instance, Place, Transition
    from ..domain.services import LayoutReport
    from .ports.services import LoggerPort

UNIT = "UNIT"


class ExampleModel:
    pass

    def __init__(
        self,
        config: BuilderConfig | None = None,
        logger: LoggerPort | None = None,
    ) -> None:
        super().__init__()
        self.factory = CpnNetFactory(config, logger)
        self.spacing_x = self.factory.config.spacing_x
        self.spacing_y = self.factory.config.spacing_y
        self._top_page = TopPage(self)

    @property
    def document(self) -> CpnDocument:
        return self.factory.document

    def top_page(self) -> TopPage:
        return self._top_page

    def add_unit_colset(self, name: str = UNIT) -> None:
        self.factory.add_unit_colset(name)

    def add_bool_colset(self) -> None:
        self.factory.add_bool_colset("BOOL")

    def add_int_colset(self, name: str, lower: str, upper: str) -> None:
        self.factory.add_int_colset(name, lower, upper)

    def make_or_get_bounded_int_type(self, lower: int, upper: int) -> str:
        return self.factory.make_or_get_bounded_int_type(lower, upper)

    def subpage_scope(
        self, transition: Transition
    ) -> AbstractContextManager[Instance]:
        return self.factory.subpage_scope(transition)

    def skip(self, name: str) -> Skip:
        return Skip(self, name)

    def composition(self, name: str) -> Composition:
        return Composition(self, name)


class ExamplePage(PageBuilder):
    pass

    def __init__(self, model: ExampleModel, name: str) -> None:
        super().__init__(model.factory, model.factory.create_page(name))
        self.model = model


class TopPage(ExamplePage):
    """The root page; it stays the current instance for the whole build."""

    def __init__(self, model: ExampleModel) -> None:
        super().__init__(model, "GlobalDeclarations")
        self.factory.hierarchy.attach_and_enter(
            self.document.create_instance_for_page(self.page)
        )
        self.start_place = self.add_place("startPlace", UNIT, "", 0, model.spacing_y)
        self.end_place = self.add_place("endPlace", UNIT, "", 0, 3 * model.spacing_y)
        self.substitution_transitions: list[Transition] = []

    def add_subpage(self, name: str) -> Transition:
        """Add ``(startPlace) -> [[name]] -> (endPlace)`` to the top page.

        The transition is positioned later by ``conclude_top_page``.
        """
        transition = self.factory.elements.substitution_transition(name)
        set_default_layout(transition)
        self.page.add_transition(transition)
        self.substitution_transitions.append(transition)
        token = f"1`{name}"
        self.add_arc_place_to_transition(self.start_place, transition, token)
        self.add_arc_transition_to_place(transition, self.end_place, token)
        return transition

    def connect(self, transition: Transition, subpage: PageBuilder) -> Transition:
        return self.link_substitution_transition(
            transition, self.start_place, self.end_place, subpage
        )

    def conclude_top_page(self) -> LayoutReport:
        distribute_horizontally(
            self.substitution_transitions,
            2 * self.model.spacing_x,
            self.model.spacing_x,
        )
        return self.conclude()


class Skip(ExamplePage):
    def __init__(self, model: ExampleModel, name: str) -> None:
        super().__init__(model, f"Skip_{name}")
        step = model.spacing_x
        inscription = Defaults.DEFAULT_INSCRIPTION
        self.inport = self.add_in_port_place("inport", UNIT, "", 0, 0)
        self.skip_transition = self.add_transition("Skip", step, 0)
        self.add_arc_place_to_transition(self.inport, self.skip_transition, inscription)
        self.outport = self.add_out_port_place("outport", UNIT, "", 2 * step, 0)
        self.add_arc_transition_to_place(self.skip_transition, self.outport, inscription)
        self.conclude()


class Composition(ExamplePage):
    """Sequential composition of two refined steps, ``s1`` then ``s2``."""

    def __init__(self, model: ExampleModel, name: str) -> None:
        super().__init__(model, f"Composition_{name}")
        step = model.spacing_x
        inscription = Defaults.DEFAULT_INSCRIPTION
        self.s1 = self.add_substitution_transition("s1", step, 0)
        self.s2 = self.add_substitution_transition("s2", 3 * step, 0)
        self.inport = self.add_in_port_place("inport", UNIT, "", 0, 0)
        self.add_arc_place_to_transition(self.inport, self.s1, inscription)
        self.s1s2 = self.add_place("s1s2", UNIT, "", 2 * step, 0)
        self.add_arc_transition_to_place(self.s1, self.s1s2, inscription)
        self.add_arc_place_to_transition(self.s1s2, self.s2, inscription)
        self.outport = self.add_out_port_place("outport", UNIT, "", 4 * step, 0)
        self.add_arc_transition_to_place(self.s2, self.outport, inscription)
        self.conclude()

    def sockets_s1(self) -> tuple[Place, Place]:
        return self.inport, self.s1s2

    def sockets_s2(self) -> tuple[Place, Place]:
        return self.s1s2, self.outport

    def connect_s1(self, subpage: PageBuilder) -> Transition:
        return self.link_substitution_transition(self.s1, *self.sockets_s1(), subpage)

    def connect_s2(self, subpage: PageBuilder) -> Transition:
        return self.link_substitution_transition(self.s2, *self.sockets_s2(), subpage)


def build_example_model(
    config: BuilderConfig | None = None, logger: LoggerPort | None = None
) -> ExampleModel:
    """Build the two sub-process demo net.

    ``subprocess1`` is refined by a Skip page. ``subprocess2`` is refined by a
    Composition whose two steps are each refined by a Skip page.
    """
    model = ExampleModel(config, logger)
    model.add_unit_colset(UNIT)
    top = model.top_page()

    subprocess1 = top.add_subpage("subprocess1")
    with model.subpage_scope(subprocess1):
        top.connect(subprocess1, model.skip("Skip"))

    subprocess2 = top.add_subpage("subprocess2")
    with model.subpage_scope(subprocess2):
        composition = model.composition("Comp")
        top.connect(subprocess2, composition)
        with model.subpage_scope(composition.s1):
            composition.connect_s1(model.skip("Skip"))
        with model.subpage_scope(composition.s2):
            composition.connect_s2(model.skip("Skip"))

    top.conclude_top_page()
    return model
