"""In-memory CPN document.

The document owns every record of one model: the global declarations box,
the pages and fusion sets of the ``cpnet`` section and the instance tree. It
also owns the id generator, so ids are unique per document rather than per
process.

Nothing here knows about XML; the serialization layer projects a finished
document into an element tree.
"""

from __future__ import annotations

from collections.abc import Callable
import itertools
from typing import TYPE_CHECKING

from ...config import BuilderConfig
from .colorset import ColorSet, VariableDeclaration
from .diagnostics import Diagnostic, DiagnosticKind
from .hierarchy import FusionSet, Instance, InstancesSection
from .identifiers import IdGenerator
from .net import Page, PortRole

if TYPE_CHECKING:
    from .colorset import Declaration
    from .net import Arc, Place, Transition

    Element = Page | Place | Transition | Arc | FusionSet | Instance | Declaration

DiagnosticListener = Callable[[Diagnostic], None]


class CpnDocument:
    pass

    def __init__(
        self,
        config: BuilderConfig | None = None,
        *,
        listener: DiagnosticListener | None = None,
    ) -> None:
        super().__init__()
        self.config = config or BuilderConfig()
        self.ids = IdGenerator(self.config.id_prefix, self.config.id_seed)
        self.declarations: list[Declaration] = []
        self.pages: list[Page] = []
        self.fusions: list[FusionSet] = []
        self.instances = InstancesSection()
        self.diagnostics: list[Diagnostic] = []
        self.listener = listener
        self._index: dict[str, Element] = {}
        self._page_serial = itertools.count()

    def next_id(self) -> str:
        return self.ids.next()

    def next_page_serial(self) -> int:
        return next(self._page_serial)

    def register(self, element: Element) -> Element:
        self._index[element.id] = element
        return element

    def contains(self, element: object) -> bool:
        element_id = getattr(element, "id", None)
        if not element_id:
            return False
        return self._index.get(element_id) is element

    def find_element_by_id(self, element_id: str) -> Element | None:
        return self._index.get(element_id)

    def report(
        self, kind: DiagnosticKind, message: str, element_id: str | None = None
    ) -> Diagnostic:
        diagnostic = Diagnostic(kind=kind, message=message, element_id=element_id)
        self.diagnostics.append(diagnostic)
        if self.listener is not None:
            self.listener(diagnostic)
        return diagnostic

    # globbox

    def append_to_globbox(self, declaration: Declaration) -> Declaration:
        self.register(declaration)
        self.declarations.append(declaration)
        return declaration

    def prepend_to_globbox(self, declaration: Declaration) -> Declaration:
        self.register(declaration)
        self.declarations.insert(0, declaration)
        return declaration

    def colorsets(self) -> list[ColorSet]:
        return [decl for decl in self.declarations if isinstance(decl, ColorSet)]

    def variables(self) -> list[VariableDeclaration]:
        return [
            decl for decl in self.declarations if isinstance(decl, VariableDeclaration)
        ]

    def find_colorset(self, name: str) -> ColorSet | None:
        for colorset in self.colorsets():
            if colorset.name == name:
                return colorset
        return None

    # cpnet

    def append_to_cpnet(self, item: Page | FusionSet) -> Page | FusionSet:
        self.register(item)
        if isinstance(item, Page):
            self.pages.append(item)
        else:
            self.fusions.append(item)
        return item

    def prepend_to_cpnet(self, item: Page | FusionSet) -> Page | FusionSet:
        self.register(item)
        if isinstance(item, Page):
            self.pages.insert(0, item)
        else:
            self.fusions.insert(0, item)
        return item

    def create_page(self, name: str, page_id: str | None = None) -> Page:
        page = Page(id=page_id or self.next_id(), name=name)
        self.register(page)
        return page

    def find_page_by_id(self, page_id: str) -> Page:
        """Return the page with ``page_id``, or a new detached page named after it.

        The detached page is not registered, so it never shadows an element
        in the id index nor claims an id the generator has yet to issue.
        """
        for page in self.pages:
            if page.id == page_id:
                return page
        return Page(id=page_id, name=page_id)

    def find_fusion(self, name: str) -> FusionSet | None:
        for fusion in self.fusions:
            if fusion.name == name:
                return fusion
        return None

    def in_port_place_id(self, page: Page) -> str | None:
        place = page.port_place(PortRole.IN)
        return place.id if place is not None else None

    def out_port_place_id(self, page: Page) -> str | None:
        place = page.port_place(PortRole.OUT)
        return place.id if place is not None else None

    # instances

    def create_instance_for_page(self, page: Page) -> Instance:
        instance = Instance(id=self.next_id(), page_id=page.id)
        self.register(instance)
        return instance

    def create_instance_for_transition(self, transition: Transition) -> Instance:
        instance = Instance(id=self.next_id(), transition_id=transition.id)
        self.register(instance)
        return instance

    def append_to_instances(self, instance: Instance) -> Instance:
        return self.instances.append(instance)
