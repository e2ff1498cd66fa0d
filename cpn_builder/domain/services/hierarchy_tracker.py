from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING

from ..entities.diagnostics import DiagnosticKind

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ..entities.document import CpnDocument
    from ..entities.hierarchy import Instance, InstancesSection


class InstanceHierarchy:
    """Stack of the instance that currently receives new sub-instances.

    With an empty stack the document's ``<instances>`` section is current, so
    the stack only ever holds instance records and popping past the first one
    pushed is harmless.
    """

    def __init__(self, document: CpnDocument) -> None:
        super().__init__()
        self.document = document
        self._stack: list[Instance] = []

    @property
    def depth(self) -> int:
        return len(self._stack)

    def peek(self) -> Instance | None:
        return self._stack[-1] if self._stack else None

    def current(self) -> Instance | InstancesSection:
        return self._stack[-1] if self._stack else self.document.instances

    def enter_instance(self, instance: Instance) -> None:
        self._stack.append(instance)

    def leave(self) -> Instance | None:
        if not self._stack:
            self.document.report(
                DiagnosticKind.EMPTY_SCOPE_STACK,
                "leave() called with no instance scope open",
            )
            return None
        return self._stack.pop()

    def add_instance(self, instance: Instance) -> Instance:
        return self.current().append(instance)

    def attach_and_enter(self, instance: Instance) -> Instance:
        self.add_instance(instance)
        self.enter_instance(instance)
        return instance

    @contextmanager
    def scope(self, instance: Instance) -> Iterator[Instance]:
        """Attach ``instance`` and keep it current until the block exits."""
        self.attach_and_enter(instance)
        depth = self.depth
        try:
            yield instance
        finally:
            # Drop anything the block left open as well as the scope itself.
            while self.depth >= depth:
                self.leave()
