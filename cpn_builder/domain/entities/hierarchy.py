from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass(slots=True)
class Instance:
    id: str
    page_id: str | None = None
    transition_id: str | None = None
    children: list[Instance] = field(default_factory=list)

    def append(self, child: Instance) -> Instance:
        self.children.append(child)
        return child

    def walk(self) -> Iterator[Instance]:
        yield self
        for child in self.children:
            yield from child.walk()


@dataclass(slots=True)
class InstancesSection:
    """The ``<instances>`` container; the implicit root of the instance tree."""

    children: list[Instance] = field(default_factory=list)

    def append(self, child: Instance) -> Instance:
        self.children.append(child)
        return child

    def walk(self) -> Iterator[Instance]:
        for child in self.children:
            yield from child.walk()


@dataclass(slots=True)
class FusionSet:
    id: str
    name: str
    member_ids: list[str] = field(default_factory=list)
