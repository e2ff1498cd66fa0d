from __future__ import annotations

from typing import TYPE_CHECKING

from ..entities.diagnostics import DiagnosticKind
from ..entities.hierarchy import FusionSet

if TYPE_CHECKING:
    from ..entities.document import CpnDocument


class FusionRegistry:
    pass

    def __init__(self, document: CpnDocument) -> None:
        super().__init__()
        self.document = document

    def declare_fusion(self, name: str) -> FusionSet:
        # No duplicate check: each fusion name is declared once by the caller.
        fusion = FusionSet(id=self.document.next_id(), name=name)
        self.document.append_to_cpnet(fusion)
        return fusion

    def find(self, name: str) -> FusionSet | None:
        return self.document.find_fusion(name)

    def register_member(self, name: str, place_id: str) -> bool:
        fusion = self.find(name)
        if fusion is None:
            self.document.report(
                DiagnosticKind.MISSING_FUSION_SET,
                f"Fusion set {name!r} is not declared; place {place_id} was not added to it",
                element_id=place_id,
            )
            return False
        fusion.member_ids.append(place_id)
        return True
