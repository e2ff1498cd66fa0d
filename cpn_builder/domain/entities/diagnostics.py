from dataclasses import dataclass
from enum import StrEnum


class DiagnosticKind(StrEnum):
    MISSING_FUSION_SET = "missing-fusion-set"
    UNPOSITIONED_ARC = "unpositioned-arc"
    EMPTY_SCOPE_STACK = "empty-scope-stack"
    NOT_A_SUBSTITUTION = "not-a-substitution"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    kind: DiagnosticKind
    message: str
    element_id: str | None = None
