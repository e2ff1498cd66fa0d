from dataclasses import dataclass
from enum import StrEnum


class ColorSetKind(StrEnum):
    UNIT = "unit"
    BOOL = "bool"
    INT = "int"
    ENUM = "enum"
    PRODUCT = "product"


@dataclass(frozen=True, slots=True)
class ColorSet:
    id: str
    name: str
    kind: ColorSetKind
    layout: str
    bounds: tuple[str, str] | None = None
    members: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class VariableDeclaration:
    id: str
    names: tuple[str, ...]
    type_name: str
    layout: str


Declaration = ColorSet | VariableDeclaration
