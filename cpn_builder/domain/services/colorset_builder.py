from __future__ import annotations

from typing import TYPE_CHECKING

from ..entities.colorset import ColorSet, ColorSetKind, VariableDeclaration
from ..exceptions import DefinitionError

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from ..entities.document import CpnDocument


class ColorSetBuilder:
    """Creates color-set and variable declarations for one document.

    Apart from ``bounded_int_type`` nothing is appended to the declarations
    box; callers decide where each declaration goes.
    """

    def __init__(self, document: CpnDocument) -> None:
        super().__init__()
        self.document = document

    def unit_colset(self, name: str) -> ColorSet:
        return self._colset(name, ColorSetKind.UNIT, f"colset {name} = unit;")

    def bool_colset(self, name: str) -> ColorSet:
        return self._colset(name, ColorSetKind.BOOL, f"colset {name} = bool;")

    def int_colset(self, name: str, lower: str, upper: str) -> ColorSet:
        return self._colset(
            name,
            ColorSetKind.INT,
            f"colset {name} = int with {lower}..{upper};",
            bounds=(lower, upper),
        )

    def enum_colset(self, name: str, items: Iterable[str]) -> ColorSet:
        items = tuple(items)
        # The tool rejects empty enumerations.
        if not items:
            raise DefinitionError(f"Cannot create the empty ENUM color set {name}.")
        return self._colset(
            name,
            ColorSetKind.ENUM,
            f"colset {name} = with {' | '.join(items)};",
            members=items,
        )

    def product_colset(self, name: str, components: Sequence[str]) -> ColorSet:
        components = tuple(components)
        if len(components) < 2:
            raise DefinitionError(
                f"Product color set {name} needs at least two sets, got {len(components)}."
            )
        return self._colset(
            name,
            ColorSetKind.PRODUCT,
            f"colset {name} = product with {' * '.join(components)};",
            members=components,
        )

    def pair_colset(self, name: str, first: str, second: str) -> ColorSet:
        return self.product_colset(name, (first, second))

    def var_decl(self, name: str, type_name: str) -> VariableDeclaration:
        return self.var_decl_list((name,), type_name)

    def var_decl_list(
        self, names: Iterable[str], type_name: str
    ) -> VariableDeclaration:
        names = tuple(names)
        if not names:
            raise DefinitionError(
                f"Cannot create empty var declaration of type {type_name}."
            )
        return VariableDeclaration(
            id=self.document.next_id(),
            names=names,
            type_name=type_name,
            layout=f"var {', '.join(names)}: {type_name};",
        )

    def bounded_int_type(self, lower: int, upper: int) -> str:
        """Declare ``INT<lower>_<upper>`` unless an identical declaration exists.

        Returns the type name either way.
        """
        name = f"INT{lower}_{upper}"
        existing = self.document.find_colorset(name)
        if existing is not None and existing.bounds == (str(lower), str(upper)):
            return name
        self.document.append_to_globbox(self.int_colset(name, str(lower), str(upper)))
        return name

    def _colset(
        self,
        name: str,
        kind: ColorSetKind,
        layout: str,
        *,
        bounds: tuple[str, str] | None = None,
        members: tuple[str, ...] = (),
    ) -> ColorSet:
        return ColorSet(
            id=self.document.next_id(),
            name=name,
            kind=kind,
            layout=layout,
            bounds=bounds,
            members=members,
        )
