"""Unit tests for ColorSetBuilder."""

import pytest

from cpn_builder.domain.entities import ColorSetKind
from cpn_builder.domain.exceptions import DefinitionError
from cpn_builder.domain.services import ColorSetBuilder


@pytest.fixture
def colorsets(document):
    return ColorSetBuilder(document)


class TestSimpleColorSets:
    def test_unit_colset(self, colorsets):
        unit = colorsets.unit_colset("UNIT")

        assert unit.id == "ID11"
        assert unit.kind is ColorSetKind.UNIT
        assert unit.layout == "colset UNIT = unit;"

    def test_bool_colset(self, colorsets):
        assert colorsets.bool_colset("BOOL").layout == "colset BOOL = bool;"

    def test_int_colset(self, colorsets):
        colorset = colorsets.int_colset("SMALL", "0", "5")

        assert colorset.layout == "colset SMALL = int with 0..5;"
        assert colorset.bounds == ("0", "5")

    def test_builder_does_not_append(self, colorsets, document):
        colorsets.unit_colset("UNIT")

        assert document.declarations == []


class TestCompoundColorSets:
    def test_enum_colset(self, colorsets):
        colorset = colorsets.enum_colset("COLOR", ["red", "green"])

        assert colorset.layout == "colset COLOR = with red | green;"
        assert colorset.members == ("red", "green")

    def test_empty_enum_is_rejected(self, colorsets):
        with pytest.raises(DefinitionError, match="empty ENUM"):
            colorsets.enum_colset("EMPTY", [])

    def test_product_colset(self, colorsets):
        colorset = colorsets.product_colset("TRIPLE", ["A", "B", "C"])

        assert colorset.layout == "colset TRIPLE = product with A * B * C;"

    def test_pair_colset(self, colorsets):
        assert (
            colorsets.pair_colset("P", "INT", "BOOL").layout
            == "colset P = product with INT * BOOL;"
        )

    def test_product_needs_two_components(self, colorsets):
        with pytest.raises(DefinitionError, match="at least two sets, got 1"):
            colorsets.product_colset("ONE", ["A"])


class TestVariables:
    def test_single_variable(self, colorsets):
        var = colorsets.var_decl("n", "INT")

        assert var.names == ("n",)
        assert var.layout == "var n: INT;"

    def test_variable_list(self, colorsets):
        assert colorsets.var_decl_list(["a", "b"], "BOOL").layout == "var a, b: BOOL;"

    def test_empty_variable_list_is_rejected(self, colorsets):
        with pytest.raises(DefinitionError, match="empty var declaration of type INT"):
            colorsets.var_decl_list([], "INT")


class TestBoundedIntType:
    def test_declares_once(self, colorsets, document):
        first = colorsets.bounded_int_type(0, 3)
        second = colorsets.bounded_int_type(0, 3)

        assert first == second == "INT0_3"
        assert [decl.name for decl in document.colorsets()] == ["INT0_3"]
        assert document.colorsets()[0].layout == "colset INT0_3 = int with 0..3;"

    def test_distinct_bounds_get_distinct_types(self, colorsets, document):
        colorsets.bounded_int_type(0, 3)
        colorsets.bounded_int_type(1, 3)

        assert [decl.name for decl in document.colorsets()] == ["INT0_3", "INT1_3"]
