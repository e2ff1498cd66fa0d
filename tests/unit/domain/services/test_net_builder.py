"""Unit tests for NetElementBuilder."""

import pytest

from cpn_builder.domain.entities import (
    ArcOrientation,
    CpnDocument,
    DiagnosticKind,
    ElementKind,
    PortRole,
)
from cpn_builder.domain.exceptions import DefinitionError
from cpn_builder.domain.services import FusionRegistry, NetElementBuilder


@pytest.fixture
def elements(document):
    return NetElementBuilder(document)


class TestPlaces:
    def test_place_ids_and_labels(self, elements, document):
        place = elements.place("p", "UNIT", "1`()")

        assert (place.id, place.type_label.id, place.initmark.id) == (
            "ID11",
            "ID12",
            "ID13",
        )
        assert place.type_label.text == "UNIT"
        assert place.initial_marking == "1`()"
        assert place.kind is ElementKind.PLACE
        assert document.find_element_by_id(place.id) is place

    def test_port_places(self, elements):
        in_port = elements.in_port_place("in", "UNIT")
        out_port = elements.out_port_place("out", "UNIT")

        assert in_port.kind is ElementKind.PORT_PLACE
        assert in_port.has_port(PortRole.IN)
        assert not in_port.has_port(PortRole.OUT)
        assert out_port.port.role is PortRole.OUT

    def test_fusion_place_joins_declared_set(self, document):
        fusions = FusionRegistry(document)
        fusion = fusions.declare_fusion("shared")
        elements = NetElementBuilder(document, fusions)

        place = elements.fusion_place("shared", "copy", "UNIT")

        assert place.kind is ElementKind.FUSION_PLACE
        assert place.fusion.text == "shared"
        assert fusion.member_ids == [place.id]

    def test_fusion_place_without_set_is_still_created(self, elements, document):
        place = elements.fusion_place("ghost", "copy", "UNIT")

        assert place.fusion is not None
        assert [d.kind for d in document.diagnostics] == [
            DiagnosticKind.MISSING_FUSION_SET
        ]


class TestTransitions:
    def test_basic_transition(self, elements):
        transition = elements.basic_transition("t")

        assert transition.kind is ElementKind.TRANSITION
        assert transition.guard is None

    def test_condition_transition(self, elements):
        transition = elements.condition_transition("t", "[x > 0]")

        assert transition.kind is ElementKind.CONDITION_TRANSITION
        assert transition.guard.text == "[x > 0]"

    def test_substitution_transition(self, elements):
        transition = elements.substitution_transition("sub")

        assert transition.kind is ElementKind.SUBSTITUTION_TRANSITION
        assert transition.substitution.info.text == "sub"
        assert not transition.substitution.is_wired


class TestWireSubstitution:
    @pytest.fixture
    def net(self, elements, document):
        subpage = document.create_page("Sub")
        return {
            "transition": elements.substitution_transition("sub"),
            "in_socket": elements.place("a", "UNIT"),
            "out_socket": elements.place("b", "UNIT"),
            "subpage": subpage,
            "sub_in": elements.in_port_place("in", "UNIT"),
            "sub_out": elements.out_port_place("out", "UNIT"),
        }

    def test_wiring_sets_subpage_and_portsock(self, elements, net):
        elements.wire_substitution(
            net["transition"],
            net["in_socket"],
            net["out_socket"],
            net["subpage"],
            net["sub_in"],
            net["sub_out"],
        )

        substitution = net["transition"].substitution
        assert substitution.subpage_id == net["subpage"].id
        assert substitution.portsock == (
            f"({net['sub_in'].id},{net['in_socket'].id})"
            f"({net['sub_out'].id},{net['out_socket'].id})"
        )

    def test_wiring_plain_transition_reports(self, elements, document, net):
        plain = elements.basic_transition("t")

        result = elements.wire_substitution(
            plain,
            net["in_socket"],
            net["out_socket"],
            net["subpage"],
            net["sub_in"],
            net["sub_out"],
        )

        assert result is plain
        assert plain.substitution is None
        assert document.diagnostics[-1].kind is DiagnosticKind.NOT_A_SUBSTITUTION

    def test_page_lookup_keeps_sockets_wirable(self, elements, document, net):
        document.find_page_by_id(net["in_socket"].id)

        elements.wire_substitution(
            net["transition"],
            net["in_socket"],
            net["out_socket"],
            net["subpage"],
            net["sub_in"],
            net["sub_out"],
        )

        assert net["transition"].substitution.is_wired

    def test_foreign_elements_are_rejected(self, elements, net):
        foreign = NetElementBuilder(CpnDocument()).place("x", "UNIT")
        foreign.id = "ID999"

        with pytest.raises(DefinitionError, match="in-socket"):
            elements.wire_substitution(
                net["transition"],
                foreign,
                net["out_socket"],
                net["subpage"],
                net["sub_in"],
                net["sub_out"],
            )


class TestArcs:
    def test_arc_directions(self, elements):
        place = elements.place("p", "UNIT")
        transition = elements.basic_transition("t")

        consume = elements.arc_place_to_transition(place, transition, "1`()")
        produce = elements.arc_transition_to_place(transition, place, "1`()")

        assert consume.orientation is ArcOrientation.PLACE_TO_TRANSITION
        assert produce.orientation is ArcOrientation.TRANSITION_TO_PLACE
        for arc in (consume, produce):
            assert arc.place_id == place.id
            assert arc.transition_id == transition.id
            assert arc.inscription == "1`()"
            assert arc.annotation.id != arc.id

    def test_inhibitor_arc(self, elements):
        place = elements.place("p", "UNIT")
        transition = elements.basic_transition("t")

        arc = elements.inhibitor_arc(place, transition)

        assert arc.kind is ElementKind.INHIBITOR_ARC
        assert arc.inscription == ""

    def test_reflexive_arcs(self, elements):
        places = [elements.place("x", "INT"), elements.place("y", "INT")]
        transition = elements.basic_transition("read")

        arcs = elements.reflexive_arcs(transition, places)

        assert [(arc.orientation, arc.inscription) for arc in arcs] == [
            (ArcOrientation.TRANSITION_TO_PLACE, "x"),
            (ArcOrientation.PLACE_TO_TRANSITION, "x"),
            (ArcOrientation.TRANSITION_TO_PLACE, "y"),
            (ArcOrientation.PLACE_TO_TRANSITION, "y"),
        ]
