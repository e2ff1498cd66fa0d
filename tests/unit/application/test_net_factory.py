"""Unit tests for CpnNetFactory and PageBuilder."""

import pytest

from cpn_builder.application.net_factory import CpnNetFactory
from cpn_builder.config import BuilderConfig
from cpn_builder.domain.entities import DiagnosticKind, Position
from cpn_builder.domain.exceptions import DefinitionError


class RecordingLogger:
    """Collects the calls the factory makes on its logger."""

    def __init__(self):
        self.diagnostics = []
        self.pages = []
        self.debug_messages = []

    def log_diagnostic(self, diagnostic):
        self.diagnostics.append(diagnostic)

    def log_page_built(self, page_name, element_count):
        self.pages.append((page_name, element_count))

    def debug(self, message):
        self.debug_messages.append(message)


class TestCpnNetFactory:
    def test_defaults(self):
        factory = CpnNetFactory()

        assert factory.config == BuilderConfig()
        assert factory.logger is None
        assert factory.document.config is factory.config

    def test_declarations_land_in_globbox(self, factory):
        factory.add_unit_colset("UNIT")
        factory.add_bool_colset()
        factory.add_int_colset("SMALL", "0", "9")

        layouts = [decl.layout for decl in factory.document.declarations]
        assert layouts == [
            "colset UNIT = unit;",
            "colset BOOL = bool;",
            "colset SMALL = int with 0..9;",
        ]

    def test_bounded_int_type(self, factory):
        assert factory.make_or_get_bounded_int_type(0, 2) == "INT0_2"
        assert factory.make_or_get_bounded_int_type(0, 2) == "INT0_2"
        assert len(factory.document.declarations) == 1

    def test_pages_get_serial_suffix(self, factory):
        first = factory.create_page("Main")
        second = factory.new_page("Main")

        assert first.name == "Main0"
        assert second.page.name == "Main1"
        assert factory.document.pages == [first, second.page]

    def test_create_page_logs(self):
        logger = RecordingLogger()
        factory = CpnNetFactory(logger=logger)

        page = factory.create_page("Main")

        assert logger.debug_messages == [f"Created page Main0 ({page.id})"]

    def test_diagnostics_reach_logger(self):
        logger = RecordingLogger()
        factory = CpnNetFactory(logger=logger)

        factory.new_page("P").add_fusion_place("ghost", "copy", "UNIT")

        assert [d.kind for d in logger.diagnostics] == [
            DiagnosticKind.MISSING_FUSION_SET
        ]

    def test_page_and_subpage_scopes(self, factory):
        builder = factory.new_page("Top")
        transition = builder.add_substitution_transition("sub")

        with factory.page_scope(builder.page) as top:
            with factory.subpage_scope(transition) as sub:
                assert factory.hierarchy.current() is sub
            assert factory.hierarchy.current() is top

        assert factory.document.instances.children == [top]
        assert top.page_id == builder.page.id
        assert top.children[0].transition_id == transition.id


class TestPageBuilder:
    def test_nodes_are_laid_out_on_creation(self, factory):
        builder = factory.new_page("P")

        place = builder.add_place("p", "UNIT", "1`()", 10, 20)
        transition = builder.add_condition_transition("t", "[true]", 30, 40)

        assert place.position == Position(10, 20)
        assert place.shape is not None
        assert transition.guard.position == Position(30, 65)
        assert builder.page.places == [place]
        assert builder.page.transitions == [transition]

    def test_port_properties(self, factory):
        builder = factory.new_page("P")
        assert builder.in_port is None

        in_port = builder.add_in_port_place("in", "UNIT")
        out_port = builder.add_out_port_place("out", "UNIT")

        assert builder.in_port is in_port
        assert builder.out_port is out_port

    def test_fusion_and_fusion_place(self, factory):
        builder = factory.new_page("P")

        first = builder.add_fusion_and_fusion_place("shared", "UNIT")
        second = builder.add_fusion_place("shared", "copy", "UNIT", "", 100, 0)

        fusion = factory.document.find_fusion("shared")
        assert fusion.member_ids == [first.id, second.id]
        assert first.name == "shared"

    def test_arcs_are_styled_then_positioned(self, factory):
        builder = factory.new_page("P")
        place = builder.add_place("p", "UNIT", "", 0, 0)
        transition = builder.add_transition("t", 100, 0)

        arc = builder.add_arc_place_to_transition(place, transition, "1`()")
        assert arc.style is not None
        assert arc.annotation.position is None

        report = builder.position_arcs()
        assert report.positioned == [arc.id]
        assert arc.annotation.position == Position(50, 0)

    def test_inhibitor_and_reflexive_arcs(self, factory):
        builder = factory.new_page("P")
        place = builder.add_place("p", "INT", "", 0, 0)
        transition = builder.add_transition("t", 100, 0)

        builder.add_inhibitor_arc(place, transition)
        builder.add_reflexive_arcs(transition, [place])

        assert len(builder.page.arcs) == 3
        assert all(arc.arrow is not None for arc in builder.page.arcs)

    def test_position_arcs_does_not_log(self):
        logger = RecordingLogger()
        builder = CpnNetFactory(logger=logger).new_page("P")
        place = builder.add_place("p", "UNIT", "", 0, 0)
        transition = builder.add_transition("t", 100, 0)
        builder.add_arc_transition_to_place(transition, place, "1`()")

        builder.position_arcs()

        assert logger.pages == []

    def test_conclude_logs_page_once(self):
        logger = RecordingLogger()
        builder = CpnNetFactory(logger=logger).new_page("P")
        place = builder.add_place("p", "UNIT", "", 0, 0)
        transition = builder.add_transition("t", 100, 0)
        builder.add_arc_transition_to_place(transition, place, "1`()")

        builder.conclude()
        builder.position_arcs()
        report = builder.conclude()

        assert logger.pages == [("P0", 3)]
        assert len(report.positioned) == 1

    def test_link_substitution_transition(self, factory):
        top = factory.new_page("Top")
        start = top.add_place("start", "UNIT")
        end = top.add_place("end", "UNIT")
        transition = top.add_substitution_transition("sub")
        sub = factory.new_page("Sub")
        sub_in = sub.add_in_port_place("in", "UNIT")
        sub_out = sub.add_out_port_place("out", "UNIT")

        top.link_substitution_transition(transition, start, end, sub)

        assert transition.substitution.subpage_id == sub.page.id
        assert transition.substitution.portsock == (
            f"({sub_in.id},{start.id})({sub_out.id},{end.id})"
        )

    def test_link_requires_subpage_ports(self, factory):
        top = factory.new_page("Top")
        start = top.add_place("start", "UNIT")
        end = top.add_place("end", "UNIT")
        transition = top.add_substitution_transition("sub")
        sub = factory.new_page("Sub")
        sub.add_in_port_place("in", "UNIT")

        with pytest.raises(DefinitionError, match="Sub1"):
            top.link_substitution_transition(transition, start, end, sub)
