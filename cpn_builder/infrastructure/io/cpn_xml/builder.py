"""Builder for CPN XML document trees.

Projects a finished ``CpnDocument`` onto the ``workspaceElements`` tree read by
CPN Tools. The projection is pure: the document is not modified, and building
the same document twice yields identical trees.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from xml.etree import ElementTree as ET

from cpn_builder.domain.entities import (
    ColorSet,
    ColorSetKind,
    VariableDeclaration,
)

from ..xml_utils import sub_element
from .constants import CPNET_TRAILER, MONITOR_BLOCK_NAME, ROOT_TAG

if TYPE_CHECKING:
    from cpn_builder.config import BuilderConfig
    from cpn_builder.domain.entities import (
        Arc,
        CpnDocument,
        Declaration,
        FusionSet,
        Instance,
        Label,
        Page,
        Place,
        Position,
        Style,
        Transition,
    )

    from ..xml_utils import XmlElement


def build_cpn_tree(
    document: CpnDocument, config: BuilderConfig | None = None
) -> XmlElement:
    """Build the ``workspaceElements`` tree for ``document``.

    Args:
        document: The assembled model
        config: Overrides the generator record; defaults to the document's config

    Returns:
        The root element, without DOCTYPE (ElementTree cannot carry one)
    """
    config = config or document.config
    root = ET.Element(ROOT_TAG)
    sub_element(
        root,
        "generator",
        {
            "tool": config.tool,
            "version": config.tool_version,
            "format": config.format_version,
        },
    )
    cpnet = sub_element(root, "cpnet")

    globbox = sub_element(cpnet, "globbox")
    for declaration in document.declarations:
        append_declaration(globbox, declaration)

    for page in document.pages:
        append_page(cpnet, page, config)
    for fusion in document.fusions:
        append_fusion(cpnet, fusion)

    instances = sub_element(cpnet, "instances")
    for instance in document.instances.children:
        append_instance(instances, instance)

    for tag in CPNET_TRAILER:
        sub_element(cpnet, tag)
    sub_element(cpnet, "monitorblock", {"name": MONITOR_BLOCK_NAME})
    return root


# declarations


def append_declaration(parent: XmlElement, declaration: Declaration) -> XmlElement:
    if isinstance(declaration, ColorSet):
        return append_colorset(parent, declaration)
    return append_variable(parent, declaration)


def append_colorset(parent: XmlElement, colorset: ColorSet) -> XmlElement:
    color = sub_element(parent, "color", {"id": colorset.id})
    sub_element(color, "id", text=colorset.name)
    body = sub_element(color, str(colorset.kind))
    if colorset.kind is ColorSetKind.INT and colorset.bounds is not None:
        with_ = sub_element(body, "with")
        lower, upper = colorset.bounds
        sub_element(with_, "ml", text=lower)
        sub_element(with_, "ml", text=upper)
    elif colorset.kind in (ColorSetKind.ENUM, ColorSetKind.PRODUCT):
        for member in colorset.members:
            sub_element(body, "id", text=member)
    sub_element(color, "layout", text=colorset.layout)
    return color


def append_variable(parent: XmlElement, variable: VariableDeclaration) -> XmlElement:
    var = sub_element(parent, "var", {"id": variable.id})
    type_ = sub_element(var, "type")
    sub_element(type_, "id", text=variable.type_name)
    for name in variable.names:
        sub_element(var, "id", text=name)
    sub_element(var, "layout", text=variable.layout)
    return var


# pages


def append_page(parent: XmlElement, page: Page, config: BuilderConfig) -> XmlElement:
    element = sub_element(parent, "page", {"id": page.id})
    sub_element(element, "pageattr", {"name": page.name})
    for place in page.places:
        append_place(element, place, config)
    for transition in page.transitions:
        append_transition(element, transition, config)
    for arc in page.arcs:
        append_arc(element, arc, config)
    sub_element(element, "constraints")
    return element


def append_place(parent: XmlElement, place: Place, config: BuilderConfig) -> XmlElement:
    element = sub_element(parent, "place", {"id": place.id})
    _append_graphics(element, place.position, place.style)
    sub_element(element, "text", text=place.name)
    if place.shape is not None:
        sub_element(
            element, place.shape.kind, {"w": place.shape.width, "h": place.shape.height}
        )
    if place.token_offset is not None:
        x, y = place.token_offset
        sub_element(element, "token", {"x": x, "y": y})
    if place.marking_offset is not None:
        x, y = place.marking_offset
        sub_element(element, "marking", {"x": x, "y": y})
    _append_tool_label(element, "type", place.type_label, config)
    _append_tool_label(element, "initmark", place.initmark, config)
    if place.port is not None:
        port = sub_element(
            element, "port", {"id": place.port.id, "type": str(place.port.role)}
        )
        _append_graphics(port, place.port.position, place.port.style)
    if place.fusion is not None:
        fusion = sub_element(
            element, "fusioninfo", {"id": place.fusion.id, "name": place.fusion.text}
        )
        _append_graphics(fusion, place.fusion.position, place.fusion.style)
    return element


def append_transition(
    parent: XmlElement, transition: Transition, config: BuilderConfig
) -> XmlElement:
    element = sub_element(
        parent, "trans", {"id": transition.id, "explicit": "false"}
    )
    _append_graphics(element, transition.position, transition.style)
    sub_element(element, "text", text=transition.name)
    if transition.shape is not None:
        sub_element(
            element,
            transition.shape.kind,
            {"w": transition.shape.width, "h": transition.shape.height},
        )
    substitution = transition.substitution
    if substitution is not None:
        attrib: dict[str, str] = {}
        if substitution.subpage_id is not None:
            attrib["subpage"] = substitution.subpage_id
        portsock = substitution.portsock
        if portsock is not None:
            attrib["portsock"] = portsock
        subst = sub_element(element, "subst", attrib)
        info = sub_element(
            subst,
            "subpageinfo",
            {"id": substitution.info.id, "name": substitution.info.text},
        )
        _append_graphics(info, substitution.info.position, substitution.info.style)
    if transition.guard is not None:
        _append_tool_label(element, "cond", transition.guard, config)
    return element


def append_arc(parent: XmlElement, arc: Arc, config: BuilderConfig) -> XmlElement:
    element = sub_element(
        parent,
        "arc",
        {"id": arc.id, "orientation": str(arc.orientation), "order": str(arc.order)},
    )
    _append_graphics(element, arc.position, arc.style)
    if arc.arrow is not None:
        sub_element(
            element,
            "arrowattr",
            {"headsize": arc.arrow.headsize, "currentcyckle": arc.arrow.currentcyckle},
        )
    sub_element(element, "placeend", {"idref": arc.place_id})
    sub_element(element, "transend", {"idref": arc.transition_id})
    _append_tool_label(element, "annot", arc.annotation, config)
    return element


# cpnet-level records


def append_fusion(parent: XmlElement, fusion: FusionSet) -> XmlElement:
    element = sub_element(parent, "fusion", {"id": fusion.id, "name": fusion.name})
    for member_id in fusion.member_ids:
        sub_element(element, "fusion_elm", {"idref": member_id})
    return element


def append_instance(parent: XmlElement, instance: Instance) -> XmlElement:
    attrib = {"id": instance.id}
    if instance.page_id is not None:
        attrib["page"] = instance.page_id
    if instance.transition_id is not None:
        attrib["trans"] = instance.transition_id
    element = sub_element(parent, "instance", attrib)
    for child in instance.children:
        append_instance(element, child)
    return element


# shared pieces


def _append_graphics(
    element: XmlElement, position: Position | None, style: Style | None
) -> None:
    if position is not None:
        sub_element(element, "posattr", {"x": str(position.x), "y": str(position.y)})
    if style is None:
        return
    sub_element(
        element,
        "fillattr",
        {
            "colour": style.fill_colour,
            "pattern": style.fill_pattern,
            "filled": style.filled,
        },
    )
    sub_element(
        element,
        "lineattr",
        {
            "colour": style.line_colour,
            "thick": style.line_thick,
            "type": style.line_type,
        },
    )
    sub_element(
        element, "textattr", {"colour": style.text_colour, "bold": style.text_bold}
    )


def _append_tool_label(
    parent: XmlElement, tag: str, label: Label, config: BuilderConfig
) -> XmlElement:
    """A label whose text the tool parses: ``<tag id><text tool version>``."""
    attrib = {"id": label.id} if label.id else {}
    element = sub_element(parent, tag, attrib)
    _append_graphics(element, label.position, label.style)
    sub_element(
        element,
        "text",
        {"tool": config.tool, "version": config.tool_version},
        text=label.text,
    )
    return element
