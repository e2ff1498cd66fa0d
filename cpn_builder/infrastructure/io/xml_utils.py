from __future__ import annotations

from typing import TYPE_CHECKING, TypeAlias
from xml.etree import ElementTree as ET
from xml.etree.ElementTree import Element

if TYPE_CHECKING:
    from collections.abc import Mapping

    XmlElement: TypeAlias = Element[str]
else:
    XmlElement: TypeAlias = Element


def sub_element(
    parent: XmlElement,
    tag: str,
    attrib: Mapping[str, str] | None = None,
    text: str | None = None,
) -> XmlElement:
    element = ET.SubElement(parent, tag, attrib=dict(attrib or {}))
    if text is not None:
        element.text = text
    return element


def find_first(root: XmlElement, tag: str) -> XmlElement | None:
    """First descendant (document order) named ``tag``, or ``None``."""
    return root.find(f".//{tag}")


def element_by_id(root: XmlElement, element_id: str) -> XmlElement | None:
    return root.find(f".//*[@id='{element_id}']")
