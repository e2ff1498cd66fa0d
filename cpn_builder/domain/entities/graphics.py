from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    x: int
    y: int

    def offset(self, dx: int, dy: int) -> Position:
        return Position(self.x + dx, self.y + dy)

    def midpoint(self, other: Position) -> Position:
        return Position((self.x + other.x) // 2, (self.y + other.y) // 2)


@dataclass(frozen=True, slots=True)
class Style:
    fill_colour: str = "White"
    fill_pattern: str = ""
    filled: str = "false"
    line_colour: str = "Black"
    line_thick: str = "1"
    line_type: str = "Solid"
    text_colour: str = "Black"
    text_bold: str = "false"


@dataclass(frozen=True, slots=True)
class Shape:
    kind: str
    width: str
    height: str


@dataclass(frozen=True, slots=True)
class Arrow:
    headsize: str
    currentcyckle: str


# Nodes and arcs are drawn with a thin solid outline.
NODE_STYLE = Style()
# Labels hanging off a node (type, marking, port and fusion tags).
LABEL_STYLE = Style(fill_pattern="Solid", line_thick="0")
# Guard and subpage-info labels use the lower-case pattern name the tool writes.
TRANSITION_LABEL_STYLE = Style(fill_pattern="solid", line_thick="0")
