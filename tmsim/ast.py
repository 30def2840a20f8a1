"""Syntax tree for machine definition files."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class NodeType(enum.Enum):
    """Kinds of syntax tree nodes."""

    START = "START"
    DIRECTIVES = "DIRECTIVES"
    DIRECTIVE = "DIRECTIVE"
    TRANSITIONS = "TRANSITIONS"
    TRANSITION = "TRANSITION"
    SYMBOLS = "SYMBOLS"
    SYMBOL = "SYMBOL"
    INTEGER = "INTEGER"


@dataclass
class AstNode:
    """A node of the syntax tree, with ordered children."""

    type: NodeType
    symbol: str | None = None
    value: int = 0
    children: list[AstNode] = field(default_factory=list)

    def add_child(self, child: AstNode | None) -> None:
        """Append ``child``; ``None`` is ignored."""
        if child is None:
            return
        self.children.append(child)

    def _label(self) -> str:
        if self.type is NodeType.SYMBOL:
            return f"SYMBOL: {self.symbol}"
        if self.type is NodeType.INTEGER:
            return f"INTEGER: {self.value}"
        return self.type.value

    def render(self, indent: int = 0) -> str:
        """Return the subtree as indented text, two spaces per level."""
        lines = [f"{'  ' * indent}{self._label()}\n"]
        lines.extend(child.render(indent + 1) for child in self.children)
        return "".join(lines)


def create_symbol(symbol: str) -> AstNode:
    """Create a symbol leaf."""
    return AstNode(NodeType.SYMBOL, symbol=symbol)


def create_integer(value: int) -> AstNode:
    """Create an integer leaf."""
    return AstNode(NodeType.INTEGER, value=value)