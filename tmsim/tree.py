"""Computation tree of machine configurations."""

from __future__ import annotations

from dataclasses import dataclass, field

from tmsim.errors import TuringMachineError

TAPE_CHUNK = 16
BLANK = "_"
RESERVED_LEFT = "L"
RESERVED_RIGHT = "R"


def _chunked_length(cells: int) -> int:
    """Visible tape length for at least ``cells`` cells, padded in chunks."""
    return (cells // TAPE_CHUNK + 1) * TAPE_CHUNK - 1


@dataclass(eq=False)
class TapeNode:
    """One configuration: a state, a tape and a head position."""

    state: str
    tape: str
    head: int = 0
    children: list[TapeNode] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if self.head < 0:
            raise TuringMachineError("head position < 0")
        self.tape = self.tape.ljust(_chunked_length(len(self.tape)), BLANK)
        self._ensure_capacity()

    def _ensure_capacity(self) -> None:
        if self.head < len(self.tape):
            return
        self.tape = self.tape.ljust(_chunked_length(self.head + 1), BLANK)

    @property
    def symbol(self) -> str:
        """The symbol under the head."""
        return self.tape[self.head]

    def transition(self, next_state: str, action: str) -> TapeNode:
        """Create, attach and return the child reached by one rule.

        ``R`` and ``L`` move the head; any other single character is written.
        ``L`` on the first cell is written like any other symbol.
        """
        child = TapeNode(next_state, self.tape, self.head)
        if action == RESERVED_RIGHT:
            child.head += 1
            child._ensure_capacity()
        elif action == RESERVED_LEFT and child.head > 0:
            child.head -= 1
        elif len(action) == 1:
            child.tape = child.tape[: child.head] + action + child.tape[child.head + 1:]
        else:
            raise TuringMachineError("unknown action '%s'.", action)
        self.children.insert(0, child)
        return child

    def render(self, depth: int = 0) -> str:
        """Return the subtree as text, one space of indent per level."""
        lines = [f"{' ' * depth}State: {self.state}, Head: {self.head}, Tape: {self.tape}\n"]
        lines.extend(child.render(depth + 1) for child in self.children)
        return "".join(lines)