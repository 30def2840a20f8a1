"""Semantic checks that turn a syntax tree into a machine specification."""

from __future__ import annotations

from dataclasses import dataclass, field

from tmsim.ast import AstNode, NodeType
from tmsim.errors import TuringMachineError
from tmsim.table import TransitionTable

DEFAULT_MAX_DEPTH = 100


class SemanticError(TuringMachineError):
    """One or more problems found in a machine definition."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))

    @property
    def report(self) -> str:
        """Every problem on its own line, as shown to the user."""
        return "\n".join(f"Error: {error}" for error in self.errors)


@dataclass
class Specification:
    """Everything a definition file declares."""

    table: TransitionTable = field(default_factory=TransitionTable)
    states: list[str] = field(default_factory=list)
    tape_alphabet: list[str] = field(default_factory=list)
    input_alphabet: list[str] = field(default_factory=list)
    initial_state: str | None = None
    final_states: list[str] = field(default_factory=list)
    max_depth: int = DEFAULT_MAX_DEPTH

    def describe(self) -> str:
        """Return the verbose summary of the directives and transitions."""
        return (
            f"@states: {','.join(self.states)}\n"
            f"@tape_alphabet: {','.join(self.tape_alphabet)}\n"
            f"@input_alphabet: {','.join(self.input_alphabet)}\n"
            f"@initial_state: {self.initial_state}\n"
            f"@final_states ({len(self.final_states)}): {','.join(self.final_states)}\n"
            f"@max_depth: {self.max_depth}\n"
            "\nTransitions:\n"
            f"{self.table.render()}\n"
        )


_LIST_DIRECTIVES = {
    "STATES": ("states", "@states"),
    "TAPE_ALPHABET": ("tape_alphabet", "@tape_alphabet"),
    "INPUT_ALPHABET": ("input_alphabet", "@input_alphabet"),
    "FINAL_STATES": ("final_states", "@final_states"),
}


class _Checker:
    def __init__(self) -> None:
        self.spec = Specification()
        self.errors: list[str] = []

    def _valid_shape(self, node: AstNode, label: str) -> bool:
        if len(node.children) != 2:
            self.errors.append(f"invalid '{label}' directive.")
            return False
        return True

    def _directive(self, node: AstNode) -> None:
        if not node.children or node.children[0].symbol is None:
            return
        name = node.children[0].symbol
        if name in _LIST_DIRECTIVES:
            attribute, label = _LIST_DIRECTIVES[name]
            if self._valid_shape(node, label):
                symbols = node.children[1]
                if symbols.type is NodeType.SYMBOLS:
                    setattr(self.spec, attribute, [c.symbol for c in symbols.children])
        elif name == "INITIAL_STATE":
            if self._valid_shape(node, "@initial_state"):
                state = node.children[1].symbol
                if state is None:
                    self.errors.append("missing symbol in '@initial_state'.")
                else:
                    self.spec.initial_state = state
        elif name == "MAX_DEPTH":
            if self._valid_shape(node, "@max_depth"):
                value = node.children[1].value
                if value <= 0:
                    self.errors.append(
                        f"'@max_depth' must be an integer greater than 0. Got {value}."
                    )
                else:
                    self.spec.max_depth = value

    def _transition(self, node: AstNode) -> None:
        if len(node.children) != 4:
            self.errors.append("transition with incorrect number of children.")
            return
        from_state, read_symbol, to_state, action = (c.symbol for c in node.children)
        if not all((from_state, read_symbol, to_state, action)) or None in (
            from_state, read_symbol, to_state, action
        ):
            self.errors.append("null symbol in transition.")
            return
        self.spec.table.insert(from_state, read_symbol[0], to_state, action)

    def visit(self, node: AstNode) -> None:
        if node.type is NodeType.DIRECTIVE:
            self._directive(node)
        elif node.type is NodeType.TRANSITION:
            self._transition(node)
        for child in node.children:
            self.visit(child)

    def validate(self) -> None:
        spec = self.spec
        if not spec.states:
            self.errors.append("'@states' directive is missing.")
        if not spec.tape_alphabet:
            self.errors.append("'@tape_alphabet' directive is missing.")
        if not spec.input_alphabet:
            self.errors.append("'@input_alphabet' directive is missing.")
        if spec.initial_state is None:
            self.errors.append("'@initial_state' directive is missing.")
        if not spec.final_states:
            self.errors.append("'@final_states' directive is missing.")


def check_semantics(root: AstNode) -> Specification:
    """Check a syntax tree and return its specification, or raise :class:`SemanticError`."""
    checker = _Checker()
    checker.visit(root)
    checker.validate()
    if checker.errors:
        raise SemanticError(checker.errors)
    return checker.spec