import pytest

from tmsim.ast import AstNode, NodeType, create_integer, create_symbol
from tmsim.semantic import SemanticError, Specification, check_semantics


def _directive(name: str, value: AstNode) -> AstNode:
    node = AstNode(NodeType.DIRECTIVE)
    node.add_child(create_symbol(name))
    node.add_child(value)
    return node


def _symbols(*names: str) -> AstNode:
    node = AstNode(NodeType.SYMBOLS)
    for name in names:
        node.add_child(create_symbol(name))
    return node


def _transition(*parts: str) -> AstNode:
    node = AstNode(NodeType.TRANSITION)
    for part in parts:
        node.add_child(create_symbol(part))
    return node


def _tree(directives, transitions=()) -> AstNode:
    root = AstNode(NodeType.START)
    block = AstNode(NodeType.DIRECTIVES)
    for directive in directives:
        block.add_child(directive)
    rules = AstNode(NodeType.TRANSITIONS)
    for transition in transitions:
        rules.add_child(transition)
    root.add_child(block)
    root.add_child(rules)
    return root


def _complete_directives(extra=()):
    return [
        _directive("STATES", _symbols("q0", "q1")),
        _directive("TAPE_ALPHABET", _symbols("a", "_")),
        _directive("INPUT_ALPHABET", _symbols("a")),
        _directive("INITIAL_STATE", create_symbol("q0")),
        _directive("FINAL_STATES", _symbols("q1")),
        *extra,
    ]


def test_complete_definition():
    spec = check_semantics(
        _tree(_complete_directives(), [_transition("q0", "a", "q1", "R")])
    )
    assert spec.states == ["q0", "q1"]
    assert spec.tape_alphabet == ["a", "_"]
    assert spec.input_alphabet == ["a"]
    assert spec.initial_state == "q0"
    assert spec.final_states == ["q1"]
    assert spec.max_depth == 100
    rule = spec.table.search("q0", "a")
    assert (rule.next_state, rule.action) == ("q1", "R")


def test_max_depth_directive():
    spec = check_semantics(_tree(_complete_directives([_directive("MAX_DEPTH", create_integer(7))])))
    assert spec.max_depth == 7


def test_max_depth_must_be_positive():
    with pytest.raises(SemanticError) as info:
        check_semantics(_tree(_complete_directives([_directive("MAX_DEPTH", create_integer(0))])))
    assert info.value.errors == ["'@max_depth' must be an integer greater than 0. Got 0."]


def test_missing_directives_are_all_reported():
    with pytest.raises(SemanticError) as info:
        check_semantics(_tree([]))
    assert info.value.errors == [
        "'@states' directive is missing.",
        "'@tape_alphabet' directive is missing.",
        "'@input_alphabet' directive is missing.",
        "'@initial_state' directive is missing.",
        "'@final_states' directive is missing.",
    ]
    assert info.value.report.splitlines()[0] == "Error: '@states' directive is missing."


def test_transition_with_wrong_arity():
    with pytest.raises(SemanticError) as info:
        check_semantics(_tree(_complete_directives(), [_transition("q0", "a", "q1")]))
    assert info.value.errors == ["transition with incorrect number of children."]


def test_initial_state_without_symbol():
    directives = _complete_directives()
    directives[3] = _directive("INITIAL_STATE", create_integer(3))
    with pytest.raises(SemanticError) as info:
        check_semantics(_tree(directives))
    assert "missing symbol in '@initial_state'." in info.value.errors


def test_unknown_directive_is_ignored():
    spec = check_semantics(_tree(_complete_directives([_directive("COLOUR", create_symbol("x"))])))
    assert spec.initial_state == "q0"


def test_describe_lists_directives():
    spec = check_semantics(
        _tree(_complete_directives(), [_transition("q0", "a", "q1", "R")])
    )
    text = spec.describe()
    assert text.startswith(
        "@states: q0,q1\n@tape_alphabet: a,_\n@input_alphabet: a\n"
        "@initial_state: q0\n@final_states (1): q1\n@max_depth: 100\n\nTransitions:\n"
    )
    assert spec.table.render() in text


def test_empty_specification_describe():
    spec = Specification()
    assert spec.describe().startswith("@states: \n")