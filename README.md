# tmsim

A small library for describing and running nondeterministic Turing machines.

A machine is a set of transitions `(state, symbol) -> (next state, action)`.
An action is either `R` (move the head right), `L` (move the head left) or
any other single character, which is written under the head. When the head
is already on the first cell, `L` cannot move it and is written to the tape
like any other character. Several transitions may share the same state and
symbol; the simulator explores every branch breadth first, level by level,
until a branch reaches a final state or every branch is exhausted or has hit
the depth limit.

The tape starts as `>_` followed by the input, with the head at position 0,
and is padded with blanks (`_`) in chunks as the head moves right.

## Modules

- `tmsim.table` – `Transition` is one rule; `TransitionTable` holds the
  rules in a chained hash table. `insert` adds one (the symbol must be a
  single character, otherwise `ValueError`) and returns it, `search`
  returns the first match for a state and symbol or `None`, `search_all`
  returns every match as a list, and `render` returns a text dump of the
  buckets. The table supports `len()` and iteration.
- `tmsim.tree` – `TapeNode` is one configuration (state, tape, head
  position). `symbol` is the character under the head, `transition`
  derives and attaches a child configuration by applying an action, and
  `render` returns the configuration tree as indented text.
- `tmsim.machine` – `Machine(table, initial_state, final_states)` runs the
  breadth-first search. `is_final` tests a state; `trace` yields the report
  lines (`Level N: State: ..., Head: ..., Tape: ...`, and
  `Reached final state: ... Halting.` when one is reached); `run` writes the
  same lines to a text stream (standard output by default) and returns the
  accepting state reached, or `None`. The depth limit defaults to 100.
- `tmsim.ast` – `AstNode`, `NodeType`, `create_symbol` and `create_integer`
  describe a machine definition as a syntax tree of directives
  (`STATES`, `TAPE_ALPHABET`, `INPUT_ALPHABET`, `INITIAL_STATE`,
  `FINAL_STATES`, `MAX_DEPTH`) and transitions. `AstNode.render` returns the
  tree as indented text.
- `tmsim.semantic` – `check_semantics` validates such a tree and returns a
  `Specification` with the states, alphabets, initial and final states,
  the depth limit (100 unless `MAX_DEPTH` sets a positive value) and the
  transition table. All problems found are collected into one
  `SemanticError`, whose `errors` lists them and whose `report` gives one
  `Error: ...` line each. `Specification.describe` returns a readable
  summary.
- `tmsim.errors` – `TuringMachineError`, raised for an unknown action or a
  negative head position; its `report` property gives the message prefixed
  with `Error: `.

## Example: running a machine

```python
import sys

from tmsim.machine import Machine
from tmsim.table import TransitionTable

table = TransitionTable()
table.insert("q0", ">", "q0", "R")
table.insert("q0", "_", "q1", "R")
table.insert("q1", "a", "q1", "R")
table.insert("q1", "_", "qf", "_")

machine = Machine(table, "q0", ["qf"])
accepted = machine.run("aaa", 100, sys.stdout)
```

The run prints each configuration it visits and stops with
`Reached final state: qf. Halting.` once an accepting branch is found;
`accepted` is then `"qf"`.

## Example: checking a definition tree

```python
from tmsim.ast import AstNode, NodeType, create_symbol
from tmsim.machine import Machine
from tmsim.semantic import check_semantics


def directive(name, *values):
    symbols = AstNode(NodeType.SYMBOLS)
    for value in values:
        symbols.add_child(create_symbol(value))
    node = AstNode(NodeType.DIRECTIVE)
    node.add_child(create_symbol(name))
    node.add_child(symbols if name != "INITIAL_STATE" else create_symbol(values[0]))
    return node


root = AstNode(NodeType.START)
root.add_child(directive("STATES", "q0", "qf"))
root.add_child(directive("TAPE_ALPHABET", "a", "_"))
root.add_child(directive("INPUT_ALPHABET", "a"))
root.add_child(directive("INITIAL_STATE", "q0"))
root.add_child(directive("FINAL_STATES", "qf"))

rule = AstNode(NodeType.TRANSITION)
for part in ("q0", ">", "qf", "R"):
    rule.add_child(create_symbol(part))
root.add_child(rule)

spec = check_semantics(root)
print(spec.describe())
Machine(spec.table, spec.initial_state, spec.final_states).run("a", spec.max_depth)
```

## What it does not do

tmsim has no reader for definition files and no command-line program: a
machine is built in Python, either directly through `TransitionTable` or as
an `AstNode` tree checked with `check_semantics`.