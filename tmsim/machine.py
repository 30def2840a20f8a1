"""Breadth-first execution of a (possibly nondeterministic) Turing machine."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable, Iterator
from typing import TextIO

from tmsim.table import TransitionTable
from tmsim.tree import TapeNode

TAPE_PREFIX = ">_"
DEFAULT_MAX_DEPTH = 100


class Machine:
    """A machine: a rule table, a start state and a set of accepting states."""

    def __init__(
        self,
        table: TransitionTable,
        initial_state: str,
        final_states: Iterable[str],
    ) -> None:
        self.table = table
        self.initial_state = initial_state
        self.final_states = tuple(final_states)

    def is_final(self, state: str) -> bool:
        """Whether ``state`` is an accepting state."""
        return state in self.final_states

    def _walk(self, tape_input: str, max_depth: int) -> Iterator[tuple[int, TapeNode]]:
        """Yield configurations level by level, stopping after an accepting one."""
        root = TapeNode(self.initial_state, TAPE_PREFIX + tape_input, 0)
        pending: deque[tuple[TapeNode, int]] = deque([(root, 0)])
        while pending:
            current, depth = pending.popleft()
            yield depth, current
            if self.is_final(current.state):
                return
            if depth >= max_depth:
                continue
            for rule in self.table.search_all(current.state, current.symbol):
                child = current.transition(rule.next_state, rule.action)
                pending.append((child, depth + 1))

    def trace(self, tape_input: str, max_depth: int = DEFAULT_MAX_DEPTH) -> Iterator[str]:
        """Yield the report lines of a run, without line endings."""
        for depth, node in self._walk(tape_input, max_depth):
            yield f"Level {depth}: State: {node.state}, Head: {node.head}, Tape: {node.tape}"
            if self.is_final(node.state):
                yield f"Reached final state: {node.state}. Halting."

    def run(
        self,
        tape_input: str,
        max_depth: int = DEFAULT_MAX_DEPTH,
        out: TextIO | None = None,
    ) -> str | None:
        """Write the run's report to ``out`` and return the accepting state reached, if any."""
        stream = sys.stdout if out is None else out
        reached: str | None = None
        for depth, node in self._walk(tape_input, max_depth):
            stream.write(
                f"Level {depth}: State: {node.state}, Head: {node.head}, Tape: {node.tape}\n"
            )
            if self.is_final(node.state):
                stream.write(f"Reached final state: {node.state}. Halting.\n")
                reached = node.state
        return reached