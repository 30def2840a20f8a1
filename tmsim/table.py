"""Hash table of transitions keyed by (state, symbol)."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass

INITIAL_SIZE = 16
RESIZE_INCREMENT = 16


@dataclass(frozen=True)
class Transition:
    """One rule: in ``prev_state`` reading ``symbol``, go to ``next_state`` doing ``action``."""

    prev_state: str
    symbol: str
    next_state: str
    action: str


def _signed_byte(byte: int) -> int:
    return byte - 256 if byte > 127 else byte


def _symbol_byte(symbol: str) -> int:
    return _signed_byte(symbol.encode()[0])


def _hash(state: str, symbol: str, size: int) -> int:
    value = 0
    for byte in state.encode():
        value = ((value * 31 + _signed_byte(byte)) & 0xFFFFFFFF) % size
    return ((value * 31 + _symbol_byte(symbol)) & 0xFFFFFFFF) % size


class TransitionTable:
    """Chained hash table of transitions; several rules may share a key."""

    def __init__(self) -> None:
        self._buckets: list[deque[Transition]] = [deque() for _ in range(INITIAL_SIZE)]
        self._count = 0

    @property
    def size(self) -> int:
        """Number of buckets."""
        return len(self._buckets)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Transition]:
        for bucket in self._buckets:
            yield from bucket

    def _resize(self) -> None:
        new_size = self.size + RESIZE_INCREMENT
        new_buckets: list[deque[Transition]] = [deque() for _ in range(new_size)]
        for bucket in self._buckets:
            for transition in bucket:
                index = _hash(transition.prev_state, transition.symbol, new_size)
                new_buckets[index].appendleft(transition)
        self._buckets = new_buckets

    def insert(self, prev_state: str, symbol: str, next_state: str, action: str) -> Transition:
        """Add a rule and return it."""
        if len(symbol) != 1:
            raise ValueError(f"transition symbol must be a single character, got {symbol!r}")
        if self._count >= self.size:
            self._resize()
        transition = Transition(prev_state, symbol, next_state, action)
        self._buckets[_hash(prev_state, symbol, self.size)].appendleft(transition)
        self._count += 1
        return transition

    def _matches(self, prev_state: str, symbol: str) -> Iterator[Transition]:
        if len(symbol) != 1:
            return
        for transition in self._buckets[_hash(prev_state, symbol, self.size)]:
            if transition.symbol == symbol and transition.prev_state == prev_state:
                yield transition

    def search(self, prev_state: str, symbol: str) -> Transition | None:
        """Return the first matching rule, or ``None``."""
        return next(self._matches(prev_state, symbol), None)

    def search_all(self, prev_state: str, symbol: str) -> list[Transition]:
        """Return every matching rule, in chain order."""
        return list(self._matches(prev_state, symbol))

    def render(self) -> str:
        """Return a listing of the table's buckets."""
        lines = [f"Hash Table ({self._count} elements / size {self.size}):\n"]
        for index, bucket in enumerate(self._buckets):
            if not bucket:
                continue
            lines.append(f"  [{index}]:\n")
            lines.extend(
                f"    ({t.prev_state}, {t.symbol}) = ({t.next_state}, {t.action})\n"
                for t in bucket
            )
        return "".join(lines)