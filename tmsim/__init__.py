"""Breadth-first simulation of nondeterministic Turing machines."""

__version__ = "0.1.0"
__all__ = ["ast", "errors", "machine", "semantic", "table", "tree"]