"""Error type raised when a machine definition or run cannot proceed."""

from __future__ import annotations


class TuringMachineError(Exception):
    """A fatal error in building or running a machine.

    ``message`` may hold a single ``%s`` placeholder, filled from ``arg``.
    """

    def __init__(self, message: str, arg: str | None = None) -> None:
        self.template = message
        self.arg = arg
        self.message = message if arg is None else message % arg
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    @property
    def report(self) -> str:
        """The message as shown to the user."""
        return f"Error: {self.message}"