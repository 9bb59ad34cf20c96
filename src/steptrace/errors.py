"""Exception hierarchy for steptrace."""

from __future__ import annotations


class SteptraceError(Exception):
    """Base class for all steptrace errors."""


class MissingCellError(SteptraceError, KeyError):
    """An address was read that never received a value."""

    def __init__(self, address: int) -> None:
        super().__init__(address)
        self.address = address

    def __str__(self) -> str:
        return f"No value recorded for address {self.address}"


class LogValidationError(SteptraceError):
    """The delta log does not replay consistently over the initial state."""

    def __init__(self, step: int, address: int, message: str) -> None:
        super().__init__(f"Step {step}, address {address}: {message}")
        self.step = step
        self.address = address


class ReentrantNavigationError(SteptraceError):
    """A listener tried to move the cursor while a move was in progress."""


class TraceLoadError(SteptraceError):
    """A trace file could not be read or parsed."""
