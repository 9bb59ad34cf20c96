"""Timeline — cursor navigation over a recorded delta log."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType

from steptrace.config import TimelineConfig
from steptrace.core.listener import UpdateListener
from steptrace.core.state import IAR, State
from steptrace.core.validation import validate_log
from steptrace.errors import ReentrantNavigationError
from steptrace.models.command import Command
from steptrace.models.notification import CellChanged, CursorMoved
from steptrace.models.update import Update

logger = logging.getLogger(__name__)


class Timeline:
    """Moves a cursor over the executed steps of a program.

    The state at cursor ``p`` is always the initial state with steps
    ``[0, p)`` applied in order. Moving forward replays a step's
    ``new_value`` writes; moving backward writes its ``old_value``s.
    A step is applied in full and the cursor moved before its
    ``CellChanged`` notifications go out, so listeners always see a
    state that matches the cursor. Each navigation call ends with a
    single ``CursorMoved`` notification.
    """

    def __init__(
        self,
        updates: Iterable[Iterable[Update]],
        source_text: str = "",
        labels: Mapping[str, int] | None = None,
        commands: Iterable[Command] = (),
        initial_values: Mapping[int, int] | None = None,
        config: TimelineConfig | None = None,
    ) -> None:
        """Initialize timeline at step 0.

        Args:
            updates: Delta log, one sequence of updates per executed step
            source_text: Program source, returned verbatim
            labels: Label name -> address
            commands: Assembled program commands
            initial_values: Address -> value before the first step
            config: Timeline options (defaults if None)
        """
        self.config = config or TimelineConfig()
        self._updates: tuple[tuple[Update, ...], ...] = tuple(tuple(step) for step in updates)
        self._source_text = source_text
        self._labels: dict[str, int] = dict(labels or {})
        self._commands: tuple[Command, ...] = tuple(commands)

        start = self._labels.get(self.config.start_label, 0)

        if self.config.validate_log:
            validate_log(
                self._updates, self._commands, initial_values, start,
                self.config.missing_cell_policy,
            )

        self._state = State(self._commands, initial_values, self.config.missing_cell_policy)
        self._state.set(IAR, start)

        # Reverse indexes; aliased labels resolve to the smallest name
        self._names_by_address: dict[int, str] = {}
        for name in sorted(self._labels):
            self._names_by_address.setdefault(self._labels[name], name)
        self._commands_by_address: dict[int, Command] = {}
        for command in self._commands:
            self._commands_by_address.setdefault(command.address, command)

        self._position = 0
        self._listeners: list[UpdateListener] = []
        self._navigating = False

        logger.info(
            "Timeline ready: %d steps, %d commands, start address %d",
            len(self._updates), len(self._commands), start,
        )

    # ─── Listeners ─────────────────────────────────────────────────────

    def add_listener(self, listener: UpdateListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: UpdateListener) -> None:
        """Unregister a listener.

        Raises:
            ValueError: If the listener was never added
        """
        self._listeners.remove(listener)

    def _notify(self, notification: CellChanged | CursorMoved) -> None:
        for listener in self._listeners:
            listener.memory_changed(notification)

    def _apply(self, writes: list[tuple[int, int]]) -> None:
        # A step lands in State whole before any of its writes are reported
        for address, value in writes:
            self._state.set(address, value)

    def _report(self, writes: list[tuple[int, int]]) -> None:
        if not self._listeners:
            return
        for address, value in writes:
            self._notify(CellChanged(address=address, value=value))

    # ─── Navigation ────────────────────────────────────────────────────

    def set_position(self, position: int) -> int:
        """Move the cursor to ``position``, clamped into ``[0, count_steps()]``.

        Returns:
            The position actually reached

        Raises:
            ReentrantNavigationError: If called from inside a listener
        """
        if self._navigating:
            raise ReentrantNavigationError("set_position called while a move is in progress")

        target = max(0, min(len(self._updates), position))
        origin = self._position

        self._navigating = True
        try:
            while self._position < target:
                self._advance()
            while self._position > target:
                self._retreat()
            self._notify(CursorMoved(position=self._position))
        finally:
            self._navigating = False

        if origin != target:
            logger.debug("Moved from step %d to step %d", origin, target)
        return self._position

    def add_to_position(self, offset: int) -> int:
        return self.set_position(self._position + offset)

    def _advance(self) -> None:
        writes = [(u.address, u.new_value) for u in self._updates[self._position]]
        self._apply(writes)
        self._position += 1
        self._report(writes)

    def _retreat(self) -> None:
        self._position -= 1
        # Recorded order; a step never writes one address twice
        writes = [(u.address, u.old_value) for u in self._updates[self._position]]
        self._apply(writes)
        self._report(writes)

    def get_position(self) -> int:
        return self._position

    def count_steps(self) -> int:
        return len(self._updates)

    @property
    def at_start(self) -> bool:
        return self._position == 0

    @property
    def at_end(self) -> bool:
        return self._position == len(self._updates)

    # ─── State and program access ──────────────────────────────────────

    def get(self, address: int) -> int:
        return self._state.get(address)

    def expose_state(self) -> State:
        """The live state object. Callers must treat it as read-only."""
        return self._state

    def find_current_command(self) -> Command | None:
        """Command at the address held by the instruction-address register.

        Returns None when no command occupies that address, e.g. after
        the program halted.
        """
        return self._commands_by_address.get(self._state.get(IAR))

    def get_name_for(self, address: int) -> str | None:
        return self._names_by_address.get(address)

    def get_address_for(self, name: str) -> int | None:
        return self._labels.get(name)

    def get_updates(self, step: int) -> Sequence[Update]:
        """Updates recorded for one step.

        Raises:
            IndexError: If ``step`` is outside ``[0, count_steps())``
        """
        if not 0 <= step < len(self._updates):
            raise IndexError(f"Step {step} out of range [0, {len(self._updates)})")
        return self._updates[step]

    def get_commands(self) -> tuple[Command, ...]:
        return self._commands

    def get_label_map(self) -> Mapping[str, int]:
        return MappingProxyType(self._labels)

    def get_source_text(self) -> str:
        return self._source_text

    def __repr__(self) -> str:
        return f"Timeline(position={self._position}, steps={len(self._updates)})"
