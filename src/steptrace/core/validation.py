"""Fail-fast consistency check for a delta log."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence

from steptrace.core.state import IAR, State
from steptrace.errors import LogValidationError
from steptrace.models.command import Command
from steptrace.models.enums import MissingCellPolicy
from steptrace.models.update import Update

logger = logging.getLogger(__name__)


def validate_log(
    updates: Sequence[Sequence[Update]],
    commands: Iterable[Command] = (),
    initial_values: Mapping[int, int] | None = None,
    start_address: int = 0,
    missing_cell_policy: MissingCellPolicy = MissingCellPolicy.ZERO,
) -> None:
    """Replay the log forward once and check every delta against the state.

    Each update's ``old_value`` must equal the value the cell holds when
    the step is reached, and a step may write any address at most once,
    otherwise undoing it in recorded order would not restore the prior
    state.

    Args:
        updates: The delta log, one sequence of updates per step
        commands: Program commands seeding the initial state
        initial_values: Initial cell values
        start_address: Value the instruction-address register starts at
        missing_cell_policy: Under RAISE, every written address must have an
            initial value

    Raises:
        LogValidationError: On the first inconsistent update
    """
    scratch = State(commands, initial_values, missing_cell_policy)
    scratch.set(IAR, start_address)

    for step, step_updates in enumerate(updates):
        seen: set[int] = set()
        for update in step_updates:
            if update.address in seen:
                raise LogValidationError(step, update.address, "address written twice in one step")
            seen.add(update.address)

            if update.address not in scratch and missing_cell_policy is MissingCellPolicy.RAISE:
                raise LogValidationError(step, update.address, "address has no initial value")

            current = scratch.get(update.address)
            if current != update.old_value:
                raise LogValidationError(
                    step,
                    update.address,
                    f"recorded old value {update.old_value} but cell holds {current}",
                )
            scratch.set(update.address, update.new_value)

    logger.debug("Validated delta log of %d steps", len(updates))
