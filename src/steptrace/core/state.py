"""Machine state — the current memory image plus registers."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from steptrace.errors import MissingCellError
from steptrace.models.command import Command
from steptrace.models.enums import MissingCellPolicy

# Registers live at negative addresses, outside the 20-bit memory range.
IAR = -1
ACCU = -2


class State:
    """Mapping from address to value for memory cells and registers.

    Built once from the command list (each command's encoded word is
    placed at its address) and the initial-values map. Only the owning
    Timeline mutates it.
    """

    IAR = IAR
    ACCU = ACCU
    REGISTERS = (IAR, ACCU)

    def __init__(
        self,
        commands: Iterable[Command] = (),
        initial_values: Mapping[int, int] | None = None,
        missing_cell_policy: MissingCellPolicy = MissingCellPolicy.ZERO,
    ) -> None:
        self._cells: dict[int, int] = {}
        self.missing_cell_policy = missing_cell_policy

        for command in commands:
            self.set(command.address, command.value)
        for address, value in (initial_values or {}).items():
            self.set(address, value)
        for register in self.REGISTERS:
            self._cells.setdefault(register, 0)

    def get(self, address: int) -> int:
        """Return the value at ``address``.

        Raises:
            MissingCellError: If the address is unknown and the policy is RAISE
        """
        try:
            return self._cells[address]
        except KeyError:
            if self.missing_cell_policy is MissingCellPolicy.RAISE:
                raise MissingCellError(address) from None
            return 0

    def set(self, address: int, value: int) -> None:
        if not isinstance(address, int) or isinstance(address, bool):
            raise TypeError(f"Address must be an int, got {type(address).__name__}")
        self._cells[address] = value

    def addresses(self) -> list[int]:
        """All defined addresses, registers first, then memory ascending."""
        return sorted(self._cells)

    def snapshot(self) -> dict[int, int]:
        """Copy of every defined cell."""
        return dict(self._cells)

    @staticmethod
    def is_register(address: int) -> bool:
        return address < 0

    def __contains__(self, address: object) -> bool:
        return address in self._cells

    def __len__(self) -> int:
        return len(self._cells)

    def __repr__(self) -> str:
        return f"State(cells={len(self._cells)}, iar={self._cells.get(IAR)})"
