"""Update model: one reversible memory-cell change."""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict


class Update(BaseModel):
    """A single recorded cell write.

    ``new_value`` is written when the step is replayed, ``old_value`` when
    it is undone.
    """

    model_config = ConfigDict(frozen=True)

    address: int
    old_value: int
    new_value: int

    @classmethod
    def from_triple(cls, triple: Sequence[int]) -> Update:
        """Build an update from an ``(address, old, new)`` triple."""
        address, old_value, new_value = triple
        return cls(address=address, old_value=old_value, new_value=new_value)

    def reverted(self) -> Update:
        """Return the inverse delta."""
        return Update(address=self.address, old_value=self.new_value, new_value=self.old_value)

    def as_triple(self) -> tuple[int, int, int]:
        return (self.address, self.old_value, self.new_value)
