"""Shared enumerations for steptrace domain objects."""

from enum import StrEnum


class NotificationKind(StrEnum):
    """What a listener notification reports."""

    CELL_CHANGED = "cell_changed"
    CURSOR_MOVED = "cursor_moved"


class MissingCellPolicy(StrEnum):
    """How a read of a never-initialized address is answered."""

    ZERO = "zero"
    RAISE = "raise"
