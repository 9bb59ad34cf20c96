"""Observer interface for timeline navigation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

from steptrace.models.notification import CellChanged, CursorMoved


class UpdateListener(ABC):
    """Receives every cell write and the final cursor move of a navigation call.

    Callbacks run synchronously on the navigating thread. Implementations
    must not call back into ``Timeline.set_position``.
    """

    @abstractmethod
    def memory_changed(self, notification: CellChanged | CursorMoved) -> None:
        """Handle one notification."""
        ...


class CallbackListener(UpdateListener):
    """Adapts a plain callable to the listener interface."""

    def __init__(self, callback: Callable[[CellChanged | CursorMoved], None]) -> None:
        self._callback = callback

    def memory_changed(self, notification: CellChanged | CursorMoved) -> None:
        self._callback(notification)
