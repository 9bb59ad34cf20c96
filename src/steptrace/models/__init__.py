"""Data models for recorded executions."""

from steptrace.models.command import Command
from steptrace.models.enums import MissingCellPolicy, NotificationKind
from steptrace.models.notification import CellChanged, CursorMoved, Notification
from steptrace.models.trace import TraceDocument
from steptrace.models.update import Update

__all__ = [
    "Command",
    "Update",
    "CellChanged",
    "CursorMoved",
    "Notification",
    "NotificationKind",
    "MissingCellPolicy",
    "TraceDocument",
]
