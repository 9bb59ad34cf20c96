"""Listener notifications emitted during navigation."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from steptrace.models.enums import NotificationKind


class CellChanged(BaseModel):
    """A memory cell or register received a new value."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["cell_changed"] = NotificationKind.CELL_CHANGED.value
    address: int
    value: int


class CursorMoved(BaseModel):
    """A navigation call finished at ``position``; no cell was touched."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["cursor_moved"] = NotificationKind.CURSOR_MOVED.value
    position: int


Notification = Annotated[Union[CellChanged, CursorMoved], Field(discriminator="kind")]
