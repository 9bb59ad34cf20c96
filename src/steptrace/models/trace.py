"""Trace document — the finished output of one forward execution."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from steptrace.models.command import Command
from steptrace.models.update import Update


class TraceDocument(BaseModel):
    """Everything a Timeline is built from, as stored in a trace file."""

    schema_version: str = "1.0"
    source: str = ""
    labels: dict[str, int] = Field(default_factory=dict)
    commands: list[Command] = Field(default_factory=list)
    initial_values: dict[int, int] = Field(default_factory=dict)
    updates: list[list[Update]] = Field(
        default_factory=list, description="One list of cell writes per executed step"
    )

    @field_validator("updates", mode="before")
    @classmethod
    def _coerce_triples(cls, value: Any) -> Any:
        # Steps may be written as [address, old, new] triples for brevity
        if not isinstance(value, list):
            return value
        steps = []
        for step in value:
            if not isinstance(step, list):
                steps.append(step)
                continue
            steps.append(
                [
                    Update.from_triple(entry) if isinstance(entry, (list, tuple)) else entry
                    for entry in step
                ]
            )
        return steps

    @property
    def step_count(self) -> int:
        return len(self.updates)
