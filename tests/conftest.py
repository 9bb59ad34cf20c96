"""Shared test fixtures."""

from __future__ import annotations

import random
from pathlib import Path

import pytest

from steptrace.core.state import ACCU, IAR
from steptrace.core.listener import UpdateListener
from steptrace.core.timeline import Timeline
from steptrace.loader import build_timeline, load_trace
from steptrace.models.command import Command
from steptrace.models.notification import CellChanged, CursorMoved
from steptrace.models.trace import TraceDocument
from steptrace.models.update import Update

FIXTURES_DIR = Path(__file__).parent / "fixtures"


class RecordingListener(UpdateListener):
    """Collects notifications in arrival order."""

    def __init__(self) -> None:
        self.received: list[CellChanged | CursorMoved] = []

    def memory_changed(self, notification: CellChanged | CursorMoved) -> None:
        self.received.append(notification)

    @property
    def cell_changes(self) -> list[CellChanged]:
        return [n for n in self.received if isinstance(n, CellChanged)]

    @property
    def cursor_moves(self) -> list[CursorMoved]:
        return [n for n in self.received if isinstance(n, CursorMoved)]

    def clear(self) -> None:
        self.received.clear()


def make_random_log(
    seed: int, steps: int = 40, addresses: int = 8
) -> tuple[list[list[Update]], dict[int, int]]:
    """Consistent random delta log plus initial values covering every address."""
    rng = random.Random(seed)
    cells = list(range(addresses)) + [ACCU]
    initial = {address: rng.randint(-50, 50) for address in cells}
    current = dict(initial)
    current[IAR] = 0

    log = []
    for _ in range(steps):
        targets = rng.sample(cells, rng.randint(0, 3))
        step = []
        for address in targets:
            new = rng.randint(-1000, 1000)
            step.append(Update(address=address, old_value=current[address], new_value=new))
            current[address] = new
        step.append(Update(address=IAR, old_value=current[IAR], new_value=current[IAR] + 1))
        current[IAR] += 1
        log.append(step)
    return log, initial


@pytest.fixture
def sum_trace() -> TraceDocument:
    return load_trace(FIXTURES_DIR / "sum_program.yaml")


@pytest.fixture
def sum_timeline(sum_trace: TraceDocument) -> Timeline:
    return build_timeline(sum_trace)


@pytest.fixture
def single_step_timeline() -> Timeline:
    return Timeline(
        updates=[[Update(address=5, old_value=0, new_value=42)]],
        initial_values={5: 0},
    )


@pytest.fixture
def listener() -> RecordingListener:
    return RecordingListener()


@pytest.fixture
def commands() -> list[Command]:
    return [
        Command(address=0, mnemonic="LDC", argument=1),
        Command(address=3, mnemonic="ADD", argument=100),
        Command(address=4, mnemonic="HALT"),
    ]


@pytest.fixture
def random_log():
    """Factory: ``random_log(seed, steps=40, addresses=8) -> (log, initial_values)``."""
    return make_random_log
