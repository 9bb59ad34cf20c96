"""Replay invariants checked against an independent from-scratch replay."""

import random

import pytest

from steptrace.core.state import ACCU, IAR
from steptrace.core.timeline import Timeline
from steptrace.utils.hashing import state_fingerprint


def replay_from_scratch(log, initial_values, position, start=0):
    cells = dict(initial_values)
    cells.setdefault(ACCU, 0)
    cells[IAR] = start
    for step in log[:position]:
        for update in step:
            cells[update.address] = update.new_value
    return cells


@pytest.mark.parametrize("seed", [1, 7, 42, 1234])
def test_random_jumps_match_reference(random_log, seed):
    log, initial = random_log(seed)
    timeline = Timeline(updates=log, initial_values=initial)
    rng = random.Random(seed * 31)

    for _ in range(200):
        target = rng.randint(-5, len(log) + 5)
        reached = timeline.set_position(target)
        assert reached == max(0, min(len(log), target))
        assert timeline.expose_state().snapshot() == replay_from_scratch(log, initial, reached)


@pytest.mark.parametrize("seed", [2, 99])
def test_round_trip_through_zero(random_log, seed):
    log, initial = random_log(seed, steps=25)
    for k in range(len(log) + 1):
        direct = Timeline(updates=log, initial_values=initial)
        direct.set_position(k)

        round_trip = Timeline(updates=log, initial_values=initial)
        round_trip.set_position(k)
        round_trip.set_position(0)
        round_trip.set_position(k)

        assert round_trip.expose_state().snapshot() == direct.expose_state().snapshot()


def test_forward_then_backward_restores_initial_state(random_log):
    log, initial = random_log(5, steps=60)
    timeline = Timeline(updates=log, initial_values=initial)
    before = state_fingerprint(timeline.expose_state().snapshot())

    timeline.set_position(len(log))
    timeline.set_position(0)

    assert state_fingerprint(timeline.expose_state().snapshot()) == before


def test_single_steps_agree_with_jumps(random_log):
    log, initial = random_log(11, steps=30)
    stepping = Timeline(updates=log, initial_values=initial)
    jumping = Timeline(updates=log, initial_values=initial)

    for k in range(1, len(log) + 1):
        stepping.add_to_position(1)
        jumping.set_position(0)
        jumping.set_position(k)
        assert stepping.expose_state().snapshot() == jumping.expose_state().snapshot()


def test_repeated_position_performs_no_writes(random_log, listener):
    log, initial = random_log(8)
    timeline = Timeline(updates=log, initial_values=initial)
    timeline.set_position(17)
    timeline.add_listener(listener)

    timeline.set_position(17)

    assert listener.cell_changes == []
    assert [n.position for n in listener.cursor_moves] == [17]


def test_notifications_proportional_to_distance(random_log, listener):
    log, initial = random_log(4)
    timeline = Timeline(updates=log, initial_values=initial)
    timeline.set_position(10)
    timeline.add_listener(listener)

    timeline.set_position(13)

    expected = sum(len(step) for step in log[10:13])
    assert len(listener.cell_changes) == expected
