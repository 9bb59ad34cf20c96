"""Tests for trace documents."""

import pytest
from pydantic import ValidationError

from steptrace.models.trace import TraceDocument
from steptrace.models.update import Update


def test_triples_are_coerced():
    doc = TraceDocument.model_validate({"updates": [[[5, 0, 42]], []]})
    assert doc.step_count == 2
    assert doc.updates[0] == [Update(address=5, old_value=0, new_value=42)]
    assert doc.updates[1] == []


def test_mappings_accepted():
    doc = TraceDocument.model_validate(
        {"updates": [[{"address": 5, "old_value": 0, "new_value": 42}, [6, 1, 2]]]}
    )
    assert [u.address for u in doc.updates[0]] == [5, 6]


def test_string_keys_of_initial_values_coerced():
    doc = TraceDocument.model_validate({"initial_values": {"100": 4}})
    assert doc.initial_values == {100: 4}


def test_defaults():
    doc = TraceDocument()
    assert doc.source == ""
    assert doc.labels == {}
    assert doc.step_count == 0


def test_bad_triple_rejected():
    with pytest.raises(ValidationError):
        TraceDocument.model_validate({"updates": [[[5, "x", 1]]]})


def test_fixture_loads(sum_trace):
    assert sum_trace.step_count == 4
    assert sum_trace.labels["START"] == 0
    assert sum_trace.commands[1].mnemonic == "ADD"
