"""Stable fingerprints of machine state."""

import hashlib
import json
from collections.abc import Mapping


def _stable_hash(data: object) -> str:
    """SHA256 of the canonical JSON form, first 16 hex characters."""
    json_str = json.dumps(data, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(json_str.encode("utf-8")).hexdigest()[:16]


def state_fingerprint(cells: Mapping[int, int]) -> str:
    """Fingerprint a cell map independent of insertion order.

    Two states with the same defined addresses and values always hash
    equal.

    Args:
        cells: Address -> value, e.g. ``State.snapshot()``

    Returns:
        str: Deterministic hash string
    """
    return _stable_hash(sorted(cells.items()))
