"""Small helpers shared by the event and state modules."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timezone


def test_bit(n: int, array: Sequence[int]) -> bool:
    """Return True if the ``n``-th bit of the byte array is set."""
    return (array[n // 8] >> (n % 8)) & 1 != 0


def time_now() -> datetime:
    """Return the current wall-clock time as an aware UTC datetime."""
    return datetime.now(timezone.utc)