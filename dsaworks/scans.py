"""Single-pass scans: circular petrol tour and first negatives in sliding windows."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class PetrolPump:
    """A pump with the petrol it supplies and the distance to the next pump."""

    petrol: int
    distance: int


def tour_start(pumps: Sequence[PetrolPump]) -> int | None:
    """Index of the pump from which the whole circuit can be driven, or None."""
    start = 0
    balance = 0
    deficit = 0
    for index, pump in enumerate(pumps):
        balance += pump.petrol - pump.distance
        if balance < 0:
            deficit += balance
            start = index + 1
            balance = 0
    return start if deficit + balance >= 0 else None


def first_negative_in_windows(values: Iterable[int], k: int) -> list[int]:
    """For each window of ``k`` consecutive values, its first negative value or 0.

    Raises ValueError if ``k`` is less than 1.
    """
    if k < 1:
        raise ValueError(f"window size must be at least 1, got {k}")
    items = list(values)
    negatives: deque[int] = deque()
    result: list[int] = []
    for index, value in enumerate(items):
        if negatives and negatives[0] < index - k + 1:
            negatives.popleft()
        if value < 0:
            negatives.append(index)
        if index >= k - 1:
            result.append(items[negatives[0]] if negatives else 0)
    return result