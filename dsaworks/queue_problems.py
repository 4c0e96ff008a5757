"""Queue exercises: reversing, first non-repeating characters and partial reversal."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable
from typing import TypeVar

T = TypeVar("T")

NO_CHARACTER = "#"


def reverse_queue(queue: Iterable[T]) -> deque[T]:
    """Return a new queue holding the values in reverse order."""
    return deque(reversed(list(queue)))


def first_non_repeating(text: str) -> str:
    """For each prefix of ``text``, its first character seen only once so far, or ``#``."""
    counts: Counter[str] = Counter()
    candidates: deque[str] = deque()
    result: list[str] = []
    for char in text:
        counts[char] += 1
        candidates.append(char)
        while candidates and counts[candidates[0]] > 1:
            candidates.popleft()
        result.append(candidates[0] if candidates else NO_CHARACTER)
    return "".join(result)


def reverse_first_k(queue: Iterable[T], k: int) -> deque[T]:
    """Return a new queue: the first ``k`` values reversed, then the rest reversed.

    Raises ValueError unless ``k`` is within ``0..len(queue)``.
    """
    items = list(queue)
    if not 0 <= k <= len(items):
        raise ValueError(f"k must be between 0 and {len(items)}, got {k}")
    head = items[:k]
    rest = items[k:]
    return deque([*reversed(head), *reversed(rest)])