"""Small number utilities: binary digits, bishop reach and prime sieving."""

from __future__ import annotations

from math import isqrt

BOARD_SIZE = 8


def binary_digits(value: int) -> str:
    """Return the binary digits of a non-negative integer, without leading zeros."""
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")
    return format(value, "b")


def bishop_moves(row: int, column: int) -> int:
    """Number of squares a bishop on a 1-based 8x8 board can reach in one move."""
    up = row - 1
    down = BOARD_SIZE - row
    left = column - 1
    right = BOARD_SIZE - column
    return min(up, left) + min(up, right) + min(down, left) + min(down, right)


def sieve(limit: int) -> list[int]:
    """All primes up to and including ``limit``, in ascending order."""
    if limit < 2:
        return []
    is_prime = bytearray([1]) * (limit + 1)
    is_prime[0] = is_prime[1] = 0
    for p in range(2, isqrt(limit) + 1):
        if is_prime[p]:
            is_prime[p * p :: p] = bytes(len(range(p * p, limit + 1, p)))
    return [number for number, flag in enumerate(is_prime) if flag]