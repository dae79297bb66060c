"""Small deterministic random number generator for dice rolls."""

from __future__ import annotations

import time


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value


def _stable_hash(text: str) -> int:
    """FNV-1a over the UTF-8 bytes; stable across runs."""
    h = 0xCBF29CE484222325
    for byte in text.encode("utf-8"):
        h ^= byte
        h = (h * 0x100000001B3) & 0xFFFFFFFFFFFFFFFF
    return h


class RandomNumberGenerator:
    """Linear congruential generator seeded from an int, a string or the clock."""

    def __init__(self, seed: int | str | None = None) -> None:
        if seed is None:
            value = int(time.time())
        elif isinstance(seed, str):
            value = _stable_hash(seed)
        else:
            value = int(seed)
        self.initial_seed = _to_int32(value)
        self._state = self.initial_seed & 0xFFFFFFFF

    def _fastrand(self) -> int:
        self._state = (214013 * self._state + 2531011) & 0xFFFFFFFF
        return (self._state >> 16) & 0x7FFF

    def roll_dice(self, n: int, d: int) -> int:
        """Roll n dice with d sides each and return the total."""
        if d <= 0:
            raise ValueError(f"dice must have at least one side, got {d}")
        return sum(self._fastrand() % d + 1 for _ in range(n))