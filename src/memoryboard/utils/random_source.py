"""Deterministic randomness for board shuffles.

The generator reproduces an xorshift sequence that was recorded with 32-bit
signed word arithmetic, so existing sequences replay exactly:

    rng = XorShift128()
    rng.next()  # 16777346
    random_range_integer(rng, 0, 6)

Each board owns (or is handed) its own instance, so two boards never share
state and tests can reseed freely.
"""
from __future__ import annotations

from typing import MutableSequence, Tuple

from memoryboard.constants import DEFAULT_SEED


def _int32(value: int) -> int:
    value &= 0xFFFFFFFF
    if value & 0x80000000:
        return value - 0x100000000
    return value


class XorShift128:
    def __init__(self, seed: Tuple[int, int] = DEFAULT_SEED):
        self._state = [0, 0]
        self.reseed(seed)

    @property
    def state(self) -> Tuple[int, int]:
        return self._state[0], self._state[1]

    def reseed(self, seed: Tuple[int, int]) -> None:
        first, second = seed
        self._state = [_int32(first), _int32(second)]

    def next(self) -> int:
        s0 = self._state[1]
        self._state[0] = s0
        s1 = s0
        s1 = _int32(s1 ^ (s1 << 23))
        s1 ^= s1 >> 17
        s1 ^= s0
        s1 ^= s0 >> 26
        self._state[1] = s1
        # Sum stays unwrapped.
        return self._state[0] + self._state[1]


def random_range_integer(rng: XorShift128, minimum: int, maximum: int) -> int:
    """Return an integer in ``[minimum, maximum)``.

    Uses ``minimum + next() % span`` exactly, modulo bias included.
    """
    span = maximum - minimum
    if span <= 0:
        raise ValueError(f"Empty range [{minimum}, {maximum})")
    return minimum + rng.next() % span


def swap_elements(sequence: MutableSequence, index_a: int, index_b: int) -> None:
    """Swap two elements in place.

    Indices are not checked here; out-of-range indices raise ``IndexError``
    from the sequence itself and negative indices count from the end.
    """
    sequence[index_a], sequence[index_b] = sequence[index_b], sequence[index_a]
