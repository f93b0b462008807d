from __future__ import annotations

DEFAULT_SEED = 42

_MASK = 0xFFFFFFFF


def _imul(a: int, b: int) -> int:
    """Low 32 bits of a*b."""
    return (a * b) & _MASK


class Mulberry32:
    """
    Small deterministic 32-bit generator.

    Every instance built with the same seed yields the same sequence of
    fractions in [0, 1). State advances by one step per draw.
    """

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        self._state = int(seed) & _MASK

    def random(self) -> float:
        self._state = (self._state + 0x6D2B79F5) & _MASK
        t = self._state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & _MASK
        return ((t ^ (t >> 14)) & _MASK) / 4294967296

    def uniform(self, low: float, high: float) -> float:
        return low + self.random() * (high - low)
