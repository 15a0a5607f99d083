"""Deterministic pseudo-random numbers seeded from signal names."""

_INT32_MASK = 0xFFFFFFFF

# Linear congruential generator constants
_MULTIPLIER = 9301
_INCREMENT = 49297
_MODULUS = 233280


def hash_name(name: str) -> int:
    """
    Fold a name into a non-negative seed.

    Uses the 31-multiplier string hash over UTF-16 code units with 32-bit
    signed wraparound, then takes the absolute value.

    Args:
        name: Signal name

    Returns:
        Seed value
    """
    value = 0
    encoded = name.encode("utf-16-le")
    for i in range(0, len(encoded), 2):
        code_unit = encoded[i] | (encoded[i + 1] << 8)
        value = (value * 31 + code_unit) & _INT32_MASK
    if value & 0x80000000:
        value -= 1 << 32
    return abs(value)


class SeededRandom:
    """Reproducible generator; same seed gives the same stream."""

    def __init__(self, seed: int):
        self._seed = seed

    @classmethod
    def for_name(cls, name: str) -> "SeededRandom":
        """Create a generator seeded from a signal name."""
        return cls(hash_name(name))

    @property
    def seed(self) -> int:
        return self._seed

    def next(self) -> float:
        """Advance and return a value in [0, 1)."""
        self._seed = (self._seed * _MULTIPLIER + _INCREMENT) % _MODULUS
        return self._seed / _MODULUS

    def range(self, low: float, high: float) -> float:
        """Return a value in [low, high)."""
        return low + self.next() * (high - low)
