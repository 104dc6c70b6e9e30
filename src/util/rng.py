"""
xoroshiro128+ pseudo-random stream.

Two 64-bit words of state. `short_jump` / `long_jump` advance the stream by
2^64 / 2^96 steps so a single seed can be split into many non-overlapping
streams (one per tile) without reseeding.
"""

import time

MASK64 = 0xFFFFFFFFFFFFFFFF

SHORT_JUMP = (0xdf900294d8f554a5, 0x170865df4b3201fc)
LONG_JUMP = (0xd2a98b26625eee7b, 0xdddf9b1090aa7ac1)

# 2^-53, maps the top 53 bits of a draw onto [0, 1)
_F64_SCALE = 1.0 / (1 << 53)


def _rotl(x: int, k: int) -> int:
    return ((x << k) | (x >> (64 - k))) & MASK64


def _splitmix64(x: int) -> int:
    x = (x + 0x9E3779B97F4A7C15) & MASK64
    z = x
    z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & MASK64
    z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & MASK64
    return z ^ (z >> 31)


class rng:
    __slots__ = ('s0', 's1')

    def __init__(self, s0: int, s1: int):
        s0 &= MASK64
        s1 &= MASK64
        if s0 == 0 and s1 == 0:
            raise ValueError("xoroshiro128+ state must not be all zero")
        self.s0 = s0
        self.s1 = s1

    @classmethod
    def from_seed(cls, seed) -> 'rng':
        """
        Build a stream from an integer seed or an explicit (s0, s1) pair.
        Integer seeds are expanded with splitmix64.
        """
        if isinstance(seed, (tuple, list)):
            s0, s1 = seed
            return cls(s0, s1)
        s0 = _splitmix64(seed & MASK64)
        s1 = _splitmix64(s0)
        return cls(s0, s1)

    @classmethod
    def from_entropy(cls) -> 'rng':
        return cls.from_seed(time.time_ns())

    def copy(self) -> 'rng':
        return rng(self.s0, self.s1)

    def state(self) -> tuple:
        return (self.s0, self.s1)

    def next_u64(self) -> int:
        s0 = self.s0
        s1 = self.s1
        result = (s0 + s1) & MASK64

        s1 ^= s0
        self.s0 = _rotl(s0, 24) ^ s1 ^ ((s1 << 16) & MASK64)
        self.s1 = _rotl(s1, 37)
        return result

    def next_f64(self) -> float:
        return (self.next_u64() >> 11) * _F64_SCALE

    def next_f64_range(self, lo: float, hi: float) -> float:
        return lo + (hi - lo) * self.next_f64()

    def _jump(self, polynomial) -> 'rng':
        s0 = 0
        s1 = 0
        for word in polynomial:
            for b in range(64):
                if word & (1 << b):
                    s0 ^= self.s0
                    s1 ^= self.s1
                self.next_u64()
        self.s0 = s0
        self.s1 = s1
        return self

    def short_jump(self) -> 'rng':
        """Advance by 2^64 draws."""
        return self._jump(SHORT_JUMP)

    def long_jump(self) -> 'rng':
        """Advance by 2^96 draws."""
        return self._jump(LONG_JUMP)

    def __repr__(self) -> str:
        return f"rng(0x{self.s0:016x}, 0x{self.s1:016x})"
