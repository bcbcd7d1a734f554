"""MT19937 Mersenne Twister pseudo-random number generator."""

from __future__ import annotations

import threading
import time
from typing import Iterable, Optional

_N = 624
_M = 397
_MATRIX_A = 0x9908B0DF
_UPPER_MASK = 0x80000000
_LOWER_MASK = 0x7FFFFFFF
_MASK32 = 0xFFFFFFFF


class MersenneTwister:
    """A 32-bit Mersenne Twister generator.

    Seeding with an integer uses only its low 32 bits; without a seed the
    current time in seconds is used.
    """

    __slots__ = ("_mt", "_index")

    def __init__(self, seed: Optional[int] = None) -> None:
        if seed is None:
            seed = int(time.time())
        self._mt = [0] * _N
        self._index = _N
        self._seed(seed)

    def _seed(self, seed: int) -> None:
        mt = self._mt
        mt[0] = seed & _MASK32
        for i in range(1, _N):
            prev = mt[i - 1]
            mt[i] = (1812433253 * (prev ^ (prev >> 30)) + i) & _MASK32
        self._index = _N

    @classmethod
    def from_array(cls, key: Iterable[int]) -> "MersenneTwister":
        """Create a generator seeded from a sequence of 32-bit words.

        Raises ValueError if ``key`` is empty.
        """
        words = [k & _MASK32 for k in key]
        if not words:
            raise ValueError("seed key must not be empty")

        gen = cls(19650218)
        mt = gen._mt
        i, j = 1, 0
        for _ in range(max(_N, len(words))):
            prev = mt[i - 1]
            mt[i] = ((mt[i] ^ ((prev ^ (prev >> 30)) * 1664525)) + words[j] + j) & _MASK32
            i += 1
            j += 1
            if i >= _N:
                mt[0] = mt[_N - 1]
                i = 1
            if j >= len(words):
                j = 0
        for _ in range(_N - 1):
            prev = mt[i - 1]
            mt[i] = ((mt[i] ^ ((prev ^ (prev >> 30)) * 1566083941)) - i) & _MASK32
            i += 1
            if i >= _N:
                mt[0] = mt[_N - 1]
                i = 1
        mt[0] = 0x80000000
        gen._index = _N
        return gen

    def _twist(self) -> None:
        mt = self._mt
        for kk in range(_N):
            y = (mt[kk] & _UPPER_MASK) | (mt[(kk + 1) % _N] & _LOWER_MASK)
            mt[kk] = mt[(kk + _M) % _N] ^ (y >> 1) ^ (_MATRIX_A if y & 1 else 0)
        self._index = 0

    def next_int32(self) -> int:
        """A random integer in [0, 0xffffffff]."""
        if self._index >= _N:
            self._twist()
        y = self._mt[self._index]
        self._index += 1

        y ^= y >> 11
        y ^= (y << 7) & 0x9D2C5680
        y ^= (y << 15) & 0xEFC60000
        y ^= y >> 18
        return y & _MASK32

    def next_int31(self) -> int:
        """A random integer in [0, 0x7fffffff]."""
        return self.next_int32() >> 1

    def next_real1(self) -> float:
        """A random float in the closed interval [0, 1]."""
        return self.next_int32() * (1.0 / 4294967295.0)

    def next_real2(self) -> float:
        """A random float in the half-open interval [0, 1)."""
        return self.next_int32() * (1.0 / 4294967296.0)

    def next_real3(self) -> float:
        """A random float in the open interval (0, 1)."""
        return (self.next_int32() + 0.5) * (1.0 / 4294967296.0)

    def next_res53(self) -> float:
        """A random float in [0, 1) with 53-bit resolution."""
        a = self.next_int32() >> 5
        b = self.next_int32() >> 6
        return (a * 67108864.0 + b) * (1.0 / 9007199254740992.0)


_shared: Optional[MersenneTwister] = None
_shared_lock = threading.Lock()


def _shared_generator() -> MersenneTwister:
    global _shared
    with _shared_lock:
        if _shared is None:
            _shared = MersenneTwister(int(time.time()))
        return _shared


def next_long() -> int:
    """A random 32-bit integer from the shared, time-seeded generator."""
    gen = _shared_generator()
    with _shared_lock:
        return gen.next_int32()


def next_double() -> float:
    """A random float in [0, 1] from the shared, time-seeded generator."""
    gen = _shared_generator()
    with _shared_lock:
        return gen.next_real1()