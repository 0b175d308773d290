"""
sampler.py


Purpose/Aim:
1) Pulls bytes from a cryptographically secure source (the OS CSPRNG via
   `secrets` by default) into a small cache.
2) Turns those bytes into 32-bit unsigned draws.
3) Provides unbiased integers in [0, n) using rejection sampling.
4) Stays source-agnostic: any callable `nbytes -> bytes` can stand in for
   the OS source (tests use scripted or seeded ones).

Why this shape?

- A small byte pool avoids one system call per character.
- For n a power of two, masking the low bits of a 32-bit draw is exact.
- Otherwise draws at or above the largest multiple of n that fits in 2^32
  are thrown away, so `x % n` has no modulo bias.

Quick start

>>> from charpass.sampler import uniform_int, uniform_ints
>>> uniform_int(10)          # unbiased integer 0..9
>>> uniform_ints(94, 16)     # 16 indices into a 94-character alphabet

If you want your own pool (for example with a different refill size):
>>> from charpass.sampler import RandomPool
>>> pool = RandomPool(refill_bytes=1024)
>>> pool.uniform_ints(10, size=1000)
"""

from __future__ import annotations

import secrets
import threading
from dataclasses import dataclass
from typing import Callable, List, Optional

from .config import settings

UINT32_RANGE = 1 << 32

ByteSource = Callable[[int], bytes]


#Byte cache & unbiased integers
@dataclass
class RandomPool:
    """
    A small, refillable cache of secure random bytes.

    Typical usage

    >>> pool = RandomPool()
    >>> pool.get_uint32()           # fresh 32-bit value
    >>> pool.uniform_int(1000)      # unbiased integer in [0, 1000)
    >>> pool.uniform_ints(10, 5)    # 5 unbiased integers in [0, 10)

    Parameters

    refill_bytes : int, default from settings (256)
        How many bytes to request from the source each time the buffer runs low.
    source : callable, optional
        `nbytes -> bytes`. Defaults to `secrets.token_bytes`. Anything else
        must be cryptographically secure outside of tests.
    """

    refill_bytes: int = settings.RANDOM_REFILL_BYTES
    source: Optional[ByteSource] = None

    def __post_init__(self) -> None:
        if self.refill_bytes < 4:
            raise ValueError("refill_bytes must be at least 4")
        if self.source is None:
            self.source = secrets.token_bytes
        self._buf = bytearray()
        # A shared pool must never hand the same bytes out twice.
        self._lock = threading.Lock()

    #internal
    def _refill(self) -> None:
        """
        Pull another batch from the source into the buffer. Called with the
        lock held whenever the buffer runs low.
        """
        chunk = self.source(self.refill_bytes)
        if len(chunk) != self.refill_bytes:
            raise RuntimeError(
                f"random source returned {len(chunk)} bytes, expected {self.refill_bytes}"
            )
        self._buf.extend(chunk)

    #public API
    def get_bytes(self, n_bytes: int) -> bytes:
        """
        Return `n_bytes` fresh bytes. Refills on demand.
        """
        if n_bytes <= 0:
            raise ValueError("n_bytes must be positive")
        with self._lock:
            while len(self._buf) < n_bytes:
                self._refill()
            out = bytes(self._buf[:n_bytes])
            del self._buf[:n_bytes]
        return out

    def get_uint32(self) -> int:
        """
        Four fresh bytes read as a little-endian unsigned 32-bit integer.
        """
        return int.from_bytes(self.get_bytes(4), "little")

    def uniform_int(self, n: int) -> int:
        """
        Unbiased integer in [0, n) via rejection sampling.

        How it works (short version)
        - n == 1 needs no randomness at all.
        - n a power of two: keep the low bits of one 32-bit draw.
        - Otherwise accept only draws below the largest multiple of n not
          exceeding 2^32 and return value % n; try again on reject (rare).
        """
        if n <= 0:
            raise ValueError(f"n must be positive, not {n}")
        if n > UINT32_RANGE:
            raise ValueError(f"n must be at most 2**32, not {n}")
        if n == 1:
            return 0

        if n & (n - 1) == 0:
            return self.get_uint32() & (n - 1)

        limit = (UINT32_RANGE // n) * n
        while True:
            x = self.get_uint32()
            if x < limit:
                return x % n

    def uniform_ints(self, n: int, size: int) -> List[int]:
        """
        Convenience: `size` many unbiased integers in [0, n).
        """
        if size < 0:
            raise ValueError("size must be non-negative")
        return [self.uniform_int(n) for _ in range(size)]


#Module-level convenience singletons
_default_pool: Optional[RandomPool] = None
_default_lock = threading.Lock()


def default_pool() -> RandomPool:
    """
    Lazily create (and reuse) a default RandomPool backed by the OS CSPRNG.
    """
    global _default_pool
    with _default_lock:
        if _default_pool is None:
            _default_pool = RandomPool()
        return _default_pool


def uniform_int(n: int) -> int:
    """Unbiased integer in [0, n) from the default pool."""
    return default_pool().uniform_int(n)


def uniform_ints(n: int, size: int) -> List[int]:
    """Unbiased integers in [0, n) from the default pool."""
    return default_pool().uniform_ints(n, size)


__all__ = [
    "UINT32_RANGE",
    "ByteSource",
    "RandomPool",
    "default_pool",
    "uniform_int",
    "uniform_ints",
]


#Tiny smoke test when run directly
if __name__ == "__main__":
    import numpy as np

    pool = RandomPool()
    xs = pool.uniform_ints(10, size=5000)
    hist = np.bincount(xs, minlength=10)
    print("mod-10 histogram:", hist.tolist())
