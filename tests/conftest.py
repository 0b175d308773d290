"""Shared fixtures: controllable byte sources for the sampler."""

import random

import matplotlib

matplotlib.use("Agg")

import pytest

from charpass.sampler import RandomPool


class ScriptedSource:
    """Hands out a fixed byte script, then zeros; records every request."""

    def __init__(self, script: bytes = b""):
        self.script = bytearray(script)
        self.calls = []

    def __call__(self, n: int) -> bytes:
        self.calls.append(n)
        out = bytes(self.script[:n])
        del self.script[:n]
        return out + bytes(n - len(out))


class CountingSource:
    """Seeded, reproducible bytes that count how often they were asked for."""

    def __init__(self, seed: int = 1234):
        self.rng = random.Random(seed)
        self.calls = 0

    def __call__(self, n: int) -> bytes:
        self.calls += 1
        return self.rng.randbytes(n)


@pytest.fixture
def scripted():
    """Factory for a pool that refills 4 bytes at a time from a script."""

    def make(script: bytes = b""):
        source = ScriptedSource(script)
        return RandomPool(refill_bytes=4, source=source), source

    return make


@pytest.fixture
def counting_source():
    return CountingSource()


@pytest.fixture
def seeded_pool(counting_source):
    return RandomPool(source=counting_source)
