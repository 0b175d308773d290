"""test_sampler: unbiased integers from the secure byte pool."""

import threading

import pytest

from charpass.metrics import chi_square_uniform, outcome_histogram
from charpass.sampler import RandomPool, default_pool, uniform_int, uniform_ints


class TestRandomPool:
    """Byte buffering and 32-bit draws."""

    def test_default_source_is_secure(self):
        import secrets

        assert RandomPool().source is secrets.token_bytes

    def test_get_uint32_is_little_endian(self, scripted):
        pool, _ = scripted(b"\x01\x00\x00\x00\x00\x00\x00\x80")
        assert pool.get_uint32() == 1
        assert pool.get_uint32() == 0x80000000

    def test_refills_in_chunks(self, counting_source):
        pool = RandomPool(refill_bytes=8, source=counting_source)
        pool.get_bytes(3)
        pool.get_bytes(5)
        assert counting_source.calls == 1
        pool.get_bytes(1)
        assert counting_source.calls == 2

    def test_short_source_is_an_error(self):
        pool = RandomPool(refill_bytes=8, source=lambda n: b"\x00")
        with pytest.raises(RuntimeError):
            pool.get_uint32()

    def test_refill_too_small(self):
        with pytest.raises(ValueError):
            RandomPool(refill_bytes=2)

    def test_default_pool_is_shared(self):
        assert default_pool() is default_pool()

    def test_threads_never_share_bytes(self):
        counter = iter(range(10**6))

        def source(n):
            return b"".join(next(counter).to_bytes(4, "little") for _ in range(n // 4))

        pool = RandomPool(refill_bytes=64, source=source)
        seen = []
        lock = threading.Lock()

        def worker():
            vals = [pool.get_uint32() for _ in range(500)]
            with lock:
                seen.extend(vals)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(seen) == 2000
        assert len(set(seen)) == 2000


class TestUniformInt:
    """Rejection sampling into [0, n)."""

    @pytest.mark.parametrize("n", [0, -3])
    def test_non_positive_n_fails_loudly(self, n):
        with pytest.raises(ValueError):
            RandomPool().uniform_int(n)

    def test_n_above_32_bits(self):
        with pytest.raises(ValueError):
            RandomPool().uniform_int((1 << 32) + 1)

    def test_one_uses_no_randomness(self, scripted):
        pool, source = scripted()
        assert all(pool.uniform_int(1) == 0 for _ in range(100))
        assert source.calls == []

    def test_power_of_two_masks(self, scripted):
        pool, source = scripted(b"\xff\xff\xff\xff")
        assert pool.uniform_int(8) == 7
        assert len(source.calls) == 1

    def test_full_range(self, scripted):
        pool, _ = scripted(b"\xff\xff\xff\xff")
        assert pool.uniform_int(1 << 32) == 0xFFFFFFFF

    def test_rejects_draws_above_last_multiple(self, scripted):
        # 2**32 - 1 is the last multiple of 3 below 2**32 and must be rejected
        pool, source = scripted(b"\xff\xff\xff\xff" + b"\x05\x00\x00\x00")
        assert pool.uniform_int(3) == 2
        assert len(source.calls) == 2

    def test_accepts_below_limit(self, scripted):
        pool, _ = scripted(b"\xfe\xff\xff\xff")
        assert pool.uniform_int(3) == 0xFFFFFFFE % 3

    def test_values_in_range(self):
        xs = uniform_ints(7, 1000)
        assert len(xs) == 1000
        assert all(0 <= x < 7 for x in xs)
        assert 0 <= uniform_int(7) < 7

    def test_negative_size(self):
        with pytest.raises(ValueError):
            RandomPool().uniform_ints(5, -1)

    @pytest.mark.parametrize("n", [3, 10, 94])
    def test_no_modulo_bias(self, n):
        """20k draws must look uniform at the 1e-4 level."""
        draws = RandomPool().uniform_ints(n, 20000)
        res = chi_square_uniform(outcome_histogram(draws, n), support_size=n)
        assert res.df == n - 1
        assert res.pvalue > 1e-4
