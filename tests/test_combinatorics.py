"""test_combinatorics: exact counts of satisfying passwords."""

import itertools

import pytest

from charpass.charsets import DIGITS_CHARS, LOWERS_CHARS, UPPERS_CHARS
from charpass.combinatorics import count_satisfying, count_unconstrained, union_by_mask


def sets(*strings):
    return [frozenset(s) for s in strings]


def brute_force(allowed, required, length):
    omega = sorted(frozenset(allowed).union(*required)) if required else sorted(allowed)
    return sum(
        1
        for cand in itertools.product(omega, repeat=length)
        if all(any(c in r for c in cand) for r in required)
    )


# (allowed, required, length, expected)
EXPECTATIONS = [
    ((), ("",), 1, 0),
    ((), ("a",), 0, 0),
    ((), ("a",), 1, 1),
    ((), ("a",), 5, 1),
    ((), ("abcde",), 1, 5),
    ((), ("abcde",), 2, 25),
    ((), ("a", "1"), 2, 2),
    ((), ("ab", "123"), 2, 12),
    ((), (UPPERS_CHARS, LOWERS_CHARS, DIGITS_CHARS), 0, 0),
    ((), (UPPERS_CHARS, LOWERS_CHARS, DIGITS_CHARS), 1, 0),
    ((), (UPPERS_CHARS, LOWERS_CHARS, DIGITS_CHARS), 2, 0),
    ((), (UPPERS_CHARS, LOWERS_CHARS, DIGITS_CHARS), 3, 40560),
    ((), (UPPERS_CHARS + LOWERS_CHARS, DIGITS_CHARS), 3, 96720),
    ((), (UPPERS_CHARS,), 3, 17576),
    ((UPPERS_CHARS,), (), 3, 17576),
    ((), (UPPERS_CHARS + LOWERS_CHARS + DIGITS_CHARS,), 3, 238328),
    ((UPPERS_CHARS, LOWERS_CHARS, DIGITS_CHARS), (), 3, 238328),
    ((), ("a", "1"), 1, 0),
    (("1",), ("a",), 1, 1),
    (("A", "1"), ("a",), 2, 5),
    (("A1",), ("a",), 2, 5),
    (("1",), ("a", "A"), 2, 2),
    (("1",), ("a", "A"), 3, 12),
]


class TestCountSatisfying:
    """Inclusion-exclusion counts."""

    @pytest.mark.parametrize("allowed,required,length,expected", EXPECTATIONS)
    def test_worked_values(self, allowed, required, length, expected):
        allowed_set = frozenset("".join(allowed))
        assert count_satisfying(allowed_set, sets(*required), length) == expected

    def test_no_requirements_is_power(self):
        assert count_satisfying(frozenset("abc"), [], 4) == 81

    def test_empty_alphabet(self):
        assert count_satisfying(frozenset(), [], 3) == 0
        assert count_satisfying(frozenset(), [], 0) == 1

    def test_negative_length(self):
        with pytest.raises(ValueError):
            count_satisfying(frozenset("a"), [], -1)

    def test_overlapping_sets_share_characters(self):
        # "b" alone satisfies both sets
        assert count_satisfying(frozenset(), sets("ab", "bc"), 1) == 1
        assert count_satisfying(frozenset(), sets("ab", "bc"), 2) == 7

    @pytest.mark.parametrize(
        "allowed,required,length",
        [
            ("", ("ab", "bc"), 3),
            ("x", ("ab", "bc", "ca"), 3),
            ("xy", ("a", "ab", "abc"), 3),
            ("", ("abc", "cde", "e1"), 4),
            ("z", ("a", "a"), 2),
        ],
    )
    def test_matches_brute_force(self, allowed, required, length):
        req = sets(*required)
        assert count_satisfying(frozenset(allowed), req, length) == brute_force(allowed, req, length)

    def test_huge_counts_stay_exact(self):
        n = count_satisfying(frozenset(), sets(UPPERS_CHARS, LOWERS_CHARS, DIGITS_CHARS), 200)
        assert n < 62 ** 200
        assert n > 62 ** 200 - 3 * 52 ** 200
        assert len(str(n)) > 300


class TestHelpers:
    """Mask unions and the unconstrained size."""

    def test_union_by_mask(self):
        unions = union_by_mask(sets("a", "b", "bc"))
        assert len(unions) == 8
        assert unions[0] == frozenset()
        assert unions[0b101] == frozenset("abc")
        assert unions[0b110] == frozenset("bc")

    def test_count_unconstrained(self):
        assert count_unconstrained(10, 12) == 10 ** 12
        assert count_unconstrained(0, 0) == 1
        with pytest.raises(ValueError):
            count_unconstrained(-1, 2)
