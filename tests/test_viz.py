"""test_viz: plotting helpers return figures with the expected data."""

import math

import matplotlib.pyplot as plt
import pytest

from charpass.charsets import CharClass
from charpass.recipe import CharRecipe
from charpass.viz import plot_char_frequencies, plot_entropy_curve, plot_char_residuals


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


class TestPlots:
    def test_entropy_curve_skips_impossible_lengths(self):
        r = CharRecipe(length=1, require=CharClass.UPPERS | CharClass.LOWERS | CharClass.DIGITS)
        fig, ax = plot_entropy_curve(r, [1, 2, 3, 4], title="three classes")
        xs, ys = ax.lines[0].get_data()
        assert list(xs) == [3, 4]
        assert ys[0] == pytest.approx(math.log2(40560))
        assert ax.get_title() == "three classes"

    def test_entropy_curve_rejects_bad_lengths(self):
        with pytest.raises(ValueError):
            plot_entropy_curve(CharRecipe(length=1, allow=CharClass.DIGITS), [0, 4])

    def test_char_frequencies(self):
        fig, ax = plot_char_frequencies({"b": 3, "a": 5})
        assert [p.get_height() for p in ax.patches] == [5, 3]
        assert [t.get_text() for t in ax.get_xticklabels()] == ["a", "b"]

    def test_residuals_labeled_by_alphabet(self):
        fig, ax = plot_char_residuals({"x": 12, "y": 8}, "xy")
        assert [p.get_height() for p in ax.patches] == [2.0, -2.0]
        assert [t.get_text() for t in ax.get_xticklabels()] == ["x", "y"]
        assert "p=" in ax.get_title()

    def test_residuals_include_unseen_characters(self):
        fig, ax = plot_char_residuals({"a": 6}, ["a", "b", "c"], title="digits")
        assert [p.get_height() for p in ax.patches] == [4.0, -2.0, -2.0]
        assert ax.get_title() == "digits"

    def test_residuals_reject_stray_characters(self):
        with pytest.raises(ValueError, match="outside the alphabet"):
            plot_char_residuals({"z": 3}, "xy")
