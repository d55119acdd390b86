"""Smoke tests for the matplotlib helpers, drawn off-screen."""

import math

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402
from matplotlib.animation import FuncAnimation  # noqa: E402

from complex_type import Complex  # noqa: E402
from complex_type.render import animate_complex, plot_roots  # noqa: E402


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


class TestAnimateComplex:

    def test_returns_animation(self):
        seq = [Complex.polar(1, k, radians=False) for k in range(0, 360, 30)]
        anim = animate_complex(seq, interval=1, show=False)
        assert isinstance(anim, FuncAnimation)

    def test_axes_fit_the_samples(self):
        animate_complex([Complex(0, 0), Complex(4, -2)], show=False)
        ax = plt.gcf().axes[0]
        low, high = ax.get_xlim()
        assert low < -4 and high > 4
        low, high = ax.get_ylim()
        assert low < -4 and high > 4

    def test_accepts_builtin_complex_and_pairs(self):
        anim = animate_complex([1 + 1j, (0.5, -0.5), Complex.I], show=False)
        assert isinstance(anim, FuncAnimation)

    def test_empty_sequence(self):
        with pytest.raises(ValueError):
            animate_complex([], show=False)

    def test_non_finite_samples(self):
        with pytest.raises(ValueError):
            animate_complex([Complex.ONE, Complex.INFINITY], show=False)
        with pytest.raises(ValueError):
            animate_complex([Complex(math.nan, 0)], show=False)


class TestPlotRoots:

    def test_draws_each_root_and_the_circle(self):
        ax = plot_roots(Complex(0, 8), 3)
        offsets = ax.collections[0].get_offsets()
        assert len(offsets) == 3
        assert len(ax.patches) == 1
        assert ax.patches[0].get_radius() == pytest.approx(2.0)
        assert len(ax.texts) == 3

    def test_draws_into_given_axes(self):
        _, ax = plt.subplots()
        assert plot_roots(Complex(1, 0), 5, ax=ax) is ax

    def test_rejects_non_finite(self):
        with pytest.raises(ValueError):
            plot_roots(Complex.INFINITY, 2)

    def test_non_finite_rejected_before_computing_roots(self, monkeypatch):
        def fail(self, n):
            raise AssertionError("roots computed for a non-finite value")

        monkeypatch.setattr(Complex, "nth_root", fail)
        with pytest.raises(ValueError, match="Cannot draw"):
            plot_roots(Complex(math.nan, 1), 3)
        with pytest.raises(ValueError, match="Cannot draw"):
            plot_roots(Complex.INFINITY, 0)

    def test_rejects_bad_n(self):
        with pytest.raises(ValueError):
            plot_roots(Complex(1, 1), 0)
