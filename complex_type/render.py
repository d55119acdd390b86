"""
Draw complex numbers on the complex plane with matplotlib.

    animate_complex(seq)   -> moving point with a trail, one frame per sample
    plot_roots(z, n)       -> the n-th roots of z on their circle
"""
import logging
import math
from typing import Iterable, List, Optional, Tuple, Union

import matplotlib.animation as animation
import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.patches import Circle

from .complex import Complex

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_MS = 200    # delay between animation frames
MARGIN = 0.1                 # padding around the data, as a fraction of its span

Sample = Union[Complex, complex, Tuple[float, float]]


def _as_complex(z: Sample) -> Complex:
    if isinstance(z, Complex):
        return z
    if isinstance(z, complex):
        return Complex(z.real, z.imag)
    x, y = z
    return Complex(x, y)


def _square_axes(ax: Axes, span: float, title: str) -> None:
    margin = MARGIN * span
    ax.set_aspect("equal")
    ax.set_xlim(-span - margin, span + margin)
    ax.set_ylim(-span - margin, span + margin)
    ax.set_xlabel("Re")
    ax.set_ylabel("Im")
    ax.set_title(title)
    ax.grid(True, linestyle="--", alpha=0.3)


def animate_complex(
    sequence: Iterable[Sample],
    *,
    interval: int = DEFAULT_INTERVAL_MS,
    show: bool = True,
) -> animation.FuncAnimation:
    """
    Play ``sequence`` back as a point moving over the complex plane.

    Frame ``k`` shows sample ``k`` as a marker and samples ``0..k`` as a line
    behind it. Samples may be ``Complex``, builtin ``complex`` or ``(re, im)``
    pairs; all of them must be finite. ``interval`` is the frame delay in
    milliseconds. The animation is returned so the caller can ``save()`` it;
    pass ``show=False`` to skip ``plt.show()``.
    """
    samples: List[Complex] = [_as_complex(z) for z in sequence]
    if not samples:
        raise ValueError("Nothing to animate: the sequence is empty")
    if not all(z.is_finite for z in samples):
        raise ValueError("Only finite complex numbers can be drawn")

    xs = [z.real for z in samples]
    ys = [z.imaginary for z in samples]
    span = max(max(map(abs, xs)), max(map(abs, ys)), 1.0)

    fig, ax = plt.subplots()
    _square_axes(ax, span, "Complex number animation")
    marker, = ax.plot([], [], "ro", markersize=6)
    path, = ax.plot([], [], "b-", alpha=0.5, linewidth=1)

    def clear():
        marker.set_data([], [])
        path.set_data([], [])
        return marker, path

    def draw(k: int):
        marker.set_data(xs[k:k + 1], ys[k:k + 1])
        path.set_data(xs[:k + 1], ys[:k + 1])
        ax.set_title(f"k = {k}  |  z = {xs[k]:+.3f} {ys[k]:+.3f}i")
        return marker, path

    logger.info("animating %d samples at %d ms per frame", len(samples), interval)
    anim = animation.FuncAnimation(
        fig,
        draw,
        frames=len(samples),
        init_func=clear,
        interval=interval,
        blit=True,
        repeat=False,
    )
    if show:
        plt.show()
    return anim


def plot_roots(z: Sample, n: int, ax: Optional[Axes] = None) -> Axes:
    """
    Scatter the ``n`` n-th roots of ``z`` and draw the circle they sit on.

    Roots are labelled with their index ``k``. Draws into ``ax`` when given,
    otherwise into a new figure. Returns the axes.
    """
    z = _as_complex(z)
    if not z.is_finite:
        raise ValueError(f"Cannot draw the roots of {z!r}")
    roots = z.nth_root(n)

    radius = math.pow(z.abs(), 1.0 / n)
    if ax is None:
        _, ax = plt.subplots()
    _square_axes(ax, max(radius, 1.0), f"{n}-th roots of {z.real:+.3f} {z.imaginary:+.3f}i")

    ax.add_patch(Circle((0.0, 0.0), radius, fill=False, linestyle=":", color="gray"))
    ax.scatter([r.real for r in roots], [r.imaginary for r in roots], color="r", zorder=3)
    for k, root in enumerate(roots):
        ax.annotate(str(k), (root.real, root.imaginary),
                    textcoords="offset points", xytext=(4, 4))

    logger.info("plotted %d roots of %r", len(roots), z)
    return ax


if __name__ == "__main__":
    step = Complex.polar(1, 1, radians=False)    # one degree per frame
    frames = [Complex.ONE]
    for _ in range(1, 360):
        frames.append(frames[-1] * step)
    animate_complex(frames, interval=1)
