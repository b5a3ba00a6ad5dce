"""Curve sampling and analysis.

Evaluates curves on evenly spaced inputs with numpy, for graphing a curve
or checking how it behaves (range, overshoots, where it lands).
"""

import math

import numpy as np
from numpy.typing import NDArray

from animator.animation.curves import CurveFunc


def sample_curve(
    curve: CurveFunc,
    start: float = 0.0,
    end: float = 1.0,
    count: int = 101,
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """
    Evaluate a curve on evenly spaced inputs.

    Args:
        curve: Curve to sample
        start: First input
        end: Last input
        count: Number of samples, endpoints included

    Returns:
        (xs, ys) arrays of length `count`
    """
    xs = np.linspace(start, end, count)
    ys = np.fromiter((curve(float(x)) for x in xs), dtype=np.float64, count=count)
    return xs, ys


def curve_bounds(curve: CurveFunc, count: int = 201) -> tuple[float, float]:
    """
    Output range of a curve over [0, 1].

    The range always contains 0 and 1 so that plain 0-1 curves share a
    common graph area and overshooting curves extend it.
    """
    _, ys = sample_curve(curve, count=count)
    finite = ys[np.isfinite(ys)]
    if finite.size == 0:
        return 0.0, 1.0
    return min(0.0, float(finite.min())), max(1.0, float(finite.max()))


def _deviations(curve: CurveFunc, target: float, count: int) -> NDArray[np.float64]:
    # Interior samples only: (0, 1) open interval
    _, ys = sample_curve(curve, count=count)
    deviation = ys[1:-1] - target
    # Treat values numerically equal to the target as no side
    deviation[np.isclose(deviation, 0.0, atol=1e-12)] = 0.0
    return deviation


def count_crossings(curve: CurveFunc, target: float = 1.0, count: int = 2001) -> int:
    """Number of times a curve crosses `target` for inputs strictly between 0 and 1."""
    deviation = _deviations(curve, target, count)
    signs = np.sign(deviation)
    signs = signs[signs != 0]
    if signs.size < 2:
        return 0
    return int(np.count_nonzero(np.diff(signs)))


def peak_deviations(curve: CurveFunc, target: float = 1.0, count: int = 2001) -> list[float]:
    """
    Largest distance from `target` in each excursion between crossings.

    The first entry is the approach from the start; every later entry is one
    overshoot past the target.
    """
    deviation = _deviations(curve, target, count)
    signs = np.sign(deviation)

    peaks: list[float] = []
    current_sign = 0.0
    for value, sign in zip(deviation, signs):
        if sign == 0:
            continue
        if sign != current_sign:
            peaks.append(abs(float(value)))
            current_sign = sign
        else:
            peaks[-1] = max(peaks[-1], abs(float(value)))
    return peaks


def ends_at_one(curve: CurveFunc) -> bool:
    """Whether the curve lands on 1, so the animated value reaches its target."""
    return math.isclose(curve(1.0), 1.0)
