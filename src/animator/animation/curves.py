"""Animation curves for frame-driven animations.

A curve maps normalized time x (0.0 at the start of an animation, 1.0 at the
end) to a normalized value. Most curves run from (0, 0) to (1, 1), but some,
such as overshoot curves, leave the 0-1 range on purpose, and a few (shake)
do not end at 1 at all.

Curves are plain callables, so any function or lambda can be used as a curve:

    fast_start = lambda x: x * x * x
"""

from enum import Enum, auto
from typing import Any, Callable
import math


# Type alias for animation curves
CurveFunc = Callable[[float], float]

# Default half-life for the exponential family, in normalized time
DEFAULT_HALFLIFE = 0.15


# Standard easing curves
def linear(x: float) -> float:
    """Linear progress (no easing)."""
    return x


def ease_in_out(x: float) -> float:
    """Accelerate at the beginning, decelerate at the end."""
    return 0.5 * (1 - math.cos(x * math.pi))


def ease_in(x: float) -> float:
    """Accelerate at the beginning."""
    return 1 - math.cos(x * math.pi / 2)


def ease_out(x: float) -> float:
    """Decelerate at the end."""
    return math.sin(x * math.pi / 2)


# Combinators
def opposite(curve: CurveFunc) -> CurveFunc:
    """Return the curve that mirrors `curve` in the opposite direction.

    Given an ease in curve, this returns the matching ease out curve. Unlike
    an inverse function, the result keeps the input's character mirrored:
    if the input starts slowly, the opposite ends slowly. A curve and its
    opposite can be composed without a discontinuity at the midpoint.
    """
    def _opposite(x: float) -> float:
        return 1 - curve(1 - x)

    return _opposite


def compose(first: CurveFunc, second: CurveFunc) -> CurveFunc:
    """Apply `first` over the first half of the animation and `second` over the second.

    `first` is scaled to run from (0, 0) to (0.5, 0.5) and `second` from
    (0.5, 0.5) to (1, 1).
    """
    def _composed(x: float) -> float:
        if x <= 0.5:
            return 0.5 * first(2 * x)
        return 0.5 + 0.5 * second(2 * (x - 0.5))

    return _composed


def revert(curve: CurveFunc) -> CurveFunc:
    """Play `curve` backwards in value, from its final value down to 0.

    Uses curve(1) as the starting value instead of assuming 1, so curves
    that do not end at 1 (shake) revert cleanly.
    """
    final = curve(1.0)

    def _reverted(x: float) -> float:
        return final - curve(x)

    return _reverted


# Parameterized acceleration + deceleration
def accelerate(strength: float) -> CurveFunc:
    """Ease in using x^strength. Sinusoidal easing is slightly weaker than x^2."""
    if strength == 2:
        return lambda x: x * x
    return lambda x: pow(x, strength)


def decelerate(strength: float) -> CurveFunc:
    """Ease out with the given strength."""
    return opposite(accelerate(strength))


def ease(strength: float) -> CurveFunc:
    """Ease in and out with the given strength."""
    accel = accelerate(strength)
    return compose(accel, opposite(accel))


# Exponential family
def decay(halflife: float = DEFAULT_HALFLIFE) -> CurveFunc:
    """Exponential falloff from 1 towards 0, halving every `halflife`."""
    def _decay(x: float) -> float:
        return pow(0.5, x / halflife)

    return _decay


def exponential_decelerate(halflife: float = DEFAULT_HALFLIFE) -> CurveFunc:
    """Exponential ease out; the remaining distance halves every `halflife`."""
    def _exponential_decelerate(x: float) -> float:
        # Land exactly on 1 instead of approaching it asymptotically
        if x >= 1:
            return 1.0
        return 1.0 - pow(0.5, x / halflife)

    return _exponential_decelerate


def overshoot(count: int = 1, halflife: float = DEFAULT_HALFLIFE) -> CurveFunc:
    """Overshoot the target `count` times, like a damped spring.

    A -cos wave oscillating around 0 is multiplied by exponential decay and
    shifted up by 1, so the curve starts at (0, 0) and swings around y = 1
    with shrinking amplitude. Zero overshoots is a quarter wave, one overshoot
    three quarters, n overshoots (2n + 1) / 4 waves.

    Args:
        count: Number of times to swing back and forth over the final value
        halflife: How quickly the oscillation dies down

    Returns:
        The overshoot curve
    """
    wave_count = 0.25 + 0.5 * count

    def _overshoot(x: float) -> float:
        if x >= 1:
            return 1.0
        wave = -math.cos(2.0 * math.pi * x * wave_count)
        decay_value = pow(0.5, x / halflife)
        return 1.0 + decay_value * wave

    return _overshoot


def shake(shakes: int = 5) -> CurveFunc:
    """Shake back and forth around 0, easing into and out of the motion.

    Starts and ends at 0, so this is meant for offsets rather than for
    moving between two values.
    """
    def _shake(x: float) -> float:
        sine = math.sin(x * shakes * 2 * math.pi)
        if x <= 0.5:
            damping = ease_in_out(2 * x)
        else:
            damping = 1 - ease_in_out(2 * (x - 0.5))
        return sine * damping

    return _shake


class Curve(Enum):
    """Named curves of the built-in catalog."""

    EASE = auto()
    EASE_IN = auto()
    EASE_OUT = auto()
    LINEAR = auto()

    STRONG_EASE = auto()
    STRONG_EASE_OUT = auto()

    EXPONENTIAL_EASE_OUT = auto()

    OVERSHOOT = auto()
    OVERSHOOT3 = auto()

    SHAKE = auto()


# Mapping from enum to function
_CURVE_FUNCTIONS: dict[Curve, CurveFunc] = {
    Curve.EASE: ease_in_out,
    Curve.EASE_IN: ease_in,
    Curve.EASE_OUT: ease_out,
    Curve.LINEAR: linear,

    Curve.STRONG_EASE: ease(3),
    Curve.STRONG_EASE_OUT: decelerate(3),

    Curve.EXPONENTIAL_EASE_OUT: exponential_decelerate(),

    Curve.OVERSHOOT: overshoot(),
    Curve.OVERSHOOT3: overshoot(count=3),

    Curve.SHAKE: shake(5),
}

_CURVE_TITLES: dict[Curve, str] = {
    Curve.EASE: "Ease",
    Curve.EASE_IN: "Ease In",
    Curve.EASE_OUT: "Ease Out",
    Curve.LINEAR: "Linear",
    Curve.STRONG_EASE: "Strong Ease",
    Curve.STRONG_EASE_OUT: "Strong Ease Out",
    Curve.EXPONENTIAL_EASE_OUT: "Exponential Ease Out",
    Curve.OVERSHOOT: "Overshoot",
    Curve.OVERSHOOT3: "Overshoot x3",
    Curve.SHAKE: "Shake",
}

# String name mapping for convenience
_CURVE_BY_NAME: dict[str, Curve] = {curve.name.lower(): curve for curve in Curve}
_CURVE_BY_NAME["ease_in_out"] = Curve.EASE

# Parameterized generators usable by name
_GENERATORS: dict[str, Callable[..., CurveFunc]] = {
    "accelerate": accelerate,
    "decelerate": decelerate,
    "ease": ease,
    "decay": decay,
    "exponential_decelerate": exponential_decelerate,
    "overshoot": overshoot,
    "shake": shake,
}


def get_curve(curve: Curve | str) -> CurveFunc:
    """Get a catalog curve by enum or name.

    Args:
        curve: Curve enum value or string name (e.g., "overshoot3")

    Returns:
        The curve function

    Raises:
        ValueError: If the curve name is not recognized
    """
    if isinstance(curve, str):
        curve_enum = _CURVE_BY_NAME.get(curve.lower())
        if curve_enum is None:
            raise ValueError(f"Unknown curve: {curve}")
        curve = curve_enum

    func = _CURVE_FUNCTIONS.get(curve)
    if func is None:
        raise ValueError(f"No function registered for: {curve}")

    return func


def curve_title(curve: Curve | str) -> str:
    """Get the display title of a catalog curve."""
    if isinstance(curve, str):
        curve_enum = _CURVE_BY_NAME.get(curve.lower())
        if curve_enum is None:
            raise ValueError(f"Unknown curve: {curve}")
        curve = curve_enum
    return _CURVE_TITLES[curve]


def available_curves() -> list[str]:
    """Names of all catalog curves, in catalog order."""
    return [curve.name.lower() for curve in Curve]


def build_curve(kind: str, **params: Any) -> CurveFunc:
    """Create a curve from a generator name and its parameters.

    Catalog names are accepted too, but only without parameters.

    Raises:
        ValueError: If `kind` is neither a generator nor a catalog name
    """
    key = kind.lower()
    if not params and key in _CURVE_BY_NAME:
        return get_curve(key)

    generator = _GENERATORS.get(key)
    if generator is not None:
        try:
            return generator(**params)
        except TypeError as e:
            raise ValueError(f"Bad parameters for curve {kind}: {e}") from e

    if key in _CURVE_BY_NAME:
        raise ValueError(f"Curve {kind} takes no parameters")
    raise ValueError(f"Unknown curve: {kind}")
