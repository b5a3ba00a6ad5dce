"""Animation module for animator."""

from animator.animation.curves import (
    Curve,
    CurveFunc,
    linear,
    ease_in_out,
    ease_in,
    ease_out,
    accelerate,
    decelerate,
    ease,
    decay,
    exponential_decelerate,
    overshoot,
    shake,
    opposite,
    compose,
    revert,
    get_curve,
    curve_title,
    available_curves,
    build_curve,
)
from animator.animation.driver import (
    AnimationDriver,
    AnimationRun,
    RunState,
    animate,
)
from animator.animation.interpolation import (
    Interpolatable,
    Point,
    Size,
    interpolate,
    interpolate_color,
)
from animator.animation.presets import CurvePreset, default_presets, load_presets
from animator.animation.sampling import (
    sample_curve,
    curve_bounds,
    count_crossings,
    peak_deviations,
    ends_at_one,
)

__all__ = [
    # Curves
    "Curve",
    "CurveFunc",
    "linear",
    "ease_in_out",
    "ease_in",
    "ease_out",
    "accelerate",
    "decelerate",
    "ease",
    "decay",
    "exponential_decelerate",
    "overshoot",
    "shake",
    "opposite",
    "compose",
    "revert",
    "get_curve",
    "curve_title",
    "available_curves",
    "build_curve",
    # Driver
    "AnimationDriver",
    "AnimationRun",
    "RunState",
    "animate",
    # Interpolation
    "Interpolatable",
    "Point",
    "Size",
    "interpolate",
    "interpolate_color",
    # Presets
    "CurvePreset",
    "default_presets",
    "load_presets",
    # Sampling
    "sample_curve",
    "curve_bounds",
    "count_crossings",
    "peak_deviations",
    "ends_at_one",
]
