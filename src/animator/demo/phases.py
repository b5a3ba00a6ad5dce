"""Four-phase demo animation cycle.

The demo keeps animating the same object: forward, back to center, backward,
back to center, and so on, resting between phases. Each frame produces a set
of transform values (offset, rotation, scale, hue) for whatever displays them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional
import logging

from animator.animation.curves import CurveFunc
from animator.animation.driver import AnimationDriver, AnimationRun
from animator.animation.interpolation import interpolate
from animator.settings import DemoSettings

logger = logging.getLogger(__name__)


# Scheduler: call a function after a delay in seconds
Scheduler = Callable[[float, Callable[[], None]], Any]


class AnimationPhase(Enum):
    """Demo phases, played in order and then repeated."""

    FORWARD = 0
    FORWARD_REVERT = 1
    BACKWARD = 2
    BACKWARD_REVERT = 3

    @property
    def is_backward(self) -> bool:
        return self in (AnimationPhase.BACKWARD, AnimationPhase.BACKWARD_REVERT)

    @property
    def is_reverting(self) -> bool:
        return self in (AnimationPhase.FORWARD_REVERT, AnimationPhase.BACKWARD_REVERT)

    def next(self) -> "AnimationPhase":
        members = list(AnimationPhase)
        return members[(members.index(self) + 1) % len(members)]


@dataclass(frozen=True)
class DemoTransforms:
    """Transform values for one demo frame."""
    offset: float = 0.0
    rotation: float = 0.0  # degrees
    scale: float = 1.0
    hue: float = 0.0


class PhaseCycle:
    """
    Plays the demo phases one after another on an AnimationDriver.

    Args:
        driver: Driver running each phase's animation
        curve: Animation curve for every phase
        settings: Durations and transform limits
        on_update: Called with the phase and transforms every frame
        on_finished: Called after the last phase
        schedule: Delays the next phase by `settings.phase_pause`; without
            one, the next phase starts right away
    """

    def __init__(
        self,
        driver: AnimationDriver,
        curve: CurveFunc,
        settings: Optional[DemoSettings] = None,
        on_update: Optional[Callable[[AnimationPhase, DemoTransforms], None]] = None,
        on_finished: Optional[Callable[[], None]] = None,
        schedule: Optional[Scheduler] = None,
    ) -> None:
        self.driver = driver
        self.curve = curve
        self.settings = settings or DemoSettings()
        self.on_update = on_update
        self.on_finished = on_finished
        self._schedule = schedule

        self.phase = AnimationPhase.FORWARD
        self.transforms = DemoTransforms(hue=self.settings.default_hue)
        self.phases_played = 0
        self._run: Optional[AnimationRun] = None
        self._stopped = False

    @property
    def is_finished(self) -> bool:
        return self._stopped or self.phases_played >= self.settings.cycles

    def start(self) -> None:
        """Begin the current phase."""
        self._stopped = False
        self._run = self.driver.start(
            self.settings.duration,
            self.update,
            curve=self.curve,
            on_complete=self._phase_finished,
            name=f"demo_{self.phase.name.lower()}",
        )

    def stop(self) -> None:
        """Fast-forward the current phase and play no more."""
        self._stopped = True
        if self._run is not None:
            self._run.stop()

    def compute(self, progress: float) -> DemoTransforms:
        """Transforms for the current phase at the given progress."""
        s = self.settings
        direction = -1.0 if self.phase.is_backward else 1.0

        t = progress
        if self.phase.is_reverting:
            # Revert from wherever the curve ended, which is not always 1
            t = self.curve(1.0) - t

        target_scale = 1 / s.max_scale if self.phase.is_backward else s.max_scale
        return DemoTransforms(
            offset=direction * s.max_offset * t,
            rotation=direction * s.max_rotation_degrees * t,
            scale=interpolate(1.0, target_scale, t),
            hue=(s.default_hue + direction * s.max_hue_shift * t) % 1.0,
        )

    def update(self, progress: float) -> None:
        """Progress callback for the phase animation."""
        self.transforms = self.compute(progress)
        if self.on_update:
            self.on_update(self.phase, self.transforms)

    def _phase_finished(self) -> None:
        self.phases_played += 1
        logger.info(f"Phase {self.phase.name} finished ({self.phases_played}/{self.settings.cycles})")

        if self.is_finished:
            if self.on_finished:
                self.on_finished()
            return

        if self._schedule is None:
            self.next_phase()
        else:
            self._schedule(self.settings.phase_pause, self.next_phase)

    def next_phase(self) -> None:
        """Move to the following phase and start it."""
        if self._stopped:
            return
        self.phase = self.phase.next()
        self.start()
