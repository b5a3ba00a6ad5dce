"""Frame-driven animation driver.

Runs a caller's animation logic once per frame with the animation progress,
optionally remapped through an animation curve:

    driver = AnimationDriver(clock)
    driver.start(1.0, lambda progress: view.set_alpha(progress), curve=ease_in_out)

Progress runs from 0 at the start of the animation to the curve's value at 1
when it ends. The last progress call always reports exactly curve(1.0) (or 1.0
without a curve), however late the final frame arrives.

Stopping a run fast-forwards it to its end; there is no pause or resume.
Running several animations against the same property at once is not
supported and the result is undefined.
"""

from typing import Callable, Optional, List
from enum import Enum, auto
import itertools
import logging

from animator.animation.curves import CurveFunc
from animator.core.clock import FrameClock, Subscription

logger = logging.getLogger(__name__)


ProgressCallback = Callable[[float], None]
CompletionCallback = Callable[[], None]


class RunState(Enum):
    """Animation run state."""

    RUNNING = auto()
    FINISHED = auto()


class AnimationRun:
    """A single timed playback started by an AnimationDriver.

    The run owns its frame clock subscription and releases it on every way
    out: natural completion, `stop()`, and a progress callback that raises
    on the terminal update.
    """

    def __init__(
        self,
        driver: "AnimationDriver",
        duration: float,
        on_progress: ProgressCallback,
        curve: Optional[CurveFunc] = None,
        on_complete: Optional[CompletionCallback] = None,
        name: str = "",
    ) -> None:
        self.name = name
        self.duration = duration
        self.curve = curve
        self._driver = driver
        self._on_progress = on_progress
        self._on_complete = on_complete

        self._state = RunState.RUNNING
        self._start_time: Optional[float] = None
        self._subscription: Optional[Subscription] = None
        self._progress = 0.0
        self._frame_count = 0

    def _start(self) -> None:
        clock = self._driver.clock
        self._start_time = clock.now()

        # Nothing to time; also avoids dividing by the duration
        if self.duration <= 0:
            self._finish()
            return

        self._subscription = clock.subscribe(self._tick)

    def _tick(self, timestamp: float) -> None:
        if self._state != RunState.RUNNING:
            return

        elapsed = timestamp - self._start_time
        if elapsed >= self.duration:
            self._finish()
            return

        t = elapsed / self.duration
        if self.curve is not None:
            t = self.curve(t)
        self._deliver(t)

    def _deliver(self, progress: float) -> None:
        self._progress = progress
        self._frame_count += 1
        self._on_progress(progress)

    @property
    def final_value(self) -> float:
        """Progress reported by the terminal update.

        Queried from the curve rather than assumed to be 1, since a curve is
        free to end elsewhere.
        """
        if self.curve is not None:
            return self.curve(1.0)
        return 1.0

    def _finish(self) -> None:
        # Mark finished first so a stop() from inside a callback is a no-op
        self._state = RunState.FINISHED
        self._start_time = None

        try:
            self._deliver(self.final_value)
        finally:
            # Release the clock even if the progress callback raised
            if self._subscription is not None:
                self._subscription.cancel()
                self._subscription = None
            self._driver._remove(self)

        if self._on_complete:
            self._on_complete()

        logger.debug(f"Animation finished: {self.name} ({self._frame_count} updates)")

    def stop(self) -> None:
        """Fast-forward to the end of the animation.

        Delivers the terminal update and completion right away. Does nothing
        if the run already finished.
        """
        if self.is_running:
            logger.debug(f"Animation stopped: {self.name}")
            self._finish()

    @property
    def is_running(self) -> bool:
        """Check if the run has not delivered its terminal update yet."""
        return self._state == RunState.RUNNING

    @property
    def state(self) -> RunState:
        """Get current run state."""
        return self._state

    @property
    def progress(self) -> float:
        """Last progress value delivered."""
        return self._progress

    @property
    def frame_count(self) -> int:
        """Number of progress updates delivered, terminal update included."""
        return self._frame_count

    def __repr__(self) -> str:
        return (
            f"AnimationRun(name={self.name!r}, duration={self.duration}, "
            f"state={self._state.name})"
        )


class AnimationDriver:
    """Starts animation runs against a frame clock.

    Keeps track of the runs in flight so they can be stopped together. Runs
    are independent: the driver does not arbitrate between runs animating
    the same property.
    """

    def __init__(self, clock: FrameClock):
        self.clock = clock
        self._runs: List[AnimationRun] = []
        self._counter = itertools.count()

        logger.debug("AnimationDriver initialized")

    def start(
        self,
        duration: float,
        on_progress: ProgressCallback,
        curve: Optional[CurveFunc] = None,
        on_complete: Optional[CompletionCallback] = None,
        name: Optional[str] = None,
    ) -> AnimationRun:
        """Start an animation.

        Args:
            duration: Animation duration in seconds. Zero or negative durations
                finish synchronously, before this method returns
            on_progress: Animation logic, called each frame with the progress
            curve: Animation curve applied to the progress; linear if omitted.
                May return values outside 0-1 (overshoot)
            on_complete: Called once after the final progress update
            name: Name used in logs

        Returns:
            The running animation
        """
        run = AnimationRun(
            driver=self,
            duration=duration,
            on_progress=on_progress,
            curve=curve,
            on_complete=on_complete,
            name=name or f"run_{next(self._counter)}",
        )
        self._runs.append(run)
        logger.debug(f"Animation started: {run.name} (duration={duration}s)")
        run._start()
        return run

    def _remove(self, run: AnimationRun) -> None:
        if run in self._runs:
            self._runs.remove(run)

    def stop_all(self) -> int:
        """Fast-forward all running animations.

        Returns:
            Number of animations stopped
        """
        stopped = 0
        for run in list(self._runs):
            # An earlier completion callback may have stopped it already
            if run.is_running:
                run.stop()
                stopped += 1
        return stopped

    @property
    def active_runs(self) -> List[AnimationRun]:
        """Runs that have not finished yet."""
        return list(self._runs)

    @property
    def active_count(self) -> int:
        """Get the number of running animations."""
        return len(self._runs)


def animate(
    clock: FrameClock,
    duration: float,
    on_progress: ProgressCallback,
    curve: Optional[CurveFunc] = None,
    on_complete: Optional[CompletionCallback] = None,
) -> AnimationRun:
    """Start a one-off animation on `clock` without keeping a driver around."""
    return AnimationDriver(clock).start(
        duration, on_progress, curve=curve, on_complete=on_complete
    )
