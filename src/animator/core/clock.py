"""
Frame clocks for driving animations.

A frame clock calls its subscribers once per frame with the frame timestamp
(seconds, monotonic) until each subscription is cancelled. All handlers run
on the thread that dispatches frames, one after another.

Hosts:
    ManualFrameClock: frames are dispatched by the caller (host loops, tests)
    AsyncioFrameClock: frames scheduled on the running asyncio event loop
    PygameFrameClock: frames paced by pygame.time.Clock
"""

from abc import ABC, abstractmethod
from typing import Callable
import asyncio
import logging
import time

logger = logging.getLogger(__name__)


# Frame handler receives the frame timestamp in seconds
FrameHandler = Callable[[float], None]


class Subscription:
    """A handler's registration with a frame clock.

    Cancelling is idempotent. A subscription cancelled while a frame is being
    dispatched receives no further calls, including later in that frame.
    """

    def __init__(self, clock: "FrameClock", handler: FrameHandler) -> None:
        self._clock = clock
        self.handler = handler
        self._active = True

    @property
    def active(self) -> bool:
        """Whether the handler still receives frames."""
        return self._active

    def cancel(self) -> None:
        """Stop delivering frames to the handler."""
        if not self._active:
            return
        self._active = False
        self._clock._remove(self)


class FrameClock(ABC):
    """Base class for frame clocks.

    Subclasses supply the time base through `now`, decide when frames happen
    and call `dispatch` for each one.
    """

    def __init__(self, fps: int = 60) -> None:
        self.fps = fps
        self._subscriptions: list[Subscription] = []
        self._frame_count = 0

    @abstractmethod
    def now(self) -> float:
        """Current time in seconds, on the same base as frame timestamps."""
        ...

    @property
    def frame_interval(self) -> float:
        """Target seconds between frames."""
        return 1.0 / self.fps

    @property
    def frame_count(self) -> int:
        """Number of frames dispatched so far."""
        return self._frame_count

    @property
    def subscriber_count(self) -> int:
        """Number of active subscriptions."""
        return len(self._subscriptions)

    def subscribe(self, handler: FrameHandler) -> Subscription:
        """
        Call `handler` once per frame until the subscription is cancelled.

        Args:
            handler: Callback receiving the frame timestamp

        Returns:
            The subscription, used to cancel delivery
        """
        subscription = Subscription(self, handler)
        self._subscriptions.append(subscription)
        logger.debug(f"Frame handler subscribed ({self.subscriber_count} active)")
        self._on_subscribe()
        return subscription

    def dispatch(self, timestamp: float | None = None) -> None:
        """Deliver one frame to every active subscriber."""
        if timestamp is None:
            timestamp = self.now()
        self._frame_count += 1

        # Handlers may subscribe or cancel during the frame
        for subscription in list(self._subscriptions):
            if not subscription.active:
                continue
            try:
                subscription.handler(timestamp)
            except Exception as e:
                logger.exception(f"Error in frame handler: {e}")

    def _remove(self, subscription: Subscription) -> None:
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)
            logger.debug(f"Frame handler unsubscribed ({self.subscriber_count} active)")
        if not self._subscriptions:
            self._on_idle()

    def _on_subscribe(self) -> None:
        """Hook called after a handler subscribes."""

    def _on_idle(self) -> None:
        """Hook called when the last subscription goes away."""


class ManualFrameClock(FrameClock):
    """Frame clock driven by explicit calls.

    Time only moves when the owner advances it, which makes animation timing
    fully deterministic. Also useful inside a host loop that already has its
    own frame callback: call `advance(delta)` from it.
    """

    def __init__(self, start: float = 0.0, fps: int = 60) -> None:
        super().__init__(fps)
        self._time = start

    def now(self) -> float:
        return self._time

    def tick(self) -> None:
        """Dispatch a frame without moving time."""
        self.dispatch(self._time)

    def advance(self, delta: float) -> None:
        """Move time forward by `delta` seconds and dispatch a frame."""
        self._time += delta
        self.dispatch(self._time)

    def advance_to(self, timestamp: float) -> None:
        """Set the time to `timestamp` and dispatch a frame."""
        self._time = timestamp
        self.dispatch(self._time)

    def step(self, frames: int = 1) -> None:
        """Dispatch `frames` frames, one frame interval apart."""
        for _ in range(frames):
            self.advance(self.frame_interval)


class AsyncioFrameClock(FrameClock):
    """Frame clock scheduled on an asyncio event loop.

    Frames are scheduled with `loop.call_later` only while there are
    subscribers, so an idle clock costs nothing. Subscribing requires a
    running event loop unless one is passed in.
    """

    def __init__(
        self,
        fps: int = 60,
        loop: asyncio.AbstractEventLoop | None = None
    ) -> None:
        super().__init__(fps)
        self._loop = loop
        self._handle: asyncio.TimerHandle | None = None

    def now(self) -> float:
        return self._get_loop().time()

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    @property
    def is_scheduled(self) -> bool:
        """Whether a frame is pending on the event loop."""
        return self._handle is not None

    def _on_subscribe(self) -> None:
        if self._handle is None:
            self._schedule()
            logger.debug(f"AsyncioFrameClock started at {self.fps} fps")

    def _on_idle(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
            logger.debug("AsyncioFrameClock idle")

    def _schedule(self) -> None:
        self._handle = self._get_loop().call_later(self.frame_interval, self._frame)

    def _frame(self) -> None:
        self._handle = None
        self.dispatch()
        if self._subscriptions and self._handle is None:
            self._schedule()


class PygameFrameClock(FrameClock):
    """Frame clock paced by `pygame.time.Clock.tick(fps)`.

    `run` blocks the calling thread and dispatches frames until no
    subscribers remain, `stop` is called or `max_frames` is reached.
    """

    def __init__(self, fps: int = 60) -> None:
        super().__init__(fps)
        self._clock = None
        self._running = False

    def now(self) -> float:
        return time.monotonic()

    def init(self) -> bool:
        """Initialize pygame timing."""
        try:
            import pygame
            pygame.init()
            self._clock = pygame.time.Clock()
            logger.info(f"Pygame clock initialized at {self.fps} fps")
            return True
        except Exception as e:
            logger.error(f"Pygame init error: {e}")
            return False

    @property
    def is_running(self) -> bool:
        """Whether `run` is dispatching frames."""
        return self._running

    def run(self, max_frames: int | None = None) -> int:
        """
        Dispatch frames until idle.

        Args:
            max_frames: Stop after this many frames

        Returns:
            Number of frames dispatched

        Raises:
            RuntimeError: If pygame cannot be initialized
        """
        if self._clock is None and not self.init():
            raise RuntimeError("Pygame clock could not be initialized")

        self._running = True
        frames = 0
        while self._running and self._subscriptions:
            if max_frames is not None and frames >= max_frames:
                break
            self._clock.tick(self.fps)
            self.dispatch()
            frames += 1

        self._running = False
        logger.debug(f"Pygame clock stopped after {frames} frames")
        return frames

    def stop(self) -> None:
        """Make `run` return after the current frame."""
        self._running = False
