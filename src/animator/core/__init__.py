"""Core framework components for animator."""

from .clock import (
    FrameClock,
    FrameHandler,
    Subscription,
    ManualFrameClock,
    AsyncioFrameClock,
    PygameFrameClock,
)

__all__ = [
    "FrameClock",
    "FrameHandler",
    "Subscription",
    "ManualFrameClock",
    "AsyncioFrameClock",
    "PygameFrameClock",
]
