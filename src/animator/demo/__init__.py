"""Headless demo of the animation curves."""

from animator.demo.phases import AnimationPhase, DemoTransforms, PhaseCycle

__all__ = ["AnimationPhase", "DemoTransforms", "PhaseCycle"]
