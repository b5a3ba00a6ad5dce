"""
Main entry point for the animator demo.

Lists the curve catalog, then plays the four-phase demo cycle on the
configured frame clock, logging the transforms as it goes.
"""

import asyncio
import logging
import sys

from animator.animation.curves import CurveFunc, build_curve
from animator.animation.driver import AnimationDriver
from animator.animation.presets import CurvePreset, default_presets, load_presets
from animator.animation.sampling import curve_bounds, ends_at_one
from animator.core.clock import AsyncioFrameClock, PygameFrameClock
from animator.demo.phases import AnimationPhase, DemoTransforms, PhaseCycle
from animator.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


def collect_presets(settings: Settings) -> dict[str, CurvePreset]:
    """Catalog presets plus the ones from the configured preset file."""
    presets = default_presets()
    if settings.presets_path is not None:
        presets.update(load_presets(settings.presets_path))
    return presets


def resolve_curve(name: str, presets: dict[str, CurvePreset]) -> CurveFunc:
    """Preset by key, falling back to catalog names and aliases."""
    preset = presets.get(name)
    if preset is not None:
        return preset.build()
    return build_curve(name)


def log_catalog(presets: dict[str, CurvePreset]) -> None:
    """Log each curve with a few characteristic values."""
    for name, preset in presets.items():
        curve = preset.build()
        low, high = curve_bounds(curve)
        logger.info(
            f"{preset.title:<22} {name:<22} f(0.5)={curve(0.5):+.3f} "
            f"f(1)={curve(1.0):+.3f} range=[{low:+.3f}, {high:+.3f}]"
            + ("" if ends_at_one(curve) else "  (does not end at 1)")
        )


def _log_frame(phase: AnimationPhase, transforms: DemoTransforms) -> None:
    logger.debug(
        f"{phase.name:<16} offset={transforms.offset:+8.2f} "
        f"rotation={transforms.rotation:+7.2f} scale={transforms.scale:.3f} "
        f"hue={transforms.hue:.3f}"
    )


def build_cycle(
    driver: AnimationDriver,
    curve: CurveFunc,
    settings: Settings,
    on_finished=None,
) -> PhaseCycle:
    """Demo cycle that rests between phases using the driver itself as a timer."""
    def rest(delay: float, then) -> None:
        driver.start(delay, lambda progress: None, on_complete=then, name="demo_pause")

    return PhaseCycle(
        driver,
        curve,
        settings=settings.demo,
        on_update=_log_frame,
        on_finished=on_finished,
        schedule=rest,
    )


async def run_asyncio(curve: CurveFunc, settings: Settings) -> None:
    """Play the demo on the asyncio event loop."""
    clock = AsyncioFrameClock(fps=settings.demo.fps)
    finished = asyncio.Event()
    cycle = build_cycle(AnimationDriver(clock), curve, settings, on_finished=finished.set)
    cycle.start()
    await finished.wait()


def run_pygame(curve: CurveFunc, settings: Settings) -> None:
    """Play the demo with pygame frame pacing."""
    clock = PygameFrameClock(fps=settings.demo.fps)
    cycle = build_cycle(AnimationDriver(clock), curve, settings)
    cycle.start()
    clock.run()


def main() -> None:
    """Main entry point."""
    from dotenv import load_dotenv

    # Load environment variables
    load_dotenv()

    settings = get_settings()
    setup_logging(settings.debug)
    logger.info("Animator demo starting...")

    try:
        presets = collect_presets(settings)
        log_catalog(presets)

        name = settings.demo.curve
        curve = resolve_curve(name, presets)
        logger.info(f"Playing {settings.demo.cycles} phases with '{name}' on the {settings.clock} clock")

        if settings.clock == "pygame":
            run_pygame(curve, settings)
        else:
            asyncio.run(run_asyncio(curve, settings))

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)

    logger.info("Animator demo stopped")


if __name__ == "__main__":
    main()
