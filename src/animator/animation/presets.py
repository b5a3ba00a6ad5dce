"""
Curve presets and preset loading.

Presets name a curve together with the generator parameters that produce
it, so tuned curves can live in a YAML file instead of code:

    presets:
      - name: bouncy
        title: Bouncy
        kind: overshoot
        params: {count: 2, halflife: 0.2}
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any
import logging

import yaml

from animator.animation.curves import (
    CurveFunc,
    available_curves,
    build_curve,
    curve_title,
)

logger = logging.getLogger(__name__)


@dataclass
class CurvePreset:
    """A named, parameterized curve."""
    name: str
    kind: str
    title: str = ""
    params: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.title:
            self.title = self.name.replace("_", " ").title()

    @classmethod
    def from_yaml(cls, data: dict[str, Any]) -> "CurvePreset":
        """Create a preset from YAML data."""
        if "name" not in data:
            raise ValueError(f"Curve preset without a name: {data}")
        return cls(
            name=data["name"],
            kind=data.get("kind", data["name"]),
            title=data.get("title", ""),
            params=dict(data.get("params") or {}),
        )

    def build(self) -> CurveFunc:
        """Create the curve this preset describes."""
        return build_curve(self.kind, **self.params)


def default_presets() -> dict[str, CurvePreset]:
    """The built-in curve catalog as presets."""
    return {
        name: CurvePreset(name=name, kind=name, title=curve_title(name))
        for name in available_curves()
    }


def load_presets(path: Path | str) -> dict[str, CurvePreset]:
    """
    Load curve presets from a YAML file.

    Every preset is built once while loading, so a bad kind or bad
    parameters fail here instead of mid-animation.

    Args:
        path: YAML file with a top-level `presets` list

    Returns:
        Presets by name, in file order

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If a preset is malformed or names an unknown curve
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Preset file not found: {path}")

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    presets: dict[str, CurvePreset] = {}
    for entry in data.get("presets", []):
        preset = CurvePreset.from_yaml(entry)
        preset.build()
        presets[preset.name] = preset

    logger.info(f"Loaded {len(presets)} curve presets from {path}")
    return presets
