from __future__ import annotations

import os
import time
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .errors import ConfigurationError
from .tiles import DEFAULT_MARKERS, MARKERS, tile_from_name


def parse_markers(text: str) -> Tuple[str, ...]:
    """Parse ``"player,dagger,enemy"`` (names or tile chars) into a marker tuple."""
    out = []
    for part in text.split(","):
        if not part.strip():
            continue
        try:
            out.append(tile_from_name(part))
        except KeyError:
            raise ConfigurationError(f"unknown marker {part.strip()!r}") from None
    return tuple(out)


def derive_seed() -> int:
    """Time-derived seed used when none is configured."""
    return time.time_ns() % (2**31 - 1)


@dataclass
class GeneratorConfig:
    width: int = 64
    height: int = 64
    fill_percent: int = 45
    smoothing_iterations: int = 5
    markers: Sequence[str] = DEFAULT_MARKERS
    seed: Optional[int] = None

    def __post_init__(self):
        self.validate()
        self.markers = tuple(self.markers)

    def validate(self) -> None:
        for name in ("width", "height", "fill_percent", "smoothing_iterations"):
            val = getattr(self, name)
            if isinstance(val, bool) or not isinstance(val, int):
                raise ConfigurationError(f"{name} must be an integer, got {val!r}")
        if self.width <= 0 or self.height <= 0:
            raise ConfigurationError(f"width and height must be positive, got {self.width}x{self.height}")
        if not 0 <= self.fill_percent <= 100:
            raise ConfigurationError(f"fill_percent must be within [0, 100], got {self.fill_percent}")
        if self.smoothing_iterations < 0:
            raise ConfigurationError(f"smoothing_iterations must be >= 0, got {self.smoothing_iterations}")
        if isinstance(self.markers, str):
            raise ConfigurationError("markers must be a sequence of tiles, not a string")
        unknown = [m for m in self.markers if m not in MARKERS]
        if unknown:
            raise ConfigurationError(f"not marker tiles: {unknown}")
        # An all-wall fill is the only configuration where no region can appear
        if not self.markers and self.fill_percent < 100:
            raise ConfigurationError("marker sequence is empty but regions are expected")
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise ConfigurationError(f"seed must be an integer or None, got {self.seed!r}")

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def resolved_seed(self) -> int:
        """Return the configured seed, or a fresh clock-derived one if unset.

        The derived seed is not stored, so every run from an unseeded config
        gets its own.
        """
        return self.seed if self.seed is not None else derive_seed()

    @classmethod
    def from_env(cls, environ=None, **overrides) -> "GeneratorConfig":
        """Build a config from ``CAVEGEN_*`` variables; keyword overrides win.

        Overrides set to ``None`` are ignored so CLI flags can be passed through
        unconditionally.
        """
        env = os.environ if environ is None else environ
        values = {}
        int_keys = {
            "width": "CAVEGEN_WIDTH",
            "height": "CAVEGEN_HEIGHT",
            "fill_percent": "CAVEGEN_FILL_PERCENT",
            "smoothing_iterations": "CAVEGEN_SMOOTHING_ITERATIONS",
            "seed": "CAVEGEN_SEED",
        }
        for attr, env_key in int_keys.items():
            raw = env.get(env_key, "").strip()
            if raw:
                try:
                    values[attr] = int(raw)
                except ValueError:
                    raise ConfigurationError(f"{env_key} must be an integer, got {raw!r}") from None
        raw_markers = env.get("CAVEGEN_MARKERS", "").strip()
        if raw_markers:
            values["markers"] = parse_markers(raw_markers)
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


__all__ = ["GeneratorConfig", "parse_markers", "derive_seed"]
