"""
Build settings shared by the library entry points and the CLI.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .errors import ConfigurationError, DegenerateGeometryError

# Truncation that gives the familiar soccer-ball proportions.
DEFAULT_TRUNCATION = 1.0 / 3.0


def check_truncation(s: float) -> float:
    """Return s as a float, or raise if it is not strictly inside (0, 1)."""
    try:
        value = float(s)
    except (TypeError, ValueError) as exc:
        raise DegenerateGeometryError(f"truncation fraction must be a number, got {s!r}") from exc
    if not math.isfinite(value) or value <= 0.0 or value >= 1.0:
        raise DegenerateGeometryError(
            f"truncation fraction must lie strictly inside (0, 1), got {value}"
        )
    return value


@dataclass
class BuildConfig:
    truncation: float = DEFAULT_TRUNCATION
    scale: float = 100.0                 # linear scale forwarded to the presentation layer
    planarity_tolerance: float = 1e-6    # |dot(n, v) - d| allowed per vertex
    unit_tolerance: float = 1e-9         # base vertices must have |v| = 1 within this
    min_extent: float = 1e-12            # smallest projected width/height accepted

    def validate(self) -> "BuildConfig":
        self.truncation = check_truncation(self.truncation)
        if not math.isfinite(self.scale) or self.scale <= 0.0:
            raise ConfigurationError(f"scale must be a positive number, got {self.scale}")
        for name in ("planarity_tolerance", "unit_tolerance", "min_extent"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0.0:
                raise ConfigurationError(f"{name} must be a non-negative number, got {value}")
        return self
