"""
Pressure Calculator - Overflow pressure and breathing room from measured heights
"""

from dataclasses import dataclass
from typing import Optional

from utils.number_utils import clamp
from .metrics import StoryMetrics

PRESSURE_MIN = 0.7
PRESSURE_MAX = 1.8


@dataclass(frozen=True)
class Pressure:
    """
    Clamped content/available ratio split into two opposing signals

    overflow is how far content runs past the canvas, breathing how much
    slack is left. At most one of them is nonzero.
    """
    ratio: float = 1.0
    overflow: float = 0.0
    breathing: float = 0.0

    @property
    def is_overflowing(self) -> bool:
        return self.overflow > 0

    def factor(self, shrink: float, floor: float, grow: float, cap: float = 1.0) -> float:
        """
        Multiplicative factor for a scale with the given sensitivities

        Shrinks by overflow*shrink (kept within [floor, cap]) when overflowing,
        otherwise grows by breathing*grow without an upper bound; callers clamp
        the final scale.
        """
        if self.is_overflowing:
            return clamp(1 - self.overflow * shrink, floor, cap)
        return 1 + self.breathing * grow


NEUTRAL_PRESSURE = Pressure()


def compute_pressure(metrics: Optional[StoryMetrics] = None) -> Pressure:
    """
    Derive pressure from measured metrics

    Args:
        metrics: Last measured heights, or None

    Returns:
        Pressure (neutral when metrics are absent or unusable)
    """
    raw_ratio = metrics.pressure_ratio if metrics is not None else None
    if raw_ratio is None:
        return NEUTRAL_PRESSURE

    ratio = clamp(raw_ratio, PRESSURE_MIN, PRESSURE_MAX)
    return Pressure(
        ratio=ratio,
        overflow=max(0.0, ratio - 1),
        breathing=max(0.0, 1 - ratio),
    )
