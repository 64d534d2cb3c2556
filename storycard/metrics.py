"""
Story Metrics - Measured heights reported by the renderer
"""

from dataclasses import dataclass, fields
from typing import Dict, Optional
from loguru import logger

from utils.exceptions import InvalidMetricsError
from utils.number_utils import is_finite_number


@dataclass(frozen=True)
class StoryMetrics:
    """
    Heights (px) measured from the last render of the story card

    content_height is the full scroll height of the content, available_height
    the height of the canvas it must fit in.
    """
    content_height: float
    available_height: float
    hero_height: float = 0.0
    schedule_height: float = 0.0
    footer_height: float = 0.0
    item_count: int = 0

    @property
    def is_measurable(self) -> bool:
        """True when the ratio content/available can be trusted"""
        return (
            is_finite_number(self.content_height)
            and is_finite_number(self.available_height)
            and self.available_height > 0
        )

    @property
    def pressure_ratio(self) -> Optional[float]:
        """Raw content/available ratio, None when not measurable"""
        if not self.is_measurable:
            return None
        return self.content_height / self.available_height

    @classmethod
    def from_dict(cls, data: Dict) -> "StoryMetrics":
        """
        Build metrics from a renderer payload, validating every height

        Args:
            data: Dict with StoryMetrics field names

        Returns:
            StoryMetrics

        Raises:
            InvalidMetricsError: on missing, negative or non-finite values
        """
        values = {}
        for f in fields(cls):
            if f.name not in data:
                if f.name in ("content_height", "available_height"):
                    raise InvalidMetricsError(f.name, None, f"Missing metrics value: {f.name}")
                continue
            value = data[f.name]
            if not is_finite_number(value) or value < 0:
                raise InvalidMetricsError(f.name, value)
            values[f.name] = value
        return cls(**values)


class MetricsTracker:
    """
    Remembers the last reported metrics so sizing only re-runs on real changes

    A renderer measures after every paint; most paints produce identical
    numbers. update() returns True only when at least one field differs from
    the previously accepted measurement.

    The HTTP service is stateless and never holds one; it is meant for
    in-process callers that measure, re-size and render in a loop
    (see example_usage.py).
    """

    def __init__(self):
        self._last: Optional[StoryMetrics] = None

    @property
    def last(self) -> Optional[StoryMetrics]:
        return self._last

    def update(self, metrics: StoryMetrics) -> bool:
        """
        Record a new measurement

        Args:
            metrics: Freshly measured metrics

        Returns:
            True if metrics changed (and were stored), False otherwise
        """
        if self._last is not None and self._last == metrics:
            return False

        if self._last is not None:
            logger.debug(
                f"Metrics changed: content {self._last.content_height} → {metrics.content_height}, "
                f"available {self._last.available_height} → {metrics.available_height}"
            )
        self._last = metrics
        return True

    def reset(self) -> None:
        self._last = None
