import pytest

from storycard.metrics import MetricsTracker, StoryMetrics
from utils.exceptions import InvalidMetricsError


def test_pressure_ratio():
    assert StoryMetrics(2400, 1920).pressure_ratio == pytest.approx(1.25)
    assert StoryMetrics(2400, 0).pressure_ratio is None
    assert StoryMetrics(float("nan"), 1920).pressure_ratio is None


def test_from_dict():
    metrics = StoryMetrics.from_dict({"content_height": 1800, "available_height": 1920, "item_count": 6})
    assert metrics.item_count == 6
    assert metrics.hero_height == 0.0


@pytest.mark.parametrize(
    "payload",
    [
        {"available_height": 1920},
        {"content_height": -1, "available_height": 1920},
        {"content_height": 100, "available_height": float("inf")},
        {"content_height": "tall", "available_height": 1920},
    ],
)
def test_from_dict_rejects_invalid(payload):
    with pytest.raises(InvalidMetricsError):
        StoryMetrics.from_dict(payload)


def test_tracker_reports_only_changes():
    tracker = MetricsTracker()
    first = StoryMetrics(2000, 1920, item_count=5)

    assert tracker.update(first) is True
    assert tracker.update(StoryMetrics(2000, 1920, item_count=5)) is False
    assert tracker.update(StoryMetrics(2000, 1920, item_count=6)) is True
    assert tracker.last.item_count == 6

    tracker.reset()
    assert tracker.last is None
    assert tracker.update(first) is True
