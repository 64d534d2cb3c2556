import pytest

from storycard.layout_options import DEFAULT_SMART_SPACING, scaled_spacing
from storycard.schedule import Schedule, ScheduleItem
from utils.number_utils import clamp, is_finite_number, round_half_up, round_to
from utils.text_utils import average_length, trimmed_length


def test_clamp_is_inclusive():
    assert clamp(5, 1, 5) == 5
    assert clamp(0, 1, 5) == 1
    assert clamp(9, 1, 5) == 5


def test_round_half_up():
    assert round_half_up(22.5) == 23
    assert round_half_up(23.5) == 24
    assert round_half_up(22.49) == 22


def test_round_to_sends_exact_ties_up():
    assert round_to(1.125) == 1.13
    assert round_to(1.375) == 1.38
    # stored just below the tie
    assert round_to(1.005) == 1.0
    assert round_to(1.2072) == 1.21


def test_is_finite_number():
    assert is_finite_number(3)
    assert is_finite_number(1.5)
    assert not is_finite_number(float("nan"))
    assert not is_finite_number(None)
    assert not is_finite_number(True)


def test_average_length_skips_blank_values():
    assert trimmed_length("  abc  ") == 3
    assert average_length(["  abc  ", None, "", "   ", "abcde"]) == 4.0
    assert average_length([None, ""]) == 0.0


def test_schedule_body_text_leaves_out_time_and_duration():
    schedule = Schedule(items=[ScheduleItem(class_name="Spin", time="6:00", instructor="Ana", duration="45")])
    assert schedule.body_text() == ["Spin", "Ana", None, None]


def test_scaled_spacing():
    spacing = scaled_spacing(schedule_gap=1.12, card_padding=1.08)
    assert spacing.schedule_gap == pytest.approx(1.12)
    assert spacing.card_padding == pytest.approx(1.08)
    assert spacing.hero_gap == 1.0
    assert DEFAULT_SMART_SPACING.schedule_gap == 1.0


def test_scaled_spacing_rejects_unknown_field():
    with pytest.raises(ValueError):
        scaled_spacing(gutter=1.2)
