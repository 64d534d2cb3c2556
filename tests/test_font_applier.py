import pytest

from storycard.content_elements import CONTENT_ELEMENT_META, ElementId, ElementStyle, SizeLimits
from storycard.font_applier import apply_font_scale, scale_font_size, scale_line_height

HEADING = CONTENT_ELEMENT_META[ElementId.HEADING]
CLASS_NAME = CONTENT_ELEMENT_META[ElementId.CLASS_NAME]
WIDE = SizeLimits(0, 1000)


def test_font_size_rounds_half_up():
    assert scale_font_size(15, 1.5, WIDE) == 23
    assert scale_font_size(17, 1.5, WIDE) == 26


def test_font_size_clamped_to_limits():
    limits = SizeLimits(34, 76)
    assert scale_font_size(200, 1.0, limits) == 76
    assert scale_font_size(10, 0.8, limits) == 34


def test_line_height_shrinks_faster_than_it_grows():
    assert scale_line_height(1.2, 0.9, (1.1, 1.6)) == pytest.approx(1.15)
    assert scale_line_height(1.2, 1.05, (1.1, 1.6)) == pytest.approx(1.21)


def test_line_height_clamped_to_range():
    assert scale_line_height(2.0, 1.0, (1.05, 1.4)) == 1.4
    assert scale_line_height(1.0, 0.8, (1.05, 1.4)) == 1.05


def test_missing_style_uses_metadata_defaults():
    result = apply_font_scale(None, HEADING, SizeLimits(34, 76), 1.0)
    assert result.font_size == 56
    assert result.line_height == pytest.approx(1.1)
    assert result.color == HEADING.default_color


def test_current_style_is_the_basis_and_not_modified():
    existing = ElementStyle(font_size=30, line_height=1.3, font_weight=800, color="#FF0000")
    result = apply_font_scale(existing, CLASS_NAME, SizeLimits(20, 34), 0.9)

    assert result.font_size == 27
    assert result.font_weight == 800
    assert result.color == "#FF0000"
    assert existing.font_size == 30
    assert existing.line_height == 1.3


def test_missing_font_size_falls_back_to_default():
    existing = ElementStyle(font_size=None, line_height=1.3)
    result = apply_font_scale(existing, CLASS_NAME, SizeLimits(16, 30), 1.0)
    assert result.font_size == 18


def test_non_finite_values_fall_back_to_defaults():
    existing = ElementStyle(font_size=float("nan"), line_height=float("inf"))
    result = apply_font_scale(existing, CLASS_NAME, SizeLimits(16, 30), 1.0)
    assert result.font_size == 18
    assert result.line_height == pytest.approx(1.2)


def test_preserved_line_height_is_untouched():
    existing = ElementStyle(font_size=50, line_height=1.37)
    result = apply_font_scale(existing, HEADING, SizeLimits(34, 76), 0.8, preserve_line_height=True)
    assert result.line_height == 1.37
    assert result.font_size == 40


@pytest.mark.parametrize("line_height", [float("nan"), float("inf")])
def test_preserved_non_finite_line_height_falls_back_to_default(line_height):
    existing = ElementStyle(font_size=50, line_height=line_height)
    result = apply_font_scale(existing, HEADING, SizeLimits(34, 76), 0.8, preserve_line_height=True)
    assert result.line_height == pytest.approx(1.1)


def test_preserved_missing_line_height_stays_missing():
    existing = ElementStyle(font_size=50)
    result = apply_font_scale(existing, HEADING, SizeLimits(34, 76), 0.8, preserve_line_height=True)
    assert result.line_height is None

