"""
Density Estimator - How busy the schedule block reads

Density is an index of text load, not a literal line count: item and element
counts are clamped so an almost-empty or very long schedule does not dominate
the score. 1.0 is a typical schedule; anything above means more text than the
canvas comfortably holds at default sizes.
"""

from typing import Dict

from utils.number_utils import clamp
from .layout_options import LayoutStyle, SpacingPreference

ITEM_COUNT_MIN = 3
ITEM_COUNT_MAX = 14
ACTIVE_ELEMENTS_MIN = 1
ACTIVE_ELEMENTS_MAX = 6  # size of the schedule element group
DENSITY_DIVISOR = 24.0
DENSITY_MIN = 0.0
DENSITY_MAX = 1.7

LAYOUT_DENSITY_BONUS: Dict[LayoutStyle, float] = {
    LayoutStyle.GRID: 0.18,
    LayoutStyle.CARD: 0.08,
}

SPACING_DENSITY_BONUS: Dict[SpacingPreference, float] = {
    SpacingPreference.COMPACT: 0.12,
    SpacingPreference.SPACIOUS: -0.08,
}


def text_length_density_bonus(average_text_length: float) -> float:
    """Multiplier bonus for long (or very short) schedule text"""
    if average_text_length > 26:
        return 0.12
    if average_text_length > 18:
        return 0.06
    if average_text_length < 10:
        return -0.04
    return 0.0


def density_multiplier(
    layout_style: LayoutStyle,
    spacing: SpacingPreference,
    average_text_length: float,
) -> float:
    """Combined layout/spacing/text-length multiplier around 1.0"""
    return (
        1.0
        + LAYOUT_DENSITY_BONUS.get(layout_style, 0.0)
        + SPACING_DENSITY_BONUS.get(spacing, 0.0)
        + text_length_density_bonus(average_text_length)
    )


def estimate_density(
    item_count: int,
    active_elements: int,
    layout_style: LayoutStyle = LayoutStyle.LIST,
    spacing: SpacingPreference = SpacingPreference.COMFORTABLE,
    average_text_length: float = 0.0,
) -> float:
    """
    Estimate schedule density

    Args:
        item_count: Number of schedule items
        active_elements: Number of visible schedule elements per item
        layout_style: Schedule layout
        spacing: Spacing preference
        average_text_length: Average trimmed length of schedule body text

    Returns:
        Density in [0, 1.7]
    """
    items = clamp(item_count, ITEM_COUNT_MIN, ITEM_COUNT_MAX)
    elements = clamp(active_elements, ACTIVE_ELEMENTS_MIN, ACTIVE_ELEMENTS_MAX)
    base_load = items * elements

    multiplier = density_multiplier(layout_style, spacing, average_text_length)
    return clamp((base_load * multiplier) / DENSITY_DIVISOR, DENSITY_MIN, DENSITY_MAX)
