"""
Font Applier - Apply a scale factor to an element's font size and line height
"""

from dataclasses import replace
from typing import Dict, Optional, Tuple

from utils.number_utils import clamp, is_finite_number, round_half_up, round_to
from .content_elements import ContentElementMeta, ElementGroup, ElementStyle, SizeLimits

LINE_HEIGHT_RANGES: Dict[ElementGroup, Tuple[float, float]] = {
    ElementGroup.HERO: (1.05, 1.4),
    ElementGroup.SCHEDULE: (1.1, 1.6),
    ElementGroup.FOOTER: (1.1, 1.5),
}

LINE_HEIGHT_GROW_RATE = 0.12
LINE_HEIGHT_SHRINK_RATE = 0.45


def scale_font_size(base_font_size: float, scale: float, limits: SizeLimits) -> int:
    """
    Scale a font size and clamp it to the element's limits

    Args:
        base_font_size: Current (or default) font size in px
        scale: Scale factor
        limits: Inclusive px bounds

    Returns:
        Rounded font size in px
    """
    return round_half_up(clamp(base_font_size * scale, limits.min, limits.max))


def scale_line_height(base_line_height: float, scale: float, line_height_range: Tuple[float, float]) -> float:
    """
    Scale a line height with the font

    Leading shrinks faster than it grows: tight leading stays readable at
    small sizes, loose leading at large sizes does not.

    Args:
        base_line_height: Current (or default) unitless line height
        scale: Font scale factor
        line_height_range: Inclusive (min, max) for the element's group

    Returns:
        Line height rounded to 2 decimals
    """
    delta = scale - 1
    rate = LINE_HEIGHT_GROW_RATE if delta >= 0 else LINE_HEIGHT_SHRINK_RATE
    factor = 1 + delta * rate
    return clamp(round_to(base_line_height * factor, 2), *line_height_range)


def apply_font_scale(
    existing: Optional[ElementStyle],
    meta: ContentElementMeta,
    limits: SizeLimits,
    scale: float,
    preserve_line_height: bool = False,
) -> ElementStyle:
    """
    Build the rescaled style of one element

    The element's current style is the basis; missing or unusable values
    fall back to the metadata defaults. The input style is never modified.

    Args:
        existing: Current style, or None
        meta: Element metadata
        limits: Font size bounds
        scale: Scale factor for this element
        preserve_line_height: Keep the current line height (hidden elements);
            a non-finite one still falls back to the default

    Returns:
        New ElementStyle
    """
    if existing is None:
        existing = meta.default_style()

    base_font_size = existing.font_size if is_finite_number(existing.font_size) else meta.default_font_size
    font_size = scale_font_size(base_font_size, scale, limits)

    base_line_height = (
        existing.line_height if is_finite_number(existing.line_height) else meta.default_line_height
    )
    if preserve_line_height:
        line_height = None if existing.line_height is None else base_line_height
    else:
        line_height = scale_line_height(base_line_height, scale, LINE_HEIGHT_RANGES[meta.group])

    return replace(existing, font_size=font_size, line_height=line_height)
