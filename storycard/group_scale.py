"""
Group Scale Calculator - Font scale factors per element group

Every group combines the same signals (density, spacing preference, layout
style, text length, measured pressure) with its own sensitivity and range.
Hero text tolerates more variation than dense schedule rows.
"""

from dataclasses import dataclass

from utils.number_utils import clamp
from .content_elements import ElementId, ElementGroup, element_group
from .layout_options import LayoutStyle, SpacingPreference
from .pressure import Pressure

HERO_SCALE_RANGE = (0.82, 1.12)
HEADING_SCALE_RANGE = (0.8, 1.16)
SUBTITLE_SCALE_RANGE = (0.78, 1.08)
DATE_SCALE_RANGE = (0.7, 1.02)
SCHEDULE_SCALE_RANGE = (0.78, 1.08)
FOOTER_SCALE_RANGE = (0.82, 1.05)


@dataclass(frozen=True)
class GroupScales:
    """Scale factors for each group and each hero element"""
    hero: float = 1.0
    heading: float = 1.0
    subtitle: float = 1.0
    date: float = 1.0
    schedule: float = 1.0
    footer: float = 1.0

    def for_element(self, element_id: ElementId) -> float:
        """Scale that applies to a single element"""
        if element_id == ElementId.HEADING:
            return self.heading
        if element_id == ElementId.SUBTITLE:
            return self.subtitle
        if element_id == ElementId.SCHEDULE_DATE:
            return self.date
        if element_group(element_id) == ElementGroup.FOOTER:
            return self.footer
        return self.schedule


def heading_length_adjustment(length: int) -> float:
    if length > 36:
        return -0.10
    if length > 28:
        return -0.06
    if length > 18:
        return -0.03
    if length < 12:
        return 0.03
    return 0.0


def subtitle_length_adjustment(length: int) -> float:
    if length > 42:
        return -0.10
    if length > 30:
        return -0.06
    if length > 18:
        return -0.03
    if length < 10:
        return 0.04
    return 0.0


def hero_scale(
    enabled_count: int,
    density: float,
    spacing: SpacingPreference,
    layout_style: LayoutStyle,
    pressure: Pressure,
) -> float:
    """
    Shared scale of the hero block

    Fewer visible hero elements leave more room for each of them.

    Args:
        enabled_count: Number of visible hero elements (0-3)
        density: Schedule density
        spacing: Spacing preference
        layout_style: Schedule layout
        pressure: Overflow/breathing signals

    Returns:
        Hero scale in [0.82, 1.12]
    """
    if enabled_count <= 1:
        scale = 1.04
    elif enabled_count == 2:
        scale = 0.99
    else:
        scale = 0.94

    scale -= density * 0.06
    scale *= pressure.factor(shrink=0.08, floor=0.8, grow=0.05)

    if spacing == SpacingPreference.SPACIOUS:
        scale += 0.02
    elif spacing == SpacingPreference.COMPACT:
        scale -= 0.03
    if layout_style == LayoutStyle.GRID:
        scale -= 0.02

    return clamp(scale, *HERO_SCALE_RANGE)


def schedule_scale(
    density: float,
    spacing: SpacingPreference,
    layout_style: LayoutStyle,
    average_text_length: float,
    pressure: Pressure,
) -> float:
    """Scale of every schedule element, in [0.78, 1.08]"""
    scale = 1.02 - density * 0.16

    if spacing == SpacingPreference.SPACIOUS:
        scale += 0.04
    elif spacing == SpacingPreference.COMPACT:
        scale -= 0.05

    if layout_style == LayoutStyle.GRID:
        scale -= 0.05
    elif layout_style == LayoutStyle.CARD:
        scale -= 0.02

    if average_text_length > 28:
        scale -= 0.07
    elif average_text_length > 20:
        scale -= 0.04
    elif average_text_length < 12:
        scale += 0.04

    scale *= pressure.factor(shrink=0.14, floor=0.76, grow=0.04)
    return clamp(scale, *SCHEDULE_SCALE_RANGE)


def footer_scale(density: float, spacing: SpacingPreference, pressure: Pressure) -> float:
    """Scale of the footer, in [0.82, 1.05]"""
    scale = 0.96 - density * 0.05
    if spacing == SpacingPreference.SPACIOUS:
        scale += 0.03
    scale *= pressure.factor(shrink=0.10, floor=0.8, grow=0.04, cap=1.02)
    return clamp(scale, *FOOTER_SCALE_RANGE)


def compute_group_scales(
    hero_enabled_count: int,
    density: float,
    spacing: SpacingPreference,
    layout_style: LayoutStyle,
    average_text_length: float,
    heading_length: int,
    subtitle_length: int,
    pressure: Pressure,
) -> GroupScales:
    """
    Compute every group and hero element scale

    Args:
        hero_enabled_count: Number of visible hero elements
        density: Schedule density
        spacing: Spacing preference
        layout_style: Schedule layout
        average_text_length: Average schedule body text length
        heading_length: Trimmed heading length
        subtitle_length: Trimmed subtitle length
        pressure: Overflow/breathing signals

    Returns:
        GroupScales
    """
    hero = hero_scale(hero_enabled_count, density, spacing, layout_style, pressure)
    return GroupScales(
        hero=hero,
        heading=clamp(hero + heading_length_adjustment(heading_length), *HEADING_SCALE_RANGE),
        subtitle=clamp(hero + subtitle_length_adjustment(subtitle_length), *SUBTITLE_SCALE_RANGE),
        date=clamp(hero - 0.05, *DATE_SCALE_RANGE),
        schedule=schedule_scale(density, spacing, layout_style, average_text_length, pressure),
        footer=footer_scale(density, spacing, pressure),
    )
