"""
Layout Options - Layout/spacing choices, style preferences and spacing scales
"""

from dataclasses import asdict, dataclass, fields, replace
from enum import Enum
from typing import Dict, List


class LayoutStyle(str, Enum):
    LIST = "list"
    GRID = "grid"
    CARD = "card"


class SpacingPreference(str, Enum):
    COMPACT = "compact"
    COMFORTABLE = "comfortable"
    SPACIOUS = "spacious"


@dataclass(frozen=True)
class SpacingOption:
    id: SpacingPreference
    label: str
    description: str


@dataclass(frozen=True)
class LayoutStyleOption:
    id: LayoutStyle
    label: str
    icon: str


DEFAULT_SPACING_OPTIONS: List[SpacingOption] = [
    SpacingOption(SpacingPreference.COMPACT, "Compact", "Tighter spacing for dense schedules"),
    SpacingOption(SpacingPreference.COMFORTABLE, "Comfortable", "Balanced spacing for most templates"),
    SpacingOption(SpacingPreference.SPACIOUS, "Spacious", "Generous spacing with more breathing room"),
]

DEFAULT_LAYOUT_OPTIONS: List[LayoutStyleOption] = [
    LayoutStyleOption(LayoutStyle.GRID, "Grid", "▦"),
    LayoutStyleOption(LayoutStyle.LIST, "List", "☰"),
    LayoutStyleOption(LayoutStyle.CARD, "Card", "▢"),
]


@dataclass
class StylePreferences:
    """
    The part of a story style that affects sizing

    Heading/subtitle text is only used for its length.
    """
    heading: str = ""
    subtitle: str = ""
    show_heading: bool = True
    show_subtitle: bool = True
    show_schedule_date: bool = True
    show_footer: bool = True
    layout_style: LayoutStyle = LayoutStyle.LIST
    spacing: SpacingPreference = SpacingPreference.COMFORTABLE


@dataclass(frozen=True)
class SmartSpacingScales:
    """Multipliers applied by the renderer to its base gaps/paddings"""
    hero_gap: float = 1.0
    schedule_gap: float = 1.0
    card_padding: float = 1.0
    footer_gap: float = 1.0
    time_padding: float = 1.0
    logo_padding: float = 1.0

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


DEFAULT_SMART_SPACING = SmartSpacingScales()


def scaled_spacing(base: SmartSpacingScales = DEFAULT_SMART_SPACING, **factors: float) -> SmartSpacingScales:
    """
    Derive a template's default spacing by multiplying selected scales

    Example:
        scaled_spacing(schedule_gap=1.12, card_padding=1.08)

    Args:
        base: Spacing to start from
        **factors: Multiplier per SmartSpacingScales field

    Returns:
        New SmartSpacingScales

    Raises:
        ValueError: if a factor names an unknown spacing field
    """
    known = {f.name for f in fields(SmartSpacingScales)}
    unknown = set(factors) - known
    if unknown:
        raise ValueError(f"Unknown spacing field(s): {', '.join(sorted(unknown))}")
    return replace(base, **{name: getattr(base, name) * factor for name, factor in factors.items()})
