"""
Story Card Smart Sizing Modules
"""

from .content_elements import (
    ElementId,
    ElementGroup,
    ElementStyle,
    ContentElementMeta,
    SizeLimits,
    SizingTables,
    CONTENT_ELEMENT_META,
    HERO_ELEMENT_IDS,
    SCHEDULE_ELEMENT_IDS,
    FOOTER_ELEMENT_IDS,
    build_initial_element_styles,
    build_sizing_tables,
)
from .layout_options import (
    LayoutStyle,
    SpacingPreference,
    StylePreferences,
    SmartSpacingScales,
    DEFAULT_SMART_SPACING,
)
from .schedule import Schedule, ScheduleItem
from .metrics import StoryMetrics, MetricsTracker
from .smart_sizing import SmartSizingEngine, SmartSizingResult, compute_smart_sizing

__all__ = [
    "ElementId",
    "ElementGroup",
    "ElementStyle",
    "ContentElementMeta",
    "SizeLimits",
    "SizingTables",
    "CONTENT_ELEMENT_META",
    "HERO_ELEMENT_IDS",
    "SCHEDULE_ELEMENT_IDS",
    "FOOTER_ELEMENT_IDS",
    "build_initial_element_styles",
    "build_sizing_tables",
    "LayoutStyle",
    "SpacingPreference",
    "StylePreferences",
    "SmartSpacingScales",
    "DEFAULT_SMART_SPACING",
    "Schedule",
    "ScheduleItem",
    "StoryMetrics",
    "MetricsTracker",
    "SmartSizingEngine",
    "SmartSizingResult",
    "compute_smart_sizing",
]
