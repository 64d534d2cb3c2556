"""
Smart Sizing Engine - Balance story card typography against the canvas

Wires density, pressure, spacing and group scales together and applies the
result to every text element. compute_smart_sizing() is pure: it performs no
I/O, keeps no state and never modifies its arguments, so it can run on every
edit or render tick.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, Mapping, Optional
from loguru import logger

from config import settings
from utils.number_utils import clamp, is_finite_number
from utils.text_utils import average_length, trimmed_length
from .content_elements import (
    DEFAULT_SIZING_TABLES,
    FOOTER_ELEMENT_IDS,
    HERO_ELEMENT_IDS,
    SCHEDULE_ELEMENT_IDS,
    ElementId,
    ElementStyle,
    SizingTables,
)
from .density import estimate_density
from .font_applier import apply_font_scale
from .group_scale import GroupScales, compute_group_scales
from .layout_options import DEFAULT_SMART_SPACING, SmartSpacingScales, StylePreferences
from .metrics import StoryMetrics
from .pressure import Pressure, compute_pressure
from .schedule import Schedule
from .spacing import compute_spacing_scales

SCALE_FACTOR_MIN = 0.72
SCALE_FACTOR_MAX = 1.12
DEFAULT_CANVAS_HEIGHT = 1920


@dataclass
class SmartSizingResult:
    """Output of one sizing pass"""
    element_styles: Dict[ElementId, ElementStyle] = field(default_factory=dict)
    spacing: SmartSpacingScales = DEFAULT_SMART_SPACING
    scale_factor: float = 1.0
    density: float = 0.0
    # Intermediate signals, kept for logging and diagnostics
    pressure: Pressure = field(default_factory=Pressure)
    group_scales: GroupScales = field(default_factory=GroupScales)


def hero_visibility(style: StylePreferences) -> Dict[ElementId, bool]:
    """Visibility flag of each hero element"""
    return {
        ElementId.HEADING: style.show_heading,
        ElementId.SUBTITLE: style.show_subtitle,
        ElementId.SCHEDULE_DATE: style.show_schedule_date,
    }


def active_schedule_elements(visible_elements: Iterable[ElementId]) -> int:
    """Number of distinct visible schedule elements"""
    return len({element_id for element_id in visible_elements if element_id in SCHEDULE_ELEMENT_IDS})


def canvas_scale_factor(metrics: Optional[StoryMetrics], canvas_height: float = DEFAULT_CANVAS_HEIGHT) -> float:
    """
    Overall zoom hint for fitting content to the canvas

    Args:
        metrics: Measured heights, or None
        canvas_height: Height assumed for both content and canvas without metrics

    Returns:
        available/content clamped to [0.72, 1.12]
    """
    if (
        metrics is not None
        and is_finite_number(metrics.available_height)
        and is_finite_number(metrics.content_height)
    ):
        available_height = metrics.available_height
        content_height = metrics.content_height
    else:
        available_height = content_height = canvas_height
    return clamp(available_height / max(content_height, 1), SCALE_FACTOR_MIN, SCALE_FACTOR_MAX)


def compute_smart_sizing(
    current_styles: Mapping[ElementId, ElementStyle],
    style: StylePreferences,
    visible_elements: Iterable[ElementId],
    schedule: Optional[Schedule] = None,
    metrics: Optional[StoryMetrics] = None,
    tables: SizingTables = DEFAULT_SIZING_TABLES,
    canvas_height: float = DEFAULT_CANVAS_HEIGHT,
) -> SmartSizingResult:
    """
    Compute font sizes, line heights and spacing for a story card

    Args:
        current_styles: Current style per element (missing entries use defaults)
        style: Layout/spacing preferences, visibility flags and hero text
        visible_elements: Elements currently shown on the card
        schedule: Schedule being rendered (None = no items)
        metrics: Heights measured from the previous render (None = neutral)
        tables: Element metadata and font size limits
        canvas_height: Canvas height used when metrics are absent

    Returns:
        SmartSizingResult with a fresh element style mapping
    """
    schedule = schedule or Schedule()
    next_styles: Dict[ElementId, ElementStyle] = dict(current_styles)

    hero_enabled = hero_visibility(style)
    hero_count = sum(1 for element_id in HERO_ELEMENT_IDS if hero_enabled[element_id])
    footer_enabled = style.show_footer

    average_body_length = average_length(schedule.body_text())
    density = estimate_density(
        item_count=len(schedule.items),
        active_elements=active_schedule_elements(visible_elements),
        layout_style=style.layout_style,
        spacing=style.spacing,
        average_text_length=average_body_length,
    )

    pressure = compute_pressure(metrics)
    spacing = compute_spacing_scales(pressure)
    scales = compute_group_scales(
        hero_enabled_count=hero_count,
        density=density,
        spacing=style.spacing,
        layout_style=style.layout_style,
        average_text_length=average_body_length,
        heading_length=trimmed_length(style.heading),
        subtitle_length=trimmed_length(style.subtitle),
        pressure=pressure,
    )

    for element_id in HERO_ELEMENT_IDS + SCHEDULE_ELEMENT_IDS + FOOTER_ELEMENT_IDS:
        if element_id in HERO_ELEMENT_IDS:
            preserve = not hero_enabled[element_id]
        elif element_id in FOOTER_ELEMENT_IDS:
            preserve = not footer_enabled
        else:
            preserve = False

        next_styles[element_id] = apply_font_scale(
            current_styles.get(element_id),
            tables.meta(element_id),
            tables.limits(element_id),
            scales.for_element(element_id),
            preserve_line_height=preserve,
        )

    return SmartSizingResult(
        element_styles=next_styles,
        spacing=spacing,
        scale_factor=canvas_scale_factor(metrics, canvas_height),
        density=density,
        pressure=pressure,
        group_scales=scales,
    )


class SmartSizingEngine:
    """
    Smart text sizing bound to one set of sizing tables

    Holds the read-only configuration (metadata, limits, canvas height) so
    callers only pass the content that changes between renders.
    """

    def __init__(
        self,
        tables: SizingTables = None,
        canvas_height: int = None,
        log_decisions: bool = None,
    ):
        """
        Initialize Smart Sizing Engine

        Args:
            tables: Element metadata and size limits (defaults to built-in tables)
            canvas_height: Canvas height in px (defaults to settings.CANVAS_HEIGHT)
            log_decisions: Debug-log every computation (defaults to settings)
        """
        self.tables = tables or DEFAULT_SIZING_TABLES
        self.canvas_height = canvas_height or settings.CANVAS_HEIGHT
        self.log_decisions = (
            settings.SMART_SIZING_LOG_DECISIONS if log_decisions is None else log_decisions
        )

        logger.info(f"SmartSizingEngine initialized (canvas height {self.canvas_height}px)")

    def compute(
        self,
        current_styles: Mapping[ElementId, ElementStyle],
        style: StylePreferences,
        visible_elements: Iterable[ElementId],
        schedule: Optional[Schedule] = None,
        metrics: Optional[StoryMetrics] = None,
    ) -> SmartSizingResult:
        """
        Run one sizing pass

        Args:
            current_styles: Current style per element
            style: Style preferences
            visible_elements: Visible elements
            schedule: Schedule being rendered
            metrics: Heights measured from the previous render

        Returns:
            SmartSizingResult
        """
        result = compute_smart_sizing(
            current_styles,
            style,
            list(visible_elements),
            schedule=schedule,
            metrics=metrics,
            tables=self.tables,
            canvas_height=self.canvas_height,
        )

        if self.log_decisions:
            scales = result.group_scales
            logger.debug(
                f"📐 Smart sizing: density={result.density:.3f} "
                f"pressure={result.pressure.ratio:.3f} "
                f"(overflow={result.pressure.overflow:.3f}, breathing={result.pressure.breathing:.3f}) "
                f"hero={scales.hero:.3f} schedule={scales.schedule:.3f} footer={scales.footer:.3f} "
                f"scale_factor={result.scale_factor:.3f}"
            )

        return result
