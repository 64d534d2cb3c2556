"""
Content Elements - Metadata table for every text element on a story card
"""

from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Dict, Mapping, Optional, Tuple
from loguru import logger

from utils.exceptions import StoryCardError, UnknownElementError
from utils.number_utils import is_finite_number


class ElementGroup(str, Enum):
    """Semantic group an element is sized with"""
    HERO = "hero"
    SCHEDULE = "schedule"
    FOOTER = "footer"


class ElementId(str, Enum):
    """Renderable text elements (values are the wire identifiers)"""
    HEADING = "heading"
    SUBTITLE = "subtitle"
    SCHEDULE_DATE = "scheduleDate"
    CLASS_NAME = "className"
    TIME = "time"
    INSTRUCTOR = "instructor"
    LOCATION = "location"
    DURATION = "duration"
    DESCRIPTION = "description"
    FOOTER = "footer"

    @classmethod
    def parse(cls, value) -> "ElementId":
        """
        Parse a wire identifier into an ElementId

        Args:
            value: ElementId or its string value

        Returns:
            Matching ElementId

        Raises:
            UnknownElementError: if the value is not a known element
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnknownElementError(str(value), [e.value for e in cls]) from None


HERO_ELEMENT_IDS: Tuple[ElementId, ...] = (
    ElementId.HEADING,
    ElementId.SUBTITLE,
    ElementId.SCHEDULE_DATE,
)

SCHEDULE_ELEMENT_IDS: Tuple[ElementId, ...] = (
    ElementId.CLASS_NAME,
    ElementId.INSTRUCTOR,
    ElementId.TIME,
    ElementId.LOCATION,
    ElementId.DURATION,
    ElementId.DESCRIPTION,
)

FOOTER_ELEMENT_IDS: Tuple[ElementId, ...] = (ElementId.FOOTER,)

# Schedule rows render in this order by default
ELEMENT_ORDER: Tuple[ElementId, ...] = SCHEDULE_ELEMENT_IDS

DEFAULT_VISIBLE_ELEMENTS: Tuple[ElementId, ...] = (
    ElementId.CLASS_NAME,
    ElementId.INSTRUCTOR,
    ElementId.TIME,
    ElementId.LOCATION,
)

DEFAULT_HIDDEN_ELEMENTS: Tuple[ElementId, ...] = (
    ElementId.DURATION,
    ElementId.DESCRIPTION,
)


def element_group(element_id: ElementId) -> ElementGroup:
    """Return the semantic group of an element"""
    if element_id in HERO_ELEMENT_IDS:
        return ElementGroup.HERO
    if element_id in FOOTER_ELEMENT_IDS:
        return ElementGroup.FOOTER
    return ElementGroup.SCHEDULE


@dataclass(frozen=True)
class ContentElementMeta:
    """Default typography and display info for one element"""
    id: ElementId
    label: str
    description: str
    default_font_size: float
    default_line_height: float
    default_font_weight: int = 500
    default_letter_spacing: float = 0.0
    default_color: str = "#F8FAFC"
    schedule_field: Optional[str] = None  # ScheduleItem attribute this element displays

    @property
    def group(self) -> ElementGroup:
        return element_group(self.id)

    def default_style(self) -> "ElementStyle":
        return ElementStyle(
            font_size=self.default_font_size,
            line_height=self.default_line_height,
            font_weight=self.default_font_weight,
            letter_spacing=self.default_letter_spacing,
            color=self.default_color,
        )


@dataclass
class ElementStyle:
    """Per-element style as applied by the renderer"""
    font_size: Optional[float] = None
    line_height: Optional[float] = None
    font_weight: Optional[int] = None
    letter_spacing: Optional[float] = None
    color: Optional[str] = None


@dataclass(frozen=True)
class SizeLimits:
    """Inclusive font size bounds in px"""
    min: float
    max: float


CONTENT_ELEMENT_META: Dict[ElementId, ContentElementMeta] = {
    ElementId.HEADING: ContentElementMeta(
        id=ElementId.HEADING,
        label="Heading",
        description="Main story title.",
        default_font_size=56,
        default_line_height=1.1,
        default_font_weight=900,
    ),
    ElementId.SUBTITLE: ContentElementMeta(
        id=ElementId.SUBTITLE,
        label="Subtitle",
        description="Supporting line under the heading.",
        default_font_size=28,
        default_line_height=1.25,
        default_font_weight=500,
        default_color="#E2E8F0",
    ),
    ElementId.SCHEDULE_DATE: ContentElementMeta(
        id=ElementId.SCHEDULE_DATE,
        label="Schedule Date",
        description="Date the schedule applies to.",
        default_font_size=20,
        default_line_height=1.2,
        default_font_weight=600,
        default_letter_spacing=0.5,
        default_color="#CBD5E1",
        schedule_field="date",
    ),
    ElementId.CLASS_NAME: ContentElementMeta(
        id=ElementId.CLASS_NAME,
        label="Class Name",
        description="Primary title for each class block.",
        default_font_size=18,
        default_line_height=1.2,
        default_font_weight=700,
        schedule_field="class_name",
    ),
    ElementId.INSTRUCTOR: ContentElementMeta(
        id=ElementId.INSTRUCTOR,
        label="Instructor",
        description="Coach or instructor attribution.",
        default_font_size=14,
        default_line_height=1.35,
        default_font_weight=500,
        default_color="#CBD5E1",
        schedule_field="instructor",
    ),
    ElementId.TIME: ContentElementMeta(
        id=ElementId.TIME,
        label="Time",
        description="Class start time badge.",
        default_font_size=16,
        default_line_height=1.1,
        default_font_weight=600,
        default_letter_spacing=0.5,
        default_color="#FFFFFF",
        schedule_field="time",
    ),
    ElementId.LOCATION: ContentElementMeta(
        id=ElementId.LOCATION,
        label="Room / Location",
        description="Where the class meets.",
        default_font_size=13,
        default_line_height=1.3,
        default_color="#94A3B8",
        schedule_field="location",
    ),
    ElementId.DURATION: ContentElementMeta(
        id=ElementId.DURATION,
        label="Duration",
        description="Length of class time.",
        default_font_size=13,
        default_line_height=1.3,
        default_color="#94A3B8",
        schedule_field="duration",
    ),
    ElementId.DESCRIPTION: ContentElementMeta(
        id=ElementId.DESCRIPTION,
        label="Description",
        description="Optional supporting blurb.",
        default_font_size=13,
        default_line_height=1.35,
        default_font_weight=400,
        default_color="#94A3B8",
        schedule_field="description",
    ),
    ElementId.FOOTER: ContentElementMeta(
        id=ElementId.FOOTER,
        label="Footer",
        description="Closing line or call to action.",
        default_font_size=18,
        default_line_height=1.3,
        default_color="#CBD5E1",
    ),
}

ELEMENT_SIZE_LIMITS: Dict[ElementId, SizeLimits] = {
    ElementId.HEADING: SizeLimits(34, 76),
    ElementId.SUBTITLE: SizeLimits(20, 44),
    ElementId.SCHEDULE_DATE: SizeLimits(16, 30),
    ElementId.FOOTER: SizeLimits(16, 28),
    ElementId.CLASS_NAME: SizeLimits(20, 34),
    ElementId.TIME: SizeLimits(18, 30),
    ElementId.INSTRUCTOR: SizeLimits(16, 26),
    ElementId.LOCATION: SizeLimits(15, 24),
    ElementId.DURATION: SizeLimits(15, 24),
    ElementId.DESCRIPTION: SizeLimits(15, 24),
}

# Used when an injected limits table has no entry for an element
FALLBACK_SIZE_LIMITS: Dict[ElementId, SizeLimits] = {
    ElementId.HEADING: SizeLimits(28, 68),
    ElementId.SUBTITLE: SizeLimits(12, 40),
    ElementId.SCHEDULE_DATE: SizeLimits(12, 26),
    ElementId.CLASS_NAME: SizeLimits(16, 30),
    ElementId.TIME: SizeLimits(11, 26),
    ElementId.INSTRUCTOR: SizeLimits(11, 22),
    ElementId.LOCATION: SizeLimits(11, 22),
    ElementId.DURATION: SizeLimits(11, 22),
    ElementId.DESCRIPTION: SizeLimits(11, 22),
    ElementId.FOOTER: SizeLimits(12, 26),
}


@dataclass(frozen=True)
class SizingTables:
    """
    Read-only configuration the sizing engine is computed against

    Holds the metadata table and the font size limits so alternative
    templates (or tests) can inject their own without touching module state.
    """
    element_meta: Mapping[ElementId, ContentElementMeta] = field(
        default_factory=lambda: dict(CONTENT_ELEMENT_META)
    )
    size_limits: Mapping[ElementId, SizeLimits] = field(
        default_factory=lambda: dict(ELEMENT_SIZE_LIMITS)
    )

    def meta(self, element_id: ElementId) -> ContentElementMeta:
        return self.element_meta.get(element_id) or CONTENT_ELEMENT_META[element_id]

    def limits(self, element_id: ElementId) -> SizeLimits:
        return self.size_limits.get(element_id) or FALLBACK_SIZE_LIMITS[element_id]


DEFAULT_SIZING_TABLES = SizingTables()


def get_default_element_style(
    element_id: ElementId,
    meta: Optional[Mapping[ElementId, ContentElementMeta]] = None,
) -> ElementStyle:
    """
    Build the default style of an element from its metadata

    Args:
        element_id: Element to build the style for
        meta: Metadata table (defaults to CONTENT_ELEMENT_META)

    Returns:
        Fresh ElementStyle
    """
    table = meta or CONTENT_ELEMENT_META
    entry = table.get(element_id) or CONTENT_ELEMENT_META[element_id]
    return entry.default_style()


def build_initial_element_styles(
    meta: Optional[Mapping[ElementId, ContentElementMeta]] = None,
) -> Dict[ElementId, ElementStyle]:
    """Default style for every element, keyed by ElementId"""
    return {element_id: get_default_element_style(element_id, meta) for element_id in ElementId}


POSITIVE_META_FIELDS = ("default_font_size", "default_line_height")
TEXT_META_FIELDS = ("label", "description", "default_color")


def _check_meta_value(element_id: ElementId, name: str, value) -> None:
    if name in POSITIVE_META_FIELDS:
        valid = is_finite_number(value) and value > 0
    elif name == "default_font_weight":
        valid = is_finite_number(value) and value > 0 and float(value).is_integer()
    elif name == "default_letter_spacing":
        valid = is_finite_number(value)
    elif name in TEXT_META_FIELDS:
        valid = isinstance(value, str)
    else:
        valid = value is None or isinstance(value, str)

    if not valid:
        raise StoryCardError(f"Invalid metadata value for {element_id.value}.{name}: {value!r}")


def resolve_element_meta(
    overrides: Optional[Mapping[str, Mapping]] = None,
) -> Dict[ElementId, ContentElementMeta]:
    """
    Merge template metadata overrides over the default element table

    Args:
        overrides: {element_id: {field: value}} partial metadata per element,
            e.g. {"heading": {"default_font_size": 64}}

    Returns:
        Fresh metadata table keyed by ElementId

    Raises:
        UnknownElementError: if an override names an unknown element
        StoryCardError: if an override names an unknown metadata field or
            carries an unusable value (non-numeric, non-positive size)
    """
    merged: Dict[ElementId, ContentElementMeta] = dict(CONTENT_ELEMENT_META)
    allowed = {f.name for f in fields(ContentElementMeta)} - {"id"}

    for raw_id, values in (overrides or {}).items():
        element_id = ElementId.parse(raw_id)
        if not values:
            continue
        unknown = set(values) - allowed
        if unknown:
            raise StoryCardError(
                f"Unknown metadata field(s) for {element_id.value}: {', '.join(sorted(unknown))}"
            )
        for name, value in values.items():
            _check_meta_value(element_id, name, value)
        merged[element_id] = replace(merged[element_id], **dict(values))
        logger.debug(f"Element meta override for {element_id.value}: {dict(values)}")

    return merged


def build_sizing_tables(
    meta_overrides: Optional[Mapping[str, Mapping]] = None,
    size_limits: Optional[Mapping[ElementId, SizeLimits]] = None,
) -> SizingTables:
    """SizingTables for a template: default table plus its overrides"""
    if not meta_overrides and size_limits is None:
        return DEFAULT_SIZING_TABLES
    return SizingTables(
        element_meta=resolve_element_meta(meta_overrides),
        size_limits=dict(size_limits if size_limits is not None else ELEMENT_SIZE_LIMITS),
    )
