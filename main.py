"""
Story Card Smart Sizing - FastAPI Application
"""

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional
from dataclasses import asdict
from loguru import logger
import sys

from config import settings
from storycard import (
    CONTENT_ELEMENT_META,
    DEFAULT_SMART_SPACING,
    ElementId,
    ElementStyle,
    Schedule,
    ScheduleItem,
    SmartSizingEngine,
    StoryMetrics,
    StylePreferences,
    build_sizing_tables,
)
from storycard.content_elements import (
    DEFAULT_HIDDEN_ELEMENTS,
    DEFAULT_VISIBLE_ELEMENTS,
    ELEMENT_ORDER,
    FOOTER_ELEMENT_IDS,
    HERO_ELEMENT_IDS,
    SCHEDULE_ELEMENT_IDS,
)
from storycard.layout_options import (
    DEFAULT_LAYOUT_OPTIONS,
    DEFAULT_SPACING_OPTIONS,
    LayoutStyle,
    SpacingPreference,
)
from utils.exceptions import StoryCardError

# Create logs directory
settings.LOGS_DIR.mkdir(parents=True, exist_ok=True)

# Configure logging
logger.remove()
logger.add(sys.stderr, level=settings.LOG_LEVEL)
logger.add(
    settings.LOGS_DIR / settings.LOG_FILE,
    rotation=settings.LOG_ROTATION,
    retention=settings.LOG_RETENTION,
    level="DEBUG",
)

# Initialize FastAPI app
app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    description="Adaptive font sizing and spacing for schedule story cards"
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, replace with specific origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Default engine (built-in metadata tables)
engine = SmartSizingEngine()


# Request/Response Models
class ElementStyleModel(BaseModel):
    """Style of a single text element"""
    font_size: Optional[float] = Field(None, description="Font size in px")
    line_height: Optional[float] = Field(None, description="Unitless line height")
    font_weight: Optional[int] = None
    letter_spacing: Optional[float] = None
    color: Optional[str] = None


class ElementStyleResult(BaseModel):
    """Style of a single text element after sizing"""
    font_size: Optional[int] = Field(None, description="Font size in whole px")
    line_height: Optional[float] = Field(None, description="Unitless line height")
    font_weight: Optional[int] = None
    letter_spacing: Optional[float] = None
    color: Optional[str] = None


class StylePreferencesModel(BaseModel):
    """Sizing-relevant part of the story style"""
    heading: str = ""
    subtitle: str = ""
    show_heading: bool = True
    show_subtitle: bool = True
    show_schedule_date: bool = True
    show_footer: bool = True
    layout_style: LayoutStyle = LayoutStyle.LIST
    spacing: SpacingPreference = SpacingPreference.COMFORTABLE


class ScheduleItemModel(BaseModel):
    """One class on the schedule"""
    class_name: Optional[str] = None
    time: Optional[str] = None
    instructor: Optional[str] = None
    location: Optional[str] = None
    duration: Optional[str] = None
    description: Optional[str] = None


class ScheduleModel(BaseModel):
    """Schedule shown on the card"""
    date: Optional[str] = None
    items: List[ScheduleItemModel] = []


class StoryMetricsModel(BaseModel):
    """Heights measured from the previous render (px)"""
    content_height: float = Field(..., ge=0)
    available_height: float = Field(..., ge=0)
    hero_height: float = Field(0, ge=0)
    schedule_height: float = Field(0, ge=0)
    footer_height: float = Field(0, ge=0)
    item_count: int = Field(0, ge=0)


class SmartSizingRequest(BaseModel):
    """Request model for smart sizing"""
    current_styles: Dict[str, ElementStyleModel] = Field(
        default_factory=dict, description="Current style per element id (missing ids use defaults)"
    )
    style: StylePreferencesModel = Field(default_factory=StylePreferencesModel)
    visible_elements: List[str] = Field(
        default_factory=lambda: [e.value for e in DEFAULT_VISIBLE_ELEMENTS],
        description="Visible element ids"
    )
    schedule: Optional[ScheduleModel] = None
    metrics: Optional[StoryMetricsModel] = Field(None, description="Omit for a neutral (unmeasured) pass")
    element_meta: Optional[Dict[str, Dict[str, Any]]] = Field(
        None, description="Template overrides of element metadata, e.g. {'heading': {'default_font_size': 64}}"
    )


class SmartSizingResponse(BaseModel):
    """Response model for smart sizing"""
    element_styles: Dict[str, ElementStyleResult]
    spacing: Dict[str, float]
    scale_factor: float
    density: float


class StatusResponse(BaseModel):
    """Status response model"""
    status: str
    message: str


def _parse_styles(styles: Dict[str, ElementStyleModel]) -> Dict[ElementId, ElementStyle]:
    return {ElementId.parse(key): ElementStyle(**value.model_dump()) for key, value in styles.items()}


def _parse_schedule(schedule: Optional[ScheduleModel]) -> Optional[Schedule]:
    if schedule is None:
        return None
    return Schedule(
        items=[ScheduleItem(**item.model_dump()) for item in schedule.items],
        date=schedule.date,
    )


# API Endpoints
@app.get("/health", response_model=StatusResponse)
async def health():
    """Health check endpoint"""
    return StatusResponse(
        status="healthy",
        message="All systems operational"
    )


@app.get("/elements")
async def get_elements():
    """
    Get the content element table

    Returns the default metadata of every element, the hero/schedule/footer
    partition, and which schedule elements are visible by default.
    """
    return {
        "elements": {
            element_id.value: {**asdict(meta), "id": element_id.value, "group": meta.group.value}
            for element_id, meta in CONTENT_ELEMENT_META.items()
        },
        "groups": {
            "hero": [e.value for e in HERO_ELEMENT_IDS],
            "schedule": [e.value for e in SCHEDULE_ELEMENT_IDS],
            "footer": [e.value for e in FOOTER_ELEMENT_IDS],
        },
        "element_order": [e.value for e in ELEMENT_ORDER],
        "default_visible": [e.value for e in DEFAULT_VISIBLE_ELEMENTS],
        "default_hidden": [e.value for e in DEFAULT_HIDDEN_ELEMENTS],
    }


@app.get("/layout-options")
async def get_layout_options():
    """Get spacing and layout choices plus the default smart spacing"""
    return {
        "spacing_options": [
            {"id": option.id.value, "label": option.label, "description": option.description}
            for option in DEFAULT_SPACING_OPTIONS
        ],
        "layout_options": [
            {"id": option.id.value, "label": option.label, "icon": option.icon}
            for option in DEFAULT_LAYOUT_OPTIONS
        ],
        "default_spacing": DEFAULT_SMART_SPACING.to_dict(),
    }


@app.post("/smart-sizing", response_model=SmartSizingResponse)
async def smart_sizing(request: SmartSizingRequest):
    """
    Compute balanced font sizes, line heights and spacing

    Args:
        request: Current styles, preferences, schedule and optional metrics

    Returns:
        Updated element styles, spacing multipliers, scale factor and density
    """
    try:
        current_styles = _parse_styles(request.current_styles)
        visible_elements = [ElementId.parse(value) for value in request.visible_elements]
        metrics = StoryMetrics.from_dict(request.metrics.model_dump()) if request.metrics else None

        sizing_engine = engine
        if request.element_meta:
            sizing_engine = SmartSizingEngine(tables=build_sizing_tables(request.element_meta))
    except StoryCardError as e:
        logger.warning(f"⚠️ Rejected smart sizing request: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    result = sizing_engine.compute(
        current_styles,
        StylePreferences(**request.style.model_dump()),
        visible_elements,
        schedule=_parse_schedule(request.schedule),
        metrics=metrics,
    )

    return SmartSizingResponse(
        element_styles={
            element_id.value: ElementStyleResult(**asdict(element_style))
            for element_id, element_style in result.element_styles.items()
        },
        spacing=result.spacing.to_dict(),
        scale_factor=result.scale_factor,
        density=result.density,
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=True
    )
