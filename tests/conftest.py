import os
import sys

import pytest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from storycard import (  # noqa: E402
    Schedule,
    ScheduleItem,
    StylePreferences,
    build_initial_element_styles,
)
from storycard.content_elements import SCHEDULE_ELEMENT_IDS  # noqa: E402


def make_schedule(count: int, text: str = "x" * 15) -> Schedule:
    """Schedule whose body text fields all have the given text"""
    return Schedule(
        items=[
            ScheduleItem(
                class_name=text,
                time="6:00 AM",
                instructor=text,
                location=text,
                duration="45 min",
                description=text,
            )
            for _ in range(count)
        ],
        date="Friday",
    )


@pytest.fixture
def schedule():
    return make_schedule(5)


@pytest.fixture
def style():
    return StylePreferences(heading="Weekly Schedule", subtitle="Book in the app")


@pytest.fixture
def initial_styles():
    return build_initial_element_styles()


@pytest.fixture
def all_schedule_elements():
    return list(SCHEDULE_ELEMENT_IDS)


@pytest.fixture
def schedule_factory():
    return make_schedule
