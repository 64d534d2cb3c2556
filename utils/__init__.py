"""
Utility Functions
"""

from .number_utils import (
    clamp,
    round_half_up,
    round_to,
    is_finite_number,
)
from .text_utils import (
    trimmed_length,
    average_length,
)
from .exceptions import (
    StoryCardError,
    UnknownElementError,
    InvalidMetricsError,
)

__all__ = [
    "clamp",
    "round_half_up",
    "round_to",
    "is_finite_number",
    "trimmed_length",
    "average_length",
    "StoryCardError",
    "UnknownElementError",
    "InvalidMetricsError",
]
