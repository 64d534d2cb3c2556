"""
Custom exceptions for Story Card Smart Sizing
"""

from typing import Iterable


class StoryCardError(Exception):
    """Base class for errors raised at the story card input boundary."""


class UnknownElementError(StoryCardError):
    """
    Raised when an element identifier is not part of the content element table.

    The sizing engine itself never raises this; it is raised while parsing
    caller input (API payloads, metadata overrides) so that the engine only
    ever sees known identifiers.
    """

    def __init__(self, element_id: str, known: Iterable[str] = (), message: str = None):
        self.element_id = element_id
        self.known = list(known)
        self.message = message or f"Unknown content element: '{element_id}'"
        super().__init__(self.message)


class InvalidMetricsError(StoryCardError):
    """Raised when measured story metrics contain negative or non-finite heights."""

    def __init__(self, field: str, value: float, message: str = None):
        self.field = field
        self.value = value
        self.message = message or f"Invalid metrics value for {field}: {value}"
        super().__init__(self.message)
