"""
Schedule data read by the sizing engine
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class ScheduleItem:
    """One class row on the story card"""
    class_name: Optional[str] = None
    time: Optional[str] = None
    instructor: Optional[str] = None
    location: Optional[str] = None
    duration: Optional[str] = None
    description: Optional[str] = None


@dataclass
class Schedule:
    """Ordered schedule items plus the date they apply to"""
    items: List[ScheduleItem] = field(default_factory=list)
    date: Optional[str] = None

    def body_text(self) -> List[Optional[str]]:
        """
        Text that determines how heavy the schedule reads

        Class names, instructors, locations and descriptions of every item.
        Times and durations are short fixed-format values and are left out.
        """
        values: List[Optional[str]] = []
        values.extend(item.class_name for item in self.items)
        values.extend(item.instructor for item in self.items)
        values.extend(item.location for item in self.items)
        values.extend(item.description for item in self.items)
        return values
