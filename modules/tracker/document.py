"""Tracker document model.

A document is one week of the time log, kept as the ordered lines of the
text file. Each line variant is a frozen dataclass so equality is
structural.
"""
from dataclasses import dataclass
from datetime import date, time
from typing import Tuple, Union


WEEKDAYS = (
    'monday', 'tuesday', 'wednesday', 'thursday', 'friday', 'saturday', 'sunday'
)


def weekday_name(day: date) -> str:
    """Lowercase English weekday name, independent of locale."""
    return WEEKDAYS[day.weekday()]


@dataclass(frozen=True)
class DayHeader:
    """Start of a day's entries."""
    date: date


@dataclass(frozen=True)
class SpecialDay:
    """Whole day off work, e.g. 'Vacation'."""
    name: str


@dataclass(frozen=True)
class ClosedShift:
    start: time
    end: time


@dataclass(frozen=True)
class OpenShift:
    """Shift in progress (clocked in, not yet out)."""
    start: time


@dataclass(frozen=True)
class SpecialShift:
    """Interval booked on a non-work category, e.g. 'VAB'."""
    name: str
    start: time
    end: time


@dataclass(frozen=True)
class Comment:
    text: str


@dataclass(frozen=True)
class Blank:
    pass


Line = Union[DayHeader, SpecialDay, ClosedShift, OpenShift, SpecialShift, Comment, Blank]

# Lines that only make sense inside a day block
ENTRY_TYPES = (SpecialDay, ClosedShift, OpenShift, SpecialShift)


@dataclass(frozen=True)
class Document:
    """Ordered lines of one log file."""
    lines: Tuple[Line, ...] = ()

    def __post_init__(self):
        # Accept any iterable, store a tuple so the document stays hashable
        object.__setattr__(self, 'lines', tuple(self.lines))

    def __iter__(self):
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)
