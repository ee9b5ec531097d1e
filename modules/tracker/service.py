"""
TRACKER SERVICE
===============
Operations on parsed tracker documents: clocking in and out, weekly
totals and consistency checks. Documents are never changed in place,
every operation returns a new one.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import List, Optional

from .document import (
    Blank,
    ClosedShift,
    DayHeader,
    Document,
    ENTRY_TYPES,
    Line,
    OpenShift,
    SpecialDay,
    SpecialShift,
)
from .serializer import format_time

logger = logging.getLogger(__name__)


class TrackerError(Exception):
    """Requested change does not fit the current log."""


@dataclass
class DayBlock:
    """A day header and the lines up to the next header."""
    date: date
    header_index: int
    lines: List[Line] = field(default_factory=list)

    @property
    def end_index(self) -> int:
        """Index just past the block's last line."""
        return self.header_index + 1 + len(self.lines)


@dataclass
class DaySummary:
    date: date
    worked_minutes: int = 0
    special_minutes: int = 0
    special_day: Optional[str] = None
    open_since: Optional[time] = None


@dataclass
class WeekSummary:
    days: List[DaySummary]
    target_minutes: int

    @property
    def worked_minutes(self) -> int:
        return sum(d.worked_minutes for d in self.days)

    @property
    def special_minutes(self) -> int:
        return sum(d.special_minutes for d in self.days)

    @property
    def balance_minutes(self) -> int:
        """Positive when ahead of target."""
        return self.worked_minutes + self.special_minutes - self.target_minutes


@dataclass
class ValidationIssue:
    line_number: int
    message: str

    def __str__(self) -> str:
        return f"line {self.line_number}: {self.message}"


def minutes_between(start: time, end: time) -> int:
    return (end.hour * 60 + end.minute) - (start.hour * 60 + start.minute)


def format_minutes(minutes: int) -> str:
    """Render a duration as H:MM, with a sign for negatives."""
    sign = '-' if minutes < 0 else ''
    hours, rest = divmod(abs(minutes), 60)
    return f"{sign}{hours}:{rest:02d}"


def day_blocks(document: Document) -> List[DayBlock]:
    """Group the document into day blocks. Lines before the first header are skipped."""
    blocks: List[DayBlock] = []
    for index, line in enumerate(document.lines):
        if isinstance(line, DayHeader):
            blocks.append(DayBlock(line.date, index))
        elif blocks:
            blocks[-1].lines.append(line)
    return blocks


def find_block(document: Document, day: date) -> Optional[DayBlock]:
    for block in day_blocks(document):
        if block.date == day:
            return block
    return None


def _truncate(when: datetime) -> time:
    return time(when.hour, when.minute)


def clock_in(document: Document, when: datetime) -> Document:
    """Add an open shift starting at `when` to that day's block."""
    lines = list(document.lines)
    start = _truncate(when)
    block = find_block(document, when.date())

    if block is None:
        position = len(lines)
        for other in day_blocks(document):
            if other.date > when.date():
                position = other.header_index
                break
        new_block: List[Line] = [DayHeader(when.date()), OpenShift(start), Blank()]
        if position > 0 and not isinstance(lines[position - 1], Blank):
            new_block.insert(0, Blank())
        lines[position:position] = new_block
        logger.debug(f"Added day block for {when.date()} at line {position + 1}")
        return Document(lines)

    for line in block.lines:
        if isinstance(line, OpenShift):
            raise TrackerError(
                f"Already clocked in on {block.date} since {format_time(line.start)}"
            )

    # Insert before the block's trailing blank lines
    position = block.end_index
    while position > block.header_index + 1 and isinstance(lines[position - 1], Blank):
        position -= 1
    lines.insert(position, OpenShift(start))
    logger.debug(f"Clocked in on {block.date} at {format_time(start)}")
    return Document(lines)


def clock_out(document: Document, when: datetime) -> Document:
    """Close the open shift of that day at `when`."""
    block = find_block(document, when.date())
    if block is None:
        raise TrackerError(f"No entries for {when.date()}")

    end = _truncate(when)
    for offset in range(len(block.lines) - 1, -1, -1):
        line = block.lines[offset]
        if isinstance(line, OpenShift):
            if end < line.start:
                raise TrackerError(
                    f"Cannot clock out at {format_time(end)}, "
                    f"shift started at {format_time(line.start)}"
                )
            lines = list(document.lines)
            lines[block.header_index + 1 + offset] = ClosedShift(line.start, end)
            logger.debug(f"Clocked out on {block.date} at {format_time(end)}")
            return Document(lines)

    raise TrackerError(f"Not clocked in on {when.date()}")


def summarize(
    document: Document,
    workday_hours: float,
    now: Optional[datetime] = None,
) -> WeekSummary:
    """
    Totals per day and for the whole document.

    Special days carry no target. A running shift counts up to `now`
    when `now` falls on the same day.
    """
    days = []
    target = 0
    for block in day_blocks(document):
        summary = DaySummary(block.date)
        for line in block.lines:
            if isinstance(line, ClosedShift):
                summary.worked_minutes += minutes_between(line.start, line.end)
            elif isinstance(line, SpecialShift):
                summary.special_minutes += minutes_between(line.start, line.end)
            elif isinstance(line, SpecialDay):
                summary.special_day = line.name
            elif isinstance(line, OpenShift):
                summary.open_since = line.start
                if now is not None and now.date() == block.date:
                    summary.worked_minutes += max(
                        0, minutes_between(line.start, _truncate(now))
                    )
        if summary.special_day is None:
            target += round(workday_hours * 60)
        days.append(summary)
    return WeekSummary(days=days, target_minutes=target)


def validate(document: Document) -> List[ValidationIssue]:
    """Checks the text format itself leaves to the caller."""
    issues: List[ValidationIssue] = []
    seen_dates = set()
    current: Optional[date] = None
    open_shift_line: Optional[int] = None

    for number, line in enumerate(document.lines, start=1):
        if isinstance(line, DayHeader):
            if line.date in seen_dates:
                issues.append(ValidationIssue(number, f"duplicate day {line.date}"))
            seen_dates.add(line.date)
            current = line.date
            open_shift_line = None
            continue

        if isinstance(line, ENTRY_TYPES) and current is None:
            issues.append(ValidationIssue(number, "entry before the first day header"))

        if isinstance(line, (ClosedShift, SpecialShift)):
            if line.end < line.start:
                issues.append(ValidationIssue(
                    number,
                    f"shift ends at {format_time(line.end)} "
                    f"before it starts at {format_time(line.start)}",
                ))
            if open_shift_line is not None:
                issues.append(ValidationIssue(
                    open_shift_line, "open shift is not the last shift of the day"
                ))
                open_shift_line = None
        elif isinstance(line, OpenShift):
            if open_shift_line is not None:
                issues.append(ValidationIssue(number, "more than one open shift in a day"))
            open_shift_line = number

    return issues
