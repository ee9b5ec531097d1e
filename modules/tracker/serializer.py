"""Tracker log serializer and weekly template."""
from datetime import date, time, timedelta

from .document import (
    Blank,
    ClosedShift,
    Comment,
    DayHeader,
    Document,
    Line,
    OpenShift,
    SpecialDay,
    SpecialShift,
    weekday_name,
)


WORKDAYS_PER_WEEK = 5


def format_time(value: time) -> str:
    """HH:MM; the log is minute-precision, seconds are dropped."""
    return f"{value.hour:02d}:{value.minute:02d}"


def render_line(line: Line) -> str:
    """Canonical text of a single line, without the newline."""
    if isinstance(line, DayHeader):
        return f"[{weekday_name(line.date)} {line.date.isoformat()}]"
    if isinstance(line, SpecialDay):
        return f"* {line.name}"
    if isinstance(line, ClosedShift):
        return f"* {format_time(line.start)}-{format_time(line.end)}"
    if isinstance(line, OpenShift):
        return f"* {format_time(line.start)}-"
    if isinstance(line, SpecialShift):
        return f"* {line.name} {format_time(line.start)}-{format_time(line.end)}"
    if isinstance(line, Comment):
        return f"# {line.text}"
    if isinstance(line, Blank):
        return ""
    raise TypeError(f"Not a tracker line: {line!r}")


def write_document(document: Document) -> str:
    """Render a document; every line, the last included, ends with a newline."""
    return "".join(render_line(line) + "\n" for line in document)


def monday_of(day: date) -> date:
    return day - timedelta(days=day.weekday())


def default_document(reference_date: date) -> Document:
    """
    Empty template for the week containing reference_date.

    One header and one blank line for each day Monday through Friday.
    """
    monday = monday_of(reference_date)
    lines = []
    for offset in range(WORKDAYS_PER_WEEK):
        lines.append(DayHeader(monday + timedelta(days=offset)))
        lines.append(Blank())
    return Document(lines)
