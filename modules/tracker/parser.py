"""Tracker log parser.

Reads the weekly text format one line at a time:

    [monday 2020-07-13]
    * Vacation
    # Came back from Jämtland

    [tuesday 2020-07-14]
    * 08:32-12:02
    * VAB 13:00-17:00
    * 17:30-

Line shapes are tried in a fixed order; the first malformed line aborts
the parse with a FormatError.
"""
import re
from datetime import date, time
from typing import List

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


HEADER_RE = re.compile(r'^\[(\S+) (\d{4}-\d{2}-\d{2})\]$', re.ASCII)
# Anything ending in something time-like, in any script, is a shift and never
# a special day. Shift times themselves must be ASCII digits.
TIME_TAIL_RE = re.compile(r'\d+:\d+-(\d+:\d+)?$')
SPECIAL_DAY_RE = re.compile(r'^\* (.*\S.*)$')
CLOSED_SHIFT_RE = re.compile(r'^\* (\d{2}:\d{2})-(\d{2}:\d{2})$', re.ASCII)
OPEN_SHIFT_RE = re.compile(r'^\* (\d{2}:\d{2})-$', re.ASCII)
SPECIAL_SHIFT_RE = re.compile(r'^\* (\S(?:.*\S)?) (\d{2}:\d{2})-(\d{2}:\d{2})$', re.ASCII)


class FormatError(ValueError):
    """A line of the log could not be read."""

    def __init__(self, line_number: int, reason: str, line: str = ''):
        self.line_number = line_number
        self.reason = reason
        self.line = line
        super().__init__(f"line {line_number}: {reason}: {line!r}")


def _parse_time(token: str, line_number: int, raw: str) -> time:
    hours, minutes = token.split(':')
    hour, minute = int(hours), int(minutes)
    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        raise FormatError(line_number, f"time out of range '{token}'", raw)
    return time(hour, minute)


def _parse_header(match, line_number: int, raw: str) -> DayHeader:
    name, iso_date = match.groups()
    try:
        day = date.fromisoformat(iso_date)
    except ValueError:
        raise FormatError(line_number, f"invalid date '{iso_date}'", raw)
    expected = weekday_name(day)
    if name != expected:
        raise FormatError(
            line_number, f"{iso_date} is a {expected}, not a {name}", raw
        )
    return DayHeader(day)


def parse_line(raw: str, line_number: int) -> Line:
    """Parse one physical line; line_number is 1-based and used for errors."""
    if not raw.strip():
        return Blank()

    if raw.startswith('# '):
        return Comment(raw[2:])

    match = HEADER_RE.match(raw)
    if match:
        return _parse_header(match, line_number, raw)

    match = SPECIAL_DAY_RE.match(raw)
    if match:
        name = match.group(1).strip()
        if not TIME_TAIL_RE.search(name):
            return SpecialDay(name)

    match = CLOSED_SHIFT_RE.match(raw)
    if match:
        return ClosedShift(
            _parse_time(match.group(1), line_number, raw),
            _parse_time(match.group(2), line_number, raw),
        )

    match = OPEN_SHIFT_RE.match(raw)
    if match:
        return OpenShift(_parse_time(match.group(1), line_number, raw))

    match = SPECIAL_SHIFT_RE.match(raw)
    if match:
        name, start, end = match.groups()
        return SpecialShift(
            name,
            _parse_time(start, line_number, raw),
            _parse_time(end, line_number, raw),
        )

    raise FormatError(line_number, "unrecognized line", raw)


def split_lines(text: str) -> List[str]:
    """Physical lines of the text; a final newline ends the last line."""
    if not text:
        return []
    lines = text.split('\n')
    if text.endswith('\n'):
        lines.pop()
    return lines


def parse_document(text: str) -> Document:
    """Parse a whole log. Raises FormatError on the first bad line."""
    return Document(
        parse_line(raw, number)
        for number, raw in enumerate(split_lines(text), start=1)
    )
