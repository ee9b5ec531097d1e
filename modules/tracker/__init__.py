"""
Tracker Module
==============
Weekly time tracking log: a plain-text document of day headers, shifts,
special days and comments, with a parser and serializer that round-trip
exactly.

Usage:
    from modules.tracker import parse_document, write_document, default_document

    document = parse_document(path.read_text())
    path.write_text(write_document(document))

    # Fresh week
    template = default_document(date.today())
"""

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
)
from .parser import FormatError, parse_document, parse_line
from .serializer import default_document, render_line, write_document

__all__ = [
    "Blank",
    "ClosedShift",
    "Comment",
    "DayHeader",
    "Document",
    "Line",
    "OpenShift",
    "SpecialDay",
    "SpecialShift",
    "FormatError",
    "parse_document",
    "parse_line",
    "default_document",
    "render_line",
    "write_document",
]
