"""
Unit Tests for Tracker Module - Parser
======================================
"""

import pytest
from datetime import date, time

from modules.tracker.document import (
    Blank,
    ClosedShift,
    Comment,
    DayHeader,
    Document,
    OpenShift,
    SpecialDay,
    SpecialShift,
)
from modules.tracker.parser import FormatError, parse_document, parse_line, split_lines


# ============================================================================
# Single Lines
# ============================================================================

class TestParseLine:
    """Each line shape maps to exactly one variant."""

    def test_empty_line_is_blank(self):
        assert parse_line("", 1) == Blank()

    def test_whitespace_line_is_blank(self):
        assert parse_line("   \t", 1) == Blank()

    def test_comment_keeps_text_verbatim(self):
        assert parse_line("# Came back from Jämtland", 1) == Comment("Came back from Jämtland")

    def test_comment_text_is_not_trimmed(self):
        assert parse_line("#  indented  ", 1) == Comment(" indented  ")

    def test_comment_looking_like_shift(self):
        assert parse_line("# * 08:00-09:00", 1) == Comment("* 08:00-09:00")

    def test_day_header(self):
        assert parse_line("[tuesday 2020-07-07]", 1) == DayHeader(date(2020, 7, 7))

    def test_special_day(self):
        assert parse_line("* Vacation", 1) == SpecialDay("Vacation")

    def test_special_day_name_is_trimmed(self):
        assert parse_line("* Public holiday  ", 1) == SpecialDay("Public holiday")

    def test_special_day_with_time_inside_name(self):
        """Only a trailing time range makes a shift."""
        assert parse_line("* Doctor at 08:00", 1) == SpecialDay("Doctor at 08:00")

    def test_closed_shift(self):
        assert parse_line("* 08:32-12:02", 1) == ClosedShift(time(8, 32), time(12, 2))

    def test_open_shift(self):
        assert parse_line("* 08:12-", 1) == OpenShift(time(8, 12))

    def test_special_shift(self):
        assert parse_line("* VAB 13:00-17:00", 1) == SpecialShift("VAB", time(13, 0), time(17, 0))

    def test_special_shift_name_with_spaces(self):
        line = parse_line("* Parental leave 13:00-17:00", 1)
        assert line == SpecialShift("Parental leave", time(13, 0), time(17, 0))

    def test_midnight_and_last_minute(self):
        assert parse_line("* 00:00-23:59", 1) == ClosedShift(time(0, 0), time(23, 59))


# ============================================================================
# Errors
# ============================================================================

class TestFormatErrors:
    """Malformed lines are reported, never guessed."""

    def test_weekday_mismatch(self):
        """2020-07-07 is a Tuesday."""
        with pytest.raises(FormatError) as exc_info:
            parse_document("[monday 2020-07-07]\n")
        assert exc_info.value.line_number == 1
        assert "tuesday" in exc_info.value.reason

    def test_weekday_is_case_sensitive(self):
        with pytest.raises(FormatError):
            parse_line("[Tuesday 2020-07-07]", 1)

    def test_invalid_calendar_date(self):
        with pytest.raises(FormatError, match="invalid date"):
            parse_line("[monday 2020-02-30]", 4)

    def test_header_must_close_line(self):
        with pytest.raises(FormatError, match="unrecognized line"):
            parse_line("[tuesday 2020-07-07] extra", 1)

    def test_unrecognized_line(self):
        with pytest.raises(FormatError) as exc_info:
            parse_document("??? garbage")
        error = exc_info.value
        assert error.line_number == 1
        assert error.reason == "unrecognized line"
        assert error.line == "??? garbage"
        assert str(error) == "line 1: unrecognized line: '??? garbage'"

    @pytest.mark.parametrize("raw", ["* 24:00-25:00", "* 08:60-09:00", "* 99:00-"])
    def test_time_out_of_range(self, raw):
        with pytest.raises(FormatError, match="out of range"):
            parse_line(raw, 1)

    def test_special_shift_out_of_range(self):
        with pytest.raises(FormatError, match="out of range"):
            parse_line("* VAB 13:00-24:30", 1)

    @pytest.mark.parametrize("raw", [
        "* 8:00-12:00",
        "* VAB 13:00-",
        "*Vacation",
        "#no space",
        "  * 08:00-12:00",
        "*",
        "* ",
    ])
    def test_malformed_lines(self, raw):
        with pytest.raises(FormatError):
            parse_line(raw, 1)

    @pytest.mark.parametrize("raw", [
        "* 08:32-12:02 ",
        "* 08:12- ",
        "* VAB 13:00-17:00 ",
        "* 08:32-12:02\t",
    ])
    def test_shift_with_trailing_whitespace_is_not_a_special_day(self, raw):
        with pytest.raises(FormatError, match="unrecognized line"):
            parse_line(raw, 1)

    def test_trailing_whitespace_shift_in_document(self):
        """A sloppy shift must not turn the day into a day off."""
        with pytest.raises(FormatError) as exc_info:
            parse_document("[tuesday 2020-07-14]\n* 08:00-16:00 \n")
        assert exc_info.value.line_number == 2

    @pytest.mark.parametrize("raw", [
        "* ٠٨:١٢-",
        "* ٠٨:٠٠-١٢:٠٠",
        "* VAB ١٣:٠٠-١٧:٠٠",
        "[tuesday ٢٠٢٠-٠٧-٠٧]",
    ])
    def test_non_ascii_digits_rejected(self, raw):
        with pytest.raises(FormatError):
            parse_line(raw, 1)

    @pytest.mark.parametrize("raw", [
        "* VAB  13:00-17:00",
        "* VAB\t13:00-17:00",
    ])
    def test_special_shift_needs_single_space(self, raw):
        with pytest.raises(FormatError):
            parse_line(raw, 1)

    def test_error_cites_offending_line(self):
        text = "[tuesday 2020-07-14]\n* 08:00-12:00\n* 8:00-\n* 13:00-14:00\n"
        with pytest.raises(FormatError) as exc_info:
            parse_document(text)
        assert exc_info.value.line_number == 3
        assert exc_info.value.line == "* 8:00-"


# ============================================================================
# Documents
# ============================================================================

class TestParseDocument:
    """Whole-text parsing."""

    def test_full_week(self, week_text, week_document):
        assert parse_document(week_text) == week_document

    def test_empty_text(self):
        assert parse_document("") == Document([])

    def test_final_newline_is_not_a_blank_line(self):
        assert parse_document("# a\n") == Document([Comment("a")])

    def test_missing_final_newline(self):
        assert parse_document("# a") == Document([Comment("a")])

    def test_trailing_blank_line(self):
        assert parse_document("# a\n\n") == Document([Comment("a"), Blank()])

    def test_shift_without_header_is_accepted(self):
        """Lines are context-free."""
        document = parse_document("* 08:00-09:00\n")
        assert document.lines == (ClosedShift(time(8, 0), time(9, 0)),)

    def test_split_lines(self):
        assert split_lines("a\n\nb\n") == ["a", "", "b"]
        assert split_lines("") == []
