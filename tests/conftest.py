"""
Tracker Test Configuration

Shared fixtures for all tests.
"""
import os
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


# =============================================================================
# FIXTURES: Sample Data
# =============================================================================

WEEK_TEXT = """\
[monday 2020-07-13]
* Vacation
# Came back from Jämtland

[tuesday 2020-07-14]
* 08:32-12:02
* 12:30-13:01
* 13:45-18:03

[wednesday 2020-07-15]
* 11:00-18:00

[thursday 2020-07-16]
* 08:00-12:00
* VAB 13:00-17:00

[friday 2020-07-17]
* 08:12-
"""

WEEK_DOCUMENT = Document([
    DayHeader(date(2020, 7, 13)),
    SpecialDay("Vacation"),
    Comment("Came back from Jämtland"),
    Blank(),
    DayHeader(date(2020, 7, 14)),
    ClosedShift(time(8, 32), time(12, 2)),
    ClosedShift(time(12, 30), time(13, 1)),
    ClosedShift(time(13, 45), time(18, 3)),
    Blank(),
    DayHeader(date(2020, 7, 15)),
    ClosedShift(time(11, 0), time(18, 0)),
    Blank(),
    DayHeader(date(2020, 7, 16)),
    ClosedShift(time(8, 0), time(12, 0)),
    SpecialShift("VAB", time(13, 0), time(17, 0)),
    Blank(),
    DayHeader(date(2020, 7, 17)),
    OpenShift(time(8, 12)),
])

TEMPLATE_TEXT = """\
[monday 2020-07-06]

[tuesday 2020-07-07]

[wednesday 2020-07-08]

[thursday 2020-07-09]

[friday 2020-07-10]

"""


@pytest.fixture
def week_text() -> str:
    """Full week log as stored on disk."""
    return WEEK_TEXT


@pytest.fixture
def week_document() -> Document:
    """The parsed form of week_text."""
    return WEEK_DOCUMENT


@pytest.fixture
def template_text() -> str:
    """Empty template for the week of 2020-07-06."""
    return TEMPLATE_TEXT


# =============================================================================
# FIXTURES: Environment
# =============================================================================

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's own tracker settings out of the tests."""
    for key in list(os.environ):
        if key.startswith("TRACKER__"):
            monkeypatch.delenv(key)
    monkeypatch.delenv("TRACKER_CONFIG_PATH", raising=False)
    monkeypatch.delenv("DEBUG", raising=False)
    yield


@pytest.fixture
def data_dir(tmp_path):
    """Empty tracker data directory."""
    path = tmp_path / "tracker"
    path.mkdir()
    return path


@pytest.fixture
def config_file(tmp_path, data_dir):
    """Tracker config pointing at data_dir."""
    config = tmp_path / "tracker.yml"
    config.write_text(f"""
data_dir: '{data_dir}'
workday_hours: 8
""")
    return config
