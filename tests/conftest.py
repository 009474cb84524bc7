"""
Pytest configuration and shared fixtures.

Provides a fresh log store and a sample page used by analysis and rendering tests.
"""

import pytest
from typing import List

from transform_report.data.schema import LogEntrySignificance, LogLevel, StoredLogEntry
from transform_report.data.store import LogStore

from factories import make_log, make_marker


@pytest.fixture
def store() -> LogStore:
    return LogStore()


@pytest.fixture
def page_one_logs() -> List[StoredLogEntry]:
    """
    A page with a site marker, source/target markers and one warning.

    Spans ten seconds.
    """
    return [
        make_marker("P1", LogEntrySignificance.SOURCE_SITE_URL, "https://a.example.com/sites/x", 0),
        make_marker("P1", LogEntrySignificance.SOURCE_PAGE, "/sites/x/page1.aspx", 0),
        make_log(LogLevel.WARNING, "P1", 5, heading="Assets", message="slow asset"),
        make_marker("P1", LogEntrySignificance.TARGET_PAGE, "/sites/x/SitePages/page1.aspx", 10),
    ]


def pytest_configure(config):
    """
    Pytest hook for custom configuration.
    
    Registers custom markers used throughout tests.
    """
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
