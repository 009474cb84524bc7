"""
Unit tests for report writers.
"""

import pytest

from transform_report.core.exceptions import ConfigurationError, ReportWriteError
from transform_report.report.writer import FileReportWriter


def test_writes_report_file(tmp_path):
    writer = FileReportWriter(tmp_path)

    path = writer.write("report.md", "# Report")

    assert path == tmp_path / "report.md"
    assert path.read_text(encoding="utf-8") == "# Report\n"


def test_appends_to_existing_file(tmp_path):
    writer = FileReportWriter(tmp_path)
    writer.write("report.md", "first\n")
    writer.write("report.md", "second\n")

    assert (tmp_path / "report.md").read_text(encoding="utf-8") == "first\nsecond\n"


def test_creates_missing_directory(tmp_path):
    target = tmp_path / "reports" / "2025"
    FileReportWriter(target).write("report.md", "x")

    assert (target / "report.md").exists()


def test_directory_that_is_a_file_rejected(tmp_path):
    not_a_dir = tmp_path / "file.txt"
    not_a_dir.write_text("x")

    with pytest.raises(ConfigurationError):
        FileReportWriter(not_a_dir)


def test_os_error_wrapped(tmp_path):
    writer = FileReportWriter(tmp_path)
    (tmp_path / "report.md").mkdir()

    with pytest.raises(ReportWriteError):
        writer.write("report.md", "x")
