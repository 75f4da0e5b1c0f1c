from __future__ import annotations

from study_tracker.model.ledger import StudyLedger
from study_tracker.reporting import StudyReporter


def _capture():
    lines: list[str] = []
    return lines, StudyReporter(echo=lines.append)


def test_show_log_lists_records(ledger: StudyLedger) -> None:
    lines, reporter = _capture()
    reporter.show_log(ledger)
    assert "------ Log Report from Marvellous Study Tracker -------" in lines
    assert "2025-10-15 | Java | loops, and conditions | 2.5 hrs" in lines


def test_show_log_of_empty_ledger() -> None:
    lines, reporter = _capture()
    reporter.show_log(StudyLedger())
    assert "No records found. Database is empty." in lines


def test_totals_lines(ledger: StudyLedger) -> None:
    lines, reporter = _capture()
    reporter.show_totals_by_date(ledger)
    reporter.show_totals_by_subject(ledger)
    assert "Date: 2025-10-15 | Total Study: 3.5 hrs" in lines
    assert "Date: 2025-10-16 | Total Study: 2.0 hrs" in lines
    assert "Subject: OS | Total Study: 2.5 hrs" in lines
    assert lines.index("Subject: C++ | Total Study: 0.5 hrs") < lines.index("Subject: Java | Total Study: 2.5 hrs")


def test_totals_of_empty_ledger() -> None:
    lines, reporter = _capture()
    reporter.show_totals_by_subject(StudyLedger())
    assert "No data available to summarize." in lines
