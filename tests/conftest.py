from __future__ import annotations

import datetime

import pytest

from study_tracker.model.ledger import StudyLedger
from study_tracker.model.record import StudyRecord


@pytest.fixture
def ledger() -> StudyLedger:
    return StudyLedger([
        StudyRecord(datetime.date(2025, 10, 16), "OS", 1.5, "scheduling"),
        StudyRecord(datetime.date(2025, 10, 15), "Java", 2.5, "loops, and conditions"),
        StudyRecord(datetime.date(2025, 10, 16), "C++", 0.5, "templates"),
        StudyRecord(datetime.date(2025, 10, 15), "OS", 1.0, ""),
    ])
