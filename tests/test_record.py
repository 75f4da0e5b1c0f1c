from __future__ import annotations

import dataclasses
import datetime
import math

import pytest

from study_tracker.errors import InvalidRecord
from study_tracker.model.record import StudyRecord


def test_record_is_immutable() -> None:
    record = StudyRecord(datetime.date(2025, 10, 15), "Java", 2.5, "loops")
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.duration = 3.0  # type: ignore[misc]


def test_from_input_parses_duration_text() -> None:
    record = StudyRecord.from_input(datetime.date(2025, 10, 15), "Java", "2.5", None)
    assert record.duration == 2.5
    assert record.description == ""


def test_from_input_rejects_non_numeric_duration() -> None:
    with pytest.raises(InvalidRecord) as excinfo:
        StudyRecord.from_input(datetime.date(2025, 10, 15), "Java", "two", "")
    assert isinstance(excinfo.value.__cause__, ValueError)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"duration": 0.0},
        {"duration": -1.5},
        {"duration": math.nan},
        {"duration": "2.5"},
        {"duration": 10**400},
        {"description": None},
        {"subject": ""},
        {"subject": "   "},
        {"date": None},
        {"date": datetime.datetime(2025, 10, 15, 9, 30)},
    ],
)
def test_validate_rejects_invalid_fields(kwargs: dict) -> None:
    base = dict(date=datetime.date(2025, 10, 15), subject="Java", duration=2.5, description="")
    base.update(kwargs)
    with pytest.raises(InvalidRecord):
        StudyRecord(**base).validate()


def test_str_matches_listing_format() -> None:
    record = StudyRecord(datetime.date(2025, 10, 15), "Java", 3.0, "streams")
    assert str(record) == "2025-10-15 | Java | streams | 3.0 hrs"


def test_from_input_rejects_duration_too_large_for_float() -> None:
    with pytest.raises(InvalidRecord):
        StudyRecord.from_input(datetime.date(2025, 10, 15), "Java", 10**400, "")
