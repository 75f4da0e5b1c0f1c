import typing

from study_tracker.model.record import StudyRecord


class StudyLedger:
    """Append-only list of study records kept for a single session."""

    def __init__(self, records: typing.Iterable[StudyRecord] = None):
        self._records = []
        for record in records or ():
            self.append(record)

    def append(self, record: StudyRecord) -> StudyRecord:
        self._records.append(record.validate())
        return record

    def is_empty(self) -> bool:
        return not self._records

    def all(self) -> typing.Tuple[StudyRecord, ...]:
        return tuple(self._records)

    def __len__(self):
        return len(self._records)

    def __iter__(self) -> typing.Iterator[StudyRecord]:
        return iter(self.all())
