import datetime
from dataclasses import dataclass

from study_tracker.errors import InvalidRecord


@dataclass(frozen=True)
class StudyRecord:
    date: datetime.date
    subject: str
    duration: float
    description: str = ''

    def validate(self):
        # datetime is a date subclass but carries a time component
        if not isinstance(self.date, datetime.date) or isinstance(self.date, datetime.datetime):
            raise InvalidRecord(f'date must be a calendar date, got {self.date!r}')
        if not isinstance(self.subject, str) or not self.subject.strip():
            raise InvalidRecord('subject must not be empty')
        if not isinstance(self.description, str):
            raise InvalidRecord(f'description must be text, got {self.description!r}')
        if isinstance(self.duration, bool) or not isinstance(self.duration, (int, float)):
            raise InvalidRecord(f'duration must be a number, got {self.duration!r}')
        try:
            hours = float(self.duration)
        except OverflowError as exc:
            raise InvalidRecord('duration is too large to count in hours') from exc
        if not hours > 0:
            raise InvalidRecord(f'duration must be positive, got {self.duration}')
        return self

    @classmethod
    def from_input(cls, date: datetime.date, subject: str, duration, description: str = None):
        try:
            hours = float(duration)
        except (TypeError, ValueError, OverflowError) as exc:
            raise InvalidRecord(f'duration is not a number: {duration!r}') from exc
        return cls(date, subject, hours, description or '')

    def __str__(self):
        return f'{self.date.isoformat()} | {self.subject} | {self.description} | {self.duration} hrs'
