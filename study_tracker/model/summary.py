import datetime
import typing

from study_tracker.model.ledger import StudyLedger
from study_tracker.model.record import StudyRecord


class StudyAggregator:
    """Sums study hours per date or per subject.

    Totals are plain float sums in ledger order, no rounding is applied.
    Results are rebuilt on every call.
    """

    def totals_by_date(self, ledger: StudyLedger) -> typing.Dict[datetime.date, float]:
        return self._aggregate(ledger, lambda record: record.date)

    def totals_by_subject(self, ledger: StudyLedger) -> typing.Dict[str, float]:
        return self._aggregate(ledger, lambda record: record.subject)

    @staticmethod
    def _aggregate(ledger: StudyLedger, make_aggregation_key: typing.Callable[[StudyRecord], typing.Any]):
        aggregation_dict = {}
        for record in ledger.all():
            key = make_aggregation_key(record)
            aggregation_dict[key] = aggregation_dict.get(key, 0.0) + record.duration
        return dict(sorted(aggregation_dict.items(), key=lambda item: item[0]))
