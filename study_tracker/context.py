import click

from study_tracker.model.ledger import StudyLedger
from study_tracker.model.summary import StudyAggregator

DEFAULT_SUBJECTS = ['C', 'C++', 'Java', 'OS', 'DS']


class StudyContext:

    def __init__(self, config=None):
        self._config = config or {}
        self._ledger = StudyLedger()
        self._aggregator = StudyAggregator()

    @property
    def ledger(self) -> StudyLedger:
        return self._ledger

    @property
    def aggregator(self) -> StudyAggregator:
        return self._aggregator

    @property
    def subjects(self) -> list[str]:
        return [str(subject) for subject in self._config.get('subjects') or DEFAULT_SUBJECTS]


pass_study = click.make_pass_decorator(StudyContext, ensure=True)
