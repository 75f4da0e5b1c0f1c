import typing

import click

from study_tracker.model.ledger import StudyLedger
from study_tracker.model.summary import StudyAggregator

RULE = '-' * 55


class StudyReporter:
    """Console views of the ledger and its totals."""

    def __init__(self, aggregator: StudyAggregator = None, echo: typing.Callable[[str], None] = click.echo):
        self._aggregator = aggregator or StudyAggregator()
        self._echo = echo

    def banner(self, title: str):
        self._echo(RULE)
        self._echo(title)
        self._echo(RULE)

    def show_log(self, ledger: StudyLedger):
        self._echo(RULE)
        if ledger.is_empty():
            self._echo('No records found. Database is empty.')
            self._echo(RULE)
            return
        self._echo('------ Log Report from Marvellous Study Tracker -------')
        self._echo(RULE)
        for record in ledger.all():
            self._echo(str(record))
        self._echo(RULE)

    def show_totals_by_date(self, ledger: StudyLedger):
        self._show_totals('Date', self._aggregator.totals_by_date(ledger))

    def show_totals_by_subject(self, ledger: StudyLedger):
        self._show_totals('Subject', self._aggregator.totals_by_subject(ledger))

    def _show_totals(self, label: str, totals: typing.Mapping):
        self._echo(RULE)
        if not totals:
            self._echo('No data available to summarize.')
            self._echo(RULE)
            return
        self._echo(f'------ Summary by {label} from Marvellous Study Tracker ------')
        self._echo(RULE)
        for key, hours in totals.items():
            self._echo(f'{label}: {key} | Total Study: {hours} hrs')
        self._echo(RULE)
