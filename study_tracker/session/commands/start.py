import datetime
import logging
import typing

import click

from study_tracker.common import DEFAULT_CSV_PATH, DEFAULT_WORKBOOK_PATH, StudyCsvExporter
from study_tracker.context import pass_study, StudyContext
from study_tracker.errors import ExportFailed, InvalidRecord, NothingToExport
from study_tracker.model.excel import StudyWorkbookWriter
from study_tracker.model.record import StudyRecord
from study_tracker.reporting import RULE, StudyReporter

logger = logging.getLogger(__name__)

EXIT_CHOICE = 7


class StudySession:
    """Interactive menu over one in-memory ledger."""

    _menu = [
        (1, 'Insert new Study Log'),
        (2, 'View all Study Logs'),
        (3, 'Summary of Study Log by Date'),
        (4, 'Summary of Study Log by Subject'),
        (5, 'Export Study Log to CSV file'),
        (6, 'Export Study Log to Excel workbook'),
        (EXIT_CHOICE, 'Exit the Application'),
    ]

    def __init__(self, study: StudyContext, output=DEFAULT_CSV_PATH, workbook=DEFAULT_WORKBOOK_PATH,
                 today: typing.Callable[[], datetime.date] = datetime.date.today):
        self._study = study
        self._output = output
        self._workbook = workbook
        self._today = today
        self._reporter = StudyReporter(study.aggregator)
        self._exporter = StudyCsvExporter()
        self._actions = {
            1: self.insert,
            2: lambda: self._reporter.show_log(self._study.ledger),
            3: lambda: self._reporter.show_totals_by_date(self._study.ledger),
            4: lambda: self._reporter.show_totals_by_subject(self._study.ledger),
            5: self.export_csv,
            6: self.export_workbook,
        }

    def run(self):
        self._reporter.banner('---- Welcome to Marvellous Study Tracker Application ----')
        try:
            while self.step():
                pass
        except click.Abort:
            click.echo()
        self._reporter.banner('Thank you for using Marvellous Study Tracker Application!')

    def step(self) -> bool:
        click.echo('\nPlease select the appropriate option:')
        for choice, label in self._menu:
            click.echo(f'{choice} : {label}')
        choice = click.prompt('Enter your choice', type=int)
        if choice == EXIT_CHOICE:
            return False
        action = self._actions.get(choice)
        if action is None:
            click.echo('Invalid option! Please try again.')
        else:
            action()
        return True

    def insert(self):
        self._reporter.banner('------- Please Enter The Details of Your Study -------')
        subject = click.prompt(f'Enter Subject ({"/".join(self._study.subjects)})')
        duration = click.prompt('Enter Study Duration (in hours)')
        description = click.prompt('Enter Description about your study', default='', show_default=False)
        try:
            record = self._study.ledger.append(
                StudyRecord.from_input(self._today(), subject, duration, description))
        except InvalidRecord as e:
            logger.warning(f'rejected study log: {e}')
            click.echo(f'Study Log rejected: {e}')
            return
        logger.debug(f'stored study log: {record}')
        click.echo(RULE)
        click.echo('Study Log stored successfully!')
        click.echo(RULE)

    def export_csv(self):
        self._export('CSV', lambda: self._exporter.write(self._study.ledger, self._output), self._output)

    def export_workbook(self):
        self._export('Excel', lambda: StudyWorkbookWriter.export(self._study.ledger, self._workbook), self._workbook)

    def _export(self, kind: str, export: typing.Callable[[], int], path):
        try:
            rows = export()
        except NothingToExport:
            click.echo('Nothing to export. Database is empty.')
            click.echo(RULE)
            return
        except ExportFailed as e:
            logger.error(f'{kind} export failed: {e.cause}')
            click.echo(f'Exception occurred while creating the {kind} file.')
            click.echo(f'Reason: {e.cause}')
            return
        logger.info(f'exported {rows} study logs to {path}')
        click.echo(f'Log exported successfully to {path}')


@click.option('--output', '-o',
              help='CSV export path',
              default=DEFAULT_CSV_PATH,
              type=click.Path(dir_okay=False))
@click.option('--workbook', '-w',
              help='Excel workbook export path',
              default=DEFAULT_WORKBOOK_PATH,
              type=click.Path(dir_okay=False))
@click.command()
@pass_study
def start(study: StudyContext, output, workbook):
    StudySession(study, output, workbook).run()
