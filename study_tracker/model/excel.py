import typing

from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.styles import Font, PatternFill, Alignment
from openpyxl.styles.colors import Color
from openpyxl.utils import get_column_letter
from openpyxl.workbook import Workbook

from study_tracker.common import DEFAULT_WORKBOOK_PATH
from study_tracker.errors import ExportFailed, NothingToExport
from study_tracker.model.ledger import StudyLedger
from study_tracker.model.record import StudyRecord
from study_tracker.model.summary import StudyAggregator


def worksheet_value(value):
    # openpyxl rejects control characters other than tab and line breaks,
    # and lone surrogates cannot be saved as UTF-8
    if isinstance(value, str):
        value = value.encode('utf-8', 'replace').decode('utf-8')
        return ILLEGAL_CHARACTERS_RE.sub('', value)
    return value


class StudySheet:
    """Worksheet filled row by row below a styled header row.

    Each column is described by ``(header, width, number_format)``.
    """

    _title = ''
    _columns: typing.Sequence[typing.Tuple[str, int, typing.Optional[str]]] = ()
    _header_font = Font(color='FF000000', bold=True)
    _header_fill = PatternFill("solid", fgColor=Color(indexed=22))
    _wrap = False

    def __init__(self, sheet):
        self._sheet = sheet
        sheet.title = self._title
        for idx, (header, width, _) in enumerate(self._columns, start=1):
            self.set_header(sheet.cell(row=1, column=idx), header)
            sheet.column_dimensions[get_column_letter(idx)].width = width
        self._next_row = 2

    @property
    def sheet(self):
        return self._sheet

    @property
    def last_row(self) -> int:
        return self._next_row - 1

    def set_header(self, cell, value):
        cell.value = value
        cell.font = self._header_font
        cell.fill = self._header_fill

    def append(self, *values) -> int:
        row = self._next_row
        for idx, (value, (_, _, number_format)) in enumerate(zip(values, self._columns), start=1):
            cell = self._sheet.cell(row=row, column=idx, value=worksheet_value(value))
            if number_format:
                cell.number_format = number_format
            if self._wrap and isinstance(value, str):
                cell.alignment = Alignment(wrap_text=True)
        self._next_row += 1
        return row


class LogSheet(StudySheet):
    _title = 'Log'
    _columns = (
        ('Date', 12, 'yyyy-mm-dd'),
        ('Subject', 20, None),
        ('Duration', 10, None),
        ('Description', 60, None),
    )
    _wrap = True

    def write(self, record: StudyRecord):
        self.append(record.date, record.subject, record.duration, record.description)


class TotalsSheet(StudySheet):

    def __init__(self, sheet, totals: typing.Mapping):
        super().__init__(sheet)
        for key, hours in totals.items():
            self.append(key, hours)
        last_row = self.last_row
        total_row = self.append(None, f'=SUM(B2:B{last_row})' if last_row > 1 else 0)
        self.set_header(self._sheet.cell(row=total_row, column=1), 'Total')


class DateTotalsSheet(TotalsSheet):
    _title = 'By date'
    _columns = (
        ('Date', 20, 'yyyy-mm-dd'),
        ('Total hours', 15, None),
    )


class SubjectTotalsSheet(TotalsSheet):
    _title = 'By subject'
    _columns = (
        ('Subject', 20, None),
        ('Total hours', 15, None),
    )


class StudyWorkbookWriter:

    def __init__(self, path=DEFAULT_WORKBOOK_PATH, aggregator: StudyAggregator = None):
        self._path = path
        self._aggregator = aggregator or StudyAggregator()
        self._workbook = None

    def __enter__(self):
        self._workbook = Workbook()
        self._log_sheet = LogSheet(self._workbook.active)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            try:
                self._workbook.save(filename=self._path)
            except (OSError, UnicodeError) as exc:
                raise ExportFailed(self._path, exc) from exc
        self._workbook = None

    def write(self, record: StudyRecord):
        self._log_sheet.write(record)

    def write_summary(self, ledger: StudyLedger):
        DateTotalsSheet(self._workbook.create_sheet(), self._aggregator.totals_by_date(ledger))
        SubjectTotalsSheet(self._workbook.create_sheet(), self._aggregator.totals_by_subject(ledger))

    @classmethod
    def export(cls, ledger: StudyLedger, path=DEFAULT_WORKBOOK_PATH) -> int:
        if ledger.is_empty():
            raise NothingToExport()
        with cls(path) as writer:
            for record in ledger.all():
                writer.write(record)
            writer.write_summary(ledger)
        return len(ledger)
