import typing

from study_tracker.errors import ExportFailed, NothingToExport
from study_tracker.model.ledger import StudyLedger
from study_tracker.model.record import StudyRecord


DEFAULT_CSV_PATH = 'MarvellousStudy.csv'
DEFAULT_WORKBOOK_PATH = 'MarvellousStudy.xlsx'


def strip_commas(value: str) -> str:
    return value.replace(',', ' ')


class StudyCsvExporter:
    """Writes the ledger as comma separated text.

    Commas inside subject and description become spaces. Quotes and line
    breaks are written as they are, so the output is not RFC 4180 CSV.
    """

    _header = [
        'Date',
        'Subject',
        'Duration',
        'Description',
    ]

    def __init__(self, delimiter=',', line_terminator='\n'):
        self._delimiter = delimiter
        self._line_terminator = line_terminator

    def render_row(self, record: StudyRecord) -> typing.List[str]:
        return [
            record.date.isoformat(),
            strip_commas(record.subject),
            str(float(record.duration)),
            strip_commas(record.description),
        ]

    def _line(self, row: typing.List[str]) -> str:
        return self._delimiter.join(row) + self._line_terminator

    def export(self, ledger: StudyLedger) -> str:
        if ledger.is_empty():
            raise NothingToExport()
        lines = [self._line(self._header)]
        lines.extend(self._line(self.render_row(record)) for record in ledger.all())
        return ''.join(lines)

    def write(self, ledger: StudyLedger, path=DEFAULT_CSV_PATH) -> int:
        content = self.export(ledger)
        try:
            # encoded before opening so unencodable text leaves no file behind
            data = content.encode('utf-8')
            with open(path, 'wb') as f:
                f.write(data)
        except (OSError, UnicodeError) as exc:
            raise ExportFailed(path, exc) from exc
        return len(ledger)
