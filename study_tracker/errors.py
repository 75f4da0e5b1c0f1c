class StudyTrackerError(Exception):
    pass


class InvalidRecord(StudyTrackerError, ValueError):
    pass


class NothingToExport(StudyTrackerError):

    def __init__(self, message='nothing to export, ledger is empty'):
        super().__init__(message)


class ExportFailed(StudyTrackerError):

    def __init__(self, path, cause: Exception):
        super().__init__(f'cannot export to {path}: {cause}')
        self._path = path
        self._cause = cause

    @property
    def path(self):
        return self._path

    @property
    def cause(self) -> Exception:
        return self._cause
