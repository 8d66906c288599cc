"""Errors raised while exporting or importing localizations."""

from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .models.task_result import SyncOutcome


class LocalizationError(Exception):
    """Base class for every failure the pipeline can report."""

    def __init__(self, message: str, locale: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.locale = locale

    def __str__(self) -> str:
        if self.locale:
            return f"[{self.locale}] {self.message}"
        return self.message


class ProcessExecutionError(LocalizationError):
    """An external process could not be started or did not succeed."""

    def __init__(self, command: List[str], cause: object, locale: Optional[str] = None):
        self.command = command
        self.cause = cause
        super().__init__(f"Failed to execute process '{' '.join(command)}': {cause}", locale)


class XliffParseError(LocalizationError):
    """An XLIFF artifact is not well-formed XML."""

    def __init__(self, path: str, cause: object, locale: Optional[str] = None):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to parse XML file at '{path}': {cause}", locale)


class XliffQueryError(LocalizationError):
    """An expected path through the document does not exist."""

    def __init__(self, path: str, query: str, locale: Optional[str] = None):
        self.path = path
        self.query = query
        super().__init__(f"Failed to resolve '{query}' in '{path}'", locale)


class FileWriteError(LocalizationError):
    def __init__(self, path: str, cause: object, locale: Optional[str] = None):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write file at '{path}': {cause}", locale)


class FileReadError(LocalizationError):
    def __init__(self, path: str, cause: object, locale: Optional[str] = None):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to read file at '{path}': {cause}", locale)


class FileCopyError(LocalizationError):
    def __init__(self, source: str, destination: str, cause: object, locale: Optional[str] = None):
        self.source = source
        self.destination = destination
        self.cause = cause
        super().__init__(
            f"Failed to copy file from '{source}' to '{destination}': {cause}", locale
        )


class FileDeleteError(LocalizationError):
    """A leftover staging file is in the way and cannot be removed."""

    def __init__(self, path: str, cause: object, locale: Optional[str] = None):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to delete file at '{path}': {cause}", locale)


class DirectoryCreationError(LocalizationError):
    def __init__(self, path: str, cause: object, locale: Optional[str] = None):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to create directory at '{path}': {cause}", locale)


class FileReplaceError(LocalizationError):
    def __init__(self, path: str, cause: object, locale: Optional[str] = None):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to replace file at '{path}': {cause}", locale)


class InvalidXliffStructureError(LocalizationError):
    """The XLIFF file is missing required content."""

    def __init__(self, path: str, details: str, locale: Optional[str] = None):
        self.path = path
        self.details = details
        super().__init__(f"Invalid XLIFF structure in '{path}': {details}", locale)


class DirectoryListingError(LocalizationError):
    def __init__(self, path: str, cause: object, locale: Optional[str] = None):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to list directory contents at '{path}': {cause}", locale)


class SyncFailedError(LocalizationError):
    """One or more locales failed during a synchronization run."""

    def __init__(self, outcome: "SyncOutcome"):
        self.outcome = outcome
        failures = outcome.failures
        lines = [f"{len(failures)} of {len(outcome.results)} locale(s) failed:"]
        lines.extend(f"  - {failure.describe()}" for failure in failures)
        super().__init__("\n".join(lines))
