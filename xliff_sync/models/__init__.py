"""Data models for the XLIFF synchronization pipeline."""

from .xliff_document import TranslationUnit, TranslationFile, TranslationDocument
from .task_result import Direction, Stage, LocaleTaskResult, SyncOutcome

__all__ = [
    "TranslationUnit",
    "TranslationFile",
    "TranslationDocument",
    "Direction",
    "Stage",
    "LocaleTaskResult",
    "SyncOutcome",
]
