"""XLIFF file handling modules."""

from .parser import XliffParser
from .writer import XliffWriter, EXPORT_WRITER, IMPORT_WRITER

__all__ = ["XliffParser", "XliffWriter", "EXPORT_WRITER", "IMPORT_WRITER"]
