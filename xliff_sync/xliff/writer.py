"""Writer for XLIFF documents."""

from pathlib import Path
from typing import Union

from lxml import etree

from ..models.xliff_document import TranslationDocument
from ..services.file_ops import atomic_write_bytes


class XliffWriter:
    """Writer for .xliff files."""

    def __init__(self, encoding: str = "UTF-8", pretty_print: bool = False):
        self.encoding = encoding
        self.pretty_print = pretty_print

    def write(self, document: TranslationDocument, output_path: Union[str, Path]) -> Path:
        """
        Write a TranslationDocument to disk, replacing the file atomically.

        Args:
            document: The document to write
            output_path: Path to write the file to

        Returns:
            The path written
        """
        return atomic_write_bytes(output_path, self.to_bytes(document))

    def to_bytes(self, document: TranslationDocument) -> bytes:
        """Serialize a document, XML declaration included."""
        return etree.tostring(
            document.tree,
            encoding=self.encoding,
            xml_declaration=True,
            pretty_print=self.pretty_print,
        )


# Files handed to translators through the l10n repository.
EXPORT_WRITER = XliffWriter(encoding="UTF-8")

# Files handed to `xcodebuild -importLocalizations`.
IMPORT_WRITER = XliffWriter(encoding="UTF-16", pretty_print=True)
