"""Parser for the XLIFF 1.2 files exported by Xcode."""

from pathlib import Path
from typing import Union

from lxml import etree

from ..errors import FileReadError, InvalidXliffStructureError, XliffParseError
from ..models.xliff_document import TranslationDocument, local_name


class XliffParser:
    """Parser for .xliff files."""

    def __init__(self, preserve_whitespace: bool = True):
        """
        Initialize the parser.

        Args:
            preserve_whitespace: Keep whitespace-only text between elements.
                Turn this off when the document will be pretty-printed.
        """
        self.preserve_whitespace = preserve_whitespace

    def parse(self, file_path: Union[str, Path]) -> TranslationDocument:
        """
        Parse an .xliff file and return a structured representation.

        Args:
            file_path: Path to the .xliff file

        Returns:
            TranslationDocument wrapping the parsed tree
        """
        path = Path(file_path)
        try:
            content = path.read_bytes()
        except OSError as e:
            raise FileReadError(str(path), e) from e

        return self.parse_bytes(content, source=str(path))

    def parse_bytes(self, content: bytes, source: str = "<memory>") -> TranslationDocument:
        """
        Parse .xliff content held in memory.

        Args:
            content: Raw file content, in any encoding its XML declaration names
            source: Name used in error messages

        Returns:
            TranslationDocument wrapping the parsed tree
        """
        parser = etree.XMLParser(
            remove_blank_text=not self.preserve_whitespace,
            resolve_entities=False,
            no_network=True,
        )
        try:
            root = etree.fromstring(content, parser=parser)
        except (etree.XMLSyntaxError, ValueError) as e:
            raise XliffParseError(source, e) from e

        if root is None:
            raise XliffParseError(source, "document has no root element")

        if local_name(root) != "xliff":
            raise InvalidXliffStructureError(
                source, f"expected <xliff> root element, found <{local_name(root)}>"
            )

        return TranslationDocument(tree=root.getroottree(), path=source)
