"""Data models for the XLIFF 1.2 documents produced by Xcode."""

from dataclasses import dataclass
from typing import Iterator, List, Optional

from lxml import etree

from ..errors import InvalidXliffStructureError, XliffQueryError

XLIFF_NAMESPACE = "urn:oasis:names:tc:xliff:document:1.2"


def local_name(element: etree._Element) -> str:
    """Return the tag name without its namespace ('' for comments and PIs)."""
    if not isinstance(element.tag, str):
        return ""
    return etree.QName(element).localname


def _children(element: etree._Element, name: str) -> List[etree._Element]:
    return [child for child in element if local_name(child) == name]


def _first_child(element: etree._Element, name: str) -> Optional[etree._Element]:
    for child in element:
        if local_name(child) == name:
            return child
    return None


def _append_child(parent: etree._Element, name: str) -> etree._Element:
    """Append a new element in the same namespace as parent."""
    namespace = etree.QName(parent).namespace
    tag = f"{{{namespace}}}{name}" if namespace else name
    return etree.SubElement(parent, tag)


def _set_text(element: etree._Element, value: str) -> None:
    for child in list(element):
        element.remove(child)
    element.text = value


def _detach(element: etree._Element) -> None:
    parent = element.getparent()
    if parent is None:
        return
    # The last child's tail holds the indentation of the closing parent tag.
    if element.getnext() is None and element.tail is not None:
        previous = element.getprevious()
        if previous is not None:
            previous.tail = element.tail
        else:
            parent.text = element.tail
    parent.remove(element)


@dataclass
class TranslationUnit:
    """A single <trans-unit>: source text, optional target, optional note."""

    element: etree._Element
    document_path: str = "<memory>"

    @property
    def id(self) -> Optional[str]:
        return self.element.get("id")

    @id.setter
    def id(self, value: str) -> None:
        self.element.set("id", value)

    @property
    def source(self) -> Optional[str]:
        """Get the source text, or None if the unit has no <source> element."""
        node = _first_child(self.element, "source")
        if node is None:
            return None
        return "".join(node.itertext())

    def require_source(self) -> str:
        """Get the source text, failing if the unit has no <source> element."""
        source = self.source
        if source is None:
            raise InvalidXliffStructureError(
                self.document_path, f"trans-unit '{self.id}' has no <source> element"
            )
        return source

    @property
    def target(self) -> Optional[str]:
        node = _first_child(self.element, "target")
        if node is None:
            return None
        return "".join(node.itertext())

    @target.setter
    def target(self, value: str) -> None:
        node = _first_child(self.element, "target")
        if node is None:
            node = _append_child(self.element, "target")
            source = _first_child(self.element, "source")
            if source is not None:
                node.tail = source.tail
                source.addnext(node)
            else:
                self.element.insert(0, node)
        _set_text(node, value)

    def remove_target(self) -> None:
        for node in _children(self.element, "target"):
            _detach(node)

    @property
    def note(self) -> Optional[str]:
        node = _first_child(self.element, "note")
        if node is None:
            return None
        return "".join(node.itertext())

    @note.setter
    def note(self, value: str) -> None:
        node = _first_child(self.element, "note")
        if node is None:
            node = _append_child(self.element, "note")
        _set_text(node, value)

    def detach(self) -> None:
        """Remove this unit from its file."""
        _detach(self.element)


@dataclass
class TranslationFile:
    """A <file> group: every unit extracted from one source file."""

    element: etree._Element
    document_path: str = "<memory>"

    @property
    def original(self) -> str:
        return self.element.get("original", "")

    @property
    def target_language(self) -> Optional[str]:
        return self.element.get("target-language")

    @target_language.setter
    def target_language(self, value: str) -> None:
        self.element.set("target-language", value)

    def remove_target_language(self) -> None:
        self.element.attrib.pop("target-language", None)

    @property
    def body(self) -> etree._Element:
        node = _first_child(self.element, "body")
        if node is None:
            raise XliffQueryError(self.document_path, f"file[@original='{self.original}']/body")
        return node

    @property
    def units(self) -> List[TranslationUnit]:
        return [
            TranslationUnit(element=node, document_path=self.document_path)
            for node in _children(self.body, "trans-unit")
        ]

    def is_empty(self) -> bool:
        return not self.units

    def detach(self) -> None:
        """Remove this file group from the document."""
        _detach(self.element)


@dataclass
class TranslationDocument:
    """One locale's XLIFF document, kept as a parsed tree."""

    tree: etree._ElementTree
    path: str = "<memory>"

    @property
    def root(self) -> etree._Element:
        return self.tree.getroot()

    @property
    def files(self) -> List[TranslationFile]:
        return [
            TranslationFile(element=node, document_path=self.path)
            for node in _children(self.root, "file")
        ]

    def iter_units(self) -> Iterator[TranslationUnit]:
        """Iterate over every unit of every file, in document order."""
        for translation_file in self.files:
            yield from translation_file.units

    def set_target_language(self, locale: str) -> None:
        """Rewrite the target-language attribute of every file group that has one."""
        for translation_file in self.files:
            if translation_file.target_language is not None:
                translation_file.target_language = locale
