"""Comment overrides for translation notes, loaded from l10n_comments.txt."""

import logging
from pathlib import Path
from typing import Dict, Optional, Union

from ..errors import FileReadError
from ..models.xliff_document import TranslationDocument

logger = logging.getLogger(__name__)


def parse_overrides(content: str) -> Dict[str, str]:
    """
    Parse `TRANSLATION_ID=Custom comment text` lines.

    Lines are split on every '='; the first piece is the key and the last
    piece the comment. Lines without both are skipped.
    """
    overrides = {}
    for line in content.splitlines():
        parts = [part for part in line.split("=") if part]
        if len(parts) < 2:
            continue
        overrides[parts[0]] = parts[-1]
    return overrides


class CommentOverrideStore:
    """Read-only map of translation id to replacement note text."""

    def __init__(self, overrides: Optional[Dict[str, str]] = None):
        self.overrides: Dict[str, str] = dict(overrides or {})

    @classmethod
    def load(cls, file_path: Union[str, Path]) -> "CommentOverrideStore":
        """
        Load overrides from a file. A missing file yields an empty store.

        Args:
            file_path: Path to the comment override file

        Returns:
            CommentOverrideStore with the parsed overrides
        """
        path = Path(file_path)
        try:
            content = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.warning("No comment overrides at %s", path)
            return cls()
        except (OSError, UnicodeDecodeError) as e:
            raise FileReadError(str(path), e) from e

        store = cls(parse_overrides(content))
        logger.info("Loaded %d comment override(s) from %s", len(store), path)
        return store

    def __len__(self) -> int:
        return len(self.overrides)

    def lookup(self, unit_id: Optional[str]) -> Optional[str]:
        if unit_id is None:
            return None
        return self.overrides.get(unit_id)

    def apply(self, document: TranslationDocument) -> int:
        """Replace the note of every unit that has an override. Returns the count."""
        applied = 0
        for unit in document.iter_units():
            comment = self.lookup(unit.id)
            if comment is None:
                continue
            unit.note = comment
            applied += 1
        return applied
