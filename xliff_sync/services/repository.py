"""Layout of the l10n repository: one directory of xliff per locale."""

from pathlib import Path
from typing import List, Optional, Union

from ..config import config
from ..errors import DirectoryListingError


def discover_locales(
    repo_path: Union[str, Path],
    templates_dirname: Optional[str] = None,
) -> List[str]:
    """
    List the locale directories of an l10n repository.

    Args:
        repo_path: Root of the l10n repository
        templates_dirname: Reserved directory to skip (defaults to config)

    Returns:
        Sorted Pontoon locale codes
    """
    root = Path(repo_path)
    skipped = templates_dirname or config.templates_dirname
    try:
        entries = list(root.iterdir())
    except OSError as e:
        raise DirectoryListingError(str(root), e) from e

    return sorted(
        entry.name
        for entry in entries
        if entry.is_dir() and not entry.name.startswith(".") and entry.name != skipped
    )


def xliff_path(repo_path: Union[str, Path], locale: str, filename: Optional[str] = None) -> Path:
    """Path of a locale's xliff file inside the repository."""
    return Path(repo_path) / locale / (filename or config.xliff_filename)
