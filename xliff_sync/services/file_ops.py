"""Filesystem primitives: directory creation and stage-then-replace writes.

A destination file is never observed half-written: content is staged in a
temporary file next to the destination and then swapped in with os.replace.
"""

import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Union

from ..errors import (
    DirectoryCreationError,
    FileCopyError,
    FileDeleteError,
    FileReadError,
    FileReplaceError,
    FileWriteError,
)

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def ensure_directory(path: PathLike) -> Path:
    """Create a directory (and its parents) if it does not exist yet."""
    directory = Path(path)
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreationError(str(directory), e) from e
    return directory


def remove_stale(path: PathLike) -> None:
    """Remove a leftover staging file, if one is in the way."""
    stale = Path(path)
    if not stale.exists():
        return
    logger.debug("Removing stale staging file %s", stale)
    try:
        stale.unlink()
    except OSError as e:
        raise FileDeleteError(str(stale), e) from e


def replace(staged: PathLike, destination: PathLike) -> Path:
    """Atomically move a staged file over the destination."""
    target = Path(destination)
    try:
        os.replace(staged, target)
    except OSError as e:
        raise FileReplaceError(str(target), e) from e
    return target


def _staging_path(destination: Path) -> Path:
    fd, name = tempfile.mkstemp(
        prefix=f".{destination.name}.", suffix=".staging", dir=destination.parent
    )
    os.close(fd)
    return Path(name)


def atomic_write_bytes(destination: PathLike, content: bytes) -> Path:
    """
    Write bytes to a file through a staged temporary file.

    Args:
        destination: Final path of the file
        content: Bytes to write

    Returns:
        The destination path
    """
    target = Path(destination)
    ensure_directory(target.parent)

    try:
        staged = _staging_path(target)
    except OSError as e:
        raise FileWriteError(str(target), e) from e

    try:
        staged.write_bytes(content)
    except OSError as e:
        staged.unlink(missing_ok=True)
        raise FileWriteError(str(target), e) from e

    try:
        return replace(staged, target)
    except FileReplaceError:
        staged.unlink(missing_ok=True)
        raise


def atomic_copy(source: PathLike, destination: PathLike) -> Path:
    """
    Copy a file so the destination is swapped in atomically.

    Args:
        source: File to copy
        destination: Final path of the copy

    Returns:
        The destination path
    """
    src = Path(source)
    target = Path(destination)
    if not src.is_file():
        raise FileReadError(str(src), FileNotFoundError(f"No such file: {src}"))

    ensure_directory(target.parent)

    try:
        staged = _staging_path(target)
    except OSError as e:
        raise FileCopyError(str(src), str(target), e) from e

    try:
        shutil.copyfile(src, staged)
    except OSError as e:
        staged.unlink(missing_ok=True)
        raise FileCopyError(str(src), str(target), e) from e

    try:
        return replace(staged, target)
    except FileReplaceError:
        staged.unlink(missing_ok=True)
        raise
