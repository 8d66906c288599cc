"""Data models for per-locale outcomes of a synchronization run."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from ..errors import SyncFailedError


class Direction(str, Enum):
    """Which way strings are flowing."""
    EXPORT = "export"
    IMPORT = "import"


class Stage(str, Enum):
    """Step of the per-locale pipeline a failure happened in."""
    BUNDLE = "bundle"
    PARSE = "parse"
    TRANSFORM = "transform"
    WRITE = "write"
    COPY = "copy"
    IMPORT = "import"


@dataclass
class LocaleTaskResult:
    """Represents the result of processing a single locale."""

    locale: str
    stage: Optional[Stage] = None
    error: Optional[BaseException] = None
    output_path: Optional[str] = None
    units_removed: int = 0
    files_removed: int = 0
    targets_filled: int = 0
    notes_overridden: int = 0

    @property
    def success(self) -> bool:
        """Check if the locale was processed without errors."""
        return self.error is None

    def describe(self) -> str:
        if self.success:
            return f"{self.locale}: ok"
        stage = self.stage.value if self.stage else "unknown"
        message = getattr(self.error, "message", None) or str(self.error)
        return f"{self.locale} ({stage}): {message}"


@dataclass
class SyncOutcome:
    """Aggregated result of one export or import run."""

    direction: Direction
    results: List[LocaleTaskResult] = field(default_factory=list)

    @property
    def failures(self) -> List[LocaleTaskResult]:
        return [r for r in self.results if not r.success]

    @property
    def succeeded(self) -> List[LocaleTaskResult]:
        return [r for r in self.results if r.success]

    @property
    def success(self) -> bool:
        """Check if every locale succeeded."""
        return not self.failures

    def raise_for_failures(self) -> None:
        """Raise SyncFailedError listing every failed locale, if any."""
        if self.failures:
            raise SyncFailedError(self)
