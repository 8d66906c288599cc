"""Bridge to `xcodebuild` for exporting and importing localizations."""

import logging
import subprocess
from pathlib import Path
from typing import Iterable, List, Optional, Union

from ..config import config
from ..errors import ProcessExecutionError

logger = logging.getLogger(__name__)


class XcodeBuildBridge:
    """Runs `xcodebuild -exportLocalizations` / `-importLocalizations`."""

    def __init__(self, executable: Optional[str] = None, timeout: Optional[float] = None):
        """
        Initialize the bridge.

        Args:
            executable: xcodebuild binary (uses XLIFF_SYNC_XCODEBUILD if not provided)
            timeout: Seconds to wait for each invocation (no limit if not provided)
        """
        self.executable = executable or config.xcodebuild_path
        self.timeout = timeout if timeout is not None else config.tool_timeout

    def export_localizations(
        self,
        project_path: Union[str, Path],
        localization_path: Union[str, Path],
        locales: Iterable[str],
    ) -> None:
        """
        Export every given locale as an .xcloc bundle under localization_path.

        A non-zero exit is only logged: xcodebuild still writes the bundles it
        could produce, and a missing bundle fails its own locale later.

        Raises:
            ProcessExecutionError: If xcodebuild cannot be started or times out
        """
        command = [
            self.executable,
            "-exportLocalizations",
            "-project", str(project_path),
            "-localizationPath", str(localization_path),
        ]
        for locale in locales:
            command.extend(["-exportLanguage", locale])
        self._run(command, check=False)

    def import_localizations(
        self,
        project_path: Union[str, Path],
        bundle_path: Union[str, Path],
        locale: Optional[str] = None,
    ) -> None:
        """Import one .xcloc bundle into the project."""
        command = [
            self.executable,
            "-importLocalizations",
            "-project", str(project_path),
            "-localizationPath", str(bundle_path),
        ]
        self._run(command, locale=locale)

    def _run(self, command: List[str], locale: Optional[str] = None, check: bool = True) -> None:
        logger.info("Running %s", " ".join(command))
        try:
            completed = subprocess.run(
                command,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except (OSError, subprocess.SubprocessError) as e:
            raise ProcessExecutionError(command, e, locale=locale) from e

        if completed.returncode != 0:
            detail = (completed.stderr or completed.stdout or "").strip()
            cause = f"exit status {completed.returncode}"
            if detail:
                cause = f"{cause}: {detail}"
            if not check:
                logger.warning("%s finished with %s", command[0], cause)
                return
            raise ProcessExecutionError(command, cause, locale=locale)
