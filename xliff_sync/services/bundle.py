"""Builds the .xcloc bundles `xcodebuild -importLocalizations` reads."""

import json
import logging
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from ..config import Config, config
from ..errors import FileCopyError, FileReadError, FileWriteError
from ..locale_mapping import LocaleMapping, locale_mapping
from . import file_ops

logger = logging.getLogger(__name__)

LOCALIZED_CONTENTS = "Localized Contents"
SOURCE_CONTENTS = "Source Contents"
SOURCE_PLACEHOLDER = "temp.txt"
MANIFEST_NAME = "contents.json"


@dataclass
class XclocBundle:
    """Paths of one materialized bundle."""

    locale: str  # Xcode code
    root: Path

    @property
    def localized_contents(self) -> Path:
        return self.root / LOCALIZED_CONTENTS

    @property
    def xliff_path(self) -> Path:
        return self.localized_contents / f"{self.locale}.xliff"

    @property
    def source_placeholder(self) -> Path:
        return self.root / SOURCE_CONTENTS / SOURCE_PLACEHOLDER

    @property
    def manifest_path(self) -> Path:
        return self.root / MANIFEST_NAME


class XclocBundleBuilder:
    """Materializes an .xcloc bundle around a repository xliff file."""

    def __init__(
        self,
        base_dir: Union[str, Path, None] = None,
        mapping: LocaleMapping = locale_mapping,
        settings: Optional[Config] = None,
    ):
        self.settings = settings or config
        self.base_dir = Path(base_dir or self.settings.import_base_path)
        self.mapping = mapping

    def bundle_for(self, pontoon_locale: str) -> XclocBundle:
        xcode_locale = self.mapping.to_xcode(pontoon_locale)
        return XclocBundle(locale=xcode_locale, root=self.base_dir / f"{xcode_locale}.xcloc")

    def manifest(self, xcode_locale: str) -> dict:
        """The contents.json payload for a bundle."""
        return {
            "developmentRegion": self.settings.development_region,
            "project": self.settings.project_name,
            "targetLocale": xcode_locale,
            "toolInfo": dict(self.settings.TOOL_INFO),
            "version": self.settings.manifest_version,
        }

    def build(self, pontoon_locale: str, source_path: Union[str, Path]) -> Path:
        """
        Place a repository xliff file inside a fresh or reused bundle.

        Args:
            pontoon_locale: Repository locale code of the file
            source_path: The repository xliff file

        Returns:
            Path of the xliff file inside the bundle
        """
        source = Path(source_path)
        bundle = self.bundle_for(pontoon_locale)

        if not source.is_file():
            raise FileReadError(
                str(source), FileNotFoundError(f"No such file: {source}"), locale=pontoon_locale
            )

        is_new = not bundle.root.exists()
        file_ops.ensure_directory(bundle.localized_contents)
        if is_new:
            file_ops.ensure_directory(bundle.source_placeholder.parent)
            try:
                bundle.source_placeholder.touch()
            except OSError as e:
                raise FileWriteError(str(bundle.source_placeholder), e, locale=pontoon_locale) from e

        staged = bundle.localized_contents / f".{bundle.xliff_path.name}.staging"
        file_ops.remove_stale(staged)
        try:
            shutil.copyfile(source, staged)
        except OSError as e:
            raise FileCopyError(str(source), str(staged), e) from e
        destination = file_ops.replace(staged, bundle.xliff_path)

        payload = json.dumps(self.manifest(bundle.locale), indent=2, sort_keys=True) + "\n"
        file_ops.atomic_write_bytes(bundle.manifest_path, payload.encode("utf-8"))

        logger.info("Prepared %s for %s", bundle.root, pontoon_locale)
        return destination
