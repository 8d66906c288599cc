"""Export and import orchestration across many locales."""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Callable, Iterable, Optional, Union

from ..config import Config, config
from ..errors import LocalizationError
from ..filtering.comment_overrides import CommentOverrideStore
from ..filtering.unit_filter import TranslationUnitFilter
from ..locale_mapping import LocaleMapping, locale_mapping
from ..models.task_result import Direction, LocaleTaskResult, Stage, SyncOutcome
from ..xliff.parser import XliffParser
from ..xliff.writer import EXPORT_WRITER, IMPORT_WRITER
from . import file_ops
from .bundle import LOCALIZED_CONTENTS, XclocBundleBuilder
from .repository import xliff_path
from .xcodebuild import XcodeBuildBridge

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int, str], None]


class LocaleSyncOrchestrator:
    """
    Moves xliff files between an Xcode project and the l10n repository.

    Export runs xcodebuild once for every locale, then cleans up each
    exported file in a worker pool and copies it into the repository.
    Import builds one .xcloc bundle per locale and imports them one by one.

    A failing locale never stops the others; every outcome is collected in
    the returned SyncOutcome.
    """

    def __init__(
        self,
        project_path: Union[str, Path],
        l10n_repo_path: Union[str, Path],
        bridge: Optional[XcodeBuildBridge] = None,
        mapping: LocaleMapping = locale_mapping,
        settings: Optional[Config] = None,
        bundle_builder: Optional[XclocBundleBuilder] = None,
        progress_callback: Optional[ProgressCallback] = None,
    ):
        """
        Initialize the orchestrator.

        Args:
            project_path: Path to the .xcodeproj
            l10n_repo_path: Root of the l10n repository
            bridge: xcodebuild bridge (a default one is created if not provided)
            mapping: Locale code mapping
            settings: Configuration (uses the global config if not provided)
            bundle_builder: Builder for import bundles
            progress_callback: Optional callback(current, total, locale) after each locale
        """
        self.project_path = Path(project_path)
        self.l10n_repo_path = Path(l10n_repo_path)
        self.settings = settings or config
        self.bridge = bridge or XcodeBuildBridge()
        self.mapping = mapping
        self.bundle_builder = bundle_builder or XclocBundleBuilder(
            mapping=mapping, settings=self.settings
        )
        self.progress_callback = progress_callback

    @property
    def export_base_path(self) -> Path:
        return Path(self.settings.export_base_path)

    @property
    def comments_path(self) -> Path:
        """l10n_comments.txt lives next to the .xcodeproj."""
        return self.project_path.parent / self.settings.comments_filename

    def exported_xliff_path(self, xcode_locale: str) -> Path:
        return (
            self.export_base_path
            / f"{xcode_locale}.xcloc"
            / LOCALIZED_CONTENTS
            / f"{xcode_locale}.xliff"
        )

    def repository_xliff_path(self, pontoon_locale: str) -> Path:
        return xliff_path(self.l10n_repo_path, pontoon_locale, self.settings.xliff_filename)

    # Export

    def export_locales(self, xcode_locales: Iterable[str]) -> SyncOutcome:
        """
        Export locales from the project into the l10n repository.

        Args:
            xcode_locales: Xcode locale codes to export

        Returns:
            SyncOutcome with one result per locale, in the order given

        Raises:
            ProcessExecutionError: If the bulk xcodebuild export cannot be
                started; there is nothing to process in that case.
        """
        locales = list(dict.fromkeys(xcode_locales))
        outcome = SyncOutcome(direction=Direction.EXPORT)
        if not locales:
            return outcome

        logger.info("Exporting %d locale(s) to %s", len(locales), self.export_base_path)
        self.bridge.export_localizations(self.project_path, self.export_base_path, locales)

        overrides = CommentOverrideStore.load(self.comments_path)

        results = {}
        workers = max(1, min(self.settings.max_workers, len(locales)))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = {
                executor.submit(self._export_locale, locale, overrides): locale
                for locale in locales
            }
            for done, future in enumerate(as_completed(futures), 1):
                locale = futures[future]
                results[locale] = future.result()
                self._report_progress(done, len(locales), locale)

        outcome.results = [results[locale] for locale in locales]
        return outcome

    def _export_locale(self, xcode_locale: str, overrides: CommentOverrideStore) -> LocaleTaskResult:
        result = LocaleTaskResult(locale=xcode_locale)
        stage = Stage.PARSE
        try:
            source = self.exported_xliff_path(xcode_locale)
            document = XliffParser().parse(source)

            stage = Stage.TRANSFORM
            pontoon_locale = self.mapping.pontoon_mapping(xcode_locale)
            if pontoon_locale:
                document.set_target_language(pontoon_locale)
            unit_filter = TranslationUnitFilter(Direction.EXPORT)
            result.units_removed = unit_filter.apply_exclusions(document)
            result.notes_overridden = overrides.apply(document)
            result.files_removed = unit_filter.prune_empty_files(document)

            stage = Stage.WRITE
            EXPORT_WRITER.write(document, source)

            stage = Stage.COPY
            destination = self.repository_xliff_path(self.mapping.to_pontoon(xcode_locale))
            result.output_path = str(file_ops.atomic_copy(source, destination))
        except Exception as e:
            self._record_failure(result, stage, e)
        else:
            logger.info(
                "Exported %s: %d unit(s) excluded, %d file(s) dropped, %d note(s) overridden",
                xcode_locale, result.units_removed, result.files_removed, result.notes_overridden,
            )
        return result

    # Import

    def import_locales(self, pontoon_locales: Iterable[str]) -> SyncOutcome:
        """
        Import locales from the l10n repository into the project, one at a time.

        Args:
            pontoon_locales: Repository locale codes to import

        Returns:
            SyncOutcome with one result per locale, in the order given
        """
        locales = list(dict.fromkeys(pontoon_locales))
        outcome = SyncOutcome(direction=Direction.IMPORT)
        for index, locale in enumerate(locales, 1):
            outcome.results.append(self._import_locale(locale))
            self._report_progress(index, len(locales), locale)
        return outcome

    def _import_locale(self, pontoon_locale: str) -> LocaleTaskResult:
        result = LocaleTaskResult(locale=pontoon_locale)
        stage = Stage.BUNDLE
        try:
            bundle_xliff = self.bundle_builder.build(
                pontoon_locale, self.repository_xliff_path(pontoon_locale)
            )

            stage = Stage.PARSE
            document = XliffParser(preserve_whitespace=False).parse(bundle_xliff)

            stage = Stage.TRANSFORM
            xcode_locale = self.mapping.xcode_mapping(pontoon_locale)
            if xcode_locale:
                document.set_target_language(xcode_locale)
            unit_filter = TranslationUnitFilter(Direction.IMPORT)
            result.units_removed = unit_filter.apply_exclusions(document)
            result.targets_filled = unit_filter.apply_required_fallback(document)
            result.files_removed = unit_filter.prune_empty_files(document)

            stage = Stage.WRITE
            IMPORT_WRITER.write(document, bundle_xliff)
            result.output_path = str(bundle_xliff)

            stage = Stage.IMPORT
            bundle_root = bundle_xliff.parent.parent
            self.bridge.import_localizations(self.project_path, bundle_root, locale=pontoon_locale)
        except Exception as e:
            self._record_failure(result, stage, e)
        else:
            logger.info(
                "Imported %s: %d unit(s) excluded, %d target(s) filled from source",
                pontoon_locale, result.units_removed, result.targets_filled,
            )
        return result

    # Helpers

    def _record_failure(self, result: LocaleTaskResult, stage: Stage, error: Exception) -> None:
        if isinstance(error, LocalizationError) and error.locale is None:
            error.locale = result.locale
        result.stage = stage
        result.error = error
        logger.error("Locale %s failed during %s: %s", result.locale, stage.value, error)

    def _report_progress(self, current: int, total: int, locale: str) -> None:
        if self.progress_callback:
            self.progress_callback(current, total, locale)
