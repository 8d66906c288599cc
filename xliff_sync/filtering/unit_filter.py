"""Rules deciding which translation units reach translators and Xcode."""

import logging
from typing import FrozenSet, Optional

from ..models.task_result import Direction
from ..models.xliff_document import TranslationDocument

logger = logging.getLogger(__name__)

DISPLAY_NAME_KEY = "CFBundleDisplayName"

# Keys we don't want to expose to the localization team, in either direction.
EXCLUDED_TRANSLATIONS: FrozenSet[str] = frozenset({
    "CFBundleName",
    DISPLAY_NAME_KEY,
    "CFBundleShortVersionString",
})

# 1Password integration string, only stripped on the way out.
EXPORT_ONLY_EXCLUDED_TRANSLATIONS: FrozenSet[str] = frozenset({
    "1Password Fill Browser Action",
})

EXPORT_EXCLUDED_TRANSLATIONS = EXCLUDED_TRANSLATIONS | EXPORT_ONLY_EXCLUDED_TRANSLATIONS
IMPORT_EXCLUDED_TRANSLATIONS = EXCLUDED_TRANSLATIONS

# The app crashes without the Info.plist privacy strings and the App Store
# rejects builds missing the WidgetKit intent strings.
REQUIRED_TRANSLATIONS: FrozenSet[str] = frozenset({
    # Client/Info.plist
    "NSCameraUsageDescription",
    "NSLocationWhenInUseUsageDescription",
    "NSMicrophoneUsageDescription",
    "NSPhotoLibraryAddUsageDescription",
    # Home screen shortcuts
    "ShortcutItemTitleNewPrivateTab",
    "ShortcutItemTitleNewTab",
    "ShortcutItemTitleQRCode",
    # WidgetKit/en-US.lproj/WidgetIntents.strings
    "2GqvPe",
    "ctDNmu",
    "eHmH1H",
    "eqyNJg",
    "eV8mOT",
    "fi3W24-2GqvPe",
    "fi3W24-eHmH1H",
    "fi3W24-scEmjs",
    "fi3W24-xRJbBP",
    "PzSrmZ-2GqvPe",
    "PzSrmZ-eHmH1H",
    "PzSrmZ-scEmjs",
    "PzSrmZ-xRJbBP",
    "scEmjs",
    "w9jdPK",
    "xRJbBP",
})

ACTION_EXTENSION_MARKER = "Extensions/ActionExtension"
INFO_PLIST_STRINGS = "InfoPlist.strings"


def is_action_extension_file(file_original: str) -> bool:
    """Check if a file's original path is the ActionExtension InfoPlist.strings."""
    return ACTION_EXTENSION_MARKER in file_original and INFO_PLIST_STRINGS in file_original


def should_exclude(
    unit_id: Optional[str],
    in_action_extension: bool,
    excluded: FrozenSet[str],
) -> bool:
    """
    Decide whether a unit is dropped from the document.

    Args:
        unit_id: The trans-unit id (units without one are always kept)
        in_action_extension: Whether the containing file is the ActionExtension InfoPlist
        excluded: The exclusion set for the current direction

    Returns:
        True if the unit should be removed
    """
    if unit_id is None:
        return False
    # The action extension keeps its own display name.
    if unit_id == DISPLAY_NAME_KEY and in_action_extension:
        return False
    return unit_id in excluded


class TranslationUnitFilter:
    """Applies the exclusion and required-translation rules to a document."""

    def __init__(self, direction: Direction):
        self.direction = direction
        if direction == Direction.EXPORT:
            self.excluded = EXPORT_EXCLUDED_TRANSLATIONS
        else:
            self.excluded = IMPORT_EXCLUDED_TRANSLATIONS
        self.required = REQUIRED_TRANSLATIONS

    def excludes(self, unit_id: Optional[str], file_original: str = "") -> bool:
        return should_exclude(unit_id, is_action_extension_file(file_original), self.excluded)

    def apply_exclusions(self, document: TranslationDocument) -> int:
        """Detach every excluded unit. Returns the number of units removed."""
        removed = 0
        for translation_file in document.files:
            original = translation_file.original
            for unit in translation_file.units:
                if self.excludes(unit.id, original):
                    logger.debug("Excluding %s from %s", unit.id, original)
                    unit.detach()
                    removed += 1
        return removed

    def apply_required_fallback(self, document: TranslationDocument) -> int:
        """
        Give every required unit a target, copying the source when it has none.

        Existing non-empty targets are never touched, so running this twice
        changes nothing the second time.

        Returns:
            The number of targets filled in
        """
        filled = 0
        for unit in document.iter_units():
            if unit.id not in self.required or unit.target:
                continue
            unit.target = unit.require_source()
            logger.debug("Filled missing target for %s from source", unit.id)
            filled += 1
        return filled

    def prune_empty_files(self, document: TranslationDocument) -> int:
        """Detach file groups left without units. Returns the number removed."""
        removed = 0
        for translation_file in document.files:
            if translation_file.is_empty():
                logger.debug("Dropping empty file %s", translation_file.original)
                translation_file.detach()
                removed += 1
        return removed
