"""Creates the blank template xliff translators start from."""

import logging
from pathlib import Path
from typing import Optional, Union

from ..config import Config, config
from ..xliff.parser import XliffParser
from ..xliff.writer import EXPORT_WRITER
from . import file_ops
from .repository import xliff_path

logger = logging.getLogger(__name__)


class TemplateBuilder:
    """
    Builds templates/<xliff> from the en-US file.

    The template keeps sources and notes but drops every <target> element
    and every target-language attribute.
    """

    def __init__(self, l10n_repo_path: Union[str, Path], settings: Optional[Config] = None):
        self.l10n_repo_path = Path(l10n_repo_path)
        self.settings = settings or config

    @property
    def source_path(self) -> Path:
        return xliff_path(
            self.l10n_repo_path, self.settings.template_source_locale, self.settings.xliff_filename
        )

    @property
    def template_path(self) -> Path:
        return xliff_path(
            self.l10n_repo_path, self.settings.templates_dirname, self.settings.xliff_filename
        )

    def build(self) -> Path:
        """Copy the en-US file into templates/ and blank it. Returns the template path."""
        template = file_ops.atomic_copy(self.source_path, self.template_path)

        document = XliffParser().parse(template)
        for translation_file in document.files:
            translation_file.remove_target_language()
        for unit in document.iter_units():
            unit.remove_target()

        EXPORT_WRITER.write(document, template)
        logger.info("Wrote template %s", template)
        return template
