"""Configuration management for the XLIFF synchronization pipeline."""

import os
import tempfile
from dataclasses import dataclass, field
from typing import Dict, List, Optional
from dotenv import load_dotenv

load_dotenv()


def _optional_float(name: str) -> Optional[float]:
    value = os.getenv(name, "").strip()
    return float(value) if value else None


@dataclass
class Config:
    """Application configuration."""

    # Working directories
    export_base_path: str = field(
        default_factory=lambda: os.getenv("XLIFF_SYNC_EXPORT_BASE_PATH", "/tmp/ios-localization")
    )
    import_base_path: str = field(
        default_factory=lambda: os.getenv(
            "XLIFF_SYNC_IMPORT_BASE_PATH",
            os.path.join(tempfile.gettempdir(), "locales_to_import"),
        )
    )

    # l10n repository layout
    xliff_filename: str = field(
        default_factory=lambda: os.getenv("XLIFF_SYNC_XLIFF_FILENAME", "firefox-ios.xliff")
    )
    comments_filename: str = "l10n_comments.txt"
    templates_dirname: str = "templates"
    template_source_locale: str = "en-US"

    # Concurrency and external tool settings
    max_workers: int = field(
        default_factory=lambda: int(os.getenv("XLIFF_SYNC_MAX_WORKERS", "8"))
    )
    xcodebuild_path: str = field(
        default_factory=lambda: os.getenv("XLIFF_SYNC_XCODEBUILD", "xcodebuild")
    )
    tool_timeout: Optional[float] = field(
        default_factory=lambda: _optional_float("XLIFF_SYNC_TOOL_TIMEOUT")
    )

    # .xcloc manifest (contents.json)
    development_region: str = "en-US"
    project_name: str = "Client.xcodeproj"
    manifest_version: str = "1.0"
    TOOL_INFO: Dict[str, str] = field(default_factory=lambda: {
        "toolBuildNumber": "13A233",
        "toolID": "com.apple.dt.xcode",
        "toolName": "Xcode",
        "toolVersion": "13.0",
    })

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []
        if self.max_workers < 1:
            errors.append("XLIFF_SYNC_MAX_WORKERS must be at least 1")
        if self.tool_timeout is not None and self.tool_timeout <= 0:
            errors.append("XLIFF_SYNC_TOOL_TIMEOUT must be a positive number of seconds")
        if not self.xliff_filename:
            errors.append("XLIFF_SYNC_XLIFF_FILENAME is not set")
        return errors


# Global config instance
config = Config()
