"""Pytest config"""
from pathlib import Path

import pytest

from xliff_sync.config import Config
from xliff_sync.errors import ProcessExecutionError
from xliff_sync.xliff.parser import XliffParser

SAMPLE_XLIFF = """<?xml version="1.0" encoding="UTF-8"?>
<xliff xmlns="urn:oasis:names:tc:xliff:document:1.2" xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance" version="1.2" xsi:schemaLocation="urn:oasis:names:tc:xliff:document:1.2 http://docs.oasis-open.org/xliff/v1.2/os/xliff-core-1.2-strict.xsd">
  <file original="Client/en.lproj/InfoPlist.strings" source-language="en" target-language="{locale}" datatype="plaintext">
    <header>
      <tool tool-id="com.apple.dt.xcode" tool-name="Xcode" tool-version="15.0" build-num="15A240d"/>
    </header>
    <body>
      <trans-unit id="CFBundleName" xml:space="preserve">
        <source>Firefox</source>
        <target>Firefox</target>
        <note>Bundle name</note>
      </trans-unit>
      <trans-unit id="CFBundleDisplayName" xml:space="preserve">
        <source>Firefox</source>
        <note>Bundle display name</note>
      </trans-unit>
      <trans-unit id="NSCameraUsageDescription" xml:space="preserve">
        <source>This lets you take and upload photos.</source>
        <note>Privacy - Camera Usage Description</note>
      </trans-unit>
    </body>
  </file>
  <file original="Extensions/ActionExtension/en.lproj/InfoPlist.strings" source-language="en" target-language="{locale}" datatype="plaintext">
    <body>
      <trans-unit id="CFBundleDisplayName" xml:space="preserve">
        <source>Open in Firefox</source>
        <target>Oscail i Firefox</target>
        <note>Action extension name</note>
      </trans-unit>
      <trans-unit id="CFBundleShortVersionString" xml:space="preserve">
        <source>1.0</source>
        <note>Version</note>
      </trans-unit>
    </body>
  </file>
  <file original="Client/en.lproj/Localizable.strings" source-language="en" target-language="{locale}" datatype="plaintext">
    <body>
      <trans-unit id="Foo" xml:space="preserve">
        <source>Foo</source>
        <target>Fú</target>
        <note>Original note</note>
      </trans-unit>
      <trans-unit id="1Password Fill Browser Action" xml:space="preserve">
        <source>Fill Password</source>
        <note>Action label</note>
      </trans-unit>
      <trans-unit id="Menu.Settings" xml:space="preserve">
        <source>Settings</source>
        <note>Menu item</note>
      </trans-unit>
    </body>
  </file>
  <file original="Shared/en.lproj/Version.strings" source-language="en" target-language="{locale}" datatype="plaintext">
    <body>
      <trans-unit id="CFBundleShortVersionString" xml:space="preserve">
        <source>1.0</source>
      </trans-unit>
    </body>
  </file>
</xliff>
"""


def make_xliff(locale: str = "ga") -> bytes:
    """Sample Xcode export for a locale."""
    return SAMPLE_XLIFF.replace("{locale}", locale).encode("utf-8")


class FakeBridge:
    """Stands in for xcodebuild: writes sample exports and records imports."""

    def __init__(self, broken_locales=(), failing_imports=(), start_error=False):
        self.broken_locales = set(broken_locales)
        self.failing_imports = set(failing_imports)
        self.start_error = start_error
        self.exported = []
        self.imported = []

    def export_localizations(self, project_path, localization_path, locales):
        if self.start_error:
            raise ProcessExecutionError(["xcodebuild"], FileNotFoundError("xcodebuild"))
        for locale in locales:
            target = Path(localization_path) / f"{locale}.xcloc" / "Localized Contents" / f"{locale}.xliff"
            target.parent.mkdir(parents=True, exist_ok=True)
            if locale in self.broken_locales:
                target.write_bytes(b"<xliff><file>")
            else:
                target.write_bytes(make_xliff(locale))
            self.exported.append(locale)

    def import_localizations(self, project_path, bundle_path, locale=None):
        if locale in self.failing_imports:
            raise ProcessExecutionError(["xcodebuild", "-importLocalizations"], "exit status 65")
        self.imported.append(Path(bundle_path))


@pytest.fixture()
def sample_document():
    """A parsed sample document for the 'ga' locale."""
    return XliffParser().parse_bytes(make_xliff("ga"))


@pytest.fixture()
def settings(tmp_path):
    """Config pointing every working directory into tmp_path."""
    return Config(
        export_base_path=str(tmp_path / "export"),
        import_base_path=str(tmp_path / "import"),
        xliff_filename="firefox-ios.xliff",
        max_workers=4,
    )


@pytest.fixture()
def project_path(tmp_path):
    """An empty .xcodeproj directory."""
    project = tmp_path / "firefox-ios" / "Client.xcodeproj"
    project.mkdir(parents=True)
    return project


@pytest.fixture()
def l10n_repo(tmp_path):
    """An l10n repository with a few locales and a templates directory."""
    repo = tmp_path / "l10n"
    for locale in ("en-US", "ga-IE", "fr", "templates"):
        (repo / locale).mkdir(parents=True)
    for locale in ("en-US", "ga-IE", "fr"):
        (repo / locale / "firefox-ios.xliff").write_bytes(make_xliff(locale))
    return repo


@pytest.fixture()
def xliff_factory():
    return make_xliff


@pytest.fixture()
def bridge_factory():
    return FakeBridge
