"""Tests for .xcloc bundle construction."""

import json

import pytest

from xliff_sync.errors import DirectoryCreationError, FileDeleteError, FileReadError
from xliff_sync.services.bundle import XclocBundleBuilder


@pytest.fixture()
def builder(tmp_path, settings):
    return XclocBundleBuilder(base_dir=tmp_path / "import", settings=settings)


@pytest.fixture()
def source(tmp_path, xliff_factory):
    path = tmp_path / "l10n" / "ga-IE" / "firefox-ios.xliff"
    path.parent.mkdir(parents=True)
    path.write_bytes(xliff_factory("ga-IE"))
    return path


def test_build_creates_bundle_layout(tmp_path, builder, source):
    placed = builder.build("ga-IE", source)

    bundle = tmp_path / "import" / "ga.xcloc"
    assert placed == bundle / "Localized Contents" / "ga.xliff"
    assert placed.read_bytes() == source.read_bytes()
    assert (bundle / "Source Contents" / "temp.txt").is_file()

    manifest = json.loads((bundle / "contents.json").read_text())
    assert manifest == {
        "developmentRegion": "en-US",
        "project": "Client.xcodeproj",
        "targetLocale": "ga",
        "toolInfo": {
            "toolBuildNumber": "13A233",
            "toolID": "com.apple.dt.xcode",
            "toolName": "Xcode",
            "toolVersion": "13.0",
        },
        "version": "1.0",
    }


def test_unmapped_locale_keeps_its_code(tmp_path, builder, source):
    placed = builder.build("fr", source)
    assert placed == tmp_path / "import" / "fr.xcloc" / "Localized Contents" / "fr.xliff"


def test_rebuild_reuses_existing_bundle(tmp_path, builder, source):
    builder.build("ga-IE", source)
    placeholder = tmp_path / "import" / "ga.xcloc" / "Source Contents" / "temp.txt"
    placeholder.unlink()

    source.write_bytes(b"<xliff/>")
    placed = builder.build("ga-IE", source)

    assert placed.read_bytes() == b"<xliff/>"
    assert not placeholder.exists()
    assert [p.name for p in placed.parent.iterdir()] == ["ga.xliff"]


def test_stale_staging_file_is_removed(tmp_path, builder, source):
    localized = tmp_path / "import" / "ga.xcloc" / "Localized Contents"
    localized.mkdir(parents=True)
    (localized / ".ga.xliff.staging").write_bytes(b"leftover")

    placed = builder.build("ga-IE", source)

    assert placed.read_bytes() == source.read_bytes()
    assert not (localized / ".ga.xliff.staging").exists()


def test_staging_collision_is_reported(tmp_path, builder, source):
    (tmp_path / "import" / "ga.xcloc" / "Localized Contents" / ".ga.xliff.staging").mkdir(parents=True)
    with pytest.raises(FileDeleteError):
        builder.build("ga-IE", source)


def test_missing_source_is_reported(tmp_path, builder):
    with pytest.raises(FileReadError) as excinfo:
        builder.build("ga-IE", tmp_path / "l10n" / "ga-IE" / "firefox-ios.xliff")
    assert excinfo.value.locale == "ga-IE"


def test_uncreatable_directory_is_reported(tmp_path, settings, source):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    builder = XclocBundleBuilder(base_dir=blocker / "import", settings=settings)

    with pytest.raises(DirectoryCreationError):
        builder.build("ga-IE", source)
