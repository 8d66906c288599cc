"""Synchronize Xcode XLIFF exports with a Pontoon l10n repository."""

__version__ = "0.1.0"
