"""Services that move xliff files between Xcode and the l10n repository."""
