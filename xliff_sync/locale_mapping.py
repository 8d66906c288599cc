"""Bidirectional mapping between Xcode and Pontoon locale codes.

Xcode and the Pontoon-backed l10n repository spell some locales differently
(Xcode "ga" is Pontoon "ga-IE", Xcode "fil" is Pontoon "tl"). Both directions
are derived from one table of pairs so they cannot drift apart.
"""

from typing import Dict, Iterable, Optional, Tuple

# (Xcode code, Pontoon code) for every locale spelled differently.
LOCALE_PAIRS: Tuple[Tuple[str, str], ...] = (
    ("ga", "ga-IE"),
    ("nb", "nb-NO"),
    ("nn", "nn-NO"),
    ("sv", "sv-SE"),
    ("fil", "tl"),
    ("sat-Olck", "sat"),
    ("tzm", "zgh"),
)

# The repository keeps English under en-US while Xcode calls it "en".
ENGLISH_XCODE_CODE = "en"
ENGLISH_PONTOON_CODE = "en-US"


class LocaleMapping:
    """Converts locale codes between the Xcode and Pontoon spellings."""

    def __init__(self, pairs: Iterable[Tuple[str, str]] = LOCALE_PAIRS):
        self.xcode_to_pontoon: Dict[str, str] = {}
        self.pontoon_to_xcode: Dict[str, str] = {}

        for xcode_code, pontoon_code in pairs:
            if xcode_code in self.xcode_to_pontoon or pontoon_code in self.pontoon_to_xcode:
                raise ValueError(
                    f"Locale mapping is not one-to-one: {xcode_code!r} <-> {pontoon_code!r}"
                )
            self.xcode_to_pontoon[xcode_code] = pontoon_code
            self.pontoon_to_xcode[pontoon_code] = xcode_code

        self.check_inverse()

    def check_inverse(self) -> None:
        """Raise ValueError unless both directional tables are exact inverses."""
        for xcode_code, pontoon_code in self.xcode_to_pontoon.items():
            if self.pontoon_to_xcode.get(pontoon_code) != xcode_code:
                raise ValueError(f"No inverse mapping for Xcode locale {xcode_code!r}")
        for pontoon_code, xcode_code in self.pontoon_to_xcode.items():
            if self.xcode_to_pontoon.get(xcode_code) != pontoon_code:
                raise ValueError(f"No inverse mapping for Pontoon locale {pontoon_code!r}")

    def to_pontoon(self, xcode_locale: str) -> str:
        """
        Convert an Xcode locale code to the code used by the l10n repository.

        Args:
            xcode_locale: The Xcode locale code (e.g., "ga", "fil")

        Returns:
            The Pontoon locale code, or the input if no mapping exists
        """
        if xcode_locale == ENGLISH_XCODE_CODE:
            return ENGLISH_PONTOON_CODE
        return self.xcode_to_pontoon.get(xcode_locale, xcode_locale)

    def to_xcode(self, pontoon_locale: str) -> str:
        """
        Convert a Pontoon locale code to the code Xcode expects.

        Args:
            pontoon_locale: The Pontoon locale code (e.g., "ga-IE", "tl")

        Returns:
            The Xcode locale code, or the input if no mapping exists
        """
        return self.pontoon_to_xcode.get(pontoon_locale, pontoon_locale)

    def pontoon_mapping(self, xcode_locale: str) -> Optional[str]:
        """Return the Pontoon code only when an explicit mapping exists."""
        return self.xcode_to_pontoon.get(xcode_locale)

    def xcode_mapping(self, pontoon_locale: str) -> Optional[str]:
        """Return the Xcode code only when an explicit mapping exists."""
        return self.pontoon_to_xcode.get(pontoon_locale)


# Shared instance; read-only after construction so worker threads may use it.
locale_mapping = LocaleMapping()
