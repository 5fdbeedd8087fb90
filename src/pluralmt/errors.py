"""pluralmt exception hierarchy.

Fatal errors (MissingPluralFormsError) propagate to the immediate caller.
Soft errors (UnresolvedLocaleError, PerCategoryTranslationError) are either
logged and mapped to an absent value, or recorded on a single translation
outcome while sibling categories proceed.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "MissingPluralFormsError",
    "PerCategoryTranslationError",
    "PluralMtError",
    "UnresolvedLocaleError",
]


class PluralMtError(Exception):
    """Base exception for all pluralmt errors."""


class MissingPluralFormsError(PluralMtError, ValueError):
    """Source string cannot be parsed into plural forms.

    Raised when the source message has no plural argument at all, or when it
    is too malformed to locate one. Not recovered locally.

    Attributes:
        source_text: The text that failed to parse
    """

    def __init__(self, message: str, *, source_text: str = "") -> None:
        """Initialize MissingPluralFormsError.

        Args:
            message: Human readable description of the failure
            source_text: The text that failed to parse
        """
        super().__init__(message)
        self.source_text = source_text


class UnresolvedLocaleError(PluralMtError, LookupError):
    """Locale tag yields no CLDR plural rules.

    Only raised by providers called with ``strict=True``. The default,
    non-strict providers log a warning and return an absent value so that
    alignment falls further down its fallback chain.

    Attributes:
        locale_code: The locale tag that could not be resolved
    """

    def __init__(self, locale_code: str, reason: str = "") -> None:
        """Initialize UnresolvedLocaleError.

        Args:
            locale_code: The locale tag that could not be resolved
            reason: Optional detail from the underlying locale parser
        """
        message = f"No plural rules for locale '{locale_code}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.locale_code = locale_code


class PerCategoryTranslationError(PluralMtError):
    """Translation of a single plural category failed.

    Recorded on that category's outcome; the remaining categories are still
    translated. The original exception is chained as ``__cause__``.

    Attributes:
        category: Plural key whose translation failed (e.g. "few", "=0")
    """

    def __init__(self, category: str, message: str) -> None:
        """Initialize PerCategoryTranslationError.

        Args:
            category: Plural key whose translation failed
            message: Description of the underlying failure
        """
        super().__init__(f"Translation of plural form '{category}' failed: {message}")
        self.category = category
