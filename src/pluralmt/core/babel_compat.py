"""Babel compatibility layer.

Provides centralized, lazy import infrastructure for Babel so that the pure
pipeline (form parsing, alignment, placeholder codec, assembly) never
triggers Babel's CLDR data load. Only the default locale providers in
``pluralmt.cldr`` need Babel.

Usage Pattern:
    from pluralmt.core.babel_compat import require_babel

    def my_provider(locale_code: str) -> None:
        require_babel("my_provider")  # Raises BabelImportError if Babel missing
        from babel import Locale  # Safe to import Babel now
        ...

Python 3.13+.
"""

from __future__ import annotations

from decimal import Decimal
from functools import lru_cache
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from babel.core import UnknownLocaleError as UnknownLocaleErrorType


# pylint: disable=unnecessary-ellipsis
class PluralRuleProtocol(Protocol):
    """Subset of ``babel.plural.PluralRule`` used by pluralmt.

    Any callable classifying a number into a CLDR keyword, with the set of
    keywords it can produce, satisfies this protocol.
    """

    @property
    def tags(self) -> frozenset[str]:
        """CLDR keywords this rule can produce (``other`` is implied)."""
        ...

    def __call__(self, n: int | float | Decimal) -> str:
        """Return the CLDR keyword for ``n``."""
        ...
# pylint: enable=unnecessary-ellipsis


__all__ = [
    "BabelImportError",
    "PluralRuleProtocol",
    "get_unknown_locale_error",
    "require_babel",
]


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    """Check if Babel is installed (computed once, cached via lru_cache)."""
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


class BabelImportError(ImportError):
    """Raised when Babel is required but not installed.

    Attributes:
        feature: Name of the feature that needed Babel
    """

    def __init__(self, feature: str) -> None:
        """Create error with feature-specific message.

        Args:
            feature: Name of the feature/function requiring Babel
        """
        message = (
            f"{feature} requires Babel for CLDR plural data. "
            "Install with: pip install Babel"
        )
        super().__init__(message)
        self.feature = feature


def require_babel(feature: str) -> None:
    """Assert that Babel is available, raising BabelImportError if not.

    Args:
        feature: Name of the feature requiring Babel (for error message)

    Raises:
        BabelImportError: If Babel is not installed
    """
    if not _check_babel_available():
        raise BabelImportError(feature)


def get_unknown_locale_error() -> type[UnknownLocaleErrorType]:
    """Get the Babel UnknownLocaleError exception class.

    Use for exception handling when you need to catch UnknownLocaleError.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_unknown_locale_error")
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    return UnknownLocaleError
