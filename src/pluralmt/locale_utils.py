"""Locale utilities for language tag handling.

Centralizes locale tag normalization so that the CLDR providers parse every
tag the same way and share one cache of parsed Babel locales.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert a BCP-47 language tag to POSIX format for Babel.

    BCP-47 uses hyphens (cs-CZ), while Babel/POSIX uses underscores (cs_CZ).
    Surrounding whitespace is stripped.

    Args:
        locale_code: BCP-47 language tag (e.g., "en-US", "zh-Hant-TW")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "zh_Hant_TW")

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale(" cs ")
        'cs'
    """
    return locale_code.strip().replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the tag once and caches the result. Plural rule and example
    lookups for the same language in later requests reuse the parsed locale.

    Args:
        locale_code: Language tag (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))
