"""CLDR plural rule resolution using Babel.

Default ``rule_provider`` for the translator: maps a language tag to the
locale's plural rule selector. Unknown tags are a soft failure; they are
logged and resolved to ``None`` so the alignment engine falls further down
its template fallback chain.

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pluralmt.core.babel_compat import get_unknown_locale_error, require_babel
from pluralmt.errors import UnresolvedLocaleError
from pluralmt.locale_utils import get_babel_locale

if TYPE_CHECKING:
    from babel.plural import PluralRule

__all__ = ["plural_rule_for"]

logger = logging.getLogger(__name__)


def plural_rule_for(locale_code: str, *, strict: bool = False) -> PluralRule | None:
    """Resolve the CLDR plural rule selector for a language tag.

    Args:
        locale_code: Language tag (e.g., "en", "cs-CZ", "pt_BR")
        strict: Raise instead of returning None for unresolvable tags

    Returns:
        Babel PluralRule (callable ``rule(n) -> keyword``), or None if the tag
        is not a known locale and ``strict`` is False.

    Raises:
        UnresolvedLocaleError: If the tag is unknown and ``strict`` is True
        BabelImportError: If Babel is not installed

    Examples:
        >>> plural_rule_for("cs")(3)
        'few'
        >>> plural_rule_for("xx-invalid") is None
        True
    """
    require_babel("plural_rule_for")
    unknown_locale_error = get_unknown_locale_error()

    try:
        locale_obj = get_babel_locale(locale_code)
    except (unknown_locale_error, ValueError, TypeError) as e:
        if strict:
            raise UnresolvedLocaleError(str(locale_code), str(e)) from e
        logger.warning("Unknown locale '%s': %s. No plural rules resolved", locale_code, e)
        return None

    return locale_obj.plural_form
