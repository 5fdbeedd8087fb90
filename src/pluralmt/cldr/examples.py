"""Representative example numbers per CLDR plural category.

Default ``example_provider`` for the translator. For every category a
locale's plural rule produces, picks one number belonging to it. Integers are
preferred because they read naturally in the text sent to the translator;
categories reached only by fractions (e.g. Czech ``many``, Russian ``other``)
get a decimal example.

Python 3.13+. Depends on Babel for CLDR data.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import TYPE_CHECKING

from pluralmt.cldr.plural_rules import plural_rule_for
from pluralmt.constants import CLDR_CATEGORY_ORDER, KEYWORD_OTHER

if TYPE_CHECKING:
    from pluralmt.core.babel_compat import PluralRuleProtocol

__all__ = ["examples_for_rule", "plural_examples"]

logger = logging.getLogger(__name__)

# Searched in order; the first candidate a category accepts becomes its example.
# Powers of ten reach categories like French "many" (1000000).
_INTEGER_CANDIDATES: tuple[int, ...] = (
    *range(0, 1001),
    *(10**exponent for exponent in range(4, 10)),
)

_DECIMAL_CANDIDATES: tuple[Decimal, ...] = tuple(
    Decimal(value) for value in ("1.5", "0.5", "2.5", "0.1", "1.1", "2.1", "0.0", "1.0")
)


def examples_for_rule(rule: PluralRuleProtocol) -> dict[str, int | Decimal]:
    """Compute one example number per category a plural rule produces.

    Args:
        rule: Plural rule selector exposing ``tags``

    Returns:
        Mapping category -> example, ordered zero, one, two, few, many, other.
        Categories no candidate reaches are omitted.
    """
    wanted = set(rule.tags) | {KEYWORD_OTHER}
    found: dict[str, int | Decimal] = {}

    for candidates in (_INTEGER_CANDIDATES, _DECIMAL_CANDIDATES):
        for number in candidates:
            category = rule(number)
            if category in wanted and category not in found:
                found[category] = number
                if len(found) == len(wanted):
                    break
        if len(found) == len(wanted):
            break

    missing = wanted - found.keys()
    if missing:
        logger.debug("No example number found for plural categories: %s", sorted(missing))

    ordered = [category for category in CLDR_CATEGORY_ORDER if category in found]
    return {category: found[category] for category in ordered}


def plural_examples(locale_code: str) -> dict[str, int | Decimal]:
    """Representative example numbers for each plural category of a locale.

    Args:
        locale_code: Language tag (e.g., "en", "cs-CZ")

    Returns:
        Mapping category -> example number, ordered zero, one, two, few,
        many, other. Empty for unresolvable tags.

    Examples:
        >>> plural_examples("en")
        {'one': 1, 'other': 0}
        >>> plural_examples("cs")
        {'one': 1, 'few': 2, 'many': Decimal('1.5'), 'other': 0}
    """
    rule = plural_rule_for(locale_code)
    if rule is None:
        return {}
    return examples_for_rule(rule)
