"""Babel-backed CLDR providers.

Default collaborators of the plural translator:
    plural_rule_for - language tag -> plural rule selector (or None)
    plural_examples - language tag -> example number per plural category

Python 3.13+. Depends on Babel.
"""

from .examples import examples_for_rule, plural_examples
from .plural_rules import plural_rule_for

__all__ = [
    "examples_for_rule",
    "plural_examples",
    "plural_rule_for",
]
