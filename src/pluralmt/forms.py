"""Plural form store.

Holds the argument name and the category -> template mapping extracted from
a source plural message. Leaf value, no translation logic.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from types import MappingProxyType

from pluralmt.constants import EXACT_VALUE_PREFIX
from pluralmt.errors import MissingPluralFormsError

__all__ = ["PluralForms", "exact_value_key", "parse_exact_value"]


@dataclass(frozen=True, slots=True)
class PluralForms:
    """Immutable plural forms of one source message.

    Forms keep the order in which they appeared in the source; that order
    drives the order of form-based translation cases.

    Attributes:
        arg_name: Name of the plural argument (e.g. "count")
        forms: Read-only mapping category key -> template

    Example:
        >>> forms = PluralForms("count", {"one": "# item", "other": "# items"})
        >>> forms["one"]
        '# item'
        >>> forms.get("few") is None
        True
    """

    arg_name: str
    forms: Mapping[str, str]

    def __post_init__(self) -> None:
        if not self.forms:
            msg = "Plural forms are empty"
            raise MissingPluralFormsError(msg)
        # Snapshot so later mutation of the caller's dict cannot leak in
        object.__setattr__(self, "forms", MappingProxyType(dict(self.forms)))

    def get(self, key: str | None) -> str | None:
        """Template for ``key``, or None when absent (None key never matches)."""
        if key is None:
            return None
        return self.forms.get(key)

    def __getitem__(self, key: str) -> str:
        return self.forms[key]

    def __contains__(self, key: object) -> bool:
        return key in self.forms

    def __iter__(self) -> Iterator[str]:
        return iter(self.forms)

    def __len__(self) -> int:
        return len(self.forms)

    def items(self) -> Iterator[tuple[str, str]]:
        return iter(self.forms.items())


def exact_value_key(number: object) -> str:
    """Build the exact-value key for a number ("=0", "=1.5")."""
    return f"{EXACT_VALUE_PREFIX}{number}"


def parse_exact_value(key: str) -> int | Decimal | None:
    """Return N for an exact-value key "=N", else None.

    Integral values come back as int, others as Decimal. Non-finite values
    (NaN, Infinity) are not exact values.

    Examples:
        >>> parse_exact_value("=0")
        0
        >>> parse_exact_value("=1.5")
        Decimal('1.5')
        >>> parse_exact_value("few") is None
        True
        >>> parse_exact_value("=x") is None
        True
    """
    if not key.startswith(EXACT_VALUE_PREFIX):
        return None
    suffix = key[len(EXACT_VALUE_PREFIX):]
    # Decimal() tolerates surrounding whitespace; selectors do not
    if not suffix or suffix != suffix.strip():
        return None
    try:
        value = Decimal(suffix)
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None
    if value == value.to_integral_value():
        return int(value)
    return value
