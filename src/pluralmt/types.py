"""Value types and collaborator signatures for plural translation.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import NamedTuple, TypeAlias

__all__ = [
    "CategoryKey",
    "ExampleMap",
    "ExampleNumber",
    "ExampleProvider",
    "PluralFormatter",
    "PluralRuleSelector",
    "PluralTranslationResult",
    "RuleProvider",
    "TranslateFn",
    "TranslationOutcome",
    "TranslationUnit",
]

CategoryKey: TypeAlias = str
"""CLDR keyword ('one', 'few', ...) or exact-value key ('=0', '=5')."""

ExampleNumber: TypeAlias = int | Decimal
"""Example number substituted into a form template."""

ExampleMap: TypeAlias = Mapping[str, ExampleNumber]
"""CLDR keyword -> representative example number for one locale."""

PluralRuleSelector: TypeAlias = Callable[[int | float | Decimal], str]
"""Locale-bound classifier of a number into its CLDR keyword."""

RuleProvider: TypeAlias = Callable[[str], PluralRuleSelector | None]
"""Language tag -> plural rule selector, or None when unresolvable."""

ExampleProvider: TypeAlias = Callable[[str], ExampleMap]
"""Language tag -> example number per plural category."""

PluralFormatter: TypeAlias = Callable[[Mapping[str, str], str], str]
"""(category -> text, argument name) -> ICU plural message."""

TranslateFn: TypeAlias = Callable[[str], "TranslationOutcome"]
"""Single-string machine translation call."""


class TranslationUnit(NamedTuple):
    """One aligned case: output key and the prepared source text."""

    key: CategoryKey
    source_text: str


@dataclass(slots=True)
class TranslationOutcome:
    """Result of translating one string.

    Attributes:
        translated_text: Translated text, or None if nothing came back
        price: Cost of the call, summed across categories
        context_description: Optional description the service produced
        exception: Error raised or reported by the call, if any
    """

    translated_text: str | None
    price: int = 0
    context_description: str | None = None
    exception: BaseException | None = None


@dataclass(frozen=True, slots=True)
class PluralTranslationResult:
    """Aggregated result of translating every plural category.

    Attributes:
        translated_text: Final ICU plural message
        price: Sum of all per-category prices
        context_description: First non-null description in category order
        service: Identifier of the translation service, passed through
        target_language_id: Target language identifier, passed through
        exception: First non-null per-category error in category order
        base_blank: Always False; the source text had plural forms
    """

    translated_text: str | None
    price: int
    context_description: str | None
    service: str | None
    target_language_id: int | str | None
    exception: BaseException | None = None
    base_blank: bool = False
