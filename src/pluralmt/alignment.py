"""Category alignment engine.

Decides, for every plural category of the output message, which source form
template is translated and with which example number.

Two candidate streams are computed independently:

Form-based cases:
    One per source form, keyed by the source form key. Exact-value forms
    ("=0") use their own number; keyword forms use the target locale's
    example for that keyword, or the fallback example number.

Locale-based cases:
    One per category the target locale produces, keyed by the target
    category. The target example number is classified with the source
    locale's plural rule to pick the source template.

Merge:
    Locale-based cases win for every key they define. Remaining form-based
    cases come first (source order), followed by all locale-based cases
    (target example order). With CLDR-ordered examples the list naturally
    ends with: few, many, other.

A template lookup that misses every candidate degrades to an empty string.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from decimal import Decimal

from pluralmt.config import DEFAULT_CONFIG, PluralTranslationConfig
from pluralmt.constants import KEYWORD_OTHER
from pluralmt.forms import PluralForms, exact_value_key, parse_exact_value
from pluralmt.placeholder import encode, format_example_number
from pluralmt.types import ExampleMap, PluralRuleSelector, TranslationUnit

__all__ = [
    "align",
    "form_based_units",
    "locale_based_units",
    "resolve_template",
]

logger = logging.getLogger(__name__)


def _select(rule: PluralRuleSelector | None, number: int | float | Decimal) -> str | None:
    if rule is None:
        return None
    return rule(number)


def resolve_template(forms: PluralForms, candidates: Iterable[str | None]) -> str:
    """First template present among ``candidates``, else ``other``, else "".

    None candidates (an unresolved plural rule) are skipped.
    """
    for key in candidates:
        template = forms.get(key)
        if template is not None:
            return template
    template = forms.get(KEYWORD_OTHER)
    if template is None:
        logger.debug("No template resolved from %s; using empty text", list(forms))
        return ""
    return template


def _prepare(template: str, number: int | float | Decimal, config: PluralTranslationConfig) -> str:
    return encode(
        template,
        number,
        placeholder=config.placeholder,
        tag_open=config.tag_open,
        tag_close=config.tag_close,
    )


def form_based_units(
    forms: PluralForms,
    source_rule: PluralRuleSelector | None,
    target_examples: ExampleMap,
    config: PluralTranslationConfig = DEFAULT_CONFIG,
) -> list[TranslationUnit]:
    """One unit per source form, keyed by the source form key."""
    units: list[TranslationUnit] = []
    for key, template in forms.items():
        exact = parse_exact_value(key)
        if exact is not None:
            units.append(TranslationUnit(key, _prepare(template, exact, config)))
            continue

        number = target_examples.get(key, config.fallback_example)
        resolved = resolve_template(
            forms,
            (
                key,
                _select(source_rule, number),
                exact_value_key(format_example_number(number)),
            ),
        )
        units.append(TranslationUnit(key, _prepare(resolved, number, config)))
    return units


def locale_based_units(
    forms: PluralForms,
    source_rule: PluralRuleSelector | None,
    target_examples: ExampleMap,
    config: PluralTranslationConfig = DEFAULT_CONFIG,
    *,
    add_tag: bool = True,
) -> list[TranslationUnit]:
    """One unit per target category, drawing from the matching source form."""
    units: list[TranslationUnit] = []
    for category, number in target_examples.items():
        resolved = resolve_template(
            forms,
            (
                _select(source_rule, number),
                exact_value_key(format_example_number(number)),
            ),
        )
        if add_tag:
            text = _prepare(resolved, number, config)
        else:
            text = encode(resolved, number, add_tag=False, placeholder=config.placeholder)
        units.append(TranslationUnit(category, text))
    return units


def align(
    forms: PluralForms,
    source_rule: PluralRuleSelector | None,
    target_examples: ExampleMap,
    config: PluralTranslationConfig = DEFAULT_CONFIG,
) -> list[TranslationUnit]:
    """Merge form-based and locale-based cases into one ordered unit list.

    Args:
        forms: Source plural forms
        source_rule: Source locale plural rule, or None if unresolved
        target_examples: Target locale example number per category
        config: Fallback example number and placeholder markers

    Returns:
        Units in translation order; keys are unique.

    Example:
        >>> forms = PluralForms("n", {"other": "{%{REPLACE_NUMBER}%} files"})
        >>> [u.key for u in align(forms, None, {"one": 1, "few": 2, "other": 5})]
        ['one', 'few', 'other']
    """
    form_cases = form_based_units(forms, source_rule, target_examples, config)
    locale_cases = locale_based_units(forms, source_rule, target_examples, config)
    locale_keys = {unit.key for unit in locale_cases}

    merged = [unit for unit in form_cases if unit.key not in locale_keys]
    merged.extend(locale_cases)
    logger.debug(
        "Aligned %d form cases and %d locale cases into keys %s",
        len(form_cases),
        len(locale_cases),
        [unit.key for unit in merged],
    )
    return merged
