"""Plural-aware translation: alignment, per-category calls and assembly.

PluralTranslator translates each aligned plural case with one call to an
external translate function, restores the ICU ``#`` operator in the output,
and serializes all branches into a single plural message.

Thread Safety:
    A PluralTranslator holds no mutable state; each translate() call builds
    its units and outcomes locally. Calls are sequential, one per category.

Failure isolation:
    A category whose translate call raises is recorded with a
    PerCategoryTranslationError and an empty branch. Remaining categories are
    still translated. The result surfaces the first error in category order.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import replace

from pluralmt.alignment import align, locale_based_units
from pluralmt.cldr import plural_examples, plural_rule_for
from pluralmt.config import DEFAULT_CONFIG, PluralTranslationConfig
from pluralmt.errors import PerCategoryTranslationError
from pluralmt.forms import PluralForms
from pluralmt.icu import get_plural_forms, to_plural_string
from pluralmt.placeholder import decode
from pluralmt.types import (
    ExampleMap,
    ExampleProvider,
    PluralFormatter,
    PluralRuleSelector,
    PluralTranslationResult,
    RuleProvider,
    TranslateFn,
    TranslationOutcome,
    TranslationUnit,
)

__all__ = ["PluralTranslator", "get_source_examples", "translate_plural"]

logger = logging.getLogger(__name__)


class PluralTranslator:
    """Translates one set of plural forms into a target language.

    Parameters:
        forms: Source plural forms
        translate_fn: External single-string translate call
        source_rule: Source locale plural rule, or None if unresolved
        target_examples: Target locale example number per category
        formatter: Serializer of category -> text into a plural message
        config: Markers, fallback example number and output options
        service: Translation service identifier, passed through to the result
        target_language_id: Target language identifier, passed through

    Example:
        >>> forms = PluralForms("count", {"other": "{%{REPLACE_NUMBER}%} items"})
        >>> translator = PluralTranslator(
        ...     forms,
        ...     lambda text: TranslationOutcome(text, price=1),
        ...     source_rule=None,
        ...     target_examples={"one": 1, "other": 5},
        ... )
        >>> result = translator.translate()
        >>> result.translated_text
        '{count, plural, one {# items} other {# items}}'
        >>> result.price
        2
    """

    __slots__ = (
        "_config",
        "_formatter",
        "_forms",
        "_service",
        "_source_rule",
        "_target_examples",
        "_target_language_id",
        "_translate_fn",
    )

    def __init__(
        self,
        forms: PluralForms,
        translate_fn: TranslateFn,
        *,
        source_rule: PluralRuleSelector | None,
        target_examples: ExampleMap,
        formatter: PluralFormatter | None = None,
        config: PluralTranslationConfig = DEFAULT_CONFIG,
        service: str | None = None,
        target_language_id: int | str | None = None,
    ) -> None:
        self._forms = forms
        self._translate_fn = translate_fn
        self._source_rule = source_rule
        self._target_examples = target_examples
        self._formatter = formatter
        self._config = config
        self._service = service
        self._target_language_id = target_language_id

    @property
    def forms(self) -> PluralForms:
        """Source plural forms being translated."""
        return self._forms

    def units(self) -> list[TranslationUnit]:
        """Aligned cases, in translation order."""
        return align(self._forms, self._source_rule, self._target_examples, self._config)

    def _translate_unit(self, unit: TranslationUnit) -> TranslationOutcome:
        try:
            outcome = self._translate_fn(unit.source_text)
        except Exception as exc:  # pylint: disable=broad-exception-caught
            # Isolated per category: siblings are still translated
            logger.warning("Translation of plural form '%s' failed: %s", unit.key, exc)
            error = PerCategoryTranslationError(unit.key, str(exc))
            error.__cause__ = exc
            return TranslationOutcome(translated_text=None, exception=error)

        if outcome.exception is not None:
            logger.warning(
                "Translation of plural form '%s' reported an error: %s",
                unit.key,
                outcome.exception,
            )
        if outcome.translated_text is not None:
            outcome = replace(
                outcome,
                translated_text=decode(
                    outcome.translated_text,
                    tag_open=self._config.tag_open,
                    tag_close=self._config.tag_close,
                ),
            )
        return outcome

    def _format(self, texts: Mapping[str, str]) -> str:
        if self._formatter is not None:
            return self._formatter(texts, self._forms.arg_name)
        return to_plural_string(texts, self._forms.arg_name, optimize=self._config.optimize)

    def translate(self) -> PluralTranslationResult:
        """Translate every aligned case and assemble the plural message.

        Returns:
            One aggregated result, also under partial failure
        """
        outcomes: list[tuple[str, TranslationOutcome]] = []
        for unit in self.units():
            logger.debug("Translating plural form '%s'", unit.key)
            outcomes.append((unit.key, self._translate_unit(unit)))

        texts = {key: outcome.translated_text or "" for key, outcome in outcomes}
        context_description = next(
            (o.context_description for _, o in outcomes if o.context_description is not None),
            None,
        )
        exception = next((o.exception for _, o in outcomes if o.exception is not None), None)

        return PluralTranslationResult(
            translated_text=self._format(texts),
            price=sum(outcome.price for _, outcome in outcomes),
            context_description=context_description,
            service=self._service,
            target_language_id=self._target_language_id,
            exception=exception,
        )


def translate_plural(
    text: str,
    translate_fn: TranslateFn,
    *,
    source_language_tag: str,
    target_language_tag: str,
    service: str | None = None,
    target_language_id: int | str | None = None,
    rule_provider: RuleProvider = plural_rule_for,
    example_provider: ExampleProvider = plural_examples,
    formatter: PluralFormatter | None = None,
    config: PluralTranslationConfig = DEFAULT_CONFIG,
) -> PluralTranslationResult:
    """Translate an ICU plural message into a target language.

    Args:
        text: Source ICU message containing a plural argument
        translate_fn: External single-string translate call
        source_language_tag: Language tag of ``text``
        target_language_tag: Language tag to translate into
        service: Translation service identifier, passed through
        target_language_id: Target language identifier, passed through
        rule_provider: Language tag -> plural rule (Babel by default)
        example_provider: Language tag -> example numbers (Babel by default)
        formatter: Plural message serializer (``to_plural_string`` by default)
        config: Markers, fallback example number and output options

    Returns:
        Aggregated PluralTranslationResult

    Raises:
        MissingPluralFormsError: If ``text`` has no plural forms

    Example:
        >>> result = translate_plural(
        ...     "{count, plural, one {# item} other {# items}}",
        ...     lambda text: TranslationOutcome(text),
        ...     source_language_tag="en",
        ...     target_language_tag="en",
        ... )
        >>> result.translated_text
        '{count, plural, one {# item} other {# items}}'
    """
    forms = get_plural_forms(text, placeholder=config.placeholder)
    translator = PluralTranslator(
        forms,
        translate_fn,
        source_rule=rule_provider(source_language_tag),
        target_examples=example_provider(target_language_tag),
        formatter=formatter,
        config=config,
        service=service,
        target_language_id=target_language_id,
    )
    return translator.translate()


def get_source_examples(
    source_language_tag: str,
    target_language_tag: str,
    forms: PluralForms,
    *,
    rule_provider: RuleProvider = plural_rule_for,
    example_provider: ExampleProvider = plural_examples,
    config: PluralTranslationConfig = DEFAULT_CONFIG,
) -> dict[str, str]:
    """Source text a translator would see for each target category.

    Example numbers are substituted without sentinel markup since no
    translation step follows.

    Example:
        >>> forms = PluralForms("n", {"one": "{%{REPLACE_NUMBER}%} day",
        ...                           "other": "{%{REPLACE_NUMBER}%} days"})
        >>> get_source_examples("en", "cs", forms)
        {'one': '1 day', 'few': '2 days', 'many': '1.5 days', 'other': '0 days'}
    """
    units = locale_based_units(
        forms,
        rule_provider(source_language_tag),
        example_provider(target_language_tag),
        config,
        add_tag=False,
    )
    return dict(units)
