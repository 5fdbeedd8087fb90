"""Tests for cldr/ - Babel-backed plural rules and example numbers.

Coverage:
    - Plural rule resolution, including unknown locales (soft and strict)
    - Example numbers per category across locale families
    - CLDR ordering of example maps

Python 3.13+.
"""

from __future__ import annotations

import logging
from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pluralmt.cldr import examples_for_rule, plural_examples, plural_rule_for
from pluralmt.constants import CLDR_CATEGORY_ORDER
from pluralmt.errors import UnresolvedLocaleError

LOCALE_CODES = st.sampled_from([
    "en", "en-US", "de", "fr", "cs", "cs-CZ", "pl", "ru", "uk", "ar", "lv",
    "ga", "cy", "ja", "zh-Hans-CN", "pt-BR", "sl", "lt", "he",
])


class TestPluralRuleFor:
    """Test plural_rule_for."""

    def test_known_locale(self) -> None:
        """A known tag resolves to a callable rule."""
        rule = plural_rule_for("cs-CZ")
        assert rule is not None
        assert rule(1) == "one"
        assert rule(3) == "few"
        assert rule(Decimal("1.5")) == "many"
        assert rule(5) == "other"

    def test_unknown_locale_returns_none(self, caplog: pytest.LogCaptureFixture) -> None:
        """Unknown tags are a soft failure: None plus a warning."""
        with caplog.at_level(logging.WARNING, logger="pluralmt.cldr.plural_rules"):
            assert plural_rule_for("xx") is None
        assert "Unknown locale 'xx'" in caplog.text

    def test_unknown_locale_strict(self) -> None:
        """strict=True raises UnresolvedLocaleError."""
        with pytest.raises(UnresolvedLocaleError) as exc_info:
            plural_rule_for("xx", strict=True)
        assert exc_info.value.locale_code == "xx"
        assert isinstance(exc_info.value, LookupError)


class TestPluralRuleCategories:
    """Test CLDR categories produced by resolved rules."""

    @pytest.mark.parametrize(
        ("number", "locale", "expected"),
        [
            (1, "en", "one"),
            (0, "en", "other"),
            (5, "ru", "many"),
            (22, "ru", "few"),
            (2, "ar", "two"),
            (0, "lv", "zero"),
            (42, "ja", "other"),
        ],
    )
    def test_categories(self, number: int, locale: str, expected: str) -> None:
        """Numbers map to the locale's CLDR category."""
        rule = plural_rule_for(locale)
        assert rule is not None
        assert rule(number) == expected


class TestPluralExamples:
    """Test plural_examples."""

    def test_english(self) -> None:
        """English: one and other, smallest integers first."""
        assert plural_examples("en") == {"one": 1, "other": 0}

    def test_czech(self) -> None:
        """Czech 'many' is reached only by fractions."""
        assert plural_examples("cs") == {"one": 1, "few": 2, "many": Decimal("1.5"), "other": 0}

    def test_russian(self) -> None:
        """Russian 'other' is reached only by fractions."""
        assert plural_examples("ru") == {"one": 1, "few": 2, "many": 0, "other": Decimal("1.5")}

    def test_polish(self) -> None:
        """Polish mirrors Russian for integers."""
        assert plural_examples("pl") == {"one": 1, "few": 2, "many": 0, "other": Decimal("1.5")}

    def test_arabic_all_six_categories(self) -> None:
        """Arabic uses every CLDR category."""
        assert plural_examples("ar") == {
            "zero": 0, "one": 1, "two": 2, "few": 3, "many": 11, "other": 100,
        }

    def test_japanese(self) -> None:
        """Japanese has only 'other'."""
        assert plural_examples("ja") == {"other": 0}

    def test_unknown_locale(self) -> None:
        """Unknown tags yield no examples."""
        assert plural_examples("xx") == {}

    @given(LOCALE_CODES)
    def test_examples_classify_back(self, locale: str) -> None:
        """Each example belongs to its category, in CLDR order, ending with other."""
        rule = plural_rule_for(locale)
        assert rule is not None
        examples = plural_examples(locale)
        for category, number in examples.items():
            assert rule(number) == category
        assert list(examples) == [c for c in CLDR_CATEGORY_ORDER if c in examples]
        assert list(examples)[-1] == "other"


class TestExamplesForRule:
    """Test examples_for_rule with a hand-written rule."""

    def test_unreachable_category_omitted(self) -> None:
        """Categories no candidate reaches are left out."""

        class OneOtherRule:
            tags = frozenset({"one", "two"})

            def __call__(self, n: int | float | Decimal) -> str:
                return "one" if n == 1 else "other"

        assert examples_for_rule(OneOtherRule()) == {"one": 1, "other": 0}
