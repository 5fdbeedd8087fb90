"""Tests for icu/parser.py - extraction of plural forms from ICU messages.

Python 3.13+.
"""

from __future__ import annotations

import pytest

from pluralmt.constants import REPLACE_NUMBER_PLACEHOLDER as P
from pluralmt.errors import MissingPluralFormsError
from pluralmt.icu import get_plural_forms, replace_number_operator


class TestGetPluralForms:
    """Test parsing of well-formed plural messages."""

    def test_simple_plural(self) -> None:
        """Forms are extracted in order with '#' replaced by the placeholder."""
        forms = get_plural_forms("{count, plural, one {# item} other {# items}}")
        assert forms.arg_name == "count"
        assert dict(forms.forms) == {"one": f"{P} item", "other": f"{P} items"}
        assert list(forms) == ["one", "other"]

    def test_exact_value_selectors(self) -> None:
        """'=N' selectors are kept as literal keys."""
        forms = get_plural_forms("{n, plural, =0 {No items} one {# item} other {# items}}")
        assert list(forms) == ["=0", "one", "other"]
        assert forms["=0"] == "No items"

    def test_surrounding_text_moved_into_forms(self) -> None:
        """Text around the plural argument is part of every form."""
        forms = get_plural_forms("You have {n, plural, one {# apple} other {# apples}}.")
        assert forms["one"] == f"You have {P} apple."
        assert forms["other"] == f"You have {P} apples."

    def test_literal_hash_outside_plural_is_quoted(self) -> None:
        """A '#' outside the plural stays literal once moved into a form."""
        forms = get_plural_forms("#{n, plural, other {#}}")
        assert forms["other"] == f"'#'{P}"

    def test_other_arguments_before_plural_are_skipped(self) -> None:
        """Simple arguments before the plural are carried as text."""
        forms = get_plural_forms("{name} has {n, plural, one {# cat} other {# cats}}")
        assert forms.arg_name == "n"
        assert forms["one"] == f"{{name}} has {P} cat"

    def test_whitespace_in_header(self) -> None:
        """Argument name and type tolerate surrounding whitespace."""
        forms = get_plural_forms("{ count ,plural,\n  one {a}\n  other {b}\n}")
        assert forms.arg_name == "count"
        assert dict(forms.forms) == {"one": "a", "other": "b"}

    def test_offset_ignored(self) -> None:
        """offset:N is accepted and not treated as a selector."""
        forms = get_plural_forms("{n, plural, offset:1 one {#} other {# more}}")
        assert list(forms) == ["one", "other"]

    def test_quoted_hash_kept(self) -> None:
        """Quoted '#' is literal text, not the number operator."""
        forms = get_plural_forms("{n, plural, other {'#' #}}")
        assert forms["other"] == f"'#' {P}"

    def test_quoted_braces_inside_form(self) -> None:
        """Quoted braces do not end the form."""
        forms = get_plural_forms("{n, plural, other {'{'#'}'}}")
        assert forms["other"] == f"'{{'{P}'}}'"

    def test_nested_plural_kept_verbatim(self) -> None:
        """'#' of a nested plural belongs to the nested argument."""
        forms = get_plural_forms("{n, plural, other {# {m, plural, one {# x} other {# y}}}}")
        assert forms["other"] == f"{P} {{m, plural, one {{# x}} other {{# y}}}}"

    def test_replace_number_disabled(self) -> None:
        """replace_number=False keeps the '#' operator."""
        forms = get_plural_forms("{n, plural, other {# items}}", replace_number=False)
        assert forms["other"] == "# items"

    def test_custom_placeholder(self) -> None:
        """A custom placeholder token is substituted for '#'."""
        forms = get_plural_forms("{n, plural, other {# items}}", placeholder="__N__")
        assert forms["other"] == "__N__ items"

    def test_empty_form(self) -> None:
        """Empty form bodies are preserved."""
        forms = get_plural_forms("{n, plural, one {} other {x}}")
        assert forms["one"] == ""


class TestGetPluralFormsErrors:
    """Test inputs that carry no usable plural forms."""

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "plain text",
            "{name}",
            "{n, select, a {x} other {y}}",
            "{n, plural}",
        ],
    )
    def test_no_plural_argument(self, text: str) -> None:
        """Messages without a plural argument raise MissingPluralFormsError."""
        with pytest.raises(MissingPluralFormsError) as exc_info:
            get_plural_forms(text)
        assert exc_info.value.source_text == text

    @pytest.mark.parametrize(
        "text",
        [
            "{n, plural, one {x}",
            "{n, plural, one x}",
            "{n, plural, one {x} one {y}}",
            "oops} {n, plural, other {x}}",
            "{n, plural, }",
        ],
    )
    def test_malformed_plural(self, text: str) -> None:
        """Malformed plural messages raise MissingPluralFormsError."""
        with pytest.raises(MissingPluralFormsError):
            get_plural_forms(text)

    def test_error_is_value_error(self) -> None:
        """MissingPluralFormsError can be caught as ValueError."""
        with pytest.raises(ValueError, match="no plural argument"):
            get_plural_forms("nothing here")


class TestReplaceNumberOperator:
    """Test replace_number_operator directly."""

    def test_all_top_level_operators_replaced(self) -> None:
        """Every unquoted top-level '#' is replaced."""
        assert replace_number_operator("# of #", "5") == "5 of 5"

    def test_doubled_apostrophe_is_literal(self) -> None:
        """'' is a literal apostrophe and does not start quoting."""
        assert replace_number_operator("it''s #", "5") == "it''s 5"

    def test_lone_apostrophe_is_literal(self) -> None:
        """An apostrophe before ordinary text does not start quoting."""
        assert replace_number_operator("l'a #", "5") == "l'a 5"

    def test_apostrophe_before_hash_quotes_it(self) -> None:
        """An apostrophe before '#' quotes the rest up to the next apostrophe."""
        assert replace_number_operator("'# x' #", "5") == "'# x' 5"
