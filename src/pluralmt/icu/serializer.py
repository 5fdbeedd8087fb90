"""Serialization of plural forms into an ICU plural message.

Branch texts are ICU message fragments (they may contain ``#`` and nested
arguments) and are emitted verbatim, in mapping order.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping

from pluralmt.constants import KEYWORD_OTHER

__all__ = ["to_plural_string"]


def to_plural_string(forms: Mapping[str, str], arg_name: str, *, optimize: bool = False) -> str:
    """Render ``{arg_name, plural, key {text} ...}``.

    Args:
        forms: Category key -> branch text, in output order
        arg_name: Plural argument name
        optimize: Drop branches whose text equals the ``other`` branch

    Returns:
        ICU plural message on a single line

    Examples:
        >>> to_plural_string({"one": "# item", "other": "# items"}, "count")
        '{count, plural, one {# item} other {# items}}'
        >>> to_plural_string({"one": "#", "few": "#", "other": "#"}, "n", optimize=True)
        '{n, plural, other {#}}'
    """
    items = list(forms.items())
    if optimize and KEYWORD_OTHER in forms:
        other_text = forms[KEYWORD_OTHER]
        items = [(key, text) for key, text in items if key == KEYWORD_OTHER or text != other_text]

    branches = " ".join(f"{key} {{{text}}}" for key, text in items)
    return f"{{{arg_name}, plural, {branches}}}"
