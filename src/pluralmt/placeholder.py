"""Placeholder protection codec.

Before translation, the number placeholder in a form template is replaced by
a concrete example number wrapped in sentinel markup. After translation, the
whole wrapped span is replaced by the ICU ``#`` operator. If the translator
drops or mangles the markers, the branch simply ends up without ``#``.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from decimal import Decimal
from functools import lru_cache

from pluralmt.constants import (
    ICU_NUMBER_OPERATOR,
    NUMBER_TAG_CLOSE,
    NUMBER_TAG_OPEN,
    REPLACE_NUMBER_PLACEHOLDER,
)

__all__ = ["decode", "encode", "format_example_number"]


def format_example_number(number: int | float | Decimal) -> str:
    """Render an example number the way it should read in source text.

    Integral values render without a fractional part.

    Examples:
        >>> format_example_number(10)
        '10'
        >>> format_example_number(10.0)
        '10'
        >>> format_example_number(Decimal("1.5"))
        '1.5'
    """
    if isinstance(number, float) and number.is_integer():
        return str(int(number))
    return str(number)


def encode(
    template: str,
    number: int | float | Decimal,
    *,
    add_tag: bool = True,
    placeholder: str = REPLACE_NUMBER_PLACEHOLDER,
    tag_open: str = NUMBER_TAG_OPEN,
    tag_close: str = NUMBER_TAG_CLOSE,
) -> str:
    """Substitute the example number for the placeholder token.

    Args:
        template: Form template containing the placeholder token
        number: Example number to substitute
        add_tag: Wrap the number in sentinel markup. Use False only where no
            translation step follows (example previews).
        placeholder: Placeholder token to replace
        tag_open: Sentinel opening markup
        tag_close: Sentinel closing markup

    Returns:
        Template with every placeholder occurrence replaced. Templates without
        the token are returned unchanged.

    Examples:
        >>> encode("{%{REPLACE_NUMBER}%} items", 5)
        '<x id="tolgee-number">5</x> items'
        >>> encode("{%{REPLACE_NUMBER}%} items", 5, add_tag=False)
        '5 items'
    """
    rendered = format_example_number(number)
    if add_tag:
        rendered = f"{tag_open}{rendered}{tag_close}"
    return template.replace(placeholder, rendered)


@lru_cache(maxsize=16)
def _tag_pattern(tag_open: str, tag_close: str) -> re.Pattern[str]:
    return re.compile(f"{re.escape(tag_open)}.*?{re.escape(tag_close)}", re.DOTALL)


def decode(
    text: str,
    *,
    tag_open: str = NUMBER_TAG_OPEN,
    tag_close: str = NUMBER_TAG_CLOSE,
) -> str:
    """Replace every sentinel-wrapped span with the ICU ``#`` operator.

    Examples:
        >>> decode('Máte <x id="tolgee-number">5</x> položek')
        'Máte # položek'
        >>> decode("no markers")
        'no markers'
    """
    return _tag_pattern(tag_open, tag_close).sub(ICU_NUMBER_OPERATOR, text)
