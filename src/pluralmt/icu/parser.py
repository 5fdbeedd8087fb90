"""Extraction of plural forms from ICU messages.

Reads a message such as ``{count, plural, one {# item} other {# items}}``
into a PluralForms value. The ICU ``#`` operator of each form is replaced by
the number placeholder token so that the alignment engine can substitute an
example number later.

Text surrounding the plural argument is moved into every form, so that each
form is a complete sentence on its own::

    You have {n, plural, one {# apple} other {# apples}}.
    -> one: "You have {%{REPLACE_NUMBER}%} apple."

Apostrophe quoting follows ICU's DOUBLE_OPTIONAL mode: ``''`` is a literal
apostrophe, an apostrophe before ``{``, ``}``, ``|`` or ``#`` starts quoted
literal text that ends at the next single apostrophe.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from pluralmt.constants import ICU_NUMBER_OPERATOR, REPLACE_NUMBER_PLACEHOLDER
from pluralmt.errors import MissingPluralFormsError
from pluralmt.forms import PluralForms

__all__ = ["get_plural_forms", "replace_number_operator"]

_QUOTE = "'"
_QUOTABLE = frozenset("{}#|")
_OFFSET_PREFIX = "offset:"
_PLURAL_TYPE = "plural"
# Literal "#" moved from outside the plural argument into a form
_QUOTED_NUMBER_SIGN = "'#'"


def _quote_end(text: str, pos: int) -> int:
    """Index just past the quote construct starting at ``text[pos] == "'"``."""
    nxt = text[pos + 1] if pos + 1 < len(text) else ""
    if nxt == _QUOTE:
        return pos + 2
    if nxt not in _QUOTABLE:
        return pos + 1

    i = pos + 1
    while i < len(text):
        if text[i] == _QUOTE:
            if i + 1 < len(text) and text[i + 1] == _QUOTE:
                i += 2
                continue
            return i + 1
        i += 1
    # Unterminated quote runs to end of text
    return len(text)


def _find_closing(text: str, open_pos: int, source: str) -> int:
    """Index of the ``}`` matching the ``{`` at ``open_pos``."""
    depth = 0
    i = open_pos
    while i < len(text):
        char = text[i]
        if char == _QUOTE:
            i = _quote_end(text, i)
            continue
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return i
        i += 1
    msg = f"Unbalanced braces at position {open_pos}"
    raise MissingPluralFormsError(msg, source_text=source)


def replace_number_operator(message: str, replacement: str) -> str:
    """Replace the ``#`` operators of a plural form with ``replacement``.

    Only operators at the form's own nesting level are replaced; quoted
    ``#`` and anything inside nested arguments are kept verbatim.

    Examples:
        >>> replace_number_operator("# items, '#' sign", "5")
        "5 items, '#' sign"
    """
    out: list[str] = []
    depth = 0
    i = 0
    while i < len(message):
        char = message[i]
        if char == _QUOTE:
            end = _quote_end(message, i)
            out.append(message[i:end])
            i = end
            continue
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
        elif char == ICU_NUMBER_OPERATOR and depth == 0:
            out.append(replacement)
            i += 1
            continue
        out.append(char)
        i += 1
    return "".join(out)


def _find_plural_argument(text: str) -> tuple[int, int, str, str] | None:
    """Locate the first top-level plural argument.

    Returns:
        (open_pos, close_pos, arg_name, plural_body) or None
    """
    i = 0
    while i < len(text):
        char = text[i]
        if char == _QUOTE:
            i = _quote_end(text, i)
            continue
        if char == "}":
            msg = f"Unexpected '}}' at position {i}"
            raise MissingPluralFormsError(msg, source_text=text)
        if char == "{":
            close = _find_closing(text, i, text)
            parts = text[i + 1:close].split(",", 2)
            if len(parts) == 3 and parts[1].strip() == _PLURAL_TYPE:
                return i, close, parts[0].strip(), parts[2]
            i = close + 1
            continue
        i += 1
    return None


def _parse_plural_body(body: str, source: str) -> dict[str, str]:
    """Split ``one {...} other {...}`` into selector -> message."""
    forms: dict[str, str] = {}
    pos = 0
    while True:
        while pos < len(body) and body[pos].isspace():
            pos += 1
        if pos >= len(body):
            break

        if body.startswith(_OFFSET_PREFIX, pos):
            pos += len(_OFFSET_PREFIX)
            while pos < len(body) and (body[pos].isspace() or body[pos].isdigit()):
                pos += 1
            continue

        start = pos
        while pos < len(body) and not body[pos].isspace() and body[pos] != "{":
            pos += 1
        selector = body[start:pos]
        while pos < len(body) and body[pos].isspace():
            pos += 1
        if not selector or pos >= len(body) or body[pos] != "{":
            msg = f"Expected '{{' after plural selector '{selector}'"
            raise MissingPluralFormsError(msg, source_text=source)

        close = _find_closing(body, pos, source)
        if selector in forms:
            msg = f"Duplicate plural selector '{selector}'"
            raise MissingPluralFormsError(msg, source_text=source)
        forms[selector] = body[pos + 1:close]
        pos = close + 1
    return forms


def get_plural_forms(
    text: str,
    *,
    replace_number: bool = True,
    placeholder: str = REPLACE_NUMBER_PLACEHOLDER,
) -> PluralForms:
    """Parse an ICU message into its plural forms.

    Args:
        text: ICU message containing a plural argument
        replace_number: Replace each form's ``#`` operator with ``placeholder``
        placeholder: Number placeholder token

    Returns:
        PluralForms with the argument name and forms in source order

    Raises:
        MissingPluralFormsError: If the message has no plural argument, or is
            malformed

    Example:
        >>> forms = get_plural_forms("{count, plural, one {# item} other {# items}}")
        >>> forms.arg_name
        'count'
        >>> forms["other"]
        '{%{REPLACE_NUMBER}%} items'
    """
    located = _find_plural_argument(text)
    if located is None:
        msg = "Text contains no plural argument"
        raise MissingPluralFormsError(msg, source_text=text)

    open_pos, close_pos, arg_name, body = located
    raw_forms = _parse_plural_body(body, text)
    if not raw_forms:
        msg = f"Plural argument '{arg_name}' has no forms"
        raise MissingPluralFormsError(msg, source_text=text)

    prefix = replace_number_operator(text[:open_pos], _QUOTED_NUMBER_SIGN)
    suffix = replace_number_operator(text[close_pos + 1:], _QUOTED_NUMBER_SIGN)

    forms: dict[str, str] = {}
    for selector, message in raw_forms.items():
        if replace_number:
            message = replace_number_operator(message, placeholder)
        forms[selector] = f"{prefix}{message}{suffix}"
    return PluralForms(arg_name, forms)
