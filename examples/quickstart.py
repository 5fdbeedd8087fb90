"""Quickstart example for pluralmt.

Translates an English plural message into Czech, which has four plural
categories (one, few, many, other) instead of English's two.

A real deployment passes a machine translation client; here a tiny
dictionary-based translator stands in for it so the example runs offline.

Note: the sentinel markup around numbers (<x id="tolgee-number">) must be
kept verbatim by the translator; most MT services do so for inline tags.
"""

import logging
import re

from pluralmt import (
    PluralTranslationConfig,
    TranslationOutcome,
    get_plural_forms,
    get_source_examples,
    translate_plural,
)

logging.basicConfig(level=logging.INFO)

PHRASES = {
    "item": "položka",
    "items": "položky",
}


def fake_translate(text: str) -> TranslationOutcome:
    """Word-by-word dictionary translator charging one unit per call."""
    translated = re.sub(r"[a-z]+", lambda m: PHRASES.get(m.group(0), m.group(0)), text)
    return TranslationOutcome(translated_text=translated, price=1)


SOURCE = "{count, plural, one {# item} other {# items}}"

# Example 1: What the translator sees for each Czech category
print("=" * 50)
print("Example 1: Source Examples")
print("=" * 50)

forms = get_plural_forms(SOURCE)
for category, text in get_source_examples("en", "cs", forms).items():
    print(f"{category:>6}: {text}")
# Output:
#    one: 1 item
#    few: 2 items
#   many: 1.5 items
#  other: 0 items

# Example 2: Full translation
print("\n" + "=" * 50)
print("Example 2: English -> Czech")
print("=" * 50)

result = translate_plural(
    SOURCE,
    fake_translate,
    source_language_tag="en",
    target_language_tag="cs",
    service="FAKE",
)
print(result.translated_text)
print(f"price={result.price} error={result.exception}")
# Output:
# {count, plural, one {# položka} few {# položky} many {# položky} other {# položky}}
# price=4 error=None

# Example 3: Collapse branches identical to 'other'
print("\n" + "=" * 50)
print("Example 3: Optimized Output")
print("=" * 50)

result = translate_plural(
    SOURCE,
    fake_translate,
    source_language_tag="en",
    target_language_tag="cs",
    config=PluralTranslationConfig(optimize=True),
)
print(result.translated_text)
# Output:
# {count, plural, one {# položka} other {# položky}}
