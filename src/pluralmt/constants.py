"""Shared constants for pluralmt.

Centralizes the literal markers and defaults used by the form store,
alignment engine and placeholder codec. Placing them here avoids circular
imports between those modules and gives a single source of truth.

Constants are grouped by domain:
- CLDR: Plural category keywords and their canonical order
- Placeholder: Token and sentinel markup protecting example numbers
- Alignment: Fallback example number

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # CLDR
    "KEYWORD_ZERO",
    "KEYWORD_ONE",
    "KEYWORD_TWO",
    "KEYWORD_FEW",
    "KEYWORD_MANY",
    "KEYWORD_OTHER",
    "CLDR_CATEGORY_ORDER",
    "EXACT_VALUE_PREFIX",
    # Placeholder
    "REPLACE_NUMBER_PLACEHOLDER",
    "NUMBER_TAG_OPEN",
    "NUMBER_TAG_CLOSE",
    "ICU_NUMBER_OPERATOR",
    # Alignment
    "FALLBACK_EXAMPLE_NUMBER",
]

# ============================================================================
# CLDR PLURAL CATEGORIES
# ============================================================================

KEYWORD_ZERO: str = "zero"
KEYWORD_ONE: str = "one"
KEYWORD_TWO: str = "two"
KEYWORD_FEW: str = "few"
KEYWORD_MANY: str = "many"
KEYWORD_OTHER: str = "other"

# Canonical CLDR ordering. Example maps are emitted in this order so merged
# case lists naturally end with: few, many, other.
CLDR_CATEGORY_ORDER: tuple[str, ...] = (
    KEYWORD_ZERO,
    KEYWORD_ONE,
    KEYWORD_TWO,
    KEYWORD_FEW,
    KEYWORD_MANY,
    KEYWORD_OTHER,
)

# Exact-value plural keys are written as "=" + number (e.g. "=0", "=5").
EXACT_VALUE_PREFIX: str = "="

# ============================================================================
# PLACEHOLDER PROTECTION
# ============================================================================

# Marks where the example number is substituted inside a form template.
# Replaces the ICU "#" operator while the form travels through translation.
REPLACE_NUMBER_PLACEHOLDER: str = "{%{REPLACE_NUMBER}%}"

# Sentinel markup wrapping the example number. Machine translators keep
# <x/> style inline tags verbatim, so the number survives the round trip.
NUMBER_TAG_OPEN: str = '<x id="tolgee-number">'
NUMBER_TAG_CLOSE: str = "</x>"

# ICU plural number operator restored after translation.
ICU_NUMBER_OPERATOR: str = "#"

# ============================================================================
# ALIGNMENT
# ============================================================================

# Example number used for a source category the target locale has no
# example for. Large enough to fall outside the small-count categories.
FALLBACK_EXAMPLE_NUMBER: int = 10
