"""pluralmt - plural-aware machine translation of ICU messages.

Translates an ICU plural message into a language whose CLDR plural categories
may differ from the source language's. Each category the target language uses
is mapped to a source form, translated with a protected example number, and
the translations are reassembled into one plural message.

Public API:
    translate_plural - Parse, align, translate and assemble in one call
    PluralTranslator - Translator over already parsed PluralForms
    PluralForms - Immutable plural forms of one source message
    get_plural_forms - Parse an ICU message into PluralForms
    get_source_examples - Preview source text per target category
    align - Category alignment engine
    encode / decode - Placeholder protection codec
    to_plural_string - ICU plural message serializer
    PluralTranslationConfig - Markers and defaults

Exceptions:
    PluralMtError - Base exception class
    MissingPluralFormsError - Source text has no plural forms
    UnresolvedLocaleError - Language tag has no plural rules (strict mode)
    PerCategoryTranslationError - One category failed to translate

Submodules:
    pluralmt.cldr - Babel-backed plural rules and example numbers
    pluralmt.icu - ICU plural message parser and serializer
"""

from .alignment import align
from .config import PluralTranslationConfig
from .errors import (
    MissingPluralFormsError,
    PerCategoryTranslationError,
    PluralMtError,
    UnresolvedLocaleError,
)
from .forms import PluralForms
from .icu import get_plural_forms, to_plural_string
from .placeholder import decode, encode
from .translator import PluralTranslator, get_source_examples, translate_plural
from .types import PluralTranslationResult, TranslationOutcome, TranslationUnit

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("pluralmt")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "MissingPluralFormsError",
    "PerCategoryTranslationError",
    "PluralForms",
    "PluralMtError",
    "PluralTranslationConfig",
    "PluralTranslationResult",
    "PluralTranslator",
    "TranslationOutcome",
    "TranslationUnit",
    "UnresolvedLocaleError",
    "__version__",
    "align",
    "decode",
    "encode",
    "get_plural_forms",
    "get_source_examples",
    "to_plural_string",
    "translate_plural",
]
