"""Configuration for plural translation.

Provides a single frozen dataclass holding the markers and defaults that the
alignment engine, placeholder codec and result assembler share. Constructing
``PluralTranslationConfig()`` with no arguments reproduces the module
constants in ``pluralmt.constants``.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from pluralmt.constants import (
    FALLBACK_EXAMPLE_NUMBER,
    NUMBER_TAG_CLOSE,
    NUMBER_TAG_OPEN,
    REPLACE_NUMBER_PLACEHOLDER,
)

__all__ = ["DEFAULT_CONFIG", "PluralTranslationConfig"]


@dataclass(frozen=True, slots=True)
class PluralTranslationConfig:
    """Immutable configuration for PluralTranslator.

    Attributes:
        fallback_example: Example number for source categories the target
            locale has no example for (default: 10).
        placeholder: Token marking the number inside form templates
            (default: ``{%{REPLACE_NUMBER}%}``).
        tag_open: Sentinel opening markup around the example number.
        tag_close: Sentinel closing markup around the example number.
        optimize: Drop branches identical to ``other`` when serializing the
            final plural message (default: False).

    Example:
        >>> config = PluralTranslationConfig(fallback_example=100)
        >>> config.fallback_example
        100
        >>> PluralTranslationConfig(placeholder="")
        Traceback (most recent call last):
        ...
        ValueError: placeholder must be a non-empty string
    """

    fallback_example: int = FALLBACK_EXAMPLE_NUMBER
    placeholder: str = REPLACE_NUMBER_PLACEHOLDER
    tag_open: str = NUMBER_TAG_OPEN
    tag_close: str = NUMBER_TAG_CLOSE
    optimize: bool = False

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If a marker is empty, or if fallback_example is
                negative or not an integer.
        """
        if not self.placeholder:
            msg = "placeholder must be a non-empty string"
            raise ValueError(msg)
        if not self.tag_open or not self.tag_close:
            msg = "tag_open and tag_close must be non-empty strings"
            raise ValueError(msg)
        if isinstance(self.fallback_example, bool) or not isinstance(self.fallback_example, int):
            msg = "fallback_example must be an integer"
            raise ValueError(msg)
        if self.fallback_example < 0:
            msg = "fallback_example must not be negative"
            raise ValueError(msg)


DEFAULT_CONFIG = PluralTranslationConfig()
