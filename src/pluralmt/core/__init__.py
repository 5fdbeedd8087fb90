"""Core utilities shared by the pipeline and the CLDR providers.

Exports:
    BabelImportError: Exception raised when Babel is required but missing
    PluralRuleProtocol: Structural type of a plural rule selector
    require_babel: Fail-fast Babel availability check

Python 3.13+.
"""

from .babel_compat import BabelImportError, PluralRuleProtocol, require_babel

__all__ = ["BabelImportError", "PluralRuleProtocol", "require_babel"]
