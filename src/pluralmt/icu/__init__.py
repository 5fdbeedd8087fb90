"""ICU plural message reading and writing.

Only the plural argument is interpreted; every other ICU construct is
carried through as opaque text.

Python 3.13+. Zero external dependencies.
"""

from .parser import get_plural_forms, replace_number_operator
from .serializer import to_plural_string

__all__ = ["get_plural_forms", "replace_number_operator", "to_plural_string"]
