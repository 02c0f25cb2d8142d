"""Core utilities shared across parsing and runtime layers.

Isolates the optional Babel dependency so that the parser never
imports it:

    core <- parsing (no Babel)
    core <- runtime (Babel required)

Exports:
    BabelImportError: Raised when a Babel-backed feature is used without Babel
    is_babel_available: Check whether the babel extra is installed
    require_babel: Fail fast with an install hint

Python 3.13+.
"""

from .babel_compat import BabelImportError, is_babel_available, require_babel

__all__ = ["BabelImportError", "is_babel_available", "require_babel"]
