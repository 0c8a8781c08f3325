"""Diagnostic system for i18nasset errors.

Provides structured error diagnostics with codes and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import CatalogFormatError, CatalogLocaleError, I18nError
from .templates import ErrorTemplate

__all__ = [
    "CatalogFormatError",
    "CatalogLocaleError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "I18nError",
]
