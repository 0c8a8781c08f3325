"""i18nasset - message lookup and positional formatting for compiled locale assets.

Resolves message codes against a read-only dictionary compiled from locale
resources, substitutes positional arguments, and degrades unknown codes to
a caller default or a bracketed placeholder.

Public API:
    MessageDictionary - Immutable code to template mapping for one locale
    MessageFormatter - Lookup, default-message fallback and substitution
    FormatterConfig - Fallback policy for MessageFormatter
    PlainTemplate, StructuredTemplate, Literal, ArgRef - Template variants
    DictionaryVariant - Accepted dictionary value shapes
    parse_template - Convert a compiled-asset value into a Template
    substitute_placeholders - Replace {N} markers in text

Exceptions:
    I18nError - Base exception class
    CatalogFormatError - Malformed dictionary contents
    CatalogLocaleError - Unknown dictionary locale

Submodules:
    i18nasset.template - Template types and raw-value conversion
    i18nasset.catalog - MessageDictionary
    i18nasset.runtime - MessageFormatter and substitution routines
    i18nasset.diagnostics - Diagnostic codes and exceptions
"""

# Essential Public API - Minimal exports for clean namespace
from .catalog import MessageDictionary
from .diagnostics import CatalogFormatError, CatalogLocaleError, I18nError
from .enums import DictionaryVariant
from .runtime import (
    FormatterConfig,
    MessageFormatter,
    stringify_argument,
    substitute_placeholders,
)
from .template import ArgRef, Literal, PlainTemplate, StructuredTemplate, Template, parse_template

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("i18nasset")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ArgRef",
    "CatalogFormatError",
    "CatalogLocaleError",
    "DictionaryVariant",
    "FormatterConfig",
    "I18nError",
    "Literal",
    "MessageDictionary",
    "MessageFormatter",
    "PlainTemplate",
    "StructuredTemplate",
    "Template",
    "__version__",
    "parse_template",
    "stringify_argument",
    "substitute_placeholders",
]
