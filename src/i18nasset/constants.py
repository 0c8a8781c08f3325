"""Shared constants for i18nasset.

Single source of truth for the fallback strings produced by the formatter
and for the placeholder marker syntax understood by plain templates.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Fallback strings
    "FALLBACK_MISSING_MESSAGE",
    "FALLBACK_MISSING_ARGUMENT",
    # Placeholder syntax
    "PLACEHOLDER_OPEN",
    "PLACEHOLDER_CLOSE",
    # Argument limits
    "MAX_ARGUMENT_DEPTH",
    # Locale defaults
    "DEFAULT_LOCALE",
]

# ============================================================================
# FALLBACK STRINGS
# ============================================================================

# Unknown codes render as the code wrapped in square brackets so missing
# translations stand out in a running UI.
# Format string - use .format(code=...)
FALLBACK_MISSING_MESSAGE: str = "[{code}]"  # e.g., [user.login.title]

# Text rendered for an argument reference with no matching argument.
# Matches the plain-text coercion of an absent value in the client runtime
# the compiled dictionaries are shared with.
FALLBACK_MISSING_ARGUMENT: str = "undefined"

# ============================================================================
# PLACEHOLDER SYNTAX
# ============================================================================

# Plain templates mark positional arguments as {0}, {1}, ...
PLACEHOLDER_OPEN: str = "{"
PLACEHOLDER_CLOSE: str = "}"

# ============================================================================
# ARGUMENT LIMITS
# ============================================================================

# Maximum list nesting rendered when an argument is a list. Deeper levels
# render as "" so argument coercion stays clear of RecursionError.
MAX_ARGUMENT_DEPTH: int = 100

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Locale assumed for a dictionary when the compiled asset does not declare one.
DEFAULT_LOCALE: str = "en"
