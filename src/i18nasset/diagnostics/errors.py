"""i18nasset exception hierarchy with structured diagnostics.

Only dictionary construction raises. Lookup and formatting always return a
string and never raise.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class I18nError(Exception):
    """Base exception for all i18nasset errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize I18nError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class CatalogFormatError(I18nError):
    """Compiled dictionary contents are malformed.

    Raised for non-string codes, values that are neither a string nor a
    fragment list, invalid fragments, and structured templates handed to
    a plain-only dictionary.
    """


class CatalogLocaleError(I18nError):
    """Dictionary locale tag is empty or unknown to Babel."""
