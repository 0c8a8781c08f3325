"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic carried by exceptions
raised while building a message dictionary.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Dictionary content errors (codes and templates)
        2000-2999: Locale errors
    """

    # Dictionary content errors (1000-1999)
    INVALID_CODE = 1001
    INVALID_TEMPLATE = 1002
    INVALID_FRAGMENT = 1003
    STRUCTURED_IN_PLAIN = 1004

    # Locale errors (2000-2999)
    LOCALE_UNKNOWN = 2001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        message_code: Dictionary code the error relates to (if any)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    message_code: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[INVALID_FRAGMENT]: Fragment 2 of 'greeting' must be str or int, got float
              --> greeting
              = help: Use a string for literal text and a non-negative int for arguments

        Returns:
            Formatted error message
        """
        lines = [f"{self.severity}[{self.code.name}]: {_escape(self.message)}"]
        if self.message_code is not None:
            lines.append(f"  --> {_escape(self.message_code)}")
        if self.hint:
            lines.append(f"  = help: {_escape(self.hint)}")
        return "\n".join(lines)


def _escape(text: str) -> str:
    # Codes come from compiled assets; keep control characters out of log lines.
    return text.replace("\r", "\\r").replace("\n", "\\n").replace("\x1b", "\\x1b")
