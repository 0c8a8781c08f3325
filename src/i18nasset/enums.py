"""Enumerations for i18nasset type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.

Python 3.13+.
"""

from enum import StrEnum


class DictionaryVariant(StrEnum):
    """Shape of values accepted by a compiled message dictionary.

    StrEnum provides automatic string conversion: str(DictionaryVariant.PLAIN) == "plain"
    """

    STRUCTURED = "structured"
    """Values are plain strings or fragment lists: ["Hello ", 0, "!"]"""

    PLAIN = "plain"
    """Values are plain strings only: "Hello {0}!" """


class TemplateKind(StrEnum):
    """Kind of stored template.

    StrEnum provides automatic string conversion: str(TemplateKind.PLAIN) == "plain"
    """

    PLAIN = "plain"
    """Literal text with optional {N} placeholders"""

    STRUCTURED = "structured"
    """Ordered literal fragments interleaved with argument references"""


__all__ = [
    "DictionaryVariant",
    "TemplateKind",
]
