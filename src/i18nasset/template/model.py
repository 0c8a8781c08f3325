"""Message template node definitions.

A template is the stored form of a message before argument substitution.
It is a tagged variant: either plain text carrying optional {N} markers, or
an ordered sequence of literal fragments and argument references.

Includes type guards as static methods, mirroring the fragment checks the
formatter performs while rendering.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import TypeIs

from i18nasset.enums import TemplateKind

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Fragments
    "Literal",
    "ArgRef",
    # Templates
    "PlainTemplate",
    "StructuredTemplate",
    # Type aliases
    "Fragment",
    "Template",
]

# ============================================================================
# FRAGMENTS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Literal:
    """Literal text fragment of a structured template.

    Example:
        ["Hello ", 0] -> Literal("Hello "), ArgRef(0)
    """

    text: str

    @staticmethod
    def guard(fragment: object) -> TypeIs["Literal"]:
        """Type guard for Literal."""
        return isinstance(fragment, Literal)


@dataclass(frozen=True, slots=True)
class ArgRef:
    """Reference to a positional argument by zero-based index."""

    index: int

    def __post_init__(self) -> None:
        """Validate index invariants."""
        if isinstance(self.index, bool) or not isinstance(self.index, int):
            msg = f"ArgRef index must be int, got {type(self.index).__name__}"
            raise TypeError(msg)
        if self.index < 0:
            msg = f"ArgRef index must be >= 0, got {self.index}"
            raise ValueError(msg)

    @staticmethod
    def guard(fragment: object) -> TypeIs["ArgRef"]:
        """Type guard for ArgRef."""
        return isinstance(fragment, ArgRef)


# ============================================================================
# TEMPLATES
# ============================================================================


@dataclass(frozen=True, slots=True)
class PlainTemplate:
    """Plain text template.

    Example:
        "Hello {0}, you have {1} messages"
    """

    text: str

    @property
    def kind(self) -> TemplateKind:
        """Template kind tag."""
        return TemplateKind.PLAIN

    @staticmethod
    def guard(template: object) -> TypeIs["PlainTemplate"]:
        """Type guard for PlainTemplate."""
        return isinstance(template, PlainTemplate)


@dataclass(frozen=True, slots=True)
class StructuredTemplate:
    """Ordered literal fragments interleaved with argument references.

    Example:
        ["Hello ", 0, ", you have ", 1, " messages"]
    """

    parts: tuple["Fragment", ...]

    @property
    def kind(self) -> TemplateKind:
        """Template kind tag."""
        return TemplateKind.STRUCTURED

    @property
    def argument_indices(self) -> frozenset[int]:
        """Distinct argument indices referenced by this template."""
        return frozenset(part.index for part in self.parts if ArgRef.guard(part))

    @staticmethod
    def guard(template: object) -> TypeIs["StructuredTemplate"]:
        """Type guard for StructuredTemplate."""
        return isinstance(template, StructuredTemplate)


# ============================================================================
# TYPE ALIASES
# ============================================================================

type Fragment = Literal | ArgRef
"""Element of a structured template."""

type Template = PlainTemplate | StructuredTemplate
"""Stored representation of a message prior to substitution."""
