"""Formatting runtime.

Provides the MessageFormatter facade, its configuration, and the
positional substitution routines it is built on.

Python 3.13+.
"""

from .config import FormatterConfig
from .formatter import MessageFormatter
from .substitution import (
    normalize_render_args,
    render_structured,
    stringify_argument,
    substitute_placeholders,
)

__all__ = [
    "FormatterConfig",
    "MessageFormatter",
    "normalize_render_args",
    "render_structured",
    "stringify_argument",
    "substitute_placeholders",
]
