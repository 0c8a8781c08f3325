"""Positional argument substitution.

Two template shapes are rendered here:

- Plain text: every ``{i}`` marker is replaced, globally, by argument ``i``.
  Indices are processed in ascending order, so text inserted for ``{0}`` is
  seen by the ``{1}`` pass. Markers without an argument stay in the output.
- Structured: fragments are concatenated; argument references beyond the
  supplied arguments render as the missing-argument text.

Arguments are coerced to text the way the client runtime sharing these
dictionaries coerces them, so both sides render identical strings.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from i18nasset.constants import (
    FALLBACK_MISSING_ARGUMENT,
    MAX_ARGUMENT_DEPTH,
    PLACEHOLDER_CLOSE,
    PLACEHOLDER_OPEN,
)
from i18nasset.template import ArgRef, StructuredTemplate

__all__ = [
    "normalize_render_args",
    "render_structured",
    "stringify_argument",
    "substitute_placeholders",
]


# Floats at or above this magnitude switch to exponent notation in the
# client runtime's text form (1e21 -> "1e+21").
_EXPONENT_THRESHOLD: float = 1e21


def stringify_argument(value: object) -> str:
    """Coerce an argument to its text form.

    Never raises: ints too long for decimal conversion render in hex, and a
    list that contains itself renders the repeated reference as "". Lists
    nested deeper than MAX_ARGUMENT_DEPTH render their innermost levels as "".

    Example:
        >>> stringify_argument(5)
        '5'
        >>> stringify_argument(5.0)
        '5'
        >>> stringify_argument(1e21)
        '1e+21'
        >>> stringify_argument(True)
        'true'
        >>> stringify_argument(None)
        'null'
        >>> stringify_argument(["a", 1, None])
        'a,1,'
    """
    return _stringify(value, frozenset())


def _stringify(value: object, active: frozenset[int]) -> str:
    match value:
        case str():
            return value
        case bool():
            return "true" if value else "false"
        case None:
            return "null"
        case int():
            try:
                return str(value)
            except ValueError:
                # Exceeds sys.get_int_max_str_digits(); hex has no such limit
                return hex(value)
        case float() if math.isnan(value):
            return "NaN"
        case float() if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        case float() if value.is_integer() and abs(value) < _EXPONENT_THRESHOLD:
            return str(int(value))
        case list() | tuple():
            if id(value) in active or len(active) >= MAX_ARGUMENT_DEPTH:
                return ""
            nested = active | {id(value)}
            return ",".join("" if item is None else _stringify(item, nested) for item in value)
        case _:
            return str(value)


def substitute_placeholders(source: str, args: Sequence[object] | None) -> str:
    """Replace ``{i}`` markers in source with the matching arguments.

    Args:
        source: Text holding zero or more {N} markers
        args: Positional arguments; None leaves source unchanged

    Returns:
        Text with every {i} for i < len(args) replaced

    Example:
        >>> substitute_placeholders("Hello {0}, you have {1} messages", ["Ann", 5])
        'Hello Ann, you have 5 messages'
        >>> substitute_placeholders("{0}-{0} {2}", ["x"])
        'x-x {2}'
    """
    if args is None:
        return source
    for index, arg in enumerate(args):
        marker = f"{PLACEHOLDER_OPEN}{index}{PLACEHOLDER_CLOSE}"
        if marker in source:
            source = source.replace(marker, stringify_argument(arg))
    return source


def render_structured(
    template: StructuredTemplate,
    args: Sequence[object],
    missing_argument: str = FALLBACK_MISSING_ARGUMENT,
) -> str:
    """Concatenate a structured template's fragments against args.

    Example:
        >>> from i18nasset.template import parse_template
        >>> template = parse_template("inbox", ["Hello ", 0, ", you have ", 1, " messages"])
        >>> render_structured(template, ["Ann", 5])
        'Hello Ann, you have 5 messages'
        >>> render_structured(template, ["Ann"])
        'Hello Ann, you have undefined messages'
    """
    pieces: list[str] = []
    for part in template.parts:
        if ArgRef.guard(part):
            if part.index < len(args):
                pieces.append(stringify_argument(args[part.index]))
            else:
                pieces.append(missing_argument)
        else:
            pieces.append(part.text)
    return "".join(pieces)


def normalize_render_args(args: tuple[object, ...]) -> Sequence[object]:
    """Resolve variadic call-site arguments into one argument vector.

    A single list or tuple argument is the vector itself; otherwise all
    arguments are.

    Example:
        >>> normalize_render_args((["Ann", 5],))
        ['Ann', 5]
        >>> normalize_render_args(("Ann", 5))
        ('Ann', 5)
    """
    if len(args) == 1 and isinstance(args[0], (list, tuple)):
        return args[0]
    return args
