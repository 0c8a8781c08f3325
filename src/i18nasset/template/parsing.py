"""Conversion of compiled-asset values into typed templates.

Compiled dictionaries arrive as JSON-compatible values: a string, or a list
mixing literal strings and integer argument indices. This module turns one
such value into a Template, rejecting anything else with a diagnostic.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Sequence

from i18nasset.diagnostics import CatalogFormatError, ErrorTemplate
from i18nasset.enums import DictionaryVariant

from .model import ArgRef, Fragment, Literal, PlainTemplate, StructuredTemplate, Template

__all__ = ["parse_fragment", "parse_template"]


def parse_fragment(code: str, position: int, raw: object) -> Fragment:
    """Convert one raw fragment of a structured template.

    Args:
        code: Message code owning the template (for diagnostics)
        position: Fragment position within the template (for diagnostics)
        raw: Raw fragment value

    Returns:
        Literal for strings, ArgRef for non-negative ints

    Raises:
        CatalogFormatError: If the fragment is any other value
    """
    if isinstance(raw, str):
        return Literal(raw)
    # bool is an int subclass; True must not silently become argument 1
    if isinstance(raw, int) and not isinstance(raw, bool) and raw >= 0:
        return ArgRef(raw)
    raise CatalogFormatError(ErrorTemplate.invalid_fragment(code, position, raw))


def parse_template(
    code: str,
    raw: object,
    variant: DictionaryVariant = DictionaryVariant.STRUCTURED,
) -> Template:
    """Convert a raw dictionary value into a Template.

    Args:
        code: Message code owning the value (for diagnostics)
        raw: String, or list/tuple of strings and non-negative ints
        variant: Dictionary variant; PLAIN rejects fragment lists

    Returns:
        PlainTemplate or StructuredTemplate

    Raises:
        CatalogFormatError: If the value is not a valid template for the variant

    Example:
        >>> parse_template("greet", ["Hello ", 0])
        StructuredTemplate(parts=(Literal(text='Hello '), ArgRef(index=0)))
        >>> parse_template("title", "Inbox")
        PlainTemplate(text='Inbox')
    """
    if isinstance(raw, str):
        return PlainTemplate(raw)
    if isinstance(raw, Sequence) and not isinstance(raw, (bytes, bytearray)):
        if variant is DictionaryVariant.PLAIN:
            raise CatalogFormatError(ErrorTemplate.structured_in_plain(code))
        parts = tuple(parse_fragment(code, i, item) for i, item in enumerate(raw))
        return StructuredTemplate(parts)
    raise CatalogFormatError(ErrorTemplate.invalid_template(code, raw))
