"""MessageDictionary - read-only code to template mapping.

The dictionary is built once from a compiled locale asset and never changes
afterwards. It is passed explicitly into the formatter rather than looked up
from module state.

Python 3.13+. External dependency: Babel (locale tag validation).
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from i18nasset.constants import DEFAULT_LOCALE
from i18nasset.diagnostics import CatalogFormatError, CatalogLocaleError, ErrorTemplate
from i18nasset.enums import DictionaryVariant
from i18nasset.locale_utils import get_babel_locale, normalize_locale
from i18nasset.template import PlainTemplate, StructuredTemplate, Template, parse_template

if TYPE_CHECKING:
    from babel import Locale

__all__ = ["MessageDictionary"]

logger = logging.getLogger(__name__)


class MessageDictionary:
    """Immutable mapping from message code to Template for one locale.

    Lookup is exact-match and case-sensitive; codes are never normalized.
    A missing code is a normal outcome and yields None.

    Thread Safety:
        Instances are immutable after construction and safe to share.

    Examples:
        >>> messages = MessageDictionary.from_raw({
        ...     "hello": "Hello {0}",
        ...     "inbox": ["You have ", 0, " messages"],
        ... })
        >>> messages.lookup("hello")
        PlainTemplate(text='Hello {0}')
        >>> messages.lookup("HELLO") is None
        True
        >>> plain_only = MessageDictionary.from_raw(
        ...     {"title": "Inbox"}, locale="lv-LV", variant=DictionaryVariant.PLAIN
        ... )
        >>> plain_only.locale
        'lv_LV'
    """

    __slots__ = ("_locale", "_messages", "_variant")

    def __init__(
        self,
        messages: Mapping[str, Template],
        /,
        *,
        locale: str = DEFAULT_LOCALE,
        variant: DictionaryVariant = DictionaryVariant.STRUCTURED,
    ) -> None:
        """Initialize dictionary from typed templates.

        Args:
            messages: Mapping of message code to Template [positional-only]
            locale: Locale the dictionary was compiled for (BCP-47 or POSIX)
            variant: STRUCTURED accepts both template kinds, PLAIN only PlainTemplate

        Raises:
            CatalogFormatError: If a code is not a str, a value is not a Template,
                or a StructuredTemplate is given to a PLAIN dictionary
            CatalogLocaleError: If locale is empty or unknown to Babel
        """
        self._locale = MessageDictionary._validate_locale(locale)
        self._variant = DictionaryVariant(variant)

        entries: dict[str, Template] = {}
        for code, template in messages.items():
            if not isinstance(code, str):
                raise CatalogFormatError(ErrorTemplate.invalid_code(code))
            if StructuredTemplate.guard(template):
                if self._variant is DictionaryVariant.PLAIN:
                    raise CatalogFormatError(ErrorTemplate.structured_in_plain(code))
            elif not PlainTemplate.guard(template):
                raise CatalogFormatError(ErrorTemplate.invalid_template(code, template))
            entries[code] = template

        self._messages: Mapping[str, Template] = MappingProxyType(entries)

        logger.info(
            "MessageDictionary initialized for locale: %s (variant=%s, messages=%d)",
            self._locale,
            self._variant,
            len(entries),
        )

    @staticmethod
    def _validate_locale(locale: str) -> str:
        """Normalize locale tag and check Babel recognizes it.

        Args:
            locale: Locale code to validate

        Returns:
            Normalized POSIX locale code

        Raises:
            CatalogLocaleError: If locale code is empty or unknown
        """
        if not isinstance(locale, str) or not locale.strip():
            raise CatalogLocaleError(ErrorTemplate.locale_unknown(str(locale), "empty locale"))

        # Lazy import: Babel loads CLDR data at import time; defer until needed
        from babel.core import UnknownLocaleError  # noqa: PLC0415

        normalized = normalize_locale(locale)
        try:
            get_babel_locale(normalized)
        except (UnknownLocaleError, ValueError, TypeError) as e:
            raise CatalogLocaleError(ErrorTemplate.locale_unknown(locale, str(e))) from e
        return normalized

    @classmethod
    def from_raw(
        cls,
        raw: Mapping[str, object],
        /,
        *,
        locale: str = DEFAULT_LOCALE,
        variant: DictionaryVariant = DictionaryVariant.STRUCTURED,
    ) -> MessageDictionary:
        """Build a dictionary from compiled-asset values.

        Args:
            raw: Mapping of code to str, or to a list of str / non-negative int
            locale: Locale the dictionary was compiled for
            variant: Dictionary variant (see DictionaryVariant)

        Returns:
            New MessageDictionary

        Raises:
            CatalogFormatError: If any code or value is malformed
            CatalogLocaleError: If locale is empty or unknown to Babel

        Example:
            >>> import json
            >>> asset = json.loads('{"greet": ["Hi ", 0]}')
            >>> MessageDictionary.from_raw(asset, locale="en_GB").lookup("greet")
            StructuredTemplate(parts=(Literal(text='Hi '), ArgRef(index=0)))
        """
        variant = DictionaryVariant(variant)
        templates: dict[str, Template] = {}
        for code, value in raw.items():
            if not isinstance(code, str):
                raise CatalogFormatError(ErrorTemplate.invalid_code(code))
            templates[code] = parse_template(code, value, variant)
        return cls(templates, locale=locale, variant=variant)

    @classmethod
    def empty(cls, locale: str = DEFAULT_LOCALE) -> MessageDictionary:
        """Create a dictionary with no entries.

        Every lookup misses, so a formatter over it renders only defaults
        and placeholders.
        """
        return cls({}, locale=locale)

    @property
    def locale(self) -> str:
        """Get the normalized locale code (read-only).

        Example:
            >>> MessageDictionary.empty("pt-BR").locale
            'pt_BR'
        """
        return self._locale

    @property
    def variant(self) -> DictionaryVariant:
        """Get the dictionary variant (read-only)."""
        return self._variant

    def get_babel_locale(self) -> Locale:
        """Get the Babel Locale for this dictionary (introspection API).

        Example:
            >>> MessageDictionary.empty("de_AT").get_babel_locale().territory
            'AT'
        """
        return get_babel_locale(self._locale)

    def lookup(self, code: str) -> Template | None:
        """Return the template stored for code.

        Args:
            code: Message code (exact match, case-sensitive)

        Returns:
            The Template, or None when the code has no entry
        """
        template = self._messages.get(code) if isinstance(code, str) else None
        if template is None:
            logger.debug("Message code '%s' not found in %s dictionary", code, self._locale)
        return template

    def codes(self) -> tuple[str, ...]:
        """All message codes in insertion order."""
        return tuple(self._messages)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code in self._messages

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[str]:
        return iter(self._messages)

    def __repr__(self) -> str:
        """Return string representation for debugging.

        Example:
            >>> repr(MessageDictionary.empty("lv_LV"))
            "MessageDictionary(locale='lv_LV', variant='structured', messages=0)"
        """
        return (
            f"MessageDictionary(locale={self._locale!r}, "
            f"variant={str(self._variant)!r}, "
            f"messages={len(self._messages)})"
        )
