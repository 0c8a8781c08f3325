"""MessageFormatter - main API for message lookup and formatting.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from i18nasset.catalog import MessageDictionary
from i18nasset.template import StructuredTemplate

from .config import FormatterConfig
from .substitution import (
    normalize_render_args,
    render_structured,
    substitute_placeholders,
)

__all__ = ["MessageFormatter"]

logger = logging.getLogger(__name__)

# Debug messages are high-volume; keep logged message text short.
_LOG_TRUNCATE_DEBUG: int = 50


class MessageFormatter:
    """Resolve message codes against a dictionary and substitute arguments.

    The dictionary is injected at construction. Every call is independent and
    side-effect free, and no call raises: unknown codes degrade to the caller's
    default or to a bracketed placeholder such as ``[user.title]``.

    Examples:
        >>> messages = MessageDictionary.from_raw({
        ...     "greeting": "Hello {0}, you have {1} messages",
        ...     "inbox": ["Hello ", 0, ", you have ", 1, " messages"],
        ... })
        >>> i18n = MessageFormatter(messages)
        >>> i18n.format("greeting", ["Ann", 5])
        'Hello Ann, you have 5 messages'
        >>> i18n.format("inbox", ["Ann", 5])
        'Hello Ann, you have 5 messages'
        >>> i18n.format("missing")
        '[missing]'
        >>> i18n.md("missing", "Fallback")
        'Fallback'
        >>> i18n.render("inbox", "Ann", 5)
        'Hello Ann, you have 5 messages'
    """

    __slots__ = ("_config", "_dictionary")

    def __init__(
        self,
        dictionary: MessageDictionary,
        /,
        *,
        config: FormatterConfig | None = None,
    ) -> None:
        """Initialize formatter over a dictionary.

        Args:
            dictionary: Message dictionary to resolve codes against [positional-only]
            config: Fallback policy (default: FormatterConfig())
        """
        self._dictionary = dictionary
        self._config = config if config is not None else FormatterConfig()

    @property
    def dictionary(self) -> MessageDictionary:
        """Get the injected dictionary (read-only)."""
        return self._dictionary

    @property
    def config(self) -> FormatterConfig:
        """Get the fallback policy (read-only)."""
        return self._config

    def default_message(self, code: str) -> str:
        """Placeholder rendered for a code with no entry and no default.

        Example:
            >>> MessageFormatter(MessageDictionary.empty()).default_message("a.b")
            '[a.b]'
        """
        return self._config.missing_message.format(code=code)

    def format(
        self,
        code: str,
        args: Sequence[object] | None = (),
        default_message: str | None = None,
    ) -> str:
        """Resolve code and substitute positional arguments.

        Resolution:
            1. Plain entries resolve to their text; structured entries are
               rendered against args.
            2. A missing entry (or an empty one, see FormatterConfig) resolves
               to default_message when it is a non-empty str, otherwise to
               the bracketed placeholder.
            3. When args is non-empty, {i} markers in the resolved text are
               replaced. This includes a caller default. Text rendered from a
               structured entry is not substituted again.

        Args:
            code: Message code
            args: Positional arguments (None or empty for no substitution)
            default_message: Text used when the code has no entry

        Returns:
            Formatted message; never raises
        """
        args = () if args is None else tuple(args)
        template = self._dictionary.lookup(code)

        message: str | None = None
        rendered = False
        if StructuredTemplate.guard(template):
            message = render_structured(template, args, self._config.missing_argument)
            rendered = True
        elif template is not None:
            message = template.text

        if message is None or (not message and self._config.empty_is_missing):
            if isinstance(default_message, str) and default_message:
                message = default_message
            else:
                message = self.default_message(code)
            rendered = False
            logger.debug("Falling back for code '%s': %s", code, message[:_LOG_TRUNCATE_DEBUG])

        if args and not rendered:
            message = substitute_placeholders(message, args)
        return message

    def resolve_with_default(self, code: str, default_message: str | None = None) -> str:
        """Resolve code without arguments (same as format(code, (), default_message))."""
        return self.format(code, (), default_message)

    def render(self, code: str, *args: object) -> str:
        """Query the dictionary directly, without default-message handling.

        Plain entries are returned as stored, with no substitution. Structured
        entries are rendered against the arguments: a single list or tuple
        argument is taken as the argument vector, otherwise all trailing
        arguments are.

        Args:
            code: Message code
            *args: Argument vector, or positional arguments

        Returns:
            Rendered message, or the bracketed placeholder for unknown codes

        Example:
            >>> messages = MessageDictionary.from_raw({"pair": [0, "/", 1]})
            >>> i18n = MessageFormatter(messages)
            >>> i18n.render("pair", ["a", "b"]) == i18n.render("pair", "a", "b") == "a/b"
            True
        """
        template = self._dictionary.lookup(code)
        if template is None:
            return self.default_message(code)
        if StructuredTemplate.guard(template):
            return render_structured(
                template, normalize_render_args(args), self._config.missing_argument
            )
        return template.text

    @staticmethod
    def substitute(source: str, args: Sequence[object] | None) -> str:
        """Replace {i} markers in arbitrary text (None leaves it unchanged)."""
        return substitute_placeholders(source, args)

    # Short call-site names used by templates and views
    def m(
        self,
        code: str,
        args: Sequence[object] | None = (),
        default_message: str | None = None,
    ) -> str:
        """Alias of format()."""
        return self.format(code, args, default_message)

    def md(self, code: str, default_message: str | None = None) -> str:
        """Alias of resolve_with_default()."""
        return self.resolve_with_default(code, default_message)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"MessageFormatter(dictionary={self._dictionary!r})"
