"""Formatter configuration.

Provides a single frozen dataclass holding the fallback policy used by
MessageFormatter. Constructing ``FormatterConfig()`` with no arguments
reproduces the stock behavior: ``[code]`` for unknown codes and
``undefined`` for missing structured arguments.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from i18nasset.constants import FALLBACK_MISSING_ARGUMENT, FALLBACK_MISSING_MESSAGE

__all__ = ["FormatterConfig"]


@dataclass(frozen=True, slots=True)
class FormatterConfig:
    """Immutable fallback policy for MessageFormatter.

    Attributes:
        missing_message: Format string rendered for unknown codes when the
            caller gives no default (default: "[{code}]"). Must contain the
            ``{code}`` field and no other fields.
        missing_argument: Text rendered for a structured argument reference
            with no matching argument (default: "undefined").
        empty_is_missing: Treat an entry that resolves to "" like a missing
            one, so the default or placeholder is used (default: True).

    Example:
        >>> config = FormatterConfig(missing_message="??{code}??")
        >>> config.missing_message.format(code="title")
        '??title??'
    """

    missing_message: str = FALLBACK_MISSING_MESSAGE
    missing_argument: str = FALLBACK_MISSING_ARGUMENT
    empty_is_missing: bool = True

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If missing_message lacks a {code} field or has
                fields other than {code}, or missing_argument is not a str.
        """
        if not isinstance(self.missing_message, str) or "{code}" not in self.missing_message:
            msg = "missing_message must be a str containing '{code}'"
            raise ValueError(msg)
        try:
            self.missing_message.format(code="")
        except (KeyError, IndexError, ValueError) as e:
            msg = f"missing_message is not a valid format string: {e}"
            raise ValueError(msg) from e
        if not isinstance(self.missing_argument, str):
            msg = "missing_argument must be a str"
            raise ValueError(msg)
