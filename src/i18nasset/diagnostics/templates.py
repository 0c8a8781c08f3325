"""Error message templates.

Centralized diagnostic construction for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All diagnostics are created here. NO f-strings in exception constructors!
    """

    @staticmethod
    def invalid_code(code: object) -> Diagnostic:
        """Dictionary key is not a string.

        Args:
            code: The offending key

        Returns:
            Diagnostic for INVALID_CODE
        """
        msg = f"Message code must be str, got {type(code).__name__}: {code!r}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_CODE,
            message=msg,
            hint="Dictionary keys are message codes and must be strings",
        )

    @staticmethod
    def invalid_template(code: str, value: object) -> Diagnostic:
        """Dictionary value is neither a string nor a fragment list.

        Args:
            code: The message code holding the value
            value: The offending value

        Returns:
            Diagnostic for INVALID_TEMPLATE
        """
        msg = f"Template for '{code}' must be str or a fragment list, got {type(value).__name__}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_TEMPLATE,
            message=msg,
            hint="Use a string, or a list of strings and argument indices",
            message_code=code,
        )

    @staticmethod
    def invalid_fragment(code: str, position: int, fragment: object) -> Diagnostic:
        """Fragment inside a structured template is not str or non-negative int.

        Args:
            code: The message code holding the template
            position: Index of the fragment within the template
            fragment: The offending fragment

        Returns:
            Diagnostic for INVALID_FRAGMENT
        """
        msg = (
            f"Fragment {position} of '{code}' must be str or non-negative int, "
            f"got {type(fragment).__name__}: {fragment!r}"
        )
        return Diagnostic(
            code=DiagnosticCode.INVALID_FRAGMENT,
            message=msg,
            hint="Use a string for literal text and a non-negative int for arguments",
            message_code=code,
        )

    @staticmethod
    def structured_in_plain(code: str) -> Diagnostic:
        """Structured template given to a plain-only dictionary.

        Args:
            code: The message code holding the template

        Returns:
            Diagnostic for STRUCTURED_IN_PLAIN
        """
        msg = f"Template for '{code}' is structured but the dictionary accepts plain strings only"
        return Diagnostic(
            code=DiagnosticCode.STRUCTURED_IN_PLAIN,
            message=msg,
            hint="Compile the template to a string with {N} placeholders, "
            "or use DictionaryVariant.STRUCTURED",
            message_code=code,
        )

    @staticmethod
    def locale_unknown(locale_code: str, reason: str) -> Diagnostic:
        """Locale tag rejected by Babel.

        Args:
            locale_code: The rejected locale tag
            reason: Underlying parse failure

        Returns:
            Diagnostic for LOCALE_UNKNOWN
        """
        msg = f"Unknown locale '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=msg,
            hint="Use a CLDR locale identifier such as 'en', 'en_US' or 'pt-BR'",
        )
