"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    @staticmethod
    def translation_not_found(key: str, selector: object = None) -> Diagnostic:
        """Translation key (or key + selector) has no leaf.

        Args:
            key: The lookup key
            selector: Count or subkey supplied with the lookup, if any

        Returns:
            Diagnostic for TRANSLATION_NOT_FOUND
        """
        if selector is None:
            msg = f"No translation for key '{key}'"
        else:
            msg = f"No translation for key '{key}' with selector '{selector}'"
        return Diagnostic(
            code=DiagnosticCode.TRANSLATION_NOT_FOUND,
            message=msg,
            hint="Add the key to the translation table, or an '*' / 'n' fallback",
            key=key,
            severity="warning",
        )

    @staticmethod
    def pluralizer_failed(key: str, count: object, error: Exception) -> Diagnostic:
        """Pluralizer strategy raised while classifying a count.

        Args:
            key: The lookup key
            count: The count passed to the pluralizer
            error: The exception raised by the pluralizer

        Returns:
            Diagnostic for PLURALIZER_FAILED
        """
        msg = f"Pluralizer failed for count {count!r}: {type(error).__name__}: {error}"
        return Diagnostic(
            code=DiagnosticCode.PLURALIZER_FAILED,
            message=msg,
            hint="Pluralizers must return a selector for every number",
            key=key,
            severity="warning",
        )

    @staticmethod
    def alias_not_found(alias: str, key: str | None = None) -> Diagnostic:
        """Alias target key is undefined or not a translation.

        Args:
            alias: Reference text, e.g. "B" or "A[b]"
            key: Translation key containing the reference

        Returns:
            Diagnostic for ALIAS_NOT_FOUND
        """
        msg = f'No translation for alias "{alias}"'
        return Diagnostic(
            code=DiagnosticCode.ALIAS_NOT_FOUND,
            message=msg,
            hint=f'Define "{alias}" in the translation table or fix the reference',
            key=key,
            alias=alias,
        )

    @staticmethod
    def alias_subkey_not_found(alias: str, key: str | None = None) -> Diagnostic:
        """Alias target leaf table lacks the requested subkey.

        Args:
            alias: Reference text, e.g. "A[b]"
            key: Translation key containing the reference

        Returns:
            Diagnostic for ALIAS_SUBKEY_NOT_FOUND
        """
        msg = f'No translation for alias "{alias}"'
        return Diagnostic(
            code=DiagnosticCode.ALIAS_SUBKEY_NOT_FOUND,
            message=msg,
            hint="Check the subkey between the brackets against the target table",
            key=key,
            alias=alias,
        )

    @staticmethod
    def alias_cyclic_reference(alias: str, alias_path: list[str]) -> Diagnostic:
        """Alias re-entered while it is still being expanded.

        Args:
            alias: The in-progress alias that was re-entered
            alias_path: Aliases being followed, outermost first

        Returns:
            Diagnostic for ALIAS_CYCLIC_REFERENCE
        """
        msg = f'Circular reference for "{alias}" detected'
        return Diagnostic(
            code=DiagnosticCode.ALIAS_CYCLIC_REFERENCE,
            message=msg,
            hint="Break the circular dependency by removing one of the aliases",
            alias=alias,
            alias_path=(*alias_path, alias),
        )

    @staticmethod
    def alias_not_string(alias: str, key: str | None = None) -> Diagnostic:
        """Alias without subkey targets a leaf table.

        Args:
            alias: Reference text
            key: Translation key containing the reference

        Returns:
            Diagnostic for ALIAS_NOT_STRING
        """
        return Diagnostic(
            code=DiagnosticCode.ALIAS_NOT_STRING,
            message="You can't alias objects",
            hint=f'Target a subkey instead, e.g. "{{{{{alias}[n]}}}}"',
            key=key,
            alias=alias,
        )

    @staticmethod
    def alias_depth_exceeded(alias: str, max_depth: int) -> Diagnostic:
        """Alias chain too deep.

        Args:
            alias: Alias at which the limit was hit
            max_depth: Maximum allowed nesting

        Returns:
            Diagnostic for ALIAS_DEPTH_EXCEEDED
        """
        msg = f'Maximum alias depth ({max_depth}) exceeded at "{alias}"'
        return Diagnostic(
            code=DiagnosticCode.ALIAS_DEPTH_EXCEEDED,
            message=msg,
            hint="Flatten the alias chain",
            alias=alias,
        )
