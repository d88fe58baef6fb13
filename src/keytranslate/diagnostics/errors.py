"""Exception hierarchy with structured diagnostics.

Runtime lookups never raise; only the alias pre-processing pass does,
because its failures are authoring errors in the translation source.
All exceptions store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class TranslationError(Exception):
    """Base exception for all keytranslate errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize TranslationError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class AliasError(TranslationError):
    """Alias expansion failed.

    Attributes:
        alias: Reference text that failed, e.g. "B" or "A[b]"
        key: Alias target key ("A" for "A[b]")
        subkey: Alias target subkey ("b" for "A[b]"), None without qualifier
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        alias: str = "",
        key: str = "",
        subkey: str | None = None,
    ) -> None:
        """Initialize AliasError.

        Args:
            message: Error message string OR Diagnostic object
            alias: Reference text that failed
            key: Alias target key
            subkey: Alias target subkey, if any
        """
        super().__init__(message)
        self.alias = alias
        self.key = key
        self.subkey = subkey


class UnknownAliasError(AliasError):
    """Alias references a key with no usable translation.

    Example:
        {"A": "{{B}}"}  ← B is not defined
    """


class MissingAliasSubkeyError(UnknownAliasError):
    """Alias targets a subkey the leaf table does not define.

    Example:
        {"A": {"b": "bar"}, "B": "{{A[c]}}"}
    """


class CircularAliasError(AliasError):
    """Aliases reference each other, directly or indirectly.

    Example:
        {"A": "{{B}}", "B": "{{A}}"}  ← Infinite loop!
    """


class NonStringAliasError(AliasError):
    """Alias without subkey targets a leaf table.

    A leaf table cannot be flattened to one string; target one of its
    subkeys instead: {{A[1]}}.
    """


class AliasDepthError(AliasError):
    """Alias chain nests deeper than the requested ``max_depth``."""
