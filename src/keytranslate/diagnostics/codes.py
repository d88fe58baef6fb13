"""Diagnostic codes and data structures.

Defines error codes and structured diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Lookup diagnostics (runtime, never raised)
        2000-2999: Alias errors (pre-processing, raised)
    """

    # Lookup diagnostics (1000-1999)
    TRANSLATION_NOT_FOUND = 1001
    PLURALIZER_FAILED = 1002

    # Alias errors (2000-2999)
    ALIAS_NOT_FOUND = 2001
    ALIAS_SUBKEY_NOT_FOUND = 2002
    ALIAS_CYCLIC_REFERENCE = 2003
    ALIAS_NOT_STRING = 2004
    ALIAS_DEPTH_EXCEEDED = 2005


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools (translation linters, CI checks).

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        key: Translation key being processed when the error occurred
        alias: Alias reference text that failed, e.g. "A[b]"
        severity: Error severity level
        alias_path: Aliases being followed at time of error (outermost first)
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    key: str | None = None
    alias: str | None = None
    severity: Literal["error", "warning"] = "error"
    alias_path: tuple[str, ...] | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[ALIAS_NOT_FOUND]: No translation for alias "B"
              --> key: A
              = help: Define "B" in the translation table or fix the reference

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
