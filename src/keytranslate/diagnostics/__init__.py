"""Diagnostic system for keytranslate errors.

Provides structured error diagnostics with codes and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    AliasDepthError,
    AliasError,
    CircularAliasError,
    MissingAliasSubkeyError,
    NonStringAliasError,
    TranslationError,
    UnknownAliasError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "AliasDepthError",
    "AliasError",
    "CircularAliasError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "MissingAliasSubkeyError",
    "NonStringAliasError",
    "OutputFormat",
    "TranslationError",
    "UnknownAliasError",
]
