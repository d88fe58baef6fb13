"""keytranslate - key-based translation lookups with pluralization and aliases.

Resolves a lookup key, plus an optional count, subkey and placeholder
values, against a static translation table:

    >>> from keytranslate import make_translator
    >>> t = make_translator({"hits": {0: "No Hits", 1: "{n} Hit", "n": "{n} Hits"}})
    >>> t("hits", 3)
    '3 Hits'

Public API:
    make_translator - Create a Translator over a table
    Translator - Callable translator with live-bound table and options
    TranslatorOptions - Lookup and output options
    resolve_aliases - Expand {{Key}} / {{Key[sub]}} aliases in a raw table
    find_alias_cycles - Report alias cycles without raising
    CLDRPluralizer - Babel-backed CLDR plural category strategy

Exceptions (alias pre-processing only; lookups never raise):
    TranslationError - Base exception class
    AliasError - Alias expansion failure
    UnknownAliasError, MissingAliasSubkeyError, CircularAliasError,
    NonStringAliasError, AliasDepthError

Submodules:
    keytranslate.runtime - Classification, resolution, substitution
    keytranslate.analysis - Alias expansion and graph analysis
    keytranslate.diagnostics - Error types and diagnostic formatting
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .analysis import find_alias_cycles, resolve_aliases
from .diagnostics import (
    AliasDepthError,
    AliasError,
    CircularAliasError,
    MissingAliasSubkeyError,
    NonStringAliasError,
    TranslationError,
    UnknownAliasError,
)
from .runtime import (
    CallablePluralizer,
    CLDRPluralizer,
    IdentityPluralizer,
    Pluralizer,
    Translator,
    TranslatorOptions,
    make_translator,
)

# Version information - Auto-populated from package metadata
try:
    __version__ = _get_version("keytranslate")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "AliasDepthError",
    "AliasError",
    "CLDRPluralizer",
    "CallablePluralizer",
    "CircularAliasError",
    "IdentityPluralizer",
    "MissingAliasSubkeyError",
    "NonStringAliasError",
    "Pluralizer",
    "TranslationError",
    "Translator",
    "TranslatorOptions",
    "UnknownAliasError",
    "__version__",
    "find_alias_cycles",
    "make_translator",
    "resolve_aliases",
]
