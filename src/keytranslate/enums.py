"""Enumerations for keytranslate type-safe constants.

Uses StrEnum for automatic string conversion.

Python 3.13+.
"""

from enum import StrEnum


class ArgumentKind(StrEnum):
    """Classification of a call-time argument passed after the lookup key.

    StrEnum provides automatic string conversion: str(ArgumentKind.COUNT) == "count"
    """

    COUNT = "count"
    """Number selecting a plural form: t("hits", 3)"""

    SELECTOR = "selector"
    """String selecting a subkey: t("colors", "red")"""

    POSITIONAL = "positional"
    """Sequence of positional replacements: t("fruit", ["shiny", "round"])"""

    NAMED = "named"
    """Mapping of named replacements: t("like", {"thing": "Sun"})"""

    IGNORED = "ignored"
    """Unrecognized argument shape, silently dropped"""


class SelectorSource(StrEnum):
    """Which precedence rule picked a leaf out of a leaf table.

    StrEnum provides automatic string conversion: str(SelectorSource.EXACT) == "exact"
    """

    EXACT = "exact"
    """Selector equal to the count, or the requested subkey"""

    PLURALIZED = "pluralized"
    """Selector returned by the pluralizer strategy"""

    CATCH_ALL = "catch_all"
    """The "*" selector"""

    DEFAULT = "default"
    """The "n" selector"""

    PLAIN = "plain"
    """Entry is a plain string, no selector involved"""


__all__ = [
    "ArgumentKind",
    "SelectorSource",
]
