"""Pluralization strategies.

A pluralizer maps a count to a selector that is then looked up verbatim in a
leaf table. The default strategy is the identity, which makes integer-keyed
tables work without any locale knowledge. CLDRPluralizer selects CLDR plural
categories using Babel's locale data for tables keyed by category name:

    {"one": "{n} file", "few": "{n} pliki", "many": "{n} plików", "n": "..."}

Python 3.13+. Depends on Babel for CLDR data (CLDRPluralizer only).

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol, TypeAlias, runtime_checkable

from babel.core import UnknownLocaleError

from keytranslate.locale_utils import get_babel_locale

__all__ = [
    "CLDRPluralizer",
    "CallablePluralizer",
    "Count",
    "IdentityPluralizer",
    "Pluralizer",
    "as_pluralizer",
    "select_plural_category",
]

Count: TypeAlias = int | float | Decimal


@runtime_checkable
class Pluralizer(Protocol):
    """Strategy mapping a count to a leaf-table selector."""

    def classify(self, count: Count) -> object:
        """Return the selector for ``count``."""
        ...


@dataclass(frozen=True, slots=True)
class IdentityPluralizer:
    """Default strategy: the count is its own selector.

    With integer-keyed tables this means only exact matches and the
    "*" / "n" fallbacks are ever used.
    """

    def classify(self, count: Count) -> object:
        return count


@dataclass(frozen=True, slots=True)
class CallablePluralizer:
    """Adapter for plain functions ``count -> selector``.

    Example:
        >>> def icelandic(n):
        ...     return "p" if n % 10 != 1 or n % 100 == 11 else "s"
        >>> CallablePluralizer(icelandic).classify(21)
        's'
    """

    func: Callable[[Count], object]

    def classify(self, count: Count) -> object:
        return self.func(count)


@dataclass(frozen=True, slots=True)
class CLDRPluralizer:
    """CLDR plural categories for a locale.

    Attributes:
        locale: Locale code, BCP-47 or POSIX ("pl", "en-US", "ar_SA")
    """

    locale: str

    def classify(self, count: Count) -> object:
        return select_plural_category(count, self.locale)


def select_plural_category(n: Count, locale: str) -> str:
    """Select CLDR plural category for number using Babel's CLDR data.

    Args:
        n: Number to categorize
        locale: Locale code (e.g., "lv_LV", "en_US", "ar-SA")

    Returns:
        Plural category: "zero", "one", "two", "few", "many", or "other"

    Examples:
        >>> select_plural_category(1, "en_US")
        'one'
        >>> select_plural_category(5, "ru_RU")
        'many'
        >>> select_plural_category(42, "ja_JP")
        'other'

    If locale parsing fails, falls back to simple one/other rule.
    """
    try:
        locale_obj = get_babel_locale(locale)
    except (UnknownLocaleError, ValueError):
        # Most common pattern: n == 1 -> "one", else -> "other"
        return "one" if abs(n) == 1 else "other"

    return locale_obj.plural_form(n)


def as_pluralizer(value: object) -> Pluralizer | None:
    """Coerce an option value to a Pluralizer.

    Accepts strategy objects and plain callables. Anything else yields None
    so the caller can fall back to the default strategy.
    """
    if isinstance(value, Pluralizer):
        return value
    if callable(value):
        return CallablePluralizer(value)
    return None
