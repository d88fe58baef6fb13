"""Key resolver - selects the leaf string for a lookup.

Given the translation table, a key and the classified call arguments, picks
a plain string, a pluralized form, or a subkey, with this precedence for
leaf tables:

    count given:     exact count -> pluralizer result -> "*" -> "n"
    selector given:  selector -> "*"
    neither:         "*" -> "n"

Resolution never raises. When no leaf exists the translator falls back to
``format_missing()``.

Python 3.13+. Indirect dependency: Babel (via plural_rules, CLDR strategy only).
"""

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from decimal import Decimal

from keytranslate.constants import CATCH_ALL_SELECTOR, DEBUG_MARKER, DEFAULT_SELECTOR
from keytranslate.diagnostics import ErrorTemplate
from keytranslate.enums import SelectorSource
from keytranslate.runtime.arguments import CallArguments
from keytranslate.runtime.options import EffectiveOptions
from keytranslate.runtime.plural_rules import Count, IdentityPluralizer, Pluralizer

__all__ = ["KeyResolver", "ResolvedLeaf", "format_missing", "lookup_leaf"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResolvedLeaf:
    """Leaf string chosen for a lookup.

    Attributes:
        text: The leaf string, placeholders not yet substituted
        source: Which precedence rule selected it
        selector: Table selector that matched (None for plain strings)
    """

    text: str
    source: SelectorSource
    selector: object = None


def _selector_candidates(selector: object) -> Iterator[object]:
    """Yield the table keys a selector may be stored under.

    Tables decoded from JSON key every selector by string, so numeric
    selectors also match their integral decimal form: 13 -> 13, "13".
    The sign is kept; -13 never matches 13.
    """
    yield selector
    match selector:
        case bool():
            return
        case int():
            yield str(selector)
        case float() if selector.is_integer():
            yield int(selector)
            yield str(int(selector))
        case Decimal() if selector.is_finite() and selector == selector.to_integral_value():
            yield int(selector)
            yield str(int(selector))


def _display_selector(selector: object) -> object:
    """Integral floats and Decimals print as integers: 2.0 -> 2."""
    match selector:
        case float() if selector.is_integer():
            return int(selector)
        case Decimal() if selector.is_finite() and selector == selector.to_integral_value():
            return int(selector)
    return selector


def lookup_leaf(leaves: Mapping[object, object], selector: object) -> str | None:
    """Look up a string leaf by selector.

    Args:
        leaves: Leaf table
        selector: Selector to look up

    Returns:
        The string leaf, or None if absent or not a string. Nested
        non-string values are not valid leaves.
    """
    for candidate in _selector_candidates(selector):
        try:
            leaf = leaves.get(candidate)
        except TypeError:
            # Unhashable selector returned by a pluralizer
            return None
        if isinstance(leaf, str):
            return leaf
    return None


class KeyResolver:
    """Resolves lookup keys against a translation table.

    The resolver holds no state between calls; the translator creates one
    per lookup from whatever table and options are bound at that moment.
    """

    __slots__ = ("pluralizer", "table")

    def __init__(
        self,
        table: Mapping[str, object],
        *,
        pluralizer: Pluralizer | None = None,
    ) -> None:
        """Initialize resolver.

        Args:
            table: Translation table
            pluralizer: Plural strategy (keyword-only); identity if None
        """
        self.table = table
        self.pluralizer = pluralizer if pluralizer is not None else IdentityPluralizer()

    def resolve(self, key: str, arguments: CallArguments) -> ResolvedLeaf | None:
        """Select the leaf for ``key``.

        Args:
            key: Lookup key
            arguments: Classified call arguments

        Returns:
            ResolvedLeaf, or None when the translation is missing. Entries
            that are neither strings nor mappings count as missing.
        """
        try:
            entry = self.table.get(key)
        except TypeError:
            # Unhashable key
            return None

        if isinstance(entry, str):
            return ResolvedLeaf(entry, SelectorSource.PLAIN)
        if not isinstance(entry, Mapping):
            return None

        if arguments.count is not None:
            return self._resolve_count(key, entry, arguments.count)
        if arguments.selector is not None:
            return self._resolve_selector(entry, arguments.selector)
        return self._first_of(
            entry,
            (CATCH_ALL_SELECTOR, SelectorSource.CATCH_ALL),
            (DEFAULT_SELECTOR, SelectorSource.DEFAULT),
        )

    def _resolve_count(
        self, key: str, leaves: Mapping[object, object], count: Count
    ) -> ResolvedLeaf | None:
        leaf = lookup_leaf(leaves, count)
        if leaf is not None:
            return ResolvedLeaf(leaf, SelectorSource.EXACT, count)

        try:
            # Plural rules are defined on magnitude; -21 pluralizes like 21
            plural_selector = self.pluralizer.classify(abs(count))
        except Exception as e:  # noqa: BLE001 - user-supplied strategy
            logger.warning("%s", ErrorTemplate.pluralizer_failed(key, count, e))
        else:
            leaf = lookup_leaf(leaves, plural_selector)
            if leaf is not None:
                return ResolvedLeaf(leaf, SelectorSource.PLURALIZED, plural_selector)

        return self._first_of(
            leaves,
            (CATCH_ALL_SELECTOR, SelectorSource.CATCH_ALL),
            (DEFAULT_SELECTOR, SelectorSource.DEFAULT),
        )

    def _resolve_selector(
        self, leaves: Mapping[object, object], selector: str
    ) -> ResolvedLeaf | None:
        return self._first_of(
            leaves,
            (selector, SelectorSource.EXACT),
            (CATCH_ALL_SELECTOR, SelectorSource.CATCH_ALL),
        )

    @staticmethod
    def _first_of(
        leaves: Mapping[object, object], *candidates: tuple[object, SelectorSource]
    ) -> ResolvedLeaf | None:
        for selector, source in candidates:
            leaf = lookup_leaf(leaves, selector)
            if leaf is not None:
                return ResolvedLeaf(leaf, source, selector)
        return None


def format_missing(key: str, arguments: CallArguments, options: EffectiveOptions) -> str | None:
    """Render a missing translation according to options.

    Checked in order:
        debug                                 -> "@@key@@" / "@@key.selector@@"
        use_key_for_missing_translation=False -> None
        otherwise                             -> key

    Args:
        key: Lookup key
        arguments: Classified call arguments; the count, else the subkey,
            is appended in debug output
        options: Effective options for this call

    Returns:
        Fallback string, or None for "no translation"
    """
    logger.debug("%s", ErrorTemplate.translation_not_found(key, arguments.lookup_selector))

    if options.debug:
        selector = _display_selector(arguments.lookup_selector)
        if selector is None:
            return f"{DEBUG_MARKER}{key}{DEBUG_MARKER}"
        return f"{DEBUG_MARKER}{key}.{selector}{DEBUG_MARKER}"
    if not options.use_key_for_missing_translation:
        return None
    return key
