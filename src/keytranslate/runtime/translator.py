"""Translator - main API for key-based translation lookups.

Python 3.13+. Indirect dependency: Babel (CLDR pluralizer only).
"""

import logging
from collections.abc import Mapping
from typing import Any

from keytranslate.analysis.aliases import resolve_aliases
from keytranslate.runtime.arguments import classify_arguments
from keytranslate.runtime.options import TranslatorOptions, effective_options
from keytranslate.runtime.resolver import KeyResolver, format_missing
from keytranslate.runtime.substitution import ReplacementSet, substitute

__all__ = ["Translator", "make_translator"]

logger = logging.getLogger(__name__)


class Translator:
    """Callable translator over a live-bound translation table.

    ``table`` and ``options`` are read fresh on every call. Mutating either,
    or rebinding them wholesale, takes effect on the next lookup. A table
    that is not a mapping behaves like an empty table; options are validated
    field by field (see ``keytranslate.runtime.options``).

    Lookups never raise. Missing translations render as the key, as None, or
    as "@@key@@" depending on options.

    Example:
        >>> t = make_translator({
        ...     "like": "I like {thing}!",
        ...     "hits": {0: "No Hits", 1: "{n} Hit", "n": "{n} Hits"},
        ... })
        >>> t("like", {"thing": "Sun"})
        'I like Sun!'
        >>> t("hits", 4)
        '4 Hits'
        >>> t.arr("like", {"thing": {"icon": "sun"}})
        ['I like ', {'icon': 'sun'}, '!']
    """

    __slots__ = ("_options", "_table")

    def __init__(self, table: Mapping[str, Any] | None = None, options: object = None) -> None:
        """Initialize translator.

        Args:
            table: Translation table; a new empty dict if None
            options: TranslatorOptions, a mapping of option fields, or None
                for defaults. Other values are accepted and degrade to
                defaults on lookup.
        """
        self._table: object = {} if table is None else table
        self._options: object = TranslatorOptions() if options is None else options

    @property
    def table(self) -> Any:
        """Bound translation table."""
        return self._table

    @table.setter
    def table(self, table: object) -> None:
        self._table = table

    @property
    def options(self) -> Any:
        """Bound options, as last assigned."""
        return self._options

    @options.setter
    def options(self, options: object) -> None:
        self._options = options

    @options.deleter
    def options(self) -> None:
        self._options = None

    def __call__(self, key: str, *extras: object) -> str | list[object] | None:
        """Translate ``key``.

        Args:
            key: Lookup key
            *extras: Count, subkey selector, positional sequence and/or named
                mapping, in any order

        Returns:
            Translated string; a segment list in array mode when a
            placeholder carries a value; None for a missing translation when
            use_key_for_missing_translation is False
        """
        return self._translate(key, extras, force_array=False)

    def arr(self, key: str, *extras: object) -> str | list[object] | None:
        """Translate ``key`` in array mode regardless of the ``array`` option.

        Replacement values are kept raw, e.g. for rendering components
        between text runs. Translations without placeholders are still
        returned as plain strings.
        """
        return self._translate(key, extras, force_array=True)

    def resolve_aliases(self) -> None:
        """Expand {{Key}} aliases in the bound table, rebinding the result.

        Raises:
            AliasError: On unknown, circular or non-string aliases
        """
        table = self._table if isinstance(self._table, Mapping) else {}
        self._table = resolve_aliases(table)

    def _translate(
        self, key: str, extras: tuple[object, ...], *, force_array: bool
    ) -> str | list[object] | None:
        options = effective_options(self._options)
        table = self._table if isinstance(self._table, Mapping) else {}
        if not isinstance(key, str):
            logger.debug("Coercing non-string key of type %s", type(key).__name__)
            key = str(key)

        arguments = classify_arguments(*extras)
        leaf = KeyResolver(table, pluralizer=options.pluralizer).resolve(key, arguments)

        if leaf is None:
            text = format_missing(key, arguments, options)
            if text is None:
                return None
        else:
            logger.debug("Resolved '%s' via %s selector", key, leaf.source)
            text = leaf.text

        replacements = ReplacementSet.build(
            count=arguments.count,
            positional=arguments.positional,
            named=arguments.named,
        )
        return substitute(text, replacements, array=force_array or options.array)

    def __repr__(self) -> str:
        size = len(self._table) if isinstance(self._table, Mapping) else 0
        return f"Translator(keys={size}, options={self._options!r})"


def make_translator(table: Mapping[str, Any] | None = None, options: object = None) -> Translator:
    """Create a translator.

    Args:
        table: Translation table
        options: TranslatorOptions, mapping, or None. With
            ``resolve_aliases=True`` the table's {{Key}} aliases are expanded
            once, here; the translator is then bound to the expanded copy.

    Returns:
        New Translator

    Raises:
        AliasError: Only when resolve_aliases is enabled and the table has
            broken aliases
    """
    translator = Translator(table, options)
    if effective_options(translator.options).resolve_aliases:
        translator.resolve_aliases()
    return translator
