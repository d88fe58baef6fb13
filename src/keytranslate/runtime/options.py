"""Translator options with per-field fallback.

TranslatorOptions is deliberately mutable: callers may flip ``debug`` or
rebind ``pluralize`` between lookups. The translator never trusts the bound
value, though. On every call it is read through ``effective_options()``,
which validates each field independently and substitutes the default for
any field that is missing or malformed. Binding ``None``, a plain dict, or
garbage as the options therefore degrades instead of raising.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

from keytranslate.runtime.plural_rules import IdentityPluralizer, Pluralizer, as_pluralizer

__all__ = [
    "EffectiveOptions",
    "TranslatorOptions",
    "effective_options",
]


@dataclass(slots=True)
class TranslatorOptions:
    """Options controlling lookup and output.

    Attributes:
        pluralize: Pluralizer strategy, or plain callable ``count -> selector``
        array: Return segment lists instead of strings when placeholders
            carry values
        debug: Render missing translations as "@@key@@" / "@@key.selector@@"
        use_key_for_missing_translation: Return the key for missing
            translations (True) or None (False)
        resolve_aliases: Expand {{Key}} aliases once when the translator is
            created

    Example:
        >>> options = TranslatorOptions(debug=True)
        >>> t = make_translator({}, options)
        >>> t("missing")
        '@@missing@@'
        >>> t.options.debug = False
        >>> t("missing")
        'missing'
    """

    pluralize: Pluralizer | Callable[..., object] = field(default_factory=IdentityPluralizer)
    array: bool = False
    debug: bool = False
    use_key_for_missing_translation: bool = True
    resolve_aliases: bool = False


@dataclass(frozen=True, slots=True)
class EffectiveOptions:
    """Validated snapshot of options for a single call."""

    pluralizer: Pluralizer
    array: bool
    debug: bool
    use_key_for_missing_translation: bool
    resolve_aliases: bool


_DEFAULTS = TranslatorOptions()


def _read(options: object, name: str) -> object:
    if isinstance(options, Mapping):
        return options.get(name)
    if isinstance(options, TranslatorOptions):
        return getattr(options, name)
    return None


def _read_bool(options: object, name: str) -> bool:
    value = _read(options, name)
    if isinstance(value, bool):
        return value
    default: bool = getattr(_DEFAULTS, name)
    return default


def effective_options(options: object) -> EffectiveOptions:
    """Validate bound options field by field.

    Args:
        options: Whatever is currently bound as the translator's options:
            a TranslatorOptions, a mapping with the same field names, None,
            or anything else

    Returns:
        EffectiveOptions where each invalid or absent field holds its default
    """
    pluralizer = as_pluralizer(_read(options, "pluralize")) or IdentityPluralizer()
    return EffectiveOptions(
        pluralizer=pluralizer,
        array=_read_bool(options, "array"),
        debug=_read_bool(options, "debug"),
        use_key_for_missing_translation=_read_bool(options, "use_key_for_missing_translation"),
        resolve_aliases=_read_bool(options, "resolve_aliases"),
    )
