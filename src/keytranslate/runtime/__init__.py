"""keytranslate runtime package.

Argument classification, key resolution, pluralization, placeholder
substitution, and the Translator API.

Python 3.13+.
"""

from .arguments import CallArguments, classify_argument, classify_arguments
from .options import EffectiveOptions, TranslatorOptions, effective_options
from .plural_rules import (
    CallablePluralizer,
    CLDRPluralizer,
    IdentityPluralizer,
    Pluralizer,
    select_plural_category,
)
from .resolver import KeyResolver, ResolvedLeaf, format_missing
from .substitution import ReplacementSet, substitute
from .translator import Translator, make_translator

__all__ = [
    "CLDRPluralizer",
    "CallArguments",
    "CallablePluralizer",
    "EffectiveOptions",
    "IdentityPluralizer",
    "KeyResolver",
    "Pluralizer",
    "ReplacementSet",
    "ResolvedLeaf",
    "Translator",
    "TranslatorOptions",
    "classify_argument",
    "classify_arguments",
    "effective_options",
    "format_missing",
    "make_translator",
    "select_plural_category",
    "substitute",
]
