"""Call-time argument classification.

Everything passed to a translator after the lookup key is classified purely
by runtime type into a small tagged value, so the resolver never inspects
raw argument types itself:

    t("date", {"day": "13"}, 2)    -> Named, Count
    t("items", 7, ["Funny"])       -> Count, Positional
    t("colors", "red")             -> Selector

Unrecognized shapes (None, booleans, arbitrary objects) are classified as
Ignored and dropped; localization never fails because of a bad argument.

Python 3.13+. Zero external dependencies.
"""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from decimal import Decimal
from typing import TypeAlias

from keytranslate.enums import ArgumentKind
from keytranslate.runtime.plural_rules import Count

__all__ = [
    "Argument",
    "CallArguments",
    "CountArgument",
    "IgnoredArgument",
    "NamedArgument",
    "PositionalArgument",
    "SelectorArgument",
    "classify_argument",
    "classify_arguments",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CountArgument:
    """Number selecting a plural form."""

    value: Count
    kind: ArgumentKind = ArgumentKind.COUNT


@dataclass(frozen=True, slots=True)
class SelectorArgument:
    """String selecting a subkey of a leaf table."""

    value: str
    kind: ArgumentKind = ArgumentKind.SELECTOR


@dataclass(frozen=True, slots=True)
class PositionalArgument:
    """Positional replacement values for {0}, {1}, ..."""

    value: Sequence[object]
    kind: ArgumentKind = ArgumentKind.POSITIONAL


@dataclass(frozen=True, slots=True)
class NamedArgument:
    """Named replacement values for {name} tokens."""

    value: Mapping[str, object]
    kind: ArgumentKind = ArgumentKind.NAMED


@dataclass(frozen=True, slots=True)
class IgnoredArgument:
    """Argument of unrecognized shape."""

    value: object
    kind: ArgumentKind = ArgumentKind.IGNORED


Argument: TypeAlias = (
    CountArgument | SelectorArgument | PositionalArgument | NamedArgument | IgnoredArgument
)


def classify_argument(value: object) -> Argument:
    """Classify a single call-time argument by its runtime type.

    Args:
        value: Argument passed after the lookup key

    Returns:
        Tagged argument. ``bool`` is never a count even though it is an
        ``int`` subclass; ``str`` is never a positional sequence.
    """
    match value:
        case bool():
            return IgnoredArgument(value)
        case int() | float() | Decimal():
            return CountArgument(value)
        case str():
            return SelectorArgument(value)
        case Mapping():
            return NamedArgument(value)
        case Sequence() if not isinstance(value, (bytes, bytearray)):
            return PositionalArgument(value)
        case _:
            return IgnoredArgument(value)


@dataclass(frozen=True, slots=True)
class CallArguments:
    """Classified arguments of one translator call.

    Attributes:
        count: Count, if one was supplied
        selector: Subkey selector, if one was supplied
        positional: Positional replacements, if supplied
        named: Named replacements, if supplied
    """

    count: Count | None = None
    selector: str | None = None
    positional: Sequence[object] | None = None
    named: Mapping[str, object] | None = None

    @property
    def lookup_selector(self) -> Count | str | None:
        """Selector shown in debug output: the count if given, else the subkey."""
        if self.count is not None:
            return self.count
        return self.selector


def classify_arguments(*extras: object) -> CallArguments:
    """Classify all arguments passed after the lookup key.

    The first argument of each kind wins; later duplicates are ignored.
    A count and a selector may both be recorded, in which case the count
    takes precedence during resolution.

    Args:
        *extras: Arguments in any order

    Returns:
        CallArguments with one slot per argument kind
    """
    count: Count | None = None
    selector: str | None = None
    positional: Sequence[object] | None = None
    named: Mapping[str, object] | None = None

    for extra in extras:
        argument = classify_argument(extra)
        match argument:
            case CountArgument(value=value) if count is None:
                count = value
            case SelectorArgument(value=value) if selector is None:
                selector = value
            case PositionalArgument(value=value) if positional is None:
                positional = value
            case NamedArgument(value=value) if named is None:
                named = value
            case IgnoredArgument():
                logger.debug("Ignoring unrecognized argument of type %s", type(extra).__name__)
            case _:
                logger.debug("Ignoring extra %s argument", argument.kind)

    return CallArguments(count=count, selector=selector, positional=positional, named=named)
