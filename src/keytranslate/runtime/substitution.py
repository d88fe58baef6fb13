"""Placeholder substitution.

Expands ``{identifier}`` tokens in a resolved leaf string:

- ``{0}``, ``{1}``, ... index the positional replacements
- ``{name}`` looks up the named replacements
- ``{n}`` is the count, when one was supplied

Tokens without a value stay in the output verbatim, braces included, so a
missing placeholder is visible instead of silently blank.

Python 3.13+. Zero external dependencies.
"""

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from keytranslate.constants import COUNT_PLACEHOLDER

__all__ = ["ReplacementSet", "substitute"]

# Innermost {...} without nested braces. "{{A}}" contains the token "{A}".
_TOKEN_PATTERN = re.compile(r"\{([^{}]+)\}")

_MISSING = object()


@dataclass(frozen=True, slots=True)
class ReplacementSet:
    """Values available to placeholder substitution.

    Always built through ``build()``, which copies the caller's mapping
    before the count is merged in. The caller's object is never mutated.

    Attributes:
        positional: Values for {0}, {1}, ...
        named: Values for {name} tokens, including {n}
    """

    positional: Sequence[object] = ()
    named: Mapping[object, object] = field(default_factory=dict)

    @classmethod
    def build(
        cls,
        count: object = None,
        positional: Sequence[object] | None = None,
        named: Mapping[str, object] | None = None,
    ) -> "ReplacementSet":
        """Merge count, positional and named values into a private set.

        Args:
            count: Count bound to {n}; overrides a named "n" value
            positional: Positional values
            named: Named values (copied, never mutated)

        Returns:
            New ReplacementSet
        """
        values: dict[object, object] = dict(named) if named is not None else {}
        if count is not None:
            values[COUNT_PLACEHOLDER] = count
        return cls(
            positional=tuple(positional) if positional is not None else (),
            named=values,
        )

    def lookup(self, identifier: str) -> object:
        """Return the value bound to ``identifier``, or the _MISSING sentinel."""
        if identifier.isascii() and identifier.isdigit():
            index = int(identifier)
            if index < len(self.positional):
                return self.positional[index]
        return self.named.get(identifier, _MISSING)


def substitute(
    template: str,
    replacements: ReplacementSet | None = None,
    *,
    array: bool = False,
) -> str | list[object]:
    """Expand placeholder tokens in ``template``.

    Args:
        template: Resolved leaf string
        replacements: Values to substitute; None substitutes nothing
        array: Return alternating literal text and raw values instead of a
            string

    Returns:
        In string mode, the expanded string; values are coerced with str().
        In array mode, a list such as ``["abc ", value, " def"]`` with empty
        literal runs dropped, or a plain string when the result is a single
        text run (no tokens, or no token had a value).

    Example:
        >>> substitute("{a}{b}", ReplacementSet.build(named={"a": "X", "b": "Y"}))
        'XY'
        >>> substitute("{thing}", ReplacementSet.build())
        '{thing}'
        >>> substitute("abc {xyz} def", ReplacementSet.build(named={"xyz": [1]}), array=True)
        ['abc ', [1], ' def']
    """
    if replacements is None:
        replacements = ReplacementSet()

    if not array:
        return _substitute_string(template, replacements)
    return _substitute_segments(template, replacements)


def _substitute_string(template: str, replacements: ReplacementSet) -> str:
    def replace(match: re.Match[str]) -> str:
        value = replacements.lookup(match.group(1))
        if value is _MISSING:
            return match.group(0)
        return str(value)

    # re.sub never rescans inserted text, so values containing braces are safe
    return _TOKEN_PATTERN.sub(replace, template)


def _substitute_segments(template: str, replacements: ReplacementSet) -> str | list[object]:
    segments: list[object] = []
    text: list[str] = []
    position = 0

    for match in _TOKEN_PATTERN.finditer(template):
        text.append(template[position : match.start()])
        position = match.end()

        value = replacements.lookup(match.group(1))
        if value is _MISSING:
            text.append(match.group(0))
            continue

        literal = "".join(text)
        if literal:
            segments.append(literal)
        text.clear()
        segments.append(value)

    text.append(template[position:])
    literal = "".join(text)
    if literal:
        segments.append(literal)

    if not segments:
        return ""
    if len(segments) == 1 and isinstance(segments[0], str):
        return segments[0]
    return segments
