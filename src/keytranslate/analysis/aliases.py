"""Alias expansion pre-pass.

Rewrites ``{{Key}}`` and ``{{Key[sub]}}`` references inside a raw
translation table into the text they point at:

    {"brand": "Acme", "welcome": "Welcome to {{brand}}!"}
    -> {"brand": "Acme", "welcome": "Welcome to Acme!"}

Expansion is a depth-first, memoized walk over an explicit stack, so
declaration order does not matter, forward references work and chains may
nest arbitrarily deep. Every alias target being expanded is marked in
progress; re-entering one is a circular reference. Broken aliases are
authoring errors and abort the pass with an AliasError subclass instead of
degrading like runtime lookups do.

Targets are identified structurally: ``(key, None)`` for a plain string and
``(key, subkey)`` for a leaf, with the subkey as stored in the table. The
rendered name ``"A[b]"`` is only used for diagnostics, since a top-level key
may itself be spelled ``"A[b]"``.

This runs once, before lookups, never per call.

Python 3.13+. Zero external dependencies.
"""

import logging
import re
from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any, TypeAlias

from keytranslate.analysis.graph import ALIAS_PATTERN, AliasReference, subkey_candidates
from keytranslate.diagnostics import (
    AliasDepthError,
    CircularAliasError,
    ErrorTemplate,
    MissingAliasSubkeyError,
    NonStringAliasError,
    UnknownAliasError,
)

__all__ = ["resolve_aliases"]

logger = logging.getLogger(__name__)

_Node: TypeAlias = tuple[str, object]


class _Frame:
    """Text being expanded: a top-level entry or a followed alias target."""

    __slots__ = ("key", "matches", "name", "node", "pieces", "position", "text")

    def __init__(self, text: str, key: str, node: _Node | None = None, name: str = "") -> None:
        self.text = text
        self.key = key
        self.node = node
        self.name = name
        self.matches: Iterator[re.Match[str]] = ALIAS_PATTERN.finditer(text)
        self.pieces: list[str] = []
        self.position = 0

    def advance(self) -> re.Match[str] | None:
        """Return the next alias match, keeping the literal text before it."""
        match = next(self.matches, None)
        if match is not None:
            self.pieces.append(self.text[self.position : match.start()])
            self.position = match.end()
        return match

    def finish(self) -> str:
        self.pieces.append(self.text[self.position :])
        return "".join(self.pieces)


class _AliasExpander:
    """Expands aliases against one raw table, memoizing per alias target."""

    __slots__ = ("_done", "_in_progress", "_table", "max_depth")

    def __init__(self, table: Mapping[str, Any], *, max_depth: int | None = None) -> None:
        self._table = table
        self._done: dict[_Node, str] = {}
        self._in_progress: set[_Node] = set()
        self.max_depth = max_depth

    @property
    def resolved_count(self) -> int:
        """Number of distinct alias targets expanded so far."""
        return len(self._done)

    def expand(self, text: str, key: str) -> str:
        """Replace every alias in ``text``.

        Args:
            text: Raw string that may contain aliases
            key: Translation key the text belongs to (for diagnostics)

        Returns:
            Text with all aliases expanded
        """
        stack = [_Frame(text, key)]

        while True:
            frame = stack[-1]
            match = frame.advance()

            if match is None:
                resolved = frame.finish()
                stack.pop()
                if frame.node is None:
                    return resolved
                self._in_progress.discard(frame.node)
                self._done[frame.node] = resolved
                logger.debug("Resolved alias %s", frame.name)
                stack[-1].pieces.append(resolved)
                continue

            reference = AliasReference.from_match(match)
            node, name, raw = self._target(reference, frame.key)

            if node in self._done:
                frame.pieces.append(self._done[node])
                continue
            if node in self._in_progress:
                path = [f.name for f in stack if f.node is not None]
                raise CircularAliasError(
                    ErrorTemplate.alias_cyclic_reference(name, path),
                    alias=name,
                    key=reference.key,
                    subkey=reference.subkey,
                )
            # The bottom frame is the entry itself, not an alias
            if self.max_depth is not None and len(stack) - 1 >= self.max_depth:
                raise AliasDepthError(
                    ErrorTemplate.alias_depth_exceeded(name, self.max_depth),
                    alias=name,
                    key=reference.key,
                    subkey=reference.subkey,
                )

            self._in_progress.add(node)
            stack.append(_Frame(raw, reference.key, node, name))

    def _target(self, reference: AliasReference, key: str) -> tuple[_Node, str, str]:
        """Return (node, alias name, raw text) of the entry a reference points at."""
        entry = self._table.get(reference.key)

        if isinstance(entry, str):
            # Subkey is ignored on plain strings
            return (reference.key, None), reference.key, entry

        if isinstance(entry, Mapping):
            if reference.subkey is None:
                raise NonStringAliasError(
                    ErrorTemplate.alias_not_string(reference.name, key),
                    alias=reference.name,
                    key=reference.key,
                )
            for candidate in subkey_candidates(reference.subkey):
                leaf = entry.get(candidate)
                if isinstance(leaf, str):
                    return (reference.key, candidate), reference.name, leaf
            raise MissingAliasSubkeyError(
                ErrorTemplate.alias_subkey_not_found(reference.name, key),
                alias=reference.name,
                key=reference.key,
                subkey=reference.subkey,
            )

        raise UnknownAliasError(
            ErrorTemplate.alias_not_found(reference.name, key),
            alias=reference.name,
            key=reference.key,
            subkey=reference.subkey,
        )

    def expand_entry(self, key: str, entry: object) -> object:
        """Expand a top-level entry; non-string values are returned unchanged."""
        if isinstance(entry, str):
            expanded = self._done.get((key, None))
            if expanded is None:
                expanded = self.expand(entry, key)
            return expanded

        if isinstance(entry, Mapping):
            leaves: dict[object, object] = {}
            for subkey, leaf in entry.items():
                if not isinstance(leaf, str):
                    leaves[subkey] = leaf
                    continue
                expanded = self._done.get((key, subkey))
                if expanded is None:
                    expanded = self.expand(leaf, key)
                leaves[subkey] = expanded
            return leaves

        return entry


def resolve_aliases(
    table: Mapping[str, Any],
    *,
    in_place: bool = False,
    max_depth: int | None = None,
) -> dict[str, Any]:
    """Expand all aliases in a raw translation table.

    Args:
        table: Raw translation table
        in_place: Write the expanded entries back into ``table`` (which must
            then be mutable) and return it, instead of returning a new dict
        max_depth: Maximum alias nesting; None follows chains of any depth

    Returns:
        Table with every alias expanded. Leaf tables are copied as dicts.

    Raises:
        UnknownAliasError: Alias to an undefined or non-translation key
        MissingAliasSubkeyError: Alias to a subkey a leaf table lacks
        NonStringAliasError: Alias without subkey to a leaf table
        CircularAliasError: Aliases that reference each other
        AliasDepthError: Alias chain deeper than ``max_depth``

    Example:
        >>> resolve_aliases({"A": {"b": "bar"}, "B": "Foo {{A[b]}}", "C": "< {{B}} >"})
        {'A': {'b': 'bar'}, 'B': 'Foo bar', 'C': '< Foo bar >'}
    """
    expander = _AliasExpander(table, max_depth=max_depth)
    expanded = {key: expander.expand_entry(key, entry) for key, entry in table.items()}

    logger.info(
        "Resolved %d alias target(s) across %d key(s)", expander.resolved_count, len(expanded)
    )

    if not in_place:
        return expanded
    if not isinstance(table, MutableMapping):
        msg = "in_place=True requires a mutable mapping"
        raise TypeError(msg)
    table.update(expanded)
    return table  # type: ignore[return-value]
