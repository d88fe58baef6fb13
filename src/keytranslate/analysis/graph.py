"""Alias reference graph.

Parses ``{{Key}}`` / ``{{Key[sub]}}`` references and builds the directed
graph of alias targets, so translation sources can be linted for cycles
without running (and aborting) the alias expansion pass.

Nodes are alias names: "A" for a plain string entry, "A[b]" for the leaf
"b" of a leaf table.

Python 3.13+. Zero external dependencies.
"""

import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum, auto

__all__ = [
    "ALIAS_PATTERN",
    "AliasReference",
    "alias_dependencies",
    "detect_cycles",
    "find_alias_cycles",
    "iter_alias_references",
    "subkey_candidates",
]

# {{Key}} or {{Key[sub]}}; keys may contain spaces but no braces or brackets
ALIAS_PATTERN = re.compile(r"\{\{([^{}\[\]]+)(?:\[([^{}\[\]]+)\])?\}\}")

_INTEGER_PATTERN = re.compile(r"-?\d+")


@dataclass(frozen=True, slots=True)
class AliasReference:
    """One alias reference found in a string.

    Attributes:
        key: Target translation key
        subkey: Target selector between brackets, None without qualifier
    """

    key: str
    subkey: str | None = None

    @property
    def name(self) -> str:
        """Reference as written, without braces: "A" or "A[b]"."""
        if self.subkey is None:
            return self.key
        return f"{self.key}[{self.subkey}]"

    @classmethod
    def from_match(cls, match: re.Match[str]) -> "AliasReference":
        return cls(key=match.group(1), subkey=match.group(2))


def iter_alias_references(text: str) -> Iterator[AliasReference]:
    """Yield every alias reference in ``text``, in order of appearance.

    Example:
        >>> [ref.name for ref in iter_alias_references("{{A}} and {{B[one]}}")]
        ['A', 'B[one]']
    """
    for match in ALIAS_PATTERN.finditer(text):
        yield AliasReference.from_match(match)


def subkey_candidates(subkey: str) -> tuple[object, ...]:
    """Table keys a bracketed subkey may be stored under.

    Subkeys are always text inside an alias, while leaf tables built in
    Python often use integer selectors: "1" matches both "1" and 1.
    """
    if _INTEGER_PATTERN.fullmatch(subkey):
        return (subkey, int(subkey))
    return (subkey,)


def _target_node(table: Mapping[str, object], reference: AliasReference) -> str | None:
    """Graph node an alias points at, or None for unresolvable targets."""
    target = table.get(reference.key)
    if isinstance(target, str):
        # Subkey is ignored on plain strings
        return reference.key
    if isinstance(target, Mapping) and reference.subkey is not None:
        for candidate in subkey_candidates(reference.subkey):
            if isinstance(target.get(candidate), str):
                return reference.name
    return None


def alias_dependencies(table: Mapping[str, object]) -> dict[str, set[str]]:
    """Build the alias dependency graph of a raw translation table.

    Args:
        table: Raw translation table

    Returns:
        Mapping from node ("A" or "A[b]") to the set of nodes its text
        aliases. References to unknown keys or missing subkeys add no edge.

    Example:
        >>> alias_dependencies({"A": "x", "B": {"one": "{{A}}"}})
        {'A': set(), 'B[one]': {'A'}}
    """
    graph: dict[str, set[str]] = {}

    def add(node: str, text: str) -> None:
        edges = graph.setdefault(node, set())
        for reference in iter_alias_references(text):
            target = _target_node(table, reference)
            if target is not None:
                edges.add(target)

    for key, entry in table.items():
        if isinstance(entry, str):
            add(key, entry)
        elif isinstance(entry, Mapping):
            for subkey, leaf in entry.items():
                if isinstance(leaf, str):
                    add(AliasReference(key, str(subkey)).name, leaf)

    return graph


class _Color(Enum):
    """Three-color DFS marking."""

    WHITE = auto()  # Unvisited
    GRAY = auto()  # On the current DFS path
    BLACK = auto()  # Fully explored


def detect_cycles(dependencies: Mapping[str, set[str]]) -> list[list[str]]:
    """Detect cycles in a dependency graph using iterative DFS.

    Iterative to stay clear of RecursionError on long alias chains. A back
    edge to a GRAY node closes a cycle.

    Args:
        dependencies: Mapping from node to the set of nodes it references

    Returns:
        Cycles as node paths that start and end at the same node, each
        distinct node set reported once. Empty if the graph is acyclic.

    Example:
        >>> detect_cycles({"a": {"b"}, "b": {"a"}})
        [['a', 'b', 'a']]

    Complexity:
        Time: O(V + E), Space: O(V)
    """
    color: dict[str, _Color] = {}
    cycles: list[list[str]] = []
    seen: set[frozenset[str]] = set()

    for root in sorted(dependencies):
        if color.get(root, _Color.WHITE) is not _Color.WHITE:
            continue

        path: list[str] = [root]
        color[root] = _Color.GRAY
        stack: list[Iterator[str]] = [iter(sorted(dependencies.get(root, ())))]

        while stack:
            neighbor = next(stack[-1], None)
            if neighbor is None:
                color[path.pop()] = _Color.BLACK
                stack.pop()
                continue

            match color.get(neighbor, _Color.WHITE):
                case _Color.WHITE:
                    color[neighbor] = _Color.GRAY
                    path.append(neighbor)
                    stack.append(iter(sorted(dependencies.get(neighbor, ()))))
                case _Color.GRAY:
                    cycle = [*path[path.index(neighbor) :], neighbor]
                    members = frozenset(cycle)
                    if members not in seen:
                        seen.add(members)
                        cycles.append(cycle)
                case _Color.BLACK:
                    pass

    return cycles


def find_alias_cycles(table: Mapping[str, object]) -> list[list[str]]:
    """Report alias cycles in a raw table without raising.

    Args:
        table: Raw translation table

    Returns:
        Cycles as alias-name paths, e.g. [["A", "B", "A"]]
    """
    return detect_cycles(alias_dependencies(table))
