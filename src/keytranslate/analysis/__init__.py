"""Static analysis of raw translation tables.

Alias expansion and alias cycle detection.

Python 3.13+.
"""

from .aliases import resolve_aliases
from .graph import AliasReference, alias_dependencies, detect_cycles, find_alias_cycles

__all__ = [
    "AliasReference",
    "alias_dependencies",
    "detect_cycles",
    "find_alias_cycles",
    "resolve_aliases",
]
