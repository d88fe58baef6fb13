"""Shared constants for keytranslate.

Centralizes selector names, placeholder names and markers used by both the
runtime resolver and the alias pre-processing pass. Placing them here avoids
circular imports between the runtime and analysis packages.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Selectors
    "CATCH_ALL_SELECTOR",
    "DEFAULT_SELECTOR",
    # Placeholders
    "COUNT_PLACEHOLDER",
    # Missing translations
    "DEBUG_MARKER",
]

# ============================================================================
# SELECTORS
# ============================================================================

# Catch-all selector. Outranks DEFAULT_SELECTOR so an explicit catch-all can
# always override a generic default message.
CATCH_ALL_SELECTOR: str = "*"

# Default plural form, used when no exact or pluralize-derived form exists.
DEFAULT_SELECTOR: str = "n"

# ============================================================================
# PLACEHOLDERS
# ============================================================================

# Name under which the count is exposed to placeholder substitution: "{n} Hits"
COUNT_PLACEHOLDER: str = "n"

# ============================================================================
# MISSING TRANSLATIONS
# ============================================================================

# Debug output wraps the missing key: "@@key@@" / "@@key.selector@@"
DEBUG_MARKER: str = "@@"
