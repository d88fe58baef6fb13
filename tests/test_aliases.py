"""Tests for alias expansion (resolve_aliases).

Covers plain and nested aliases, subkey targeting, order independence, and
every failure class.
"""

import random
from typing import Any

import pytest
from hypothesis import given
from hypothesis import strategies as st

from keytranslate import (
    AliasDepthError,
    AliasError,
    CircularAliasError,
    MissingAliasSubkeyError,
    NonStringAliasError,
    UnknownAliasError,
    resolve_aliases,
)
from keytranslate.diagnostics import DiagnosticCode

from tests.strategies import acyclic_alias_tables

# ============================================================================
# UNIT TESTS - EXPANSION
# ============================================================================


class TestResolveAliasesBasic:
    """Successful expansion."""

    def test_simple(self) -> None:
        assert resolve_aliases({"A": "bar", "B": "foo {{A}} bar"}) == {
            "A": "bar",
            "B": "foo bar bar",
        }

    def test_nested(self) -> None:
        result = resolve_aliases({"A": "bar", "B": "foo {{A}} bar", "C": "< {{B}} >"})
        assert result == {"A": "bar", "B": "foo bar bar", "C": "< foo bar bar >"}

    def test_declaration_order_irrelevant(self) -> None:
        forward = resolve_aliases({"C": "< {{B}} >", "B": "foo {{A}} bar", "A": "bar"})
        backward = resolve_aliases({"A": "bar", "B": "foo {{A}} bar", "C": "< {{B}} >"})
        assert forward == backward

    def test_multiple_aliases_per_string(self) -> None:
        result = resolve_aliases({"A": "bar", "B": "foo {{A}} {{A}}", "C": "foo {{B}} {{A}}"})
        assert result == {"A": "bar", "B": "foo bar bar", "C": "foo foo bar bar bar"}

    def test_complex_nesting(self) -> None:
        result = resolve_aliases(
            {"A": "A", "B": "B{{A}}B", "C": "C{{A}}C", "D": "D{{A}}{{B}}{{C}}D"}
        )
        assert result == {"A": "A", "B": "BAB", "C": "CAC", "D": "DABABCACD"}

    def test_within_pluralizations(self) -> None:
        result = resolve_aliases(
            {"A": "bar", "B": {1: "1 {{A}} bar", 2: "2 {{A}} bar", "n": "n {{A}} bar"}}
        )
        assert result == {
            "A": "bar",
            "B": {1: "1 bar bar", 2: "2 bar bar", "n": "n bar bar"},
        }

    def test_within_subkeys(self) -> None:
        result = resolve_aliases({"A": "bar", "B": {"hi": "1 {{A}} bar", "ho": "2 {{A}} bar"}})
        assert result == {"A": "bar", "B": {"hi": "1 bar bar", "ho": "2 bar bar"}}

    def test_targeting_subkeys(self) -> None:
        result = resolve_aliases({"A": {"b": "bar"}, "B": "Foo {{A[b]}}", "C": "Foo {{A[b]}}"})
        assert result == {"A": {"b": "bar"}, "B": "Foo bar", "C": "Foo bar"}

    def test_pluralized_forms(self) -> None:
        """Integer selectors are reachable as [1]; placeholders survive."""
        result = resolve_aliases(
            {
                "A": {1: "1 bar", "n": "{n} bars"},
                "B": {1: "1 Foo {{A[1]}}", "n": "{n} Foo {{A[n]}}"},
            }
        )
        assert result == {
            "A": {1: "1 bar", "n": "{n} bars"},
            "B": {1: "1 Foo 1 bar", "n": "{n} Foo {n} bars"},
        }

    def test_subkey_ignored_on_plain_string_target(self) -> None:
        result = resolve_aliases({"A": "bar", "B": "Foo {{A[b]}}", "C": "Foo {{A[b]}}"})
        assert result == {"A": "bar", "B": "Foo bar", "C": "Foo bar"}

    def test_non_entry_values_copied(self) -> None:
        table: dict[str, Any] = {"num": 10, "lst": [1], "t": {"a": "x", "b": 3}}
        assert resolve_aliases(table) == table

    def test_single_braces_untouched(self) -> None:
        assert resolve_aliases({"A": "I like {thing}"}) == {"A": "I like {thing}"}

    @pytest.mark.parametrize(
        "table",
        [
            {"A": {"b": "leaf"}, "C": "{{A[b]}}", "A[b]": "plain"},
            {"A[b]": "plain", "A": {"b": "leaf"}, "C": "{{A[b]}}"},
        ],
    )
    def test_key_spelled_like_subkey_reference(self, table: dict[str, Any]) -> None:
        """A top-level key "A[b]" is a different entry than leaf b of A."""
        assert resolve_aliases(table) == {"A": {"b": "leaf"}, "C": "leaf", "A[b]": "plain"}

    def test_int_and_string_subkeys_stay_distinct(self) -> None:
        result = resolve_aliases({"C": "{{A[1]}}", "A": {1: "int", "1": "str"}})
        assert result == {"C": "str", "A": {1: "int", "1": "str"}}

    def test_alias_to_int_subkey(self) -> None:
        result = resolve_aliases({"A": {1: "one {{B}}"}, "B": "b", "C": "{{A[1]}} / {{A[1]}}"})
        assert result == {"A": {1: "one b"}, "B": "b", "C": "one b / one b"}

    def test_chain_deeper_than_recursion_limit(self) -> None:
        depth = 5000
        table = {f"k{i}": f"<{{{{k{i + 1}}}}}" for i in range(depth)}
        table[f"k{depth}"] = "end"
        result = resolve_aliases(table)
        assert result["k0"] == "<" * depth + "end"
        assert result[f"k{depth - 1}"] == "<end"


class TestResolveAliasesModes:
    """Pure vs. in-place invocation."""

    def test_input_not_mutated(self) -> None:
        table = {"A": "bar", "B": "{{A}}", "C": {"x": "{{A}}"}}
        resolve_aliases(table)
        assert table == {"A": "bar", "B": "{{A}}", "C": {"x": "{{A}}"}}

    def test_in_place(self) -> None:
        table: dict[str, Any] = {"A": "bar", "B": "{{A}}"}
        result = resolve_aliases(table, in_place=True)
        assert result is table
        assert table == {"A": "bar", "B": "bar"}

    def test_in_place_requires_mutable_mapping(self) -> None:
        from types import MappingProxyType

        with pytest.raises(TypeError, match="mutable mapping"):
            resolve_aliases(MappingProxyType({"A": "x"}), in_place=True)


# ============================================================================
# UNIT TESTS - FAILURES
# ============================================================================


class TestResolveAliasesErrors:
    """Broken aliases abort the pass."""

    def test_unknown_alias(self) -> None:
        with pytest.raises(UnknownAliasError, match='No translation for alias "B"') as exc_info:
            resolve_aliases({"A": "{{B}}"})
        assert exc_info.value.alias == "B"
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.ALIAS_NOT_FOUND
        assert exc_info.value.diagnostic.key == "A"

    def test_alias_to_non_translation_value_is_unknown(self) -> None:
        with pytest.raises(UnknownAliasError):
            resolve_aliases({"A": 42, "B": "{{A}}"})

    def test_circular_reference(self) -> None:
        with pytest.raises(CircularAliasError, match='Circular reference for "B" detected') as e:
            resolve_aliases({"A": "{{B}}", "B": "{{A}}"})
        assert e.value.diagnostic is not None
        assert e.value.diagnostic.alias_path == ("B", "A", "B")

    def test_self_reference(self) -> None:
        with pytest.raises(CircularAliasError) as exc_info:
            resolve_aliases({"A": "x {{A}}"})
        assert exc_info.value.alias == "A"

    def test_alias_to_leaf_table(self) -> None:
        with pytest.raises(NonStringAliasError, match="You can't alias objects"):
            resolve_aliases({"A": {1: "one"}, "B": "{{A}}"})

    def test_missing_subkey(self) -> None:
        with pytest.raises(
            MissingAliasSubkeyError, match=r'No translation for alias "A\[invalidSubkey\]"'
        ) as exc_info:
            resolve_aliases({"A": {"b": "bar"}, "B": "Foo {{A[invalidSubkey]}}"})
        assert exc_info.value.key == "A"
        assert exc_info.value.subkey == "invalidSubkey"
        # Missing subkeys are a kind of unknown alias
        assert isinstance(exc_info.value, UnknownAliasError)

    @pytest.mark.parametrize(
        ("table", "alias"),
        [
            ({"A": {"a": "{{B}}"}, "B": "Foo {{A[a]}}"}, "B"),
            ({"B": "Foo {{A[a]}}", "A": {"a": "{{B}}"}}, "A[a]"),
            ({"A": {"a": "{{B[b]}}"}, "B": {"b": "{{A[a]}}"}}, "B[b]"),
        ],
    )
    def test_circular_reference_in_subkeys(self, table: dict[str, Any], alias: str) -> None:
        """The error names the in-progress alias that was re-entered."""
        with pytest.raises(CircularAliasError) as exc_info:
            resolve_aliases(table)
        assert exc_info.value.alias == alias
        assert f'Circular reference for "{alias}" detected' in str(exc_info.value)

    def test_depth_limit(self) -> None:
        table = {f"k{i}": f"{{{{k{i + 1}}}}}" for i in range(20)}
        table["k20"] = "end"
        assert resolve_aliases(table)["k0"] == "end"
        assert resolve_aliases(table, max_depth=20)["k0"] == "end"
        with pytest.raises(AliasDepthError) as exc_info:
            resolve_aliases(table, max_depth=5)
        assert exc_info.value.alias == "k6"

    def test_all_errors_share_base(self) -> None:
        for table in ({"A": "{{B}}"}, {"A": "{{A}}"}, {"A": {}, "B": "{{A}}"}):
            with pytest.raises(AliasError):
                resolve_aliases(table)


# ============================================================================
# PROPERTY TESTS
# ============================================================================


class TestResolveAliasesProperties:
    """Order independence and fixpoint."""

    @given(table=acyclic_alias_tables(), seed=st.integers())
    def test_order_independent(self, table: dict[str, str], seed: int) -> None:
        keys = list(table)
        random.Random(seed).shuffle(keys)
        shuffled = {key: table[key] for key in keys}
        assert resolve_aliases(shuffled) == resolve_aliases(table)

    @given(table=acyclic_alias_tables())
    def test_idempotent(self, table: dict[str, str]) -> None:
        once = resolve_aliases(table)
        assert resolve_aliases(once) == once

    @given(table=acyclic_alias_tables())
    def test_no_aliases_left(self, table: dict[str, str]) -> None:
        for value in resolve_aliases(table).values():
            assert "{{" not in value
