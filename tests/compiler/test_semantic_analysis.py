# Copyright 2026 abi2ts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for the ABI semantic analysis module."""

import json
from typing import Any

from abi2ts.compiler.loader import load_document
from abi2ts.compiler.semantic_analysis import SemanticWarning, analyze

# ###############
# Test Helpers
# ###############


def _analyze(**declarations: Any) -> list[SemanticWarning]:
    """Build a document from keyword declarations and run semantic analysis."""
    return analyze(load_document(json.dumps({"version": "eosio::abi/1.1", **declarations})))


def _messages(warnings: list[SemanticWarning]) -> list[str]:
    return [w.message for w in warnings]


def _assert_clean(**declarations: Any) -> None:
    warnings = _analyze(**declarations)
    assert warnings == [], f"Expected no warnings but got: {_messages(warnings)}"


def _assert_warning(expected_fragment: str, **declarations: Any) -> None:
    messages = _messages(_analyze(**declarations))
    assert any(expected_fragment in m for m in messages), (
        f"Expected warning containing {expected_fragment!r} but got: {messages}"
    )


# ###############
# Clean Documents
# ###############


class TestCleanDocument:
    def test_empty_document(self) -> None:
        _assert_clean()

    def test_token_contract(self) -> None:
        _assert_clean(
            types=[{"new_type_name": "account_name", "type": "name"}],
            structs=[
                {"name": "account", "base": "", "fields": [{"name": "balance", "type": "asset"}]},
                {"name": "transfer", "base": "", "fields": [{"name": "from", "type": "account_name"}]},
            ],
            actions=[{"name": "transfer", "type": "transfer", "ricardian_contract": ""}],
            tables=[{"name": "accounts", "type": "account", "index_type": "i64", "key_names": [], "key_types": []}],
        )

    def test_action_type_may_be_alias(self) -> None:
        _assert_clean(
            types=[{"new_type_name": "args", "type": "payload"}],
            structs=[{"name": "payload", "fields": []}],
            actions=[{"name": "go", "type": "args"}],
        )

    def test_inherited_fields_without_duplicates(self) -> None:
        _assert_clean(
            structs=[
                {"name": "a", "fields": [{"name": "x", "type": "uint8"}]},
                {"name": "b", "base": "a", "fields": [{"name": "y", "type": "uint8"}]},
            ]
        )


# ###############
# Warnings
# ###############


class TestWarnings:
    def test_duplicate_struct(self) -> None:
        _assert_warning(
            "Duplicate struct name 'a'",
            structs=[{"name": "a", "fields": []}, {"name": "a", "fields": []}],
        )

    def test_duplicate_struct_reported_once(self) -> None:
        warnings = _analyze(structs=[{"name": "a", "fields": []}] * 3)
        assert _messages(warnings).count("Duplicate struct name 'a'") == 1

    def test_duplicate_variant(self) -> None:
        _assert_warning(
            "Duplicate variant name 'v'",
            variants=[{"name": "v", "types": []}, {"name": "v", "types": ["uint8"]}],
        )

    def test_duplicate_alias(self) -> None:
        _assert_warning(
            "Duplicate type alias 'x'",
            types=[{"new_type_name": "x", "type": "uint8"}, {"new_type_name": "x", "type": "name"}],
        )

    def test_alias_shadows_struct(self) -> None:
        _assert_warning(
            "Type alias 's' shadows",
            types=[{"new_type_name": "s", "type": "uint8"}],
            structs=[{"name": "s", "fields": []}],
        )

    def test_struct_and_variant_conflict(self) -> None:
        _assert_warning(
            "'x' is declared as both a struct and a variant",
            structs=[{"name": "x", "fields": []}],
            variants=[{"name": "x", "types": ["uint8"]}],
        )

    def test_duplicate_own_field(self) -> None:
        _assert_warning(
            "Duplicate field name 'x' in struct 's'",
            structs=[{"name": "s", "fields": [{"name": "x", "type": "uint8"}, {"name": "x", "type": "bool"}]}],
        )

    def test_field_duplicates_inherited_field(self) -> None:
        _assert_warning(
            "Duplicate field name 'x' in struct 'b'",
            structs=[
                {"name": "a", "fields": [{"name": "x", "type": "uint8"}]},
                {"name": "b", "base": "a", "fields": [{"name": "x", "type": "uint8"}]},
            ],
        )

    def test_action_with_unknown_type(self) -> None:
        _assert_warning(
            "Action 'go' refers to unknown type 'nothing'",
            actions=[{"name": "go", "type": "nothing"}],
        )

    def test_table_with_unknown_type(self) -> None:
        _assert_warning(
            "Table 'rows' refers to unknown type 'row'",
            tables=[{"name": "rows", "type": "row"}],
        )


def test_broken_base_chain_is_left_to_transform() -> None:
    """A missing base is fatal during transform, not a semantic warning."""
    warnings = _analyze(structs=[{"name": "b", "base": "missing", "fields": []}])
    assert warnings == []
