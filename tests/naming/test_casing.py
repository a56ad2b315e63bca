# Copyright 2026 abi2ts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for identifier casing transforms."""

import pytest

from abi2ts.naming import (
    NamingConvention,
    any_to_snake,
    formatter_for,
    make_type_formatter,
    snake_to_camel,
    snake_to_pascal,
)

# ###############
# snake_to_pascal
# ###############


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("transfer", "Transfer"),
        ("permission_level", "PermissionLevel"),
        ("set_abi_v2", "SetAbiV2"),
        ("_leading", "_Leading"),
        ("trailing_", "Trailing_"),
        ("double__underscore", "Double_Underscore"),
        ("", "_"),
        ("already_Upper", "AlreadyUpper"),
    ],
)
def test_snake_to_pascal(name: str, expected: str) -> None:
    assert snake_to_pascal(name) == expected


# ###############
# snake_to_camel
# ###############


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("transfer", "transfer"),
        ("permission_level", "permissionLevel"),
        ("block_timestamp_type", "blockTimestampType"),
        ("_leading", "_Leading"),
        ("", "_"),
    ],
)
def test_snake_to_camel(name: str, expected: str) -> None:
    assert snake_to_camel(name) == expected


# ###############
# any_to_snake
# ###############


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("transfer", "transfer"),
        ("permissionLevel", "permission_level"),
        ("PermissionLevel", "permission_level"),
        ("HTTPServer", "h_t_t_p_server"),
        ("already_snake", "already_snake"),
        ("", ""),
    ],
)
def test_any_to_snake(name: str, expected: str) -> None:
    assert any_to_snake(name) == expected


# ###############
# Properties
# ###############


@pytest.mark.parametrize("name", ["Transfer", "PermissionLevel", "SetAbiV2"])
def test_pascal_is_idempotent(name: str) -> None:
    assert snake_to_pascal(snake_to_pascal(name)) == snake_to_pascal(name) == name


@pytest.mark.parametrize("name", ["transfer", "permissionLevel", "blockTimestampType"])
def test_camel_is_idempotent(name: str) -> None:
    assert snake_to_camel(snake_to_camel(name)) == snake_to_camel(name) == name


@pytest.mark.parametrize("name", ["transfer", "permission_level", "block_timestamp_type"])
def test_snake_is_idempotent(name: str) -> None:
    assert any_to_snake(any_to_snake(name)) == any_to_snake(name) == name


@pytest.mark.parametrize("name", ["transfer", "myFieldName", "parseHTTP", "a1B", "quantityV2"])
def test_camel_round_trip(name: str) -> None:
    assert snake_to_camel(any_to_snake(name)) == name


# ###############
# Formatters
# ###############


def test_formatter_for_each_convention() -> None:
    assert formatter_for(NamingConvention.PASCAL)("token_stats") == "TokenStats"
    assert formatter_for(NamingConvention.CAMEL)("token_stats") == "tokenStats"
    assert formatter_for(NamingConvention.SNAKE)("tokenStats") == "token_stats"


def test_make_type_formatter_defaults_to_pascal() -> None:
    assert make_type_formatter()("token_stats") == "TokenStats"


def test_prefix_is_prepended_after_casing() -> None:
    fmt = make_type_formatter(NamingConvention.CAMEL, prefix="Eos")
    assert fmt("token_stats") == "EostokenStats"


def test_prefix_with_snake_case_is_not_recased() -> None:
    fmt = make_type_formatter(NamingConvention.SNAKE, prefix="Abi")
    assert fmt("transfer") == "Abitransfer"


def test_empty_prefix_returns_plain_formatter() -> None:
    assert make_type_formatter(NamingConvention.PASCAL, prefix="") is snake_to_pascal
