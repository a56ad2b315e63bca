# Copyright 2026 abi2ts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Integration tests running the full load, analyze, and transform pipeline."""

from pathlib import Path

from abi2ts.compiler import analyze, read_document, transform
from abi2ts.compiler.loader import load_document
from abi2ts.config import GeneratorSettings
from abi2ts.naming import NamingConvention

_DATA_DIR = Path(__file__).parent.parent / "data"

_SYSTEM_ABI = """
{
    "version": "eosio::abi/1.2",
    "types": [
        {"new_type_name": "block_signing_authority", "type": "variant_block_signing_authority_v0"},
        {"new_type_name": "weight_type", "type": "uint16"}
    ],
    "structs": [
        {"name": "key_weight", "base": "", "fields": [
            {"name": "key", "type": "public_key"},
            {"name": "weight", "type": "weight_type"}
        ]},
        {"name": "block_signing_authority_v0", "base": "", "fields": [
            {"name": "threshold", "type": "uint32"},
            {"name": "keys", "type": "key_weight[]"}
        ]},
        {"name": "producer_info", "base": "", "fields": [
            {"name": "owner", "type": "name"},
            {"name": "total_votes", "type": "float64"},
            {"name": "is_active", "type": "bool"},
            {"name": "producer_authority", "type": "block_signing_authority$"}
        ]},
        {"name": "producer_info_ext", "base": "producer_info", "fields": [
            {"name": "last_claim_time", "type": "time_point?"}
        ]}
    ],
    "variants": [
        {"name": "variant_block_signing_authority_v0", "types": ["block_signing_authority_v0"]}
    ],
    "tables": [
        {"name": "producers", "type": "producer_info", "index_type": "i64", "key_names": [], "key_types": []}
    ]
}
"""


def test_token_contract() -> None:
    document = read_document(_DATA_DIR / "eosio.token.abi")
    lines = transform(document, GeneratorSettings().to_config())

    interfaces = [line for line in lines if line.startswith("interface ")]
    assert interfaces == [
        "interface Account {",
        "interface Close {",
        "interface Create {",
        "interface CurrencyStats {",
        "interface Issue {",
        "interface Open {",
        "interface Retire {",
        "interface Transfer {",
    ]
    assert "    MaxSupply: string" in lines
    assert lines.count("") == len(interfaces) - 1
    assert analyze(document) == []


def test_token_contract_export_camel() -> None:
    document = read_document(_DATA_DIR / "eosio.token.abi")
    config = GeneratorSettings(naming_convention=NamingConvention.CAMEL, export=True, indent_width=2).to_config()
    lines = transform(document, config)

    assert lines[0] == "export interface account {"
    assert "  ramPayer: string" in lines
    assert "export interface currencyStats {" in lines


def test_system_contract_subset() -> None:
    document = load_document(_SYSTEM_ABI)
    lines = transform(document, GeneratorSettings(export=True).to_config())

    assert lines == [
        "export interface KeyWeight {",
        "    Key: string",
        "    Weight: number",
        "}",
        "",
        "export interface BlockSigningAuthorityV0 {",
        "    Threshold: number",
        "    Keys: KeyWeight[]",
        "}",
        "",
        "export interface ProducerInfo {",
        "    Owner: string",
        "    TotalVotes: number",
        "    IsActive: boolean",
        "    ProducerAuthority?: VariantBlockSigningAuthorityV0",
        "}",
        "",
        "export interface ProducerInfoExt {",
        "    Owner: string",
        "    TotalVotes: number",
        "    IsActive: boolean",
        "    ProducerAuthority?: VariantBlockSigningAuthorityV0",
        "    LastClaimTime?: string",
        "}",
        "",
        "export type VariantBlockSigningAuthorityV0 =",
        '    | ["block_signing_authority_v0", BlockSigningAuthorityV0]',
    ]
    assert analyze(document) == []
