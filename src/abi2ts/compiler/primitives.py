# Copyright 2026 abi2ts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Built-in ABI scalar types and their TypeScript equivalents.

Integers up to 32 bits and 32/64-bit floats fit a JavaScript number. Wider
integers, ``float128`` and every scalar whose JSON form is a string (names,
symbols, assets, checksums, keys, timestamps) map to ``string``.
"""

# ###############
# Public Interface
# ###############

ABI_TO_TS_MAP: dict[str, str] = {
    # Boolean
    "bool": "boolean",
    # Integers that fit a JavaScript number
    "int8": "number",
    "uint8": "number",
    "int16": "number",
    "uint16": "number",
    "int32": "number",
    "uint32": "number",
    "varint32": "number",
    "varuint32": "number",
    # Wide integers are serialized as strings
    "int64": "string",
    "uint64": "string",
    "int128": "string",
    "uint128": "string",
    # Floating point
    "float32": "number",
    "float64": "number",
    "float128": "string",
    # Time
    "time_point": "string",
    "time_point_sec": "string",
    "block_timestamp_type": "string",
    # Strings and blobs
    "name": "string",
    "bytes": "string",
    "string": "string",
    # Hashes and keys
    "checksum160": "string",
    "checksum256": "string",
    "checksum512": "string",
    "public_key": "string",
    "signature": "string",
    # Tokens
    "symbol": "string",
    "symbol_code": "string",
    "asset": "string",
    "extended_asset": "{quantity: string, contract: string}",
}

PRIMITIVE_TYPES: frozenset[str] = frozenset(ABI_TO_TS_MAP)


def is_primitive(name: str) -> bool:
    """Return True if *name* is a built-in ABI scalar type."""
    return name in ABI_TO_TS_MAP


def primitive_to_ts(name: str) -> str:
    """Return the TypeScript type for the built-in ABI scalar *name*.

    Raises:
        KeyError: If *name* is not a built-in scalar.
    """
    return ABI_TO_TS_MAP[name]
