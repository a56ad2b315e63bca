# Copyright 2026 abi2ts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model for abi2ts: the ABI declaration document and resolved type descriptors."""

from abi2ts.model.document import (
    AbiDocument,
    Action,
    ErrorMessage,
    Extension,
    FieldDef,
    RicardianClause,
    Struct,
    Table,
    TypeAlias,
    Variant,
)
from abi2ts.model.types import (
    ArrayTypeRef,
    ExtensionTypeRef,
    NamedTypeRef,
    OptionalTypeRef,
    PrimitiveTypeRef,
    TypeRef,
)

__all__ = [
    # Resolved types
    "PrimitiveTypeRef",
    "OptionalTypeRef",
    "ArrayTypeRef",
    "ExtensionTypeRef",
    "NamedTypeRef",
    "TypeRef",
    # Document
    "TypeAlias",
    "FieldDef",
    "Struct",
    "Action",
    "Table",
    "RicardianClause",
    "ErrorMessage",
    "Extension",
    "Variant",
    "AbiDocument",
]
