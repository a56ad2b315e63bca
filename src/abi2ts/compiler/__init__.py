# Copyright 2026 abi2ts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Generation pipeline for ABI documents: loading, type resolution, and emission."""

from abi2ts.compiler.emitter import effective_fields, index_structs, render_type, transform
from abi2ts.compiler.errors import (
    Abi2TsError,
    CyclicAliasError,
    InheritanceCycleError,
    MalformedDocumentError,
    MalformedTypeError,
    MissingBaseError,
    TransformError,
    UnknownTypeError,
)
from abi2ts.compiler.loader import load_document, read_document
from abi2ts.compiler.resolver import TypeResolver, resolve_type
from abi2ts.compiler.semantic_analysis import SemanticWarning, analyze

__all__ = [
    "transform",
    "effective_fields",
    "index_structs",
    "render_type",
    "load_document",
    "read_document",
    "TypeResolver",
    "resolve_type",
    "analyze",
    "SemanticWarning",
    "Abi2TsError",
    "MalformedDocumentError",
    "TransformError",
    "MalformedTypeError",
    "UnknownTypeError",
    "CyclicAliasError",
    "MissingBaseError",
    "InheritanceCycleError",
]
