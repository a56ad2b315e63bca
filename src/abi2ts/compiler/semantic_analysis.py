# Copyright 2026 abi2ts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Semantic analysis for parsed ABI documents.

Reports questionable but non-fatal declarations: duplicate names, names
declared in more than one namespace, duplicate field names, and actions or
tables referring to types that do not exist. Problems that make generation
impossible (unknown field types, missing bases, cycles) are raised by the
transform itself and are not repeated here.
"""

from __future__ import annotations

from dataclasses import dataclass

from abi2ts.compiler.emitter import effective_fields, index_structs
from abi2ts.compiler.errors import TransformError
from abi2ts.model.document import AbiDocument

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class SemanticWarning:
    """A questionable declaration detected during semantic analysis.

    Attributes:
        message: Human-readable description of the warning.
    """

    message: str


def analyze(document: AbiDocument) -> list[SemanticWarning]:
    """Perform semantic analysis on a parsed ABI document.

    Checks performed:
    - Duplicate alias, struct, and variant names.
    - Names declared as more than one of alias, struct, and variant.
    - Duplicate field names within the effective fields of each struct.
    - Action and table types that name neither a struct nor an alias.

    Args:
        document: The parsed document to analyze.

    Returns:
        A list of :class:`SemanticWarning` instances. An empty list means no
        issues were found.
    """
    warnings: list[SemanticWarning] = []
    warnings.extend(_check_top_level_duplicates(document))
    warnings.extend(_check_namespace_conflicts(document))
    warnings.extend(_check_struct_fields(document))
    warnings.extend(_check_row_types(document))
    return warnings


# ################
# Implementation
# ################


def _check_duplicate_names(names: list[str], fmt: str) -> list[SemanticWarning]:
    """Return a SemanticWarning for each name that appears more than once.

    Only one warning per unique duplicate name is emitted. *fmt* must contain
    a single ``{}`` placeholder that will be filled with the duplicate name.
    """
    seen: set[str] = set()
    reported: set[str] = set()
    warnings: list[SemanticWarning] = []
    for name in names:
        if name in seen:
            if name not in reported:
                warnings.append(SemanticWarning(fmt.format(name)))
                reported.add(name)
        else:
            seen.add(name)
    return warnings


def _check_top_level_duplicates(document: AbiDocument) -> list[SemanticWarning]:
    warnings: list[SemanticWarning] = []
    warnings.extend(
        _check_duplicate_names(
            [t.new_type_name for t in document.types],
            "Duplicate type alias '{}'; the first declaration is used",
        )
    )
    warnings.extend(
        _check_duplicate_names(
            [s.name for s in document.structs],
            "Duplicate struct name '{}'",
        )
    )
    warnings.extend(
        _check_duplicate_names(
            [v.name for v in document.variants],
            "Duplicate variant name '{}'",
        )
    )
    return warnings


def _check_namespace_conflicts(document: AbiDocument) -> list[SemanticWarning]:
    """Flag names that are declared as more than one kind of type."""
    alias_names = {t.new_type_name for t in document.types}
    struct_names = {s.name for s in document.structs}
    variant_names = {v.name for v in document.variants}

    warnings: list[SemanticWarning] = []
    # Aliases shadow structs and variants during type resolution.
    for name in sorted(alias_names & (struct_names | variant_names)):
        warnings.append(SemanticWarning(f"Type alias '{name}' shadows a struct or variant of the same name"))
    for name in sorted(struct_names & variant_names):
        warnings.append(SemanticWarning(f"Name '{name}' is declared as both a struct and a variant"))
    return warnings


def _check_struct_fields(document: AbiDocument) -> list[SemanticWarning]:
    warnings: list[SemanticWarning] = []
    structs = index_structs(document)
    for struct in document.structs:
        try:
            fields = effective_fields(document, struct, structs)
        except TransformError:
            # Broken base chains are fatal and reported by the transform.
            continue
        warnings.extend(
            _check_duplicate_names(
                [f.name for f in fields],
                f"Duplicate field name '{{}}' in struct '{struct.name}'",
            )
        )
    return warnings


def _check_row_types(document: AbiDocument) -> list[SemanticWarning]:
    """Check that actions and tables refer to declared structs or aliases."""
    known = {s.name for s in document.structs} | {t.new_type_name for t in document.types}

    warnings: list[SemanticWarning] = []
    for action in document.actions:
        if action.type not in known:
            warnings.append(SemanticWarning(f"Action '{action.name}' refers to unknown type '{action.type}'"))
    for table in document.tables:
        if table.type not in known:
            warnings.append(SemanticWarning(f"Table '{table.name}' refers to unknown type '{table.type}'"))
    return warnings
