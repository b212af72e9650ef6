# Copyright 2026 dtsmodels Contributors
# SPDX-License-Identifier: Apache-2.0

"""Mapping of primitive field types to TypeScript types."""

from __future__ import annotations

from dtsmodels.generator.errors import UnsupportedFieldTypeError
from dtsmodels.model.catalog import FieldDef, FieldType

# ###############
# Public Interface
# ###############


def scalar_type(field: FieldDef) -> str:
    """Return the TypeScript type for a non-relational field.

    Raises:
        UnsupportedFieldTypeError: If the field type is an alias, binary,
            geometry or unknown kind, none of which has a lossless
            structural representation.
    """
    try:
        kind = FieldType(field.type)
    except ValueError:
        raise UnsupportedFieldTypeError(field.type) from None

    ts_type = _SCALAR_TYPES.get(kind)
    if ts_type is None:
        raise UnsupportedFieldTypeError(field.type)
    return ts_type


# ################
# Implementation
# ################

_SCALAR_TYPES: dict[FieldType, str] = {
    FieldType.BOOLEAN: "boolean",
    FieldType.INTEGER: "number",
    FieldType.FLOAT: "number",
    FieldType.DECIMAL: "number",
    FieldType.BIG_INTEGER: "number",
    FieldType.DATETIME: "string",
    FieldType.DATE: "string",
    FieldType.TIME: "string",
    FieldType.TIMESTAMP: "string",
    FieldType.TEXT: "string",
    FieldType.STRING: "string",
    FieldType.UUID: "string",
    FieldType.HASH: "string",
    FieldType.JSON: "any",
    FieldType.CSV: "string[]",
}
