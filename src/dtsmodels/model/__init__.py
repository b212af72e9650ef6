# Copyright 2026 dtsmodels Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema catalog model (collections, fields, relations, field metadata)."""

from dtsmodels.model.catalog import (
    Choice,
    CollectionDef,
    FieldDef,
    FieldMetadata,
    FieldType,
    RelationDef,
    RelationMeta,
    RelationSchema,
    SchemaCatalog,
)

__all__ = [
    "FieldType",
    "FieldDef",
    "CollectionDef",
    "RelationSchema",
    "RelationMeta",
    "RelationDef",
    "Choice",
    "FieldMetadata",
    "SchemaCatalog",
]
