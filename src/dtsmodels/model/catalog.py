# Copyright 2026 dtsmodels Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema catalog model: collections, fields, relations and field metadata."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class FieldType(Enum):
    """Field type kinds known to the schema catalog."""

    ALIAS = "alias"
    BIG_INTEGER = "bigInteger"
    BOOLEAN = "boolean"
    DATE = "date"
    DATETIME = "dateTime"
    DECIMAL = "decimal"
    FLOAT = "float"
    INTEGER = "integer"
    JSON = "json"
    STRING = "string"
    TEXT = "text"
    TIME = "time"
    TIMESTAMP = "timestamp"
    BINARY = "binary"
    UUID = "uuid"
    HASH = "hash"
    CSV = "csv"
    GEOMETRY = "geometry"
    GEOMETRY_POINT = "geometry.Point"
    GEOMETRY_LINESTRING = "geometry.LineString"
    GEOMETRY_POLYGON = "geometry.Polygon"
    GEOMETRY_MULTIPOINT = "geometry.MultiPoint"
    GEOMETRY_MULTILINESTRING = "geometry.MultiLineString"
    GEOMETRY_MULTIPOLYGON = "geometry.MultiPolygon"
    UNKNOWN = "unknown"


class FieldDef(BaseModel):
    """A single field of a collection, physical or virtual (alias).

    ``type`` is kept as a plain string so that kinds unknown to
    :class:`FieldType` still load and can be reported per field.
    """

    model_config = ConfigDict(frozen=True)

    field: str
    type: str
    nullable: bool = True
    note: str | None = None
    db_type: str | None = None

    @property
    def is_alias(self) -> bool:
        """Return True if the field has no physical column."""
        return self.type == FieldType.ALIAS.value


class CollectionDef(BaseModel):
    """A named collection and its fields in catalog order."""

    model_config = ConfigDict(frozen=True)

    collection: str
    fields: dict[str, FieldDef] = _Field(default_factory=dict)


class RelationSchema(BaseModel):
    """Physical side of a relation."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    foreign_key_column: str | None = None


class RelationMeta(BaseModel):
    """One-to-many bookkeeping of a relation."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    one_collection: str | None = None
    one_field: str | None = None
    many_collection: str | None = None
    many_field: str | None = None


class RelationDef(BaseModel):
    """A relation record, shared by the forward field and the reverse alias field."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    collection: str
    field: str
    related_collection: str | None = None
    schema_: RelationSchema | None = _Field(default=None, alias="schema")
    meta: RelationMeta | None = None

    @property
    def foreign_key_column(self) -> str | None:
        """Return the physical key column on the related collection, if any."""
        return self.schema_.foreign_key_column if self.schema_ else None


class Choice(BaseModel):
    """One permitted value of an enumerated field."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    value: Any
    label: str | None = _Field(default=None, validation_alias=AliasChoices("label", "text"))


class FieldMetadata(BaseModel):
    """Interface metadata for a field, as returned by a metadata provider."""

    model_config = ConfigDict(frozen=True)

    collection: str
    field: str
    choices: list[Choice] | None = None


class SchemaCatalog(BaseModel):
    """Immutable snapshot of every collection and relation for one generation run."""

    model_config = ConfigDict(frozen=True)

    collections: dict[str, CollectionDef] = _Field(default_factory=dict)
    relations: list[RelationDef] = _Field(default_factory=list)

    def without(self, names: list[str]) -> SchemaCatalog:
        """Return a copy of the catalog with the named collections removed."""
        excluded = set(names)
        return SchemaCatalog(
            collections={name: c for name, c in self.collections.items() if name not in excluded},
            relations=self.relations,
        )
