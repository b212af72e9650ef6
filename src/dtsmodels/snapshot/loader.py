# Copyright 2026 dtsmodels Contributors
# SPDX-License-Identifier: Apache-2.0

"""Loading of schema snapshots into a :class:`~dtsmodels.model.catalog.SchemaCatalog`.

A snapshot is the document written by ``directus schema snapshot``: top-level
``collections``, ``fields`` and ``relations`` lists, stored as YAML or JSON.
Collections without a ``schema`` entry are folders and are skipped. Fields are
attached to their collection in document order; the ``meta.options.choices``
of each field are served by :class:`SnapshotMetadataProvider`.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic import Field as _Field

from dtsmodels.model.catalog import (
    Choice,
    CollectionDef,
    FieldDef,
    FieldMetadata,
    RelationDef,
    SchemaCatalog,
)

# ###############
# Public Interface
# ###############


class SnapshotError(Exception):
    """Raised when a schema snapshot cannot be read or is invalid."""


class SnapshotMetadataProvider:
    """Metadata provider backed by the field metadata of a snapshot."""

    def __init__(self, metadata: dict[tuple[str, str], FieldMetadata] | None = None) -> None:
        self._metadata = dict(metadata or {})

    def read_field_metadata(self, collection: str, field: str) -> FieldMetadata | None:
        """Return the metadata of *collection*.*field*, or None if the snapshot has none."""
        return self._metadata.get((collection, field))


def load_snapshot(path: Path) -> tuple[SchemaCatalog, SnapshotMetadataProvider]:
    """Load a schema snapshot file.

    Files ending in ``.json`` are parsed as JSON, everything else as YAML.

    Args:
        path: Path to the snapshot file.

    Returns:
        The schema catalog and a metadata provider for its fields.

    Raises:
        SnapshotError: If the file cannot be read, cannot be parsed, or does
            not have the expected structure.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise SnapshotError(f"Schema snapshot not found: {path}") from None
    except OSError as exc:
        raise SnapshotError(f"Cannot read schema snapshot '{path}': {exc}") from exc

    if path.suffix.lower() == ".json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise SnapshotError(f"Invalid JSON in schema snapshot '{path}': {exc}") from exc
    else:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise SnapshotError(f"Invalid YAML in schema snapshot '{path}': {exc}") from exc

    return parse_snapshot(data, source_label=str(path))


def parse_snapshot(data: Any, source_label: str = "<snapshot>") -> tuple[SchemaCatalog, SnapshotMetadataProvider]:
    """Build a catalog and metadata provider from an already parsed snapshot document.

    Raises:
        SnapshotError: If *data* does not have the expected structure.
    """
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise SnapshotError(f"{source_label}: schema snapshot must be a mapping")

    try:
        snapshot = _Snapshot.model_validate(data)
    except ValidationError as exc:
        raise SnapshotError(f"Invalid schema snapshot '{source_label}': {exc}") from exc

    fields_by_collection: dict[str, dict[str, FieldDef]] = {}
    metadata: dict[tuple[str, str], FieldMetadata] = {}
    for raw in snapshot.fields:
        fields_by_collection.setdefault(raw.collection, {})[raw.field] = _field_def(raw)
        field_metadata = _field_metadata(raw, source_label)
        if field_metadata is not None:
            metadata[(raw.collection, raw.field)] = field_metadata

    collections: dict[str, CollectionDef] = {}
    for raw_collection in snapshot.collections:
        if raw_collection.schema_ is None:
            continue
        name = raw_collection.collection
        collections[name] = CollectionDef(collection=name, fields=fields_by_collection.get(name, {}))

    return SchemaCatalog(collections=collections, relations=snapshot.relations), SnapshotMetadataProvider(metadata)


# ################
# Implementation
# ################


class _SnapshotCollection(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    collection: str
    schema_: dict[str, Any] | None = _Field(default=None, alias="schema")


class _SnapshotField(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    collection: str
    field: str
    type: str = "unknown"
    meta: dict[str, Any] | None = None
    schema_: dict[str, Any] | None = _Field(default=None, alias="schema")


class _Snapshot(BaseModel):
    model_config = ConfigDict(extra="ignore")

    collections: list[_SnapshotCollection] = _Field(default_factory=list)
    fields: list[_SnapshotField] = _Field(default_factory=list)
    relations: list[RelationDef] = _Field(default_factory=list)


def _field_def(raw: _SnapshotField) -> FieldDef:
    """Convert a snapshot field entry into a FieldDef.

    Fields without a physical column (aliases) are nullable, matching the
    schema overview of the data platform.
    """
    meta = raw.meta or {}
    column = raw.schema_
    return FieldDef(
        field=raw.field,
        type=raw.type,
        nullable=bool(column.get("is_nullable", True)) if column is not None else True,
        note=meta.get("note"),
        db_type=column.get("data_type") if column is not None else None,
    )


def _field_metadata(raw: _SnapshotField, source_label: str) -> FieldMetadata | None:
    """Return the choice metadata of a snapshot field, or None when it has no options."""
    options = (raw.meta or {}).get("options")
    if not isinstance(options, dict) or "choices" not in options:
        return None
    raw_choices = options["choices"]
    if raw_choices is None:
        return FieldMetadata(collection=raw.collection, field=raw.field)
    try:
        choices = [Choice.model_validate(choice) for choice in raw_choices]
    except (TypeError, ValidationError) as exc:
        raise SnapshotError(f"{source_label}: invalid choices for '{raw.collection}.{raw.field}': {exc}") from exc
    return FieldMetadata(collection=raw.collection, field=raw.field, choices=choices)
