# Copyright 2026 dtsmodels Contributors
# SPDX-License-Identifier: Apache-2.0

"""Emission of TypeScript declaration units for collections and the collection index.

Each field is resolved by trying, in order:

1. the reverse relation (alias fields only) or the forward relation,
2. the configured choices of the field,
3. the scalar type mapping.

Any :class:`~dtsmodels.generator.errors.ResolutionError` types the field as
``never`` and records a :class:`FieldDiagnostic`; the remaining fields and
collections are generated as usual.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from dtsmodels.generator.choices import MetadataProvider, resolve_choices
from dtsmodels.generator.errors import ResolutionError
from dtsmodels.generator.naming import class_name
from dtsmodels.generator.relations import RelationIndex
from dtsmodels.generator.resolution import Resolution, import_statement
from dtsmodels.generator.scalars import scalar_type
from dtsmodels.model.catalog import CollectionDef, FieldDef, SchemaCatalog

# ###############
# Public Interface
# ###############

NEVER_TYPE = "never"


@dataclass(frozen=True)
class FieldDiagnostic:
    """A field whose type could not be determined.

    Attributes:
        collection: Name of the collection owning the field.
        field: Name of the field.
        error: The error that caused the fallback to ``never``.
    """

    collection: str
    field: str
    error: ResolutionError

    @property
    def message(self) -> str:
        """Return a human-readable description of the diagnostic."""
        return (
            f'Failed to get the type for {self.collection}.{self.field}. Setting to "{NEVER_TYPE}". ({self.error})'
        )


@dataclass
class ModelUnit:
    """The generated declaration unit of one collection.

    Attributes:
        name: Interface name, also the base name of the output file.
        collection: Name of the source collection.
        source: Complete declaration text, imports included.
        imports: Deduplicated import statements in first-seen order.
        diagnostics: Fields that fell back to ``never``.
    """

    name: str
    collection: str
    source: str
    imports: list[str] = field(default_factory=list)
    diagnostics: list[FieldDiagnostic] = field(default_factory=list)


def resolve_field(
    field_def: FieldDef,
    collection: CollectionDef,
    relations: RelationIndex,
    metadata: MetadataProvider,
) -> Resolution:
    """Resolve the TypeScript type of one field, including nullability.

    Raises:
        ResolutionError: If no strategy can determine the type.
    """
    if field_def.is_alias:
        resolution = relations.resolve_alias(field_def, collection)
    else:
        resolution = relations.resolve_forward(field_def, collection)
    if resolution is None:
        resolution = resolve_choices(metadata, collection.collection, field_def.field)
    if resolution is None:
        resolution = Resolution(scalar_type(field_def))

    if field_def.nullable:
        return Resolution(f"{resolution.type_expr} | null", resolution.imports)
    return resolution


def generate_model(
    collection: CollectionDef,
    relations: RelationIndex,
    metadata: MetadataProvider,
) -> ModelUnit:
    """Generate the declaration unit of *collection*."""
    name = class_name(collection.collection)
    imports: list[str] = []
    diagnostics: list[FieldDiagnostic] = []
    members: list[str] = []

    for field_def in collection.fields.values():
        try:
            resolution = resolve_field(field_def, collection, relations, metadata)
        except ResolutionError as exc:
            diagnostics.append(FieldDiagnostic(collection=collection.collection, field=field_def.field, error=exc))
            type_expr = NEVER_TYPE
        else:
            type_expr = resolution.type_expr
            for statement in resolution.imports:
                if statement not in imports:
                    imports.append(statement)
        members.append(_member(field_def, type_expr))

    source = f"export interface {name} {{\n" + "".join(members) + "}\n"
    if imports:
        source = "".join(f"{statement}\n" for statement in imports) + "\n" + source

    return ModelUnit(
        name=name,
        collection=collection.collection,
        source=source,
        imports=imports,
        diagnostics=diagnostics,
    )


def generate_index(catalog: SchemaCatalog) -> str:
    """Generate the index unit mapping every collection name to its interface."""
    names = [(collection, class_name(collection)) for collection in catalog.collections]
    lines = [import_statement(name) for _, name in names]
    lines.append("")
    lines.append("export interface Collections {")
    lines.extend(f"  {collection}: {name};" for collection, name in names)
    lines.append("}")
    return "\n".join(lines) + "\n"


# ################
# Implementation
# ################


def _member(field_def: FieldDef, type_expr: str) -> str:
    """Return the documented member declaration of one field."""
    return (
        "\n"
        "  /**\n"
        f"   * {_doc_text(field_def.note)}\n"
        "   *\n"
        f"   * Type in directus: {field_def.type}\n"
        f"   * Type in database: {field_def.db_type or 'no column'}\n"
        "   */\n"
        f"  {field_def.field}: {type_expr};\n"
    )


def _doc_text(note: str | None) -> str:
    """Return *note* made safe for a block comment, or the placeholder text."""
    if not note:
        return "No description."
    return note.replace("*/", "*\\/").replace("\n", "\n   * ")
