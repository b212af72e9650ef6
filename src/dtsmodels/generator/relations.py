# Copyright 2026 dtsmodels Contributors
# SPDX-License-Identifier: Apache-2.0

"""Classification of fields as forward relations, reverse (alias) relations or neither.

Relation records are indexed once per run:

* **Forward** relations are keyed by ``(collection, field)`` of the field that
  holds the foreign key. The field resolves to ``Related | Related["<fk>"]``
  when the relation names a physical key column, otherwise to
  ``Related | <scalar type of the field>``.

* **Reverse** relations are keyed by ``(meta.one_collection, meta.one_field)``.
  The alias field on the "one" side resolves to ``Related[]`` where
  ``Related`` is the "many" collection.

A relation whose target is the owning collection itself needs no import.
"""

from __future__ import annotations

from dtsmodels.generator.errors import AmbiguousRelationError
from dtsmodels.generator.naming import class_name
from dtsmodels.generator.resolution import Resolution, import_statement
from dtsmodels.generator.scalars import scalar_type
from dtsmodels.model.catalog import CollectionDef, FieldDef, RelationDef, SchemaCatalog

# ###############
# Public Interface
# ###############


class RelationIndex:
    """Constant-time lookup of relation records by forward and reverse field."""

    def __init__(self, catalog: SchemaCatalog) -> None:
        self._catalog = catalog
        self._forward: dict[tuple[str, str], RelationDef] = {}
        self._reverse: dict[tuple[str, str], RelationDef] = {}
        for relation in catalog.relations:
            self._forward.setdefault((relation.collection, relation.field), relation)
            meta = relation.meta
            if meta is not None and meta.one_collection and meta.one_field:
                self._reverse.setdefault((meta.one_collection, meta.one_field), relation)

    def forward(self, collection: str, field: str) -> RelationDef | None:
        """Return the relation whose foreign key is stored in *collection*.*field*."""
        return self._forward.get((collection, field))

    def reverse(self, collection: str, field: str) -> RelationDef | None:
        """Return the relation whose "one" side is the alias *collection*.*field*."""
        return self._reverse.get((collection, field))

    def resolve_forward(self, field: FieldDef, collection: CollectionDef) -> Resolution | None:
        """Resolve *field* as a many-to-one relation, or return None if it is not one.

        Raises:
            AmbiguousRelationError: If the relation targets an unknown collection.
            UnsupportedFieldTypeError: If there is no key column and the field
                type itself cannot be mapped.
        """
        relation = self.forward(collection.collection, field.field)
        if relation is None:
            return None

        target = self._target_name(relation.related_collection, relation)
        fk_column = relation.foreign_key_column
        if fk_column:
            key_type = f'{target}["{fk_column}"]'
        else:
            key_type = scalar_type(field)
        return self._resolution(f"{target} | {key_type}", target, collection)

    def resolve_alias(self, field: FieldDef, collection: CollectionDef) -> Resolution | None:
        """Resolve alias *field* as a one-to-many relation, or return None if it is not one.

        Raises:
            AmbiguousRelationError: If the relation has no "many" side or it
                names an unknown collection.
        """
        relation = self.reverse(collection.collection, field.field)
        if relation is None:
            return None

        many_collection = relation.meta.many_collection if relation.meta else None
        target = self._target_name(many_collection, relation)
        return self._resolution(f"{target}[]", target, collection)

    def _target_name(self, related: str | None, relation: RelationDef) -> str:
        if not related:
            raise AmbiguousRelationError(
                f"Relation on '{relation.collection}.{relation.field}' has no related collection"
            )
        if related not in self._catalog.collections:
            raise AmbiguousRelationError(
                f"Relation on '{relation.collection}.{relation.field}' targets unknown collection '{related}'"
            )
        return class_name(related)

    def _resolution(self, type_expr: str, target: str, collection: CollectionDef) -> Resolution:
        if target == class_name(collection.collection):
            return Resolution(type_expr)
        return Resolution(type_expr, (import_statement(target),))
