# Copyright 2026 dtsmodels Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for forward and reverse relation classification."""

import pytest

from dtsmodels.generator.errors import AmbiguousRelationError, UnsupportedFieldTypeError
from dtsmodels.generator.relations import RelationIndex
from dtsmodels.model.catalog import (
    CollectionDef,
    FieldDef,
    RelationDef,
    RelationMeta,
    RelationSchema,
    SchemaCatalog,
)

# ###############
# Test Helpers
# ###############


def _collection(name: str, *fields: FieldDef) -> CollectionDef:
    return CollectionDef(collection=name, fields={f.field: f for f in fields})


def _m2o(collection: str, field: str, related: str, fk: str | None = "id") -> RelationDef:
    """Create a many-to-one relation with an optional key column."""
    return RelationDef(
        collection=collection,
        field=field,
        related_collection=related,
        schema_=RelationSchema(foreign_key_column=fk) if fk else None,
    )


def _o2m(many: str, many_field: str, one: str, one_field: str) -> RelationDef:
    """Create a relation whose "one" side exposes the alias *one*.*one_field*."""
    return RelationDef(
        collection=many,
        field=many_field,
        related_collection=one,
        schema_=RelationSchema(foreign_key_column="id"),
        meta=RelationMeta(
            one_collection=one,
            one_field=one_field,
            many_collection=many,
            many_field=many_field,
        ),
    )


_AUTHOR = FieldDef(field="author", type="uuid", db_type="uuid")
_ARTICLES = FieldDef(field="articles", type="alias")
_PARENT = FieldDef(field="parent", type="integer", db_type="integer")
_CHILDREN = FieldDef(field="children", type="alias")


def _catalog(*relations: RelationDef) -> SchemaCatalog:
    return SchemaCatalog(
        collections={
            "articles": _collection("articles", _AUTHOR),
            "users": _collection("users", _ARTICLES),
            "categories": _collection("categories", _PARENT, _CHILDREN),
        },
        relations=list(relations),
    )


# ###############
# Lookup
# ###############


def test_index_finds_forward_and_reverse_sides_of_one_record() -> None:
    """A single relation record is reachable from both of its fields."""
    relation = _o2m("articles", "author", "users", "articles")
    index = RelationIndex(_catalog(relation))

    assert index.forward("articles", "author") is relation
    assert index.reverse("users", "articles") is relation
    assert index.forward("users", "articles") is None
    assert index.reverse("articles", "author") is None


def test_reverse_lookup_requires_matching_one_field() -> None:
    """An alias is only matched by the relation that names it."""
    index = RelationIndex(_catalog(_o2m("articles", "author", "users", "articles")))
    assert index.reverse("users", "comments") is None


# ###############
# Forward Relations
# ###############


def test_forward_with_key_column() -> None:
    """With a key column, the field is the related object or its key."""
    index = RelationIndex(_catalog(_m2o("articles", "author", "users")))
    articles = _catalog().collections["articles"]

    resolution = index.resolve_forward(_AUTHOR, articles)

    assert resolution is not None
    assert resolution.type_expr == 'User | User["id"]'
    assert resolution.imports == ('import { User } from "./User";',)


def test_forward_without_key_column_uses_field_type() -> None:
    """Without a key column, the field's own scalar type is used."""
    index = RelationIndex(_catalog(_m2o("articles", "author", "users", fk=None)))
    articles = _catalog().collections["articles"]

    resolution = index.resolve_forward(_AUTHOR, articles)

    assert resolution is not None
    assert resolution.type_expr == "User | string"


def test_forward_without_key_column_and_unsupported_type() -> None:
    """A relation on an unmappable field without key column fails the field."""
    index = RelationIndex(_catalog(_m2o("articles", "author", "users", fk=None)))
    field = FieldDef(field="author", type="binary")

    with pytest.raises(UnsupportedFieldTypeError):
        index.resolve_forward(field, _catalog().collections["articles"])


def test_forward_self_reference_has_no_import() -> None:
    """A relation to the owning collection does not import itself."""
    index = RelationIndex(_catalog(_m2o("categories", "parent", "categories")))

    resolution = index.resolve_forward(_PARENT, _catalog().collections["categories"])

    assert resolution is not None
    assert resolution.type_expr == 'Category | Category["id"]'
    assert resolution.imports == ()


def test_forward_returns_none_for_plain_field() -> None:
    """A field without relation record is not a relation."""
    index = RelationIndex(_catalog())
    assert index.resolve_forward(_AUTHOR, _catalog().collections["articles"]) is None


def test_forward_to_unknown_collection_is_ambiguous() -> None:
    """A relation targeting a collection outside the catalog fails the field."""
    index = RelationIndex(_catalog(_m2o("articles", "author", "directus_users")))

    with pytest.raises(AmbiguousRelationError, match="directus_users"):
        index.resolve_forward(_AUTHOR, _catalog().collections["articles"])


def test_forward_without_related_collection_is_ambiguous() -> None:
    """A relation without a related collection fails the field."""
    relation = RelationDef(collection="articles", field="author")
    index = RelationIndex(_catalog(relation))

    with pytest.raises(AmbiguousRelationError):
        index.resolve_forward(_AUTHOR, _catalog().collections["articles"])


# ###############
# Reverse Relations
# ###############


def test_alias_resolves_to_array_of_many_side() -> None:
    """An alias resolves to an array of the "many" collection."""
    index = RelationIndex(_catalog(_o2m("articles", "author", "users", "articles")))

    resolution = index.resolve_alias(_ARTICLES, _catalog().collections["users"])

    assert resolution is not None
    assert resolution.type_expr == "Article[]"
    assert resolution.imports == ('import { Article } from "./Article";',)


def test_alias_self_reference_is_array_without_import() -> None:
    """A self-referencing alias is still an array and needs no import."""
    index = RelationIndex(_catalog(_o2m("categories", "parent", "categories", "children")))

    resolution = index.resolve_alias(_CHILDREN, _catalog().collections["categories"])

    assert resolution is not None
    assert resolution.type_expr == "Category[]"
    assert resolution.imports == ()


def test_alias_without_relation_returns_none() -> None:
    """An alias without relation record is not a relation."""
    index = RelationIndex(_catalog())
    assert index.resolve_alias(_ARTICLES, _catalog().collections["users"]) is None


def test_alias_without_many_collection_is_ambiguous() -> None:
    """A reverse relation without "many" side fails the field."""
    relation = RelationDef(
        collection="articles",
        field="author",
        related_collection="users",
        meta=RelationMeta(one_collection="users", one_field="articles"),
    )
    index = RelationIndex(_catalog(relation))

    with pytest.raises(AmbiguousRelationError):
        index.resolve_alias(_ARTICLES, _catalog().collections["users"])
