# Copyright 2026 dtsmodels Contributors
# SPDX-License-Identifier: Apache-2.0

"""Discovery of enumerated values configured for a field."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol

from dtsmodels.generator.errors import MetadataQueryError
from dtsmodels.generator.resolution import Resolution
from dtsmodels.model.catalog import FieldMetadata

# ###############
# Public Interface
# ###############


class MetadataProvider(Protocol):
    """Source of per-field interface metadata (e.g. dropdown choices)."""

    def read_field_metadata(self, collection: str, field: str) -> FieldMetadata | None:
        """Return the metadata record for *collection*.*field*, or None if there is none."""
        ...


def resolve_choices(provider: MetadataProvider, collection: str, field: str) -> Resolution | None:
    """Resolve a field to a union of string literals if it has configured choices.

    Returns None when the field has no metadata or an empty choice list.

    Raises:
        MetadataQueryError: If the provider fails.
    """
    try:
        metadata = provider.read_field_metadata(collection, field)
    except Exception as exc:
        raise MetadataQueryError(f"Metadata lookup for '{collection}.{field}' failed: {exc}") from exc

    if metadata is None or not metadata.choices:
        return None
    return Resolution(literal_union(choice.value for choice in metadata.choices))


def literal_union(values: Iterable[Any]) -> str:
    """Return a union of single-quoted string literals, one per distinct value."""
    literals: list[str] = []
    for value in values:
        literal = _quote(value)
        if literal not in literals:
            literals.append(literal)
    return " | ".join(literals)


# ################
# Implementation
# ################


def _quote(value: Any) -> str:
    text = value if isinstance(value, str) else str(value)
    escaped = text.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"
