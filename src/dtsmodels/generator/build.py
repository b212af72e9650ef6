# Copyright 2026 dtsmodels Contributors
# SPDX-License-Identifier: Apache-2.0

"""Generation run over a whole schema catalog, and writing of the resulting units.

Generation and writing are separate steps with separate failure channels:

* :func:`generate_all` never fails because of a single field. Unresolvable
  fields are reported as diagnostics on their :class:`ModelUnit`. It only
  raises :class:`NameCollisionError`, before anything is generated, when two
  collections would produce the same interface name.

* :func:`write_units` raises :class:`OutputError` on the first file system
  failure. A partially written output directory is not a valid result.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from dtsmodels.generator.choices import MetadataProvider
from dtsmodels.generator.emitter import FieldDiagnostic, ModelUnit, generate_index, generate_model
from dtsmodels.generator.naming import class_name
from dtsmodels.generator.relations import RelationIndex
from dtsmodels.model.catalog import SchemaCatalog

# ###############
# Public Interface
# ###############

DEFAULT_EXTENSION = ".d.ts"
INDEX_NAME = "index"


class NameCollisionError(Exception):
    """Raised when two collections derive the same interface name."""


class OutputError(Exception):
    """Raised when the output directory or a generated file cannot be written."""


@dataclass
class GenerationResult:
    """All units produced by one generation run.

    Attributes:
        units: One declaration unit per collection, in catalog order.
        index: Source of the index unit.
    """

    units: list[ModelUnit] = field(default_factory=list)
    index: str = ""

    @property
    def diagnostics(self) -> list[FieldDiagnostic]:
        """Return every field diagnostic, grouped by unit in catalog order."""
        return [diagnostic for unit in self.units for diagnostic in unit.diagnostics]


def check_name_collisions(catalog: SchemaCatalog) -> None:
    """Ensure every collection derives a distinct interface name.

    Raises:
        NameCollisionError: If two collections map to the same name.
    """
    seen: dict[str, str] = {}
    for collection in catalog.collections:
        name = class_name(collection)
        if name in seen:
            raise NameCollisionError(
                f"Collections '{seen[name]}' and '{collection}' both generate the interface '{name}'"
            )
        seen[name] = collection


def generate_all(catalog: SchemaCatalog, metadata: MetadataProvider) -> GenerationResult:
    """Generate the declaration units of every collection plus the index.

    Raises:
        NameCollisionError: If two collections derive the same interface name.
    """
    check_name_collisions(catalog)
    relations = RelationIndex(catalog)
    units = [generate_model(collection, relations, metadata) for collection in catalog.collections.values()]
    return GenerationResult(units=units, index=generate_index(catalog))


def write_units(result: GenerationResult, directory: Path, extension: str = DEFAULT_EXTENSION) -> list[Path]:
    """Write every unit of *result* to *directory*, creating it as needed.

    Files are named ``<Interface><extension>``; the index is ``index<extension>``.

    Returns:
        The paths written, index last.

    Raises:
        OutputError: If the directory cannot be created or a file cannot be written.
    """
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputError(f"Cannot create output directory '{directory}': {exc}") from exc

    written: list[Path] = []
    for unit in result.units:
        written.append(_write(directory / f"{unit.name}{extension}", unit.source))
    written.append(_write(directory / f"{INDEX_NAME}{extension}", result.index))
    return written


# ################
# Implementation
# ################


def _write(path: Path, source: str) -> Path:
    try:
        path.write_text(source, encoding="utf-8")
    except OSError as exc:
        raise OutputError(f"Cannot write '{path}': {exc}") from exc
    return path
