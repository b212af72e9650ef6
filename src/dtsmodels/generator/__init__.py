# Copyright 2026 dtsmodels Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema-to-TypeScript resolution and emission engine."""

from dtsmodels.generator.build import (
    DEFAULT_EXTENSION,
    GenerationResult,
    NameCollisionError,
    OutputError,
    check_name_collisions,
    generate_all,
    write_units,
)
from dtsmodels.generator.choices import MetadataProvider, literal_union, resolve_choices
from dtsmodels.generator.emitter import FieldDiagnostic, ModelUnit, generate_index, generate_model, resolve_field
from dtsmodels.generator.errors import (
    AmbiguousRelationError,
    MetadataQueryError,
    ResolutionError,
    UnsupportedFieldTypeError,
)
from dtsmodels.generator.naming import class_name, pascal_case, singularize
from dtsmodels.generator.relations import RelationIndex
from dtsmodels.generator.resolution import Resolution
from dtsmodels.generator.scalars import scalar_type

__all__ = [
    # Naming
    "singularize",
    "pascal_case",
    "class_name",
    # Resolution
    "Resolution",
    "RelationIndex",
    "scalar_type",
    "MetadataProvider",
    "resolve_choices",
    "literal_union",
    "resolve_field",
    # Errors
    "ResolutionError",
    "UnsupportedFieldTypeError",
    "MetadataQueryError",
    "AmbiguousRelationError",
    "NameCollisionError",
    "OutputError",
    # Emission
    "FieldDiagnostic",
    "ModelUnit",
    "generate_model",
    "generate_index",
    "GenerationResult",
    "DEFAULT_EXTENSION",
    "check_name_collisions",
    "generate_all",
    "write_units",
]
