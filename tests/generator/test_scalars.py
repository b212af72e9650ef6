# Copyright 2026 dtsmodels Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the scalar type mapping."""

import pytest

from dtsmodels.generator.errors import ResolutionError, UnsupportedFieldTypeError
from dtsmodels.generator.scalars import scalar_type
from dtsmodels.model.catalog import FieldDef

# ###############
# Test Helpers
# ###############


def _field(field_type: str) -> FieldDef:
    """Create a non-nullable field of the given type."""
    return FieldDef(field="value", type=field_type, nullable=False)


# ###############
# Supported Types
# ###############


@pytest.mark.parametrize(
    "field_type, expected",
    [
        ("boolean", "boolean"),
        ("integer", "number"),
        ("float", "number"),
        ("decimal", "number"),
        ("bigInteger", "number"),
        ("dateTime", "string"),
        ("date", "string"),
        ("time", "string"),
        ("timestamp", "string"),
        ("text", "string"),
        ("string", "string"),
        ("uuid", "string"),
        ("hash", "string"),
        ("json", "any"),
        ("csv", "string[]"),
    ],
)
def test_supported_types(field_type: str, expected: str) -> None:
    """Every supported kind maps to its TypeScript type."""
    assert scalar_type(_field(field_type)) == expected


# ###############
# Unsupported Types
# ###############


@pytest.mark.parametrize(
    "field_type",
    ["alias", "binary", "geometry", "geometry.Point", "geometry.MultiPolygon", "unknown", "totally-new-kind"],
)
def test_unsupported_types_raise(field_type: str) -> None:
    """Kinds without a lossless representation raise UnsupportedFieldTypeError."""
    with pytest.raises(UnsupportedFieldTypeError) as exc_info:
        scalar_type(_field(field_type))
    assert exc_info.value.field_type == field_type
    assert field_type in str(exc_info.value)


def test_unsupported_type_is_a_resolution_error() -> None:
    """UnsupportedFieldTypeError is recoverable as a ResolutionError."""
    with pytest.raises(ResolutionError):
        scalar_type(_field("binary"))
