# Copyright 2026 dtsmodels Contributors
# SPDX-License-Identifier: Apache-2.0

"""Per-field resolution errors.

Every error raised while resolving a single field derives from
:class:`ResolutionError`. The model emitter recovers from these locally by
typing the field as ``never`` and recording a diagnostic.
"""

# ###############
# Public Interface
# ###############


class ResolutionError(Exception):
    """Raised when the type of a single field cannot be determined."""


class UnsupportedFieldTypeError(ResolutionError):
    """Raised when a field type has no TypeScript representation."""

    def __init__(self, field_type: str) -> None:
        super().__init__(f"Unsupported field type '{field_type}'")
        self.field_type = field_type


class MetadataQueryError(ResolutionError):
    """Raised when the field metadata lookup fails."""


class AmbiguousRelationError(ResolutionError):
    """Raised when a relation record is malformed or targets an unknown collection."""
