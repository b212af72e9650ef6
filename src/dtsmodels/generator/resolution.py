# Copyright 2026 dtsmodels Contributors
# SPDX-License-Identifier: Apache-2.0

"""Result of resolving the TypeScript type of one field."""

from __future__ import annotations

from dataclasses import dataclass

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class Resolution:
    """A resolved field type and the import statements it needs.

    Attributes:
        type_expr: TypeScript type expression for the field (before nullability).
        imports: Import statements required by *type_expr*, in order.
    """

    type_expr: str
    imports: tuple[str, ...] = ()


def import_statement(name: str) -> str:
    """Return the statement importing the interface *name* from its sibling unit."""
    return f'import {{ {name} }} from "./{name}";'
