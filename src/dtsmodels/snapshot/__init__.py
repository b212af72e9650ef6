# Copyright 2026 dtsmodels Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema snapshot loading (catalog provider and snapshot-backed metadata provider)."""

from dtsmodels.snapshot.loader import SnapshotError, SnapshotMetadataProvider, load_snapshot, parse_snapshot

__all__ = [
    "SnapshotError",
    "SnapshotMetadataProvider",
    "load_snapshot",
    "parse_snapshot",
]
