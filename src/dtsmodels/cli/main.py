# Copyright 2026 dtsmodels Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the dtsmodels command-line interface."""

import argparse
import sys
from pathlib import Path

from dtsmodels.generator.build import NameCollisionError, OutputError, generate_all, write_units
from dtsmodels.snapshot.loader import SnapshotError, load_snapshot
from dtsmodels.workspace.config import CONFIG_FILE_NAME, ConfigError, GeneratorConfig, load_config

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the dtsmodels CLI."""
    parser = argparse.ArgumentParser(
        prog="dtsmodels",
        description="dtsmodels: TypeScript declarations for a data schema",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # snapshot subcommand
    snapshot_parser = subparsers.add_parser(
        "snapshot",
        help="Export the schema to .d.ts files",
        description="Export every collection of the schema snapshot to .d.ts files into the target directory.",
    )
    snapshot_parser.add_argument(
        "directory",
        help="Directory to write the declaration files to (created if missing)",
    )
    snapshot_parser.add_argument(
        "--schema",
        default=None,
        help="Schema snapshot file, YAML or JSON (default: from the config file, else snapshot.yaml)",
    )
    snapshot_parser.add_argument(
        "--config",
        default=None,
        help=f"Configuration file (default: {CONFIG_FILE_NAME} in the current directory, if present)",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "snapshot":
        return _cmd_snapshot(args)
    return 0


def _cmd_snapshot(args: argparse.Namespace) -> int:
    """Handle the snapshot subcommand."""
    config = GeneratorConfig()
    config_dir = Path.cwd()

    config_path = Path(args.config) if args.config else Path.cwd() / CONFIG_FILE_NAME
    if args.config or config_path.exists():
        try:
            config = load_config(config_path)
        except ConfigError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        config_dir = config_path.resolve().parent

    schema_path = Path(args.schema) if args.schema else config_dir / config.schema

    try:
        catalog, metadata = load_snapshot(schema_path)
    except SnapshotError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if config.exclude_collections:
        catalog = catalog.without(config.exclude_collections)

    target_directory = Path(args.directory)
    print(f"Exporting models to {target_directory}")

    try:
        result = generate_all(catalog, metadata)
    except NameCollisionError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for diagnostic in result.diagnostics:
        print(f"Warning: {diagnostic.message}", file=sys.stderr)

    try:
        written = write_units(result, target_directory, config.extension)
    except OutputError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Wrote {len(written)} file(s) for {len(result.units)} collection(s).")
    return 0
