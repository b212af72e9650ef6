# Copyright 2026 dtsmodels Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for the dtsmodels documentation."""

project = "dtsmodels"
author = "dtsmodels Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]

html_theme = "alabaster"
