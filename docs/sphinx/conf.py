# Copyright 2026 CellTail Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for the CellTail highlighting documentation."""

project = "CellTail Highlighting"
author = "CellTail Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]

html_theme = "alabaster"
