# Copyright 2026 CellTail Contributors
# SPDX-License-Identifier: Apache-2.0

"""Syntax highlighting support for the CellTail language."""
