# Copyright 2026 CellTail Contributors
# SPDX-License-Identifier: Apache-2.0

"""Output renderers for highlighted CellTail source."""

from celltail.render.terminal import render, render_line

__all__ = [
    "render",
    "render_line",
]
