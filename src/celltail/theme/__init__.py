# Copyright 2026 CellTail Contributors
# SPDX-License-Identifier: Apache-2.0

"""Highlighting themes for CellTail."""

from celltail.theme.config import (
    DEFAULT_THEME,
    NAMED_COLORS,
    THEME_FILE_NAME,
    Theme,
    ThemeError,
    TokenStyle,
    load_theme,
    save_theme,
)

__all__ = [
    "DEFAULT_THEME",
    "NAMED_COLORS",
    "THEME_FILE_NAME",
    "Theme",
    "ThemeError",
    "TokenStyle",
    "load_theme",
    "save_theme",
]
