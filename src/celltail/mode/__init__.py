# Copyright 2026 CellTail Contributors
# SPDX-License-Identifier: Apache-2.0

"""Editor mode records for CellTail and the mode registry."""

from celltail.mode.mode import (
    CELLTAIL_MODE,
    TEXT_MODE,
    Behaviour,
    Mode,
    ModeError,
    ModeNotFoundError,
    get_mode,
    register_mode,
    registered_modes,
)

__all__ = [
    "Behaviour",
    "Mode",
    "ModeError",
    "ModeNotFoundError",
    "TEXT_MODE",
    "CELLTAIL_MODE",
    "get_mode",
    "register_mode",
    "registered_modes",
]
