# Copyright 2026 CellTail Contributors
# SPDX-License-Identifier: Apache-2.0

"""Highlighting theme model and its YAML file format."""

import logging
import re
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

THEME_FILE_NAME = ".celltail-theme.yaml"

NAMED_COLORS = frozenset(
    base + suffix
    for base in ("black", "red", "green", "yellow", "blue", "magenta", "cyan", "white")
    for suffix in ("", "_bright")
) | {"gray", "grey"}

_HEX_COLOR = re.compile(r"#[0-9a-fA-F]{6}")


class ThemeError(Exception):
    """Raised when a theme file cannot be read, written, or is invalid."""


class TokenStyle(BaseModel):
    """Presentation of a single token label."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    color: str | None = None
    bold: bool = False
    italic: bool = False
    underline: bool = False

    @field_validator("color")
    @classmethod
    def check_color(cls, value: str | None) -> str | None:
        if value is None or value in NAMED_COLORS or _HEX_COLOR.fullmatch(value):
            return value
        raise ValueError(f"unknown color '{value}' (expected a terminal color name or #RRGGBB)")


class Theme(BaseModel):
    """Mapping from token labels to styles.

    Labels are dotted (``keyword.operator``); a style registered for a prefix
    (``keyword``) applies to every label below it unless a longer prefix has
    its own entry.
    """

    model_config = ConfigDict(extra="forbid")

    name: str = "default"
    styles: dict[str, TokenStyle] = Field(default_factory=dict)

    def style_for(self, label: str) -> TokenStyle | None:
        """Return the style of the longest configured prefix of ``label``."""
        parts = label.split(".")
        for length in range(len(parts), 0, -1):
            style = self.styles.get(".".join(parts[:length]))
            if style is not None:
                return style
        return None


DEFAULT_THEME = Theme(
    name="default",
    styles={
        "comment": TokenStyle(color="gray", italic=True),
        "string": TokenStyle(color="green"),
        "keyword": TokenStyle(color="magenta", bold=True),
        "keyword.operator": TokenStyle(color="cyan"),
        "punctuation": TokenStyle(color="white"),
        "paren": TokenStyle(color="yellow"),
        "entity.name.function": TokenStyle(color="blue_bright", bold=True),
        "constant.numeric": TokenStyle(color="red_bright"),
        "constant.language": TokenStyle(color="red"),
        "variable.language": TokenStyle(color="yellow_bright", italic=True),
        "support.function": TokenStyle(color="blue"),
        "invalid.deprecated": TokenStyle(color="red", underline=True),
    },
)


def load_theme(path: Path) -> Theme:
    """Load and validate a theme file.

    An empty file yields a copy of the default theme.

    Args:
        path: Path to the theme YAML file.

    Returns:
        A validated Theme instance.

    Raises:
        ThemeError: If the file cannot be read, contains invalid YAML,
            or does not conform to the theme schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ThemeError(f"Theme file not found: {path}") from None
    except OSError as exc:
        raise ThemeError(f"Cannot read theme file '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ThemeError(f"Invalid YAML in theme file '{path}': {exc}") from exc

    if data is None:
        logger.debug("Theme file '%s' is empty, using the default theme", path)
        return DEFAULT_THEME.model_copy(deep=True)

    try:
        theme = Theme.model_validate(data)
    except ValidationError as exc:
        raise ThemeError(f"Invalid theme file '{path}': {exc}") from exc
    logger.debug("Loaded theme '%s' with %d styles from '%s'", theme.name, len(theme.styles), path)
    return theme


def save_theme(theme: Theme, path: Path) -> None:
    """Write a theme to disk.

    Style fields left at their defaults are omitted for readability.

    Raises:
        ThemeError: If the file cannot be written.
    """
    data = theme.model_dump(exclude_defaults=True)
    data.setdefault("name", theme.name)
    try:
        path.write_text(yaml.dump(data, default_flow_style=False, sort_keys=True), encoding="utf-8")
    except OSError as exc:
        raise ThemeError(f"Cannot write theme file '{path}': {exc}") from exc
