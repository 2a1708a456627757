# Copyright 2026 CellTail Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for highlighting themes and the theme file format."""

from pathlib import Path

import pytest
import yaml

from celltail.theme import (
    DEFAULT_THEME,
    THEME_FILE_NAME,
    Theme,
    ThemeError,
    TokenStyle,
    load_theme,
    save_theme,
)

# ###############
# Helpers
# ###############


def _write_theme(tmp_path: Path, content: str) -> Path:
    """Write a theme file and return its path."""
    theme_file = tmp_path / THEME_FILE_NAME
    theme_file.write_text(content, encoding="utf-8")
    return theme_file


# ###############
# Style Lookup
# ###############


def test_exact_label_style() -> None:
    """A label with its own entry uses that entry."""
    assert DEFAULT_THEME.style_for("keyword.operator") == TokenStyle(color="cyan")


def test_prefix_label_style() -> None:
    """A label without an entry falls back to its longest configured prefix."""
    assert DEFAULT_THEME.style_for("paren.lparen") == DEFAULT_THEME.styles["paren"]
    assert DEFAULT_THEME.style_for("keyword.control.flow") == DEFAULT_THEME.styles["keyword"]


def test_unstyled_labels() -> None:
    """Labels without any configured prefix have no style."""
    assert DEFAULT_THEME.style_for("identifier") is None
    assert DEFAULT_THEME.style_for("text") is None


def test_prefix_does_not_match_partial_words() -> None:
    """Only whole dotted parts count as prefixes."""
    theme = Theme(styles={"key": TokenStyle(color="red")})
    assert theme.style_for("keyword") is None


@pytest.mark.parametrize("color", ["red", "blue_bright", "gray", "#1a2B3c"])
def test_valid_colors(color: str) -> None:
    """Named terminal colors and #RRGGBB values are accepted."""
    assert TokenStyle(color=color).color == color


@pytest.mark.parametrize("color", ["purple", "#123", "rgb(1,2,3)", ""])
def test_invalid_colors(color: str) -> None:
    """Other color values are rejected."""
    with pytest.raises(ValueError, match="unknown color"):
        TokenStyle(color=color)


# ###############
# Loading
# ###############


def test_load_theme(tmp_path: Path) -> None:
    """A theme file is parsed into a Theme."""
    content = """\
name: night
styles:
  keyword:
    color: blue
    bold: true
  comment:
    color: "#808080"
    italic: true
"""
    theme = load_theme(_write_theme(tmp_path, content))
    assert theme.name == "night"
    assert theme.styles["keyword"] == TokenStyle(color="blue", bold=True)
    assert theme.style_for("comment") == TokenStyle(color="#808080", italic=True)


def test_empty_file_is_default_theme(tmp_path: Path) -> None:
    """An empty theme file yields the default theme."""
    assert load_theme(_write_theme(tmp_path, "")) == DEFAULT_THEME


def test_empty_file_theme_is_independent_of_default(tmp_path: Path) -> None:
    """Changing a theme loaded from an empty file leaves the default theme intact."""
    theme = load_theme(_write_theme(tmp_path, ""))
    assert theme is not DEFAULT_THEME
    theme.styles["keyword"] = TokenStyle(color="green")
    theme.name = "changed"
    assert DEFAULT_THEME.style_for("keyword") == TokenStyle(color="magenta", bold=True)
    assert DEFAULT_THEME.name == "default"


def test_file_not_found(tmp_path: Path) -> None:
    """Loading a non-existent file raises ThemeError."""
    with pytest.raises(ThemeError, match="not found"):
        load_theme(tmp_path / "missing.yaml")


def test_invalid_yaml(tmp_path: Path) -> None:
    """Broken YAML raises ThemeError."""
    with pytest.raises(ThemeError, match="Invalid YAML"):
        load_theme(_write_theme(tmp_path, "styles: [\nbroken yaml"))


def test_unknown_field(tmp_path: Path) -> None:
    """Unknown top-level fields are rejected."""
    with pytest.raises(ThemeError, match="Invalid theme file"):
        load_theme(_write_theme(tmp_path, "name: x\nbackground: black\n"))


def test_invalid_color_in_file(tmp_path: Path) -> None:
    """Invalid colors in a file raise ThemeError."""
    content = "styles:\n  keyword:\n    color: purple\n"
    with pytest.raises(ThemeError, match="unknown color"):
        load_theme(_write_theme(tmp_path, content))


def test_not_a_mapping(tmp_path: Path) -> None:
    """A YAML list is not a valid theme."""
    with pytest.raises(ThemeError, match="Invalid theme file"):
        load_theme(_write_theme(tmp_path, "- keyword\n"))


# ###############
# Saving
# ###############


def test_save_and_load_default_theme(tmp_path: Path) -> None:
    """A saved theme loads back unchanged."""
    path = tmp_path / THEME_FILE_NAME
    save_theme(DEFAULT_THEME, path)
    assert load_theme(path) == DEFAULT_THEME


def test_saved_file_omits_default_fields(tmp_path: Path) -> None:
    """Style fields at their default values are not written."""
    path = tmp_path / THEME_FILE_NAME
    save_theme(Theme(name="plain", styles={"string": TokenStyle(color="green")}), path)
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    assert data == {"name": "plain", "styles": {"string": {"color": "green"}}}


def test_saved_file_keeps_default_name(tmp_path: Path) -> None:
    """The theme name is always written."""
    path = tmp_path / THEME_FILE_NAME
    save_theme(Theme(), path)
    assert yaml.safe_load(path.read_text(encoding="utf-8"))["name"] == "default"
    assert load_theme(path) == Theme()


def test_save_to_missing_directory(tmp_path: Path) -> None:
    """Writing into a missing directory raises ThemeError."""
    with pytest.raises(ThemeError, match="Cannot write"):
        save_theme(DEFAULT_THEME, tmp_path / "missing" / THEME_FILE_NAME)
