# Copyright 2026 CellTail Contributors
# SPDX-License-Identifier: Apache-2.0

"""ANSI terminal rendering of highlighted CellTail source."""

from collections.abc import Iterable

from yachalk import chalk

from celltail.highlight.tokenizer import Token, coalesce, tokenize
from celltail.theme.config import DEFAULT_THEME, Theme, TokenStyle

# ###############
# Public Interface
# ###############


def render_line(tokens: Iterable[Token], theme: Theme = DEFAULT_THEME) -> str:
    """Render the tokens of one line as ANSI-colored text."""
    return "".join(_paint(token.value, theme.style_for(token.label)) for token in coalesce(tokens))


def render(source: str, theme: Theme = DEFAULT_THEME) -> str:
    """Highlight CellTail source for display in a terminal.

    Removing the ANSI escape sequences from the result gives back ``source``
    with its line breaks normalised to ``\\n``.
    """
    return "\n".join(render_line(line.tokens, theme) for line in tokenize(source))


# ################
# Implementation
# ################


def _paint(text: str, style: TokenStyle | None) -> str:
    """Apply a token style to text using chalk builders."""
    if style is None:
        return text
    builder = chalk
    if style.color is not None:
        if style.color.startswith("#"):
            builder = builder.hex(style.color)
        else:
            builder = getattr(builder, style.color)
    if style.bold:
        builder = builder.bold
    if style.italic:
        builder = builder.italic
    if style.underline:
        builder = builder.underline
    if builder is chalk:
        return text
    return builder(text)
