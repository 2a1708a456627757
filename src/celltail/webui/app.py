# Copyright 2026 CellTail Contributors
# SPDX-License-Identifier: Apache-2.0

"""Dash-based playground for live CellTail highlighting."""

import dash
from dash import Input, Output, dcc, html

from celltail.highlight.tokenizer import coalesce, tokenize
from celltail.theme.config import DEFAULT_THEME, Theme, TokenStyle

# ###############
# Public Interface
# ###############

SAMPLE_SOURCE = """\
# Double every input number
I = N;
O = N;
fn double x: x + x;
N, x, _: x, double(x), N;
"""


def create_app(theme: Theme = DEFAULT_THEME, initial_source: str = SAMPLE_SOURCE) -> dash.Dash:
    """Create and configure the CellTail playground application."""
    app = dash.Dash(
        __name__,
        title="CellTail Playground",
    )
    app.layout = _build_layout(theme, initial_source)

    @app.callback(Output("highlighted", "children"), Input("source", "value"))
    def _update_preview(source: str | None) -> list[html.Span]:
        return update_preview(source, theme)

    return app


def update_preview(source: str | None, theme: Theme = DEFAULT_THEME) -> list[html.Span]:
    """Recompute the preview for the editor content; a cleared editor sends None."""
    return highlight_to_components(source or "", theme)


def highlight_to_components(source: str, theme: Theme = DEFAULT_THEME) -> list[html.Span]:
    """Convert source text into styled spans, one per coalesced token.

    Line breaks are kept as text so the spans can be placed in a ``<pre>``.
    """
    children: list[html.Span] = []
    for index, line in enumerate(tokenize(source)):
        if index:
            children.append(html.Span("\n"))
        for token in coalesce(line.tokens):
            children.append(
                html.Span(
                    token.value,
                    className=_css_class(token.label),
                    style=_css_style(theme.style_for(token.label)),
                )
            )
    return children


# ################
# Implementation
# ################

_CSS_COLORS = {
    "black": "#000000",
    "red": "#cd3131",
    "green": "#0dbc79",
    "yellow": "#e5e510",
    "blue": "#2472c8",
    "magenta": "#bc3fbc",
    "cyan": "#11a8cd",
    "white": "#e5e5e5",
    "gray": "#666666",
    "grey": "#666666",
    "black_bright": "#666666",
    "red_bright": "#f14c4c",
    "green_bright": "#23d18b",
    "yellow_bright": "#f5f543",
    "blue_bright": "#3b8eea",
    "magenta_bright": "#d670d6",
    "cyan_bright": "#29b8db",
    "white_bright": "#ffffff",
}


def _build_layout(theme: Theme, initial_source: str) -> html.Div:
    """Build the application layout."""
    return html.Div(
        [
            html.H1("CellTail Playground"),
            html.P(f"Theme: {theme.name}"),
            dcc.Textarea(
                id="source",
                value=initial_source,
                style={"width": "100%", "height": "12rem", "fontFamily": "monospace"},
            ),
            html.Hr(),
            html.Pre(
                highlight_to_components(initial_source, theme),
                id="highlighted",
                style={"background": "#1e1e1e", "color": "#d4d4d4", "padding": "1rem"},
            ),
        ],
        style={"fontFamily": "sans-serif", "padding": "2rem"},
    )


def _css_class(label: str) -> str:
    """Map a dotted token label to CSS classes, e.g. ``ct-keyword ct-operator``."""
    return " ".join(f"ct-{part}" for part in label.split("."))


def _css_style(style: TokenStyle | None) -> dict[str, str]:
    """Translate a token style into inline CSS."""
    if style is None:
        return {}
    css: dict[str, str] = {}
    if style.color is not None:
        css["color"] = _CSS_COLORS.get(style.color, style.color)
    if style.bold:
        css["fontWeight"] = "bold"
    if style.italic:
        css["fontStyle"] = "italic"
    if style.underline:
        css["textDecoration"] = "underline"
    return css
