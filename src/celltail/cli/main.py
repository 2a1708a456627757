# Copyright 2026 CellTail Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the CellTail highlighting command-line interface."""

import argparse
import logging
import re
import sys
from pathlib import Path

from celltail.highlight.classifier import classify
from celltail.highlight.tokenizer import tokenize
from celltail.theme.config import DEFAULT_THEME, THEME_FILE_NAME, Theme, ThemeError, load_theme, save_theme

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the CellTail CLI."""
    parser = argparse.ArgumentParser(
        prog="celltail",
        description="CellTail - syntax highlighting tools",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print debug log messages",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # tokens subcommand
    tokens_parser = subparsers.add_parser(
        "tokens",
        help="Print the highlighting tokens of a file",
        description="Scan a CellTail file and print one token per line.",
    )
    tokens_parser.add_argument("file", help="CellTail source file")

    # highlight subcommand
    highlight_parser = subparsers.add_parser(
        "highlight",
        help="Print a file with terminal colors",
        description="Render a CellTail file with ANSI colors.",
    )
    highlight_parser.add_argument("file", help="CellTail source file")
    highlight_parser.add_argument(
        "--theme",
        default=None,
        help="Theme file to use (default: built-in theme)",
    )

    # classify subcommand
    classify_parser = subparsers.add_parser(
        "classify",
        help="Show the category of identifiers",
        description="Print the highlighting category of each given identifier.",
    )
    classify_parser.add_argument("words", nargs="+", help="Identifiers to classify")

    # init-theme subcommand
    init_theme_parser = subparsers.add_parser(
        "init-theme",
        help="Write the default theme to a theme file",
        description=f"Create a {THEME_FILE_NAME} file holding the default theme.",
    )
    init_theme_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory to write the theme file to (default: current directory)",
    )

    # serve subcommand
    serve_parser = subparsers.add_parser(
        "serve",
        help="Launch the interactive highlighting playground",
        description="Launch a web-based editor that highlights CellTail as you type.",
    )
    serve_parser.add_argument(
        "--port",
        type=int,
        default=8050,
        help="Port to run the server on (default: 8050)",
    )
    serve_parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind the server to (default: 127.0.0.1)",
    )
    serve_parser.add_argument(
        "--theme",
        default=None,
        help="Theme file to use (default: built-in theme)",
    )

    args = parser.parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################

_IDENTIFIER = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "tokens":
        return _cmd_tokens(args)
    if args.command == "highlight":
        return _cmd_highlight(args)
    if args.command == "classify":
        return _cmd_classify(args)
    if args.command == "init-theme":
        return _cmd_init_theme(args)
    if args.command == "serve":
        return _cmd_serve(args)
    return 0


def _read_source(file: str) -> str | None:
    """Read a source file, reporting failures on stderr."""
    path = Path(file)
    if not path.is_file():
        print(f"Error: file '{path}' does not exist.", file=sys.stderr)
        return None
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error: cannot read '{path}': {exc}", file=sys.stderr)
        return None


def _resolve_theme(theme_file: str | None) -> Theme | None:
    """Load the requested theme, or the default one when none is given."""
    if theme_file is None:
        return DEFAULT_THEME
    try:
        return load_theme(Path(theme_file))
    except ThemeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return None


def _cmd_tokens(args: argparse.Namespace) -> int:
    """Handle the tokens subcommand."""
    source = _read_source(args.file)
    if source is None:
        return 1

    for lineno, line in enumerate(tokenize(source), start=1):
        for token in line.tokens:
            print(f"{lineno}:{token.label}:{token.value!r}")
        if line.end_state != line.start_state:
            print(f"{lineno}: state {line.start_state} -> {line.end_state}")
    return 0


def _cmd_highlight(args: argparse.Namespace) -> int:
    """Handle the highlight subcommand."""
    from celltail.render.terminal import render

    source = _read_source(args.file)
    if source is None:
        return 1
    theme = _resolve_theme(args.theme)
    if theme is None:
        return 1

    print(render(source, theme), end="")
    return 0


def _cmd_classify(args: argparse.Namespace) -> int:
    """Handle the classify subcommand."""
    has_errors = False
    for word in args.words:
        if not _IDENTIFIER.fullmatch(word):
            print(f"Error: '{word}' is not an identifier.", file=sys.stderr)
            has_errors = True
            continue
        print(f"{word}\t{classify(word).value}")
    return 1 if has_errors else 0


def _cmd_init_theme(args: argparse.Namespace) -> int:
    """Handle the init-theme subcommand."""
    directory = Path(args.directory).resolve()

    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return 1

    theme_file = directory / THEME_FILE_NAME

    if theme_file.exists():
        print(
            f"Error: theme file already exists at '{theme_file}'.",
            file=sys.stderr,
        )
        return 1

    try:
        save_theme(DEFAULT_THEME, theme_file)
    except ThemeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"Wrote default theme to '{theme_file}'.")
    return 0


def _cmd_serve(args: argparse.Namespace) -> int:
    """Handle the serve subcommand."""
    theme = _resolve_theme(args.theme)
    if theme is None:
        return 1

    from celltail.webui.app import create_app

    print(f"Serving CellTail playground at http://{args.host}:{args.port}/")
    app = create_app(theme=theme)
    app.run(host=args.host, port=args.port, debug=False)
    return 0
