# Copyright 2026 CellTail Contributors
# SPDX-License-Identifier: Apache-2.0

"""Editor mode records and the mode registry.

A mode bundles a rule table with the editing metadata a host editor needs
(comment markers, default behaviour). Modes are plain immutable records;
a language mode is derived from the base text mode by replacing fields.
"""

import dataclasses
import logging
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from celltail.highlight.classifier import CELLTAIL_CLASSIFIER, IdentifierClassifier
from celltail.highlight.rules import CELLTAIL_RULES, START_STATE, TEXT, Rule, RuleTable
from celltail.highlight.tokenizer import LineTokens, tokenize_line

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class ModeError(Exception):
    """Raised when a mode cannot perform an editing operation."""


class ModeNotFoundError(ModeError):
    """Raised when no mode is registered under a requested identifier."""


@dataclass(frozen=True)
class Behaviour:
    """Default editing behaviour: characters that insert their closing pair."""

    auto_pairs: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({"(": ")", "[": "]", "{": "}", '"': '"', "'": "'"})
    )

    def closing_for(self, char: str) -> str | None:
        return self.auto_pairs.get(char)


@dataclass(frozen=True)
class Mode:
    """Configuration record of an editor language mode.

    Attributes:
        mode_id: Identifier used for registration and configuration lookup.
        rules: Rule table used to highlight lines.
        classifier: Resolves identifier-shaped matches.
        line_comment_start: Marker used by comment-toggle commands, if any.
        block_comment: (open, close) markers for block comments, if any.
        behaviour: Default editing behaviour.
        folding_rules: Code folding strategy; no mode provides one yet.
    """

    mode_id: str
    rules: RuleTable
    classifier: IdentifierClassifier
    line_comment_start: str | None = None
    block_comment: tuple[str, str] | None = None
    behaviour: Behaviour = field(default_factory=Behaviour)
    folding_rules: object | None = None

    def get_tokens(self, line: str, state: str = START_STATE) -> LineTokens:
        """Scan one line with this mode's rules."""
        return tokenize_line(line, state, self.rules, self.classifier)

    def next_line_indent(self, line: str) -> str:
        """Return the indentation to use for a line following ``line``."""
        return _LEADING_WHITESPACE.match(line).group()

    def toggle_line_comment(self, lines: Sequence[str]) -> list[str]:
        """Comment or uncomment a block of lines.

        If every non-blank line is already commented, the marker (and one
        following space) is removed from each. Otherwise the marker is inserted
        at the smallest indentation of the non-blank lines. Blank lines are
        returned unchanged.

        Raises:
            ModeError: If the mode has no line comment marker.
        """
        marker = self.line_comment_start
        if not marker:
            raise ModeError(f"Mode '{self.mode_id}' has no line comment marker")

        content = [line for line in lines if line.strip()]
        if content and all(line.lstrip().startswith(marker) for line in content):
            return [_uncomment(line, marker) if line.strip() else line for line in lines]

        indent = min((len(self.next_line_indent(line)) for line in content), default=0)
        return [line[:indent] + marker + " " + line[indent:] if line.strip() else line for line in lines]


TEXT_MODE = Mode(
    mode_id="text",
    rules=RuleTable({START_STATE: [Rule(TEXT, r".+")]}),
    classifier=IdentifierClassifier(()),
)

CELLTAIL_MODE = dataclasses.replace(
    TEXT_MODE,
    mode_id="celltail",
    rules=CELLTAIL_RULES,
    classifier=CELLTAIL_CLASSIFIER,
    line_comment_start="#",
    block_comment=None,
)


def register_mode(mode: Mode) -> None:
    """Register a mode under its identifier, replacing any previous entry."""
    if mode.mode_id in _REGISTRY:
        logger.debug("Replacing registered mode '%s'", mode.mode_id)
    else:
        logger.debug("Registering mode '%s'", mode.mode_id)
    _REGISTRY[mode.mode_id] = mode


def get_mode(mode_id: str) -> Mode:
    """Look up a registered mode.

    Raises:
        ModeNotFoundError: If no mode is registered under ``mode_id``.
    """
    try:
        return _REGISTRY[mode_id]
    except KeyError:
        known = ", ".join(sorted(_REGISTRY)) or "none"
        raise ModeNotFoundError(f"Unknown mode '{mode_id}' (registered: {known})") from None


def registered_modes() -> list[str]:
    """Return the identifiers of all registered modes, sorted."""
    return sorted(_REGISTRY)


# ################
# Implementation
# ################

_LEADING_WHITESPACE = re.compile(r"[ \t]*")

_REGISTRY: dict[str, Mode] = {}


def _uncomment(line: str, marker: str) -> str:
    """Remove the first comment marker of a line and one space after it."""
    index = line.index(marker)
    rest = line[index + len(marker) :]
    if rest.startswith(" "):
        rest = rest[1:]
    return line[:index] + rest


register_mode(TEXT_MODE)
register_mode(CELLTAIL_MODE)
