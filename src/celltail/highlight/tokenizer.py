# Copyright 2026 CellTail Contributors
# SPDX-License-Identifier: Apache-2.0

"""Line-oriented scan loop driving a rule table.

Each line is scanned from a given lexical state; the state reached at the end
of a line is the starting state of the next one, so a quoted string opened on
one line continues on the following lines.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass

from celltail.highlight.classifier import CELLTAIL_CLASSIFIER, IdentifierClassifier
from celltail.highlight.rules import (
    CELLTAIL_RULES,
    START_STATE,
    TEXT,
    ClassifierMarker,
    RuleTable,
    TokenLabel,
)

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class Token:
    """A labelled span of source text.

    Attributes:
        label: Presentation label such as ``keyword`` or ``constant.numeric``.
        value: The raw text covered by the token.
    """

    label: str
    value: str


@dataclass(frozen=True)
class LineTokens:
    """Tokens of one line with the states it was scanned between."""

    tokens: tuple[Token, ...]
    start_state: str
    end_state: str

    @property
    def text(self) -> str:
        return "".join(token.value for token in self.tokens)


def tokenize_line(
    line: str,
    state: str = START_STATE,
    table: RuleTable = CELLTAIL_RULES,
    classifier: IdentifierClassifier = CELLTAIL_CLASSIFIER,
) -> LineTokens:
    """Scan a single line of text.

    Where no rule of the current state matches, the character at the cursor is
    emitted as a ``text`` token and scanning resumes one position further in
    the same state, so every input terminates and no character is lost.

    Args:
        line: Text of the line, without its line terminator.
        state: Lexical state to start in.
        table: Rule table to match against.
        classifier: Resolves identifier-shaped matches to a label.

    Returns:
        The tokens of the line and the state reached at its end.

    Raises:
        UnknownStateError: If ``state`` is not part of ``table``.
    """
    tokens: list[Token] = []
    current = state
    position = 0
    while position < len(line):
        found = table.match(current, line, position)
        if found is None:
            tokens.append(Token(TEXT, line[position]))
            position += 1
            continue
        tokens.extend(
            Token(_resolve_label(span.label, span.text, classifier), span.text) for span in found.spans
        )
        position = found.end
        current = found.next_state
    if not line:
        # Unknown states fail the same way for empty lines.
        table.rules(current)
    return LineTokens(tuple(tokens), state, current)


def tokenize(
    source: str,
    state: str = START_STATE,
    table: RuleTable = CELLTAIL_RULES,
    classifier: IdentifierClassifier = CELLTAIL_CLASSIFIER,
) -> list[LineTokens]:
    """Scan source text line by line, carrying the state across lines.

    Lines are split on ``\\r\\n``, ``\\r`` and ``\\n``; none of the terminators
    appear in the tokens. Joining the text of the returned lines with ``\\n``
    reproduces ``source`` with its line breaks normalised to ``\\n``.
    """
    result: list[LineTokens] = []
    for line in _LINE_BREAK.split(source):
        scanned = tokenize_line(line, state, table, classifier)
        result.append(scanned)
        state = scanned.end_state
    return result


def coalesce(tokens: Iterable[Token]) -> list[Token]:
    """Merge runs of adjacent tokens that share a label."""
    merged: list[Token] = []
    for token in tokens:
        if merged and merged[-1].label == token.label:
            merged[-1] = Token(token.label, merged[-1].value + token.value)
        else:
            merged.append(token)
    return merged


# ################
# Implementation
# ################

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def _resolve_label(label: TokenLabel, text: str, classifier: IdentifierClassifier) -> str:
    """Turn a rule label into a concrete presentation label."""
    if isinstance(label, ClassifierMarker):
        return classifier.classify(text).value
    return label
