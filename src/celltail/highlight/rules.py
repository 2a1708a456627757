# Copyright 2026 CellTail Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical rule table for CellTail highlighting.

A rule table maps state names to ordered rule lists. Matching is anchored at
the scan position and first-match-wins: the earliest rule of the state whose
pattern matches is used, regardless of match length.
"""

import enum
import re
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field

# ###############
# Public Interface
# ###############


class ClassifierMarker(enum.Enum):
    """Token label placeholder resolved by the identifier classifier."""

    IDENTIFIER = "identifier-classifier"


CLASSIFY_IDENTIFIER = ClassifierMarker.IDENTIFIER

TokenLabel = str | ClassifierMarker

START_STATE = "start"
QSTRING_STATE = "qstring"
CONSTANTS_STATE = "constants"


class RuleTableError(Exception):
    """Raised when authored rules cannot form a consistent rule table."""


class UnknownStateError(KeyError):
    """Raised when a lexical state name is not part of the rule table."""


@dataclass(frozen=True)
class Rule:
    """A single pattern-to-token mapping.

    Attributes:
        token: The label of the matched text, or one label per regex group.
        pattern: Regular expression matched at the scan position.
        next_state: State to continue in after a match; ``None`` stays put.
    """

    token: TokenLabel | tuple[TokenLabel, ...]
    pattern: str
    next_state: str | None = None
    regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "regex", re.compile(self.pattern, re.ASCII))


@dataclass(frozen=True)
class Include:
    """Splices the rules of another state in place when the table is built."""

    state: str


@dataclass(frozen=True)
class Span:
    """A labelled piece of matched text."""

    label: TokenLabel
    text: str


@dataclass(frozen=True)
class RuleMatch:
    """Result of a successful rule match.

    Attributes:
        spans: Labelled pieces of the matched text, in order.
        end: Position just past the matched text.
        next_state: State to scan the remaining text in.
    """

    spans: tuple[Span, ...]
    end: int
    next_state: str

    @property
    def text(self) -> str:
        return "".join(span.text for span in self.spans)


class RuleTable:
    """Immutable mapping from lexical state names to ordered rule lists."""

    def __init__(self, authored: Mapping[str, Sequence[Rule | Include]]) -> None:
        """Build a table, resolving includes and checking state references.

        Raises:
            RuleTableError: On unknown include or transition targets, include
                cycles, or multi-label rules whose group count does not match.
        """
        self._rules: dict[str, tuple[Rule, ...]] = {
            name: tuple(_resolve_includes(name, authored, ())) for name in authored
        }
        for name, rules in self._rules.items():
            for rule in rules:
                _check_rule(name, rule, self._rules)

    @property
    def states(self) -> tuple[str, ...]:
        return tuple(self._rules)

    def __contains__(self, state: object) -> bool:
        return state in self._rules

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def rules(self, state: str) -> tuple[Rule, ...]:
        """Return the resolved rules of a state in priority order."""
        try:
            return self._rules[state]
        except KeyError:
            raise UnknownStateError(state) from None

    def match(self, state: str, text: str, position: int) -> RuleMatch | None:
        """Match the first applicable rule of ``state`` at ``position``.

        Returns:
            The match result, or None when no rule of the state matches. The
            caller must then advance past one character itself.

        Raises:
            UnknownStateError: If ``state`` is not in the table.
        """
        for rule in self.rules(state):
            found = rule.regex.match(text, position)
            if found is None or found.end() == position:
                continue
            if isinstance(rule.token, tuple):
                spans = tuple(
                    Span(label, value)
                    for label, value in zip(rule.token, found.groups(), strict=True)
                    if value
                )
            else:
                spans = (Span(rule.token, found.group()),)
            return RuleMatch(spans, found.end(), rule.next_state or state)
        return None


# ################
# Implementation
# ################


def _resolve_includes(
    name: str,
    authored: Mapping[str, Sequence[Rule | Include]],
    chain: tuple[str, ...],
) -> list[Rule]:
    """Flatten the rules of a state, expanding includes depth-first."""
    if name in chain:
        cycle = " -> ".join((*chain, name))
        raise RuleTableError(f"Include cycle: {cycle}")
    rules: list[Rule] = []
    for entry in authored[name]:
        if isinstance(entry, Include):
            if entry.state not in authored:
                raise RuleTableError(f"State '{name}' includes unknown state '{entry.state}'")
            rules.extend(_resolve_includes(entry.state, authored, (*chain, name)))
        else:
            rules.append(entry)
    return rules


def _check_rule(state: str, rule: Rule, rules: Mapping[str, tuple[Rule, ...]]) -> None:
    """Validate a resolved rule against the table it belongs to."""
    if rule.next_state is not None and rule.next_state not in rules:
        raise RuleTableError(
            f"Rule {rule.pattern!r} in state '{state}' transitions to unknown state '{rule.next_state}'"
        )
    if isinstance(rule.token, tuple) and len(rule.token) != rule.regex.groups:
        raise RuleTableError(
            f"Rule {rule.pattern!r} in state '{state}' has {len(rule.token)} labels "
            f"but {rule.regex.groups} groups"
        )


# ################
# CellTail rules
# ################

COMMENT = "comment"
STRING = "string"
OPERATOR = "keyword.operator"
PUNCTUATION = "punctuation"
LPAREN = "paren.lparen"
RPAREN = "paren.rparen"
KEYWORD = "keyword"
TEXT = "text"
FUNCTION_NAME = "entity.name.function"
NUMBER = "constant.numeric"

_INTEGER = r"(?:[1-9]\d*|0)"

# Whitespace as matched by ECMAScript `\s`, independent of re.ASCII.
_WHITESPACE = r"[\t\n\x0b\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]"

CELLTAIL_RULES = RuleTable(
    {
        START_STATE: [
            Rule(COMMENT, r"#.*"),
            Rule(STRING, r'"', next_state=QSTRING_STATE),
            Rule(STRING, r"'.'"),
            Rule(OPERATOR, r"\+|-|\*|/|\||&|%|\^|\.\."),
            Rule(
                PUNCTUATION,
                r",|:|;|->|\+=|-=|\*=|/=|//=|%=|@=|&=|\|=|\^=|>>=|<<=|\*\*=",
            ),
            Rule(LPAREN, r"[\[({]"),
            Rule(RPAREN, r"[\])}]"),
            Rule(
                (KEYWORD, TEXT, FUNCTION_NAME),
                r"(def|class)(" + _WHITESPACE + r"+)([\u00BF-\u1FFF\u2C00-\uD7FF\w]+)",
            ),
            Rule(TEXT, _WHITESPACE + "+"),
            Include(CONSTANTS_STATE),
        ],
        QSTRING_STATE: [
            Rule(STRING, r'"', next_state=START_STATE),
            # One character per match; consumers see per-character spans.
            Rule(STRING, r'[^"]', next_state=QSTRING_STATE),
        ],
        CONSTANTS_STATE: [
            Rule(NUMBER, _INTEGER + r"\b"),
            Rule(CLASSIFY_IDENTIFIER, r"[a-zA-Z_$][a-zA-Z0-9_$]*\b"),
        ],
    }
)
