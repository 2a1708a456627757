# Copyright 2026 CellTail Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical rules, identifier classification and line scanning for CellTail."""

from celltail.highlight.classifier import (
    CELLTAIL_CLASSIFIER,
    IdentifierCategory,
    IdentifierClassifier,
    classify,
    create_keyword_mapper,
)
from celltail.highlight.rules import (
    CELLTAIL_RULES,
    CLASSIFY_IDENTIFIER,
    CONSTANTS_STATE,
    QSTRING_STATE,
    START_STATE,
    Include,
    Rule,
    RuleMatch,
    RuleTable,
    RuleTableError,
    Span,
    UnknownStateError,
)
from celltail.highlight.tokenizer import LineTokens, Token, coalesce, tokenize, tokenize_line

__all__ = [
    # Classification
    "IdentifierCategory",
    "IdentifierClassifier",
    "CELLTAIL_CLASSIFIER",
    "classify",
    "create_keyword_mapper",
    # Rule table
    "Rule",
    "Include",
    "Span",
    "RuleMatch",
    "RuleTable",
    "RuleTableError",
    "UnknownStateError",
    "CELLTAIL_RULES",
    "CLASSIFY_IDENTIFIER",
    "START_STATE",
    "QSTRING_STATE",
    "CONSTANTS_STATE",
    # Scanning
    "Token",
    "LineTokens",
    "tokenize",
    "tokenize_line",
    "coalesce",
]
