# Copyright 2026 CellTail Contributors
# SPDX-License-Identifier: Apache-2.0

"""Identifier classification for CellTail highlighting.

Maps a whole identifier-shaped word to one of a fixed set of categories by
set membership. The categories are checked in a fixed order and the first
set containing the word wins; anything else is a plain identifier.
"""

import enum
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

# ###############
# Public Interface
# ###############


class IdentifierCategory(enum.Enum):
    """Categories an identifier can be classified into.

    The value of each member is the token label used by presentation layers.
    """

    INVALID_DEPRECATED = "invalid.deprecated"
    SUPPORT_FUNCTION = "support.function"
    PSEUDO_VARIABLE = "variable.language"
    CONSTANT = "constant.language"
    KEYWORD = "keyword"
    IDENTIFIER = "identifier"


@dataclass(frozen=True)
class IdentifierClassifier:
    """Ordered category membership table with a fallback category.

    Attributes:
        categories: (category, words) pairs in lookup order.
        default: Category returned when no set contains the word.
        ignore_case: Compare words case-insensitively.
    """

    categories: tuple[tuple[IdentifierCategory, frozenset[str]], ...]
    default: IdentifierCategory = IdentifierCategory.IDENTIFIER
    ignore_case: bool = False

    def classify(self, word: str) -> IdentifierCategory:
        """Return the category of a whole identifier-shaped word."""
        if self.ignore_case:
            word = word.lower()
        for category, words in self.categories:
            if word in words:
                return category
        return self.default

    def __call__(self, word: str) -> IdentifierCategory:
        return self.classify(word)

    def words(self, category: IdentifierCategory) -> frozenset[str]:
        """Return the configured words of a category (empty if not configured)."""
        for configured, words in self.categories:
            if configured is category:
                return words
        return frozenset()


def create_keyword_mapper(
    mapping: Mapping[IdentifierCategory, str | Iterable[str]],
    default: IdentifierCategory = IdentifierCategory.IDENTIFIER,
    split_char: str = "|",
    ignore_case: bool = False,
) -> IdentifierClassifier:
    """Build a classifier from a category-to-words configuration.

    Word lists may be given as a single ``split_char``-separated string or as
    an iterable of words. Empty words are ignored, so an empty string
    configures an empty category. The mapping order is the lookup order.

    Args:
        mapping: Category to word list, in lookup precedence order.
        default: Fallback category for words in no set.
        split_char: Separator for string word lists.
        ignore_case: Match words case-insensitively.

    Returns:
        An immutable IdentifierClassifier.
    """
    categories: list[tuple[IdentifierCategory, frozenset[str]]] = []
    for category, raw_words in mapping.items():
        words = raw_words.split(split_char) if isinstance(raw_words, str) else raw_words
        if ignore_case:
            words = [w.lower() for w in words]
        categories.append((category, frozenset(w for w in words if w)))
    return IdentifierClassifier(tuple(categories), default=default, ignore_case=ignore_case)


CELLTAIL_CLASSIFIER = create_keyword_mapper(
    {
        IdentifierCategory.INVALID_DEPRECATED: "debugger",
        IdentifierCategory.SUPPORT_FUNCTION: "",
        IdentifierCategory.PSEUDO_VARIABLE: "self|cls",
        IdentifierCategory.CONSTANT: "N|false|true",
        IdentifierCategory.KEYWORD: "fn|I|INPUT|D|DEBUG|O|OUTPUT",
    }
)


def classify(word: str) -> IdentifierCategory:
    """Classify a word with the CellTail category sets."""
    return CELLTAIL_CLASSIFIER.classify(word)
