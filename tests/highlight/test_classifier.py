# Copyright 2026 CellTail Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the CellTail identifier classifier."""

import pytest

from celltail.highlight import (
    CELLTAIL_CLASSIFIER,
    IdentifierCategory,
    classify,
    create_keyword_mapper,
)

# ###############
# Configured Categories
# ###############


class TestCellTailCategories:
    @pytest.mark.parametrize("word", ["fn", "I", "INPUT", "D", "DEBUG", "O", "OUTPUT"])
    def test_keywords(self, word: str) -> None:
        assert classify(word) == IdentifierCategory.KEYWORD

    @pytest.mark.parametrize("word", ["N", "false", "true"])
    def test_constants(self, word: str) -> None:
        assert classify(word) == IdentifierCategory.CONSTANT

    @pytest.mark.parametrize("word", ["self", "cls"])
    def test_pseudo_variables(self, word: str) -> None:
        assert classify(word) == IdentifierCategory.PSEUDO_VARIABLE

    def test_debugger_is_invalid_deprecated(self) -> None:
        assert classify("debugger") == IdentifierCategory.INVALID_DEPRECATED

    def test_support_functions_are_empty(self) -> None:
        assert CELLTAIL_CLASSIFIER.words(IdentifierCategory.SUPPORT_FUNCTION) == frozenset()

    def test_configured_sets_are_disjoint(self) -> None:
        sets = [words for _, words in CELLTAIL_CLASSIFIER.categories]
        for index, words in enumerate(sets):
            for other in sets[index + 1 :]:
                assert not words & other

    def test_category_values_are_token_labels(self) -> None:
        assert IdentifierCategory.CONSTANT.value == "constant.language"
        assert IdentifierCategory.PSEUDO_VARIABLE.value == "variable.language"
        assert IdentifierCategory.IDENTIFIER.value == "identifier"


# ###############
# Fallback
# ###############


class TestFallback:
    @pytest.mark.parametrize("word", ["x", "fnx", "Fn", "input", "_", "$tmp", "def", "class"])
    def test_unconfigured_words_are_identifiers(self, word: str) -> None:
        assert classify(word) == IdentifierCategory.IDENTIFIER

    def test_classifier_is_callable(self) -> None:
        assert CELLTAIL_CLASSIFIER("OUTPUT") == IdentifierCategory.KEYWORD


# ###############
# Keyword Mapper
# ###############


class TestCreateKeywordMapper:
    def test_string_and_iterable_word_lists(self) -> None:
        mapper = create_keyword_mapper(
            {
                IdentifierCategory.KEYWORD: "if|else",
                IdentifierCategory.CONSTANT: ["nil"],
            }
        )
        assert mapper.classify("else") == IdentifierCategory.KEYWORD
        assert mapper.classify("nil") == IdentifierCategory.CONSTANT
        assert mapper.classify("other") == IdentifierCategory.IDENTIFIER

    def test_empty_word_list_matches_nothing(self) -> None:
        mapper = create_keyword_mapper({IdentifierCategory.SUPPORT_FUNCTION: ""})
        assert mapper.words(IdentifierCategory.SUPPORT_FUNCTION) == frozenset()
        assert mapper.classify("") == IdentifierCategory.IDENTIFIER

    def test_first_listed_category_wins_on_overlap(self) -> None:
        mapper = create_keyword_mapper(
            {
                IdentifierCategory.INVALID_DEPRECATED: "both",
                IdentifierCategory.KEYWORD: "both|only",
            }
        )
        assert mapper.classify("both") == IdentifierCategory.INVALID_DEPRECATED
        assert mapper.classify("only") == IdentifierCategory.KEYWORD

    def test_custom_default_and_split_char(self) -> None:
        mapper = create_keyword_mapper(
            {IdentifierCategory.KEYWORD: "a,b"},
            default=IdentifierCategory.SUPPORT_FUNCTION,
            split_char=",",
        )
        assert mapper.classify("b") == IdentifierCategory.KEYWORD
        assert mapper.classify("c") == IdentifierCategory.SUPPORT_FUNCTION

    def test_ignore_case(self) -> None:
        mapper = create_keyword_mapper({IdentifierCategory.KEYWORD: "Select"}, ignore_case=True)
        assert mapper.classify("SELECT") == IdentifierCategory.KEYWORD
        assert mapper.classify("select") == IdentifierCategory.KEYWORD
