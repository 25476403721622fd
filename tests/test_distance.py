# Copyright 2026, SpellIt contributors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from spellit.distance import distance, distance_matrix, EditDistance, InvalidWordError, local_misspelling, Misspelling

import pytest


@pytest.mark.parametrize(
    "a,b,expected",
    [
        ("ацитил", "ацетил", 1),
        ("ацтиил", "ацетил", 2),
        ("почему", "почиму", 1),
        ("why", "what", 2),
        ("why", "wyh", 1),
        ("why", "hwy", 1),
        ("", "", 0),
        ("", "abc", 3),
        ("correct", "correkt", 1),
        ("correct", "corect", 1),
        ("international", "intrenationl", 2),
    ],
)
def test_distance(a: str, b: str, expected: int) -> None:
    assert distance(a, b) == expected
    assert distance(b, a) == expected


@pytest.mark.parametrize("word", ["", "a", "why", "почему", "mississippi"])
def test_distance_to_itself_is_zero(word: str) -> None:
    assert distance(word, word) == 0


def test_only_adjacent_transpositions_are_recognized() -> None:
    # "ca" -> "abc" would be 2 with unrestricted transpositions
    assert distance("ca", "ac") == 1
    assert distance("ac", "abc") == 1
    assert distance("ca", "abc") == 3


def test_matrix_base_cases() -> None:
    matrix = distance_matrix("abc", "ab")
    assert len(matrix) == 4
    assert all(len(row) == 3 for row in matrix)
    assert [row[0] for row in matrix] == [0, 1, 2, 3]
    assert matrix[0] == [0, 1, 2]
    assert matrix[-1][-1] == 1


@pytest.mark.parametrize("a,b", [(None, "word"), ("word", None), (None, None)])
def test_missing_word_is_rejected(a: str, b: str) -> None:
    with pytest.raises(InvalidWordError):
        distance(a, b)
    with pytest.raises(ValueError):
        EditDistance(a, b)


@pytest.mark.parametrize(
    "dictionary_word,word,dictionary_span,word_span",
    [
        ("ацитил", "ацетил", "и", "е"),
        ("цаетил", "ацетил", "ца", "ац"),
        ("почему", "почиму", "е", "и"),
        ("what", "hat", "w", ""),
        ("wght", "what", "g", ""),
        ("why", "whyt", "", "t"),
        ("whyt", "why", "t", ""),
        ("hat", "what", "", "w"),
        ("correct", "korrect", "c", "k"),
        ("why", "why", "", ""),
        ("why", "wyh", "hy", "yh"),
    ],
)
def test_local_misspelling(dictionary_word: str, word: str, dictionary_span: str, word_span: str) -> None:
    assert local_misspelling(dictionary_word, word) == Misspelling(dictionary_span, word_span)


def test_local_misspelling_describes_only_first_divergence() -> None:
    # two substitutions, only the first one is reported
    assert local_misspelling("knowledge", "knowlidgi") == ("e", "i")


def test_misspelling_is_a_value_type() -> None:
    counts = {Misspelling("c", "k"): 1}
    counts[local_misspelling("correct", "korrect")] += 1
    assert counts == {("c", "k"): 2}
    assert Misspelling("c", "k").dictionary_span == "c"
    assert Misspelling("c", "k").word_span == "k"


def test_edit_distance() -> None:
    info = EditDistance("correct", "correkt")
    assert info.dictionary_word == "correct"
    assert info.word == "correkt"
    assert info.distance == 1
    assert len(info.matrix) == len("correct") + 1
    assert info.misspelling() == ("c", "k")
    assert info.misspelling() is info.misspelling()
    assert repr(info) == "EditDistance('correct', 'correkt', distance=1)"
