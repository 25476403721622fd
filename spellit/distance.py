# Copyright 2026, SpellIt contributors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Restricted edit distance (optimal string alignment) and local misspelling spans"""
from __future__ import annotations

from typing import NamedTuple


class InvalidWordError(ValueError):
    """Word argument is missing"""


class Misspelling(NamedTuple):
    """Differing span between a dictionary word and a misspelled word"""

    dictionary_span: str
    word_span: str


def _check_word(name: str, value: str | None) -> str:
    if value is None:
        raise InvalidWordError(f"{name} must be a string, not None")
    return value


def distance_matrix(a: str, b: str) -> list[list[int]]:
    """Dynamic programming table of the restricted edit distance from `a` to `b`.

    Insertion, deletion and substitution cost 1, as does swapping the two
    immediately preceding characters. Transpositions further away are not
    recognized, so this is not the unrestricted Damerau-Levenshtein metric.
    """
    a = _check_word("a", a)
    b = _check_word("b", b)
    m = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i in range(len(a) + 1):
        m[i][0] = i
    for j in range(len(b) + 1):
        m[0][j] = j

    for i in range(1, len(a) + 1):
        for j in range(1, len(b) + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            m[i][j] = min(
                m[i - 1][j] + 1,  # deletion
                m[i][j - 1] + 1,  # insertion
                m[i - 1][j - 1] + cost,  # substitution
            )
            if i > 1 and j > 1 and a[i - 1] == b[j - 2] and a[i - 2] == b[j - 1]:
                m[i][j] = min(m[i][j], m[i - 2][j - 2] + cost)
    return m


def distance(a: str, b: str) -> int:
    return distance_matrix(a, b)[-1][-1]


def local_misspelling(dictionary_word: str, word: str) -> Misspelling:
    """Locate the edit that turns `dictionary_word` into `word`.

    Scans forward to the first differing position and looks one character
    ahead to tell a transposition, deletion, insertion or substitution apart.
    Only a single localized edit is described; for anything larger the result
    is whatever the first divergence looks like.
    """
    dictionary_word = _check_word("dictionary_word", dictionary_word)
    word = _check_word("word", word)
    min_len = min(len(dictionary_word), len(word))
    i = 0
    while i < min_len and dictionary_word[i] == word[i]:
        i += 1

    if i == min_len:
        if len(dictionary_word) > len(word):
            return Misspelling(dictionary_word[i], "")
        if len(dictionary_word) < len(word):
            return Misspelling("", word[i])
        return Misspelling("", "")

    if i + 1 < len(dictionary_word) and dictionary_word[i + 1] == word[i]:
        if i + 1 < len(word) and dictionary_word[i] == word[i + 1]:
            return Misspelling(dictionary_word[i : i + 2], word[i : i + 2])
        return Misspelling(dictionary_word[i], "")
    if i + 1 < len(word) and dictionary_word[i] == word[i + 1]:
        return Misspelling("", word[i])

    return Misspelling(dictionary_word[i], word[i])


class EditDistance:
    """Distance between a dictionary word and a corpus word, with its DP matrix"""

    def __init__(self, dictionary_word: str, word: str) -> None:
        self.dictionary_word = _check_word("dictionary_word", dictionary_word)
        self.word = _check_word("word", word)
        self.matrix = distance_matrix(self.dictionary_word, self.word)
        self._misspelling: Misspelling | None = None

    @property
    def distance(self) -> int:
        return self.matrix[len(self.dictionary_word)][len(self.word)]

    def misspelling(self) -> Misspelling:
        if self._misspelling is None:
            self._misspelling = local_misspelling(self.dictionary_word, self.word)
        return self._misspelling

    def __repr__(self) -> str:
        return "{}({!r}, {!r}, distance={})".format(
            self.__class__.__name__, self.dictionary_word, self.word, self.distance
        )
