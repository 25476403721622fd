# Copyright 2026, SpellIt contributors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Inverted k-gram index over a reference dictionary"""
from __future__ import annotations

from typing import Final, Iterable

BOUNDARY_MARKER: Final = "$"
DEFAULT_K: Final = 3


def kgrams_of(word: str, k: int = DEFAULT_K) -> set[str]:
    """Return the k-grams of `word` plus its "starts with" boundary k-gram.

    Words shorter than `k` have no k-grams at all.
    """
    if k > len(word):
        return set()
    kgrams = {word[i : i + k] for i in range(len(word) - k + 1)}
    kgrams.add(BOUNDARY_MARKER + word[: k - 1])
    return kgrams


def build(words: Iterable[str], k: int = DEFAULT_K) -> dict[str, set[int]]:
    """Map every k-gram to the positions of the words containing it"""
    kgrams: dict[str, set[int]] = {}
    for position, word in enumerate(words):
        for kgram in kgrams_of(word, k):
            kgrams.setdefault(kgram, set()).add(position)
    return kgrams


class KgramIndex:
    def __init__(self, words: Iterable[str], k: int = DEFAULT_K) -> None:
        if k < 1:
            raise ValueError(f"k-gram size must be positive, got {k}")
        self.k = k
        self._words = tuple(words)
        self._known = frozenset(self._words)
        self.kgrams = build(self._words, k)

    @property
    def words(self) -> tuple[str, ...]:
        return self._words

    def __len__(self) -> int:
        return len(self._words)

    def contains_word(self, word: str) -> bool:
        return word in self._known

    def candidates_sharing_any_kgram(self, word: str) -> list[str]:
        """Distinct dictionary words sharing at least one k-gram with `word`.

        Words are returned in order of their first position in the dictionary.
        """
        positions: set[int] = set()
        for kgram in kgrams_of(word, self.k):
            bucket = self.kgrams.get(kgram)
            if bucket:
                positions.update(bucket)

        seen: set[str] = set()
        candidates: list[str] = []
        for position in sorted(positions):
            candidate = self._words[position]
            if candidate not in seen:
                seen.add(candidate)
                candidates.append(candidate)
        return candidates

    def bucket_sizes(self) -> list[tuple[str, int]]:
        sizes = [(kgram, len(positions)) for kgram, positions in self.kgrams.items()]
        return sorted(sizes, key=lambda item: (-item[1], item[0]))
