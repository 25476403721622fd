# Copyright 2026, SpellIt contributors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Learn a misspelling -> correction map from corpus word frequencies"""
from __future__ import annotations

from .distance import EditDistance, Misspelling
from .kgram_index import DEFAULT_K, KgramIndex
from collections import Counter
from types import MappingProxyType
from typing import Callable, Iterable, Iterator, Mapping, NamedTuple, Sequence, TypeVar

import logging

T = TypeVar("T")

log = logging.getLogger("spellit.corrector")


class CorrectorSettings(NamedTuple):
    kgram_size: int = DEFAULT_K
    # A correction must be this many times more frequent than the misspelling
    misspell_ratio: int = 27
    # (minimum word length, maximum edit distance); shorter words get 0
    length_ceilings: tuple[tuple[int, int], ...] = ((5, 1), (10, 2))


def max_distance_for(length: int, length_ceilings: Sequence[tuple[int, int]]) -> int:
    ceiling = 0
    for min_length, max_distance in sorted(length_ceilings):
        if length >= min_length:
            ceiling = max_distance
    return ceiling


def element_at_max(items: Iterable[T], key: Callable[[T], int]) -> T | None:
    """First item with the highest key, or None for an empty iterable"""
    best: T | None = None
    best_value = 0
    for item in items:
        value = key(item)
        if best is None or value > best_value:
            best, best_value = item, value
    return best


class FuzzyCorrector:
    """Corrections for the unknown words of a corpus against a dictionary.

    Everything is computed at construction time:

    * a k-gram index over `dictionary_words` narrows down the candidates for
      each corpus word missing from the dictionary,
    * candidates farther away than the length-dependent edit distance ceiling
      are dropped, as are those not `misspell_ratio` times more frequent in
      the corpus than the unknown word,
    * when several candidates remain, the one whose misspelling pattern is the
      most common among the distance 1 pairs wins.
    """

    def __init__(
        self,
        corpus_words: Iterable[str],
        dictionary_words: Iterable[str],
        settings: CorrectorSettings = CorrectorSettings(),
    ) -> None:
        self.settings = settings
        self.index = KgramIndex(dictionary_words, k=settings.kgram_size)
        self._frequencies = Counter(corpus_words)
        unknown_words = [word for word in self._frequencies if not self.index.contains_word(word)]
        log.info(
            "%d distinct corpus words, %d not in the dictionary of %d words",
            len(self._frequencies),
            len(unknown_words),
            len(self.index),
        )

        self._candidates = tuple(self._find_candidates(unknown_words))
        for dist, share in self.distance_distribution().items():
            log.debug("distance %d: %.3f of candidates", dist, share)

        accepted = [info for info in self._candidates if self._is_trusted(info)]
        self._patterns = Counter(info.misspelling() for info in accepted if info.distance == 1)
        self._fuzzy_map = self._choose_corrections(accepted)
        log.info("%d corrections from %d candidate pairs", len(self._fuzzy_map), len(self._candidates))

    @property
    def frequencies(self) -> Mapping[str, int]:
        return MappingProxyType(self._frequencies)

    @property
    def fuzzy_map(self) -> Mapping[str, str]:
        return MappingProxyType(self._fuzzy_map)

    @property
    def misspelling_patterns(self) -> Mapping[Misspelling, int]:
        return MappingProxyType(self._patterns)

    @property
    def candidates(self) -> tuple[EditDistance, ...]:
        return self._candidates

    def correction_of(self, word: str) -> str | None:
        if self.index.contains_word(word):
            return word
        return self._fuzzy_map.get(word)

    def distance_distribution(self, max_distance: int = 4) -> dict[int, float]:
        total = len(self._candidates)
        counts = Counter(info.distance for info in self._candidates)
        return {dist: (counts[dist] / total if total else 0.0) for dist in range(max_distance + 1)}

    def variants_by_correction(self) -> dict[str, list[str]]:
        variants: dict[str, list[str]] = {}
        for word, correction in self._fuzzy_map.items():
            variants.setdefault(correction, []).append(word)
        return dict(sorted(variants.items(), key=lambda item: -len(item[1])))

    def _find_candidates(self, unknown_words: Iterable[str]) -> Iterator[EditDistance]:
        for word in unknown_words:
            ceiling = max_distance_for(len(word), self.settings.length_ceilings)
            for dictionary_word in self.index.candidates_sharing_any_kgram(word):
                info = EditDistance(dictionary_word, word)
                if info.distance <= ceiling:
                    yield info

    def _is_trusted(self, info: EditDistance) -> bool:
        if info.dictionary_word == info.word:
            return True
        if info.word not in self._frequencies or info.dictionary_word not in self._frequencies:
            return False
        return self._frequencies[info.word] * self.settings.misspell_ratio <= self._frequencies[info.dictionary_word]

    def _choose_corrections(self, accepted: Iterable[EditDistance]) -> dict[str, str]:
        groups: dict[str, list[EditDistance]] = {}
        for info in accepted:
            groups.setdefault(info.word, []).append(info)

        fuzzy_map: dict[str, str] = {}
        for word, infos in groups.items():
            infos.sort(key=lambda info: self._frequencies.get(info.dictionary_word, 0))
            best = element_at_max(infos, key=lambda info: self._patterns.get(info.misspelling(), 0))
            if best is None:
                continue
            fuzzy_map[word] = best.dictionary_word
        return fuzzy_map
