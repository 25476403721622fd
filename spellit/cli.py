# Copyright 2026, SpellIt contributors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from . import argx, sources
from .cliarg import arg
from .corrector import CorrectorSettings, FuzzyCorrector
from .distance import EditDistance
from .kgram_index import KgramIndex
from typing import Any


class SpellItCLI(argx.CommandLineTool):
    def __init__(self) -> None:
        argx.CommandLineTool.__init__(self, "spellit")

    def _option(self, name: str, default: Any = None) -> Any:
        """Command line value, then config file value, then `default`"""
        value = getattr(self.args, name, None)
        if value is None:
            value = self.config.get(name, default)
        return value

    def _location(self, name: str) -> str:
        location = self._option(name)
        if not location:
            raise argx.UserError(
                "Specify {0}: use --{0} in the command line, SPELLIT_{1} or the {0} item in the config file.".format(
                    name, name.upper()
                )
            )
        return location

    def _settings(self) -> CorrectorSettings:
        defaults = CorrectorSettings()
        kgram_size = self._option("kgram_size", defaults.kgram_size)
        misspell_ratio = self._option("misspell_ratio", defaults.misspell_ratio)
        length_ceilings = self._option("length_ceilings", defaults.length_ceilings)
        try:
            settings = CorrectorSettings(
                kgram_size=int(kgram_size),
                misspell_ratio=int(misspell_ratio),
                length_ceilings=tuple((int(min_length), int(ceiling)) for min_length, ceiling in length_ceilings),
            )
        except (TypeError, ValueError) as ex:
            raise argx.UserError("Invalid corrector settings: {}".format(ex)) from ex
        if settings.kgram_size < 1:
            raise argx.UserError("k-gram size must be positive, got {}".format(settings.kgram_size))
        return settings

    def _dictionary_words(self) -> list[str]:
        location = self._location("dictionary")
        words = list(sources.read_dictionary(location, timeout=self.args.request_timeout))
        self.log.debug("read %d dictionary words from %r", len(words), location)
        return words

    def _field(self) -> int | None:
        field = self._option("field")
        if field is None:
            return None
        if isinstance(field, bool) or not isinstance(field, int) or field < 0:
            raise argx.UserError("Record field must be a non-negative integer, got {!r}".format(field))
        return field

    def _build_corrector(self) -> FuzzyCorrector:
        dictionary_words = self._dictionary_words()
        lines = sources.read_lines(self._location("corpus"), timeout=self.args.request_timeout)
        corpus_words = sources.iter_record_words(
            lines,
            field=self._field(),
            delimiter=self.args.delimiter,
            strip_markup=self.args.strip_html,
        )
        return FuzzyCorrector(corpus_words, dictionary_words, settings=self._settings())

    @arg.corpus_options
    @arg.json
    @arg.csv
    @arg("word", nargs="+", help="Word to correct")
    def correct(self) -> None:
        """Show the correction of each word"""
        corrector = self._build_corrector()
        rows = [
            {
                "word": word,
                "correction": corrector.correction_of(word),
                "frequency": corrector.frequencies.get(word, 0),
            }
            for word in self.args.word
        ]
        self.print_rows(rows, ["word", "correction", "frequency"])

    @arg.json
    @arg.csv
    @arg("dictionary_word", help="Correctly spelled word")
    @arg("word", help="Word to compare against it")
    def distance(self) -> None:
        """Show the edit distance and the misspelling between two words"""
        info = EditDistance(self.args.dictionary_word, self.args.word)
        misspelling = info.misspelling()
        rows = [
            {
                "dictionary_word": info.dictionary_word,
                "word": info.word,
                "distance": info.distance,
                "dictionary_span": misspelling.dictionary_span,
                "word_span": misspelling.word_span,
            }
        ]
        self.print_rows(rows, ["dictionary_word", "word", "distance", "dictionary_span", "word_span"])

    @arg.corpus_options
    @arg.json
    @arg.csv
    def corpus__corrections(self) -> None:
        """List the corrections learned from the corpus"""
        corrector = self._build_corrector()
        frequencies = corrector.frequencies
        rows = [
            {
                "word": word,
                "correction": correction,
                "word_frequency": frequencies.get(word, 0),
                "correction_frequency": frequencies.get(correction, 0),
            }
            for word, correction in corrector.fuzzy_map.items()
        ]
        self.print_rows(rows, ["word", "correction", "word_frequency", "correction_frequency"])

    @arg.corpus_options
    @arg.json
    @arg.csv
    def corpus__variants(self) -> None:
        """List dictionary words with the misspelled variants found in the corpus"""
        corrector = self._build_corrector()
        rows = [
            {"correction": correction, "count": len(variants), "variants": variants}
            for correction, variants in corrector.variants_by_correction().items()
        ]
        self.print_rows(rows, [["correction", "count"], "variants"])

    @arg.corpus_options
    @arg.json
    @arg.csv
    def corpus__patterns(self) -> None:
        """List misspelling patterns by how often they occur"""
        corrector = self._build_corrector()
        patterns = sorted(corrector.misspelling_patterns.items(), key=lambda item: (-item[1], item[0]))
        rows = [
            {"dictionary_span": pattern.dictionary_span, "word_span": pattern.word_span, "count": count}
            for pattern, count in patterns
        ]
        self.print_rows(rows, ["dictionary_span", "word_span", "count"])

    @arg.corpus_options
    @arg.json
    @arg.csv
    @arg("--max-distance", type=int, default=4, help="Largest distance to report")
    def corpus__distances(self) -> None:
        """Show how candidate corrections are spread over edit distances"""
        corrector = self._build_corrector()
        distribution = corrector.distance_distribution(max_distance=self.args.max_distance)
        rows = [{"distance": dist, "share": share} for dist, share in distribution.items()]
        self.print_rows(rows, ["distance", "share"])

    @arg.dictionary
    @arg.kgram_size
    @arg.request_timeout
    @arg.json
    @arg.csv
    @arg("--limit", type=int, default=None, help="Show only the N largest buckets")
    def dictionary__kgrams(self) -> None:
        """Show the k-grams of the dictionary index by bucket size"""
        index = KgramIndex(self._dictionary_words(), k=self._settings().kgram_size)
        sizes = index.bucket_sizes()
        if self.args.limit is not None:
            sizes = sizes[: self.args.limit]
        rows = [{"kgram": kgram, "words": count} for kgram, count in sizes]
        self.print_rows(rows, ["kgram", "words"])


if __name__ == "__main__":
    SpellItCLI().main()
