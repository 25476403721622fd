# Copyright 2026, SpellIt contributors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from spellit.corrector import CorrectorSettings, FuzzyCorrector
from spellit.distance import distance, EditDistance, InvalidWordError, local_misspelling, Misspelling
from spellit.kgram_index import KgramIndex, kgrams_of

try:
    from .version import __version__
except ImportError:
    __version__ = "UNKNOWN"

__all__ = [
    "CorrectorSettings",
    "distance",
    "EditDistance",
    "FuzzyCorrector",
    "InvalidWordError",
    "KgramIndex",
    "kgrams_of",
    "local_misspelling",
    "Misspelling",
]
