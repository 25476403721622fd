# Copyright 2026, SpellIt contributors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from .argx import arg
from spellit import envdefault


def non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise ValueError(f"expected a non-negative integer, got {number}")
    return number


arg.corpus = arg(
    "--corpus",
    help="Corpus file or http(s) URL [SPELLIT_CORPUS], default %(default)r",
    default=envdefault.SPELLIT_CORPUS,
)
arg.csv = arg("--csv", help="CSV output", action="store_true", default=False)
arg.delimiter = arg("--delimiter", default=";", help="Field delimiter of corpus records")
arg.dictionary = arg(
    "--dictionary",
    help="Dictionary file or http(s) URL, one word per line [SPELLIT_DICTIONARY], default %(default)r",
    default=envdefault.SPELLIT_DICTIONARY,
)
arg.field = arg(
    "--field",
    type=non_negative_int,
    default=None,
    help="Zero-based field of each corpus record holding the text (default: the whole line)",
)
arg.json = arg("--json", help="Raw json output", action="store_true", default=False)
arg.kgram_size = arg("--kgram-size", type=int, default=None, help="Length of the indexed k-grams (default: 3)")
arg.misspell_ratio = arg(
    "--misspell-ratio",
    type=non_negative_int,
    default=None,
    help="How many times more frequent a correction must be than the misspelled word (default: 27)",
)
arg.request_timeout = arg(
    "--request-timeout",
    type=int,
    default=None,
    help="Wait for up to N seconds for a corpus or dictionary download (default: infinite)",
)
arg.strip_html = arg("--strip-html", action="store_true", default=False, help="Remove HTML tags from corpus text")


def corpus_options(fun):
    """All the options needed to build a corrector from a corpus and a dictionary"""
    for decorator in (
        arg.dictionary,
        arg.corpus,
        arg.field,
        arg.delimiter,
        arg.strip_html,
        arg.misspell_ratio,
        arg.kgram_size,
        arg.request_timeout,
    ):
        fun = decorator(fun)
    return fun


arg.corpus_options = corpus_options
