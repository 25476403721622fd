# Copyright 2026, SpellIt contributors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

import re

tag_re = re.compile(r"<[^>]*?>", re.IGNORECASE)
non_word_re = re.compile(r"\W+")


def strip_html(text: str) -> str:
    return tag_re.sub("", text)


def tokenize(text: str) -> list[str]:
    """Split text into word tokens, dropping punctuation and whitespace"""
    return [token for token in non_word_re.split(text) if token]
