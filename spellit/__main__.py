# Copyright 2026, SpellIt contributors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from .cli import SpellItCLI
from typing import NoReturn, Sequence


def main(args: Sequence[str] | None = None) -> NoReturn:
    SpellItCLI().main(args)


if __name__ == "__main__":
    main()
