# Copyright 2026, SpellIt contributors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""
Configurable parameters via environment variables
"""

import os

USER_HOME = os.path.expanduser("~")

SPELLIT_CONFIG_DIR = os.environ.get("SPELLIT_CONFIG_DIR", os.path.join(USER_HOME, ".config", "spellit"))

SPELLIT_CONFIG = os.environ.get("SPELLIT_CONFIG", os.path.join(SPELLIT_CONFIG_DIR, "spellit.json"))
SPELLIT_CORPUS = os.environ.get("SPELLIT_CORPUS")
SPELLIT_DICTIONARY = os.environ.get("SPELLIT_DICTIONARY")
