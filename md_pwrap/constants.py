"""Constants used across the md-pwrap package."""

from __future__ import annotations

import re

from .config import WrapConfig

DEFAULT_CONFIG = WrapConfig()

DEFAULT_MAX_FILE_SIZE = DEFAULT_CONFIG.max_file_size

# Markdown syntax
BACKTICK = "`"
HYPHEN = "-"
IMAGE_MARKER = "!"
LINK_TEXT_OPEN = "["
LINK_TEXT_CLOSE = "]"
LINK_TARGET_OPENERS = frozenset("([")

LINE_TERMINATOR = "\n"
BLANK_LINE_PATTERN = re.compile(r"\n[ \t]*\r?\n")

# UAX #14 classes after which a break is mandatory (LB4, LB5).
# CR is mandatory too, unless followed by LF.
MANDATORY_BREAK_CLASSES = frozenset({"BK", "LF", "NL"})
CARRIAGE_RETURN_CLASS = "CR"
