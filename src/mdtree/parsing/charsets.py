"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from mdtree.parsing.charsets import WHITESPACE

    if char in WHITESPACE:  # O(1) lookup
        ...
"""

import re

WHITESPACE: frozenset[str] = frozenset(" \t\n\r\f\v")

# Characters allowed before content on an indented line
INDENT: frozenset[str] = frozenset(" \t")

# Emphasis delimiter characters (single = emphasis, doubled = strong)
EMPHASIS_DELIMITERS: frozenset[str] = frozenset("*_")

# Strikethrough markers, in the order they are tried
TILDE_STRIKE = "~~"
DASH_STRIKE = "--"

# Fenced code marker
CODE_FENCE = "```"

# Unordered list marker characters (followed by a space or tab)
UNORDERED_LIST_MARKERS: frozenset[str] = frozenset("-*+")

# Thematic break characters (3+ of the same on a line)
THEMATIC_BREAK_CHARS: frozenset[str] = frozenset("-*_")

# Ordered list marker: digit run, "." or ")", then whitespace or end of line
ORDERED_LIST_MARKER = re.compile(r"(\d{1,9})[.)](?:[ \t]|$)")

# A list continuation line is indented by three spaces or a tab
CONTINUATION_INDENTS: tuple[str, ...] = ("   ", "\t")

# Quote characters accepted around a link/image title
TITLE_QUOTES: dict[str, str] = {'"': '"', "'": "'", "(": ")"}
