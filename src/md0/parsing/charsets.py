"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from md0.parsing.charsets import FENCE_INFO_PUNCTUATION

    if char in FENCE_INFO_PUNCTUATION:
        ...
"""

# ATX heading marker
HEADING_MARKER = "#"

# Maximum ATX heading level (####### is paragraph text)
MAX_HEADING_LEVEL = 6

# Dash line marker (horizontal rule or setext underline)
DASH = "-"
DASH_LINE_PREFIX = "---"

# Code fence delimiter
FENCE = "```"

# Characters allowed in a fence language tag besides alphanumerics
FENCE_INFO_PUNCTUATION: frozenset[str] = frozenset("+-_")

# Inline link and image openers
LINK_OPENER = "["
IMAGE_OPENER = "!["
