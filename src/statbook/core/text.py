from __future__ import annotations

import re

_whitespace_re = re.compile(r"\s+")


def to_slug(value: str) -> str:
    """Normalize a free-text player name into the provider-facing identifier.

    Whitespace runs collapse to a single dash and case is folded, so
    "  JOSH   allen" and "Josh Allen" both become "josh-allen". Punctuation is
    passed through untouched.
    """

    v = value.strip().lower()
    return _whitespace_re.sub("-", v)
