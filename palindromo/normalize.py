"""
Normalization and palindrome check.

Rules:
- case folding
- accents/diacritics removed (NFD + combining marks block)
- everything outside a-z / 0-9 dropped, so phrases become a single token
- an empty normalized word is never a palindrome
"""

from __future__ import annotations

import re
import unicodedata
from typing import Any


_DIACRITICS = re.compile(r"[\u0300-\u036f]")
_NOT_ALNUM = re.compile(r"[^a-z0-9]")


def normalize_word(text: Any) -> str:
    """
    Map raw input to its canonical form for comparison.

    Total and idempotent: None becomes "", anything else goes through str().
    """
    s = "" if text is None else str(text)
    s = unicodedata.normalize("NFD", s.casefold())
    s = _DIACRITICS.sub("", s)
    return _NOT_ALNUM.sub("", s)


def is_palindrome(text: Any) -> bool:
    normalized = normalize_word(text)
    if not normalized:
        # empty is not considered a palindrome here
        return False
    return normalized == normalized[::-1]
