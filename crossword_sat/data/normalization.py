"""Shared helpers for word list normalization."""

from __future__ import annotations

import re
import unicodedata

from ..core.constants import ALPHABET

SEPARATORS_RE = re.compile(r"[-'.\s]")


def clean_word(text: str) -> str:
    """Return the uppercase A-Z form of ``text``, or ``""`` if it has none.

    Separators (hyphens, apostrophes, dots, whitespace) are dropped and
    accented letters folded to their ASCII base letter. Words keeping any
    other character are rejected.
    """

    if not text:
        return ""
    decomposed = unicodedata.normalize("NFKD", SEPARATORS_RE.sub("", text))
    folded = "".join(char for char in decomposed if not unicodedata.combining(char))
    word = folded.upper()
    if not all(char in ALPHABET for char in word):
        return ""
    return word


__all__ = ["clean_word"]
