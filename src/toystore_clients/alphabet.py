from __future__ import annotations

import re
import string
from typing import Optional

ALPHABET = string.ascii_lowercase
ALL_LETTERS_PRESENT = "-"

_NON_ASCII_LETTER_RE = re.compile(r"[^a-z]")


def alphabet_letters(text: Optional[str]) -> str:
    """
    Lower-case ``text`` and keep only the unaccented letters ``a``-``z``.

    Accented characters are dropped rather than folded, so ``"ã"`` does not
    count as ``"a"``.
    """
    return _NON_ASCII_LETTER_RE.sub("", (text or "").lower())


def first_missing_letter(text: Optional[str]) -> str:
    present = set(alphabet_letters(text))
    for letter in ALPHABET:
        if letter not in present:
            return letter
    return ALL_LETTERS_PRESENT


__all__ = ["ALL_LETTERS_PRESENT", "ALPHABET", "alphabet_letters", "first_missing_letter"]
