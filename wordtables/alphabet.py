#!/usr/bin/env python3
"""
Alphabet and word normalization.

All words pass through normalize_word() before classification. Only lowercase
Russian letters are admitted, with ё folded into е.
"""

import re
from typing import Optional, Tuple

LETTERS = "абвгдежзийклмнопрстуфхцчшщъыьэюя"
LETTER_SET = frozenset(LETTERS)

# Diacritic variants folded into their base letter
FOLDED_LETTERS = {"ё": "е"}

WORD_LENGTHS: Tuple[int, ...] = (4, 5, 6, 7)

_WORD_RE = re.compile(r"[а-я]+")


def normalize_word(line: str) -> str:
    """Trim, lowercase and fold a raw line into its canonical form."""
    word = line.strip().lower()
    for variant, base in FOLDED_LETTERS.items():
        word = word.replace(variant, base)
    return word


def is_alphabetic(word: str) -> bool:
    """True if the word is non-empty and made only of alphabet letters."""
    return bool(_WORD_RE.fullmatch(word))


def classify_word(word: str, lengths: Tuple[int, ...] = WORD_LENGTHS) -> Optional[int]:
    """
    Return the bucket length for a normalized word, or None if it is rejected.

    A word is rejected when its length is not one of `lengths` or when it
    contains a character outside the alphabet.
    """
    if len(word) not in lengths:
        return None
    if not is_alphabetic(word):
        return None
    return len(word)
