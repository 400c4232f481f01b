#!/usr/bin/env python3
"""
Length-partitioned word buckets.

Each LengthBucket owns the words of one length, the per-letter counts
accumulated from them and, once rated, the frozen letter ratings.
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List, Optional, Tuple

from .alphabet import LETTERS, is_alphabetic
from .errors import BucketStateError
from .scoring import rate_letters, score_letters

logger = logging.getLogger(__name__)


def new_letter_counts() -> Dict[str, int]:
    """Count table with every alphabet letter present at zero."""
    return {letter: 0 for letter in LETTERS}


@dataclass(frozen=True)
class WordRecord:
    """A scored word ready for persistence"""
    word: str
    letters: Tuple[str, ...]
    score: Decimal


@dataclass
class LengthBucket:
    """Words of a single length with their letter counts and ratings"""
    length: int
    words: Dict[str, Tuple[str, ...]] = field(default_factory=dict)
    letter_counts: Dict[str, int] = field(default_factory=new_letter_counts)
    _ratings: Optional[Dict[str, Decimal]] = field(default=None, repr=False)

    def __len__(self) -> int:
        return len(self.words)

    def __contains__(self, word: str) -> bool:
        return word in self.words

    @property
    def total_slots(self) -> int:
        return len(self.words) * self.length

    @property
    def is_rated(self) -> bool:
        return self._ratings is not None

    def add(self, word: str) -> bool:
        """
        Admit a normalized word into the bucket.

        Returns False for a word that is already present; its letters are
        not counted again.
        """
        if self.is_rated:
            raise BucketStateError(f"Bucket {self.length} is already rated, cannot add '{word}'")
        if len(word) != self.length:
            raise ValueError(f"Word '{word}' does not fit bucket of length {self.length}")
        if not is_alphabetic(word):
            raise ValueError(f"Word '{word}' contains letters outside the alphabet")
        if word in self.words:
            return False

        letters = tuple(word)
        for letter in letters:
            self.letter_counts[letter] += 1
        self.words[word] = letters
        return True

    def rate(self) -> Dict[str, Decimal]:
        """Compute letter ratings once; later calls return the same table."""
        if self._ratings is None:
            self._ratings = rate_letters(self.letter_counts, len(self.words), self.length)
            if not self.words:
                logger.info(f"Bucket {self.length} is empty, all letter ratings are zero")
            else:
                logger.info(f"Rated bucket {self.length}: {len(self.words)} words, "
                            f"{self.total_slots} letter slots")
        return self._ratings

    @property
    def ratings(self) -> Dict[str, Decimal]:
        if self._ratings is None:
            raise BucketStateError(f"Bucket {self.length} has not been rated yet")
        return dict(self._ratings)

    def score(self, word: str) -> Decimal:
        """Score an admitted word from the bucket's frozen ratings."""
        if self._ratings is None:
            raise BucketStateError(f"Bucket {self.length} must be rated before scoring")
        return score_letters(self.words[word], self._ratings)

    def records(self) -> List[WordRecord]:
        """All words of the bucket with their scores, ordered by word."""
        return [
            WordRecord(word=word, letters=self.words[word], score=self.score(word))
            for word in sorted(self.words)
        ]
