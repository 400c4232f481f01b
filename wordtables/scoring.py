#!/usr/bin/env python3
"""
Letter rating and word scoring.

A letter's rating is its share of all letter slots in a length bucket,
rounded half-to-even at three decimals. A word's score is the sum of the
ratings of its distinct letters.
"""

from decimal import Decimal, ROUND_HALF_EVEN
from typing import Dict, Iterable, Mapping

RATING_QUANTUM = Decimal("0.001")
ZERO_RATING = Decimal("0.000")


def round_rating(count: int, total_slots: int) -> Decimal:
    """
    Rate a letter count against the total number of letter slots

    Args:
        count: Occurrences of the letter across the bucket
        total_slots: Word count multiplied by word length

    Returns:
        Ratio quantized to 0.001 with banker's rounding, or 0.000 when the
        bucket holds no slots at all

    Example:
        >>> round_rating(247, 2000)   # 0.1235
        Decimal('0.124')
        >>> round_rating(249, 2000)   # 0.1245
        Decimal('0.124')
    """
    if total_slots <= 0:
        return ZERO_RATING
    ratio = Decimal(count) / Decimal(total_slots)
    return ratio.quantize(RATING_QUANTUM, rounding=ROUND_HALF_EVEN)


def rate_letters(letter_counts: Mapping[str, int], word_count: int, length: int) -> Dict[str, Decimal]:
    """Compute the rating of every letter in a bucket's count table."""
    total_slots = word_count * length
    return {
        letter: round_rating(count, total_slots)
        for letter, count in letter_counts.items()
    }


def score_letters(letters: Iterable[str], ratings: Mapping[str, Decimal]) -> Decimal:
    """Sum the ratings of the distinct letters in a word."""
    score = ZERO_RATING
    for letter in set(letters):
        score += ratings.get(letter, ZERO_RATING)
    return score
