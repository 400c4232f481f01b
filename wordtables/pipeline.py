#!/usr/bin/env python3
"""
Scoring Pipeline
Ingests word lists into length buckets, rates letters per bucket and scores
every admitted word.

Phases are strictly ordered: all sources are scanned first, then each bucket
is rated once, then its words are scored.
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Tuple

from tqdm import tqdm

from .alphabet import LETTERS, WORD_LENGTHS, classify_word, normalize_word
from .buckets import LengthBucket, WordRecord
from .errors import BucketStateError
from .sources import WordSource

logger = logging.getLogger(__name__)


@dataclass
class IngestionStats:
    """Track line classification counts"""
    lines_read: int = 0
    admitted: int = 0
    duplicates: int = 0
    rejected: int = 0
    read_errors: int = 0

    def merge(self, other: 'IngestionStats'):
        self.lines_read += other.lines_read
        self.admitted += other.admitted
        self.duplicates += other.duplicates
        self.rejected += other.rejected
        self.read_errors += other.read_errors


@dataclass(frozen=True)
class LetterRatingRecord:
    """Ratings of one letter across all buckets, ordered by bucket length"""
    letter: str
    ratings: Tuple[Decimal, ...]


@dataclass
class ScoringResult:
    """Finalized output of a pipeline run"""
    lengths: Tuple[int, ...]
    ratings: Dict[int, Dict[str, Decimal]]
    words: Dict[int, List[WordRecord]] = field(default_factory=dict)
    stats: IngestionStats = field(default_factory=IngestionStats)

    def word_records(self, length: int) -> List[WordRecord]:
        return list(self.words.get(length, []))

    def rating_records(self) -> List[LetterRatingRecord]:
        """One record per alphabet letter, in alphabet order."""
        return [
            LetterRatingRecord(
                letter=letter,
                ratings=tuple(self.ratings[length][letter] for length in self.lengths),
            )
            for letter in LETTERS
        ]

    def summary(self) -> Dict[int, int]:
        """Word count per bucket length."""
        return {length: len(self.words.get(length, [])) for length in self.lengths}


class ScoringPipeline:
    """One run of the scoring pipeline with its own set of length buckets"""

    def __init__(self, lengths: Tuple[int, ...] = WORD_LENGTHS):
        self.lengths = tuple(lengths)
        self.buckets: Dict[int, LengthBucket] = {n: LengthBucket(n) for n in self.lengths}
        self.stats = IngestionStats()
        self._result: Optional[ScoringResult] = None

    @property
    def is_finalized(self) -> bool:
        return self._result is not None

    def _classify_line(self, line: str, stats: IngestionStats):
        stats.lines_read += 1
        word = normalize_word(line)
        length = classify_word(word, self.lengths)
        if length is None:
            stats.rejected += 1
        elif self.buckets[length].add(word):
            stats.admitted += 1
        else:
            stats.duplicates += 1

    def ingest_line(self, line: str) -> None:
        """Normalize, classify and bucket a single raw line."""
        self._check_open()
        self._classify_line(line, self.stats)

    def ingest_lines(self, lines: Iterable[str]) -> IngestionStats:
        """Ingest raw lines; returns the counts for this batch only."""
        self._check_open()
        batch = IngestionStats()
        for line in lines:
            self._classify_line(line, batch)
        self.stats.merge(batch)
        return batch

    def ingest_source(self, source: WordSource) -> IngestionStats:
        """
        Scan one source into the shared buckets.

        A read error partway through the source is logged and ends the scan
        of that source only; lines already read stay ingested.
        """
        self._check_open()
        batch = IngestionStats()
        try:
            for line in source.stream:
                self._classify_line(line, batch)
        except OSError as e:
            batch.read_errors += 1
            logger.warning(f"Error reading {source.name} after {batch.lines_read} lines: {e}")

        self.stats.merge(batch)
        logger.info(f"Scanned {source.name}: {batch.lines_read} lines, "
                    f"{batch.admitted} admitted, {batch.duplicates} duplicates, "
                    f"{batch.rejected} rejected")
        return batch

    def ingest_sources(self, sources: Iterable[WordSource], show_progress: bool = False) -> IngestionStats:
        """Scan sources one after another into the same buckets."""
        sources = list(sources)
        for source in tqdm(sources, desc="Scanning word lists", disable=not show_progress):
            self.ingest_source(source)
        return self.stats

    def finalize(self) -> ScoringResult:
        """
        Rate every bucket and score its words.

        Runs once; later calls return the same result. After finalizing, the
        pipeline no longer accepts input.
        """
        if self._result is not None:
            return self._result

        ratings = {}
        words = {}
        for length, bucket in self.buckets.items():
            ratings[length] = bucket.rate()
            words[length] = bucket.records()

        self._result = ScoringResult(
            lengths=self.lengths,
            ratings=ratings,
            words=words,
            stats=self.stats,
        )
        logger.info(f"Scored {sum(len(w) for w in words.values())} words "
                    f"from {self.stats.lines_read} lines")
        return self._result

    def _check_open(self):
        if self._result is not None:
            raise BucketStateError("Pipeline is finalized, no more input is accepted")


def run_pipeline(sources: Iterable[WordSource], lengths: Tuple[int, ...] = WORD_LENGTHS,
                 show_progress: bool = False) -> ScoringResult:
    """Convenience wrapper: ingest all sources, then finalize."""
    pipeline = ScoringPipeline(lengths)
    pipeline.ingest_sources(sources, show_progress=show_progress)
    return pipeline.finalize()
