"""
Word tables: per-length letter ratings and word scores.

This package contains the scoring pipeline and its collaborators:
- Alphabet normalization and length classification
- Length buckets with letter counts and ratings
- Word list sources and the pipeline run context
- Record writers and database configuration
"""

from .alphabet import LETTERS, WORD_LENGTHS, classify_word, normalize_word
from .buckets import LengthBucket, WordRecord
from .errors import BucketStateError, ConfigError, SourceError, WordTablesError
from .pipeline import IngestionStats, LetterRatingRecord, ScoringPipeline, ScoringResult, run_pipeline
from .persistence import MemoryRecordWriter, PostgresTableWriter, RecordWriter
from .scoring import rate_letters, round_rating, score_letters
from .sources import WordSource, open_word_sources

__all__ = [
    'LETTERS',
    'WORD_LENGTHS',
    'classify_word',
    'normalize_word',
    'LengthBucket',
    'WordRecord',
    'BucketStateError',
    'ConfigError',
    'SourceError',
    'WordTablesError',
    'IngestionStats',
    'LetterRatingRecord',
    'ScoringPipeline',
    'ScoringResult',
    'run_pipeline',
    'MemoryRecordWriter',
    'PostgresTableWriter',
    'RecordWriter',
    'rate_letters',
    'round_rating',
    'score_letters',
    'WordSource',
    'open_word_sources',
]
