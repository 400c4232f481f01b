#!/usr/bin/env python3
"""
Record writers for scoring results.

The pipeline only depends on the write(result) contract. PostgresTableWriter
rebuilds one table per word length plus the letter_ratings table inside a
single transaction.
"""

import logging
from typing import Dict, List, Optional, Sequence

from .buckets import WordRecord
from .config import WordTablesConfig
from .pipeline import LetterRatingRecord, ScoringResult

logger = logging.getLogger(__name__)


class RecordWriter:
    """Base class for anything that persists a ScoringResult"""

    def write(self, result: ScoringResult) -> None:
        raise NotImplementedError


class MemoryRecordWriter(RecordWriter):
    """Keeps written records in memory"""

    def __init__(self):
        self.words: Dict[int, List[WordRecord]] = {}
        self.ratings: List[LetterRatingRecord] = []

    def write(self, result: ScoringResult) -> None:
        for length in result.lengths:
            self.words[length] = result.word_records(length)
        self.ratings = result.rating_records()


def words_table(length: int) -> str:
    return f"words{length}"


def create_words_table_sql(length: int) -> List[str]:
    """DDL for one words table and its letter position and score indexes"""
    table = words_table(length)
    letter_columns = ",\n".join(f"    l{i} CHAR(1) NOT NULL" for i in range(1, length + 1))
    statements = [
        f"CREATE TABLE {table} (\n"
        f"    word CHAR({length}) NOT NULL PRIMARY KEY,\n"
        f"{letter_columns},\n"
        f"    score NUMERIC(4, 3)\n"
        f")"
    ]
    for i in range(1, length + 1):
        statements.append(f"CREATE INDEX w{length}l{i} ON {table} (l{i})")
    statements.append(f"CREATE INDEX w{length}score ON {table} (score)")
    return statements


def create_ratings_table_sql(lengths: Sequence[int]) -> str:
    rating_columns = ",\n".join(f"    {words_table(n)} NUMERIC(4, 3) NOT NULL" for n in lengths)
    return (
        "CREATE TABLE letter_ratings (\n"
        "    letter CHAR(1) NOT NULL PRIMARY KEY,\n"
        f"{rating_columns}\n"
        ")"
    )


def insert_sql(table: str, column_count: int) -> str:
    placeholders = ", ".join(["%s"] * column_count)
    return f"INSERT INTO {table} VALUES ({placeholders})"


def _batched(rows: list, batch_size: int):
    for start in range(0, len(rows), batch_size):
        yield rows[start:start + batch_size]


class PostgresTableWriter(RecordWriter):
    """Drops, recreates and fills the word and rating tables"""

    def __init__(self, db_manager, batch_size: Optional[int] = None):
        self.db_manager = db_manager
        self.batch_size = batch_size or WordTablesConfig.INSERT_BATCH_SIZE

    def write(self, result: ScoringResult) -> None:
        """
        Persist a finalized result in one transaction.

        Any database error rolls back every table and propagates to the caller.
        """
        tables = ", ".join(words_table(n) for n in result.lengths)

        with self.db_manager.get_cursor() as cursor:
            cursor.execute(f"DROP TABLE IF EXISTS {tables}")
            for length in result.lengths:
                for statement in create_words_table_sql(length):
                    cursor.execute(statement)

                rows = [
                    (record.word, *record.letters, record.score)
                    for record in result.word_records(length)
                ]
                self._insert_rows(cursor, words_table(length), length + 2, rows)
                logger.info(f"Created table {words_table(length)} with {len(rows)} words")

            cursor.execute("DROP TABLE IF EXISTS letter_ratings")
            cursor.execute(create_ratings_table_sql(result.lengths))
            rows = [(record.letter, *record.ratings) for record in result.rating_records()]
            self._insert_rows(cursor, "letter_ratings", len(result.lengths) + 1, rows)
            logger.info(f"Created table letter_ratings with {len(rows)} letters")

    def _insert_rows(self, cursor, table: str, column_count: int, rows: list):
        if not rows:
            return
        query = insert_sql(table, column_count)
        for batch in _batched(rows, self.batch_size):
            cursor.executemany(query, batch)
