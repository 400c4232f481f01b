#!/usr/bin/env python3
"""
Word list sources.

Every requested file is opened and checked before any line is scanned, so a
missing or empty word list aborts the run before anything is produced.
"""

import logging
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Generator, Iterable, List, TextIO, Union

from .errors import SourceError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass
class WordSource:
    """A named, line-oriented text stream of candidate words"""
    name: str
    stream: Iterable[str]


def _open_checked(path: Path) -> TextIO:
    """Open a word list and make sure its first character can be read."""
    try:
        # Undecodable bytes become U+FFFD and the line is rejected by classification
        handle = open(path, "r", encoding="utf-8", errors="replace")
    except OSError as exc:
        raise SourceError(f"Could not open file {path}: {exc}") from exc

    try:
        first = handle.read(1)
        if not first:
            raise SourceError(f"{path} is not readable or empty")
        handle.seek(0)
    except OSError as exc:
        handle.close()
        raise SourceError(f"{path} is not readable or empty: {exc}") from exc
    except SourceError:
        handle.close()
        raise
    return handle


@contextmanager
def open_word_sources(paths: Iterable[PathLike]) -> Generator[List[WordSource], None, None]:
    """
    Open all word lists up front

    Args:
        paths: Files containing one word per line

    Yields:
        List of WordSource objects in the order the paths were given

    Raises:
        SourceError: no paths were given, or one of them cannot be opened.
            Files opened before the failure are closed again.

    Example:
        with open_word_sources(["nouns.txt", "verbs.txt"]) as sources:
            pipeline.ingest_sources(sources)
    """
    paths = [Path(p) for p in paths]
    if not paths:
        raise SourceError("You must specify one or more files containing words!")

    with ExitStack() as stack:
        sources = []
        for path in paths:
            handle = stack.enter_context(_open_checked(path))
            sources.append(WordSource(name=str(path), stream=handle))
        logger.info(f"Opened {len(sources)} word list(s)")
        yield sources
