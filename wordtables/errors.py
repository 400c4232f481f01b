#!/usr/bin/env python3
"""Exceptions raised by the word tables pipeline."""


class WordTablesError(Exception):
    """Base error for the word tables system."""


class SourceError(WordTablesError):
    """Raised when a word list cannot be opened or read before scanning starts."""


class BucketStateError(WordTablesError):
    """Raised when a length bucket is used out of phase order."""


class ConfigError(WordTablesError, ValueError):
    """Raised for invalid database configuration."""
