#!/usr/bin/env python3
"""
Centralized Configuration Management for Word Tables
Pipeline settings and logging; database settings live in secure_config
"""

import logging
from typing import Optional

from .alphabet import WORD_LENGTHS


class WordTablesConfig:
    """Centralized configuration for the word tables system"""

    # Pipeline Settings
    WORD_LENGTHS = WORD_LENGTHS
    INSERT_BATCH_SIZE = 1000

    # Logging Configuration
    LOGGING = {
        'level': 'INFO',
        'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    }


def setup_logging(level: Optional[str] = None):
    """Configure root logging from WordTablesConfig.LOGGING"""
    logging.basicConfig(
        level=getattr(logging, (level or WordTablesConfig.LOGGING['level']).upper(), logging.INFO),
        format=WordTablesConfig.LOGGING['format'],
    )
