#!/usr/bin/env python3
"""
Build the word tables from word lists.

Usage:
    python scripts/init_word_tables.py words1.txt words2.txt
    python scripts/init_word_tables.py words.txt --dry-run
"""

import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from wordtables.cli import main

if __name__ == "__main__":
    sys.exit(main())
