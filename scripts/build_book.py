#!/usr/bin/env python3
"""
Build Safwat al-Tafasir book data (index.json + pages/<n>.json).

Usage:
   python scripts/build_book.py

Paths follow Settings; see python -m bookbuild --help for overrides.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from bookbuild.cli import main


if __name__ == '__main__':
   sys.exit(main())
