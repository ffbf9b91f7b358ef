"""
Command-line entry point for the book build.

Usage:
   python -m bookbuild
   python -m bookbuild --data-root /srv/library --quiet

With no arguments every path comes from Settings (env overrides, then
conventional locations under the project root).
"""

import argparse
import logging
from pathlib import Path

from bookbuild.build import build_book
from bookbuild.config import Settings
from bookbuild.errors import BookBuildError

logger = logging.getLogger("bookbuild")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bookbuild",
        description="Build index.json and chunked page files from a book export.",
    )
    parser.add_argument('--data-root', default=None,
                        help="Root holding tafsir/ sources and books/ output (default: project root)")
    parser.add_argument('--raw', default=None,
                        help="Path to the raw page export (book-<id>-raw.json)")
    parser.add_argument('--index-source', default=None,
                        help="Path to the index/TOC export (book-<id>-index.json)")
    parser.add_argument('--out-dir', '-o', default=None,
                        help="Book output directory (default: <data-root>/books/<book-id>)")
    parser.add_argument('--quiet', '-q', action='store_true', default=False,
                        help="Only report warnings and errors")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.WARNING if args.quiet else logging.INFO,
        format="%(message)s",
    )

    settings = Settings(
        data_root=Path(args.data_root) if args.data_root else None,
        raw_path=Path(args.raw) if args.raw else None,
        index_source_path=Path(args.index_source) if args.index_source else None,
        out_dir=Path(args.out_dir) if args.out_dir else None,
    )

    try:
        build_book(
            raw_path=settings.raw_path,
            index_path=settings.index_source_path,
            out_dir=settings.out_dir,
            profile=settings.profile,
            chunk_size=settings.chunk_size,
        )
    except BookBuildError as e:
        logger.error("Build failed: %s", e)
        return 1
    return 0
