"""
Book Data Builder

Reads the raw page export + index/TOC export for one book and produces:
  - <out_dir>/index.json         book metadata + TOC (0-based page indices)
  - <out_dir>/pages/<n>.json     page chunks, chunk_size pages each

Stages run strictly in order (load, transform, emit) and the first failure
aborts the run.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from bookbuild.chunking import CHUNK_SIZE, count_chunks
from bookbuild.clean import clean_pages
from bookbuild.config import SAFWAT_AL_TAFASIR, BookProfile
from bookbuild.errors import InvalidInputError
from bookbuild.headings import normalize_headings
from bookbuild.loader import load_sources
from bookbuild.schemas import BookIndex, IndexSource, RawCorpus
from bookbuild.writer import PAGES_DIRNAME, prune_stale_chunks, write_chunks, write_index

logger = logging.getLogger("bookbuild.build")


def build_book_index(
    raw: RawCorpus,
    index_source: IndexSource,
    profile: BookProfile = SAFWAT_AL_TAFASIR,
    chunk_size: int = CHUNK_SIZE,
) -> BookIndex:
    """Summarize the corpus and re-index its headings."""
    total_pages = len(raw.pages)
    if total_pages == 0:
        raise InvalidInputError("Raw corpus has no pages")

    return BookIndex(
        id=profile.book_id,
        title=index_source.meta.name,
        author=profile.author,
        volumes=len(index_source.indexes.volumes),
        total_pages=total_pages,
        chunk_size=chunk_size,
        total_chunks=count_chunks(total_pages, chunk_size),
        headings=normalize_headings(index_source.indexes.headings, total_pages),
    )


def build_book(
    raw_path: Union[str, Path],
    index_path: Union[str, Path],
    out_dir: Union[str, Path],
    profile: Optional[BookProfile] = None,
    chunk_size: int = CHUNK_SIZE,
) -> Dict[str, Any]:
    """
    Run the full build for one book.

    Args:
       raw_path: Raw corpus export (``{"pages": [...]}``)
       index_path: Index/TOC export (``{"meta": ..., "indexes": ...}``)
       out_dir: Book output directory; index.json and pages/ go here
       profile: Book constants (id, author); defaults to Safwat al-Tafasir
       chunk_size: Pages per chunk file

    Returns:
       Dict with stats: total_pages, total_chunks, volumes, headings,
       index_bytes, chunk_bytes, pruned
    """
    profile = profile or SAFWAT_AL_TAFASIR
    out_dir = Path(out_dir)

    # ── Load ─────────────────────────────────────────────────────────
    raw, index_source = load_sources(raw_path, index_path)
    logger.info("Total pages: %d", len(raw.pages))

    # ── Transform ────────────────────────────────────────────────────
    book_index = build_book_index(raw, index_source, profile, chunk_size)
    pages = clean_pages(raw.pages)

    # ── Emit ─────────────────────────────────────────────────────────
    index_path_out = write_index(out_dir, book_index)
    pages_dir = out_dir / PAGES_DIRNAME
    reports = write_chunks(pages_dir, pages, chunk_size)
    pruned = prune_stale_chunks(pages_dir, book_index.total_chunks)

    logger.info("")
    logger.info("Done!")

    return {
        "total_pages": book_index.total_pages,
        "total_chunks": book_index.total_chunks,
        "volumes": book_index.volumes,
        "headings": len(book_index.headings),
        "index_bytes": index_path_out.stat().st_size,
        "chunk_bytes": sum(r.size_bytes for r in reports),
        "pruned": len(pruned),
    }
