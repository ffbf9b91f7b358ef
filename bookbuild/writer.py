"""
Emit index.json and the numbered page chunk files.

Each file is written to a .tmp sibling and renamed into place, so a crash
never leaves a half-written JSON file. The run as a whole is not
transactional: a failure between chunks leaves the chunks already written.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Sequence, Union

from bookbuild.chunking import CHUNK_SIZE, chunk_bounds
from bookbuild.errors import WriteError
from bookbuild.schemas import BookIndex, Page

logger = logging.getLogger("bookbuild.writer")

INDEX_FILENAME = "index.json"
PAGES_DIRNAME = "pages"

_CHUNK_FILE_RE = re.compile(r'^(0|[1-9]\d*)\.json$')


@dataclass
class ChunkReport:
    """What was written for one chunk."""
    index: int
    start: int
    end: int  # exclusive
    path: Path
    size_bytes: int


def ensure_dir(path: Union[str, Path]) -> Path:
    """Create path (and parents) if missing. No error if it already exists."""
    path = Path(path)
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise WriteError(f"Cannot create directory ({e.strerror or e})", path=path) from e
    return path


def dump_json(obj: Any) -> str:
    """Compact encoding, non-ASCII kept as-is."""
    return json.dumps(obj, ensure_ascii=False, separators=(',', ':'))


def _atomic_write(path: Path, content: str) -> None:
    """Write to .tmp then rename for atomicity."""
    tmp = path.with_suffix(path.suffix + ".tmp")
    with open(tmp, "w", encoding="utf-8") as f:
        f.write(content)
    tmp.replace(path)


def write_json(path: Union[str, Path], obj: Any) -> int:
    """Serialize obj to path, overwriting. Returns the size on disk in bytes."""
    path = Path(path)
    ensure_dir(path.parent)
    content = dump_json(obj)
    try:
        _atomic_write(path, content)
    except OSError as e:
        raise WriteError(f"Cannot write file ({e.strerror or e})", path=path) from e
    return len(content.encode("utf-8"))


def _kb(size_bytes: int) -> str:
    return f"{size_bytes / 1024:.1f} KB"


def write_index(out_dir: Union[str, Path], book_index: BookIndex) -> Path:
    """Write index.json with the client's camelCase keys."""
    path = Path(out_dir) / INDEX_FILENAME
    size = write_json(path, book_index.model_dump(mode="json", by_alias=True))
    logger.info("Wrote %s (%s)", path, _kb(size))
    return path


def write_chunks(
    pages_dir: Union[str, Path],
    pages: Sequence[Page],
    chunk_size: int = CHUNK_SIZE,
) -> List[ChunkReport]:
    """Write pages as <i>.json files of chunk_size pages each (last may be short)."""
    pages_dir = ensure_dir(pages_dir)
    reports: List[ChunkReport] = []

    for i, (start, end) in enumerate(chunk_bounds(len(pages), chunk_size)):
        chunk_path = pages_dir / f"{i}.json"
        payload = [p.model_dump(mode="json") for p in pages[start:end]]
        size = write_json(chunk_path, payload)
        logger.info("  Chunk %d: pages %d–%d (%s)", i, start, end - 1, _kb(size))
        reports.append(ChunkReport(i, start, end, chunk_path, size))

    return reports


def prune_stale_chunks(pages_dir: Union[str, Path], total_chunks: int) -> List[Path]:
    """
    Delete numbered chunk files at or beyond total_chunks.

    A previous run over a longer corpus can leave e.g. 40.json behind when the
    book now has 38 chunks. Files that are not plain <n>.json are left alone.
    """
    pages_dir = Path(pages_dir)
    if not pages_dir.is_dir():
        return []

    removed: List[Path] = []
    for entry in sorted(pages_dir.iterdir()):
        m = _CHUNK_FILE_RE.match(entry.name)
        if not m or not entry.is_file() or int(m.group(1)) < total_chunks:
            continue
        try:
            entry.unlink()
        except OSError as e:
            raise WriteError(f"Cannot remove stale chunk ({e.strerror or e})", path=entry) from e
        logger.info("  Removed stale %s", entry.name)
        removed.append(entry)
    return removed
