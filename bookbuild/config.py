"""Configuration for the book build."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from bookbuild.chunking import CHUNK_SIZE


@dataclass(frozen=True)
class BookProfile:
    """Per-book constants that the export does not carry."""
    book_id: str
    author: str
    export_id: int
    source_slug: str

    @property
    def raw_filename(self) -> str:
        return f"book-{self.export_id}-raw.json"

    @property
    def index_filename(self) -> str:
        return f"book-{self.export_id}-index.json"


SAFWAT_AL_TAFASIR = BookProfile(
    book_id="safwat-al-tafasir",
    author="محمد علي الصابوني",
    export_id=8967,
    source_slug="ar-safwat-al-tafasir",
)


@dataclass
class Settings:
    """
    All filesystem paths and knobs the build needs.

    Defaults resolve relative to the data root (the project root unless
    BOOKBUILD_DATA_ROOT is set). Every field is overridable at construction
    for testing. chunk_size has no env override: the published index.json
    always carries the fixed chunk size.
    """
    data_root: Optional[Path] = None
    raw_path: Optional[Path] = None
    index_source_path: Optional[Path] = None
    out_dir: Optional[Path] = None
    chunk_size: int = CHUNK_SIZE
    profile: BookProfile = field(default=SAFWAT_AL_TAFASIR)

    def __post_init__(self):
        project_root = Path(__file__).resolve().parent.parent

        if self.data_root is None:
            env_root = os.environ.get("BOOKBUILD_DATA_ROOT")
            self.data_root = Path(env_root) if env_root else project_root
        self.data_root = Path(self.data_root)

        source_dir = self.data_root / "tafsir" / self.profile.source_slug / ".source"

        if self.raw_path is None:
            env_raw = os.environ.get("BOOKBUILD_RAW_PATH")
            self.raw_path = Path(env_raw) if env_raw else source_dir / self.profile.raw_filename
        self.raw_path = Path(self.raw_path)

        if self.index_source_path is None:
            env_index = os.environ.get("BOOKBUILD_INDEX_PATH")
            self.index_source_path = (
                Path(env_index) if env_index else source_dir / self.profile.index_filename
            )
        self.index_source_path = Path(self.index_source_path)

        if self.out_dir is None:
            env_out = os.environ.get("BOOKBUILD_OUT_DIR")
            self.out_dir = Path(env_out) if env_out else self.data_root / "books" / self.profile.book_id
        self.out_dir = Path(self.out_dir)
