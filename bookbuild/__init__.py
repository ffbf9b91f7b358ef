"""Build chunked page files and a TOC index from a book export."""

from bookbuild.build import build_book, build_book_index
from bookbuild.errors import (
    BookBuildError,
    InvalidInputError,
    NotFoundError,
    ParseError,
    WriteError,
)

__all__ = [
    "build_book",
    "build_book_index",
    "BookBuildError",
    "InvalidInputError",
    "NotFoundError",
    "ParseError",
    "WriteError",
]
