"""Convert exported TOC headings to 0-based page indices."""

from typing import Iterable, List

from bookbuild.errors import InvalidInputError
from bookbuild.schemas import Heading, RawHeading


def to_page_index(source_page: int, total_pages: int) -> int:
    """
    Map a 1-based export page to a 0-based index, clamped to the page range.

    Values below 1 land on 0; values past the end land on the last page.
    """
    if total_pages <= 0:
        raise InvalidInputError(
            f"Cannot place headings in a book with {total_pages} pages"
        )
    return max(0, min(total_pages - 1, source_page - 1))


def normalize_headings(
    raw_headings: Iterable[RawHeading],
    total_pages: int,
) -> List[Heading]:
    """Re-index every heading, keeping source order (no sort, no dedupe)."""
    return [
        Heading(
            title=h.title,
            level=h.level,
            page=to_page_index(h.page, total_pages),
        )
        for h in raw_headings
    ]
