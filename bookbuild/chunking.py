"""Fixed-size partitioning of the page sequence."""

from typing import List, Sequence, Tuple, TypeVar

from bookbuild.errors import InvalidInputError

T = TypeVar("T")

CHUNK_SIZE = 50


def _check_size(chunk_size: int) -> None:
    if chunk_size <= 0:
        raise InvalidInputError(f"Chunk size must be positive, got {chunk_size}")


def count_chunks(total: int, chunk_size: int = CHUNK_SIZE) -> int:
    """ceil(total / chunk_size) without going through floats."""
    _check_size(chunk_size)
    return (total + chunk_size - 1) // chunk_size


def chunk_bounds(total: int, chunk_size: int = CHUNK_SIZE) -> List[Tuple[int, int]]:
    """Half-open (start, end) page ranges, one per chunk."""
    return [
        (start, min(start + chunk_size, total))
        for start in range(0, count_chunks(total, chunk_size) * chunk_size, chunk_size)
    ]


def partition(items: Sequence[T], chunk_size: int = CHUNK_SIZE) -> List[List[T]]:
    """
    Split items into ordered groups of chunk_size; the last may be shorter.

    An empty sequence gives no groups.
    """
    return [list(items[start:end]) for start, end in chunk_bounds(len(items), chunk_size)]
