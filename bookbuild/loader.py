"""
Load the two export documents: the raw page corpus and the index/TOC source.

Each load is all-or-nothing for its path. Missing files raise NotFoundError;
bad JSON or a document missing an expected field raises ParseError.
"""

import json
import logging
from pathlib import Path
from typing import Any, Tuple, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from bookbuild.errors import NotFoundError, ParseError
from bookbuild.schemas import IndexSource, RawCorpus

logger = logging.getLogger("bookbuild.loader")

M = TypeVar("M", bound=BaseModel)


def load_json_document(path: Union[str, Path]) -> Any:
    """Read a UTF-8 file and parse it as JSON."""
    path = Path(path)
    if not path.is_file():
        raise NotFoundError("Input file not found", path=path)

    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ParseError(
            f"Invalid JSON at line {e.lineno} column {e.colno} ({e.msg})", path=path
        ) from e
    except UnicodeDecodeError as e:
        raise ParseError(f"Input is not UTF-8 ({e.reason})", path=path) from e
    except OSError as e:
        raise NotFoundError(f"Input file not readable ({e.strerror})", path=path) from e


def _first_error(err: ValidationError) -> str:
    first = err.errors()[0]
    loc = ".".join(str(p) for p in first.get("loc", ())) or "<root>"
    return f"{loc}: {first.get('msg', 'invalid')}"


def _load_model(path: Union[str, Path], model: Type[M]) -> M:
    doc = load_json_document(path)
    try:
        return model.model_validate(doc)
    except ValidationError as e:
        raise ParseError(
            f"Unexpected {model.__name__} document ({_first_error(e)})", path=path
        ) from e


def load_raw_corpus(path: Union[str, Path]) -> RawCorpus:
    """Raw corpus: ``{"pages": [{"text", "vol", "page"}, ...]}``."""
    return _load_model(path, RawCorpus)


def load_index_source(path: Union[str, Path]) -> IndexSource:
    """Index source: ``{"meta": {"name"}, "indexes": {"volumes", "headings"}}``."""
    return _load_model(path, IndexSource)


def load_sources(
    raw_path: Union[str, Path],
    index_path: Union[str, Path],
) -> Tuple[RawCorpus, IndexSource]:
    """Load both documents, raw corpus first."""
    logger.info("Reading raw book data…")
    raw = load_raw_corpus(raw_path)
    index_source = load_index_source(index_path)
    return raw, index_source
