"""Tests for bookbuild/loader.py -- export loading and error taxonomy."""

import json
import sys
import tempfile
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from bookbuild.errors import NotFoundError, ParseError
from bookbuild.loader import (
    load_index_source,
    load_json_document,
    load_raw_corpus,
    load_sources,
)

RAW_DOC = {
    "pages": [
        {"text": "<span>بسم الله</span>", "vol": 1, "page": 1, "id": 11},
        {"text": "second", "vol": 1, "page": 2},
    ]
}

INDEX_DOC = {
    "meta": {"name": "صفوة التفاسير", "id": 8967},
    "indexes": {
        "volumes": [1, 2, 3],
        "headings": [{"title": "الفاتحة", "level": 1, "page": 2}],
    },
}


def _write_json(path: Path, obj) -> Path:
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(obj, f, ensure_ascii=False)
    return path


def test_load_json_document_parses():
    with tempfile.TemporaryDirectory() as tmp:
        p = _write_json(Path(tmp) / "doc.json", {"a": [1, 2]})
        assert load_json_document(p) == {"a": [1, 2]}


def test_missing_file_is_not_found():
    with tempfile.TemporaryDirectory() as tmp:
        missing = Path(tmp) / "nope.json"
        with pytest.raises(NotFoundError) as exc:
            load_json_document(missing)
        assert exc.value.path == missing
        assert exc.value.stage == "load"


def test_directory_is_not_found():
    with tempfile.TemporaryDirectory() as tmp:
        with pytest.raises(NotFoundError):
            load_json_document(Path(tmp))


def test_invalid_json_is_parse_error():
    with tempfile.TemporaryDirectory() as tmp:
        p = Path(tmp) / "bad.json"
        p.write_text('{"pages": [', encoding='utf-8')
        with pytest.raises(ParseError) as exc:
            load_json_document(p)
        assert exc.value.path == p
        assert "line 1" in str(exc.value)


def test_non_utf8_is_parse_error():
    with tempfile.TemporaryDirectory() as tmp:
        p = Path(tmp) / "latin.json"
        p.write_bytes(b'{"text": "\xff\xfe"}')
        with pytest.raises(ParseError):
            load_json_document(p)


def test_raw_corpus_drops_extra_fields():
    with tempfile.TemporaryDirectory() as tmp:
        raw = load_raw_corpus(_write_json(Path(tmp) / "raw.json", RAW_DOC))
        assert len(raw.pages) == 2
        assert raw.pages[0].model_dump() == {"text": "<span>بسم الله</span>", "vol": 1, "page": 1}


def test_raw_corpus_missing_pages_is_parse_error():
    with tempfile.TemporaryDirectory() as tmp:
        p = _write_json(Path(tmp) / "raw.json", {"items": []})
        with pytest.raises(ParseError) as exc:
            load_raw_corpus(p)
        assert "pages" in str(exc.value)


def test_raw_corpus_page_without_text_is_parse_error():
    with tempfile.TemporaryDirectory() as tmp:
        p = _write_json(Path(tmp) / "raw.json", {"pages": [{"vol": 1, "page": 1}]})
        with pytest.raises(ParseError):
            load_raw_corpus(p)


def test_index_source_fields():
    with tempfile.TemporaryDirectory() as tmp:
        src = load_index_source(_write_json(Path(tmp) / "index.json", INDEX_DOC))
        assert src.meta.name == "صفوة التفاسير"
        assert len(src.indexes.volumes) == 3
        assert src.indexes.headings[0].page == 2


def test_index_source_missing_headings_is_parse_error():
    doc = {"meta": {"name": "x"}, "indexes": {"volumes": []}}
    with tempfile.TemporaryDirectory() as tmp:
        p = _write_json(Path(tmp) / "index.json", doc)
        with pytest.raises(ParseError) as exc:
            load_index_source(p)
        assert "headings" in str(exc.value)


def test_load_sources_returns_both():
    with tempfile.TemporaryDirectory() as tmp:
        raw_p = _write_json(Path(tmp) / "raw.json", RAW_DOC)
        idx_p = _write_json(Path(tmp) / "index.json", INDEX_DOC)
        raw, src = load_sources(raw_p, idx_p)
        assert len(raw.pages) == 2
        assert src.meta.name == "صفوة التفاسير"


def test_load_sources_missing_index_fails():
    with tempfile.TemporaryDirectory() as tmp:
        raw_p = _write_json(Path(tmp) / "raw.json", RAW_DOC)
        with pytest.raises(NotFoundError) as exc:
            load_sources(raw_p, Path(tmp) / "missing-index.json")
        assert exc.value.path.name == "missing-index.json"


def test_raw_corpus_passes_vol_and_page_through():
    """vol/page keep whatever the export holds, including null and floats."""
    doc = {"pages": [
        {"text": "x", "vol": None, "page": 1},
        {"text": "y", "vol": "2", "page": 3.5},
    ]}
    with tempfile.TemporaryDirectory() as tmp:
        raw = load_raw_corpus(_write_json(Path(tmp) / "raw.json", doc))
        assert raw.pages[0].model_dump() == {"text": "x", "vol": None, "page": 1}
        assert raw.pages[1].model_dump() == {"text": "y", "vol": "2", "page": 3.5}


def test_raw_corpus_page_without_vol_is_parse_error():
    with tempfile.TemporaryDirectory() as tmp:
        p = _write_json(Path(tmp) / "raw.json", {"pages": [{"text": "x", "page": 1}]})
        with pytest.raises(ParseError) as exc:
            load_raw_corpus(p)
        assert "vol" in str(exc.value)
