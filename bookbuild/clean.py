"""
Inline markup stripping for exported page text.

The export wraps some runs of text in <span ...> tags (verse highlighting,
footnote markers). Opening and closing tags are removed by two independent
substitutions; the wrapped text stays in place. Unbalanced or nested spans
are not repaired, each marker is simply dropped.
"""

import re
from typing import Iterable, List

from bookbuild.schemas import Page

_SPAN_OPEN_RE = re.compile(r'<span[^>]*>')
_SPAN_CLOSE_RE = re.compile(r'</span>')


def strip_spans(text: str) -> str:
    """Remove <span> open/close markers, keep everything else verbatim."""
    return _SPAN_CLOSE_RE.sub('', _SPAN_OPEN_RE.sub('', text))


def clean_pages(pages: Iterable[Page]) -> List[Page]:
    """Return a new cleaned Page for each input page, same order."""
    return [
        Page(text=strip_spans(p.text), vol=p.vol, page=p.page)
        for p in pages
    ]
