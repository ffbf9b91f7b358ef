"""Error taxonomy for the book build. Every stage fails fast with one of these."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class BookBuildError(Exception):
    """Base error. Carries the offending path (if any) and the pipeline stage."""

    stage_default = "build"

    def __init__(
        self,
        message: str,
        path: Optional[Union[str, Path]] = None,
        stage: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.path = Path(path) if path is not None else None
        self.stage = stage or self.stage_default

    def __str__(self) -> str:
        if self.path is not None:
            return f"[{self.stage}] {self.message}: {self.path}"
        return f"[{self.stage}] {self.message}"


class NotFoundError(BookBuildError):
    """Input path is missing or not a readable file."""

    stage_default = "load"


class ParseError(BookBuildError):
    """Input is not valid JSON or lacks an expected field."""

    stage_default = "load"


class InvalidInputError(BookBuildError):
    """Degenerate data, e.g. a corpus with zero pages."""

    stage_default = "transform"


class WriteError(BookBuildError):
    """Output directory or file could not be written."""

    stage_default = "emit"
