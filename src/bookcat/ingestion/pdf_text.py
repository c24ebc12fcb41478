"""PDF text extraction hook feeding document text into the classifier."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import pymupdf

from bookcat.ingestion.normalization import normalize_whitespace

logger = logging.getLogger(__name__)

DEFAULT_MAX_PAGES = 5


@dataclass(slots=True)
class PdfExtractionError(Exception):
    """Raised when a PDF cannot be opened or read."""

    path: Path
    message: str

    def __str__(self) -> str:
        return f"{self.message} (path={self.path})"


@dataclass(frozen=True, slots=True)
class PdfText:
    """Text from the leading pages of a PDF plus its document info."""

    source_path: str
    text: str
    page_count: int
    pages_read: int
    info: dict[str, str] = field(default_factory=dict)


def _clean_info(raw: dict | None) -> dict[str, str]:
    info: dict[str, str] = {}
    for key, value in (raw or {}).items():
        if isinstance(value, str):
            cleaned = normalize_whitespace(value)
            if cleaned:
                info[key] = cleaned
    return info


def extract_pdf_text(path: str | Path, *, max_pages: int = DEFAULT_MAX_PAGES) -> PdfText:
    """Read up to *max_pages* pages of text from the PDF at *path*.

    Page texts keep their line breaks so title and author heuristics can work
    line by line.
    """

    if max_pages < 1:
        raise ValueError("max_pages must be >= 1")

    source = Path(path)
    if not source.is_file():
        raise PdfExtractionError(source, "PDF file not found")

    try:
        with pymupdf.open(source) as doc:
            info = _clean_info(doc.metadata)
            page_count = doc.page_count
            pages: list[str] = []
            for page_index, page in enumerate(doc):
                if page_index >= max_pages:
                    break
                pages.append(page.get_text("text"))
    except (RuntimeError, ValueError) as exc:
        raise PdfExtractionError(source, f"Failed to extract text from PDF: {exc}") from exc

    logger.debug("Read %d of %d pages from %s", len(pages), page_count, source)
    return PdfText(
        source_path=str(source),
        text="\n".join(pages),
        page_count=page_count,
        pages_read=len(pages),
        info=info,
    )
