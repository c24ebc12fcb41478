"""Heuristic title, author and summary extraction from PDF text."""

from __future__ import annotations

import re
from dataclasses import dataclass

from bookcat.ingestion.normalization import clean_author, clean_title
from bookcat.ingestion.pdf_text import PdfText

UNKNOWN_TITLE = "Unknown Title"
UNKNOWN_AUTHOR = "Unknown Author"
NO_SUMMARY = "No summary available"
GENERIC_SUMMARY = "This book explores various topics and provides valuable insights for readers."

TITLE_SCAN_LINES = 10
AUTHOR_SCAN_LINES = 40
SUMMARY_SENTENCES = 3
SUMMARY_MAX_CHARS = 500

_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")

_NON_TITLE_PATTERNS = (
    re.compile(r"^\d+$"),
    re.compile(r"^(?:chapter|part|section)\s*\d+", re.IGNORECASE),
    re.compile(r"^(?:table of contents|contents|index)", re.IGNORECASE),
    re.compile(r"^(?:copyright|all rights reserved)", re.IGNORECASE),
)

_AUTHOR_PATTERNS = (
    re.compile(r"^by\s+.+", re.IGNORECASE),
    re.compile(r"^author:\s*.+", re.IGNORECASE),
    re.compile(r"^written by\s+.+", re.IGNORECASE),
    re.compile(r"^[A-Z][a-z]+\s+[A-Z][a-z]+$"),
    re.compile(r"^[A-Z][a-z]+\s+[A-Z]\.\s*[A-Z][a-z]+$"),
    re.compile(r"^[A-Z][a-z]+\s+[A-Z][a-z]+\s+[A-Z][a-z]+$"),
)
_AUTHOR_BLACKLIST_RE = re.compile(
    r"(?:contents|chapter|section|copyright|summary|introduction|acknowledg|table of|index)",
    re.IGNORECASE,
)

_HIGH_VALUE_WORDS = (
    "introduction", "overview", "summary", "conclusion", "main", "primary",
    "important", "key", "essential", "fundamental", "core", "central",
    "explores", "examines", "discusses", "presents", "introduces",
)
_MEDIUM_VALUE_WORDS = (
    "book", "chapter", "section", "topic", "subject", "theme",
    "learn", "understand", "discover", "reveals", "shows",
)


@dataclass(frozen=True, slots=True)
class BookMetadata:
    title: str
    author: str
    summary: str
    pages: int


def _is_non_title_line(line: str) -> bool:
    return any(pattern.search(line) for pattern in _NON_TITLE_PATTERNS)


def _is_author_line(line: str) -> bool:
    if not 5 < len(line) < 100:
        return False
    if _AUTHOR_BLACKLIST_RE.search(line):
        return False
    return any(pattern.match(line) for pattern in _AUTHOR_PATTERNS)


def extract_title(text: str, info: dict[str, str]) -> str | None:
    if info.get("title"):
        return clean_title(info["title"]) or None

    for raw_line in text.splitlines()[:TITLE_SCAN_LINES]:
        line = raw_line.strip()
        if 3 < len(line) < 200 and not _is_non_title_line(line):
            return clean_title(line) or None
    return None


def extract_author(text: str, info: dict[str, str]) -> str | None:
    if info.get("author"):
        return clean_author(info["author"]) or None

    for raw_line in text.splitlines()[:AUTHOR_SCAN_LINES]:
        line = raw_line.strip()
        if _is_author_line(line):
            return clean_author(line) or None
    return None


def score_sentence(sentence: str) -> int:
    """Rank a sentence for summaries by signal words and length."""

    lowered = sentence.lower()
    score = sum(3 for word in _HIGH_VALUE_WORDS if word in lowered)
    score += sum(1 for word in _MEDIUM_VALUE_WORDS if word in lowered)
    if 50 < len(sentence) < 200:
        score += 2
    return score


def key_sentences(text: str, *, limit: int = SUMMARY_SENTENCES) -> list[str]:
    candidates = [part for part in _SENTENCE_SPLIT_RE.split(text) if len(part.strip()) > 20]
    # sorted() is stable, so equal scores keep document order.
    ranked = sorted(candidates, key=score_sentence, reverse=True)
    return [" ".join(sentence.split()) for sentence in ranked[:limit] if len(sentence.strip()) > 30]


def generate_summary(text: str) -> str:
    sentences = key_sentences(text)
    if not sentences:
        return GENERIC_SUMMARY

    summary = " ".join(sentences)
    if len(summary) > SUMMARY_MAX_CHARS:
        summary = summary[:SUMMARY_MAX_CHARS] + "..."
    return summary


def extract_book_metadata(pdf: PdfText) -> BookMetadata:
    """Best-effort book metadata from a PDF's info dictionary and leading text."""

    text = pdf.text or ""
    summary = generate_summary(text) if text.strip() else NO_SUMMARY
    return BookMetadata(
        title=extract_title(text, pdf.info) or UNKNOWN_TITLE,
        author=extract_author(text, pdf.info) or UNKNOWN_AUTHOR,
        summary=summary,
        pages=pdf.page_count,
    )
