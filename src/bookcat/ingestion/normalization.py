"""Text cleanup helpers for PDF-derived book metadata."""

from __future__ import annotations

import re

_WHITESPACE_RE = re.compile(r"\s+")
_TITLE_NOISE_RE = re.compile(r"[^\w\s\-.,:()]")
_AUTHOR_NOISE_RE = re.compile(r"[^\w\s\-.,]")
_AUTHOR_PREFIX_RE = re.compile(r"^(?:written by\s+|by\s+|author:\s*)", re.IGNORECASE)


def normalize_whitespace(text: str) -> str:
    """Collapse repeated whitespace and trim boundaries."""

    return _WHITESPACE_RE.sub(" ", text).strip()


def clean_title(title: str) -> str:
    """Drop decorative characters from a title, keeping common punctuation."""

    return normalize_whitespace(_TITLE_NOISE_RE.sub("", title))


def clean_author(author: str) -> str:
    """Strip "By"/"Author:" prefixes and decorative characters."""

    stripped = _AUTHOR_PREFIX_RE.sub("", author.strip())
    return normalize_whitespace(_AUTHOR_NOISE_RE.sub("", stripped))
