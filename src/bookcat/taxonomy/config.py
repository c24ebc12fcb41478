"""Runtime configuration for the category classifier and its CLIs."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from typing import Mapping

from bookcat.taxonomy.recommendations import MAX_RECOMMENDATION_LIMIT


DEFAULT_FALLBACK_THRESHOLD = 0.5
DEFAULT_DOCUMENT_WEIGHT = 2
DEFAULT_RECOMMENDATION_LIMIT = MAX_RECOMMENDATION_LIMIT
DEFAULT_PDF_MAX_PAGES = 5
DEFAULT_LOG_LEVEL = "INFO"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _parse_int(*, name: str, raw_value: str, minimum: int, maximum: int | None = None) -> int:
    try:
        value = int(raw_value)
    except ValueError:
        raise ValueError(f"{name} must be an integer") from None
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}")
    if maximum is not None and value > maximum:
        raise ValueError(f"{name} must be <= {maximum}")
    return value


def _parse_ratio(*, name: str, raw_value: str) -> float:
    try:
        value = float(raw_value)
    except ValueError:
        raise ValueError(f"{name} must be a number") from None
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be between 0.0 and 1.0")
    return value


@dataclass(frozen=True, slots=True)
class ClassifierSettings:
    """Validated classifier tuning knobs."""

    fallback_threshold: float = DEFAULT_FALLBACK_THRESHOLD
    document_weight: int = DEFAULT_DOCUMENT_WEIGHT
    recommendation_limit: int = DEFAULT_RECOMMENDATION_LIMIT
    pdf_max_pages: int = DEFAULT_PDF_MAX_PAGES
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ClassifierSettings":
        source: Mapping[str, str] = os.environ if environ is None else environ

        threshold_raw = source.get("BOOKCAT_FALLBACK_THRESHOLD", str(DEFAULT_FALLBACK_THRESHOLD)).strip()
        weight_raw = source.get("BOOKCAT_DOCUMENT_WEIGHT", str(DEFAULT_DOCUMENT_WEIGHT)).strip()
        limit_raw = source.get("BOOKCAT_RECOMMENDATION_LIMIT", str(DEFAULT_RECOMMENDATION_LIMIT)).strip()
        pages_raw = source.get("BOOKCAT_PDF_MAX_PAGES", str(DEFAULT_PDF_MAX_PAGES)).strip()
        log_level = source.get("BOOKCAT_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()

        if not threshold_raw:
            raise ValueError("BOOKCAT_FALLBACK_THRESHOLD cannot be empty")
        if not weight_raw:
            raise ValueError("BOOKCAT_DOCUMENT_WEIGHT cannot be empty")
        if not limit_raw:
            raise ValueError("BOOKCAT_RECOMMENDATION_LIMIT cannot be empty")
        if not pages_raw:
            raise ValueError("BOOKCAT_PDF_MAX_PAGES cannot be empty")
        if log_level not in _LOG_LEVELS:
            raise ValueError(f"BOOKCAT_LOG_LEVEL must be one of: {', '.join(_LOG_LEVELS)}")

        return cls(
            fallback_threshold=_parse_ratio(name="BOOKCAT_FALLBACK_THRESHOLD", raw_value=threshold_raw),
            document_weight=_parse_int(name="BOOKCAT_DOCUMENT_WEIGHT", raw_value=weight_raw, minimum=0),
            recommendation_limit=_parse_int(
                name="BOOKCAT_RECOMMENDATION_LIMIT",
                raw_value=limit_raw,
                minimum=1,
                maximum=MAX_RECOMMENDATION_LIMIT,
            ),
            pdf_max_pages=_parse_int(name="BOOKCAT_PDF_MAX_PAGES", raw_value=pages_raw, minimum=1),
            log_level=log_level,
        )
